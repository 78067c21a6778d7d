"""Tests for header parsing and header-map construction."""

from __future__ import annotations

import h11
import pytest

from httpcli.exceptions import ArgumentError
from httpcli.exit_codes import EXIT_INVALID_USAGE
from httpcli.headers import (
    build_header_map,
    is_valid_name,
    is_valid_value,
    parse_header,
    parse_headers,
)
from httpcli.models import HeaderEntry


# ---------------------------------------------------------------------------
# parse_header
# ---------------------------------------------------------------------------


class TestParseHeader:
    def test_simple_pair(self) -> None:
        assert parse_header("User-Agent=MyClient") == HeaderEntry(
            name="User-Agent", value="MyClient"
        )

    def test_splits_on_first_equals_only(self) -> None:
        entry = parse_header("a=b=c")
        assert entry.name == "a"
        assert entry.value == "b=c"

    def test_base64_padding_survives(self) -> None:
        entry = parse_header("Authorization=Basic dXNlcjpwYXNz==")
        assert entry.value == "Basic dXNlcjpwYXNz=="

    def test_empty_value_is_allowed(self) -> None:
        assert parse_header("X-Empty=") == HeaderEntry(name="X-Empty", value="")

    def test_empty_name_parses(self) -> None:
        # Rejected later, when the header map is built.
        assert parse_header("=value").name == ""

    @pytest.mark.parametrize("token", ["no-equals", "", "Content-Type: text/plain"])
    def test_missing_equals_raises(self, token: str) -> None:
        with pytest.raises(ArgumentError, match="key=value"):
            parse_header(token)

    def test_argument_error_exit_code(self) -> None:
        with pytest.raises(ArgumentError) as exc_info:
            parse_header("broken")
        assert exc_info.value.exit_code == EXIT_INVALID_USAGE


class TestParseHeaders:
    def test_keeps_order_and_duplicates(self) -> None:
        entries = parse_headers(["X-A=1", "X-B=2", "X-A=3"])
        assert [(e.name, e.value) for e in entries] == [
            ("X-A", "1"),
            ("X-B", "2"),
            ("X-A", "3"),
        ]

    def test_empty_input(self) -> None:
        assert parse_headers([]) == []

    def test_one_bad_token_fails_all(self) -> None:
        with pytest.raises(ArgumentError):
            parse_headers(["X-A=1", "bad"])


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------


class TestValidation:
    @pytest.mark.parametrize("name", ["Accept", "X-Custom_1", "a.b", "x~y"])
    def test_valid_names(self, name: str) -> None:
        assert is_valid_name(name)

    @pytest.mark.parametrize("name", ["", "Bad Name", "x:y", "naïve", "a\nb"])
    def test_invalid_names(self, name: str) -> None:
        assert not is_valid_name(name)

    @pytest.mark.parametrize("value", ["", "text/plain", "a b\tc", "~!@#", "café"])
    def test_valid_values(self, value: str) -> None:
        assert is_valid_value(value)

    @pytest.mark.parametrize(
        "value", ["line\nbreak", "cr\r", "\x00", " lead", "trail ", "\tx", "x\t"]
    )
    def test_invalid_values(self, value: str) -> None:
        assert not is_valid_value(value)


# ---------------------------------------------------------------------------
# build_header_map
# ---------------------------------------------------------------------------


class TestBuildHeaderMap:
    def test_builds_map(self) -> None:
        headers = build_header_map(parse_headers(["Accept=text/html", "X-Id=7"]))
        assert headers["accept"] == "text/html"
        assert headers["x-id"] == "7"

    def test_last_duplicate_wins(self) -> None:
        headers = build_header_map(parse_headers(["X-A=1", "X-A=2"]))
        assert headers.get_list("X-A") == ["2"]

    def test_last_duplicate_wins_case_insensitively(self) -> None:
        headers = build_header_map(parse_headers(["X-Token=old", "x-token=new"]))
        assert headers.get_list("X-Token") == ["new"]

    def test_invalid_entries_are_dropped(self) -> None:
        entries = parse_headers(["Bad Name=v", "X-Ok=1", "X-Nl=a\nb", "=empty"])
        headers = build_header_map(entries)
        assert list(headers.keys()) == ["x-ok"]

    def test_dropped_header_is_reported_in_verbose_mode(self, verbose_output, capsys) -> None:
        build_header_map([HeaderEntry(name="Bad Name", value="v")])
        captured = capsys.readouterr()
        assert "Dropping header" in captured.err
        assert captured.out == ""

    def test_drop_is_silent_by_default(self, plain_output, capsys) -> None:
        build_header_map([HeaderEntry(name="Bad Name", value="v")])
        assert capsys.readouterr().err == ""

    def test_surrounding_whitespace_is_trimmed(self) -> None:
        entries = parse_headers(["X-Trail=abc ", "X-Lead= abc", "Authorization=\tBearer x\t"])
        headers = build_header_map(entries)
        assert headers["x-trail"] == "abc"
        assert headers["x-lead"] == "abc"
        assert headers["authorization"] == "Bearer x"

    def test_whitespace_only_value_becomes_empty(self) -> None:
        headers = build_header_map(parse_headers(["X-Blank=   "]))
        assert headers["x-blank"] == ""

    def test_non_ascii_value_sent_as_utf8(self) -> None:
        headers = build_header_map(parse_headers(["X-Name=café"]))
        assert headers.raw == [(b"X-Name", "café".encode("utf-8"))]

    @pytest.mark.parametrize(
        "value",
        ["abc ", " abc", "\tabc\t", "a  b", "café", "", "line\nbreak", "a\x7fb", "\x00"],
    )
    def test_kept_headers_pass_wire_validation(self, value: str) -> None:
        headers = build_header_map([HeaderEntry(name="X-Test", value=value)])
        # h11 raises LocalProtocolError for any header it would refuse to send.
        h11.Request(
            method="GET",
            target="/",
            headers=[(b"Host", b"example.com"), *headers.raw],
        )
