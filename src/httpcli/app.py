"""Typer application and CLI entry point for httpcli.

Registers the four request subcommands (``get``, ``post``, ``put``,
``delete``) on a single Typer app. The root callback configures output from
the global flags and opens the process-wide
:class:`~httpcli.transport.Transport`, which Click closes again once the
subcommand has finished.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``.

See Also:
    :mod:`httpcli.dispatcher`: The per-subcommand request pipeline.
    :mod:`httpcli.output`: Output manager initialised in :func:`main_callback`.
"""

from __future__ import annotations

import signal
import sys
from pathlib import Path
from typing import Any, Optional

import typer

from httpcli import __version__
from httpcli.exceptions import ArgumentError, HttpCliError
from httpcli.exit_codes import EXIT_GENERIC_FAILURE, EXIT_INTERRUPTED
from httpcli.headers import HEADER_FORMAT_MESSAGE, parse_headers
from httpcli.models import HTTPMethod


app = typer.Typer(
    name="httpcli",
    help="Send GET, POST, PUT and DELETE requests with custom headers and file uploads.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"httpcli {__version__}")
        raise typer.Exit()


def _headers_callback(value: Optional[list[str]]) -> list[str]:
    """Reject malformed ``-H`` tokens while arguments are being parsed."""
    tokens = value or []
    try:
        parse_headers(tokens)
    except ArgumentError as exc:
        raise typer.BadParameter(str(exc)) from exc
    return tokens


# ------------------------------------------------------------------ #
# Shared options
# ------------------------------------------------------------------ #

_URL_ARGUMENT = typer.Argument(
    ..., metavar="URL", help="Target URL; http:// is assumed when no scheme is given."
)

_HEADER_OPTION = typer.Option(
    None,
    "-H",
    "--header",
    help=f"Request header, repeatable. {HEADER_FORMAT_MESSAGE}.",
    callback=_headers_callback,
)

_DATA_OPTION = typer.Option(
    None, "-d", "--data", help="Raw request body, sent as application/json."
)

_FILE_OPTION = typer.Option(
    None,
    "-f",
    "--file",
    help="File to upload as multipart/form-data (field 'file'). Wins over --data.",
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Installs the global :class:`~httpcli.output.OutputManager` and opens
    the :class:`~httpcli.transport.Transport` for this process. A transport
    already present in ``ctx.obj`` (as passed by tests) is used instead of
    a new one.

    Args:
        ctx: Typer invocation context.
        version: If ``True``, print the version string and exit.
        no_color: Disable all colour and Rich markup.
        quiet: Suppress non-essential diagnostic output.
        verbose: Enable debug-level diagnostic output.
    """
    from httpcli.output import OutputManager, error, set_output
    from httpcli.transport import Transport

    set_output(OutputManager(no_color=no_color, quiet=quiet, verbose=verbose))

    ctx.ensure_object(dict)
    transport = ctx.obj.get("transport") or Transport()
    try:
        ctx.obj["transport"] = ctx.with_resource(transport)
    except HttpCliError as exc:
        error(str(exc))
        raise typer.Exit(exc.exit_code)


def _run(
    ctx: typer.Context,
    method: HTTPMethod,
    url: str,
    headers: Optional[list[str]],
    data: Optional[str] = None,
    file: Optional[Path] = None,
) -> None:
    """Dispatch one request, turning fatal httpcli errors into exit codes."""
    from httpcli.dispatcher import dispatch
    from httpcli.output import error

    try:
        dispatch(method, url, ctx.obj["transport"], headers or [], data=data, file=file)
    except HttpCliError as exc:
        error(str(exc))
        raise typer.Exit(exc.exit_code)


# ------------------------------------------------------------------ #
# Subcommands
# ------------------------------------------------------------------ #


@app.command(
    "get",
    epilog="Examples: httpcli get http://example.com  |  "
    'httpcli get example.com -H "User-Agent=MyClient"',
)
def get_command(
    ctx: typer.Context,
    url: str = _URL_ARGUMENT,
    headers: Optional[list[str]] = _HEADER_OPTION,
) -> None:
    """Send a GET request to URL."""
    _run(ctx, HTTPMethod.GET, url, headers)


@app.command(
    "post",
    epilog="Examples: httpcli post http://example.com -d '{\"key\": \"value\"}'  |  "
    "httpcli post example.com -f file.txt",
)
def post_command(
    ctx: typer.Context,
    url: str = _URL_ARGUMENT,
    data: Optional[str] = _DATA_OPTION,
    file: Optional[Path] = _FILE_OPTION,
    headers: Optional[list[str]] = _HEADER_OPTION,
) -> None:
    """Send a POST request with JSON data or a file."""
    _run(ctx, HTTPMethod.POST, url, headers, data=data, file=file)


@app.command(
    "put",
    epilog="Examples: httpcli put http://example.com -d '{\"update\": true}'  |  "
    "httpcli put example.com -f update.txt",
)
def put_command(
    ctx: typer.Context,
    url: str = _URL_ARGUMENT,
    data: Optional[str] = _DATA_OPTION,
    file: Optional[Path] = _FILE_OPTION,
    headers: Optional[list[str]] = _HEADER_OPTION,
) -> None:
    """Send a PUT request with updated JSON data or a file."""
    _run(ctx, HTTPMethod.PUT, url, headers, data=data, file=file)


@app.command("delete", epilog="Example: httpcli delete http://example.com")
def delete_command(
    ctx: typer.Context,
    url: str = _URL_ARGUMENT,
    headers: Optional[list[str]] = _HEADER_OPTION,
) -> None:
    """Send a DELETE request to URL."""
    _run(ctx, HTTPMethod.DELETE, url, headers)


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)

    signal.signal(signal.SIGINT, _handler)


def main() -> None:
    """CLI entry point invoked by the ``httpcli`` console script.

    Unhandled :class:`~httpcli.exceptions.HttpCliError` instances cause a
    clean exit with the error's ``exit_code``. Any other exception is
    reported on stderr and exits with :data:`EXIT_GENERIC_FAILURE`.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as exc:
        from httpcli.output import error

        if isinstance(exc, HttpCliError):
            error(str(exc))
            sys.exit(exc.exit_code)
        error(f"Unexpected error: {exc}")
        sys.exit(EXIT_GENERIC_FAILURE)
