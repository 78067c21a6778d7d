"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~httpcli.exceptions.HttpCliError` subclass.

Network failures are reported on stderr but do not change the exit status,
so a failed request still exits with :data:`EXIT_SUCCESS`.

Example::

    $ httpcli post example.com -f missing.txt
    $ echo $?
    3   # EXIT_FILE_ERROR -- the upload could not be read
"""

EXIT_SUCCESS = 0
"""The command completed (including requests whose failure was reported)."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred, e.g. the HTTP client could not be built."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments (such as a malformed ``-H``)."""

EXIT_FILE_ERROR = 3
"""The file given with ``-f`` is missing or unreadable."""

EXIT_INTERRUPTED = 130
"""The user pressed Ctrl-C."""
