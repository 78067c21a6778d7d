"""httpcli -- a small command-line HTTP client.

Sends a single GET, POST, PUT or DELETE request per invocation and prints
the status line, response headers and body. Request bodies are either raw
JSON text (``-d``) or a file uploaded as ``multipart/form-data`` (``-f``).

Typical usage::

    httpcli get example.com -H "User-Agent=MyClient"
    httpcli post https://example.com -d '{"key": "value"}'
    httpcli put example.com -f update.txt

Modules:
    app: Typer application and console-script entry point.
    models: Pydantic models for requests, bodies and responses.
    headers: ``key=value`` header parsing and header-map construction.
    urls: URL scheme normalisation.
    request_builder: Turns parsed arguments into a request description.
    transport: Owns the ``httpx.Client`` and sends one request.
    presenter: Prints responses and transport errors.
    dispatcher: Wires the pieces together for one subcommand.
    output: stdout/stderr discipline with Rich consoles.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
"""

__version__ = "1.1.0"
