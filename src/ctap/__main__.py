# topmark:header:start
#
#   project      : ctap
#   file         : __main__.py
#   file_relpath : src/ctap/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""Module entry point for running ctap via ``python -m ctap``.

Delegates to `ctap.cli.main.cli`, the same entry point as the ``ctap``
console script.

Examples:
    Colourise a TAP file::

        python -m ctap --summary results.tap
"""

from __future__ import annotations

from ctap.cli.main import cli

if __name__ == "__main__":
    cli()
