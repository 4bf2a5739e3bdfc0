# topmark:header:start
#
#   project      : ctap
#   file         : __init__.py
#   file_relpath : src/ctap/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""Click command-line interface for ctap."""

from __future__ import annotations
