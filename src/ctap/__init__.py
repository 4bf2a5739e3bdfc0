# topmark:header:start
#
#   project      : ctap
#   file         : __init__.py
#   file_relpath : src/ctap/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""ctap package.

ctap is a lightweight colouriser for TAP (Test Anything Protocol) output. It
classifies each input line, renders it with a configurable style, and derives a
summary and exit code from the plan, test and bail-out lines it has seen.
"""

from __future__ import annotations
