# topmark:header:start
#
#   project      : ctap
#   file         : __init__.py
#   file_relpath : src/ctap/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""Core, UI-agnostic TAP processing.

Public modules:
    - ctap.core.exit_codes
    - ctap.core.lines
    - ctap.core.processor
"""

from __future__ import annotations
