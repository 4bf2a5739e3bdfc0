# topmark:header:start
#
#   project      : ctap
#   file         : keys.py
#   file_relpath : src/ctap/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""Section and key names used in ctap TOML configuration.

A standalone ``ctap.toml`` uses a top-level ``[ctap]`` table; in
``pyproject.toml`` the same table lives under ``[tool.ctap]``::

    [ctap]
    summary = true
    glyphs = true

    [ctap.colors]
    test_ok = "#339933"
    test_not_ok = "bold c60"

Color keys are the `ctap.core.lines.StyleKey` values (``unknown``,
``version``, ``plan``, ``test_ok``, ``test_not_ok``, ``diagnostic``, ``bail``,
``summary_ok``, ``summary_fail``, ``plan_fail``).
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section and key names."""

    SECTION_CTAP: Final[str] = "ctap"
    SECTION_TOOL: Final[str] = "tool"
    SECTION_COLORS: Final[str] = "colors"

    KEY_FAILURES: Final[str] = "failures"
    KEY_GLYPHS: Final[str] = "glyphs"
    KEY_SUMMARY: Final[str] = "summary"

    PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
