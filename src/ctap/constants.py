# topmark:header:start
#
#   project      : ctap
#   file         : constants.py
#   file_relpath : src/ctap/constants.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""ctap Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

CTAP_VERSION: str = get_version("ctap")

GLYPH_OK: str = "✓"
GLYPH_NOT_OK: str = "✗"

ENV_PREFIX: str = "CTAP_"
ENV_LOG_LEVEL: str = "CTAP_LOG_LEVEL"
