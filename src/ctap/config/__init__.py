# topmark:header:start
#
#   project      : ctap
#   file         : __init__.py
#   file_relpath : src/ctap/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""Configuration and logging for ctap.

Public modules:
    - ctap.config.keys
    - ctap.config.loaders
    - ctap.config.logging
    - ctap.config.model

Submodules are imported explicitly (e.g. ``from ctap.config.model import Config``)
so that importing the logging module stays free of rendering imports.
"""

from __future__ import annotations
