# topmark:header:start
#
#   project      : ctap
#   file         : __init__.py
#   file_relpath : src/ctap/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""Rendering helpers for ctap.

This package turns style descriptors into colorizers and binds them to an output
console. It is kept separate from `ctap.core`, which only ever talks to a
`StyleMap` and never to a color library directly.

Public modules:
    - ctap.rendering.console_api
    - ctap.rendering.styles
"""

from __future__ import annotations
