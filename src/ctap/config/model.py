# topmark:header:start
#
#   project      : ctap
#   file         : model.py
#   file_relpath : src/ctap/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable snapshot passed into a run.
    - `MutableConfig`: a mutable builder used while layering sources; it can
      be frozen into `Config` and thawed back for edits.

Layering (lowest to highest precedence):
    1. built-in defaults (`MutableConfig.from_defaults`),
    2. a TOML table (`MutableConfig.merge_toml`),
    3. explicit overrides from the CLI or its environment variables
       (`MutableConfig.apply_overrides`).

Style descriptors are stored as text here; they are parsed (and validated) when
the `ctap.rendering.styles.StyleMap` is built.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from ctap.config.keys import Toml
from ctap.config.logging import get_logger
from ctap.core.lines import STYLE_KEYS
from ctap.core.processor import RenderOptions
from ctap.rendering.styles import DEFAULT_STYLES

if TYPE_CHECKING:
    from ctap.config.loaders import TomlTable
    from ctap.config.logging import CtapLogger
    from ctap.core.lines import StyleKey

logger: CtapLogger = get_logger(__name__)

STYLE_KEYS_BY_NAME: Mapping[str, StyleKey] = MappingProxyType({k.value: k for k in STYLE_KEYS})


@dataclass(frozen=True)
class Config:
    """Immutable ctap configuration.

    Attributes:
        failures_only (bool): Suppress ``ok`` lines and show failures only.
        glyphs (bool): Show ✓/✗ glyphs instead of ``ok``/``not ok``.
        summary (bool): Append a summary of the test results.
        styles (Mapping[StyleKey, str]): Style descriptor per style key.
    """

    failures_only: bool = False
    glyphs: bool = False
    summary: bool = False
    styles: Mapping[StyleKey, str] = field(default_factory=lambda: DEFAULT_STYLES)

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the built-in default configuration."""
        return MutableConfig.from_defaults().freeze()

    def render_options(self) -> RenderOptions:
        """Return the rendering switches for a stream processor."""
        return RenderOptions(
            suppress_successes=self.failures_only,
            glyphs=self.glyphs,
            summary=self.summary,
        )

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            failures_only=self.failures_only,
            glyphs=self.glyphs,
            summary=self.summary,
            styles=dict(self.styles),
        )


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Attributes:
        failures_only (bool): Suppress ``ok`` lines and show failures only.
        glyphs (bool): Show ✓/✗ glyphs instead of ``ok``/``not ok``.
        summary (bool): Append a summary of the test results.
        styles (dict[StyleKey, str]): Style descriptor per style key.
        warnings (list[str]): Problems found while merging sources that did not
            prevent loading (unknown keys, wrongly typed values).
    """

    failures_only: bool = False
    glyphs: bool = False
    summary: bool = False
    styles: dict[StyleKey, str] = field(default_factory=lambda: dict(DEFAULT_STYLES))
    warnings: list[str] = field(default_factory=list)

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the built-in defaults."""
        return cls()

    def _warn(self, message: str) -> None:
        logger.debug(message)
        self.warnings.append(message)

    def merge_toml(self, table: TomlTable) -> MutableConfig:
        """Merge a ``[ctap]`` table into this builder.

        Unknown keys and wrongly typed values are skipped with a warning; they
        never abort loading.

        Args:
            table (TomlTable): The ``[ctap]`` (or ``[tool.ctap]``) table.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        flags = {
            Toml.KEY_FAILURES: "failures_only",
            Toml.KEY_GLYPHS: "glyphs",
            Toml.KEY_SUMMARY: "summary",
        }
        for key, value in table.items():
            if key in flags:
                if isinstance(value, bool):
                    setattr(self, flags[key], value)
                else:
                    self._warn(f"[ctap] {key} must be a boolean, got {value!r}; ignored")
            elif key == Toml.SECTION_COLORS:
                self._merge_colors(value)
            else:
                self._warn(f"[ctap] unknown key {key!r}; ignored")
        return self

    def _merge_colors(self, colors: Any) -> None:
        if not isinstance(colors, dict):
            self._warn(f"[ctap.{Toml.SECTION_COLORS}] must be a table; ignored")
            return
        for name, descriptor in colors.items():
            key = STYLE_KEYS_BY_NAME.get(name)
            if key is None:
                self._warn(f"[ctap.{Toml.SECTION_COLORS}] unknown line kind {name!r}; ignored")
            elif not isinstance(descriptor, str):
                self._warn(
                    f"[ctap.{Toml.SECTION_COLORS}] {name} must be a string, "
                    f"got {descriptor!r}; ignored"
                )
            else:
                self.styles[key] = descriptor

    def apply_overrides(
        self,
        *,
        failures_only: bool | None = None,
        glyphs: bool | None = None,
        summary: bool | None = None,
        styles: Mapping[StyleKey, str | None] | None = None,
    ) -> MutableConfig:
        """Apply explicit overrides; ``None`` (or an empty string) means "not given".

        Args:
            failures_only (bool | None): Override for ``failures_only``.
            glyphs (bool | None): Override for ``glyphs``.
            summary (bool | None): Override for ``summary``.
            styles (Mapping[StyleKey, str | None] | None): Descriptor overrides.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        if failures_only is not None:
            self.failures_only = failures_only
        if glyphs is not None:
            self.glyphs = glyphs
        if summary is not None:
            self.summary = summary
        for key, descriptor in (styles or {}).items():
            if descriptor:
                self.styles[key] = descriptor
        return self

    def freeze(self) -> Config:
        """Return an immutable snapshot of this builder."""
        return Config(
            failures_only=self.failures_only,
            glyphs=self.glyphs,
            summary=self.summary,
            styles=MappingProxyType(dict(self.styles)),
        )
