# topmark:header:start
#
#   project      : ctap
#   file         : loaders.py
#   file_relpath : src/ctap/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 ctap contributors
#
# topmark:header:end

"""Load TOML configuration sources.

ctap reads an optional configuration file given with ``--config``: either a
standalone ``ctap.toml`` (``[ctap]`` table) or a ``pyproject.toml``
(``[tool.ctap]`` table). Parsing is done with `tomlkit` and returned as plain
`dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from ctap.config.keys import Toml
from ctap.config.logging import get_logger
from ctap.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from ctap.config.logging import CtapLogger

TomlTable = dict[str, Any]

logger: CtapLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Read and parse a TOML file into a plain dict.

    Args:
        path (Path): The TOML file to read.

    Returns:
        TomlTable: The parsed document.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc

    try:
        doc = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"invalid TOML in {path}: {exc}") from exc

    logger.debug("Loaded config file %s", path)
    return doc.unwrap()


def load_ctap_table(path: Path) -> TomlTable:
    """Return the ctap table from a config file.

    For ``pyproject.toml`` the table is ``[tool.ctap]``, for any other file it is
    ``[ctap]``. A file without the table yields an empty dict.

    Args:
        path (Path): Path to ``ctap.toml``, ``pyproject.toml`` or another TOML file.

    Returns:
        TomlTable: The ctap table (possibly empty).

    Raises:
        ConfigError: If the file cannot be loaded or the table is not a table.
    """
    data = load_toml_dict(path)

    if path.name == Toml.PYPROJECT_FILENAME:
        tool = data.get(Toml.SECTION_TOOL, {})
        table = tool.get(Toml.SECTION_CTAP, {}) if isinstance(tool, dict) else None
        where = f"[{Toml.SECTION_TOOL}.{Toml.SECTION_CTAP}]"
    else:
        table = data.get(Toml.SECTION_CTAP, {})
        where = f"[{Toml.SECTION_CTAP}]"

    if not isinstance(table, dict):
        raise ConfigError(f"{where} in {path} must be a table")
    if not table:
        logger.info("No %s table in %s; using defaults", where, path)
    return table
