# topmark:header:start
#
#   project      : FbxWriter
#   file         : io.py
#   file_relpath : src/fbxwriter/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render emitter configuration as TOML.

Parsing and rendering use `tomlkit`. Two file shapes are recognized:

- ``fbxwriter.toml`` with an ``[emitter]`` table at the top level;
- ``pyproject.toml`` with the same table under ``[tool.fbxwriter.emitter]``.

Unreadable or malformed files are logged and treated as empty, so a broken
config file degrades to the defaults instead of aborting a write.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from fbxwriter.config.keys import Toml
from fbxwriter.config.logging import get_logger
from fbxwriter.config.model import EmitterConfig, MutableEmitterConfig
from fbxwriter.constants import CONFIG_FILE_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fbxwriter.config.logging import FbxLogger

logger: FbxLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path: Path to a TOML document.

    Returns:
        The parsed TOML content; an empty dict when the file cannot be read or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def _select_table(data: TomlTable, dotted: str) -> TomlTable:
    node: Any = data
    for part in dotted.split("."):
        if not isinstance(node, dict):
            return {}
        node = node.get(part, {})
    return cast("TomlTable", node) if isinstance(node, dict) else {}


def emitter_table_from_document(data: TomlTable, *, is_pyproject: bool) -> TomlTable:
    """Return the ``[emitter]`` table of a parsed config document.

    Args:
        data: Parsed TOML document.
        is_pyproject: Look under ``[tool.fbxwriter]`` instead of the top level.

    Returns:
        The emitter table, or an empty dict when absent.
    """
    root: TomlTable = _select_table(data, PYPROJECT_TOOL_SECTION) if is_pyproject else data
    return _select_table(root, Toml.SECTION_EMITTER)


def load_config_file(path: Path) -> MutableEmitterConfig:
    """Read one config file into a builder.

    ``pyproject.toml`` is read from ``[tool.fbxwriter.emitter]``; any other
    file from its top-level ``[emitter]`` table.
    """
    data: TomlTable = load_toml_dict(path)
    is_pyproject: bool = path.name == "pyproject.toml"
    table: TomlTable = emitter_table_from_document(data, is_pyproject=is_pyproject)
    logger.debug("Emitter table from %s: %s", path, table)
    return MutableEmitterConfig.from_toml_table(table)


def discover_config_files(start: Path) -> list[Path]:
    """Return the config files that apply to ``start``, lowest priority first.

    Looks in ``start`` (a directory) for ``pyproject.toml`` then
    ``fbxwriter.toml``; a standalone ``fbxwriter.toml`` wins over ``pyproject.toml``.
    """
    found: list[Path] = []
    for name in ("pyproject.toml", CONFIG_FILE_NAME):
        candidate: Path = start / name
        if candidate.is_file():
            found.append(candidate)
    return found


def load_config(
    paths: Iterable[Path] = (),
    *,
    overrides: MutableEmitterConfig | None = None,
) -> EmitterConfig:
    """Merge defaults, each config file in order, then ``overrides``.

    Args:
        paths: Config files, lowest priority first.
        overrides: Explicit values (e.g. from CLI flags), applied last.

    Returns:
        EmitterConfig: The resolved configuration.
    """
    merged = MutableEmitterConfig()
    for path in paths:
        merged = merged.merge_with(load_config_file(Path(path)))
    if overrides is not None:
        merged = merged.merge_with(overrides)
    return merged.freeze()


def config_to_toml(config: EmitterConfig, *, for_pyproject: bool = False) -> str:
    """Render ``config`` as a TOML document.

    Args:
        config: The configuration to render.
        for_pyproject: Nest the table under ``[tool.fbxwriter.emitter]``.

    Returns:
        TOML document text.
    """
    doc: tomlkit.TOMLDocument = tomlkit.document()
    emitter = tomlkit.table()
    for key, value in config.to_toml_table().items():
        emitter.add(key, value)
    if for_pyproject:
        tool = tomlkit.table(is_super_table=True)
        fbxwriter = tomlkit.table(is_super_table=True)
        fbxwriter.add(Toml.SECTION_EMITTER, emitter)
        tool.add("fbxwriter", fbxwriter)
        doc.add("tool", tool)
    else:
        doc.add(Toml.SECTION_EMITTER, emitter)
    return tomlkit.dumps(doc)
