# topmark:header:start
#
#   project      : FbxWriter
#   file         : document.py
#   file_relpath : src/fbxwriter/cli/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON input documents for the ``encode`` command.

Shape:

    {
      "format": "binary",          // optional: "binary" or "ascii"
      "version": 7400,             // optional: binary FBX version
      "nodes": [
        {
          "name": "Model",
          "properties": [{"type": "i64", "value": 1}, "Cube", 1.5],
          "children": [ ... ]
        },
        {"comment": "free text"}
      ]
    }

Properties are either tagged (``{"type": ..., "value": ...}``, see
`fbxwriter.writer.properties.PROPERTY_TAGS`) or plain JSON scalars mapped with
`property_from_python`. Comment entries may appear in any node list.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fbxwriter.common import FbxFormatKind
from fbxwriter.writer.events import Comment, EndFbx, EndNode, StartFbx, StartNode
from fbxwriter.writer.properties import property_from_python, property_from_tagged

if TYPE_CHECKING:
    from collections.abc import Iterator

    from fbxwriter.common import FbxFormatType
    from fbxwriter.writer.events import FbxEvent
    from fbxwriter.writer.properties import PropertyValue


class DocumentError(ValueError):
    """The input document does not have the expected shape."""

    def __init__(self, where: str, reason: str) -> None:
        super().__init__(f"{where}: {reason}")
        self.where: str = where
        self.reason: str = reason


@dataclass(frozen=True)
class InputDocument:
    """A parsed input document.

    Attributes:
        format_kind (FbxFormatKind | None): Encoding requested by the document.
        version (int | None): Binary version requested by the document.
        entries (list[Any]): Raw top-level node and comment entries.
    """

    format_kind: FbxFormatKind | None
    version: int | None
    entries: list[Any]

    def events(self, fmt: FbxFormatType) -> Iterator[FbxEvent]:
        """Yield the complete event sequence for this document.

        Node entries are validated lazily, as events are produced.

        Raises:
            DocumentError: an entry is malformed.
        """
        yield StartFbx(fmt)
        yield from _entry_events(self.entries, "nodes")
        yield EndFbx()


def parse_document(text: str) -> InputDocument:
    """Parse JSON text into an `InputDocument`.

    Raises:
        DocumentError: invalid JSON or an invalid top-level shape.
    """
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentError(f"line {exc.lineno}", f"invalid JSON: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise DocumentError("document", "expected a JSON object")

    format_kind: FbxFormatKind | None = None
    raw_format: Any = data.get("format")
    if raw_format is not None:
        format_kind = FbxFormatKind.parse(str(raw_format))
        if format_kind is None:
            raise DocumentError("format", f"unknown format {raw_format!r}")

    version: Any = data.get("version")
    if version is not None and (isinstance(version, bool) or not isinstance(version, int)):
        raise DocumentError("version", "expected an integer")

    entries: Any = data.get("nodes", [])
    if not isinstance(entries, list):
        raise DocumentError("nodes", "expected a list")
    return InputDocument(format_kind=format_kind, version=version, entries=entries)


def _entry_events(entries: list[Any], where: str) -> Iterator[FbxEvent]:
    for i, entry in enumerate(entries):
        here = f"{where}[{i}]"
        if not isinstance(entry, dict):
            raise DocumentError(here, "expected an object")
        if "comment" in entry:
            yield Comment(str(entry["comment"]))
            continue
        name: Any = entry.get("name")
        if not isinstance(name, str):
            raise DocumentError(here, "node needs a string 'name'")
        raw_props: Any = entry.get("properties", [])
        if not isinstance(raw_props, list):
            raise DocumentError(f"{here}.properties", "expected a list")
        props = tuple(_property(p, f"{here}.properties[{j}]") for j, p in enumerate(raw_props))
        children: Any = entry.get("children", [])
        if not isinstance(children, list):
            raise DocumentError(f"{here}.children", "expected a list")
        yield StartNode(name, props)
        yield from _entry_events(children, f"{here}.children")
        yield EndNode()


def _property(raw: Any, where: str) -> PropertyValue:
    try:
        if isinstance(raw, dict):
            if "type" not in raw or "value" not in raw:
                raise DocumentError(where, "tagged property needs 'type' and 'value'")
            return property_from_tagged(str(raw["type"]), raw["value"])
        return property_from_python(raw)
    except (TypeError, ValueError) as exc:
        if isinstance(exc, DocumentError):
            raise
        raise DocumentError(where, str(exc)) from exc
