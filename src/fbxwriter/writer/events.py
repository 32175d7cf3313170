# topmark:header:start
#
#   project      : FbxWriter
#   file         : events.py
#   file_relpath : src/fbxwriter/writer/events.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Writer events and node trees.

An FBX document is written as a flat sequence of events:

    StartFbx(format)
      StartNode(name, properties)
        StartNode(...) ... EndNode()     # children, any depth
      EndNode()
      ...
    EndFbx()

`Comment` events may appear anywhere after `StartFbx`; the binary encoding
cannot represent them.

`FbxNode` is a convenience tree type; `iter_document_events` flattens a list
of nodes into the event sequence above.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Union

from fbxwriter.writer.properties import PropertyValue, property_from_python

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from fbxwriter.common import FbxFormatType


@dataclass(frozen=True, slots=True)
class StartFbx:
    """Start of document; selects the encoding for the whole document."""

    format: FbxFormatType


@dataclass(frozen=True, slots=True)
class EndFbx:
    """End of document."""


@dataclass(frozen=True, slots=True)
class StartNode:
    """Start of a node with its ordered properties.

    Plain Python values in ``properties`` are coerced with
    `property_from_python`.
    """

    name: str
    properties: tuple[PropertyValue, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"node name must be a str, got {type(self.name).__name__}")
        object.__setattr__(
            self, "properties", tuple(property_from_python(p) for p in self.properties)
        )


@dataclass(frozen=True, slots=True)
class EndNode:
    """End of the innermost open node."""


@dataclass(frozen=True, slots=True)
class Comment:
    """Free-form comment."""

    text: str


FbxEvent = Union[StartFbx, EndFbx, StartNode, EndNode, Comment]


@dataclass(frozen=True)
class FbxNode:
    """A node and its subtree, for writing whole documents at once.

    Attributes:
        name (str): Node name.
        properties (tuple[PropertyValue, ...]): Ordered property values.
        children (tuple[FbxNode, ...]): Child nodes, in order.
    """

    name: str
    properties: tuple[PropertyValue, ...] = ()
    children: tuple[FbxNode, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "properties", tuple(property_from_python(p) for p in self.properties)
        )
        object.__setattr__(self, "children", tuple(self.children))

    def events(self) -> Iterator[FbxEvent]:
        """Yield the `StartNode`/`EndNode` events for this subtree, depth first."""
        yield StartNode(self.name, self.properties)
        for child in self.children:
            yield from child.events()
        yield EndNode()


def iter_document_events(
    fmt: FbxFormatType,
    nodes: Iterable[FbxNode],
) -> Iterator[FbxEvent]:
    """Yield the complete event sequence for a document made of ``nodes``.

    Args:
        fmt (FbxFormatType): Encoding for the document.
        nodes (Iterable[FbxNode]): Top-level nodes.

    Yields:
        FbxEvent: ``StartFbx``, the node events, then ``EndFbx``.
    """
    yield StartFbx(fmt)
    for node in nodes:
        yield from node.events()
    yield EndFbx()
