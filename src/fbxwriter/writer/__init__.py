# topmark:header:start
#
#   project      : FbxWriter
#   file         : __init__.py
#   file_relpath : src/fbxwriter/writer/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FBX writer: events, the emitter state machine and the format encoders.

Typical use:

    ```python
    from fbxwriter.writer import Emitter, EndFbx, EndNode, StartFbx, StartNode
    from fbxwriter.common import Binary

    emitter = Emitter()
    with open("out.fbx", "wb") as sink:
        for event in (StartFbx(Binary(7400)), StartNode("Creator", ("me",)), EndNode(), EndFbx()):
            emitter.write(sink, event)
    ```
"""

from __future__ import annotations

from fbxwriter.writer.emitter import (
    ActiveAscii,
    ActiveBinary,
    Emitter,
    EmitterState,
    Uninitialized,
    write_document,
    write_events,
)
from fbxwriter.writer.errors import (
    DataTooLarge,
    ExtraEndNode,
    FbxAlreadyEnded,
    FbxAlreadyStarted,
    FbxIoError,
    FbxNotStarted,
    FbxUnimplemented,
    FbxWriteError,
    InvalidNodeName,
    PropertyEncodingError,
    UnclosedNode,
    UnsupportedVersion,
    UnwritableEvent,
)
from fbxwriter.writer.events import (
    Comment,
    EndFbx,
    EndNode,
    FbxEvent,
    FbxNode,
    StartFbx,
    StartNode,
    iter_document_events,
)

__all__ = [
    "ActiveAscii",
    "ActiveBinary",
    "Comment",
    "DataTooLarge",
    "Emitter",
    "EmitterState",
    "EndFbx",
    "EndNode",
    "ExtraEndNode",
    "FbxAlreadyEnded",
    "FbxAlreadyStarted",
    "FbxEvent",
    "FbxIoError",
    "FbxNode",
    "FbxNotStarted",
    "FbxUnimplemented",
    "FbxWriteError",
    "InvalidNodeName",
    "PropertyEncodingError",
    "StartFbx",
    "StartNode",
    "UnclosedNode",
    "Uninitialized",
    "UnsupportedVersion",
    "UnwritableEvent",
    "iter_document_events",
    "write_document",
    "write_events",
]
