# topmark:header:start
#
#   project      : FbxWriter
#   file         : __init__.py
#   file_relpath : src/fbxwriter/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FbxWriter package.

FbxWriter is an event-driven writer for FBX documents. Callers feed a sequence
of structural events (document start/end, node start/end, comments) to an
`Emitter`, which validates the ordering and delegates the byte-level encoding
to a binary or textual format encoder.
"""

from __future__ import annotations

from fbxwriter.common import Ascii, Binary, FbxFormatKind, FbxFormatType, FbxVersion
from fbxwriter.config.model import EmitterConfig, MutableEmitterConfig
from fbxwriter.writer import (
    Comment,
    Emitter,
    EndFbx,
    EndNode,
    FbxEvent,
    FbxNode,
    FbxWriteError,
    StartFbx,
    StartNode,
    write_document,
    write_events,
)

__all__ = [
    "Ascii",
    "Binary",
    "Comment",
    "Emitter",
    "EmitterConfig",
    "EndFbx",
    "EndNode",
    "FbxEvent",
    "FbxFormatKind",
    "FbxFormatType",
    "FbxNode",
    "FbxVersion",
    "FbxWriteError",
    "MutableEmitterConfig",
    "StartFbx",
    "StartNode",
    "write_document",
    "write_events",
]
