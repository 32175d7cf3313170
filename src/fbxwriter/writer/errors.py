# topmark:header:start
#
#   project      : FbxWriter
#   file         : errors.py
#   file_relpath : src/fbxwriter/writer/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised while writing an FBX document.

Protocol errors (`FbxNotStarted`, `FbxAlreadyStarted`, `UnwritableEvent`,
`FbxUnimplemented`) are raised by the emitter itself. The remaining classes
are raised by the format encoders and pass through the emitter unchanged.

Every error keeps its constructor arguments in ``args`` so that `clone()` can
rebuild an equal, traceback-free copy. The emitter relies on this to re-raise
the first failure on every later call.
"""

from __future__ import annotations

import copy
from typing import TypeVar

_E = TypeVar("_E", bound="FbxWriteError")


class FbxWriteError(Exception):
    """Base class for all FBX writer errors."""

    def clone(self: _E) -> _E:
        """Return a copy of this error without traceback, cause or context."""
        dup: _E = copy.copy(self)
        dup.__traceback__ = None
        dup.__cause__ = None
        dup.__context__ = None
        return dup

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FbxWriteError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class FbxNotStarted(FbxWriteError):
    """A structural event was written before any `StartFbx` event."""

    def __str__(self) -> str:
        return "FBX document is not started yet"


class FbxAlreadyStarted(FbxWriteError):
    """A second `StartFbx` event was written."""

    def __str__(self) -> str:
        return "FBX document is already started"


class UnwritableEvent(FbxWriteError):
    """The event has no representation in the active encoding."""

    def __str__(self) -> str:
        return "event cannot be written in the active FBX encoding"


class FbxUnimplemented(FbxWriteError):
    """The active encoder does not implement the requested operation."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail: str = detail

    def __str__(self) -> str:
        return f"unimplemented: {self.detail}"


class FbxIoError(FbxWriteError):
    """The output sink failed."""

    def __init__(self, cause: OSError) -> None:
        super().__init__(cause)
        self.cause: OSError = cause

    def __str__(self) -> str:
        return f"I/O error: {self.cause}"


class UnsupportedVersion(FbxWriteError):
    """The requested binary FBX version cannot be written."""

    def __init__(self, version: int) -> None:
        super().__init__(version)
        self.version: int = version

    def __str__(self) -> str:
        return f"unsupported FBX version: {self.version}"


class ExtraEndNode(FbxWriteError):
    """An `EndNode` event arrived while no node was open."""

    def __str__(self) -> str:
        return "EndNode without a matching StartNode"


class UnclosedNode(FbxWriteError):
    """`EndFbx` arrived while nodes were still open."""

    def __init__(self, depth: int) -> None:
        super().__init__(depth)
        self.depth: int = depth

    def __str__(self) -> str:
        return f"FBX document ended with {self.depth} unclosed node(s)"


class FbxAlreadyEnded(FbxWriteError):
    """An event was routed to an encoder after its `EndFbx`."""

    def __str__(self) -> str:
        return "FBX document is already ended"


class DataTooLarge(FbxWriteError):
    """A length or offset does not fit in its field."""

    def __init__(self, what: str, size: int, limit: int) -> None:
        super().__init__(what, size, limit)
        self.what: str = what
        self.size: int = size
        self.limit: int = limit

    def __str__(self) -> str:
        return f"{self.what} is too large: {self.size} (limit {self.limit})"


class PropertyEncodingError(FbxWriteError):
    """A property value cannot be packed into its binary type."""

    def __init__(self, code: str, reason: str) -> None:
        super().__init__(code, reason)
        self.code: str = code
        self.reason: str = reason

    def __str__(self) -> str:
        return f"cannot encode property of type {self.code!r}: {self.reason}"


class InvalidNodeName(FbxWriteError):
    """A node name cannot be written as UTF-8."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(name, reason)
        self.name: str = name
        self.reason: str = reason

    def __str__(self) -> str:
        return f"invalid node name {self.name!r}: {self.reason}"
