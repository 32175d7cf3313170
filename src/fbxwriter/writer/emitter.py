# topmark:header:start
#
#   project      : FbxWriter
#   file         : emitter.py
#   file_relpath : src/fbxwriter/writer/emitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FBX emitter: the event protocol state machine.

The `Emitter` validates the order of writer events, owns the format encoder
selected by the first ``StartFbx`` event, and forwards every legal event to it.

States:

| State         | StartFbx            | other structural event | Comment                  |
|---------------|---------------------|------------------------|--------------------------|
| Uninitialized | -> ActiveBinary/Ascii | FbxNotStarted        | FbxNotStarted            |
| ActiveBinary  | FbxAlreadyStarted   | delegated to encoder   | warning or UnwritableEvent |
| ActiveAscii   | FbxAlreadyStarted   | FbxUnimplemented       | FbxUnimplemented         |

The first failure is cached: every later ``write()`` raises a clone of it
without looking at the event or touching the sink. A document that failed
half-way is never continued.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from fbxwriter.common import Ascii, Binary, FbxFormatKind, format_type_for
from fbxwriter.config.logging import get_logger
from fbxwriter.config.model import EmitterConfig
from fbxwriter.writer.encoders import AsciiEncoder, BinaryEncoder
from fbxwriter.writer.errors import (
    FbxAlreadyStarted,
    FbxNotStarted,
    FbxUnimplemented,
    FbxWriteError,
    UnwritableEvent,
)
from fbxwriter.writer.events import (
    Comment,
    EndFbx,
    EndNode,
    StartFbx,
    StartNode,
    iter_document_events,
)

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import BinaryIO

    from fbxwriter.common import FbxFormatType
    from fbxwriter.config.logging import FbxLogger
    from fbxwriter.writer.events import FbxEvent, FbxNode

logger: FbxLogger = get_logger(__name__)


@dataclass(frozen=True)
class Uninitialized:
    """No document started yet."""


@dataclass(frozen=True)
class ActiveBinary:
    """Writing binary FBX."""

    encoder: BinaryEncoder


@dataclass(frozen=True)
class ActiveAscii:
    """Writing ASCII FBX."""

    encoder: AsciiEncoder


EmitterState = Union[Uninitialized, ActiveBinary, ActiveAscii]


class Emitter:
    """Event-driven FBX writer.

    The output sink is passed to every `write()` call and never retained. It
    must be a binary stream that supports ``write``, ``tell`` and ``seek``: the
    binary encoder seeks back to patch node end offsets.

    Example:
        ```python
        emitter = Emitter()
        with open("scene.fbx", "wb") as sink:
            emitter.write(sink, StartFbx(Binary(7400)))
            emitter.write(sink, StartNode("Model", (I64(1), String("Cube"))))
            emitter.write(sink, EndNode())
            emitter.write(sink, EndFbx())
        ```
    """

    def __init__(self, config: EmitterConfig | None = None) -> None:
        self._config: EmitterConfig = config or EmitterConfig()
        self._state: EmitterState = Uninitialized()
        self._error: FbxWriteError | None = None

    def __repr__(self) -> str:
        return f"Emitter(state={self._state!r}, error={self._error!r})"

    @property
    def config(self) -> EmitterConfig:
        """The configuration this emitter was created with."""
        return self._config

    @property
    def state(self) -> EmitterState:
        """The current protocol state."""
        return self._state

    @property
    def format_kind(self) -> FbxFormatKind | None:
        """The encoding chosen by the first ``StartFbx`` event, if any."""
        match self._state:
            case ActiveBinary():
                return FbxFormatKind.BINARY
            case ActiveAscii():
                return FbxFormatKind.ASCII
            case _:
                return None

    @property
    def error(self) -> FbxWriteError | None:
        """The cached terminal error, or ``None`` while the emitter is healthy."""
        return self._error

    @property
    def failed(self) -> bool:
        """True once any ``write()`` has failed."""
        return self._error is not None

    def write(self, sink: BinaryIO, event: FbxEvent) -> None:
        """Write one event to ``sink``.

        Args:
            sink (BinaryIO): Seekable binary output stream.
            event (FbxEvent): The next event of the document.

        Raises:
            FbxWriteError: the event is illegal in the current state, or the
                encoder failed. Once raised, the same error is raised again by
                every later call.
        """
        if self._error is not None:
            raise self._error.clone()
        try:
            self._dispatch(sink, event)
        except FbxWriteError as exc:
            self._error = exc.clone()
            raise

    def _dispatch(self, sink: BinaryIO, event: FbxEvent) -> None:
        match self._state:
            case Uninitialized():
                self._start(sink, event)
            case ActiveBinary(encoder=encoder):
                match event:
                    case StartFbx():
                        raise FbxAlreadyStarted()
                    case EndFbx():
                        encoder.emit_document_end(sink)
                    case StartNode(name=name, properties=properties):
                        encoder.emit_node_start(sink, name, properties)
                    case EndNode():
                        encoder.emit_node_end(sink)
                    case Comment():
                        if self._config.ignore_minor_errors:
                            logger.warning("Comment cannot be exported to Binary FBX")
                        else:
                            logger.error("Comment cannot be exported to Binary FBX")
                            raise UnwritableEvent()
            case ActiveAscii():
                if isinstance(event, StartFbx):
                    raise FbxAlreadyStarted()
                raise FbxUnimplemented("ASCII FBX emitter is unimplemented yet")

    def _start(self, sink: BinaryIO, event: FbxEvent) -> None:
        match event:
            case StartFbx(format=Binary(version=version)):
                binary = BinaryEncoder(version, self._config)
                self._state = ActiveBinary(binary)
                binary.emit_document_start(sink, version)
            case StartFbx(format=Ascii()):
                ascii_encoder = AsciiEncoder()
                self._state = ActiveAscii(ascii_encoder)
                ascii_encoder.emit_document_start(sink)
            case _:
                raise FbxNotStarted()


def write_events(
    sink: BinaryIO,
    events: Iterable[FbxEvent],
    config: EmitterConfig | None = None,
) -> Emitter:
    """Write ``events`` in order through a fresh emitter.

    Args:
        sink (BinaryIO): Seekable binary output stream.
        events (Iterable[FbxEvent]): The event sequence.
        config (EmitterConfig | None): Emitter configuration.

    Returns:
        Emitter: The emitter, after the last event.

    Raises:
        FbxWriteError: the first failure; remaining events are not consumed.
    """
    emitter = Emitter(config)
    for event in events:
        emitter.write(sink, event)
    return emitter


def write_document(
    sink: BinaryIO,
    nodes: Iterable[FbxNode],
    fmt: FbxFormatType | None = None,
    config: EmitterConfig | None = None,
) -> Emitter:
    """Write a complete document made of ``nodes``.

    Args:
        sink (BinaryIO): Seekable binary output stream.
        nodes (Iterable[FbxNode]): Top-level nodes.
        fmt (FbxFormatType | None): Encoding; binary FBX 7400 when omitted.
        config (EmitterConfig | None): Emitter configuration.

    Returns:
        Emitter: The emitter, after ``EndFbx``.
    """
    fmt = fmt if fmt is not None else format_type_for(FbxFormatKind.BINARY)
    return write_events(sink, iter_document_events(fmt, nodes), config)
