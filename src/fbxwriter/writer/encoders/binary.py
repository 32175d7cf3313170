# topmark:header:start
#
#   project      : FbxWriter
#   file         : binary.py
#   file_relpath : src/fbxwriter/writer/encoders/binary.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Binary FBX encoder.

Layout written (all integers little-endian):

    header      magic (23 bytes), version (u32)
    node record end_offset, num_properties, property_list_len
                    (u32 each before 7500, u64 each from 7500)
                name_len (u8), name
                properties
                nested node records
                null record, if the node has children or no properties
    ...
    null record (top level)
    footer      footer id (16 bytes), 4 zero bytes, zero padding to a 16-byte
                boundary, version (u32), 120 zero bytes, footer magic (16 bytes)

``end_offset`` is only known once a node is closed, so `emit_node_end` seeks
back to the record header to patch it. Offsets are relative to the sink
position at document start.
"""

from __future__ import annotations

import struct
import zlib
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from fbxwriter.common import is_supported_binary_version
from fbxwriter.config.logging import get_logger
from fbxwriter.config.model import EmitterConfig
from fbxwriter.writer.errors import (
    DataTooLarge,
    ExtraEndNode,
    FbxAlreadyEnded,
    FbxIoError,
    InvalidNodeName,
    PropertyEncodingError,
    UnclosedNode,
    UnsupportedVersion,
)
from fbxwriter.writer.properties import (
    Bool,
    BoolArray,
    F32,
    F32Array,
    F64,
    F64Array,
    I16,
    I32,
    I32Array,
    I64,
    I64Array,
    Raw,
    String,
)

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from typing import BinaryIO

    from fbxwriter.config.logging import FbxLogger
    from fbxwriter.writer.properties import PropertyValue

logger: FbxLogger = get_logger(__name__)

MAGIC: Final[bytes] = b"Kaydara FBX Binary  \x00\x1a\x00"
FOOTER_ID: Final[bytes] = bytes.fromhex("fabcab09d0c8d466b176fb831cf7267e")
FOOTER_MAGIC: Final[bytes] = bytes.fromhex("f85a8c6adef5d97eece90ce3758f290b")
FOOTER_RESERVED_LEN: Final[int] = 120

# First version whose node record fields are 64-bit.
WIDE_RECORD_VERSION: Final[int] = 7500

MAX_NAME_LEN: Final[int] = 0xFF
U32_MAX: Final[int] = 0xFFFF_FFFF
U64_MAX: Final[int] = 0xFFFF_FFFF_FFFF_FFFF

ARRAY_ENCODING_RAW: Final[int] = 0
ARRAY_ENCODING_ZLIB: Final[int] = 1

_SCALAR_FORMATS: Final[dict[type, str]] = {
    Bool: "<B",
    I16: "<h",
    I32: "<i",
    I64: "<q",
    F32: "<f",
    F64: "<d",
}

_ARRAY_ITEM_FORMATS: Final[dict[type, str]] = {
    BoolArray: "B",
    I32Array: "i",
    I64Array: "q",
    F32Array: "f",
    F64Array: "d",
}


@contextmanager
def _sink_errors() -> Iterator[None]:
    """Translate sink failures into `FbxIoError`."""
    try:
        yield
    except OSError as exc:
        raise FbxIoError(exc) from exc


@dataclass
class _OpenNode:
    """Bookkeeping for a node whose record is not finished yet."""

    header_pos: int
    num_properties: int
    has_children: bool = False


class BinaryEncoder:
    """Encoder for one binary FBX document.

    The encoder is created by the emitter on the first ``StartFbx`` event and
    receives every later structural event of the document. It trusts the
    emitter for the start-of-document protocol, but checks node nesting and
    end-of-document itself.
    """

    def __init__(self, version: int, config: EmitterConfig | None = None) -> None:
        self.version: int = version
        self._config: EmitterConfig = config or EmitterConfig()
        self._wide: bool = version >= WIDE_RECORD_VERSION
        self._field: str = "<Q" if self._wide else "<I"
        self._field_max: int = U64_MAX if self._wide else U32_MAX
        self._base: int = 0
        self._open: list[_OpenNode] = []
        self._ended: bool = False

    def __repr__(self) -> str:
        return (
            f"BinaryEncoder(version={self.version}, depth={len(self._open)}, ended={self._ended})"
        )

    @property
    def depth(self) -> int:
        """Number of currently open nodes."""
        return len(self._open)

    @property
    def null_record(self) -> bytes:
        """The all-zero node record that terminates a node list."""
        return b"\x00" * (3 * struct.calcsize(self._field) + 1)

    # --- Emission -------------------------------------------------------------

    def emit_document_start(self, sink: BinaryIO, version: int) -> None:
        """Write the file magic and version.

        Raises:
            UnsupportedVersion: ``version`` is outside the 7.x range.
            FbxIoError: the sink failed.
        """
        if not is_supported_binary_version(version):
            raise UnsupportedVersion(version)
        with _sink_errors():
            self._base = sink.tell()
            sink.write(MAGIC)
            sink.write(struct.pack("<I", version))
        logger.debug("Binary FBX %d header written at offset %d", version, self._base)

    def emit_document_end(self, sink: BinaryIO) -> None:
        """Write the top-level null record and the footer.

        Raises:
            FbxAlreadyEnded: the document was already ended.
            UnclosedNode: nodes are still open.
            FbxIoError: the sink failed.
        """
        self._check_not_ended()
        if self._open:
            raise UnclosedNode(len(self._open))
        with _sink_errors():
            sink.write(self.null_record)
            sink.write(FOOTER_ID)
            sink.write(b"\x00" * 4)
            offset: int = sink.tell() - self._base
            padding: int = ((offset + 15) & ~15) - offset
            sink.write(b"\x00" * (padding or 16))
            sink.write(struct.pack("<I", self.version))
            sink.write(b"\x00" * FOOTER_RESERVED_LEN)
            sink.write(FOOTER_MAGIC)
        self._ended = True
        logger.debug("Binary FBX footer written")

    def emit_node_start(
        self,
        sink: BinaryIO,
        name: str,
        properties: Sequence[PropertyValue],
    ) -> None:
        """Write a node record header, its name and its properties.

        Raises:
            FbxAlreadyEnded: the document was already ended.
            InvalidNodeName: the name is not valid UTF-8 text.
            DataTooLarge: the name or the property list does not fit.
            PropertyEncodingError: a property value cannot be packed.
            FbxIoError: the sink failed.
        """
        self._check_not_ended()
        try:
            name_bytes: bytes = name.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidNodeName(name, exc.reason) from exc
        if len(name_bytes) > MAX_NAME_LEN:
            raise DataTooLarge("node name length", len(name_bytes), MAX_NAME_LEN)

        payload: bytes = b"".join(self.encode_property(p) for p in properties)
        self._check_field("property count", len(properties))
        self._check_field("property list length", len(payload))

        if self._open:
            self._open[-1].has_children = True

        with _sink_errors():
            header_pos: int = sink.tell()
            # end_offset is patched by emit_node_end()
            sink.write(struct.pack(self._field, 0))
            sink.write(struct.pack(self._field, len(properties)))
            sink.write(struct.pack(self._field, len(payload)))
            sink.write(struct.pack("<B", len(name_bytes)))
            sink.write(name_bytes)
            sink.write(payload)
        self._open.append(_OpenNode(header_pos=header_pos, num_properties=len(properties)))
        logger.trace(
            "Node %r opened at %d (depth %d, %d properties, %d bytes)",
            name,
            header_pos,
            len(self._open),
            len(properties),
            len(payload),
        )

    def emit_node_end(self, sink: BinaryIO) -> None:
        """Close the innermost node and patch its ``end_offset``.

        Raises:
            FbxAlreadyEnded: the document was already ended.
            ExtraEndNode: no node is open.
            DataTooLarge: the end offset does not fit.
            FbxIoError: the sink failed.
        """
        self._check_not_ended()
        if not self._open:
            raise ExtraEndNode()
        node: _OpenNode = self._open.pop()
        with _sink_errors():
            if node.has_children or node.num_properties == 0:
                sink.write(self.null_record)
            end_pos: int = sink.tell()
            end_offset: int = end_pos - self._base
            self._check_field("node end offset", end_offset)
            sink.seek(node.header_pos)
            sink.write(struct.pack(self._field, end_offset))
            sink.seek(end_pos)
        logger.trace("Node at %d closed, end offset %d", node.header_pos, end_offset)

    # --- Property encoding ----------------------------------------------------

    def encode_property(self, prop: PropertyValue) -> bytes:
        """Return the binary form of one property: type code then payload.

        Raises:
            DataTooLarge: an array or string length does not fit in u32.
            PropertyEncodingError: the value cannot be packed (e.g. a float
                outside the single-precision range).
        """
        code: bytes = prop.code.encode("ascii")
        try:
            scalar_fmt: str | None = _SCALAR_FORMATS.get(type(prop))
            if scalar_fmt is not None:
                return code + struct.pack(scalar_fmt, prop.value)  # type: ignore[union-attr]
            item_fmt: str | None = _ARRAY_ITEM_FORMATS.get(type(prop))
            if item_fmt is not None:
                values = prop.values  # type: ignore[union-attr]
                return code + self._encode_array(item_fmt, values)
        except (struct.error, OverflowError) as exc:
            raise PropertyEncodingError(prop.code, str(exc)) from exc
        if isinstance(prop, String):
            try:
                text: bytes = prop.value.encode("utf-8")
            except UnicodeEncodeError as exc:
                raise PropertyEncodingError(prop.code, exc.reason) from exc
            return code + self._encode_blob(text)
        if isinstance(prop, Raw):
            return code + self._encode_blob(prop.value)
        raise PropertyEncodingError(getattr(prop, "code", "?"), "unknown property type")

    def _encode_array(self, item_fmt: str, values: Sequence[object]) -> bytes:
        if len(values) > U32_MAX:
            raise DataTooLarge("array element count", len(values), U32_MAX)
        raw: bytes = struct.pack(f"<{len(values)}{item_fmt}", *values)
        encoding: int = ARRAY_ENCODING_RAW
        data: bytes = raw
        if self._config.compress_arrays and len(raw) >= self._config.array_compression_threshold:
            compressed: bytes = zlib.compress(raw)
            if len(compressed) < len(raw):
                encoding, data = ARRAY_ENCODING_ZLIB, compressed
        if len(data) > U32_MAX:
            raise DataTooLarge("array byte length", len(data), U32_MAX)
        return struct.pack("<III", len(values), encoding, len(data)) + data

    def _encode_blob(self, data: bytes) -> bytes:
        if len(data) > U32_MAX:
            raise DataTooLarge("string length", len(data), U32_MAX)
        return struct.pack("<I", len(data)) + data

    # --- Checks -------------------------------------------------------------

    def _check_not_ended(self) -> None:
        if self._ended:
            raise FbxAlreadyEnded()

    def _check_field(self, what: str, value: int) -> None:
        if value > self._field_max:
            raise DataTooLarge(what, value, self._field_max)
