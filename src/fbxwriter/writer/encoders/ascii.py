# topmark:header:start
#
#   project      : FbxWriter
#   file         : ascii.py
#   file_relpath : src/fbxwriter/writer/encoders/ascii.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ASCII FBX encoder.

Only the document header is implemented. The emitter reports every later
event of an ASCII document as unimplemented.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from fbxwriter.config.logging import get_logger
from fbxwriter.writer.errors import FbxIoError

if TYPE_CHECKING:
    from typing import BinaryIO

    from fbxwriter.config.logging import FbxLogger

logger: FbxLogger = get_logger(__name__)

HEADER: Final[bytes] = b"; FBX project file\n; " + b"-" * 52 + b"\n\n"


class AsciiEncoder:
    """Encoder for one ASCII FBX document."""

    def __repr__(self) -> str:
        return "AsciiEncoder()"

    def emit_document_start(self, sink: BinaryIO) -> None:
        """Write the comment header that opens an ASCII FBX file.

        Raises:
            FbxIoError: the sink failed.
        """
        try:
            sink.write(HEADER)
        except OSError as exc:
            raise FbxIoError(exc) from exc
        logger.debug("ASCII FBX header written")
