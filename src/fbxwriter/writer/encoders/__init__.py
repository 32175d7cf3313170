# topmark:header:start
#
#   project      : FbxWriter
#   file         : __init__.py
#   file_relpath : src/fbxwriter/writer/encoders/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format encoders driven by `fbxwriter.writer.emitter.Emitter`.

- `BinaryEncoder`: complete binary FBX (7.x) encoder.
- `AsciiEncoder`: ASCII FBX header only.
"""

from __future__ import annotations

from fbxwriter.writer.encoders.ascii import AsciiEncoder
from fbxwriter.writer.encoders.binary import BinaryEncoder

__all__ = [
    "AsciiEncoder",
    "BinaryEncoder",
]
