# topmark:header:start
#
#   project      : FbxWriter
#   file         : common.py
#   file_relpath : src/fbxwriter/common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format vocabulary shared by the writer, the config layer and the CLI.

`FbxFormatType` is a closed union of two variants: `Binary` carries the FBX
version number to emit, `Ascii` carries nothing. The first `StartFbx` event
of a document selects one of them for the life of the emitter.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Final, Union

from fbxwriter.core.enum_mixins import KeyedStrEnum


class FbxVersion(IntEnum):
    """Well-known FBX versions.

    Attributes:
        V7_4: FBX 7.4; node record fields are 32-bit.
        V7_5: FBX 7.5; node record fields are 64-bit.
    """

    V7_4 = 7400
    V7_5 = 7500


DEFAULT_VERSION: Final[int] = int(FbxVersion.V7_4)

MIN_BINARY_VERSION: Final[int] = 7000
MAX_BINARY_VERSION: Final[int] = 7700


def is_supported_binary_version(version: int) -> bool:
    """Return True if ``version`` uses the 7.x binary layout emitted here."""
    return MIN_BINARY_VERSION <= version <= MAX_BINARY_VERSION


class FbxFormatKind(KeyedStrEnum):
    """The two FBX encodings, as named in config files and on the command line."""

    BINARY = ("binary", "Binary FBX", ("bin",))
    ASCII = ("ascii", "ASCII FBX", ("text", "textual"))


@dataclass(frozen=True, slots=True)
class Binary:
    """Binary FBX of the given version."""

    version: int = DEFAULT_VERSION

    @property
    def kind(self) -> FbxFormatKind:
        """Return `FbxFormatKind.BINARY`."""
        return FbxFormatKind.BINARY


@dataclass(frozen=True, slots=True)
class Ascii:
    """ASCII (textual) FBX."""

    @property
    def kind(self) -> FbxFormatKind:
        """Return `FbxFormatKind.ASCII`."""
        return FbxFormatKind.ASCII


FbxFormatType = Union[Binary, Ascii]


def format_type_for(kind: FbxFormatKind, version: int | None = None) -> FbxFormatType:
    """Build the format variant for ``kind``.

    Args:
        kind (FbxFormatKind): The requested encoding.
        version (int | None): Binary FBX version; ignored for ASCII. Defaults to 7400.

    Returns:
        FbxFormatType: ``Binary(version)`` or ``Ascii()``.
    """
    if kind is FbxFormatKind.BINARY:
        return Binary(DEFAULT_VERSION if version is None else version)
    return Ascii()
