# topmark:header:start
#
#   project      : FbxWriter
#   file         : keys.py
#   file_relpath : src/fbxwriter/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for FbxWriter configuration.

Keys defined here are external configuration API: renaming or removing one is
a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys.

    The emitter table lives at ``[emitter]`` in ``fbxwriter.toml`` and at
    ``[tool.fbxwriter.emitter]`` in ``pyproject.toml``.
    """

    # [emitter]
    SECTION_EMITTER: Final[str] = "emitter"

    KEY_IGNORE_MINOR_ERRORS: Final[str] = "ignore_minor_errors"
    KEY_COMPRESS_ARRAYS: Final[str] = "compress_arrays"
    KEY_ARRAY_COMPRESSION_THRESHOLD: Final[str] = "array_compression_threshold"
