# topmark:header:start
#
#   project      : FbxWriter
#   file         : __init__.py
#   file_relpath : src/fbxwriter/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across FbxWriter.

Included modules:

- ``enum_mixins``
  Typing-friendly Enum helpers (stable keys, labels, alias parsing) used by
  the format vocabulary and the CLI option parsers.

This package has no third-party dependencies and no import-time side effects.
"""

from __future__ import annotations
