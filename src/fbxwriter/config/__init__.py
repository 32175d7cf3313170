# topmark:header:start
#
#   project      : FbxWriter
#   file         : __init__.py
#   file_relpath : src/fbxwriter/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for the FBX emitter.

- ``model``: the frozen `EmitterConfig` and its tri-state builder
  `MutableEmitterConfig`.
- ``io``: TOML loading and rendering (``fbxwriter.toml`` / ``pyproject.toml``).
- ``logging``: logger class, TRACE level and console setup.
"""

from __future__ import annotations

from fbxwriter.config.model import EmitterConfig, MutableEmitterConfig

__all__ = [
    "EmitterConfig",
    "MutableEmitterConfig",
]
