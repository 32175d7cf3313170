# topmark:header:start
#
#   project      : FbxWriter
#   file         : __init__.py
#   file_relpath : src/fbxwriter/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``fbxwriter`` command group."""

from __future__ import annotations
