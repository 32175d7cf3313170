# topmark:header:start
#
#   project      : FbxWriter
#   file         : __init__.py
#   file_relpath : src/fbxwriter/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command-line interface for FbxWriter, built with Click.

The entry point is `fbxwriter.cli.main.cli`, exposed as the ``fbxwriter``
console script and as ``python -m fbxwriter``.
"""

from __future__ import annotations
