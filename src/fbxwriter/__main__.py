# topmark:header:start
#
#   project      : FbxWriter
#   file         : __main__.py
#   file_relpath : src/fbxwriter/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running FbxWriter via ``python -m fbxwriter``.

Delegates to :func:`fbxwriter.cli.main.cli`, the same entry point as the
``fbxwriter`` console script.

Examples:
    Encode a JSON node tree to binary FBX::

        python -m fbxwriter encode scene.json -o scene.fbx
"""

from __future__ import annotations

from fbxwriter.cli.main import cli

if __name__ == "__main__":
    cli()
