# topmark:header:start
#
#   project      : FbxWriter
#   file         : constants.py
#   file_relpath : src/fbxwriter/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FbxWriter Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

FBXWRITER_VERSION: str = get_version("fbxwriter")

# Environment variable consulted by `fbxwriter.config.logging.setup_logging()`:
LOG_LEVEL_ENV_VAR: str = "FBXWRITER_LOG_LEVEL"

# Standalone config file name and the table used inside pyproject.toml:
CONFIG_FILE_NAME: str = "fbxwriter.toml"
PYPROJECT_TOOL_SECTION: str = "tool.fbxwriter"
