# topmark:header:start
#
#   project      : FbxWriter
#   file         : encode.py
#   file_relpath : src/fbxwriter/cli/commands/encode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""FbxWriter `encode` command.

Reads a JSON node tree (see `fbxwriter.cli.document`) and writes it as FBX.

The document is encoded into memory first and only written to the output once
the whole event sequence succeeded, so a failed run leaves no partial file.
"""

from __future__ import annotations

import io
from pathlib import Path

import click

from fbxwriter.cli.cli_types import KeyedEnumParam
from fbxwriter.cli.document import DocumentError, InputDocument, parse_document
from fbxwriter.cli.errors import (
    FbxCliIOError,
    FbxDataError,
    FbxFileNotFoundError,
    FbxUsageError,
    from_write_error,
)
from fbxwriter.cli.options import (
    common_config_options,
    get_effective_verbosity,
    resolve_config_paths,
)
from fbxwriter.common import FbxFormatKind, format_type_for
from fbxwriter.config.io import load_config
from fbxwriter.config.logging import get_logger
from fbxwriter.config.model import EmitterConfig, MutableEmitterConfig
from fbxwriter.writer.emitter import Emitter
from fbxwriter.writer.errors import FbxWriteError

logger = get_logger(__name__)

STDIO_PATH: str = "-"


def _read_input(input_path: str) -> str:
    if input_path == STDIO_PATH:
        return click.get_text_stream("stdin").read()
    path = Path(input_path)
    if not path.exists():
        raise FbxFileNotFoundError(f"Input file not found: {input_path}")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise FbxDataError(f"Input is not UTF-8 text: {input_path}: {exc}") from exc
    except OSError as exc:
        raise FbxCliIOError(f"Cannot read {input_path}: {exc}") from exc


def _default_output(input_path: str) -> str:
    if input_path == STDIO_PATH:
        return STDIO_PATH
    return str(Path(input_path).with_suffix(".fbx"))


def _encode(
    doc: InputDocument,
    kind: FbxFormatKind,
    version: int | None,
    cfg: EmitterConfig,
) -> bytes:
    buffer = io.BytesIO()
    emitter = Emitter(cfg)
    try:
        for event in doc.events(format_type_for(kind, version)):
            emitter.write(buffer, event)
    except DocumentError as exc:
        raise FbxDataError(f"Invalid input document: {exc}") from exc
    except FbxWriteError as exc:
        raise from_write_error(exc) from exc
    return buffer.getvalue()


def _write_output(output_path: str, data: bytes) -> None:
    if output_path == STDIO_PATH:
        stream = click.get_binary_stream("stdout")
        stream.write(data)
        stream.flush()
        return
    try:
        Path(output_path).write_bytes(data)
    except OSError as exc:
        raise FbxCliIOError(f"Cannot write {output_path}: {exc}") from exc


@click.command(
    name="encode",
    help="Encode a JSON node tree (INPUT, or '-' for stdin) as an FBX file.",
)
@click.argument(
    "input_path",
    metavar="INPUT",
    type=click.Path(dir_okay=False, allow_dash=True),
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, allow_dash=True),
    default=None,
    help="Output file ('-' for stdout). Defaults to INPUT with an .fbx suffix.",
)
@click.option(
    "--format",
    "format_kind",
    type=KeyedEnumParam(FbxFormatKind),
    default=None,
    help="FBX encoding. Overrides the document's 'format' (default: binary).",
)
@click.option(
    "--fbx-version",
    type=int,
    default=None,
    help="Binary FBX version, e.g. 7400 or 7500. Overrides the document's 'version'.",
)
@click.option(
    "--ignore-minor-errors",
    is_flag=True,
    default=False,
    help="Drop events the encoding cannot represent (comments in binary FBX) with a warning.",
)
@click.option(
    "--no-compress",
    is_flag=True,
    default=False,
    help="Store array properties uncompressed.",
)
@common_config_options
@click.pass_context
def encode_command(
    ctx: click.Context,
    *,
    input_path: str,
    output_path: str | None,
    format_kind: FbxFormatKind | None,
    fbx_version: int | None,
    ignore_minor_errors: bool,
    no_compress: bool,
    config_files: tuple[str, ...],
    no_config: bool,
) -> None:
    """Encode a JSON document as FBX."""
    overrides = MutableEmitterConfig(
        ignore_minor_errors=True if ignore_minor_errors else None,
        compress_arrays=False if no_compress else None,
    )
    cfg: EmitterConfig = load_config(
        resolve_config_paths(config_files, no_config=no_config),
        overrides=overrides,
    )
    logger.debug("Effective emitter config: %s", cfg)

    try:
        doc: InputDocument = parse_document(_read_input(input_path))
    except DocumentError as exc:
        raise FbxDataError(f"Invalid input document: {exc}") from exc

    kind: FbxFormatKind = format_kind or doc.format_kind or FbxFormatKind.BINARY
    if kind is FbxFormatKind.ASCII and fbx_version is not None:
        raise FbxUsageError("--fbx-version only applies to binary FBX")
    version: int | None = fbx_version if fbx_version is not None else doc.version
    data: bytes = _encode(doc, kind, version, cfg)

    destination: str = output_path or _default_output(input_path)
    _write_output(destination, data)

    if destination != STDIO_PATH and get_effective_verbosity(ctx) >= 0:
        click.echo(f"Wrote {len(data)} bytes ({kind.label}) to {destination}")
