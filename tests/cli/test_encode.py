# topmark:header:start
#
#   project      : FbxWriter
#   file         : test_encode.py
#   file_relpath : tests/cli/test_encode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `fbxwriter encode`.

Covers output destinations (default path, explicit file, stdout), input from
stdin, format and version selection, the comment leniency flag and its config
file equivalent, and the exit codes of every failure class.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from fbxwriter.cli.exit_codes import ExitCode
from fbxwriter.writer.encoders.binary import ARRAY_ENCODING_RAW, ARRAY_ENCODING_ZLIB
from fbxwriter.writer.properties import F64, I32, I64, I32Array, String
from tests.cli.conftest import (
    assert_DATA_ERROR,
    assert_FILE_NOT_FOUND,
    assert_IO_ERROR,
    assert_SUCCESS,
    run_cli_in,
)
from tests.conftest import mark_cli, mark_integration, parametrize
from tests.fbx_reader import read_fbx

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

SIMPLE_DOC: dict[str, Any] = {"nodes": [{"name": "A", "properties": [1]}]}

SCENE_DOC: dict[str, Any] = {
    "version": 7400,
    "nodes": [
        {
            "name": "Objects",
            "children": [
                {
                    "name": "Model",
                    "properties": [
                        {"type": "i64", "value": 1000},
                        "Cube",
                        {"type": "f64", "value": 2},
                    ],
                },
            ],
        },
    ],
}

COMMENT_DOC: dict[str, Any] = {
    "nodes": [
        {"comment": "exported by hand"},
        {"name": "A", "properties": [1]},
    ]
}


def _write_doc(tmp_path: Path, doc: dict[str, Any], name: str = "in.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(doc), encoding="utf-8")
    return path


# --- Outputs -----------------------------------------------------------------------


@mark_cli
@mark_integration
def test_encode_default_output_path(tmp_path: Path) -> None:
    """Without -o, the output is written next to the input with an .fbx suffix."""
    _write_doc(tmp_path, SIMPLE_DOC)
    result: Result = run_cli_in(tmp_path, ["encode", "in.json"])

    assert_SUCCESS(result)
    out = tmp_path / "in.fbx"
    data = out.read_bytes()
    assert len(data) == 220
    assert "Wrote 220 bytes (Binary FBX) to in.fbx" in result.output
    (node,) = read_fbx(data).nodes
    assert node.name == "A"
    assert node.properties == [I32(1)]


@mark_cli
@mark_integration
def test_encode_nested_scene(tmp_path: Path) -> None:
    _write_doc(tmp_path, SCENE_DOC)
    result = run_cli_in(tmp_path, ["encode", "in.json", "-o", "scene.fbx"])

    assert_SUCCESS(result)
    doc = read_fbx((tmp_path / "scene.fbx").read_bytes())
    assert doc.version == 7400
    (objects,) = doc.nodes
    (model,) = objects.children
    assert model.properties == [I64(1000), String("Cube"), F64(2.0)]


@mark_cli
def test_encode_to_stdout(tmp_path: Path) -> None:
    """``-o -`` writes the document bytes to stdout and nothing else."""
    _write_doc(tmp_path, SIMPLE_DOC)
    result = run_cli_in(tmp_path, ["encode", "in.json", "-o", "-"])

    assert_SUCCESS(result)
    assert read_fbx(result.stdout_bytes).nodes[0].name == "A"
    assert not (tmp_path / "in.fbx").exists()


@mark_cli
def test_encode_from_stdin(tmp_path: Path) -> None:
    """An input of '-' reads stdin and defaults to stdout."""
    result = run_cli_in(tmp_path, ["encode", "-"], input_text=json.dumps(SIMPLE_DOC))

    assert_SUCCESS(result)
    assert len(result.stdout_bytes) == 220


@mark_cli
def test_encode_quiet_suppresses_summary(tmp_path: Path) -> None:
    _write_doc(tmp_path, SIMPLE_DOC)
    result = run_cli_in(tmp_path, ["-q", "encode", "in.json"])

    assert_SUCCESS(result)
    assert result.output == ""
    assert (tmp_path / "in.fbx").is_file()


# --- Format and version --------------------------------------------------------------


@mark_cli
@parametrize(
    ("argv_extra", "doc_version", "expected"),
    [
        ([], None, 7400),
        ([], 7500, 7500),
        (["--fbx-version", "7500"], None, 7500),
        (["--fbx-version", "7400"], 7500, 7400),
    ],
)
def test_encode_version_selection(
    tmp_path: Path,
    argv_extra: list[str],
    doc_version: int | None,
    expected: int,
) -> None:
    """The flag wins over the document, which wins over the 7400 default."""
    doc = dict(SIMPLE_DOC)
    if doc_version is not None:
        doc["version"] = doc_version
    _write_doc(tmp_path, doc)
    result = run_cli_in(tmp_path, ["encode", "in.json", *argv_extra])

    assert_SUCCESS(result)
    assert read_fbx((tmp_path / "in.fbx").read_bytes()).version == expected


@mark_cli
def test_encode_unsupported_version(tmp_path: Path) -> None:
    _write_doc(tmp_path, SIMPLE_DOC)
    result = run_cli_in(tmp_path, ["encode", "in.json", "--fbx-version", "6100"])

    assert_DATA_ERROR(result)
    assert "unsupported FBX version: 6100" in result.output
    assert not (tmp_path / "in.fbx").exists()


@mark_cli
@parametrize("fmt", ["ascii", "text", "ASCII"])
def test_encode_ascii_is_unimplemented(tmp_path: Path, fmt: str) -> None:
    """ASCII output starts but cannot write nodes yet; no file is left behind."""
    _write_doc(tmp_path, SIMPLE_DOC)
    result = run_cli_in(tmp_path, ["encode", "in.json", "--format", fmt])

    assert_DATA_ERROR(result)
    assert "unimplemented" in result.output
    assert not (tmp_path / "in.fbx").exists()


@mark_cli
def test_encode_version_with_ascii_is_usage_error(tmp_path: Path) -> None:
    _write_doc(tmp_path, SIMPLE_DOC)
    result = run_cli_in(
        tmp_path, ["encode", "in.json", "--format", "ascii", "--fbx-version", "7400"]
    )

    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
    assert "only applies to binary FBX" in result.output


@mark_cli
def test_encode_unknown_format_is_usage_error(tmp_path: Path) -> None:
    _write_doc(tmp_path, SIMPLE_DOC)
    result = run_cli_in(tmp_path, ["encode", "in.json", "--format", "gltf"])

    assert result.exit_code == 2, result.output
    assert "is not one of binary, ascii" in result.output


# --- Comments and configuration ----------------------------------------------------------


@mark_cli
def test_encode_comment_fails_by_default(tmp_path: Path) -> None:
    _write_doc(tmp_path, COMMENT_DOC)
    result = run_cli_in(tmp_path, ["encode", "in.json"])

    assert_DATA_ERROR(result)
    assert "cannot be written" in result.output
    assert not (tmp_path / "in.fbx").exists()


@mark_cli
def test_encode_comment_dropped_with_flag(tmp_path: Path) -> None:
    _write_doc(tmp_path, COMMENT_DOC)
    result = run_cli_in(tmp_path, ["encode", "in.json", "--ignore-minor-errors"])

    assert_SUCCESS(result)
    (node,) = read_fbx((tmp_path / "in.fbx").read_bytes()).nodes
    assert node.name == "A"


@mark_cli
def test_encode_comment_leniency_from_config_file(tmp_path: Path) -> None:
    """A discovered fbxwriter.toml applies unless --no-config is given."""
    _write_doc(tmp_path, COMMENT_DOC)
    (tmp_path / "fbxwriter.toml").write_text(
        "[emitter]\nignore_minor_errors = true\n", encoding="utf-8"
    )

    assert_SUCCESS(run_cli_in(tmp_path, ["encode", "in.json"]))
    assert_DATA_ERROR(run_cli_in(tmp_path, ["encode", "in.json", "--no-config", "-o", "x.fbx"]))


@mark_cli
def test_encode_explicit_config_file(tmp_path: Path) -> None:
    _write_doc(tmp_path, COMMENT_DOC)
    (tmp_path / "lenient.toml").write_text(
        "[emitter]\nignore_minor_errors = true\n", encoding="utf-8"
    )
    result = run_cli_in(tmp_path, ["encode", "in.json", "--config", "lenient.toml"])
    assert_SUCCESS(result)


@mark_cli
def test_encode_missing_config_file(tmp_path: Path) -> None:
    _write_doc(tmp_path, SIMPLE_DOC)
    result = run_cli_in(tmp_path, ["encode", "in.json", "--config", "absent.toml"])
    assert_FILE_NOT_FOUND(result)


@mark_cli
@parametrize(
    ("argv_extra", "expected"),
    [
        ([], ARRAY_ENCODING_ZLIB),
        (["--no-compress"], ARRAY_ENCODING_RAW),
    ],
)
def test_encode_array_compression(tmp_path: Path, argv_extra: list[str], expected: int) -> None:
    doc = {"nodes": [{"name": "V", "properties": [{"type": "i32_array", "value": [0] * 100}]}]}
    _write_doc(tmp_path, doc)
    result = run_cli_in(tmp_path, ["encode", "in.json", *argv_extra])

    assert_SUCCESS(result)
    (node,) = read_fbx((tmp_path / "in.fbx").read_bytes()).nodes
    assert node.array_encodings == [expected]
    assert node.properties == [I32Array((0,) * 100)]


# --- Input errors ----------------------------------------------------------------


@mark_cli
def test_encode_missing_input(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["encode", "absent.json"])
    assert_FILE_NOT_FOUND(result)
    assert "absent.json" in result.output


@mark_cli
@parametrize(
    ("text", "fragment"),
    [
        ("{not json", "invalid JSON"),
        ("[]", "expected a JSON object"),
        ('{"format": "gltf"}', "unknown format"),
        ('{"version": "7400"}', "expected an integer"),
        ('{"nodes": [{"properties": []}]}', "nodes[0]"),
        ('{"nodes": [{"name": "A", "properties": [{"type": "u8", "value": 1}]}]}', "u8"),
        ('{"nodes": [{"name": "A", "properties": [null]}]}', "nodes[0].properties[0]"),
        (
            '{"nodes": [{"name": "A", "children": [{"name": "B", "children": 3}]}]}',
            "nodes[0].children[0].children",
        ),
        (
            r'{"nodes": [{"name": "M", "properties": ["\ud800"]}]}',
            "cannot encode property of type 'S'",
        ),
        (r'{"nodes": [{"name": "Mo\udcffdel"}]}', "invalid node name"),
        (
            '{"nodes": [{"name": "A", "properties": [{"type": "bool", "value": "false"}]}]}',
            "Bool expects a bool",
        ),
        (
            '{"nodes": [{"name": "A", "properties": [{"type": "string", "value": null}]}]}',
            "String expects a str",
        ),
    ],
)
def test_encode_invalid_document(tmp_path: Path, text: str, fragment: str) -> None:
    (tmp_path / "in.json").write_text(text, encoding="utf-8")
    result = run_cli_in(tmp_path, ["encode", "in.json"])

    assert_DATA_ERROR(result)
    assert fragment in result.output
    assert not (tmp_path / "in.fbx").exists()


@mark_cli
def test_encode_non_utf8_input(tmp_path: Path) -> None:
    (tmp_path / "in.json").write_bytes(b"\xff\xfe{}")
    assert_DATA_ERROR(run_cli_in(tmp_path, ["encode", "in.json"]))


@mark_cli
def test_encode_unwritable_output(tmp_path: Path) -> None:
    """A failing output write exits with IO_ERROR."""
    _write_doc(tmp_path, SIMPLE_DOC)
    result = run_cli_in(tmp_path, ["encode", "in.json", "-o", "no-such-dir/out.fbx"])

    assert_IO_ERROR(result)
    assert "Cannot write no-such-dir/out.fbx" in result.output
