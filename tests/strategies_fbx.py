# topmark:header:start
#
#   project      : FbxWriter
#   file         : strategies_fbx.py
#   file_relpath : tests/strategies_fbx.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for typed property values and node trees.

Generated floats are finite and, for single-precision types, representable
as float32, so that a written document reads back to equal values.
"""

from __future__ import annotations

from typing import Any

from hypothesis import strategies as st

from fbxwriter.writer.events import FbxNode
from fbxwriter.writer.properties import (
    F32,
    F64,
    I16,
    I16_MAX,
    I16_MIN,
    I32,
    I32_MAX,
    I32_MIN,
    I64,
    I64_MAX,
    I64_MIN,
    Bool,
    BoolArray,
    F32Array,
    F64Array,
    I32Array,
    I64Array,
    PropertyValue,
    Raw,
    String,
)

MAX_ARRAY_LEN: int = 64

f32s: st.SearchStrategy[float] = st.floats(width=32, allow_nan=False, allow_infinity=False)
f64s: st.SearchStrategy[float] = st.floats(allow_nan=False, allow_infinity=False)
i32s: st.SearchStrategy[int] = st.integers(I32_MIN, I32_MAX)
i64s: st.SearchStrategy[int] = st.integers(I64_MIN, I64_MAX)

# Node names are at most 255 UTF-8 bytes; 60 characters of up to 4 bytes each fit.
node_names: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",)),
    max_size=60,
)


def _array(elements: st.SearchStrategy[Any]) -> st.SearchStrategy[tuple[Any, ...]]:
    return st.lists(elements, max_size=MAX_ARRAY_LEN).map(tuple)


property_values: st.SearchStrategy[PropertyValue] = st.one_of(
    st.builds(Bool, st.booleans()),
    st.builds(I16, st.integers(I16_MIN, I16_MAX)),
    st.builds(I32, i32s),
    st.builds(I64, i64s),
    st.builds(F32, f32s),
    st.builds(F64, f64s),
    st.builds(BoolArray, _array(st.booleans())),
    st.builds(I32Array, _array(i32s)),
    st.builds(I64Array, _array(i64s)),
    st.builds(F32Array, _array(f32s)),
    st.builds(F64Array, _array(f64s)),
    st.builds(String, st.text(alphabet=st.characters(blacklist_categories=("Cs",)))),
    st.builds(Raw, st.binary(max_size=64)),
)


def _node(children: st.SearchStrategy[tuple[FbxNode, ...]]) -> st.SearchStrategy[FbxNode]:
    return st.builds(
        FbxNode,
        node_names,
        st.lists(property_values, max_size=5).map(tuple),
        children,
    )


leaf_nodes: st.SearchStrategy[FbxNode] = _node(st.just(()))

node_trees: st.SearchStrategy[FbxNode] = st.recursive(
    leaf_nodes,
    lambda inner: _node(st.lists(inner, max_size=4).map(tuple)),
    max_leaves=12,
)

documents: st.SearchStrategy[list[FbxNode]] = st.lists(node_trees, max_size=4)
