# topmark:header:start
#
#   project      : FbxWriter
#   file         : model.py
#   file_relpath : src/fbxwriter/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Emitter configuration model.

Design:
    * ``MutableEmitterConfig`` uses tri-state options (``None`` = unset) so that
      several sources (defaults, config files, CLI flags) can be merged without
      one source erasing explicit values from another.
    * ``EmitterConfig`` is the resolved, immutable runtime view. An emitter
      keeps the same ``EmitterConfig`` for its whole life.
    * New options are added as new named fields, never as free-form keys.

TOML mapping:

    [emitter]
    ignore_minor_errors = false
    compress_arrays = true
    array_compression_threshold = 128
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fbxwriter.config.keys import Toml
from fbxwriter.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from fbxwriter.config.logging import FbxLogger

logger: FbxLogger = get_logger(__name__)

DEFAULT_ARRAY_COMPRESSION_THRESHOLD: int = 128


@dataclass(frozen=True, slots=True)
class EmitterConfig:
    """Immutable emitter configuration.

    Attributes:
        ignore_minor_errors (bool): Downgrade events that the active encoding
            cannot represent (comments in binary FBX) from a hard failure to a
            logged no-op.
        compress_arrays (bool): zlib-compress array properties in binary FBX.
        array_compression_threshold (int): Minimum raw array payload size, in
            bytes, for compression to be attempted.
    """

    ignore_minor_errors: bool = False
    compress_arrays: bool = True
    array_compression_threshold: int = DEFAULT_ARRAY_COMPRESSION_THRESHOLD

    def __post_init__(self) -> None:
        if self.array_compression_threshold < 0:
            raise ValueError(
                f"array_compression_threshold must be >= 0, got {self.array_compression_threshold}"
            )

    def thaw(self) -> MutableEmitterConfig:
        """Return a mutable builder initialized from this config."""
        return MutableEmitterConfig(
            ignore_minor_errors=self.ignore_minor_errors,
            compress_arrays=self.compress_arrays,
            array_compression_threshold=self.array_compression_threshold,
        )

    def to_toml_table(self) -> dict[str, Any]:
        """Serialize all fields to a TOML-friendly dict."""
        return {
            Toml.KEY_IGNORE_MINOR_ERRORS: self.ignore_minor_errors,
            Toml.KEY_COMPRESS_ARRAYS: self.compress_arrays,
            Toml.KEY_ARRAY_COMPRESSION_THRESHOLD: self.array_compression_threshold,
        }


@dataclass
class MutableEmitterConfig:
    """Mutable builder for `EmitterConfig`, merged in a **last-wins** manner.

    Attributes:
        ignore_minor_errors (bool | None): See `EmitterConfig`. `None` means "inherit".
        compress_arrays (bool | None): See `EmitterConfig`. `None` means "inherit".
        array_compression_threshold (int | None): See `EmitterConfig`.
            `None` means "inherit".
    """

    ignore_minor_errors: bool | None = None
    compress_arrays: bool | None = None
    array_compression_threshold: int | None = None

    def merge_with(self, other: MutableEmitterConfig) -> MutableEmitterConfig:
        """Return a new builder by applying ``other`` over ``self``.

        ``None`` fields in ``other`` do not override explicit values in ``self``.

        Args:
            other (MutableEmitterConfig): The config whose values override current ones.

        Returns:
            MutableEmitterConfig: Merged config.
        """

        def pick(current: Any, override: Any) -> Any:
            return override if override is not None else current

        return MutableEmitterConfig(
            ignore_minor_errors=pick(self.ignore_minor_errors, other.ignore_minor_errors),
            compress_arrays=pick(self.compress_arrays, other.compress_arrays),
            array_compression_threshold=pick(
                self.array_compression_threshold, other.array_compression_threshold
            ),
        )

    def resolve(self, base: EmitterConfig) -> EmitterConfig:
        """Resolve unset fields against ``base``.

        Args:
            base (EmitterConfig): Provides values for unset fields.

        Returns:
            EmitterConfig: A fully-resolved immutable config.
        """
        return EmitterConfig(
            ignore_minor_errors=(
                base.ignore_minor_errors
                if self.ignore_minor_errors is None
                else self.ignore_minor_errors
            ),
            compress_arrays=(
                base.compress_arrays if self.compress_arrays is None else self.compress_arrays
            ),
            array_compression_threshold=(
                base.array_compression_threshold
                if self.array_compression_threshold is None
                else self.array_compression_threshold
            ),
        )

    def freeze(self) -> EmitterConfig:
        """Freeze against the default `EmitterConfig`."""
        return self.resolve(EmitterConfig())

    @classmethod
    def from_toml_table(cls, tbl: Mapping[str, Any] | None) -> MutableEmitterConfig:
        """Create a builder from an ``[emitter]`` TOML table.

        Unspecified keys stay ``None``. Values of the wrong type are logged and
        ignored; unknown keys are logged and ignored.

        Args:
            tbl (Mapping[str, Any] | None): The ``[emitter]`` table.

        Returns:
            MutableEmitterConfig: Parsed config.
        """
        if not tbl:
            return cls()

        known = {
            Toml.KEY_IGNORE_MINOR_ERRORS,
            Toml.KEY_COMPRESS_ARRAYS,
            Toml.KEY_ARRAY_COMPRESSION_THRESHOLD,
        }
        for key in tbl:
            if key not in known:
                logger.warning("Ignoring unknown [%s] key: %s", Toml.SECTION_EMITTER, key)

        def pick_bool(key: str) -> bool | None:
            if key not in tbl:
                return None
            value = tbl[key]
            if isinstance(value, bool):
                return value
            logger.warning(
                "Ignoring [%s] %s: expected a boolean, got %r", Toml.SECTION_EMITTER, key, value
            )
            return None

        def pick_threshold(key: str) -> int | None:
            if key not in tbl:
                return None
            value = tbl[key]
            if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
                return value
            logger.warning(
                "Ignoring [%s] %s: expected a non-negative integer, got %r",
                Toml.SECTION_EMITTER,
                key,
                value,
            )
            return None

        return cls(
            ignore_minor_errors=pick_bool(Toml.KEY_IGNORE_MINOR_ERRORS),
            compress_arrays=pick_bool(Toml.KEY_COMPRESS_ARRAYS),
            array_compression_threshold=pick_threshold(Toml.KEY_ARRAY_COMPRESSION_THRESHOLD),
        )

    def to_toml_table(self) -> dict[str, Any]:
        """Serialize only explicitly set keys to a TOML-friendly dict."""
        out: dict[str, Any] = {}
        if self.ignore_minor_errors is not None:
            out[Toml.KEY_IGNORE_MINOR_ERRORS] = self.ignore_minor_errors
        if self.compress_arrays is not None:
            out[Toml.KEY_COMPRESS_ARRAYS] = self.compress_arrays
        if self.array_compression_threshold is not None:
            out[Toml.KEY_ARRAY_COMPRESSION_THRESHOLD] = self.array_compression_threshold
        return out
