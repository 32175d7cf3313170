# topmark:header:start
#
#   project      : FbxWriter
#   file         : enum_mixins.py
#   file_relpath : src/fbxwriter/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Enum utilities: stable machine keys with human labels and parse aliases.

Example:
    ```python
    class Fruit(KeyedStrEnum):
        APPLE = ("apple", "An apple", ("pomme",))

    assert Fruit.parse("Pomme") is Fruit.APPLE
    assert Fruit.APPLE.label == "An apple"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string for comparison."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a member with key, label, and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label.
            aliases (Iterable[str]): Optional aliases for parsing.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return str(self.value)

    @classmethod
    def keys(cls) -> list[str]:
        """Return the machine keys of all members, in definition order."""
        return [m.key for m in cls]

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into an enum member.

        Matches the key, the member name, or any alias. Matching is
        case-insensitive and treats '-' and ' ' as '_'.
        """
        if raw is None:
            return None
        token: str = _norm_token(raw)

        for m in cls:
            if token in (_norm_token(m.value), _norm_token(m.name)):
                return m
            if any(token == _norm_token(a) for a in m.aliases):
                return m
        return None
