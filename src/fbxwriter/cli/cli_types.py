# topmark:header:start
#
#   project      : FbxWriter
#   file         : cli_types.py
#   file_relpath : src/fbxwriter/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click parameter types shared by FbxWriter commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

import click

from fbxwriter.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

KE = TypeVar("KE", bound=KeyedStrEnum)


class KeyedEnumParam(click.ParamType, Generic[KE]):
    """Click parameter that parses a `KeyedStrEnum` by key, name or alias."""

    def __init__(self, enum_cls: type[KE]) -> None:
        self.enum_cls: type[KE] = enum_cls
        self.name = enum_cls.__name__

    def get_metavar(self, param: click.Parameter, *args: Any) -> str:
        """Return ``[key1|key2|...]`` for help output."""
        return "[" + "|".join(self.enum_cls.keys()) + "]"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> KE:
        """Convert a token to an enum member, failing with a usage error."""
        if isinstance(value, self.enum_cls):
            return value
        member: KE | None = self.enum_cls.parse(str(value))
        if member is None:
            self.fail(
                f"{value!r} is not one of {', '.join(self.enum_cls.keys())}",
                param,
                ctx,
            )
        return member

    def shell_complete(
        self, ctx: click.Context, param: click.Parameter, incomplete: str
    ) -> list[CompletionItem]:
        """Complete enum keys."""
        from click.shell_completion import CompletionItem

        return [CompletionItem(k) for k in self.enum_cls.keys() if k.startswith(incomplete)]
