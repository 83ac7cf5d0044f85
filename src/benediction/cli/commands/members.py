# topmark:header:start
#
#   project      : Benediction
#   file         : members.py
#   file_relpath : src/benediction/cli/commands/members.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Benediction `members` command.

Lists the enumerable members of an importable object exactly as ``bless``, ``mixin``
and ``assert_implements`` see them: constructors are resolved to their prototype,
own members come first, then inherited ones.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from benediction.cli.errors import BenedictionImportError
from benediction.cli.formats import OutputFormat
from benediction.cli.options import format_option
from benediction.config.logging import get_logger
from benediction.core.properties import (
    enumerable_properties,
    has_own,
    lookup,
    obj_or_prototype,
    own_properties,
)
from benediction.utils.introspection import describe_kind, format_callable_pretty, import_target

if TYPE_CHECKING:
    from benediction.cli.console import ConsoleLike

logger = get_logger(__name__)


def collect_members(obj: Any, *, own_only: bool = False) -> list[dict[str, Any]]:
    """Describe the enumerable members of ``obj``.

    Args:
        obj (Any): Object, class or constructor to inspect.
        own_only (bool): If True, leave out inherited members.

    Returns:
        list[dict[str, Any]]: One ``{"name", "kind", "own"}`` record per member.
    """
    bag: Any = obj_or_prototype(obj)
    names: list[str] = own_properties(bag) if own_only else enumerable_properties(bag)
    return [
        {"name": name, "kind": describe_kind(lookup(bag, name)), "own": has_own(bag, name)}
        for name in names
    ]


@click.command(
    name="members",
    help="List the enumerable members of TARGET (package.module:attr).",
)
@click.argument("target")
@click.option("--own-only", is_flag=True, default=False, help="Leave out inherited members.")
@format_option
def members_command(*, target: str, own_only: bool, output_format: OutputFormat) -> None:
    """List the enumerable members of an importable object.

    Args:
        target (str): Import target (``package.module:attr``).
        own_only (bool): Leave out inherited members.
        output_format (OutputFormat): Plain text or JSON.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = ctx.obj["console"]
    verbose: int = ctx.obj.get("verbosity_level", 0)

    try:
        obj: Any = import_target(target)
    except ImportError as exc:
        raise BenedictionImportError(str(exc)) from exc

    records: list[dict[str, Any]] = collect_members(obj, own_only=own_only)
    logger.debug("%s: %d members", target, len(records))

    if output_format == OutputFormat.JSON:
        console.print(json.dumps({"target": target, "members": records}, indent=2))
        return

    if not records:
        console.print(f"{target}: no enumerable members")
        return
    width: int = max(len(r["name"]) for r in records)
    bag: Any = obj_or_prototype(obj)
    for record in records:
        line: str = (
            f"{console.styled(record['name'].ljust(width), bold=True)}  "
            f"{record['kind']:<10}  {'own' if record['own'] else 'inherited'}"
        )
        if verbose > 0 and record["kind"] == "callable":
            line += f"  {format_callable_pretty(lookup(bag, record['name']))}"
        console.print(line)
