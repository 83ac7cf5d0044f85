# topmark:header:start
#
#   project      : Benediction
#   file         : enum_mixins.py
#   file_relpath : src/benediction/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String enums whose members carry a machine key, a label and parse aliases.

Members are declared as ``NAME = (key, label)`` or ``NAME = (key, label, aliases)``
and compare equal to their key:

```python
class Color(KeyedStrEnum):
    RED = ("red", "Warm color", ("crimson",))

assert Color.RED == "red"
assert Color.parse("Crimson") is Color.RED
```
"""

from __future__ import annotations

import re
from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_K = TypeVar("_K", bound="KeyedStrEnum")

_SEPARATORS = re.compile(r"[\s_-]+")


def _norm_token(token: str) -> str:
    """Fold case and treat runs of ``-``, ``_`` and whitespace as one ``_``."""
    return _SEPARATORS.sub("_", token.strip()).lower()


class KeyedStrEnum(str, Enum):
    """``str`` enum keyed by its value, with a ``label`` and optional ``aliases``."""

    label: str
    aliases: tuple[str, ...]

    def __new__(cls: type[_K], key: str, label: str, aliases: Iterable[str] = ()) -> _K:
        member: _K = str.__new__(cls, key)
        member._value_ = key
        member.label = label
        member.aliases = tuple(aliases)
        return member

    def __str__(self) -> str:
        return self.key

    @property
    def key(self) -> str:
        """The stable machine key (the member's value)."""
        return str(self._value_)

    def tokens(self) -> set[str]:
        """Return the normalized tokens `parse` accepts for this member."""
        return {_norm_token(t) for t in (self.key, self.name, *self.aliases)}

    @classmethod
    def parse(cls: type[_K], raw: str | None) -> _K | None:
        """Return the member whose key, name or alias matches ``raw``.

        Matching ignores case and separator style, so ``"notFunc"``,
        ``"NOT_FUNC"`` and ``"not-func"`` are all accepted where declared.

        Args:
            raw (str | None): Token to look up.

        Returns:
            _K | None: The member, or ``None`` if ``raw`` is ``None`` or unknown.
        """
        if raw is None:
            return None
        wanted: str = _norm_token(raw)
        return next((member for member in cls if wanted in member.tokens()), None)
