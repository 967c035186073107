"""Expansion of ``$`` variable references in command words."""

from __future__ import annotations

import re

from minish.environment import EXIT_STATUS_KEY, Environment

# A reference is a dollar sign followed by "?" or by a run of ASCII letters.
# Digits and underscores end a name.
_REFERENCE = re.compile(r"\$(\?|[A-Za-z]*)")


def expand(text: str, env: Environment) -> str:
    """Replace every ``$NAME`` and ``$?`` in ``text`` with its value.

    Names are made of ASCII letters only; anything after them is kept as
    written. ``$?`` expands to the last exit status. A variable that is not
    set expands to nothing. A ``$`` at the very end of the text stays as it
    is, while a ``$`` followed by any other character is dropped.
    """

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name == "?":
            return env.get(EXIT_STATUS_KEY) or ""
        if not name:
            return "$" if match.end() == len(text) else ""
        return env.get(name) or ""

    return _REFERENCE.sub(replace, text)