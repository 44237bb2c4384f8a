"""Splits PascalCase type names into words."""

import re

from eventable.events.exceptions import MalformedIdentifierError

# Patterns run over a shape string: "A" uppercase, "a" other letter, "0" digit.
_ACRONYM = re.compile(r"A+")
_WORD = re.compile(
    r"A+0*(?=Aa|$)"  # acronym run: HTTP in HTTPServer
    r"|A[a0]*"
    r"|[a0]+"
)


def tokenize(identifier: str) -> list[str]:
    """Split a PascalCase identifier into its word fragments.

    Letters are classified with ``str.isupper``/``str.isalpha``, so
    non-ASCII names split the same way: "ÜberweisungErhalten" gives
    ["Überweisung", "Erhalten"].

    Args:
        identifier: Non-empty identifier, e.g. "HTTPServer" or "OrderPlaced".

    Returns:
        Fragments in order, case preserved: ["HTTP", "Server"].

    Raises:
        MalformedIdentifierError: if the identifier holds no letters or digits.
    """
    shape = "".join(_char_class(char) for char in identifier)
    if _ACRONYM.fullmatch(shape):
        return [identifier]
    words = [identifier[m.start():m.end()] for m in _WORD.finditer(shape)]
    if not words:
        raise MalformedIdentifierError(f"Cannot tokenize identifier {identifier!r}")
    return words


def _char_class(char: str) -> str:
    if char.isupper():
        return "A"
    if char.isalpha():
        return "a"
    if char.isalnum():
        return "0"
    return "_"
