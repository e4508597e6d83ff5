"""
Naming conventions derived from a model name.
"""

import re
from dataclasses import dataclass
from typing import Optional


def upper_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def pluralize(word: str) -> str:
    """Naive English plural, enough for identifiers."""
    if not word:
        return word
    if re.search(r"[^aeiou]y$", word, flags=re.IGNORECASE):
        return word[:-1] + "ies"
    if re.search(r"(s|x|z|ch|sh)$", word, flags=re.IGNORECASE):
        return word + "es"
    return word + "s"


@dataclass(frozen=True)
class Namings:
    singular: str
    plural: str
    capital_singular: str
    capital_plural: str

    @classmethod
    def from_name(cls, name: str, plural: Optional[str] = None) -> "Namings":
        singular = name[:1].lower() + name[1:]
        plural = plural or pluralize(singular)
        return cls(
            singular=singular,
            plural=plural,
            capital_singular=upper_first(singular),
            capital_plural=upper_first(plural),
        )
