# phraseforge/core/domain/morphology/english.py
"""
ENGLISH MORPHOLOGY LAYER
------------------------

Noun pluralization for passphrase nouns.

Resolution order:
1. Uncountable nouns are returned unchanged ("sheep", "news").
2. Nouns that look irregular but take a plain "-s" ("human", "safe").
3. Irregular lookup, matched on the word ending so compounds inflect
   their head ("child" -> "children", "grandchild" -> "grandchildren").
4. Ordered suffix rules ("city" -> "cities", "wharf" -> "wharves").
5. Default: append "-s".

Leading capitalisation of the input is preserved.
"""

from __future__ import annotations

import re
from typing import Dict, FrozenSet, List, Optional, Pattern, Tuple

UNCOUNTABLES: FrozenSet[str] = frozenset({
    "aircraft", "bison", "deer", "equipment", "fish", "information",
    "moose", "money", "news", "offspring", "police", "rice", "salmon",
    "series", "sheep", "species", "swine", "trout",
})

# Endings that would otherwise hit an irregular or the -f/-fe rule.
REGULAR_PLURALS: FrozenSet[str] = frozenset({
    "brahman", "caiman", "cayman", "desman", "dragoman", "german",
    "human", "ottoman", "roman", "shaman", "talisman", "walkman",
    "cafe", "carafe", "safe", "strafe",
    "golf", "gulf", "serf", "surf",
})

IRREGULARS: Dict[str, str] = {
    # Vowel change / archaic endings
    "man": "men",
    "woman": "women",
    "child": "children",
    "person": "people",
    "ox": "oxen",
    "foot": "feet",
    "tooth": "teeth",
    "goose": "geese",
    "mouse": "mice",
    "louse": "lice",
    "die": "dice",
    # -f / -fe -> -ves
    "calf": "calves",
    "dwarf": "dwarves",
    "elf": "elves",
    "half": "halves",
    "hoof": "hooves",
    "knife": "knives",
    "leaf": "leaves",
    "life": "lives",
    "loaf": "loaves",
    "scarf": "scarves",
    "self": "selves",
    "sheaf": "sheaves",
    "shelf": "shelves",
    "thief": "thieves",
    "wife": "wives",
    "wolf": "wolves",
    # Latin / Greek
    "criterion": "criteria",
    "datum": "data",
    "medium": "media",
    "phenomenon": "phenomena",
    "appendix": "appendices",
    "index": "indices",
    "matrix": "matrices",
    "vertex": "vertices",
}

# Irregulars that are common endings of unrelated words ("box", "birdie",
# "blouse", "mongoose") only apply to the whole word.
WHOLE_WORD_IRREGULARS: FrozenSet[str] = frozenset({"ox", "die", "louse", "goose"})

# Longest ending first: "bookshelf" resolves through "shelf", not "elf".
_IRREGULAR_ENDINGS: List[str] = sorted(IRREGULARS, key=len, reverse=True)

# (pattern, replacement), first match wins.
SUFFIX_RULES: List[Tuple[Pattern[str], str]] = [
    (re.compile(r"(quiz)$"), r"\1zes"),
    (re.compile(r"(octop|cact|fung|nucle|radi|stimul|alumn|syllab)us$"), r"\1i"),
    (re.compile(r"sis$"), "ses"),
    (re.compile(r"([^aeiouy]|qu)y$"), r"\1ies"),
    (re.compile(r"(buffal|ech|her|mosquit|potat|tomat|torped|vet|volcan)o$"), r"\1oes"),
    (re.compile(r"(?:([^f])fe|([lr])f)$"), r"\1\2ves"),
    (re.compile(r"(s|sh|ch|x|z)$"), r"\1es"),
]


def _preserve_capitalisation(original: str, inflected: str) -> str:
    """
    Preserve leading capitalisation from the original noun.

    Example:
        original='Child', inflected='children' -> 'Children'
    """
    if original[0].isupper() and inflected:
        return inflected[0].upper() + inflected[1:]
    return inflected


def _irregular_plural(lower: str) -> Optional[str]:
    for singular in _IRREGULAR_ENDINGS:
        if lower == singular or (
            singular not in WHOLE_WORD_IRREGULARS and lower.endswith(singular)
        ):
            return lower[: len(lower) - len(singular)] + IRREGULARS[singular]
    return None


def pluralize(noun: str) -> str:
    """
    Returns the English plural of a singular noun.

    Empty input is returned unchanged.
    """
    if not noun:
        return noun

    lower = noun.lower()

    if lower in UNCOUNTABLES:
        return noun

    if lower in REGULAR_PLURALS:
        return noun + "s"

    irregular = _irregular_plural(lower)
    if irregular is not None:
        return _preserve_capitalisation(noun, irregular)

    for pattern, replacement in SUFFIX_RULES:
        if pattern.search(lower):
            return _preserve_capitalisation(noun, pattern.sub(replacement, lower, count=1))

    return noun + "s"


__all__ = ["pluralize", "IRREGULARS", "UNCOUNTABLES"]
