"""
Title detection: is a run of name parts an honorific or rank ("Dr",
"Lt. Col.", "Secretary of State", "1st Sgt")?
"""

from __future__ import annotations
from typing import Sequence

from nameparts.name_data import TITLE_PARTS, TWO_CHAR_TITLES
from nameparts.name_parts import Name, NamePart
from nameparts.namecase import namecase


def _title_case(part: NamePart) -> str:
    if isinstance(part.category, Name):
        return part.category.namecased
    return namecase(part.word, part.counts.chars == part.counts.ascii_alpha, False)


def might_be_title_part(part: NamePart) -> bool:
    # Any word with one or two characters may sit inside a title ("of", "Lt"),
    # but see might_be_last_title_part
    if part.counts.chars < 3:
        return True
    if part.is_abbreviation() or part.is_initials():
        return True
    return _title_case(part) in TITLE_PARTS


def might_be_last_title_part(part: NamePart) -> bool:
    # A short word at the end of a title is more likely an initial, except for
    # a handful of very common two-letter titles
    if part.counts.chars == 1:
        return False
    if part.counts.chars == 2:
        return part.word.lower() in TWO_CHAR_TITLES
    return might_be_title_part(part)


def is_title(parts: Sequence[NamePart]) -> bool:
    """True if the parts, in order, read as a title.

    Every part but the last only has to be a plausible piece of a title; the
    last one must be a real title word, so "Dr" and "Rev. Msgr." qualify but
    "Dr J" does not.
    """
    if not parts:
        return False
    if not might_be_last_title_part(parts[-1]):
        return False
    return all(might_be_title_part(part) for part in parts[:-1])
