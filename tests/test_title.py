"""
Tests for title detection over tokenized name parts.
"""

import sys
from pathlib import Path

# Add the parent directory to path to import nameparts
sys.path.insert(0, str(Path(__file__).parent.parent))

from nameparts.name_parts import Location, NamePart, name_parts
from nameparts.title import is_title, might_be_last_title_part, might_be_title_part


# (text, expected)
TITLE_CASES = [
    ("Dr", True),
    ("Mr", True),
    ("Rev. Msgr.", True),
    ("1st Sgt", True),
    ("Secretary of State", True),
    ("HIS MAJESTY", True),
    ("Lt. Col.", True),
    # Accented titles are decomposed by normalization
    ("Attaché", True),
    ("Chargé d'Affaires", True),
    ("ATTACHÉ", True),
    ("Dr J", False),
    ("John Smith", False),
    ("Jo", False),
    ("J", False),
    ("", False),
]


def test_titles():
    passed = 0
    failed = 0

    for text, expected in TITLE_CASES:
        result = is_title(list(name_parts(text)))
        if result == expected:
            passed += 1
        else:
            failed += 1
            print(f"FAILED: is_title({text!r}): expected {expected}, got {result}")

    print(f"Title tests: {passed} passed, {failed} failed")
    assert failed == 0, f"Title tests: {failed} failures out of {len(TITLE_CASES)} tests"


def test_title_parts():
    assert might_be_title_part(NamePart.from_word("of", True, Location.MIDDLE))
    assert might_be_title_part(NamePart.from_word("Lt.", True, Location.START))
    assert might_be_title_part(NamePart.from_word("General", True, Location.START))
    assert not might_be_title_part(NamePart.from_word("Smith", True, Location.START))


def test_last_title_parts():
    assert not might_be_last_title_part(NamePart.from_word("J", True, Location.END))
    assert might_be_last_title_part(NamePart.from_word("Dr", True, Location.END))
    assert might_be_last_title_part(NamePart.from_word("DR", False, Location.END))
    assert not might_be_last_title_part(NamePart.from_word("Jo", True, Location.END))
    assert might_be_last_title_part(NamePart.from_word("General", True, Location.END))
