"""
Tests for name part tokenization and classification.

Covers the classification rules, initials and namecasing of parts, the
tokenizer's location tracking, ampersand handling and grapheme-cluster
fallback for scripts without ASCII letters.
"""

import sys
from pathlib import Path

import pytest

# Add the parent directory to path to import nameparts
sys.path.insert(0, str(Path(__file__).parent.parent))

from nameparts.name_parts import (
    ABBREVIATION,
    INITIALS,
    OTHER,
    Initials,
    Location,
    Name,
    NamePart,
    NamePartContractError,
    NamePartsConfig,
    classify,
    is_vowelless_surname,
    name_parts,
)
from nameparts.text_utils import MAX_WORD_BYTES, categorize_chars


@pytest.fixture(scope="session")
def config():
    """Default configuration shared across tests."""
    return NamePartsConfig.create_default()


def words(text, **kwargs):
    return [part.word for part in name_parts(text, **kwargs)]


# (word, trust_capitalization, location, expected category)
CLASSIFICATION_CASES = [
    # Single characters
    ("J", True, Location.START, INITIALS),
    ("j", False, Location.START, INITIALS),
    ("鄭", False, Location.START, Name("鄭")),
    # Trailing period
    ("J.", True, Location.START, INITIALS),
    ("I.", True, Location.START, INITIALS),
    ("M.I.", True, Location.START, INITIALS),
    ("MI.", True, Location.START, ABBREVIATION),
    ("Jr.", True, Location.END, ABBREVIATION),
    # Noise
    ("503(a)", True, Location.START, OTHER),
    # Consonants only
    ("JM", True, Location.START, INITIALS),
    ("jm", False, Location.START, INITIALS),
    ("JMMMMM", True, Location.START, INITIALS),
    ("jmmmmm", False, Location.START, OTHER),
    # Trusted all-caps
    ("JEM", True, Location.START, INITIALS),
    ("Jem", True, Location.START, Name("Jem")),
    ("JEM", False, Location.START, Name("Jem")),
    # Two letters
    ("AL", True, Location.START, INITIALS),
    ("Al", True, Location.START, Name("Al")),
    ("Al", False, Location.START, Name("Al")),
    ("AL", False, Location.START, Name("Al")),
    ("At", False, Location.START, INITIALS),
    ("AT", False, Location.START, INITIALS),
    # Names
    ("John", True, Location.START, Name("John")),
    ("JOHN", False, Location.START, Name("John")),
    ("MACDONALD", False, Location.END, Name("MacDonald")),
    ("VAN", False, Location.MIDDLE, Name("van")),
    ("VAN", False, Location.START, Name("Van")),
    ("Van", True, Location.MIDDLE, Name("Van")),
]

# (word, trust_capitalization, location, expected category)
VOWELLESS_SURNAME_CASES = [
    ("Ng", True, Location.END, Name("Ng")),
    ("NG", False, Location.END, Name("Ng")),
    ("ng", False, Location.END, Name("Ng")),
    ("NG", True, Location.END, INITIALS),
    ("ng", True, Location.END, INITIALS),
    ("Ng", True, Location.START, INITIALS),
    ("NG", False, Location.START, INITIALS),
    ("Vlk", True, Location.END, Name("Vlk")),
]

# (text, number of parts)
TOKEN_COUNT_CASES = [
    ("John", 1),
    ("John Doe", 2),
    ("J. Ronald MACDONALD", 3),
    ("&* John Doe! ☃", 2),
    (" ... 23 ", 0),
    ("", 0),
    ("鄭成功", 3),
]


def test_classification():
    passed = 0
    failed = 0

    for word, trust, location, expected in CLASSIFICATION_CASES:
        result = classify(word, trust, location)
        if result == expected:
            passed += 1
        else:
            failed += 1
            print(f"FAILED: classify({word!r}, trust={trust}, {location}): expected {expected}, got {result}")

    print(f"Classification tests: {passed} passed, {failed} failed")
    assert failed == 0, f"Classification tests: {failed} failures out of {len(CLASSIFICATION_CASES)} tests"


def test_vowelless_surnames():
    failed = 0
    for word, trust, location, expected in VOWELLESS_SURNAME_CASES:
        result = classify(word, trust, location)
        if result != expected:
            failed += 1
            print(f"FAILED: classify({word!r}, trust={trust}, {location}): expected {expected}, got {result}")

    assert failed == 0, f"Vowelless surname tests: {failed} failures out of {len(VOWELLESS_SURNAME_CASES)} tests"


def test_default_surname_oracle():
    assert is_vowelless_surname("Ng", True)
    assert is_vowelless_surname("NG", False)
    assert not is_vowelless_surname("NG", True)
    assert not is_vowelless_surname("Jm", False)


def test_custom_surname_oracle(config):
    always_surname = config.with_surname_oracle(lambda word, trust: True)
    never_surname = config.with_surname_oracle(lambda word, trust: False)

    assert classify("Krz", False, Location.END, always_surname) == Name("Krz")
    assert classify("Ng", True, Location.END, never_surname) == INITIALS
    assert classify("NG", False, Location.START, always_surname) == INITIALS

    # The oracle is only consulted for the last part
    parts = list(name_parts("Ng Ng Ng", trust_capitalization=False, config=always_surname))
    assert [part.is_initials() for part in parts] == [True, True, False]
    assert parts[2].namecased() == "Ng"


def test_word_without_letters_is_rejected():
    with pytest.raises(NamePartContractError):
        NamePart.from_word("23", True, Location.START)
    with pytest.raises(NamePartContractError):
        NamePart.from_word("...", True, Location.START)
    with pytest.raises(NamePartContractError):
        NamePart.from_grapheme_cluster("。", categorize_chars("。"), False, Location.START)


def test_initials():
    assert NamePart.from_word("John", True, Location.START).initials() == "J"
    assert NamePart.from_word("Jean-Luc", True, Location.START).initials() == "JL"
    assert NamePart.from_word("jean-luc", False, Location.START).initials() == "JL"
    assert NamePart.from_word("J.", True, Location.START).initials() == "J"
    assert NamePart.from_word("M.I.", True, Location.START).initials() == "MI"
    assert NamePart.from_word("JEM", True, Location.START).initials() == "JEM"
    assert NamePart.from_word("j", False, Location.START).initials() == "J"


def test_initials_undefined_for_abbreviations_and_other():
    with pytest.raises(NamePartContractError):
        NamePart.from_word("Jr.", True, Location.END).initials()
    with pytest.raises(NamePartContractError):
        NamePart.from_word("503(a)", True, Location.START).initials()


def test_namecased():
    assert NamePart.from_word("MACDONALD", False, Location.END).namecased() == "MacDonald"
    assert NamePart.from_word("Jem", True, Location.START).namecased() == "Jem"

    # Initials may be a mis-categorized name or particle
    assert NamePart.from_word("JO", True, Location.START).namecased() == "Jo"
    assert NamePart.from_word("DE", True, Location.MIDDLE).namecased() == "de"
    assert NamePart.from_word("J", True, Location.START).namecased() == "J"
    assert NamePart.from_word("J.", True, Location.START).namecased() == "J."

    with pytest.raises(NamePartContractError):
        NamePart.from_word("MI.", True, Location.START).namecased()


def test_part_predicates():
    part = NamePart.from_word("John", True, Location.START)
    assert part.is_namelike()
    assert not part.is_initials()
    assert not part.is_abbreviation()
    assert not part.is_other()

    assert NamePart.from_word("MI.", True, Location.START).is_abbreviation()
    assert NamePart.from_word("503(a)", True, Location.START).is_other()


def test_token_counts():
    failed = 0
    for text, expected in TOKEN_COUNT_CASES:
        result = len(list(name_parts(text)))
        if result != expected:
            failed += 1
            print(f"FAILED: {text!r}: expected {expected} parts, got {result}")

    assert failed == 0, f"Token count tests: {failed} failures out of {len(TOKEN_COUNT_CASES)} tests"


def test_tokenized_words():
    assert words("J. Ronald MACDONALD") == ["J.", "Ronald", "MACDONALD"]
    assert words("&* John Doe! ☃") == ["John", "Doe!"]
    assert words("John\tDoe") == ["John", "Doe"]


def test_trust_defaults_to_mixed_case():
    parts = list(name_parts("JEM Smith"))
    assert isinstance(parts[0].category, Initials)

    parts = list(name_parts("JEM SMITH"))
    assert parts[0].category == Name("Jem")
    assert parts[1].category == Name("Smith")


def test_locations():
    # A single word ends the name
    (part,) = list(name_parts("Johnny"))
    assert part.is_namelike()

    # "Van" is only a particle in the middle of a name
    parts = list(name_parts("LUDWIG VAN BEETHOVEN"))
    assert [part.namecased() for part in parts] == ["Ludwig", "van", "Beethoven"]

    parts = list(name_parts("VAN MORRISON"))
    assert [part.namecased() for part in parts] == ["Van", "Morrison"]


def test_initial_location_is_respected():
    parts = list(name_parts("DE LA", trust_capitalization=False, location=Location.MIDDLE))
    assert [part.namecased() for part in parts] == ["de", "La"]


def test_ampersands():
    parts = list(name_parts("John & Jane Doe"))
    assert [part.word for part in parts] == ["John", "&", "Jane", "Doe"]
    assert parts[1].is_other()
    assert parts[1].counts.alpha == 0

    assert words("John &") == ["John"]
    assert words("& John") == ["John"]
    assert words("John & & Jane") == ["John", "&", "Jane"]


def test_ampersand_does_not_end_name():
    parts = list(name_parts("DOE &", trust_capitalization=False, location=Location.MIDDLE))
    assert len(parts) == 1
    assert parts[0].namecased() == "Doe"


def test_over_long_words_are_dropped(config):
    assert words("John Smith", config=config.with_max_word_bytes(4)) == ["John"]
    assert words("John " + "a" * (MAX_WORD_BYTES + 1) + " Smith") == ["John", "Smith"]


def test_max_word_bytes_bounds(config):
    with pytest.raises(ValueError):
        config.with_max_word_bytes(0)
    with pytest.raises(ValueError):
        config.with_max_word_bytes(MAX_WORD_BYTES + 1)
    assert config.with_max_word_bytes(MAX_WORD_BYTES).max_word_bytes == MAX_WORD_BYTES


def test_han_characters_are_split():
    parts = list(name_parts("鄭成功"))
    assert [part.word for part in parts] == ["鄭", "成", "功"]
    assert all(part.is_namelike() for part in parts)


def test_hangul_syllables_are_split():
    parts = list(name_parts("이용희"))
    assert [part.word for part in parts] == ["이", "용", "희"]
    assert all(part.is_namelike() for part in parts)
    assert all(part.counts.chars == 1 for part in parts)


# (text, expected words) for scripts whose letters combine with vowel signs
SYLLABLE_CLUSTER_CASES = [
    ("राम कुमार", ["रा", "म", "कु", "मा", "र"]),
    ("สมศักดิ์", ["ส", "ม", "ศั", "ก", "ดิ์"]),
]


def test_syllable_clusters_are_names():
    failed = 0
    for text, expected in SYLLABLE_CLUSTER_CASES:
        parts = list(name_parts(text))
        result = [part.word for part in parts]
        if result != expected or not all(part.is_namelike() for part in parts):
            failed += 1
            print(f"FAILED: {text!r}: expected Name parts {expected}, got {[(p.word, p.category) for p in parts]}")

    assert failed == 0, f"Syllable cluster tests: {failed} failures out of {len(SYLLABLE_CLUSTER_CASES)} tests"


def test_syllable_cluster_keeps_spelling():
    parts = list(name_parts("कुमार"))
    assert [part.namecased() for part in parts] == ["कु", "मा", "र"]
    assert [part.initials() for part in parts] == ["क", "म", "र"]


def test_mixed_scripts():
    assert words("John 鄭成功 Doe") == ["John", "鄭", "成", "功", "Doe"]


def test_parts_are_immutable():
    part = NamePart.from_word("John", True, Location.START)
    with pytest.raises(AttributeError):
        part.word = "Jane"


def test_counts_are_reused():
    counts = categorize_chars("John")
    part = NamePart.from_word_and_counts("John", counts, True, Location.START)
    assert part.counts is counts
