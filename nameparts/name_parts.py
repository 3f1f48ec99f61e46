"""
Name Part Tokenization and Classification Module

This module splits a raw personal-name string into typed, position-aware
tokens ("name parts") that an assembler can order into surname, given name,
middle names and initials.

## Overview

The pipeline for a single input string:

1. **Normalization**: `normalize_nfkd_hyphens_spaces` (see `text_utils`)
2. **Tokenization**: `NameParts` scans the text for word-like runs, drops
   noise, re-segments words without ASCII letters (Han, Hangul, Kana...) one
   grapheme cluster at a time and tracks each token's position
3. **Classification**: `NamePart.from_word_and_counts` decides whether a token
   is a Name, Initials, an Abbreviation or Other, using per-word character
   statistics, the position of the word and whether capitalization can be
   trusted
4. **Namecasing**: Name parts carry their conventionally cased spelling
   ("MACDONALD" -> "MacDonald")

## Usage Examples

```python
from nameparts.name_parts import Location, NamePart, name_parts

parts = list(name_parts("J. Ronald MACDONALD"))
# [NamePart(word='J.', ..., category=Initials()),
#  NamePart(word='Ronald', ..., category=Name(namecased='Ronald')),
#  NamePart(word='MACDONALD', ..., category=Name(namecased='MacDonald'))]

NamePart.from_word("Ng", True, Location.END).is_namelike()
# Returns: True (known vowelless surname)

NamePart.from_word("Ng", True, Location.START).is_initials()
# Returns: True
```

## Trusting capitalization

Case is only informative when the source is mixed case. For "JOHN DOE" or
"john doe" the caller passes ``trust_capitalization=False`` and the classifier
falls back on curated lists and length heuristics; `is_mixed_case` computes
the usual default.

## Error Handling

No errors are raised for bad input: junk becomes `Other` parts or is dropped.
Programming errors (classifying a word without letters, asking an
Abbreviation for its initials) raise `NamePartContractError`.

## Thread Safety

All vocabularies are immutable and parts are immutable once built. A
`NameParts` sequence is a single-use iterator and must not be shared.
"""

from __future__ import annotations
import logging
import re
import time
import unicodedata
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Optional, Tuple, Union

from nameparts.name_data import TWO_LETTER_GIVEN_NAMES, VOWELLESS_SURNAMES
from nameparts.namecase import namecase
from nameparts.text_utils import (
    MAX_WORD_BYTES,
    CharacterCounts,
    categorize_chars,
    combining_chars,
    has_sequential_alphas,
    is_alphabetic,
    is_mixed_case,
    next_grapheme_end,
    normalize_nfkd_hyphens_spaces,
    starts_with_uppercase,
    to_ascii,
    uppercase_if_alpha,
)

SurnameOracle = Callable[[str, bool], bool]


class NamePartContractError(TypeError):
    """Raised when a name part operation is used outside its contract."""


# ════════════════════════════════════════════════════════════════════════════════
# LOCATION AND CATEGORY TYPES
# ════════════════════════════════════════════════════════════════════════════════


class Location(Enum):
    """Position of a part within the name. If START and END overlap, END wins."""

    START = "start"
    MIDDLE = "middle"
    END = "end"


@dataclass(frozen=True)
class Name:
    """A name word, with its conventionally cased spelling."""

    namecased: str


@dataclass(frozen=True)
class Initials:
    pass


@dataclass(frozen=True)
class Abbreviation:
    pass


@dataclass(frozen=True)
class Other:
    pass


Category = Union[Name, Initials, Abbreviation, Other]

INITIALS = Initials()
ABBREVIATION = Abbreviation()
OTHER = Other()


# ════════════════════════════════════════════════════════════════════════════════
# SURNAME ORACLE
# ════════════════════════════════════════════════════════════════════════════════


def is_vowelless_surname(word: str, trust_capitalization: bool) -> bool:
    """
    Default surname oracle: is this consonant cluster a known surname ("Ng")?

    With trusted capitalization the word must also be written conventionally,
    otherwise "ng" in "Lee ng" is more likely a pair of initials.
    """
    ascii_word = to_ascii(word)
    conventional = VOWELLESS_SURNAMES.get(ascii_word.lower())
    if conventional is None:
        return False
    if trust_capitalization:
        return ascii_word == conventional
    return True


# ════════════════════════════════════════════════════════════════════════════════
# CONFIGURATION
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class NamePartsConfig:
    """Immutable tokenizer and classifier configuration."""

    # Longer matches are treated as noise and dropped
    max_word_bytes: int

    # A run of word characters with at least one letter, up to and including
    # a trailing space or period, or a lone ampersand
    word_pattern: re.Pattern[str]

    # Consulted for consonant-cluster words in the last position
    surname_oracle: SurnameOracle

    @classmethod
    def create_default(cls) -> "NamePartsConfig":
        return cls(
            max_word_bytes=MAX_WORD_BYTES,
            word_pattern=re.compile(r"(?:\b\w*[^\W\d_][^ .]*(?:\Z|[ .]))|&"),
            surname_oracle=is_vowelless_surname,
        )

    def with_surname_oracle(self, surname_oracle: SurnameOracle) -> "NamePartsConfig":
        return replace(self, surname_oracle=surname_oracle)

    def with_max_word_bytes(self, max_word_bytes: int) -> "NamePartsConfig":
        if not 0 < max_word_bytes <= MAX_WORD_BYTES:
            raise ValueError(f"max_word_bytes must be between 1 and {MAX_WORD_BYTES}, got {max_word_bytes}")
        return replace(self, max_word_bytes=max_word_bytes)


# Default configuration for module-level functions
_default_config: Optional[NamePartsConfig] = None


def _get_default_config() -> NamePartsConfig:
    """Get or create the default configuration."""
    global _default_config
    if _default_config is None:
        _default_config = NamePartsConfig.create_default()
    return _default_config


# ════════════════════════════════════════════════════════════════════════════════
# NAME PART
# ════════════════════════════════════════════════════════════════════════════════


def _namecased_category(
    word: str,
    counts: CharacterCounts,
    trust_capitalization: bool,
    location: Location,
) -> Name:
    # A single capital that is trustworthy keeps the spelling verbatim
    all_upper = counts.alpha == counts.upper
    if counts.upper == 1 and (all_upper or (trust_capitalization and starts_with_uppercase(word))):
        return Name(word)
    might_be_particle = location is Location.MIDDLE
    return Name(namecase(word, counts.chars == counts.ascii_alpha, might_be_particle))


@dataclass(frozen=True)
class NamePart:
    """One classified word of a name.

    ``word`` is the word as it appears in the input text (NFC-recomposed for
    single grapheme clusters); only the namecased spelling of a Name may
    differ from it.
    """

    word: str
    counts: CharacterCounts
    category: Category

    @staticmethod
    def all_from_text(
        text: str,
        trust_capitalization: bool,
        location: Location,
        config: Optional[NamePartsConfig] = None,
    ) -> "NameParts":
        return NameParts(text, trust_capitalization, location, config or _get_default_config())

    @staticmethod
    def from_word(
        word: str,
        trust_capitalization: bool,
        location: Location,
        config: Optional[NamePartsConfig] = None,
    ) -> "NamePart":
        return NamePart.from_word_and_counts(word, categorize_chars(word), trust_capitalization, location, config)

    @staticmethod
    def from_word_and_counts(
        word: str,
        counts: CharacterCounts,
        trust_capitalization: bool,
        location: Location,
        config: Optional[NamePartsConfig] = None,
    ) -> "NamePart":
        """
        Classify a word. The first matching rule wins:

        1. One character: an ASCII letter is an initial, anything else a name
        2. Ends in a period: an abbreviation if it has two adjacent letters
           ("Jr.", "MI."), otherwise initials ("J.", "M.I.")
        3. More than two non-letter, non-combining characters: other ("503(a)")
        4. ASCII consonants only: initials if trusted all-caps, a name if it
           ends the name and the surname oracle knows it ("Ng"), initials up
           to five characters, otherwise other
        5. Trusted all-caps up to five characters: initials ("JEM")
        6. Two letters in untrusted case, not a common given name: initials
        7. Anything else is a name
        """
        if counts.alpha == 0 and word != "&":
            raise NamePartContractError(f"cannot classify a word without letters: {word!r}")

        config = config or _get_default_config()
        all_upper = counts.alpha == counts.upper

        def namecased() -> Name:
            return _namecased_category(word, counts, trust_capitalization, location)

        category: Category
        non_alpha = counts.chars - counts.alpha

        if counts.chars == 1:
            if counts.ascii_alpha == counts.chars:
                category = INITIALS
            else:
                category = namecased()
        elif word.endswith("."):
            if counts.alpha >= 2 and has_sequential_alphas(word):
                category = ABBREVIATION
            else:
                category = INITIALS
        elif non_alpha > 2 and non_alpha - combining_chars(word) > 2:
            category = OTHER
        elif counts.ascii_alpha > 0 and counts.ascii_vowels == 0:
            if trust_capitalization and all_upper:
                category = INITIALS
            elif location is Location.END and config.surname_oracle(word, trust_capitalization):
                category = namecased()
            elif counts.chars <= 5:
                category = INITIALS
            else:
                category = OTHER
        elif counts.chars <= 5 and trust_capitalization and all_upper:
            category = INITIALS
        elif counts.chars == 2 and not trust_capitalization and word not in TWO_LETTER_GIVEN_NAMES:
            category = INITIALS
        else:
            category = namecased()

        return NamePart(word=word, counts=counts, category=category)

    @staticmethod
    def from_grapheme_cluster(
        cluster: str,
        counts: CharacterCounts,
        trust_capitalization: bool,
        location: Location,
    ) -> "NamePart":
        """
        Classify one grapheme cluster of a word without ASCII letters.

        A cluster is a single user-perceived character ("कु", "ศั") however
        many code points it spans, so it is always a name, like any other
        single non-ASCII letter.
        """
        if counts.alpha == 0:
            raise NamePartContractError(f"cannot classify a cluster without letters: {cluster!r}")
        category = _namecased_category(cluster, counts, trust_capitalization, location)
        return NamePart(word=cluster, counts=counts, category=category)

    def is_initials(self) -> bool:
        return isinstance(self.category, Initials)

    def is_namelike(self) -> bool:
        return isinstance(self.category, Name)

    def is_abbreviation(self) -> bool:
        return isinstance(self.category, Abbreviation)

    def is_other(self) -> bool:
        return isinstance(self.category, Other)

    def initials(self) -> str:
        """
        The initials this part stands for.

        Defined for Initials and for Names (a given or middle name reduced to
        its initial). A hyphenated name gives one initial per segment.

        Raises:
            NamePartContractError: for Abbreviation and Other parts
        """
        category = self.category

        if isinstance(category, Name):
            if "-" not in category.namecased and self.counts.upper > 0:
                return category.namecased[0]
            result = []
            for segment in category.namecased.split("-"):
                first_alpha = next((c for c in segment if is_alphabetic(c)), None)
                if first_alpha is not None:
                    result.append(first_alpha.upper())
            return "".join(result)

        if isinstance(category, Initials):
            if self.counts.upper == self.counts.chars:
                return self.word
            return "".join(c for c in map(uppercase_if_alpha, self.word) if c is not None)

        raise NamePartContractError(f"initials are undefined for {self!r}")

    def namecased(self) -> str:
        """
        The conventionally cased spelling of this part.

        Normally called on a Name. Initials may be a mis-categorized name
        ("JO" in an all-caps string), so they are namecased as a possible
        particle unless they already look like a single cased name.

        Raises:
            NamePartContractError: for Abbreviation and Other parts
        """
        category = self.category

        if isinstance(category, Name):
            return category.namecased

        if isinstance(category, Initials):
            if self.counts.upper == 1 and (self.counts.alpha == 1 or starts_with_uppercase(self.word)):
                return self.word
            return namecase(self.word, self.counts.chars == self.counts.ascii_alpha, True)

        raise NamePartContractError(f"namecased text is undefined for {self!r}")


# Emitted for a lone "&" between two other words ("John & Jane Doe")
AMPERSAND = NamePart(
    word="&",
    counts=CharacterCounts(chars=1, alpha=0, upper=0, ascii_alpha=0, ascii_vowels=0),
    category=OTHER,
)


# ════════════════════════════════════════════════════════════════════════════════
# TOKENIZER
# ════════════════════════════════════════════════════════════════════════════════


class NameParts:
    """
    Lazy, forward-only sequence of the name parts in a text.

    The iterator keeps three pieces of state: the remainder of a word being
    re-segmented by grapheme cluster, the location of the next part, and a
    short lookahead over upcoming words, needed to tell whether the current
    part is the last one and whether an ampersand sits between two words.
    """

    def __init__(
        self,
        text: str,
        trust_capitalization: bool,
        location: Location,
        config: NamePartsConfig,
    ):
        self._text = text
        self._trust_capitalization = trust_capitalization
        self._location = location
        self._config = config
        self._matches = config.word_pattern.finditer(text)
        self._lookahead: List[str] = []
        self._current_word = ""
        self._current_offset = 0
        self._emitted_any = False
        self._last_was_ampersand = False

    def __iter__(self) -> "NameParts":
        return self

    def __next__(self) -> NamePart:
        while True:
            part = self._next_from_current_word()
            if part is not None:
                return self._emit(part)

            word = self._next_word()
            if word is None:
                raise StopIteration

            if word == "&":
                if self._emitted_any and not self._last_was_ampersand and self._has_word_ahead():
                    return self._emit(AMPERSAND)
                continue

            counts = categorize_chars(word)
            if counts.ascii_alpha == 0:
                # Hangul, Han, Kana and friends: one part per grapheme cluster
                self._current_word = word
                self._current_offset = 0
                continue

            return self._emit(self._name_part(word, counts))

    def _emit(self, part: NamePart) -> NamePart:
        self._emitted_any = True
        self._last_was_ampersand = part is AMPERSAND
        return part

    def _next_from_current_word(self) -> Optional[NamePart]:
        word = self._current_word
        while self._current_offset < len(word):
            start = self._current_offset
            end = next_grapheme_end(word, start)
            self._current_offset = end
            # Recomposed, so a decomposed Hangul syllable is one character again
            cluster = unicodedata.normalize("NFC", word[start:end])
            counts = categorize_chars(cluster)
            if counts.alpha > 0:
                return NamePart.from_grapheme_cluster(
                    cluster, counts, self._trust_capitalization, self._next_location()
                )

        self._current_word = ""
        self._current_offset = 0
        return None

    def _name_part(self, word: str, counts: CharacterCounts) -> NamePart:
        return NamePart.from_word_and_counts(
            word,
            counts,
            self._trust_capitalization,
            self._next_location(),
            self._config,
        )

    def _next_location(self) -> Location:
        at_end = self._at_end()
        if self._location is Location.START:
            self._location = Location.MIDDLE
            return Location.END if at_end else Location.START
        return Location.END if at_end else Location.MIDDLE

    def _at_end(self) -> bool:
        remainder = self._current_word[self._current_offset :]
        if any(is_alphabetic(c) for c in remainder):
            return False
        return not self._has_word_ahead()

    def _has_word_ahead(self) -> bool:
        """True if a word other than an ampersand is still to come."""
        i = 0
        while True:
            word = self._peek_word(i)
            if word is None:
                return False
            if word != "&":
                return True
            i += 1

    def _next_word(self) -> Optional[str]:
        if self._lookahead:
            return self._lookahead.pop(0)
        return self._scan_word()

    def _peek_word(self, i: int) -> Optional[str]:
        while len(self._lookahead) <= i:
            word = self._scan_word()
            if word is None:
                return None
            self._lookahead.append(word)
        return self._lookahead[i]

    def _scan_word(self) -> Optional[str]:
        """Next usable word from the text, or None when the text is exhausted."""
        for match in self._matches:
            matched = match.group()
            start = match.start() + 1 if matched.startswith((" ", ".")) else match.start()
            end = match.end() - 1 if matched.endswith(" ") else match.end()
            word = self._text[start:end]

            if len(word.encode("utf-8")) > self._config.max_word_bytes:
                logging.debug(f"Dropping over-long word at offset {start} ({end - start} characters)")
                continue
            if word != "&" and not any(is_alphabetic(c) for c in word):
                continue

            return word

        return None


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════


def name_parts(
    text: str,
    trust_capitalization: Optional[bool] = None,
    location: Location = Location.START,
    config: Optional[NamePartsConfig] = None,
) -> NameParts:
    """
    Normalize a raw name and return the lazy sequence of its parts.

    Args:
        text: Raw name string
        trust_capitalization: Whether letter case is meaningful; by default,
            whether the normalized text is mixed case
        location: Location of the first part
        config: Tokenizer configuration (default configuration if omitted)

    Returns:
        Single-use iterator of NamePart
    """
    normalized = normalize_nfkd_hyphens_spaces(text)
    if trust_capitalization is None:
        trust_capitalization = is_mixed_case(normalized)
    return NamePart.all_from_text(normalized, trust_capitalization, location, config)


def classify(
    word: str,
    trust_capitalization: bool,
    location: Location,
    config: Optional[NamePartsConfig] = None,
) -> Category:
    """Category of a single, already tokenized word."""
    return NamePart.from_word(word, trust_capitalization, location, config).category


# ════════════════════════════════════════════════════════════════════════════════
# PERFORMANCE TEST
# ════════════════════════════════════════════════════════════════════════════════


def run_performance_test(iterations: int = 20000) -> None:
    """Time tokenization and classification on a few representative inputs."""
    tokenize_cases: List[Tuple[str, bool]] = [
        ("John Doe", True),
        ("J. Doe", True),
        ("이용희", False),
        ("JOHN DOE", False),
    ]
    classify_cases: List[Tuple[str, bool]] = [
        ("Jonathan", True),
        ("J.", True),
        ("희", False),
        ("JONATHAN", False),
    ]

    print(f"Tokenizing ({iterations} iterations each)")
    for text, trust in tokenize_cases:
        normalized = normalize_nfkd_hyphens_spaces(text)
        start_time = time.perf_counter()
        for _ in range(iterations):
            for _part in NamePart.all_from_text(normalized, trust, Location.START):
                pass
        elapsed = time.perf_counter() - start_time
        print(f"  {text!r:<14} {elapsed / iterations * 1e6:8.2f} µs")

    print(f"Classifying ({iterations} iterations each)")
    for word, trust in classify_cases:
        counts = categorize_chars(word)
        start_time = time.perf_counter()
        for _ in range(iterations):
            NamePart.from_word_and_counts(word, counts, trust, Location.START)
        elapsed = time.perf_counter() - start_time
        print(f"  {word!r:<14} {elapsed / iterations * 1e6:8.2f} µs")


# CLI entry point
if __name__ == "__main__":
    run_performance_test()
