"""
Text Utilities for Name Tokenization

Low-level, allocation-light helpers shared by the tokenizer, the part
classifier and the namecasing engine:

1. **Normalization**: Unicode compatibility decomposition with hyphen and
   whitespace canonicalization (`normalize_nfkd_hyphens_spaces`)
2. **Character statistics**: single-pass per-word counts (`categorize_chars`)
3. **Transliteration**: best-effort ASCII folding for loose matching
   (`to_ascii`), Han ideographs via pypinyin, everything else via unidecode
4. **Capitalization**: naive per-segment capitalization (`capitalize_word`)
5. **Segmentation**: grapheme clusters for scripts without ASCII letters

All functions are pure and thread-safe. Results of `to_ascii` are meant for
comparisons only and should never be displayed.
"""

from __future__ import annotations
import logging
import re
import unicodedata
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterator, List, Optional

import pypinyin
from unidecode import unidecode

from nameparts.name_data import ASCII_UNUSUAL_WHITESPACE, ASCII_VOWELS, HYPHENS


# Words are bounded so that every count fits in a byte
MAX_WORD_BYTES = 255

_CJK_PATTERN = re.compile(r"[\u4e00-\u9fff]")
_ASCII_CONSONANT_START = re.compile(r"^[b-df-hj-np-tv-zB-DF-HJ-NP-TV-Z]")


class WordTooLongError(ValueError):
    """Raised when character statistics are requested for an over-long word."""


# ════════════════════════════════════════════════════════════════════════════════
# CHARACTER PREDICATES
# ════════════════════════════════════════════════════════════════════════════════


def is_combining(c: str) -> bool:
    return unicodedata.combining(c) > 0


def is_alphabetic(c: str) -> bool:
    """Approximates the Unicode Alphabetic property.

    Besides letters this accepts letter numbers and the vowel signs of Indic
    and Southeast Asian scripts (marks with combining class 0), which
    str.isalpha() rejects.
    """
    if c.isalpha():
        return True
    category = unicodedata.category(c)
    if category == "Nl":
        return True
    if category in ("Mn", "Mc") and unicodedata.combining(c) == 0:
        # Variation selectors are invisible modifiers, not letters
        return not ("\ufe00" <= c <= "\ufe0f" or "\U000e0100" <= c <= "\U000e01ef")
    return False


def is_ascii_alphabetic(c: str) -> bool:
    return "a" <= c <= "z" or "A" <= c <= "Z"


def lowercase_if_alpha(c: str) -> Optional[str]:
    if c.isupper():
        return c.lower()[0]
    if is_alphabetic(c):
        return c
    return None


def uppercase_if_alpha(c: str) -> Optional[str]:
    if c.islower():
        return c.upper()[0]
    if is_alphabetic(c):
        return c
    return None


# ════════════════════════════════════════════════════════════════════════════════
# WORD PREDICATES
# ════════════════════════════════════════════════════════════════════════════════


def is_mixed_case(s: str) -> bool:
    """True if the text has both upper and lowercase letters.

    Capitalization only carries information about name structure when the
    input is mixed case; "JOHN DOE" and "john doe" tell us nothing.
    """
    has_lowercase = False
    has_uppercase = False

    for c in s:
        if c.isupper():
            has_uppercase = True
        if c.islower():
            has_lowercase = True
        if has_lowercase and has_uppercase:
            return True

    return False


def starts_with_uppercase(word: str) -> bool:
    return bool(word) and word[0].isupper()


def starts_with_consonant(word: str) -> bool:
    return _ASCII_CONSONANT_START.match(word) is not None


def combining_chars(word: str) -> int:
    return sum(1 for c in word if is_combining(c))


def has_number(word: str) -> bool:
    return any(c.isnumeric() for c in word)


def has_sequential_alphas(word: str) -> bool:
    """True if two alphabetic characters are adjacent ("ab", "a.bc"; not "a.b")."""
    previous_alpha = False
    for c in word:
        alpha = is_alphabetic(c)
        if alpha and previous_alpha:
            return True
        previous_alpha = alpha
    return False


def eq_or_starts_with(a: str, b: str) -> bool:
    """Case-insensitive comparison of the letters of two words, ignoring
    everything else, that also succeeds when one is a prefix of the other.

    >>> eq_or_starts_with("J.", "John")
    True
    """
    chars_a = (c for c in map(lowercase_if_alpha, a) if c is not None)
    chars_b = (c for c in map(lowercase_if_alpha, b) if c is not None)

    while True:
        x = next(chars_a, None)
        y = next(chars_b, None)
        if x is None or y is None:
            return True
        if x != y:
            return False


def eq_or_ends_with(needle: str, haystack: str) -> bool:
    """Like `eq_or_starts_with`, but the needle must be a suffix of the haystack."""
    n_chars = (c for c in map(lowercase_if_alpha, reversed(needle)) if c is not None)
    h_chars = (c for c in map(lowercase_if_alpha, reversed(haystack)) if c is not None)

    while True:
        n = next(n_chars, None)
        h = next(h_chars, None)
        if n is None:
            return True
        if n != h:
            return False


# ════════════════════════════════════════════════════════════════════════════════
# NORMALIZATION
# ════════════════════════════════════════════════════════════════════════════════


def _stable_nfkd(c: str) -> bool:
    # Cheaper than normalizing the whole string; more false negatives than the
    # quick-check algorithm, which only costs us a redundant normalization
    return not is_combining(c) and unicodedata.is_normalized("NFKD", c)


def normalize_nfkd_hyphens_spaces(text: str) -> str:
    """
    Compatibility-decompose the text, fold hyphen variants to "-" and every
    whitespace character to " ".

    Plain ASCII without tabs or line breaks is returned unchanged, as is text
    that normalization would not change anyway.
    """
    if text.isascii() and not any(c in ASCII_UNUSUAL_WHITESPACE for c in text):
        return text

    if all(_stable_nfkd(c) and c not in HYPHENS and (c == " " or not c.isspace()) for c in text):
        return text

    return "".join(
        "-" if c in HYPHENS else " " if c.isspace() else c for c in unicodedata.normalize("NFKD", text)
    )


# ════════════════════════════════════════════════════════════════════════════════
# TRANSLITERATION
# ════════════════════════════════════════════════════════════════════════════════


@lru_cache(maxsize=4096)
def _han_to_pinyin(c: str) -> str:
    try:
        pinyin_result = pypinyin.lazy_pinyin(c, style=pypinyin.Style.NORMAL)
    except (AttributeError, ValueError, TypeError) as e:
        logging.warning(f"Pypinyin failed for '{c}': {e}")
        return unidecode(c)

    if not pinyin_result or pinyin_result[0] == c:
        return unidecode(c)

    # Match the capitalized style unidecode uses for ideographs
    return pinyin_result[0].capitalize()


def transliterate(c: str) -> str:
    """ASCII rendition of a single character; may be empty or several letters."""
    if c.isascii():
        return c
    if _CJK_PATTERN.match(c):
        return _han_to_pinyin(c)
    return unidecode(c)


def to_ascii_letter(c: str) -> Optional[str]:
    """Uppercase ASCII letter standing in for an uppercase character."""
    if "A" <= c <= "Z":
        return c
    transliterated = transliterate(c)
    if not transliterated:
        return None
    return transliterated[0].upper()


def to_ascii(s: str) -> str:
    """
    Best-effort ASCII transliteration for loose matching.

    Non-alphabetic output is dropped. The first uppercase letter produced opens
    the case run; lowercase letters after it are kept and everything else is
    lowercased, so "MÜLLER" and "Müller" both become "Muller".
    """
    if s.isascii():
        return s

    capitalized_any = False
    result: List[str] = []

    for c in s:
        for t in transliterate(c):
            if not t.isalpha():
                continue
            if t.isupper() and not capitalized_any:
                capitalized_any = True
                result.append(t)
            elif t.islower() and capitalized_any:
                result.append(t)
            else:
                result.append(t.lower())

    return "".join(result)


# ════════════════════════════════════════════════════════════════════════════════
# CAPITALIZATION
# ════════════════════════════════════════════════════════════════════════════════


def capitalize_word(word: str, simple: bool) -> str:
    """
    Naive capitalization: first letter up, the rest down.

    With ``simple`` (the word is pure ASCII letters) that is the whole story.
    Otherwise any separator, i.e. a character that is neither alphanumeric nor
    combining and has no case of its own ("-", "'"), capitalizes the letter
    after it, so each hyphenated segment is capitalized on its own.
    """
    if not word:
        return word

    if simple:
        return word[0].upper() + word[1:].lower()

    capitalize_next = True
    result = []

    for c in word:
        cased = c.upper()[0] if capitalize_next else c.lower()[0]
        capitalize_next = cased == c and not c.isalnum() and not is_combining(c)
        result.append(cased)

    return "".join(result)


# ════════════════════════════════════════════════════════════════════════════════
# CHARACTER STATISTICS
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class CharacterCounts:
    """Per-word character statistics, each bounded by MAX_WORD_BYTES.

    Totals are cumulative: ``ascii_alpha`` includes ``ascii_vowels``,
    ``alpha`` includes ``ascii_alpha`` and ``chars`` includes ``alpha``.
    """

    chars: int
    alpha: int
    upper: int
    ascii_alpha: int
    ascii_vowels: int


def categorize_chars(word: str) -> CharacterCounts:
    """Collect character statistics for a word in a single pass."""
    if len(word.encode("utf-8")) > MAX_WORD_BYTES:
        raise WordTooLongError(f"word exceeds {MAX_WORD_BYTES} bytes: {word[:16]!r}...")

    chars = 0
    alpha = 0
    upper = 0
    ascii_alpha = 0
    ascii_vowels = 0

    for c in word:
        if "a" <= c <= "z":
            if c in ASCII_VOWELS:
                ascii_vowels += 1
            else:
                ascii_alpha += 1
        elif "A" <= c <= "Z":
            if c in ASCII_VOWELS:
                ascii_vowels += 1
            else:
                ascii_alpha += 1
            upper += 1
        elif c.isupper():
            alpha += 1
            upper += 1
        elif is_alphabetic(c):
            alpha += 1
        else:
            chars += 1

    ascii_alpha += ascii_vowels
    alpha += ascii_alpha
    chars += alpha

    return CharacterCounts(
        chars=chars,
        alpha=alpha,
        upper=upper,
        ascii_alpha=ascii_alpha,
        ascii_vowels=ascii_vowels,
    )


# ════════════════════════════════════════════════════════════════════════════════
# GRAPHEME SEGMENTATION
# ════════════════════════════════════════════════════════════════════════════════

_ZWJ = "\u200d"


def _hangul_kind(c: str) -> Optional[str]:
    """Hangul syllable type: L, V, T, LV, LVT, or None for anything else."""
    cp = ord(c)
    if 0x1100 <= cp <= 0x115F or 0xA960 <= cp <= 0xA97C:
        return "L"
    if 0x1160 <= cp <= 0x11A7 or 0xD7B0 <= cp <= 0xD7C6:
        return "V"
    if 0x11A8 <= cp <= 0x11FF or 0xD7CB <= cp <= 0xD7FB:
        return "T"
    if 0xAC00 <= cp <= 0xD7A3:
        return "LV" if (cp - 0xAC00) % 28 == 0 else "LVT"
    return None


def _extends_cluster(c: str) -> bool:
    if c == _ZWJ:
        return True
    return unicodedata.category(c) in ("Mn", "Me", "Mc") or 0x1F3FB <= ord(c) <= 0x1F3FF


def _is_regional_indicator(c: str) -> bool:
    return 0x1F1E6 <= ord(c) <= 0x1F1FF


def next_grapheme_end(text: str, start: int) -> int:
    """
    Index just past the grapheme cluster beginning at ``start``.

    Covers what shows up in personal names: combining and spacing marks,
    zero-width joiner sequences, regional indicator pairs, CR LF and Hangul
    jamo sequences (NFKD splits Hangul syllables into conjoining jamo).
    """
    n = len(text)
    if start >= n:
        return start

    first = text[start]
    i = start + 1

    if first == "\r" and i < n and text[i] == "\n":
        return i + 1

    if _is_regional_indicator(first):
        if i < n and _is_regional_indicator(text[i]):
            i += 1
    else:
        kind = _hangul_kind(first)
        while kind is not None and i < n:
            following = _hangul_kind(text[i])
            if kind == "L" and following in ("L", "V", "LV", "LVT"):
                pass
            elif kind in ("LV", "V") and following in ("V", "T"):
                pass
            elif kind in ("LVT", "T") and following == "T":
                pass
            else:
                break
            kind = following
            i += 1

    while i < n:
        c = text[i]
        if _extends_cluster(c):
            i += 1
        elif text[i - 1] == _ZWJ and unicodedata.category(c) == "So":
            i += 1
        else:
            break

    return i


def iter_grapheme_clusters(text: str) -> Iterator[str]:
    start = 0
    while start < len(text):
        end = next_grapheme_end(text, start)
        yield text[start:end]
        start = end


def grapheme_clusters(text: str) -> List[str]:
    return list(iter_grapheme_clusters(text))
