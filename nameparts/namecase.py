"""
Namecasing: conventional capitalization of a single name word.

Beyond naive capitalization this knows about lowercase particles
("van", "de", "y") and the Mac/Mc prefixes ("MacDonald", "McCoy"), including
the many "Mac" words that are not patronymics at all ("Machin", "Macias").
"""

from __future__ import annotations

from nameparts.name_data import MAC_EXCEPTION_ENDINGS, MAC_EXCEPTIONS, UNCAPITALIZED_PARTICLES
from nameparts.text_utils import capitalize_word


def _capitalize_after_mac(word: str) -> bool:
    # Cutoffs are empirical; short remainders are mostly ordinary words (Mack, Macbeth)
    if len(word) - 3 <= 4:
        return False
    if word.endswith("o") and word != "Macmurdo":
        return False
    if word.endswith(MAC_EXCEPTION_ENDINGS):
        return False
    if word in MAC_EXCEPTIONS:
        return False
    return True


def namecase(word: str, pure_ascii: bool, might_be_particle: bool) -> str:
    """
    Capitalize a name word the way it is conventionally written.

    Args:
        word: A single word, possibly hyphenated
        pure_ascii: True if the word consists only of ASCII letters
        might_be_particle: True if a lowercase particle is plausible in this
            position (i.e. the word is neither first nor last)

    Returns:
        The cased word, e.g. "MacDonald", "McCoy", "van", "Jean-Luc"
    """
    result = capitalize_word(word, pure_ascii)

    if might_be_particle and result in UNCAPITALIZED_PARTICLES:
        return result.lower()
    if result.startswith("Mac") and len(result) > 3 and _capitalize_after_mac(result):
        return "Mac" + capitalize_word(result[3:], pure_ascii)
    if result.startswith("Mc") and len(result) > 3:
        return "Mc" + capitalize_word(result[2:], pure_ascii)
    return result
