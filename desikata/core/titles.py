from typing import Any

from desikata import config
from desikata.defaults import DEFAULT_SMALL_WORDS


def collapse_spaces(s: str) -> str:
    """
    Strip + collapse any run of whitespace to a single space
    """
    return " ".join(s.split())


def title_word(word: str, small_words, first: bool) -> str:
    word = word.lower()

    # small words stay lower case unless they open the title
    if word in small_words and not first:
        return word

    return word[:1].upper() + word[1:]


def fix_title(title: Any) -> str:
    """
    Clean a messy movie title into Title Case.

      "  DILWALE   DULHANIA   LE   JAYENGE  " → "Dilwale Dulhania Le Jayenge"
      "dil ka kya kare"                       → "Dil ka Kya Kare"

    Non-string or blank input gives "".
    """
    if not isinstance(title, str):
        return ""

    words = collapse_spaces(title).split(" ")
    if words == [""]:
        return ""

    small_words = set(config.get("titles.small_words", DEFAULT_SMALL_WORDS))

    return " ".join(
        title_word(w, small_words, first=(i == 0))
        for i, w in enumerate(words)
    )
