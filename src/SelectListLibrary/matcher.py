from collections import namedtuple
from enum import Enum, auto

from selenium.webdriver.common.by import By

Match = namedtuple("Match", ["options", "kind"])


class MatchKind(Enum):
    VALUE = auto()
    TEXT = auto()
    TEXT_FALLBACK = auto()


def xpath_literal(text: str) -> str:
    """Quotes ``text`` as an XPath string literal.

    XPath 1.0 has no escape sequences, so text holding both quote kinds is
    split on double quotes and glued back together with ``concat()``.
    """
    if '"' not in text:
        return f'"{text}"'
    if "'" not in text:
        return f"'{text}'"
    parts = ", '\"', ".join(f'"{part}"' for part in text.split('"'))
    return f"concat({parts})"


def normalize_space(text: str) -> str:
    return " ".join(text.split())


def longest_word(text: str) -> str:
    return max(text.split(" "), key=len, default="")


class OptionMatcher:
    """Finds ``<option>`` elements of one select list by value or visible text.

    An empty match is not an error here; callers decide what a miss means.
    """

    def by_value(self, select, value: str) -> Match:
        options = select.element.find_elements(
            By.XPATH, f".//option[@value = {xpath_literal(value)}]"
        )
        return Match(options, MatchKind.VALUE)

    def by_text(self, select, text: str) -> Match:
        options = select.element.find_elements(
            By.XPATH, f".//option[normalize-space(.) = {xpath_literal(text)}]"
        )
        if options or " " not in text:
            return Match(options, MatchKind.TEXT)
        # Some drivers choke on exact text queries but handle contains().
        word = longest_word(text)
        if word:
            candidates = select.element.find_elements(
                By.XPATH, f".//option[contains(., {xpath_literal(word)})]"
            )
        else:
            candidates = select.options
        options = [option for option in candidates if normalize_space(option.text) == text]
        return Match(options, MatchKind.TEXT_FALLBACK)
