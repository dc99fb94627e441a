from abc import ABC, abstractmethod
from typing import Optional

from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.common.by import By
from selenium.webdriver.support.select import Select

from .applier import ScriptApplier
from .matcher import Match, MatchKind, OptionMatcher, xpath_literal


class SelectionStrategy(ABC):
    """How options of one select list get selected and deselected.

    Selecting by value or label returns the kind of match that was applied,
    or ``None`` when no option matched. Index based and deselecting methods
    return whether an option was found. A miss never raises.
    """

    @abstractmethod
    def select_by_index(self, select, index: int) -> bool:
        ...

    @abstractmethod
    def select_by_value(self, select, value: str) -> Optional[MatchKind]:
        ...

    @abstractmethod
    def select_by_label(self, select, label: str) -> Optional[MatchKind]:
        ...

    @abstractmethod
    def deselect_by_index(self, select, index: int) -> bool:
        ...

    @abstractmethod
    def deselect_by_value(self, select, value: str) -> bool:
        ...

    @abstractmethod
    def deselect_by_label(self, select, label: str) -> bool:
        ...

    @abstractmethod
    def deselect_all(self, select):
        ...


class NativeSelection(SelectionStrategy):
    """Uses Selenium's own ``Select`` support, which fires real UI events."""

    def select_by_index(self, select, index: int) -> bool:
        return self._call(Select(select.element).select_by_index, index)

    def select_by_value(self, select, value: str) -> Optional[MatchKind]:
        if self._call(Select(select.element).select_by_value, value):
            return MatchKind.VALUE
        return None

    def select_by_label(self, select, label: str) -> Optional[MatchKind]:
        if not self._call(Select(select.element).select_by_visible_text, label):
            return None
        # selenium falls back to a substring search on its own, tell it apart
        exact = select.element.find_elements(
            By.XPATH, f".//option[normalize-space(.) = {xpath_literal(label)}]"
        )
        return MatchKind.TEXT if exact else MatchKind.TEXT_FALLBACK

    def deselect_by_index(self, select, index: int) -> bool:
        return self._call(Select(select.element).deselect_by_index, index)

    def deselect_by_value(self, select, value: str) -> bool:
        return self._call(Select(select.element).deselect_by_value, value)

    def deselect_by_label(self, select, label: str) -> bool:
        return self._call(Select(select.element).deselect_by_visible_text, label)

    def deselect_all(self, select):
        Select(select.element).deselect_all()

    @staticmethod
    def _call(method, argument) -> bool:
        try:
            method(argument)
        except NoSuchElementException:
            return False
        return True


class ScriptSelection(SelectionStrategy):
    """Resolves options with XPath queries and sets their state by script.

    Needed for marionette based Firefox sessions.
    """

    def __init__(self, driver, matcher: Optional[OptionMatcher] = None):
        self.matcher = matcher or OptionMatcher()
        self.applier = ScriptApplier(driver)

    def select_by_index(self, select, index: int) -> bool:
        return self._apply_index(select, index, True)

    def select_by_value(self, select, value: str) -> Optional[MatchKind]:
        return self._apply(select, self.matcher.by_value(select, value), True)

    def select_by_label(self, select, label: str) -> Optional[MatchKind]:
        return self._apply(select, self.matcher.by_text(select, label), True)

    def deselect_by_index(self, select, index: int) -> bool:
        return self._apply_index(select, index, False)

    def deselect_by_value(self, select, value: str) -> bool:
        return self._apply(select, self.matcher.by_value(select, value), False) is not None

    def deselect_by_label(self, select, label: str) -> bool:
        return self._apply(select, self.matcher.by_text(select, label), False) is not None

    def deselect_all(self, select):
        for option in select.selected_options:
            self.applier.apply(option, False)

    def _apply_index(self, select, index: int, selected: bool) -> bool:
        options = select.options
        if index >= len(options):
            return False
        self.applier.apply(options[index], selected)
        return True

    def _apply(self, select, match: Match, selected: bool) -> Optional[MatchKind]:
        if not match.options:
            return None
        for option in match.options:
            self.applier.apply(option, selected)
            # a single-selection list can hold only one selected option
            if not select.is_multiple:
                break
        return match.kind
