from typing import List, Optional, Sequence

from robot.api import logger
from robotlibcore import keyword
from selenium.webdriver.remote.webelement import WebElement

from ..base import LibraryComponent
from ..errors import NoSelectionError, SelectionMismatchError, UnexpectedSelectionError
from ..locator import Locator


def labels_of(options: Sequence[WebElement]) -> List[str]:
    return [option.text for option in options]


def values_of(options: Sequence[WebElement]) -> List[str]:
    return [option.get_attribute("value") for option in options]


class ListViewKeywords(LibraryComponent):
    def list_options(self, locator) -> List[WebElement]:
        return self.get_select_list(locator).options

    def selected_options(self, locator) -> List[WebElement]:
        return self.get_select_list(locator).selected_options

    def _required_selection(self, locator) -> List[WebElement]:
        options = self.selected_options(locator)
        if not options:
            raise NoSelectionError(
                f"Select list with locator '{locator}' does not have any selected values."
            )
        return options

    @keyword
    def get_list_items(self, locator: Locator, values: bool = False) -> List[str]:
        """Returns the labels of all options of the list ``locator``.

        With ``values`` enabled the option values are returned instead.
        """
        options = self.list_options(locator)
        if values:
            return values_of(options)
        return labels_of(options)

    @keyword
    def get_selected_list_label(self, locator: Locator) -> str:
        return self._required_selection(locator)[0].text

    @keyword
    def get_selected_list_labels(self, locator: Locator) -> List[str]:
        return labels_of(self._required_selection(locator))

    @keyword
    def get_selected_list_value(self, locator: Locator) -> str:
        return self._required_selection(locator)[0].get_attribute("value")

    @keyword
    def get_selected_list_values(self, locator: Locator) -> List[str]:
        return values_of(self._required_selection(locator))

    @keyword
    def list_selection_should_be(self, locator: Locator, *expected: str):
        """Verifies the selection of the list ``locator`` is exactly ``expected``.

        Expected items may be given as values or labels, in any order. To
        verify that nothing is selected, give no ``expected`` items.
        """
        items_str = f"option(s) [ {' | '.join(expected)} ]" if expected else "no options"
        logger.info(f"Verifying list '{locator}' has {items_str} selected.")
        options = self.selected_options(locator)
        selected_labels = labels_of(options)
        if len(expected) == len(options):
            selected_values = values_of(options)
            if all(item in selected_values or item in selected_labels for item in expected):
                return
        raise SelectionMismatchError(
            f"List '{locator}' should have had selection [ {' | '.join(expected)} ] "
            f"but it was [ {' | '.join(selected_labels)} ].",
            expected,
            selected_labels,
        )

    @keyword
    def list_should_have_no_selections(self, locator: Locator):
        logger.info(f"Verifying list '{locator}' has no selection.")
        options = self.selected_options(locator)
        if options:
            selected_labels = labels_of(options)
            raise UnexpectedSelectionError(
                f"List '{locator}' should have had no selection "
                f"(selection was [ {' | '.join(selected_labels)} ]).",
                selected_labels,
            )

    @keyword
    def page_should_contain_list(
        self,
        locator: Locator,
        message: Optional[str] = None,
        loglevel: str = "TRACE",
    ):
        if self.session.find_select_elements(locator):
            logger.info(f"Current page contains list '{locator}'.")
            return
        self.log_source(loglevel)
        raise AssertionError(message or f"Page should have contained list '{locator}' but did not.")

    @keyword
    def page_should_not_contain_list(
        self,
        locator: Locator,
        message: Optional[str] = None,
        loglevel: str = "TRACE",
    ):
        if not self.session.find_select_elements(locator):
            logger.info(f"Current page does not contain list '{locator}'.")
            return
        self.log_source(loglevel)
        raise AssertionError(
            message or f"Page should not have contained list '{locator}' but did."
        )
