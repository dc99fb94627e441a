from collections import namedtuple
from typing import Callable, List, Sequence, Union

from robot.api import logger
from robotlibcore import keyword

from ..base import LibraryComponent
from ..errors import (
    InvalidIndexError,
    NoInputError,
    NotMultiselectError,
    OptionNotFoundError,
    OptionsNotFoundError,
)
from ..locator import Locator
from ..session import SelectList

Resolution = namedtuple("Resolution", ["token", "matched", "kind"])


class SelectionKeywords(LibraryComponent):
    @keyword
    def select_all_from_list(self, locator: Locator):
        """Selects all options from the multi-selection list ``locator``.

        Fails if the list is a single-selection list.
        """
        logger.info(f"Selecting all options from list '{locator}'.")
        select = self.get_select_list(locator)
        if not select.is_multiple:
            raise NotMultiselectError("Select All From List")
        self._select_all(select)

    @keyword
    def select_from_list(self, locator: Locator, *items: str):
        """Selects ``items`` from the list ``locator``.

        Every item is tried as an option value first and as a visible label
        second. Without ``items`` every option is selected in order, also
        for single-selection lists where the last option wins.

        For a multi-selection list the keyword fails if any item was not
        found, after all items have been tried. For a single-selection list
        items that were not found are logged as a warning and the keyword
        fails only if the last item was not found.

        | `Select From List` | fruits | apple | Banana |
        """
        items_str = f"option(s) [ {' | '.join(items)} ]" if items else "all options"
        logger.info(f"Selecting {items_str} from list '{locator}'.")
        select = self.get_select_list(locator)
        if not items:
            self._select_all(select)
            return
        strategy = self.strategy
        outcomes = []
        for item in items:
            kind = strategy.select_by_value(select, item) or strategy.select_by_label(select, item)
            if kind is None:
                logger.debug(f"Option '{item}' not found.")
            else:
                logger.debug(f"Found '{item}' by {kind.name.lower().replace('_', ' ')}.")
            outcomes.append(Resolution(item, kind is not None, kind))
        self._check_outcomes(select, outcomes)

    def _check_outcomes(self, select: SelectList, outcomes: List[Resolution]):
        missing = [outcome.token for outcome in outcomes if not outcome.matched]
        if not missing:
            return
        missing_str = ", ".join(missing)
        if select.is_multiple:
            raise OptionsNotFoundError(
                f"Options '{missing_str}' not in list '{select.locator}'.", missing
            )
        plural = "s" if len(missing) > 1 else ""
        logger.warn(f"Option{plural} '{missing_str}' not found within list '{select.locator}'.")
        last = outcomes[-1]
        if not last.matched:
            raise OptionsNotFoundError(
                f"Option '{last.token}' not in list '{select.locator}'.", [last.token]
            )

    @keyword
    def select_from_list_by_index(self, locator: Locator, *indexes: str):
        """Selects options at ``indexes`` (starting from 0) from the list ``locator``."""
        if not indexes:
            raise NoInputError("No index given.")
        positions = self._parse_indexes(indexes)
        logger.info(f"Selecting index(es) '{self._join(indexes)}' from list '{locator}'.")
        select = self.get_select_list(locator)
        strategy = self.strategy
        for index, position in zip(indexes, positions):
            if not strategy.select_by_index(select, position):
                raise OptionNotFoundError(
                    f"Option with index '{index}' not in list '{select.locator}'.", [str(index)]
                )

    @keyword
    def select_from_list_by_value(self, locator: Locator, *values: str):
        if not values:
            raise NoInputError("No value given.")
        logger.info(f"Selecting value(s) '{self._join(values)}' from list '{locator}'.")
        select = self.get_select_list(locator)
        strategy = self.strategy
        for value in values:
            if strategy.select_by_value(select, value) is None:
                raise OptionNotFoundError(
                    f"Option with value '{value}' not in list '{select.locator}'.", [value]
                )

    @keyword
    def select_from_list_by_label(self, locator: Locator, *labels: str):
        if not labels:
            raise NoInputError("No label given.")
        logger.info(f"Selecting label(s) '{self._join(labels)}' from list '{locator}'.")
        select = self.get_select_list(locator)
        strategy = self.strategy
        for label in labels:
            if strategy.select_by_label(select, label) is None:
                raise OptionNotFoundError(
                    f"Option with label '{label}' not in list '{select.locator}'.", [label]
                )

    @keyword
    def unselect_all_from_list(self, locator: Locator):
        logger.info(f"Unselecting all options from list '{locator}'.")
        select = self._get_multiselect_list(locator, "Unselect All From List")
        self.strategy.deselect_all(select)

    @keyword
    def unselect_from_list(self, locator: Locator, *items: str):
        """Unselects ``items`` from the multi-selection list ``locator``.

        Items are matched both by value and by label. Items that are not
        found are ignored. Without ``items`` all selections are removed.
        """
        items_str = f"option(s) [ {' | '.join(items)} ]" if items else "all options"
        logger.info(f"Unselecting {items_str} from list '{locator}'.")
        select = self._get_multiselect_list(locator, "Unselect From List")
        strategy = self.strategy
        if not items:
            strategy.deselect_all(select)
            return
        for item in items:
            by_value = strategy.deselect_by_value(select, item)
            by_label = strategy.deselect_by_label(select, item)
            if not (by_value or by_label):
                logger.debug(f"Option '{item}' not found, nothing to unselect.")

    @keyword
    def unselect_from_list_by_index(self, locator: Locator, *indexes: str):
        if not indexes:
            raise NoInputError("No index given.")
        positions = self._parse_indexes(indexes)
        logger.info(f"Unselecting index(es) '{self._join(indexes)}' from list '{locator}'.")
        select = self._get_multiselect_list(locator, "Unselect From List By Index")
        self._unselect_each(select, positions, self.strategy.deselect_by_index)

    @keyword
    def unselect_from_list_by_value(self, locator: Locator, *values: str):
        if not values:
            raise NoInputError("No value given.")
        logger.info(f"Unselecting value(s) '{self._join(values)}' from list '{locator}'.")
        select = self._get_multiselect_list(locator, "Unselect From List By Value")
        self._unselect_each(select, values, self.strategy.deselect_by_value)

    @keyword
    def unselect_from_list_by_label(self, locator: Locator, *labels: str):
        if not labels:
            raise NoInputError("No label given.")
        logger.info(f"Unselecting label(s) '{self._join(labels)}' from list '{locator}'.")
        select = self._get_multiselect_list(locator, "Unselect From List By Label")
        self._unselect_each(select, labels, self.strategy.deselect_by_label)

    def _get_multiselect_list(self, locator, keyword_name: str) -> SelectList:
        select = self.get_select_list(locator)
        if not select.is_multiple:
            raise NotMultiselectError(keyword_name)
        return select

    def _select_all(self, select: SelectList):
        strategy = self.strategy
        for index in range(len(select.options)):
            strategy.select_by_index(select, index)

    @staticmethod
    def _unselect_each(select: SelectList, tokens: Sequence, deselect: Callable):
        for token in tokens:
            if not deselect(select, token):
                logger.debug(f"Option '{token}' not found, nothing to unselect.")

    @staticmethod
    def _parse_indexes(indexes: Sequence[Union[str, int]]) -> List[int]:
        positions = []
        for index in indexes:
            try:
                position = int(index)
            except (TypeError, ValueError):
                raise InvalidIndexError(str(index)) from None
            if position < 0:
                raise InvalidIndexError(str(index))
            positions.append(position)
        return positions

    @staticmethod
    def _join(tokens: Sequence) -> str:
        return ", ".join(str(token) for token in tokens)
