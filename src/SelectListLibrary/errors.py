from typing import List, Optional, Sequence


class SelectListError(Exception):
    ROBOT_SUPPRESS_NAME = True


class NoOpenBrowserError(SelectListError):
    pass


class LocatorNotFoundError(SelectListError):
    def __init__(self, locator: str, message: Optional[str] = None):
        self.locator = locator
        super().__init__(message or f"Select list with locator '{locator}' not found.")


class NotMultiselectError(SelectListError):
    def __init__(self, keyword_name: str):
        self.keyword_name = keyword_name
        super().__init__(f"Keyword '{keyword_name}' works only for multiselect lists.")


class NoInputError(SelectListError, ValueError):
    pass


class InvalidIndexError(SelectListError, ValueError):
    def __init__(self, index: str):
        self.index = index
        super().__init__(f"Index '{index}' is not a non-negative integer.")


class OptionNotFoundError(SelectListError):
    def __init__(self, message: str, items: Sequence[str] = ()):
        self.items: List[str] = list(items)
        super().__init__(message)


class OptionsNotFoundError(OptionNotFoundError):
    pass


class NoSelectionError(SelectListError):
    pass


class SelectionMismatchError(SelectListError, AssertionError):
    def __init__(self, message: str, expected: Sequence[str], actual: Sequence[str]):
        self.expected = list(expected)
        self.actual = list(actual)
        super().__init__(message)


class UnexpectedSelectionError(SelectListError, AssertionError):
    def __init__(self, message: str, actual: Sequence[str]):
        self.actual = list(actual)
        super().__init__(message)
