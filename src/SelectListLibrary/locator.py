import re
from typing import Callable, ClassVar, Dict, List, Tuple, Union

from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webelement import WebElement

Query = Tuple[str, str]


class Locator(str):
    """SeleniumLibrary style locator string resolved into WebDriver queries.

    Every part of a locator is a list of ``(By, value)`` queries whose results
    are concatenated. A chained locator (given as a list) searches each part
    inside the elements found by the previous one.
    """

    LOCATORS: ClassVar[Dict[str, Callable[[str], List[Query]]]] = {
        "identifier": lambda loc: [(By.ID, loc), (By.NAME, loc)],
        "id": lambda loc: [(By.ID, loc)],
        "name": lambda loc: [(By.NAME, loc)],
        "class": lambda loc: [(By.CLASS_NAME, loc)],
        "tag": lambda loc: [(By.TAG_NAME, loc)],
        "xpath": lambda loc: [(By.XPATH, loc)],
        "css": lambda loc: [(By.CSS_SELECTOR, loc)],
        "partial link": lambda loc: [(By.PARTIAL_LINK_TEXT, loc)],
        "link": lambda loc: [(By.LINK_TEXT, loc)],
    }
    UNSUPPORTED: ClassVar[Tuple[str, ...]] = ("dom", "jquery", "sizzle")

    parts: List[List[Query]]
    original_locator: Union[str, tuple] = ""

    @classmethod
    def from_any(
        cls, locator: Union[WebElement, list, tuple, str]
    ) -> Union[WebElement, "Locator"]:
        """Converts keyword ``locator`` arguments.

        A ``WebElement``, for example one returned by SeleniumLibrary's
        ``Get WebElement``, is passed through as is.
        """
        if isinstance(locator, (Locator, WebElement)):
            return locator
        if isinstance(locator, (list, tuple)):
            return cls.from_list(locator)
        return cls.from_string(locator)

    @classmethod
    def from_string(cls, locator: str) -> "Locator":
        loc = cls(locator)
        loc.parts = [cls.get_queries(locator)]
        loc.original_locator = locator
        return loc

    @classmethod
    def from_list(cls, locator: List[str]) -> "Locator":
        if not locator:
            raise ValueError("Locator chain can not be empty.")
        loc = cls(" >> ".join(locator))
        loc.parts = [cls.get_queries(part) for part in locator]
        loc.original_locator = " >> ".join(locator)
        return loc

    @classmethod
    def get_queries(cls, locator: str) -> List[Query]:
        for illegal_loc in cls.UNSUPPORTED:
            if re.match(f"{illegal_loc} ?[:=] ?", locator, flags=re.IGNORECASE):
                raise ValueError(
                    f"Invalid locator strategy '{illegal_loc}'.\n"
                    f"Please use a supported locator strategy instead.\n"
                    f"{list(cls.LOCATORS.keys())}"
                )
        for strategy, queries in cls.LOCATORS.items():
            match = re.match(f"{strategy} ?[:=] ?", locator, flags=re.IGNORECASE)
            if match:
                return queries(locator[match.end() :])
        if re.match(r"\(*//", locator):
            return [(By.XPATH, locator)]
        return [(By.ID, locator), (By.NAME, locator)]
