from contextlib import suppress
from enum import Enum, auto
from typing import List, Optional, Set, Union

from robot.api import logger
from robot.libraries.BuiltIn import BuiltIn, RobotNotRunningError
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webelement import WebElement

from .errors import LocatorNotFoundError, NoOpenBrowserError
from .locator import Locator
from .strategies import NativeSelection, ScriptSelection, SelectionStrategy

try:
    from SeleniumLibrary import SeleniumLibrary
    from SeleniumLibrary.errors import NoOpenBrowser
except ImportError:
    SeleniumLibrary = None

MARIONETTE = "marionette=true"


class SelectionMode(Enum):
    AUTO = auto()
    NATIVE = auto()
    SCRIPT = auto()


class PriorityLibrary(Enum):
    SelectListLibrary = auto()
    SeleniumLibrary = auto()


class SelectList:
    """A ``<select>`` element found for one keyword call.

    Options are queried again on every access, page state may change between
    calls.
    """

    def __init__(self, element: WebElement, locator: str):
        self.element = element
        self.locator = locator
        multiple = element.get_dom_attribute("multiple")
        self.is_multiple = bool(multiple) and multiple != "false"

    @property
    def options(self) -> List[WebElement]:
        return self.element.find_elements(By.TAG_NAME, "option")

    @property
    def selected_options(self) -> List[WebElement]:
        return [option for option in self.options if option.is_selected()]


class DriverSession:
    def __init__(
        self,
        webdriver=None,
        selection_mode: SelectionMode = SelectionMode.AUTO,
        prioritize_library: Optional[PriorityLibrary] = None,
    ):
        self._webdriver = webdriver
        self._selection_mode = selection_mode
        self._strategy: Optional[SelectionStrategy] = None
        self._strategy_session: Optional[str] = None
        self.prioritize_library = prioritize_library
        self._search_order_set = False

    @property
    def driver(self):
        if self._webdriver is not None:
            return self._webdriver
        driver = self._find_selenium_library_driver()
        if driver is None:
            raise NoOpenBrowserError(
                "No open browser. Open one with SeleniumLibrary or hand a WebDriver to the library."
            )
        return driver

    @driver.setter
    def driver(self, webdriver):
        self._webdriver = webdriver

    @property
    def is_open(self) -> bool:
        with suppress(NoOpenBrowserError):
            return self.driver is not None
        return False

    def _find_selenium_library_driver(self):
        if SeleniumLibrary is None:
            return None
        try:
            libraries = BuiltIn().get_library_instance(all=True)
        except RobotNotRunningError:
            return None
        driver = None
        own_name = selenium_name = None
        for name, lib in libraries.items():
            if isinstance(lib, SeleniumLibrary):
                selenium_name = name
                with suppress(NoOpenBrowser):
                    driver = lib.driver
            elif type(lib).__name__ == "SelectListLibrary":
                own_name = name
        if not self._search_order_set:
            self._search_order_set = True
            if self.prioritize_library == PriorityLibrary.SeleniumLibrary:
                BuiltIn().set_library_search_order(selenium_name or "SeleniumLibrary")
            elif self.prioritize_library == PriorityLibrary.SelectListLibrary:
                BuiltIn().set_library_search_order(own_name or "SelectListLibrary")
        return driver

    @property
    def selection_mode(self) -> SelectionMode:
        return self._selection_mode

    @selection_mode.setter
    def selection_mode(self, mode: SelectionMode):
        self._selection_mode = mode
        self._strategy = None

    @property
    def capabilities(self) -> Set[str]:
        capabilities = self.driver.capabilities or {}
        return {f"{key}={self._format_capability(value)}" for key, value in capabilities.items()}

    @staticmethod
    def _format_capability(value) -> str:
        if isinstance(value, bool):
            return str(value).lower()
        return str(value)

    @property
    def strategy(self) -> SelectionStrategy:
        driver = self.driver
        key = getattr(driver, "session_id", None) or str(id(driver))
        # one strategy per browser session, replaced when the session changes
        if self._strategy is None or key != self._strategy_session:
            self._strategy = self._create_strategy(driver)
            self._strategy_session = key
        return self._strategy

    def _create_strategy(self, driver) -> SelectionStrategy:
        mode = self._selection_mode
        if mode == SelectionMode.AUTO:
            mode = SelectionMode.SCRIPT if MARIONETTE in self.capabilities else SelectionMode.NATIVE
        logger.debug(f"Using {mode.name.lower()} option selection for this session.")
        if mode == SelectionMode.SCRIPT:
            return ScriptSelection(driver)
        return NativeSelection()

    def find_elements(self, locator: Union[Locator, str, list, tuple]) -> List[WebElement]:
        locator = Locator.from_any(locator)
        elements = [self.driver]
        for queries in locator.parts:
            elements = [
                found
                for parent in elements
                for by, value in queries
                for found in parent.find_elements(by, value)
            ]
        return elements

    def find_select_elements(self, locator) -> List[WebElement]:
        if isinstance(locator, WebElement):
            elements = [locator]
        else:
            elements = self.find_elements(locator)
        return [element for element in elements if element.tag_name.lower() == "select"]

    def get_select_list(self, locator) -> SelectList:
        elements = self.find_select_elements(locator)
        if not elements:
            raise LocatorNotFoundError(str(locator))
        return SelectList(elements[0], str(locator))
