from typing import Optional

from robot.api import logger
from robot.api.deco import library
from robot.libraries.BuiltIn import BuiltIn
from robotlibcore import DynamicCore

from .errors import (
    InvalidIndexError,
    LocatorNotFoundError,
    NoInputError,
    NoOpenBrowserError,
    NoSelectionError,
    NotMultiselectError,
    OptionNotFoundError,
    OptionsNotFoundError,
    SelectionMismatchError,
    SelectListError,
    UnexpectedSelectionError,
)
from .keywords import LibraryKeywords, ListViewKeywords, SelectionKeywords
from .locator import Locator
from .session import DriverSession, PriorityLibrary, SelectionMode

__version__ = "1.0.0"


@library(converters={Locator: Locator.from_any})
class SelectListLibrary(DynamicCore):
    """_*SelectListLibrary*_ operates HTML select lists through [https://www.selenium.dev|Selenium] WebDriver.

    %TOC%

    = Usage =

    The library borrows the WebDriver of an open
    [https://robotframework.org/SeleniumLibrary|SeleniumLibrary] browser.
    Keyword names are the same as the select list keywords of SeleniumLibrary,
    so the library can replace them without changing test data.

    | ***** Settings *****
    | Library    SeleniumLibrary
    | Library    SelectListLibrary    prioritize_library=SelectListLibrary
    |
    | ***** Test Cases *****
    | Choose Fruits
    |     Open Browser    ${URL}    firefox
    |     Select From List    fruits    apple    Banana
    |     List Selection Should Be    fruits    apple    banana

    == Keyword Conflicts ==

    All keywords conflict with the SeleniumLibrary keywords of the same name.
    Use ``prioritize_library`` to let the library set the library search order,
    or prefix keywords with the library name like ``SelectListLibrary.Select From List``.

    = Locating Select Lists =

    Locators follow SeleniumLibrary syntax: ``id:fruits``, ``name:fruits``,
    ``css:select.fruits``, ``xpath://select[@id="fruits"]``, ``class:fruits``,
    ``tag:select``. Locators starting with ``//`` are XPath, anything else is
    matched against ``id`` and ``name``. A list of locators is a chain where
    every part is searched inside the elements found by the previous one.

    Only ``select`` elements are considered; the first one found is used.

    = Selecting Options =

    `Select From List` and `Unselect From List` try every item as an option
    value first and as a visible label second. The ``By Index``, ``By Value``
    and ``By Label`` variants use one matching strategy only.

    Labels are compared with white space normalized. If a label with spaces is
    not found directly, options containing its longest word are searched and
    compared again, because some drivers fail on exact text queries.

    == Selection Modes ==

    Firefox sessions driven by marionette can not select options of
    multi-selection lists natively. For these sessions options are selected
    by script and a ``change`` event is fired on the list afterwards.
    Handlers failing on that event are ignored.

    | =Mode= | =Description= |
    | ``AUTO`` | Script selection for sessions with the ``marionette`` capability, native otherwise. |
    | ``NATIVE`` | Always use Selenium's ``Select`` support. |
    | ``SCRIPT`` | Always select by script. |

    The mode is decided once per WebDriver session. See `Set Selection Mode`.
    """

    ROBOT_LIBRARY_SCOPE = "GLOBAL"
    ROBOT_LIBRARY_VERSION = __version__

    def __init__(
        self,
        run_on_failure="Capture Page Screenshot",
        selection_mode: SelectionMode = SelectionMode.AUTO,
        screenshot_root_directory: Optional[str] = None,
        *,
        prioritize_library: Optional[PriorityLibrary] = None,
        webdriver=None,
    ):
        """_*SelectListLibrary*_ can be imported with these optional arguments.

        | =Arguments= | =Description= |
        | ``run_on_failure`` | Keyword executed when a keyword of this library fails. ``NOTHING`` disables it. |
        | ``selection_mode`` | ``AUTO``, ``NATIVE`` or ``SCRIPT``. See `Selection Modes`. |
        | ``screenshot_root_directory`` | Directory for failure screenshots. If not set, the log directory is used. |
        | ``prioritize_library`` | ``SelectListLibrary`` or ``SeleniumLibrary``, sets the library search order. See `Keyword Conflicts`. |
        | ``webdriver`` | A WebDriver instance to use instead of the one of SeleniumLibrary. |
        """
        self.session = DriverSession(
            webdriver=webdriver,
            selection_mode=selection_mode,
            prioritize_library=prioritize_library,
        )
        self.library_keywords = LibraryKeywords(self, screenshot_root_directory)
        self.run_on_failure_keyword = self.library_keywords.resolve_keyword(run_on_failure)
        components = [SelectionKeywords(self), ListViewKeywords(self), self.library_keywords]
        super().__init__(components)
        self._running_on_failure_keyword = False

    def set_webdriver(self, webdriver):
        self.session.driver = webdriver

    def run_keyword(self, name, args, kwargs=None):
        try:
            return super().run_keyword(name, args, kwargs)
        except Exception as e:
            self.failure_occurred()
            raise e

    def failure_occurred(self):
        """Runs the registered run-on-failure keyword.

        Failures of that keyword are logged as warnings and do not hide the
        original error.
        """
        if self._running_on_failure_keyword or not self.run_on_failure_keyword:
            return
        try:
            self._running_on_failure_keyword = True
            if self.run_on_failure_keyword.lower() == "capture page screenshot":
                self.library_keywords.capture_page_screenshot()
            else:
                BuiltIn().run_keyword(self.run_on_failure_keyword)
        except Exception as err:
            logger.warn(
                f"Keyword '{self.run_on_failure_keyword}' could not be run on failure: {err}"
            )
        finally:
            self._running_on_failure_keyword = False


__all__ = [
    "DriverSession",
    "InvalidIndexError",
    "Locator",
    "LocatorNotFoundError",
    "NoInputError",
    "NoOpenBrowserError",
    "NoSelectionError",
    "NotMultiselectError",
    "OptionNotFoundError",
    "OptionsNotFoundError",
    "PriorityLibrary",
    "SelectListError",
    "SelectListLibrary",
    "SelectionMismatchError",
    "SelectionMode",
    "UnexpectedSelectionError",
]
