from itertools import count
from pathlib import Path
from typing import Optional

from robot.api import logger
from robot.libraries.BuiltIn import BuiltIn, RobotNotRunningError
from robotlibcore import keyword

from ..base import LibraryComponent
from ..session import SelectionMode

DEFAULT_FILENAME_PAGE = "selectlist-screenshot-{index}.png"
EMBED = "EMBED"


class LibraryKeywords(LibraryComponent):
    def __init__(self, library, screenshot_root_directory: Optional[str] = None):
        super().__init__(library)
        self.screenshot_root_directory = screenshot_root_directory
        self._screenshot_index = count(1)

    @property
    def log_dir(self) -> Path:
        try:
            logfile = BuiltIn().get_variable_value("${LOG FILE}", None)
            if logfile is None or logfile == "NONE":
                return Path(BuiltIn().get_variable_value("${OUTPUTDIR}", Path.cwd()))
            return Path(logfile).parent
        except RobotNotRunningError:
            return Path.cwd()

    @keyword
    def register_keyword_to_run_on_failure(self, keyword: Optional[str]) -> Optional[str]:
        """Sets the keyword run when a keyword of this library fails.

        ``NOTHING`` or ``NONE`` disables the functionality. Returns the
        previously registered keyword.
        """
        old_keyword = self.library.run_on_failure_keyword
        new_keyword = self.resolve_keyword(keyword)
        self.library.run_on_failure_keyword = new_keyword
        logger.info(f"{(new_keyword or 'No keyword')} will be run on failure.")
        return old_keyword

    @staticmethod
    def resolve_keyword(name):
        if name is None:
            return None
        if isinstance(name, str) and name.upper() in ("NOTHING", "NONE", ""):
            return None
        return name

    @keyword
    def set_selection_mode(self, mode: SelectionMode) -> SelectionMode:
        """Sets how options are selected: ``AUTO``, ``NATIVE`` or ``SCRIPT``.

        ``AUTO`` uses scripted selection only for marionette sessions.
        Returns the previous mode.
        """
        old_mode = self.session.selection_mode
        self.session.selection_mode = mode
        logger.info(f"Option selection mode set to {mode.name}.")
        return old_mode

    def capture_page_screenshot(self) -> Optional[str]:
        if not self.session.is_open:
            logger.info("Cannot capture screenshot because no browser is open.")
            return None
        directory = self.screenshot_root_directory
        if not directory or directory.upper() == EMBED:
            directory = self.log_dir
        path = Path(directory, DEFAULT_FILENAME_PAGE.format(index=next(self._screenshot_index)))
        path = path.resolve()
        path.parent.mkdir(parents=True, exist_ok=True)
        if not self.session.driver.save_screenshot(str(path)):
            logger.info("Screenshot could not be saved.")
            return None
        try:
            link = path.relative_to(self.log_dir.resolve()).as_posix()
        except ValueError:
            link = path.as_uri()
        logger.info(
            f'</td></tr><tr><td colspan="3"><a href="{link}"><img src="{link}" width="800px"></a>',
            html=True,
        )
        return str(path)
