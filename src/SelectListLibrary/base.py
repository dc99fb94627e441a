from robot.api import logger

from .session import DriverSession, SelectList
from .strategies import SelectionStrategy


class LibraryComponent:
    def __init__(self, library):
        self.library = library

    @property
    def session(self) -> DriverSession:
        return self.library.session

    @property
    def strategy(self) -> SelectionStrategy:
        return self.session.strategy

    def get_select_list(self, locator) -> SelectList:
        return self.session.get_select_list(locator)

    def log_source(self, loglevel: str = "INFO"):
        if loglevel.upper() == "NONE":
            return
        logger.write(self.session.driver.page_source, level=loglevel.upper())
