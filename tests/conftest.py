# tests/conftest.py
import pytest

from SelectListLibrary import SelectListLibrary, SelectionMode

from ._utils import FakeDriver, FakeElement, FakeSelect


@pytest.fixture
def fruits():
    return FakeSelect(
        "fruits",
        [
            ("apple", "Apple"),
            ("banana", "Banana"),
            ("cherry", "Cherry"),
            ("date", "Date"),
            ("elder", "Elderberry"),
        ],
        multiple=True,
    )


@pytest.fixture
def countries():
    select = FakeSelect(
        "countries",
        [("us", "United States"), ("uk", "United Kingdom"), ("ny", "New   York")],
    )
    select.options[0].selected = True
    return select


@pytest.fixture
def driver(fruits, countries):
    return FakeDriver([fruits, countries, FakeElement("notalist")])


@pytest.fixture
def lib(driver):
    return SelectListLibrary(
        run_on_failure=None, selection_mode=SelectionMode.SCRIPT, webdriver=driver
    )


@pytest.fixture
def warn_messages(monkeypatch):
    from robot.api import logger

    messages = []
    monkeypatch.setattr(logger, "warn", lambda msg, *args, **kwargs: messages.append(msg))
    return messages
