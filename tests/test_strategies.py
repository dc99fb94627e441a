from unittest import mock

import pytest
from selenium.common.exceptions import NoSuchElementException

from SelectListLibrary import strategies
from SelectListLibrary.matcher import MatchKind
from SelectListLibrary.session import DriverSession, SelectionMode, SelectList
from SelectListLibrary.strategies import NativeSelection, ScriptSelection

from ._utils import FakeDriver, FakeSelect


@pytest.fixture
def native_select(monkeypatch):
    select_cls = mock.Mock()
    monkeypatch.setattr(strategies, "Select", select_cls)
    return select_cls.return_value


def test_native_delegates_to_selenium_select(native_select, countries):
    select = SelectList(countries, "countries")
    strategy = NativeSelection()

    assert strategy.select_by_value(select, "uk") == MatchKind.VALUE
    assert strategy.select_by_label(select, "United Kingdom") == MatchKind.TEXT
    assert strategy.select_by_index(select, 2) is True

    native_select.select_by_value.assert_called_once_with("uk")
    native_select.select_by_visible_text.assert_called_once_with("United Kingdom")
    native_select.select_by_index.assert_called_once_with(2)


def test_native_miss_is_not_an_error(native_select, fruits):
    native_select.select_by_value.side_effect = NoSuchElementException("nope")
    native_select.deselect_by_visible_text.side_effect = NoSuchElementException("nope")
    select = SelectList(fruits, "fruits")
    strategy = NativeSelection()

    assert strategy.select_by_value(select, "kiwi") is None
    assert strategy.deselect_by_label(select, "Kiwi") is False


def test_native_deselect_all(native_select, fruits):
    NativeSelection().deselect_all(SelectList(fruits, "fruits"))
    native_select.deselect_all.assert_called_once_with()


def test_script_single_select_applies_first_match_only(driver):
    twins = FakeSelect("twins", [("x", "First"), ("x", "Second")])
    strategy = ScriptSelection(driver)

    assert strategy.select_by_value(SelectList(twins, "twins"), "x") == MatchKind.VALUE
    assert twins.selected_labels() == ["First"]
    assert len([s for s, _ in driver.scripts if "option.selected" in s]) == 1


def test_script_multi_select_applies_all_matches(driver):
    twins = FakeSelect("twins", [("x", "First"), ("x", "Second")], multiple=True)
    ScriptSelection(driver).select_by_value(SelectList(twins, "twins"), "x")
    assert twins.selected_labels() == ["First", "Second"]


def test_script_index_out_of_range(driver, fruits):
    assert ScriptSelection(driver).select_by_index(SelectList(fruits, "fruits"), 5) is False


def test_script_deselect_all_touches_selected_only(driver, fruits):
    fruits.options[0].selected = True
    fruits.options[3].selected = True
    ScriptSelection(driver).deselect_all(SelectList(fruits, "fruits"))
    assert fruits.selected_labels() == []
    assert fruits.change_events == 2


@pytest.mark.parametrize(
    "capabilities, expected",
    [
        ({"browserName": "firefox", "marionette": True}, ScriptSelection),
        ({"browserName": "firefox", "marionette": False}, NativeSelection),
        ({"browserName": "chrome"}, NativeSelection),
    ],
)
def test_auto_mode_uses_marionette_capability(capabilities, expected):
    session = DriverSession(webdriver=FakeDriver(capabilities=capabilities))
    assert isinstance(session.strategy, expected)


def test_strategy_is_chosen_once_per_session():
    driver = FakeDriver(capabilities={"marionette": True})
    session = DriverSession(webdriver=driver)
    first = session.strategy
    driver.capabilities = {}
    assert session.strategy is first

    driver.session_id = "session-2"
    assert isinstance(session.strategy, NativeSelection)


def test_explicit_mode_wins_and_resets_cache():
    session = DriverSession(
        webdriver=FakeDriver(capabilities={"marionette": True}),
        selection_mode=SelectionMode.NATIVE,
    )
    assert isinstance(session.strategy, NativeSelection)
    session.selection_mode = SelectionMode.SCRIPT
    assert isinstance(session.strategy, ScriptSelection)


def test_capabilities_are_key_value_strings():
    session = DriverSession(webdriver=FakeDriver(capabilities={"marionette": True, "x": 1}))
    assert session.capabilities == {"marionette=true", "x=1"}


def test_only_the_current_session_strategy_is_kept():
    driver = FakeDriver(capabilities={"marionette": True})
    session = DriverSession(webdriver=driver)
    first = session.strategy

    driver.session_id = "session-2"
    second = session.strategy
    assert second is not first

    driver.session_id = "session-1"
    assert session.strategy is not first


def test_native_label_reports_selenium_substring_fallback(native_select, countries):
    select = SelectList(countries, "countries")
    countries.exact_text_queries_broken = True

    assert NativeSelection().select_by_label(select, "New York") == MatchKind.TEXT_FALLBACK
    native_select.select_by_visible_text.assert_called_once_with("New York")
