from unittest import mock

import pytest
from selenium.common.exceptions import NoSuchElementException

from SelectListLibrary import (
    InvalidIndexError,
    LocatorNotFoundError,
    NoInputError,
    NotMultiselectError,
    OptionNotFoundError,
    OptionsNotFoundError,
    SelectionMode,
    SelectListLibrary,
    strategies,
)

ALL_FRUITS = ["Apple", "Banana", "Cherry", "Date", "Elderberry"]


def test_select_all_from_list(lib, fruits):
    lib.select_all_from_list("fruits")
    assert fruits.selected_labels() == ALL_FRUITS
    assert lib.get_selected_list_labels("fruits") == ALL_FRUITS


def test_select_all_from_single_list_fails(lib, countries, driver):
    with pytest.raises(NotMultiselectError):
        lib.select_all_from_list("countries")
    assert driver.scripts == []


def test_unknown_locator(lib):
    with pytest.raises(LocatorNotFoundError, match="'nothing' not found"):
        lib.select_from_list("nothing", "apple")


def test_locator_must_be_a_select(lib):
    with pytest.raises(LocatorNotFoundError):
        lib.select_from_list("id:notalist", "apple")


def test_select_from_list_by_value_and_label(lib, fruits):
    lib.select_from_list("fruits", "apple", "Cherry")
    assert fruits.selected_labels() == ["Apple", "Cherry"]


def test_select_from_list_without_items_selects_every_option(lib, fruits, countries):
    lib.select_from_list("fruits")
    assert fruits.selected_labels() == ALL_FRUITS

    lib.select_from_list("countries")
    assert countries.selected_labels() == ["New   York"]


def test_multiselect_miss_fails_after_trying_all(lib, fruits, warn_messages):
    with pytest.raises(OptionsNotFoundError) as error:
        lib.select_from_list("fruits", "kiwi", "banana", "mango", "Date")
    assert error.value.items == ["kiwi", "mango"]
    assert str(error.value) == "Options 'kiwi, mango' not in list 'fruits'."
    assert fruits.selected_labels() == ["Banana", "Date"]
    assert warn_messages == []


def test_single_select_early_miss_only_warns(lib, countries, warn_messages):
    lib.select_from_list("countries", "fr", "uk")
    assert countries.selected_labels() == ["United Kingdom"]
    assert warn_messages == ["Option 'fr' not found within list 'countries'."]


def test_single_select_last_miss_fails(lib, countries, warn_messages):
    with pytest.raises(OptionsNotFoundError) as error:
        lib.select_from_list("countries", "de", "uk", "fr")
    assert error.value.items == ["fr"]
    assert str(error.value) == "Option 'fr' not in list 'countries'."
    assert warn_messages == ["Options 'de, fr' not found within list 'countries'."]
    assert countries.selected_labels() == ["United Kingdom"]


def test_last_miss_is_an_option_not_found_error(lib):
    with pytest.raises(OptionNotFoundError):
        lib.select_from_list("countries", "United States", "Atlantis")


def test_select_from_list_by_value(lib, countries):
    lib.select_from_list_by_value("countries", "uk")
    lib.select_from_list_by_value("countries", "us")
    assert lib.get_selected_list_label("countries") == "United States"
    assert lib.get_selected_list_value("countries") == "us"


def test_select_from_list_by_value_fails_on_first_miss(lib, fruits):
    with pytest.raises(OptionNotFoundError) as error:
        lib.select_from_list_by_value("fruits", "apple", "kiwi", "banana")
    assert error.value.items == ["kiwi"]
    assert fruits.selected_labels() == ["Apple"]


def test_select_from_list_by_value_ignores_labels(lib):
    with pytest.raises(OptionNotFoundError, match="value 'Apple'"):
        lib.select_from_list_by_value("fruits", "Apple")


def test_select_from_list_by_label(lib, fruits):
    lib.select_from_list_by_label("fruits", "Banana", "Elderberry")
    assert fruits.selected_labels() == ["Banana", "Elderberry"]
    with pytest.raises(OptionNotFoundError, match="label 'banana'"):
        lib.select_from_list_by_label("fruits", "banana")


def test_select_from_list_by_label_with_irregular_spacing(lib, countries):
    countries.exact_text_queries_broken = True
    lib.select_from_list_by_label("countries", "New York")
    assert countries.selected_labels() == ["New   York"]


def test_select_from_list_by_index(lib, fruits):
    lib.select_from_list_by_index("fruits", "0", 3)
    assert fruits.selected_labels() == ["Apple", "Date"]


@pytest.mark.parametrize("index", ["one", "-1", "1.5"])
def test_invalid_index_fails_before_selecting(lib, driver, index):
    with pytest.raises(InvalidIndexError):
        lib.select_from_list_by_index("fruits", "1", index)
    assert driver.scripts == []


def test_index_out_of_range(lib):
    with pytest.raises(OptionNotFoundError, match="index '9'"):
        lib.select_from_list_by_index("fruits", "9")


@pytest.mark.parametrize(
    "keyword",
    [
        "select_from_list_by_index",
        "select_from_list_by_value",
        "select_from_list_by_label",
        "unselect_from_list_by_index",
        "unselect_from_list_by_value",
        "unselect_from_list_by_label",
    ],
)
def test_by_keywords_require_input(lib, keyword):
    with pytest.raises(NoInputError):
        getattr(lib, keyword)("fruits")


def test_unselect_from_list_without_items_clears_selection(lib, fruits):
    for option in fruits.options[:3]:
        option.selected = True
    lib.unselect_from_list("fruits")
    assert fruits.selected_labels() == []
    lib.list_should_have_no_selections("fruits")


def test_unselect_from_list_by_value_and_label(lib, fruits):
    lib.select_all_from_list("fruits")
    lib.unselect_from_list("fruits", "apple", "Cherry", "kiwi")
    assert fruits.selected_labels() == ["Banana", "Date", "Elderberry"]


def test_unselect_all_from_list(lib, fruits):
    lib.select_from_list("fruits", "apple", "date")
    lib.unselect_all_from_list("fruits")
    assert fruits.selected_labels() == []


@pytest.mark.parametrize(
    "keyword, token",
    [
        ("unselect_from_list", "us"),
        ("unselect_from_list_by_index", "0"),
        ("unselect_from_list_by_value", "us"),
        ("unselect_from_list_by_label", "United States"),
        ("unselect_all_from_list", None),
    ],
)
def test_unselect_requires_multiselect(lib, driver, countries, keyword, token):
    args = ["countries"] if token is None else ["countries", token]
    with pytest.raises(NotMultiselectError):
        getattr(lib, keyword)(*args)
    assert driver.scripts == []
    assert countries.selected_labels() == ["United States"]


def test_unselect_by_single_strategy_ignores_misses(lib, fruits):
    lib.select_all_from_list("fruits")
    lib.unselect_from_list_by_index("fruits", "0", "42")
    lib.unselect_from_list_by_value("fruits", "banana", "kiwi")
    lib.unselect_from_list_by_label("fruits", "Cherry", "banana")
    assert fruits.selected_labels() == ["Date", "Elderberry"]


def test_native_mode_falls_back_from_value_to_label(driver, monkeypatch):
    select_cls = mock.Mock()
    native = select_cls.return_value
    native.select_by_value.side_effect = NoSuchElementException("no value")
    monkeypatch.setattr(strategies, "Select", select_cls)
    lib = SelectListLibrary(
        run_on_failure=None, selection_mode=SelectionMode.NATIVE, webdriver=driver
    )

    lib.select_from_list("fruits", "Banana")

    native.select_by_value.assert_called_once_with("Banana")
    native.select_by_visible_text.assert_called_once_with("Banana")
    assert driver.scripts == []
