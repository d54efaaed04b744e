import pytest

from cascade_client.page import Page, PageStateError, WorkingState
from cascade_client.pages import (
    LIST_PAGE_TOOLBAR,
    Chart,
    ChartsPage,
    ConnectionsPage,
    LogbookPage,
    ScenariosPage,
    SettingsPage,
)


def test_chart_equality_by_name():
    assert Chart("temp") == Chart("temp")
    assert not (Chart("temp") == Chart("co2"))


def test_chart_hash_matches_equality():
    assert len({Chart("a"), Chart("a"), Chart("b")}) == 2


def test_chart_not_equal_to_other_type():
    assert (Chart("a") == "a") is False


@pytest.mark.parametrize(
    "cls", [ChartsPage, ConnectionsPage, ScenariosPage, SettingsPage, LogbookPage]
)
def test_pages_keep_name_and_start_off(cls):
    page = cls("x")
    assert isinstance(page, Page)
    assert page.name == "x"
    assert page.state is WorkingState.OFF


@pytest.mark.parametrize("cls", [ChartsPage, ConnectionsPage, ScenariosPage])
def test_list_pages_toolbar_layout(cls):
    assert cls.toolbar == LIST_PAGE_TOOLBAR
    assert cls.toolbar[0] == "sort"
    assert cls.toolbar.count("|") == 2


def test_list_toolbar_holds_source_actions():
    page = ChartsPage("charts")
    assert [a for a in page.toolbar if a != "|"] == [
        "sort",
        "add",
        "remove",
        "suspend",
        "resume",
    ]


def test_add_connection_adds_nothing():
    page = ConnectionsPage("connections")
    page.add_connection()
    assert page.connections() == ()


def test_subpage_state_machine():
    page = ScenariosPage("scenarios")
    page.on()
    page.suspend()
    assert page.state is WorkingState.SUSPENDED
    with pytest.raises(PageStateError):
        page.on()