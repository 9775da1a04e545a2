import pytest

from browser_assert.assertions.common import CheckState
from browser_assert.assertions.forms import (
    assert_element_exists,
    assert_element_not_exists,
    assert_field_check_state,
    assert_select_value,
    select_radio_by_partial_id,
)
from browser_assert.core.errors import NotFoundError, StateAssertionError
from browser_assert.io.session import BrowserSession
from fakes import FakeDocument, FakeElement, FakePage, checkbox, radio


@pytest.fixture
def radios() -> FakeDocument:
    return FakeDocument(
        FakeElement(
            "form",
            "",
            radio("edit-status-0", "0", name="status", label="Blocked"),
            radio("edit-status-1", "1", name="status", label="Active"),
            radio("edit-mode-status-1", "x", name="mode", label="Active mode"),
            radio("edit-theme-1", "dark", name="theme", label="Theme"),
        )
    )


def test_select_radio_picks_first_id_match(radios: FakeDocument) -> None:
    session = BrowserSession(page=FakePage(radios))
    selected = select_radio_by_partial_id(session, "status-1")
    assert selected == "edit-status-1"
    assert radios.selections == ["1"]
    by_id = {e.attrs["id"]: e for e in radios.iter() if e.tag == "input"}
    assert by_id["edit-status-1"].checked
    assert not by_id["edit-mode-status-1"].checked


def test_select_radio_is_idempotent(radios: FakeDocument) -> None:
    session = BrowserSession(page=FakePage(radios))
    first = select_radio_by_partial_id(session, "status", "Active")
    second = select_radio_by_partial_id(session, "status", "Active")
    assert first == second == "edit-status-1"


def test_select_radio_filters_by_label(radios: FakeDocument) -> None:
    page = FakePage(radios)
    session = BrowserSession(page=page)
    assert select_radio_by_partial_id(session, "status", "Active mode") == "edit-mode-status-1"
    assert ("find_by_accessible_role", ("radio", "Active mode")) in page.calls


def test_select_radio_empty_label_means_any(radios: FakeDocument) -> None:
    page = FakePage(radios)
    select_radio_by_partial_id(BrowserSession(page=page), "theme")
    assert ("find_by_accessible_role", ("radio", None)) in page.calls


def test_select_radio_no_radio_for_label(radios: FakeDocument) -> None:
    session = BrowserSession(page=FakePage(radios))
    with pytest.raises(NotFoundError) as ei:
        select_radio_by_partial_id(session, "status", "Nonexistent")
    assert ei.value.criteria["label"] == "Nonexistent"


def test_select_radio_no_id_match(radios: FakeDocument) -> None:
    session = BrowserSession(page=FakePage(radios))
    with pytest.raises(NotFoundError) as ei:
        select_radio_by_partial_id(session, "language", "Active")
    assert "language" in str(ei.value)
    assert radios.selections == []


def test_select_value() -> None:
    doc = FakeDocument(FakeElement("select", value="daily", id="edit-frequency"))
    session = BrowserSession(page=FakePage(doc))
    assert_select_value(session, "edit-frequency", "daily")
    with pytest.raises(StateAssertionError) as ei:
        assert_select_value(session, "edit-frequency", "weekly")
    assert (ei.value.expected, ei.value.actual) == ("weekly", "daily")
    with pytest.raises(NotFoundError):
        assert_select_value(session, "edit-missing", "daily")


def test_field_check_state_by_id_name_and_label() -> None:
    doc = FakeDocument(
        checkbox("edit-perm-1", checked=True),
        checkbox("edit-perm-2", checked=False, name="3[administer users]"),
        checkbox("edit-perm-3", checked=True, label="View published content"),
    )
    session = BrowserSession(page=FakePage(doc))
    assert_field_check_state(session, "edit-perm-1", CheckState.CHECKED)
    assert_field_check_state(session, "3[administer users]", CheckState.UNCHECKED)
    assert_field_check_state(session, "View published content", CheckState.CHECKED)
    with pytest.raises(StateAssertionError):
        assert_field_check_state(session, "edit-perm-1", CheckState.UNCHECKED)


def test_field_check_state_missing() -> None:
    session = BrowserSession(page=FakePage(FakeDocument()))
    with pytest.raises(NotFoundError):
        assert_field_check_state(session, "3[bypass node access]", CheckState.UNCHECKED)
    # absent permission counts as not granted
    assert_field_check_state(session, "3[bypass node access]", CheckState.UNCHECKED, allow_missing=True)
    with pytest.raises(NotFoundError):
        assert_field_check_state(session, "3[bypass node access]", CheckState.CHECKED, allow_missing=True)


def test_element_presence() -> None:
    doc = FakeDocument(FakeElement("input", name="status", type="checkbox"))
    session = BrowserSession(page=FakePage(doc))
    assert_element_exists(session, '[name="status"]')
    assert_element_not_exists(session, '[name="roles"]')
    with pytest.raises(NotFoundError):
        assert_element_exists(session, '[name="roles"]')
    with pytest.raises(StateAssertionError) as ei:
        assert_element_not_exists(session, '[name="status"]')
    assert ei.value.actual == 1
