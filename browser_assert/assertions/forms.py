"""
Form-control assertions: radio selection, select lists, checkbox fields and
plain element presence.
"""

from __future__ import annotations

from loguru import logger

from ..core.errors import NotFoundError, StateAssertionError
from ..io.page import ElementHandle
from ..io.selectors import attr_equals
from ..io.session import BrowserSession
from .common import CheckState


def select_radio_by_partial_id(session: BrowserSession, id_fragment: str, label: str = "") -> str:
    """
    Select the first radio button (document order) whose id contains
    `id_fragment`, optionally restricted to radios whose accessible name
    matches `label`. Returns the selected button's id.

    Only the first match is selected; later candidates are left untouched.
    """
    radios = session.page.find_by_accessible_role("radio", label or None)
    if not radios:
        raise NotFoundError(
            f'No radio buttons labelled "{label}" found' if label else "No radio buttons found",
            criteria={"id_fragment": id_fragment, "label": label},
            url=session.url,
        )

    for radio in radios:
        radio_id = radio.get_attribute("id") or ""
        if id_fragment not in radio_id:
            continue
        value = radio.get_attribute("value") or ""
        radio.select_value(value)
        logger.debug(f"selected radio {radio_id!r} (value={value!r})")
        return radio_id

    raise NotFoundError(
        f'The radio button with id containing "{id_fragment}" and label "{label}" was not found',
        criteria={"id_fragment": id_fragment, "label": label},
        url=session.url,
    )


def assert_select_value(session: BrowserSession, select_id: str, expected: str) -> None:
    elements = session.page.find_elements(attr_equals("id", select_id))
    if not elements:
        raise NotFoundError(
            f"No select list with id '{select_id}' found",
            criteria={"id": select_id},
            url=session.url,
        )
    actual = elements[0].get_value()
    if actual != expected:
        raise StateAssertionError(
            f"Select list with id '{select_id}' was found but not set to value '{expected}'",
            expected=expected,
            actual=actual,
            criteria={"id": select_id},
            url=session.url,
        )


def find_field(session: BrowserSession, field: str) -> ElementHandle | None:
    """Locate a form field by id, then name, then accessible checkbox name."""
    for selector in (attr_equals("id", field), attr_equals("name", field)):
        found = session.page.find_elements(selector)
        if found:
            return found[0]
    by_label = session.page.find_by_accessible_role("checkbox", field)
    return by_label[0] if by_label else None


def assert_field_check_state(
    session: BrowserSession,
    field: str,
    expected: CheckState,
    *,
    allow_missing: bool = False,
) -> None:
    """
    Assert the checkbox identified by id|name|label is in `expected` state.

    With `allow_missing`, an absent field satisfies an UNCHECKED expectation
    (a permission that is not even offered is not granted).
    """
    expected = CheckState(expected)
    checkbox = find_field(session, field)
    if checkbox is None:
        if allow_missing and expected is CheckState.UNCHECKED:
            logger.debug(f"field {field!r} absent; treated as unchecked")
            return
        raise NotFoundError(
            f"No checkbox with id|name|label '{field}' found",
            criteria={"field": field},
            url=session.url,
        )
    actual = CheckState.of(checkbox.is_checked())
    if actual is not expected:
        raise StateAssertionError(
            f"Checkbox '{field}' was found but was {actual.value}",
            expected=expected.value,
            actual=actual.value,
            criteria={"field": field},
            url=session.url,
        )


def assert_element_exists(session: BrowserSession, selector: str) -> None:
    if not session.page.find_elements(selector):
        raise NotFoundError(
            f'No element matching "{selector}" found',
            criteria={"selector": selector},
            url=session.url,
        )


def assert_element_not_exists(session: BrowserSession, selector: str) -> None:
    found = session.page.find_elements(selector)
    if found:
        raise StateAssertionError(
            f'Element matching "{selector}" should not be present',
            expected=0,
            actual=len(found),
            criteria={"selector": selector},
            url=session.url,
        )
