"""
Assertions that locate things by the text of the table row they sit in.

Using row text instead of column/row positions keeps scenarios readable and
independent of table ordering:

    the checkbox named "enabled" in table row with text "ISM Policy (Strong)"
    should be checked
"""

from __future__ import annotations

from loguru import logger

from ..core.errors import NotFoundError, StateAssertionError
from ..io.page import ElementHandle
from ..io.selectors import attr_contains
from ..io.session import BrowserSession
from .common import CheckState

ROW_SELECTOR = "table tr"


def find_rows_containing_text(session: BrowserSession, text: str) -> list[ElementHandle]:
    """
    Return every table row whose rendered text contains `text`
    (case-sensitive), in document order.

    Raises:
        ValueError: `text` is empty.
        NotFoundError: no row matches.
    """
    if not text:
        raise ValueError("row text fragment must not be empty")

    rows = [row for row in session.page.find_elements(ROW_SELECTOR) if text in row.get_text()]
    if not rows:
        raise NotFoundError(
            f'No table rows containing "{text}" found',
            criteria={"row_text": text},
            url=session.url,
        )
    logger.debug(f'{len(rows)} row(s) contain "{text}"')
    return rows


def assert_checkbox_state_in_rows(
    session: BrowserSession,
    id_fragment: str,
    row_text: str,
    expected: CheckState,
) -> None:
    """
    Every row containing `row_text` must hold an element whose id contains
    `id_fragment`, and that element must be in the `expected` state.
    """
    expected = CheckState(expected)
    for row in find_rows_containing_text(session, row_text):
        matches = row.find_elements(attr_contains("id", id_fragment))
        if not matches:
            raise NotFoundError(
                f'No checkbox named "{id_fragment}" found in the table row with text "{row_text}"',
                criteria={"id_fragment": id_fragment, "row_text": row_text},
                url=session.url,
            )
        checkbox = matches[0]
        actual = CheckState.of(checkbox.is_checked())
        if actual is not expected:
            element_id = checkbox.get_attribute("id")
            raise StateAssertionError(
                f"Checkbox with id '{element_id}' in a row containing '{row_text}' "
                f"was found but was {actual.value}",
                expected=expected.value,
                actual=actual.value,
                criteria={"id": element_id, "id_fragment": id_fragment, "row_text": row_text},
                url=session.url,
            )
    logger.debug(f'checkboxes "{id_fragment}" in rows "{row_text}" are {expected.value}')


def assert_text_in_table_row(session: BrowserSession, text: str, row_text: str) -> None:
    """At least one row containing `row_text` must also contain `text`."""
    for row in find_rows_containing_text(session, row_text):
        if text in row.get_text():
            return
    raise NotFoundError(
        f'Failed to find a row containing "{row_text}" that also contains "{text}"',
        criteria={"text": text, "row_text": row_text},
        url=session.url,
    )
