"""
Step definitions bound to the assertion library.

Each step:
  1) Expects a BrowserSession + validated params (Pydantic v2)
  2) Returns StepResult, or raises NotFoundError / StateAssertionError
     (never caught here: a failing assertion must fail the step)

Quoted values in the patterns are the captured parameters, e.g.
    the checkbox named "enabled" in table row with text "Policy A" should be checked
"""

# @file purpose: Implement and register step definitions.
from __future__ import annotations

from pathlib import Path

from browser_assert.assertions import forms, frames, navigation, tables
from browser_assert.assertions.common import CheckState
from browser_assert.core.registry import step
from browser_assert.core.result import StepResult
from browser_assert.core.settings import settings
from browser_assert.io.session import BrowserSession

from .params import (
    FieldParams,
    FrameParams,
    IframeIdParams,
    RadioParams,
    RowCheckboxParams,
    RowTextParams,
    ScreenshotParams,
    SelectorParams,
    SelectValueParams,
    VisitParams,
    WysiwygParams,
)

Q = r'"(?P<{}>[^"]*)"'  # quoted capture


# ------------------------------------------------------------------------------
# navigation
# ------------------------------------------------------------------------------


@step(rf"I am on {Q.format('path')}", rf"I visit {Q.format('path')}", params_model=VisitParams)
def visit(session: BrowserSession, params: VisitParams) -> StepResult:
    url = navigation.visit(session, params.path, session.base_url or settings.base_url)
    return StepResult(extracted_content=url, meta={"step": "visit", "url": url})


@step(rf"I take a screenshot named {Q.format('filename')}", params_model=ScreenshotParams)
def screenshot(session: BrowserSession, params: ScreenshotParams) -> StepResult:
    out_dir = session.artifacts_dir or settings.artifacts_dir or Path(".")
    path = navigation.take_screenshot(session, out_dir / f"{params.filename}.png")
    return StepResult(extracted_content=str(path), meta={"step": "screenshot", "path": str(path)})


# ------------------------------------------------------------------------------
# table rows
# ------------------------------------------------------------------------------


@step(
    rf"the checkbox named {Q.format('id_fragment')} in table row with text "
    rf"{Q.format('row_text')} should be checked",
    params_model=RowCheckboxParams,
)
def row_checkbox_checked(session: BrowserSession, params: RowCheckboxParams) -> StepResult:
    tables.assert_checkbox_state_in_rows(
        session, params.id_fragment, params.row_text, CheckState.CHECKED
    )
    return StepResult.success(step="row_checkbox", row_text=params.row_text, expected="checked")


@step(
    rf"the checkbox named {Q.format('id_fragment')} in table row with text "
    rf"{Q.format('row_text')} should not be checked",
    params_model=RowCheckboxParams,
)
def row_checkbox_unchecked(session: BrowserSession, params: RowCheckboxParams) -> StepResult:
    tables.assert_checkbox_state_in_rows(
        session, params.id_fragment, params.row_text, CheckState.UNCHECKED
    )
    return StepResult.success(step="row_checkbox", row_text=params.row_text, expected="unchecked")


@step(
    rf"I should see (?:the text )?{Q.format('text')} in a table row containing "
    rf"(?:the text )?{Q.format('row_text')}",
    params_model=RowTextParams,
)
def text_in_row(session: BrowserSession, params: RowTextParams) -> StepResult:
    tables.assert_text_in_table_row(session, params.text, params.row_text)
    return StepResult.success(step="text_in_row", row_text=params.row_text)


# ------------------------------------------------------------------------------
# form controls
# ------------------------------------------------------------------------------


@step(
    rf"I select the radio button {Q.format('label')} with the id containing {Q.format('id_fragment')}",
    rf"I select the radio button with the id containing {Q.format('id_fragment')}",
    params_model=RadioParams,
)
def select_radio(session: BrowserSession, params: RadioParams) -> StepResult:
    radio_id = forms.select_radio_by_partial_id(session, params.id_fragment, params.label)
    return StepResult(extracted_content=radio_id, meta={"step": "select_radio", "id": radio_id})


@step(
    rf"the {Q.format('select_id')} select list should be set to {Q.format('value')}",
    params_model=SelectValueParams,
)
def select_list_value(session: BrowserSession, params: SelectValueParams) -> StepResult:
    forms.assert_select_value(session, params.select_id, params.value)
    return StepResult.success(step="select_value", selector=f"#{params.select_id}")


@step(rf"the {Q.format('field')} checkbox should be checked", params_model=FieldParams)
def field_checked(session: BrowserSession, params: FieldParams) -> StepResult:
    forms.assert_field_check_state(session, params.field, CheckState.CHECKED)
    return StepResult.success(step="field_checkbox", field=params.field, expected="checked")


@step(rf"the {Q.format('field')} checkbox should not be checked", params_model=FieldParams)
def field_unchecked(session: BrowserSession, params: FieldParams) -> StepResult:
    forms.assert_field_check_state(session, params.field, CheckState.UNCHECKED, allow_missing=True)
    return StepResult.success(step="field_checkbox", field=params.field, expected="unchecked")


@step(rf"there should be an element matching {Q.format('selector')}", params_model=SelectorParams)
def element_exists(session: BrowserSession, params: SelectorParams) -> StepResult:
    forms.assert_element_exists(session, params.selector)
    return StepResult.success(step="element_exists", selector=params.selector)


@step(
    rf"there should not be an element matching {Q.format('selector')}",
    params_model=SelectorParams,
)
def element_not_exists(session: BrowserSession, params: SelectorParams) -> StepResult:
    forms.assert_element_not_exists(session, params.selector)
    return StepResult.success(step="element_not_exists", selector=params.selector)


# ------------------------------------------------------------------------------
# iframes / WYSIWYG editors
# ------------------------------------------------------------------------------


@step(
    rf"the iframe in element {Q.format('container')} has id {Q.format('iframe_id')}",
    params_model=IframeIdParams,
)
def iframe_id(session: BrowserSession, params: IframeIdParams) -> StepResult:
    frames.set_iframe_id_by_container(session, params.container, params.iframe_id)
    return StepResult.success(step="iframe_id", container=params.container, frame=params.iframe_id)


@step(
    rf"(?:I )?fill in {Q.format('html')} in WYSIWYG editor {Q.format('iframe')}",
    params_model=WysiwygParams,
)
def fill_wysiwyg(session: BrowserSession, params: WysiwygParams) -> StepResult:
    frames.fill_iframe_body(session, params.iframe, params.html)
    return StepResult.success(step="fill_wysiwyg", frame=params.iframe)


@step(rf"(?:I )?switch to an iframe {Q.format('name')}", params_model=FrameParams)
def switch_frame(session: BrowserSession, params: FrameParams) -> StepResult:
    frames.switch_to_frame(session, params.name)
    return StepResult.success(step="switch_frame", frame=params.name)


@step(r"(?:I )?switch back from an iframe")
def switch_back(session: BrowserSession, params: None) -> StepResult:
    frames.switch_to_top_level(session)
    return StepResult.success(step="switch_frame", frame=None)
