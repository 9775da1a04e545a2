import pytest

from browser_assert.assertions.frames import (
    fill_iframe_body,
    set_iframe_id_by_container,
    switch_to_frame,
    switch_to_top_level,
)
from browser_assert.core.errors import ContainerNotFoundError, FrameNotFoundError, NotFoundError
from browser_assert.io.session import BrowserSession
from fakes import FakeDocument, FakeElement, FakePage


def editor_page() -> tuple[FakePage, FakeElement, FakeDocument]:
    inner = FakeDocument(body_html="<p>old</p>")
    first = FakeElement("iframe", frame=inner)
    second = FakeElement("iframe", frame=FakeDocument(), id="other")
    doc = FakeDocument(
        FakeElement("div", "", FakeElement("div", "", first), second, id="cke_edit-body"),
        FakeElement("div", "", id="widget"),
    )
    return FakePage(doc), first, inner


def test_set_iframe_id_targets_first_iframe() -> None:
    page, first, _ = editor_page()
    set_iframe_id_by_container(BrowserSession(page=page), "cke_edit-body", "frame1")
    assert first.attrs["id"] == "frame1"


def test_set_iframe_id_is_idempotent() -> None:
    page, first, _ = editor_page()
    session = BrowserSession(page=page)
    set_iframe_id_by_container(session, "cke_edit-body", "frame1")
    set_iframe_id_by_container(session, "cke_edit-body", "frame1")
    assert first.attrs["id"] == "frame1"


def test_set_iframe_id_container_without_iframe() -> None:
    page, _, _ = editor_page()
    with pytest.raises(FrameNotFoundError) as ei:
        set_iframe_id_by_container(BrowserSession(page=page), "widget", "frame1")
    assert isinstance(ei.value, NotFoundError)
    assert ei.value.criteria == {"container": "widget"}


def test_set_iframe_id_missing_container() -> None:
    page, _, _ = editor_page()
    with pytest.raises(ContainerNotFoundError) as ei:
        set_iframe_id_by_container(BrowserSession(page=page), "nope", "frame1")
    assert isinstance(ei.value, NotFoundError)
    assert not isinstance(ei.value, FrameNotFoundError)


def test_fill_iframe_body_replaces_content_and_returns_to_top() -> None:
    page, _, inner = editor_page()
    session = BrowserSession(page=page)
    set_iframe_id_by_container(session, "cke_edit-body", "frame1")

    fill_iframe_body(session, "frame1", "<b>hi</b>")

    assert inner.body_html == "<p><b>hi</b></p>"
    assert session.frame is None
    assert page.active is page.top
    assert [c for c in page.calls if c[0] == "switch_frame"] == [
        ("switch_frame", "frame1"),
        ("switch_frame", None),
    ]


def test_fill_iframe_body_unknown_frame() -> None:
    page, _, inner = editor_page()
    session = BrowserSession(page=page)
    with pytest.raises(FrameNotFoundError):
        fill_iframe_body(session, "frame9", "<b>hi</b>")
    assert inner.body_html == "<p>old</p>"
    assert session.frame is None


def test_switch_frame_tracks_active_frame_on_session() -> None:
    page, _, _ = editor_page()
    session = BrowserSession(page=page)
    switch_to_frame(session, "other")
    assert session.frame == "other"
    switch_to_top_level(session)
    assert session.frame is None
    switch_to_frame(session, "other")
    switch_to_frame(session, None)
    assert session.frame is None
