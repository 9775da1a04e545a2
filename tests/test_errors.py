from browser_assert.core.errors import (
    BrowserAssertError,
    ContainerNotFoundError,
    FrameNotFoundError,
    NotFoundError,
    StateAssertionError,
    StepNotFoundError,
)
from browser_assert.core.settings import Settings


def test_not_found_renders_criteria_and_url() -> None:
    err = NotFoundError("No rows", criteria={"row_text": "Policy"}, url="http://cms.test/x")
    assert str(err) == "No rows | criteria={ row_text='Policy' } | url=http://cms.test/x"


def test_state_assertion_is_an_assertion_error() -> None:
    err = StateAssertionError("mismatch", expected="checked", actual="unchecked")
    assert isinstance(err, AssertionError)
    assert isinstance(err, BrowserAssertError)
    assert str(err) == "mismatch | expected='checked', actual='unchecked'"


def test_frame_errors_are_not_found_errors() -> None:
    assert issubclass(ContainerNotFoundError, NotFoundError)
    assert issubclass(FrameNotFoundError, NotFoundError)
    assert not issubclass(ContainerNotFoundError, FrameNotFoundError)


def test_step_not_found_is_key_error_with_plain_message() -> None:
    err = StepNotFoundError("I dance")
    assert isinstance(err, KeyError)
    assert str(err).startswith("Step not registered: I dance")


def test_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("BASSERT_BASE_URL", "http://cms.local")
    monkeypatch.setenv("BASSERT_HEADLESS", "false")
    monkeypatch.setenv("BASSERT_VIEWPORT_WIDTH", "1280")
    s = Settings()
    assert s.base_url == "http://cms.local"
    assert s.headless is False
    assert (s.viewport_width, s.viewport_height) == (1280, 900)
