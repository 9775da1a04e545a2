"""
Playwright-based implementation of the Page / ElementHandle capabilities.

Conforms to io/page.py:
- PlaywrightDriver: start() / stop() / new_page() / close_page(page)
- PlaywrightPage: url, goto, find_elements, find_by_accessible_role,
  execute_script, switch_frame, set_viewport, screenshot
- PlaywrightElement: thin wrapper over a Playwright `Locator`

Uses the synchronous API: every call blocks until the browser answers.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger
from playwright.sync_api import (
    Browser,
    BrowserContext,
    Frame,
    Locator,
    Page,
    Playwright,
    sync_playwright,
)

from ..core.errors import FrameNotFoundError
from .selectors import attr_equals


class PlaywrightDriver:
    """
    Owns the Playwright browser.
    - Each `new_page()` creates an incognito BrowserContext + a new Page,
      wrapped as a PlaywrightPage.
    """

    def __init__(
        self,
        *,
        headless: bool = True,
        browser: str = "chromium",
        slow_mo_ms: int = 0,
        default_timeout_ms: int = 30_000,
    ) -> None:
        self.headless = headless
        self.browser_type = browser
        self.slow_mo_ms = slow_mo_ms
        self.default_timeout_ms = default_timeout_ms

        self._pw: Optional[Playwright] = None  # playwright instance
        self._browser: Optional[Browser] = None
        self._page_to_context: Dict[Page, BrowserContext] = {}

    # ---------------- lifecycle ----------------

    def start(self) -> None:
        """Launch Playwright and the browser once."""
        if self._browser is not None:
            return
        pw = sync_playwright().start()
        self._pw = pw
        launcher = getattr(pw, self.browser_type)
        self._browser = launcher.launch(headless=self.headless, slow_mo=self.slow_mo_ms)
        logger.debug(f"Browser started: {self.browser_type} (headless={self.headless})")

    def stop(self) -> None:
        """Close all contexts and stop Playwright."""
        try:
            for page, ctx in list(self._page_to_context.items()):
                for closable in (page, ctx):
                    try:
                        closable.close()
                    except Exception as e:  # noqa: BLE001
                        logger.warning(f"failed to close {closable!r}: {e}")
            self._page_to_context.clear()
            if self._browser is not None:
                self._browser.close()
        finally:
            if self._pw is not None:
                self._pw.stop()
            self._pw = None
            self._browser = None
            logger.debug("Browser closed")

    def new_page(self) -> "PlaywrightPage":
        """Create a fresh incognito context + page."""
        self._ensure_started()
        assert self._browser is not None
        ctx = self._browser.new_context()
        ctx.set_default_timeout(self.default_timeout_ms)
        page = ctx.new_page()
        self._page_to_context[page] = ctx
        return PlaywrightPage(page)

    def close_page(self, page: "PlaywrightPage") -> None:
        """Close the page and its owning context."""
        raw = page.raw
        context = self._page_to_context.pop(raw, None)
        try:
            raw.close()
        finally:
            if context is not None:
                context.close()

    # ---------------- internals ----------------

    def _ensure_started(self) -> None:
        if self._browser is None:
            raise RuntimeError("Browser not started. Call start() first.")


class PlaywrightElement:
    """ElementHandle backed by a Playwright Locator resolved inside `scope`."""

    def __init__(self, locator: Locator, scope: Frame) -> None:
        self._locator = locator
        self._scope = scope

    def get_attribute(self, name: str) -> str | None:
        return self._locator.get_attribute(name)

    def get_text(self) -> str:
        return self._locator.inner_text()

    def get_value(self) -> str | None:
        return self._locator.input_value()

    def is_checked(self) -> bool:
        return self._locator.is_checked()

    def find_elements(self, selector: str) -> list[PlaywrightElement]:
        return [PlaywrightElement(loc, self._scope) for loc in self._locator.locator(selector).all()]

    def check(self) -> None:
        self._locator.check()

    def click(self) -> None:
        self._locator.click()

    def fill(self, text: str) -> None:
        self._locator.fill(text)

    def select_value(self, value: str) -> None:
        """
        <select>: choose the option by value.
        radio: check the button of the same group carrying `value`.
        """
        tag = self._locator.evaluate("el => el.tagName.toLowerCase()")
        if tag == "select":
            self._locator.select_option(value=value)
            return
        if self._locator.get_attribute("value") == value:
            self._locator.check()
            return
        group = self._locator.get_attribute("name") or ""
        selector = attr_equals("name", group, tag='input[type="radio"]') + attr_equals("value", value)
        self._scope.locator(selector).first.check()


class PlaywrightPage:
    """
    Page capability over a Playwright `Page`.
    Tracks the active frame itself: Playwright has no session-wide
    "switch to frame", so lookups are routed to `_frame` when one is set.
    """

    def __init__(self, page: Page) -> None:
        self._page = page
        self._frame: Optional[Frame] = None

    @property
    def raw(self) -> Page:
        return self._page

    @property
    def url(self) -> str:
        return self._page.url

    def goto(self, url: str) -> None:
        self._page.goto(url, wait_until="load")
        self._frame = None

    def find_elements(self, selector: str) -> list[PlaywrightElement]:
        scope = self._scope()
        return [PlaywrightElement(loc, scope) for loc in scope.locator(selector).all()]

    def find_by_accessible_role(self, role: str, name: str | None = None) -> list[PlaywrightElement]:
        scope = self._scope()
        locator = scope.get_by_role(role, name=name) if name else scope.get_by_role(role)
        return [PlaywrightElement(loc, scope) for loc in locator.all()]

    def execute_script(self, script: str, arg: Any = None) -> Any:
        return self._scope().evaluate(script, arg)

    def switch_frame(self, name: str | None = None) -> None:
        """Enter the iframe whose id or name is `name`; None returns to the top level."""
        if name is None:
            self._frame = None
            return
        scope = self._scope()
        selector = f"{attr_equals('id', name, tag='iframe')}, {attr_equals('name', name, tag='iframe')}"
        handle = scope.query_selector(selector)
        frame = handle.content_frame() if handle is not None else self._page.frame(name=name)
        if frame is None:
            raise FrameNotFoundError(
                f"No iframe with id or name '{name}' found",
                criteria={"frame": name},
                url=self.url,
            )
        self._frame = frame

    def set_viewport(self, width: int, height: int) -> None:
        self._page.set_viewport_size({"width": width, "height": height})

    def screenshot(self, path: str, *, full_page: bool = True) -> None:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
        self._page.screenshot(path=path, full_page=full_page)

    # ---------------- internals ----------------

    def _scope(self) -> Frame:
        return self._frame if self._frame is not None else self._page.main_frame
