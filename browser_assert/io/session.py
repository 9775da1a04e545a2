"""
BrowserSession: the Page capability plus the explicitly tracked frame context.
"""
# @file purpose: Hold the active-frame state next to the page it belongs to.

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from .page import Page


@dataclass
class BrowserSession:
    """
    One per scenario. `frame` is the name/id of the active iframe, or None
    while the top-level document is active. `base_url` resolves relative
    paths in navigation steps; `artifacts_dir` is where named screenshots
    go. Frame switches must go through `switch_frame()` so `frame` mirrors
    the browser's state.
    """

    page: Page
    frame: str | None = None
    base_url: str = ""
    artifacts_dir: Path | None = None

    @property
    def url(self) -> str:
        return self.page.url

    def switch_frame(self, name: str | None = None) -> None:
        self.page.switch_frame(name)
        self.frame = name
        logger.debug(f"active frame: {name or '<top>'}")
