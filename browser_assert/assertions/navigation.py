"""Page navigation and screenshots."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urljoin

from loguru import logger

from ..io.session import BrowserSession


def visit(session: BrowserSession, path: str, base_url: str) -> str:
    """Open `path` relative to `base_url` (absolute URLs are used as-is)."""
    url = urljoin(base_url.rstrip("/") + "/", path.lstrip("/"))
    session.page.goto(url)
    session.frame = None
    logger.debug(f"visited {url}")
    return url


def take_screenshot(session: BrowserSession, path: Path) -> Path:
    session.page.screenshot(str(path), full_page=True)
    logger.info(f"screenshot saved: {path}")
    return path
