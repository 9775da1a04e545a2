"""
iframe helpers, mostly for WYSIWYG editors that render into an anonymous
iframe: give the iframe an id, then fill its body.
"""

from __future__ import annotations

from loguru import logger

from ..core.errors import ContainerNotFoundError, FrameNotFoundError
from ..io.session import BrowserSession

# Returns a status string so both failure modes cost a single round-trip.
SET_IFRAME_ID_SCRIPT = """
([containerId, iframeId]) => {
  const container = document.getElementById(containerId);
  if (!container) return "no-container";
  const frame = container.getElementsByTagName("iframe")[0];
  if (!frame) return "no-iframe";
  frame.id = iframeId;
  return "ok";
}
""".strip()

FILL_BODY_SCRIPT = """
(html) => { document.body.innerHTML = "<p>" + html + "</p>"; }
""".strip()


def set_iframe_id_by_container(session: BrowserSession, container_id: str, iframe_id: str) -> None:
    """Give the first iframe inside element `#container_id` the id `iframe_id`."""
    status = session.page.execute_script(SET_IFRAME_ID_SCRIPT, [container_id, iframe_id])
    if status == "no-container":
        raise ContainerNotFoundError(
            f'No element with id "{container_id}" found',
            criteria={"container": container_id},
            url=session.url,
        )
    if status == "no-iframe":
        raise FrameNotFoundError(
            f'No iframe found in the element "{container_id}"',
            criteria={"container": container_id},
            url=session.url,
        )
    logger.debug(f"iframe in #{container_id} now has id {iframe_id!r}")


def fill_iframe_body(session: BrowserSession, iframe_id: str, html: str) -> None:
    """
    Replace the whole body of iframe `iframe_id` with `<p>{html}</p>`.
    `html` is inserted verbatim, not escaped.
    """
    switch_to_frame(session, iframe_id)
    try:
        session.page.execute_script(FILL_BODY_SCRIPT, html)
    finally:
        switch_to_top_level(session)


def switch_to_frame(session: BrowserSession, name: str | None = None) -> None:
    session.switch_frame(name)


def switch_to_top_level(session: BrowserSession) -> None:
    session.switch_frame(None)
