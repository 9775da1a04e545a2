"""
Page / ElementHandle capability protocols (abstraction).

These Protocols define the minimal browser surface the assertion library
relies on. They allow plugging different backends (Playwright today, an
in-memory fake in unit tests) without changing the assertions.

Notes:
- A `Page` always operates on its *active* frame: after `switch_frame(name)`
  every lookup and script runs inside that iframe until `switch_frame(None)`.
- An `ElementHandle` is borrowed for the duration of one assertion; the
  library never keeps handles across calls.
"""

from __future__ import annotations

from typing import Any, Protocol


class ElementHandle(Protocol):
    # -------- reads --------
    def get_attribute(self, name: str) -> str | None: ...
    def get_text(self) -> str: ...
    def get_value(self) -> str | None: ...
    def is_checked(self) -> bool: ...

    # -------- scoped lookup --------
    def find_elements(self, selector: str) -> list["ElementHandle"]: ...

    # -------- interactions --------
    def check(self) -> None: ...
    def click(self) -> None: ...
    def fill(self, text: str) -> None: ...
    def select_value(self, value: str) -> None: ...


class Page(Protocol):
    @property
    def url(self) -> str: ...

    # -------- navigation --------
    def goto(self, url: str) -> None: ...

    # -------- lookups (active frame) --------
    def find_elements(self, selector: str) -> list[ElementHandle]: ...
    def find_by_accessible_role(self, role: str, name: str | None = None) -> list[ElementHandle]: ...

    # -------- scripting & frames --------
    def execute_script(self, script: str, arg: Any = None) -> Any: ...
    def switch_frame(self, name: str | None = None) -> None: ...

    # -------- utilities --------
    def set_viewport(self, width: int, height: int) -> None: ...
    def screenshot(self, path: str, *, full_page: bool = True) -> None: ...
