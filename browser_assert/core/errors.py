"""
定义项目级异常类型，统一断言失败语义与捕获边界。
- BrowserAssertError: 所有自定义异常的基类
- NotFoundError: 必需的元素/表格行/iframe 不存在（附带查找条件与当前 URL）
- StateAssertionError: 元素存在但状态与预期不符（附带 expected/actual）
- StepNotFoundError: 步骤文本没有匹配任何已注册的步骤
"""
# @file purpose: Define error taxonomy for browser-assert.

from typing import Any


class BrowserAssertError(Exception):
    """Base class for all custom errors in browser-assert."""

    def __init__(
        self,
        message: str,
        *,
        criteria: dict[str, Any] | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message: str = message
        self.criteria: dict[str, Any] = criteria or {}
        self.url: str | None = url

    def __str__(self) -> str:
        parts = [self.message]
        if self.criteria:
            kv = ", ".join(f"{k}={v!r}" for k, v in self.criteria.items())
            parts.append(f"criteria={{ {kv} }}")
        if self.url:
            parts.append(f"url={self.url}")
        return " | ".join(parts)


class NotFoundError(BrowserAssertError):
    """
    Raised when a required element, table row or frame does not exist.
    查找失败总是终止当前步骤，不做重试。
    """


class ContainerNotFoundError(NotFoundError):
    """The element expected to contain an iframe does not exist."""


class FrameNotFoundError(NotFoundError):
    """No iframe matched (missing in its container, or unknown name/id)."""


class StateAssertionError(BrowserAssertError, AssertionError):
    """
    Raised when an element was found but its observed state contradicts
    the expected one. Subclasses AssertionError so plain test runners
    report it as a failed assertion rather than an error.
    """

    def __init__(
        self,
        message: str,
        *,
        expected: Any,
        actual: Any,
        criteria: dict[str, Any] | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message, criteria=criteria, url=url)
        self.expected: Any = expected
        self.actual: Any = actual

    def __str__(self) -> str:
        base = super().__str__()
        return f"{base} | expected={self.expected!r}, actual={self.actual!r}"


class StepNotFoundError(BrowserAssertError, KeyError):
    """Raised when step text matches no registered step pattern."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Step not registered: {text}", criteria={"text": text})
        self.text: str = text

    # KeyError.__str__ would repr() the message
    __str__ = BrowserAssertError.__str__
