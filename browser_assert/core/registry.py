"""
步骤注册表与元数据:
- 以正则表达式（命名分组）注册步骤函数，一个函数可绑定多个句式
- 绑定 params_model (Pydantic v2) 用于校验捕获到的参数
- 提供 resolve() 在执行前把步骤文本解析为 (StepMeta, params)
"""
# @file purpose: Provide step registry, metadata, and step-text resolution.

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple, Type

from pydantic import BaseModel, TypeAdapter

from .errors import StepNotFoundError
from .scenario import strip_keyword

# 步骤函数的标准签名（同步）: fn(session, params) -> StepResult
StepFn = Callable[..., Any]


@dataclass(frozen=True)
class StepMeta:
    """步骤元信息：句式 + 实现函数 + 绑定的入参模型（可选）"""

    pattern: re.Pattern[str]
    fn: StepFn
    params_model: Optional[Type[BaseModel]] = None

    @property
    def name(self) -> str:
        return self.fn.__name__


# 全局注册表：按注册顺序匹配，先注册者优先
_STEPS: List[StepMeta] = []


def step(
    *patterns: str, params_model: Optional[Type[BaseModel]] = None
) -> Callable[[StepFn], StepFn]:
    """
    装饰器：注册步骤函数及其参数模型。
    用法示例：
        @step(r'I switch to an iframe "(?P<name>[^"]*)"', params_model=FrameParams)
        def switch_frame(session, params): ...
    """

    def deco(fn: StepFn) -> StepFn:
        for p in patterns:
            register(p, fn, params_model=params_model)
        return fn

    return deco


def register(pattern: str, fn: StepFn, *, params_model: Optional[Type[BaseModel]] = None) -> None:
    """非装饰器形式注册，便于动态装配或测试。"""
    _STEPS.append(StepMeta(pattern=re.compile(pattern), fn=fn, params_model=params_model))


def match(text: str) -> Tuple[StepMeta, dict[str, str]]:
    """Find the first step whose pattern fully matches `text` (keyword stripped)."""
    body = strip_keyword(text)
    for meta in _STEPS:
        m = meta.pattern.fullmatch(body)
        if m is not None:
            # 未参与匹配的可选分组交给 params_model 的默认值
            captures = {k: v for k, v in m.groupdict().items() if v is not None}
            return meta, captures
    raise StepNotFoundError(text)


def resolve(text: str) -> Tuple[StepMeta, Optional[BaseModel]]:
    """
    在执行前对步骤文本做强校验：
    1) 是否匹配某个已注册句式（否则 StepNotFoundError，属于 KeyError）
    2) 若绑定了 params_model，则用其校验捕获值（失败抛 ValidationError）
    3) 成功时返回 (StepMeta, 已解析的 params_model 实例 | None)
    """
    meta, captures = match(text)
    if meta.params_model is None:
        return meta, None
    params_obj = TypeAdapter(meta.params_model).validate_python(captures)
    return meta, params_obj


def list_steps() -> List[StepMeta]:
    """返回一个浅拷贝，便于调试/展示。"""
    return list(_STEPS)


# 仅用于测试：重置注册表
def _reset_registry_for_tests() -> None:
    _STEPS.clear()
