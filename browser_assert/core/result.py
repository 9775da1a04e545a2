"""
结构化的步骤返回值，用于向上层（编排/CLI）汇报执行结果。
"""
# @file purpose: Define StepResult model for step outputs.

from __future__ import annotations

from typing import Any, Optional
from pydantic import BaseModel, Field


class StepResult(BaseModel):
    """
    统一的步骤返回值：
    - ok: 是否成功（断言失败通过异常表达，这里恒为 True 居多）
    - extracted_content: 步骤产出的文本（如截图路径、访问的 URL）
    - meta: 其它诊断信息（selector/行文本/frame 等），便于日志与回放
    """

    ok: bool = True
    extracted_content: Optional[str] = None
    meta: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def success(cls, **meta: Any) -> "StepResult":
        return cls(ok=True, meta=meta)
