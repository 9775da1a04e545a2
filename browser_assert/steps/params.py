"""
入参模型: 定义各步骤捕获参数的 Pydantic v2 约束。
Why: 在 步骤文本 → 执行器 的边界先做强校验, 拦截坏数据, 统一错误结构。
"""
# @file purpose: Define parameter schemas for step definitions using Pydantic v2.

from typing import Annotated

from pydantic import BaseModel, StringConstraints

# 辅助约束类型
NonEmptyStr = Annotated[str, StringConstraints(min_length=1, strip_whitespace=True)]
# substring fragments are matched verbatim, surrounding whitespace included
Fragment = Annotated[str, StringConstraints(min_length=1)]
FileStem = Annotated[str, StringConstraints(min_length=1, pattern=r"^[^/\\]+$")]


class VisitParams(BaseModel):
    path: NonEmptyStr


class RowCheckboxParams(BaseModel):
    """Checkbox located by id fragment inside rows matched by text."""

    id_fragment: Fragment
    row_text: Fragment


class RadioParams(BaseModel):
    id_fragment: Fragment
    label: str = ""


class IframeIdParams(BaseModel):
    container: NonEmptyStr
    iframe_id: NonEmptyStr


class WysiwygParams(BaseModel):
    html: str
    iframe: NonEmptyStr


class FrameParams(BaseModel):
    name: NonEmptyStr


class RowTextParams(BaseModel):
    text: Fragment
    row_text: Fragment


class SelectValueParams(BaseModel):
    select_id: NonEmptyStr
    value: str


class FieldParams(BaseModel):
    field: NonEmptyStr


class SelectorParams(BaseModel):
    selector: NonEmptyStr


class ScreenshotParams(BaseModel):
    filename: FileStem
