"""
定义场景层的数据契约。
- ScenarioSpec: 一个场景 = 名称 + 按顺序执行的步骤文本
- GHERKIN_KEYWORDS: 步骤文本前可选的 Given/When/Then/And/But 关键字
"""
# @file purpose: Define scenario data contracts.

import re

from pydantic import BaseModel, Field, field_validator

GHERKIN_KEYWORDS = ("Given", "When", "Then", "And", "But")
_KEYWORD_RE = re.compile(rf"^\s*(?:{'|'.join(GHERKIN_KEYWORDS)})\s+")


def strip_keyword(text: str) -> str:
    """'Then I logout' -> 'I logout'"""
    return _KEYWORD_RE.sub("", text, count=1).strip()


class ScenarioSpec(BaseModel):
    name: str = Field(..., min_length=1, description="Scenario title.")
    steps: list[str] = Field(default_factory=list, description="Step lines, in order.")

    @field_validator("steps")
    @classmethod
    def _no_blank_steps(cls, v: list[str]) -> list[str]:
        if any(not s.strip() for s in v):
            raise ValueError("step lines must not be blank")
        return v
