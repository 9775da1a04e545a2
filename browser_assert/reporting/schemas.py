"""
Reporting data models for scenario runs.
"""

from __future__ import annotations

from typing import Optional, Dict, Any, List
from pydantic import BaseModel, Field


class StepRecord(BaseModel):
    """One executed (or skipped) step of a scenario."""

    index: int
    text: str
    status: str
    extracted: Optional[str] = None
    meta: Dict[str, Any] = Field(default_factory=dict)
    artifact_path: Optional[str] = None
    detail: str = "-"


class ScenarioResult(BaseModel):
    """Outcome for a single scenario."""

    name: str
    ok: bool
    steps: List[StepRecord] = Field(default_factory=list)
    error: Optional[str] = None


class RunReport(BaseModel):
    """A collection of scenario results against one base URL."""

    base_url: str
    total: int
    passed: int
    failed: int
    items: List[ScenarioResult]
