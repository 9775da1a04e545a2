# browser_assert/core/controller/runner.py
"""
Sequential runner for one scenario.

Responsibilities:
- Size the viewport before the first step
- Resolve each step line via registry
- Execute steps in order; the first failure aborts the scenario and every
  remaining step is reported as skipped (no retries)
- On failure (including Playwright errors): save a screenshot artifact
  (if artifacts_dir is set)
- Return per-step outcomes for CLI rendering and reporting
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

from loguru import logger
from playwright.sync_api import Error as PlaywrightError
from pydantic import ValidationError

from .. import registry
from ..errors import BrowserAssertError
from ..scenario import ScenarioSpec
from ...io.session import BrowserSession

StepStatus = Literal["passed", "failed", "skipped"]


@dataclass
class StepOutcome:
    """UI-friendly outcome used by CLI and reporters."""

    index: int
    text: str
    status: StepStatus
    detail: str = "-"
    artifact_path: str | None = None
    # Filled from StepResult on success:
    extracted: str | None = None
    meta: dict[str, Any] | None = None

    @property
    def ok(self) -> bool:
        return self.status == "passed"


@dataclass
class ScenarioOutcome:
    name: str
    steps: list[StepOutcome] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(s.status == "passed" for s in self.steps)

    @property
    def error(self) -> str | None:
        return next((s.detail for s in self.steps if s.status == "failed"), None)


class ScenarioRunner:
    def __init__(
        self,
        *,
        artifacts_dir: Path | None = None,
        viewport: tuple[int, int] = (1440, 900),
    ) -> None:
        self.artifacts_dir = artifacts_dir
        self.viewport = viewport
        if self.artifacts_dir:
            self.artifacts_dir.mkdir(parents=True, exist_ok=True)

    def run(self, session: BrowserSession, scenario: ScenarioSpec) -> ScenarioOutcome:
        outcome = ScenarioOutcome(name=scenario.name)
        failed = False
        logger.info(f"Scenario: {scenario.name}")
        session.page.set_viewport(*self.viewport)

        for i, text in enumerate(scenario.steps, start=1):
            if failed:
                outcome.steps.append(StepOutcome(index=i, text=text, status="skipped"))
                continue

            try:
                meta, params = registry.resolve(text)
                res = meta.fn(session, params)
            except (BrowserAssertError, AssertionError, ValidationError, PlaywrightError) as e:
                failed = True
                logger.error(f"  [{i:02d}] FAIL {text}: {e}")
                artifact = self._on_failure(session, scenario.name, i)
                outcome.steps.append(
                    StepOutcome(
                        index=i,
                        text=text,
                        status="failed",
                        detail=str(e),
                        artifact_path=artifact,
                    )
                )
                continue

            extracted = getattr(res, "extracted_content", None)
            step_meta = res.meta if isinstance(getattr(res, "meta", None), dict) else None
            detail = extracted or "-"
            if len(detail) > 120:
                detail = detail[:120] + "…"
            logger.info(f"  [{i:02d}] ok   {text}")
            outcome.steps.append(
                StepOutcome(
                    index=i,
                    text=text,
                    status="passed",
                    detail=detail,
                    extracted=extracted,
                    meta=step_meta,
                )
            )

        return outcome

    def _on_failure(self, session: BrowserSession, scenario: str, index: int) -> str | None:
        """Best-effort failure artifact (screenshot)."""
        if not self.artifacts_dir:
            return None
        slug = re.sub(r"[^a-z0-9]+", "-", scenario.lower()).strip("-") or "scenario"
        png = self.artifacts_dir / f"fail-{slug}-{index:02d}.png"
        try:
            session.page.set_viewport(*self.viewport)
            session.page.screenshot(str(png), full_page=True)
            return str(png)
        except Exception as e:  # noqa: BLE001
            logger.warning(f"could not save failure screenshot {png}: {e}")
            return None
