from __future__ import annotations

from dataclasses import dataclass

from fireforce.config import DashboardConfig
from fireforce.data.state import DashboardState, FetchOrchestrator


@dataclass
class PageContext:
    orchestrator: FetchOrchestrator
    config: DashboardConfig

    @property
    def state(self) -> DashboardState:
        return self.orchestrator.state
