"""evalexplorer data models - re-exports all public model classes."""

from evalexplorer.models.config import ExplorerConfig
from evalexplorer.models.report import Assertion, AssertionSource, Case, Report
from evalexplorer.models.stats import (
    AssertionView,
    CaseEvaluation,
    ResolvedFields,
    Stats,
)

__all__ = [
    "Assertion",
    "AssertionSource",
    "AssertionView",
    "Case",
    "CaseEvaluation",
    "ExplorerConfig",
    "Report",
    "ResolvedFields",
    "Stats",
]
