"""Agents module - Specialized agent implementations."""

from __future__ import annotations

from clarityclaim.agents.appeal import AppealWriterAgent
from clarityclaim.agents.insights import RiskInsightsAgent


__all__ = [
    "AppealWriterAgent",
    "RiskInsightsAgent",
]
