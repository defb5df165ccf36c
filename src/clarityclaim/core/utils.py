"""Utility functions shared by scoring and letter generation."""

from __future__ import annotations

import math


def strip_code_fences(content: str) -> str:
    """Remove markdown code fences wrapped around an LLM reply.

    A leading ```json or ``` marker and a trailing ``` marker are removed,
    then surrounding whitespace is trimmed. Text without fences is only
    stripped.

    Args:
        content: Raw LLM response text.

    Returns:
        The reply body, ready for ``json.loads``.
    """
    cleaned = content.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[7:]
    if cleaned.startswith("```"):
        cleaned = cleaned[3:]
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    return cleaned.strip()


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return math.floor(value + 0.5)


def format_amount(amount: float) -> str:
    """Format a dollar amount with thousands separators.

    Up to three fraction digits are kept and trailing zeros dropped,
    so ``12500.0`` renders as ``12,500`` and ``12500.5`` as ``12,500.5``.
    """
    return f"{amount:,.3f}".rstrip("0").rstrip(".")
