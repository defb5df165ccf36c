"""Core type definitions and enums."""

from __future__ import annotations

from enum import Enum
from typing import TypeAlias


# Type aliases for clarity
JSON: TypeAlias = dict[str, "JSONValue"]
JSONValue: TypeAlias = str | int | float | bool | None | list["JSONValue"] | JSON


class FactorCategory(str, Enum):
    """Categories of denial risk factors."""

    AUTHORIZATION = "Authorization"
    CODING = "Coding"
    DOCUMENTATION = "Documentation"
    ELIGIBILITY = "Eligibility"
    BILLING = "Billing"
    PAYER = "Payer"


class Impact(str, Enum):
    """Impact tier of a risk factor or priority of a recommendation."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RiskLevel(str, Enum):
    """Denial risk tiers derived from the score."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class LetterType(str, Enum):
    """How an appeal letter was produced."""

    AI_GENERATED = "ai-generated"
    TEMPLATE = "template"


class AgentRole(str, Enum):
    """Roles for agents."""

    RISK_ANALYST = "risk_analyst"
    APPEAL_WRITER = "appeal_writer"


class MessageRole(str, Enum):
    """Roles for messages in conversation."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
