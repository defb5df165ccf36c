"""Core module - Base classes and shared types."""

from __future__ import annotations

from clarityclaim.core.agent import Agent
from clarityclaim.core.llm import LLMClient
from clarityclaim.core.message import Conversation, Message
from clarityclaim.core.response import AgentResponse, LLMResponse, TokenUsage
from clarityclaim.core.types import AgentRole, FactorCategory, Impact, LetterType, MessageRole, RiskLevel
from clarityclaim.core.utils import format_amount, round_half_up, strip_code_fences


__all__ = [
    # Agent
    "Agent",
    # Responses
    "AgentResponse",
    # Types
    "AgentRole",
    # Messages
    "Conversation",
    "FactorCategory",
    "Impact",
    # LLM
    "LLMClient",
    "LLMResponse",
    "LetterType",
    "Message",
    "MessageRole",
    "RiskLevel",
    "TokenUsage",
    # Utils
    "format_amount",
    "round_half_up",
    "strip_code_fences",
]
