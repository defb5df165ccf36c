"""Base Agent class for the agent system."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from clarityclaim.core.message import Conversation
from clarityclaim.core.response import AgentResponse, LLMResponse


if TYPE_CHECKING:
    from clarityclaim.core.llm import LLMClient
    from clarityclaim.core.types import AgentRole

logger = logging.getLogger(__name__)


class Agent(ABC):
    """Base class for all agents.

    An agent owns a system prompt, turns its input into a user message,
    makes a single call to the hosted model and converts the reply into an
    AgentResponse. There are no retries: one attempt per run.
    """

    def __init__(self, llm: LLMClient, temperature: float = 0.0) -> None:
        """Initialize the agent.

        Args:
            llm: LLM client for generating responses.
            temperature: Sampling temperature passed to the provider.
        """
        self.llm = llm
        self.temperature = temperature

    @property
    @abstractmethod
    def role(self) -> AgentRole:
        """Get the agent's role."""
        ...

    @property
    @abstractmethod
    def system_prompt(self) -> str:
        """Get the agent's system prompt."""
        ...

    @property
    def model_name(self) -> str:
        return getattr(self.llm, "model", "")

    async def run(self, input_data: Any) -> AgentResponse:
        """Run the agent with given input.

        Provider and parsing errors never escape: they are returned as an
        unsuccessful AgentResponse.

        Args:
            input_data: Input data for the agent to process.

        Returns:
            AgentResponse with the result.
        """
        conversation = Conversation()
        conversation.add_system(self.system_prompt)
        conversation.add_user(self.format_input(input_data))

        try:
            response = await self.llm.chat(
                messages=conversation.to_chat_format(),
                temperature=self.temperature,
            )
        except Exception as e:
            logger.warning("%s call to %s failed: %s", self.role.value, self.model_name, e)
            return AgentResponse(success=False, error=f"LLM request failed: {e}", model=self.model_name)

        total_tokens = response.usage.total_tokens if response.usage else 0
        return self.process_output(response, total_tokens)

    @abstractmethod
    def format_input(self, input_data: Any) -> str:
        """Format input data as a user message.

        Args:
            input_data: Raw input data.

        Returns:
            Formatted string for user message.
        """
        ...

    @abstractmethod
    def process_output(self, response: LLMResponse, total_tokens: int) -> AgentResponse:
        """Process the LLM response into an AgentResponse.

        Args:
            response: LLM response.
            total_tokens: Total tokens used.

        Returns:
            AgentResponse with processed output.
        """
        ...
