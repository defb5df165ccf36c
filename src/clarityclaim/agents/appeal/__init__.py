from clarityclaim.agents.appeal.agent import AppealWriterAgent

__all__ = ["AppealWriterAgent"]
