from clarityclaim.agents.insights.agent import RiskInsightsAgent

__all__ = ["RiskInsightsAgent"]
