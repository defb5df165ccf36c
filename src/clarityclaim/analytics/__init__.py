"""Cross-claim analytics."""

from clarityclaim.analytics.patterns import analyze_patterns, compute_stats

__all__ = ["analyze_patterns", "compute_stats"]
