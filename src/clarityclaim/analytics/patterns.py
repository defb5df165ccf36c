"""Denial pattern analysis across a set of claims."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from clarityclaim.core.models import ClaimStats, PatternFinding, PatternReport, PayerStats
from clarityclaim.core.types import Impact
from clarityclaim.core.utils import format_amount


if TYPE_CHECKING:
    from collections.abc import Sequence

    from clarityclaim.core.models import Claim

logger = logging.getLogger(__name__)

DENIED_STATUSES = frozenset({"denied", "partially_denied", "appeal_lost"})
INDUSTRY_DENIAL_BENCHMARK = 15


def _severity(value: float, high_above: float) -> Impact:
    return Impact.HIGH if value > high_above else Impact.MEDIUM


def compute_stats(claims: Sequence[Claim]) -> tuple[ClaimStats, int]:
    """Aggregate claim statistics.

    Returns:
        The statistics and the number of denied claims.
    """
    stats = ClaimStats(total=len(claims))
    risk_sum, risk_count, denied_count = 0.0, 0, 0

    for claim in claims:
        status = claim.status or "unknown"
        stats.by_status[status] = stats.by_status.get(status, 0) + 1

        payer = stats.by_payer.setdefault(claim.payer_name or "Unknown", PayerStats())
        payer.count += 1
        payer.total_billed += claim.billed_amount

        if claim.denial_category:
            stats.by_denial_category[claim.denial_category] = stats.by_denial_category.get(claim.denial_category, 0) + 1

        stats.total_billed += claim.billed_amount
        stats.total_paid += claim.paid_amount or 0.0

        if claim.denial_risk_score is not None:
            risk_sum += claim.denial_risk_score
            risk_count += 1

        if claim.status in DENIED_STATUSES:
            denied_count += 1
            if claim.payer_name:
                payer.denied += 1

    if stats.total:
        stats.avg_billed_amount = stats.total_billed / stats.total
        stats.denial_rate = denied_count / stats.total * 100
    if risk_count:
        stats.avg_risk_score = risk_sum / risk_count
    return stats, denied_count


def analyze_patterns(claims: Sequence[Claim], now: datetime | None = None) -> PatternReport:
    """Find payer, category and revenue patterns in a set of claims.

    Args:
        claims: Claims to analyze.
        now: Timestamp recorded on the report. Defaults to UTC now.

    Returns:
        PatternReport with findings in a fixed order: payer denial rates,
        denial categories, overall denial rate, revenue leakage.
    """
    if not claims:
        return PatternReport(patterns=[], summary="No claims to analyze")

    stats, denied_count = compute_stats(claims)
    patterns: list[PatternFinding] = []

    for payer, data in stats.by_payer.items():
        if data.count < 3:
            continue
        rate = data.denied / data.count * 100
        if rate > 20:
            patterns.append(PatternFinding(
                type="payer_denial_rate",
                severity=_severity(rate, 40),
                title=f"High denial rate with {payer}",
                description=f"{rate:.1f}% of claims with {payer} are denied",
                recommendation=f"Review {payer} submission requirements and consider additional documentation",
                data={"payer": payer, "denialRate": rate, "totalClaims": data.count},
            ))

    for category, count in stats.by_denial_category.items():
        if count < 2 or not denied_count:
            continue
        percentage = count / denied_count * 100
        patterns.append(PatternFinding(
            type="denial_category",
            severity=_severity(percentage, 30),
            title=f"Frequent {category} denials",
            description=f"{percentage:.1f}% of denials are due to {category}",
            recommendation=f"Implement {category.lower()} checklist before submission",
            data={"category": category, "count": count, "percentage": percentage},
        ))

    if stats.denial_rate > INDUSTRY_DENIAL_BENCHMARK:
        patterns.append(PatternFinding(
            type="overall_denial_rate",
            severity=_severity(stats.denial_rate, 25),
            title="Elevated overall denial rate",
            description=(
                f"Current denial rate of {stats.denial_rate:.1f}% exceeds industry benchmark of 10-15%"
            ),
            recommendation="Review claim submission process and implement pre-submission validation",
            data={"denialRate": stats.denial_rate, "benchmark": INDUSTRY_DENIAL_BENCHMARK},
        ))

    leakage = stats.total_billed - stats.total_paid
    if leakage > 0 and stats.total_billed > 0:
        leakage_percent = leakage / stats.total_billed * 100
        if leakage_percent > 20:
            patterns.append(PatternFinding(
                type="revenue_leakage",
                severity=_severity(leakage_percent, 40),
                title="Significant revenue leakage detected",
                description=(
                    f"${format_amount(leakage)} ({leakage_percent:.1f}%) of billed amount not collected"
                ),
                recommendation="Prioritize follow-up on unpaid and underpaid claims",
                data={"totalBilled": stats.total_billed, "totalPaid": stats.total_paid, "leakage": leakage},
            ))

    logger.info("Analyzed %d claims, %d patterns found", len(claims), len(patterns))
    return PatternReport(
        patterns=patterns,
        stats=stats,
        analyzed_at=now or datetime.now(UTC),
        claims_analyzed=len(claims),
    )
