"""Catalog of denial risk factors.

Common payer denial reasons with the points each contributes to a claim's
denial risk score. The table is built once at import and never changes.
"""

from __future__ import annotations

from types import MappingProxyType

from clarityclaim.core.models import RiskFactorDefinition
from clarityclaim.core.types import FactorCategory, Impact


_DEFINITIONS = (
    # Authorization
    RiskFactorDefinition(
        id="missing_prior_auth",
        category=FactorCategory.AUTHORIZATION,
        factor="Missing prior authorization",
        impact=Impact.HIGH,
        weight=25,
        recommendation="Obtain prior authorization before submitting claim",
    ),
    RiskFactorDefinition(
        id="expired_auth",
        category=FactorCategory.AUTHORIZATION,
        factor="Authorization expired",
        impact=Impact.HIGH,
        weight=20,
        recommendation="Verify authorization validity dates before service",
    ),
    # Coding
    RiskFactorDefinition(
        id="missing_diagnosis",
        category=FactorCategory.CODING,
        factor="Missing or invalid diagnosis codes",
        impact=Impact.HIGH,
        weight=25,
        recommendation="Ensure all diagnosis codes are present and valid ICD-10 format",
    ),
    RiskFactorDefinition(
        id="missing_procedure",
        category=FactorCategory.CODING,
        factor="Missing procedure codes",
        impact=Impact.HIGH,
        weight=20,
        recommendation="Include all applicable CPT/HCPCS codes",
    ),
    RiskFactorDefinition(
        id="code_mismatch",
        category=FactorCategory.CODING,
        factor="Diagnosis-procedure code mismatch",
        impact=Impact.MEDIUM,
        weight=15,
        recommendation="Verify diagnosis codes support medical necessity for procedures",
    ),
    # Documentation
    RiskFactorDefinition(
        id="insufficient_documentation",
        category=FactorCategory.DOCUMENTATION,
        factor="Insufficient clinical documentation",
        impact=Impact.HIGH,
        weight=20,
        recommendation="Attach complete medical records supporting the claim",
    ),
    RiskFactorDefinition(
        id="missing_provider_info",
        category=FactorCategory.DOCUMENTATION,
        factor="Missing provider information",
        impact=Impact.MEDIUM,
        weight=10,
        recommendation="Include complete provider NPI and credentials",
    ),
    # Eligibility
    RiskFactorDefinition(
        id="coverage_terminated",
        category=FactorCategory.ELIGIBILITY,
        factor="Patient coverage may have terminated",
        impact=Impact.HIGH,
        weight=30,
        recommendation="Verify patient eligibility before service date",
    ),
    RiskFactorDefinition(
        id="out_of_network",
        category=FactorCategory.ELIGIBILITY,
        factor="Out-of-network provider",
        impact=Impact.MEDIUM,
        weight=15,
        recommendation="Confirm network status or obtain out-of-network authorization",
    ),
    # Billing
    RiskFactorDefinition(
        id="duplicate_claim",
        category=FactorCategory.BILLING,
        factor="Potential duplicate claim",
        impact=Impact.HIGH,
        weight=25,
        recommendation="Check for previously submitted claims for same service",
    ),
    RiskFactorDefinition(
        id="timely_filing",
        category=FactorCategory.BILLING,
        factor="Approaching timely filing deadline",
        impact=Impact.HIGH,
        weight=30,
        recommendation="Submit claim immediately to meet filing deadline",
    ),
    RiskFactorDefinition(
        id="high_amount",
        category=FactorCategory.BILLING,
        factor="High billed amount may trigger review",
        impact=Impact.MEDIUM,
        weight=15,
        recommendation="Ensure itemized charges are documented and justified",
    ),
    # Payer-specific
    RiskFactorDefinition(
        id="medicare_strict",
        category=FactorCategory.PAYER,
        factor="Medicare has stricter documentation requirements",
        impact=Impact.MEDIUM,
        weight=10,
        recommendation="Follow Medicare LCD/NCD guidelines for this service",
    ),
    RiskFactorDefinition(
        id="medicaid_strict",
        category=FactorCategory.PAYER,
        factor="Medicaid requires additional state-specific documentation",
        impact=Impact.MEDIUM,
        weight=10,
        recommendation="Include state-specific Medicaid forms and documentation",
    ),
)

RISK_FACTORS = MappingProxyType({definition.id: definition for definition in _DEFINITIONS})

# Not part of the catalog; matched when a claim has no date of service.
MISSING_SERVICE_DATE = RiskFactorDefinition(
    id="missing_service_date",
    category=FactorCategory.DOCUMENTATION,
    factor="Missing service date",
    impact=Impact.HIGH,
    weight=15,
    recommendation="Include date of service",
)


def get_all() -> tuple[RiskFactorDefinition, ...]:
    """Return every catalog entry in definition order."""
    return _DEFINITIONS


def get(factor_id: str) -> RiskFactorDefinition:
    """Look up a catalog entry by id.

    Raises:
        KeyError: If no factor has this id.
    """
    return RISK_FACTORS[factor_id]
