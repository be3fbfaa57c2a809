"""
Impact Calculators — Compromise, Financial and Operational Impact.

Pure functions that turn a business profile and an attack funnel into the
number of compromised accounts and the resulting cost and disruption.

Financial model (per incident):
- Remediation: flat cost per compromised account, scaled by data importance
- Productivity: daily salary cost x downtime days per compromised employee
- Revenue loss: share of revenue lost, capped at 15%
- Reputation: share of revenue, saturating once 5 accounts are compromised
- Regulatory fines: only when data importance exceeds 7 (hard step)

Operational model:
- Downtime and recovery grow with the compromise ratio and shrink with
  tech maturity
- Productivity loss is capped at 90%

Version: phish_impact_v1
"""

import math

import structlog

from phishimpact.models.profile import BusinessProfile, SimulationParameters
from phishimpact.models.simulation import FinancialImpact, OperationalImpact

logger = structlog.get_logger()

# Financial constants
BASE_COST_PER_COMPROMISE = 3000.0
WORKING_DAYS_PER_YEAR = 240
BASE_DOWNTIME_DAYS = 3.0
MAX_DOWNTIME_DAYS = 14.0
REVENUE_LOSS_COEFFICIENT = 0.05
MAX_REVENUE_LOSS_PCT = 0.15
REPUTATION_REVENUE_SHARE = 0.01
REPUTATION_SATURATION_ACCOUNTS = 5
FINE_PER_ACCOUNT = 500.0
FINE_DATA_IMPORTANCE_THRESHOLD = 7

# Operational constants
BASE_DOWNTIME_HOURS = 4.0
BASE_RECOVERY_DAYS = 1.0
MAX_PRODUCTIVITY_LOSS_PCT = 90.0
AFFECTED_SYSTEMS_FACTOR = 1.5


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def calculate_compromised_accounts(
    employee_count: int, params: SimulationParameters
) -> int:
    """
    Number of accounts compromised by the attack funnel.

    Args:
        employee_count: Headcount (positive)
        params: Phishing, click-through and compromise rates

    Returns:
        round(employees x phishing x click-through x compromise)
    """
    return round_half_up(
        employee_count
        * params.phishing_rate
        * params.click_through_rate
        * params.compromise_rate
    )


def calculate_financial_impact(
    compromised_accounts: int,
    profile: BusinessProfile,
    industry_risk_multiplier: float,
) -> FinancialImpact:
    """
    Compute the financial impact breakdown.

    Args:
        compromised_accounts: Number of compromised accounts
        profile: Business profile
        industry_risk_multiplier: Multiplier for the profile's industry

    Returns:
        FinancialImpact with every cost driver and the totals
    """
    compromise_ratio = compromised_accounts / profile.employee_count

    remediation_costs = (
        compromised_accounts
        * BASE_COST_PER_COMPROMISE
        * (1 + profile.data_importance / 10)
    )

    daily_productivity_cost = profile.average_salary / WORKING_DAYS_PER_YEAR
    avg_downtime_days = min(BASE_DOWNTIME_DAYS + compromise_ratio * 10, MAX_DOWNTIME_DAYS)
    productivity_costs = compromised_accounts * daily_productivity_cost * avg_downtime_days

    revenue_loss_pct = min(
        compromise_ratio
        * (profile.critical_systems_count / 10)
        * industry_risk_multiplier
        * REVENUE_LOSS_COEFFICIENT,
        MAX_REVENUE_LOSS_PCT,
    )
    revenue_loss = profile.annual_revenue * revenue_loss_pct

    reputation_multiplier = (profile.data_importance / 10) * industry_risk_multiplier
    reputation_costs = (
        profile.annual_revenue
        * REPUTATION_REVENUE_SHARE
        * reputation_multiplier
        * min(compromised_accounts / REPUTATION_SATURATION_ACCOUNTS, 1)
    )

    # Step function: no fines at all up to the threshold
    if profile.data_importance > FINE_DATA_IMPORTANCE_THRESHOLD:
        regulatory_fines = compromised_accounts * FINE_PER_ACCOUNT * industry_risk_multiplier
    else:
        regulatory_fines = 0.0

    direct_costs_total = remediation_costs + productivity_costs
    total_financial_impact = (
        direct_costs_total + revenue_loss + reputation_costs + regulatory_fines
    )

    logger.debug(
        "financial_impact_calculated",
        compromised_accounts=compromised_accounts,
        industry_risk_multiplier=industry_risk_multiplier,
        total_financial_impact=total_financial_impact,
    )

    return FinancialImpact(
        remediation_costs=remediation_costs,
        productivity_costs=productivity_costs,
        revenue_loss=revenue_loss,
        revenue_loss_percentage=revenue_loss_pct,
        reputation_costs=reputation_costs,
        regulatory_fines=regulatory_fines,
        direct_costs_total=direct_costs_total,
        total_financial_impact=total_financial_impact,
    )


def calculate_operational_impact(
    compromised_accounts: int, profile: BusinessProfile
) -> OperationalImpact:
    """
    Compute downtime, productivity loss, recovery time and affected systems.

    The tech-maturity damping factor is clamped at zero so that an
    unvalidated maturity above 20 cannot produce negative durations.

    Args:
        compromised_accounts: Number of compromised accounts
        profile: Business profile

    Returns:
        OperationalImpact
    """
    compromised_pct = compromised_accounts / profile.employee_count
    maturity_damping = max(0.0, 1 - profile.tech_maturity / 20)

    systems_downtime = (
        BASE_DOWNTIME_HOURS
        * (1 + compromised_pct * profile.critical_systems_count)
        * maturity_damping
    )
    productivity_loss = min(
        compromised_pct * 100 * (profile.critical_systems_count / 5),
        MAX_PRODUCTIVITY_LOSS_PCT,
    )
    recovery_time = BASE_RECOVERY_DAYS * (1 + compromised_pct * 10) * maturity_damping
    affected_systems = math.ceil(
        profile.critical_systems_count * compromised_pct * AFFECTED_SYSTEMS_FACTOR
    )

    return OperationalImpact(
        systems_downtime=systems_downtime,
        productivity_loss=productivity_loss,
        recovery_time=recovery_time,
        affected_systems=affected_systems,
    )
