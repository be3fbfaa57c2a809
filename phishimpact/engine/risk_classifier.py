"""
Risk Classifier — Four-Tier Categorical Risk Levels.

Maps impact figures to LOW / MEDIUM / HIGH / CRITICAL using fixed
thresholds. Financial and reputational risk are ratios against annual
revenue; operational risk uses absolute recovery time and productivity loss.

Classification thresholds:
- Financial (total impact / revenue): <1% LOW, <5% MEDIUM, <15% HIGH
- Reputational (reputation costs / revenue): <0.5% LOW, <2% MEDIUM, <5% HIGH
- Operational: recovery and productivity loss must both be under a tier's
  limits (2d/20%, 5d/40%, 10d/70%)
- Overall: mean of the three sub-level scores (LOW=1 .. CRITICAL=4),
  <1.5 LOW, <2.5 MEDIUM, <3.5 HIGH, else CRITICAL

Anything beyond the HIGH tier is CRITICAL.
"""

from phishimpact.models.enums import RiskLevel
from phishimpact.models.profile import BusinessProfile
from phishimpact.models.simulation import FinancialImpact, OperationalImpact, RiskLevels

# Upper bounds (exclusive), checked in order
FINANCIAL_RATIO_THRESHOLDS = [
    (RiskLevel.LOW, 0.01),
    (RiskLevel.MEDIUM, 0.05),
    (RiskLevel.HIGH, 0.15),
]

REPUTATIONAL_RATIO_THRESHOLDS = [
    (RiskLevel.LOW, 0.005),
    (RiskLevel.MEDIUM, 0.02),
    (RiskLevel.HIGH, 0.05),
]

# (level, max recovery days, max productivity loss %)
OPERATIONAL_THRESHOLDS = [
    (RiskLevel.LOW, 2.0, 20.0),
    (RiskLevel.MEDIUM, 5.0, 40.0),
    (RiskLevel.HIGH, 10.0, 70.0),
]

OVERALL_SCORE_THRESHOLDS = [
    (RiskLevel.LOW, 1.5),
    (RiskLevel.MEDIUM, 2.5),
    (RiskLevel.HIGH, 3.5),
]

# Cascade node impact bands
IMPACT_LEVEL_THRESHOLDS = [
    (RiskLevel.LOW, 0.25),
    (RiskLevel.MEDIUM, 0.5),
    (RiskLevel.HIGH, 0.75),
]

RISK_SCORES = {
    RiskLevel.LOW: 1,
    RiskLevel.MEDIUM: 2,
    RiskLevel.HIGH: 3,
    RiskLevel.CRITICAL: 4,
}


def _classify_by_upper_bound(value: float, thresholds: list[tuple[RiskLevel, float]]) -> RiskLevel:
    for level, upper in thresholds:
        if value < upper:
            return level
    return RiskLevel.CRITICAL


def classify_financial_risk(total_financial_impact: float, annual_revenue: float) -> RiskLevel:
    """Classify total financial impact relative to annual revenue."""
    return _classify_by_upper_bound(
        total_financial_impact / annual_revenue, FINANCIAL_RATIO_THRESHOLDS
    )


def classify_reputational_risk(reputation_costs: float, annual_revenue: float) -> RiskLevel:
    """Classify reputation costs relative to annual revenue."""
    return _classify_by_upper_bound(
        reputation_costs / annual_revenue, REPUTATIONAL_RATIO_THRESHOLDS
    )


def classify_operational_risk(operational_impact: OperationalImpact) -> RiskLevel:
    """
    Classify operational disruption.

    A tier applies only when both recovery time and productivity loss are
    under its limits; a long recovery alone is enough to escalate.
    """
    for level, max_recovery, max_loss in OPERATIONAL_THRESHOLDS:
        if (
            operational_impact.recovery_time < max_recovery
            and operational_impact.productivity_loss < max_loss
        ):
            return level
    return RiskLevel.CRITICAL


def classify_overall_risk(
    financial: RiskLevel, operational: RiskLevel, reputational: RiskLevel
) -> RiskLevel:
    """
    Derive the overall level from the three sub-levels.

    Args:
        financial: Financial risk level
        operational: Operational risk level
        reputational: Reputational risk level

    Returns:
        Overall risk level from the mean sub-level score
    """
    average_score = (
        RISK_SCORES[RiskLevel(financial)]
        + RISK_SCORES[RiskLevel(operational)]
        + RISK_SCORES[RiskLevel(reputational)]
    ) / 3
    return _classify_by_upper_bound(average_score, OVERALL_SCORE_THRESHOLDS)


def calculate_risk_levels(
    financial_impact: FinancialImpact,
    operational_impact: OperationalImpact,
    profile: BusinessProfile,
) -> RiskLevels:
    """
    Classify all risk dimensions for one simulation run.

    Args:
        financial_impact: Financial impact breakdown
        operational_impact: Operational impact figures
        profile: Business profile (for annual revenue)

    Returns:
        RiskLevels with financial, operational, reputational and overall
    """
    financial = classify_financial_risk(
        financial_impact.total_financial_impact, profile.annual_revenue
    )
    operational = classify_operational_risk(operational_impact)
    reputational = classify_reputational_risk(
        financial_impact.reputation_costs, profile.annual_revenue
    )

    return RiskLevels(
        financial=financial,
        operational=operational,
        reputational=reputational,
        overall=classify_overall_risk(financial, operational, reputational),
    )


def classify_impact_level(impact_level: float) -> RiskLevel:
    """Band a cascade node's 0-1 impact level into a risk level."""
    return _classify_by_upper_bound(impact_level, IMPACT_LEVEL_THRESHOLDS)
