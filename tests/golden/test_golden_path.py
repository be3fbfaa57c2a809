"""
Golden Path (End-to-End) Tests for the PhishImpact engine.

These tests run the complete assessment pipeline on fixed business profiles
and check every published figure: compromised accounts, financial and
operational impact, risk levels, incidence sweep, dependency cascade and
FDNA-Cyber performance.
"""

import pytest

from phishimpact.engine.risk_classifier import classify_impact_level
from phishimpact.engine.simulation import PhishingImpactSimulator
from phishimpact.models.enums import PerformanceLevel, RiskLevel
from phishimpact.utils.formatting import format_currency, format_percentage
from tests.conftest import make_params, make_profile


# ============================================================================
# Scenario 1: Finance advisory firm, documented example
# ============================================================================


def test_golden_finance_example_simulation():
    """
    Golden path: 100-employee Finance firm, 20% phished, 30% click, 50% compromise.

    Verifies the full cost breakdown and risk levels.
    """
    profile = make_profile()
    params = make_params(phishing_rate=0.2, click_through_rate=0.3, compromise_rate=0.5)

    results = PhishingImpactSimulator().simulate(profile, params)

    assert results.compromised_accounts == 3

    financial = results.financial_impact
    assert financial.remediation_costs == pytest.approx(16200.0)
    assert financial.productivity_costs == pytest.approx(3093.75)
    assert financial.revenue_loss == pytest.approx(6750.0)
    assert financial.reputation_costs == pytest.approx(43200.0)
    assert financial.regulatory_fines == pytest.approx(2700.0)
    assert financial.direct_costs_total == pytest.approx(19293.75)
    assert financial.total_financial_impact == pytest.approx(71943.75)
    assert format_currency(financial.total_financial_impact) == "$71,944"
    assert format_percentage(financial.revenue_loss_percentage) == "0.1%"

    operational = results.operational_impact
    assert operational.systems_downtime == pytest.approx(3.22)
    assert operational.productivity_loss == pytest.approx(3.0)
    assert operational.recovery_time == pytest.approx(0.91)
    assert operational.affected_systems == 1

    assert results.risk_levels.financial == RiskLevel.MEDIUM
    assert results.risk_levels.operational == RiskLevel.LOW
    assert results.risk_levels.reputational == RiskLevel.MEDIUM
    assert results.risk_levels.overall == RiskLevel.MEDIUM


def test_golden_finance_example_assessment():
    """
    Golden path: the full assessment for the documented example.

    The sweep starts at zero compromise, the cascade reaches all four
    receivers in one step and converges, and business systems stay at
    high performance.
    """
    profile = make_profile()
    assessment = PhishingImpactSimulator().assess(profile, make_params())

    sweep = assessment.incidence_sweep
    assert [s.phishing_rate for s in sweep] == pytest.approx([0.0, 0.1, 0.2, 0.3, 0.4, 0.5])
    assert sweep[0].results.compromised_accounts == 0
    assert sweep[2].results == assessment.results

    cascade = assessment.cascade
    assert [len(wave) for wave in cascade.cascade_levels] == [3, 4]
    assert [i.node_id for i in cascade.cascade_levels[0]] == ["email", "credentials", "workstations"]
    assert {i.node_id for i in cascade.cascade_levels[1]} == {
        "customer_data", "financial_systems", "productivity_apps", "communication",
    }
    assert cascade.steps_run == 2
    assert cascade.converged
    assert cascade.get_node("credentials").impact_level == pytest.approx(0.0312)
    assert cascade.get_node("customer_data").impact_level == pytest.approx(0.0079872)
    assert classify_impact_level(cascade.max_receiver_impact) == RiskLevel.LOW

    assert assessment.fdna_graph.performance_level == PerformanceLevel.HIGH


# ============================================================================
# Scenario 2: Technology company with CRM and ERP, heavy campaign
# ============================================================================


def test_golden_technology_heavy_campaign():
    """
    Golden path: 40-employee Technology company with 8 critical systems.

    Ten accounts are compromised (25% of staff). Revenue loss stays below
    its cap, fines do not apply (data importance 6) and operational risk
    is high because productivity loss reaches 40%.
    """
    profile = make_profile(
        company_name="Byteworks",
        industry="Technology",
        employee_count=40,
        annual_revenue=2_000_000.0,
        data_importance=6,
        tech_maturity=4,
        average_salary=60_000.0,
        critical_systems_count=8,
    )
    params = make_params(phishing_rate=0.5, click_through_rate=0.5, compromise_rate=1.0)

    assessment = PhishingImpactSimulator().assess(profile, params)
    results = assessment.results

    assert results.compromised_accounts == 10

    financial = results.financial_impact
    assert financial.remediation_costs == pytest.approx(48000.0)
    assert financial.productivity_costs == pytest.approx(13750.0)
    assert financial.revenue_loss_percentage == pytest.approx(0.013)
    assert financial.revenue_loss == pytest.approx(26000.0)
    assert financial.reputation_costs == pytest.approx(15600.0)
    assert financial.regulatory_fines == 0.0
    assert financial.total_financial_impact == pytest.approx(103350.0)

    operational = results.operational_impact
    assert operational.systems_downtime == pytest.approx(9.6)
    assert operational.productivity_loss == pytest.approx(40.0)
    assert operational.recovery_time == pytest.approx(2.8)
    assert operational.affected_systems == 3

    assert results.risk_levels.financial == RiskLevel.HIGH
    assert results.risk_levels.operational == RiskLevel.HIGH
    assert results.risk_levels.reputational == RiskLevel.MEDIUM
    assert results.risk_levels.overall == RiskLevel.HIGH

    assert [s.results.compromised_accounts for s in assessment.incidence_sweep] == [
        0, 2, 4, 6, 8, 10,
    ]


def test_golden_technology_cascade_reaches_crm_and_erp():
    """
    Golden path: cascade over the extended network (CRM and ERP present).

    Step 1 reaches all six receivers, including ERP through the financial
    systems. Nothing improves in step 2, so the run converges.
    """
    profile = make_profile(
        industry="Technology",
        employee_count=40,
        annual_revenue=2_000_000.0,
        data_importance=6,
        tech_maturity=4,
        average_salary=60_000.0,
        critical_systems_count=8,
    )
    params = make_params(phishing_rate=0.5, click_through_rate=0.5, compromise_rate=1.0)

    cascade = PhishingImpactSimulator().assess(profile, params).cascade

    assert len(cascade.nodes) == 9
    assert [len(wave) for wave in cascade.cascade_levels] == [3, 6]
    assert [i.node_id for i in cascade.cascade_levels[1]] == [
        "communication",
        "productivity_apps",
        "customer_data",
        "financial_systems",
        "crm",
        "erp",
    ]
    assert cascade.converged

    assert cascade.get_node("email").impact_level == pytest.approx(0.36)
    assert cascade.get_node("communication").impact_level == pytest.approx(0.1944)
    # workstations (0.3 x 0.8 x 0.54) overtakes email (0.11664) within the step
    assert cascade.get_node("productivity_apps").impact_level == pytest.approx(0.1296)
    assert cascade.get_node("crm").impact_level == pytest.approx(0.14976)
    assert cascade.get_node("erp").impact_level == pytest.approx(0.14742 * 0.8 * 0.42)


# ============================================================================
# Scenario 3: No compromise
# ============================================================================


def test_golden_zero_phishing_rate_is_harmless():
    """
    Golden path: a campaign that reaches no one.

    Every cost is zero, risk levels are low, the cascade stops after the
    empty seed wave and both FDNA nodes keep full performance.
    """
    profile = make_profile()
    params = make_params(phishing_rate=0.0)

    assessment = PhishingImpactSimulator().assess(profile, params)

    assert assessment.results.compromised_accounts == 0
    assert assessment.results.financial_impact.total_financial_impact == 0.0
    assert assessment.results.risk_levels.overall == RiskLevel.LOW
    assert assessment.cascade.cascade_levels == [[]]
    assert assessment.fdna_graph.overall_performance == 1.0
    assert format_currency(assessment.results.financial_impact.total_financial_impact) == "$0"
