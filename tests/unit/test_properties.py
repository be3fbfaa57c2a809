"""
Property-based tests using Hypothesis for the PhishImpact engine.

These tests verify the mathematical invariants and bounds of the impact
calculator, risk classifier, incidence sweep and cascade engine across
randomly generated business profiles, attack funnels and dependency
networks.
"""

import itertools
import math

import hypothesis.strategies as st
import pytest
from hypothesis import given, settings

from phishimpact.engine.impact_calculator import (
    MAX_PRODUCTIVITY_LOSS_PCT,
    MAX_REVENUE_LOSS_PCT,
    calculate_compromised_accounts,
    calculate_financial_impact,
    calculate_operational_impact,
)
from phishimpact.engine.network.cascade import compute_cascade
from phishimpact.engine.network.topology import build_dependency_network
from phishimpact.engine.reference_data import INDUSTRY_RISK_FACTORS, get_industry_risk_multiplier
from phishimpact.engine.risk_classifier import RISK_SCORES, classify_overall_risk
from phishimpact.engine.simulation import PhishingImpactSimulator, compute_simulation
from phishimpact.models.enums import NodeType, RiskLevel
from phishimpact.models.profile import BusinessProfile, SimulationParameters
from tests.conftest import make_edge, make_node


# =============================================================================
# Strategies
# =============================================================================

rates = st.floats(min_value=0.0, max_value=1.0, allow_nan=False, allow_infinity=False)

profiles = st.builds(
    BusinessProfile,
    company_name=st.just("Property Co"),
    industry=st.sampled_from(sorted(INDUSTRY_RISK_FACTORS) + ["Unlisted"]),
    employee_count=st.integers(min_value=1, max_value=5000),
    annual_revenue=st.floats(min_value=1e4, max_value=1e9, allow_nan=False, allow_infinity=False),
    data_importance=st.integers(min_value=1, max_value=10),
    tech_maturity=st.integers(min_value=1, max_value=10),
    average_salary=st.floats(min_value=1e4, max_value=5e5, allow_nan=False, allow_infinity=False),
    critical_systems_count=st.integers(min_value=1, max_value=30),
)

params = st.builds(
    SimulationParameters,
    phishing_rate=rates,
    click_through_rate=rates,
    compromise_rate=rates,
)

RATE_FIELDS = ("phishing_rate", "click_through_rate", "compromise_rate")


# =============================================================================
# Compromised Accounts Properties
# =============================================================================


@given(profile=profiles, parameters=params)
@settings(max_examples=200)
def test_prop_compromised_accounts_formula_and_bounds(profile, parameters):
    """
    Compromised accounts are round-half-up of the funnel product and never
    exceed the headcount.
    """
    compromised = calculate_compromised_accounts(profile.employee_count, parameters)
    expected = math.floor(
        profile.employee_count
        * parameters.phishing_rate
        * parameters.click_through_rate
        * parameters.compromise_rate
        + 0.5
    )
    assert compromised == expected
    assert 0 <= compromised <= profile.employee_count


@given(
    profile=profiles,
    parameters=params,
    field=st.sampled_from(RATE_FIELDS),
    bump=st.floats(min_value=0.0, max_value=1.0, allow_nan=False),
)
@settings(max_examples=150)
def test_prop_impact_monotonic_in_each_rate(profile, parameters, field, bump):
    """
    Raising any single funnel rate never lowers compromised accounts, total
    financial impact or productivity loss.
    """
    raised_value = min(1.0, getattr(parameters, field) + bump)
    raised = parameters.model_copy(update={field: raised_value})

    low = compute_simulation(profile, parameters)
    high = compute_simulation(profile, raised)

    assert high.compromised_accounts >= low.compromised_accounts
    assert (
        high.financial_impact.total_financial_impact
        >= low.financial_impact.total_financial_impact
    )
    assert (
        high.operational_impact.productivity_loss
        >= low.operational_impact.productivity_loss
    )


# =============================================================================
# Financial / Operational Impact Properties
# =============================================================================


@given(profile=profiles, compromised=st.integers(min_value=0, max_value=5000))
@settings(max_examples=150)
def test_prop_regulatory_fines_only_above_importance_seven(profile, compromised):
    """Fines are zero unless data importance exceeds 7 and accounts are compromised."""
    compromised = min(compromised, profile.employee_count)
    multiplier = get_industry_risk_multiplier(profile.industry)
    impact = calculate_financial_impact(compromised, profile, multiplier)

    if profile.data_importance <= 7 or compromised == 0:
        assert impact.regulatory_fines == 0.0
    else:
        assert impact.regulatory_fines > 0.0


@given(profile=profiles, compromised=st.integers(min_value=0, max_value=5000))
@settings(max_examples=150)
def test_prop_impact_clamps_hold(profile, compromised):
    """Revenue loss and productivity loss never exceed their caps."""
    compromised = min(compromised, profile.employee_count)
    multiplier = get_industry_risk_multiplier(profile.industry)

    financial = calculate_financial_impact(compromised, profile, multiplier)
    operational = calculate_operational_impact(compromised, profile)

    assert 0.0 <= financial.revenue_loss_percentage <= MAX_REVENUE_LOSS_PCT
    assert financial.revenue_loss <= profile.annual_revenue * MAX_REVENUE_LOSS_PCT + 1e-6
    assert 0.0 <= operational.productivity_loss <= MAX_PRODUCTIVITY_LOSS_PCT
    assert operational.systems_downtime >= 0.0
    assert operational.recovery_time >= 0.0


@given(profile=profiles, compromised=st.integers(min_value=0, max_value=5000))
@settings(max_examples=100)
def test_prop_totals_are_sums_of_parts(profile, compromised):
    """Direct costs and total impact equal the sum of their components."""
    compromised = min(compromised, profile.employee_count)
    impact = calculate_financial_impact(
        compromised, profile, get_industry_risk_multiplier(profile.industry)
    )
    assert impact.direct_costs_total == pytest.approx(
        impact.remediation_costs + impact.productivity_costs
    )
    assert impact.total_financial_impact == pytest.approx(
        impact.direct_costs_total
        + impact.revenue_loss
        + impact.reputation_costs
        + impact.regulatory_fines
    )


# =============================================================================
# Risk Classifier Properties
# =============================================================================


ALL_LEVELS = list(RiskLevel)


@pytest.mark.parametrize(
    "financial, operational, reputational",
    list(itertools.product(ALL_LEVELS, repeat=3)),
)
def test_prop_overall_risk_tracks_mean_score(financial, operational, reputational):
    """Overall risk is banded from the mean of the three dimension scores."""
    mean = (RISK_SCORES[financial] + RISK_SCORES[operational] + RISK_SCORES[reputational]) / 3
    if mean >= 3.5:
        expected = RiskLevel.CRITICAL
    elif mean >= 2.5:
        expected = RiskLevel.HIGH
    elif mean >= 1.5:
        expected = RiskLevel.MEDIUM
    else:
        expected = RiskLevel.LOW
    assert classify_overall_risk(financial, operational, reputational) == expected


@pytest.mark.parametrize("level", ALL_LEVELS)
def test_prop_overall_risk_of_uniform_levels_is_that_level(level):
    assert classify_overall_risk(level, level, level) == level


# =============================================================================
# Incidence Sweep Properties
# =============================================================================


@given(profile=profiles, parameters=params, steps=st.integers(min_value=1, max_value=12))
@settings(max_examples=50)
def test_prop_sweep_samples_evenly_and_monotonically(profile, parameters, steps):
    """A sweep has steps + 1 samples with non-decreasing compromise."""
    simulator = PhishingImpactSimulator(sweep_steps=steps, max_phishing_rate=0.5)
    sweep = simulator.sweep_incidence(profile, parameters)

    assert len(sweep) == steps + 1
    assert sweep[0].phishing_rate == 0.0
    assert sweep[-1].phishing_rate == pytest.approx(0.5)
    for earlier, later in zip(sweep, sweep[1:]):
        assert later.phishing_rate > earlier.phishing_rate
        assert later.results.compromised_accounts >= earlier.results.compromised_accounts


# =============================================================================
# Cascade Properties
# =============================================================================

NODE_IDS = ["f1", "f2", "r1", "r2", "r3", "r4"]

synthetic_edges = st.lists(
    st.tuples(
        st.sampled_from(NODE_IDS),
        st.sampled_from(NODE_IDS),
        st.floats(min_value=0.0, max_value=1.0, allow_nan=False),
    ),
    max_size=15,
)


@given(
    edge_specs=synthetic_edges,
    vulnerabilities=st.lists(
        st.floats(min_value=0.0, max_value=2.0, allow_nan=False),
        min_size=len(NODE_IDS),
        max_size=len(NODE_IDS),
    ),
    compromised=st.integers(min_value=0, max_value=20),
    max_steps=st.integers(min_value=0, max_value=6),
)
@settings(max_examples=150)
def test_prop_cascade_impact_only_increases(edge_specs, vulnerabilities, compromised, max_steps):
    """
    Cascade invariants on arbitrary (possibly cyclic) networks:
    - impacts stay within [0, 1]
    - a node's recorded value strictly increases from wave to wave
    - the final impact is at least every recorded value, and equals the last
    - the run never exceeds max_steps
    """
    nodes = [
        make_node(
            node_id,
            NodeType.FEEDER if node_id.startswith("f") else NodeType.RECEIVER,
            vulnerability_level=vulnerability,
        )
        for node_id, vulnerability in zip(NODE_IDS, vulnerabilities)
    ]
    edges = [make_edge(source, target, strength) for source, target, strength in edge_specs]
    profile = BusinessProfile(
        industry="Other",
        employee_count=20,
        annual_revenue=1e6,
        data_importance=5,
        tech_maturity=5,
        average_salary=50000.0,
        critical_systems_count=3,
    )

    results = compute_cascade(profile, compromised, nodes, edges, max_steps=max_steps)

    assert results.steps_run <= max_steps
    assert len(results.cascade_levels) <= max_steps + 1
    assert all(impact.step == 0 for impact in results.cascade_levels[0])

    last_seen: dict[str, float] = {}
    for step, wave in enumerate(results.cascade_levels):
        ids = [impact.node_id for impact in wave]
        assert len(ids) == len(set(ids))
        for impact in wave:
            assert 0.0 <= impact.impact_level <= 1.0
            if step > 0:
                assert impact.impact_level > last_seen.get(impact.node_id, 0.0)
            last_seen[impact.node_id] = impact.impact_level

    for node in results.nodes:
        assert 0.0 <= node.impact_level <= 1.0
        if node.id in last_seen:
            assert node.impact_level == last_seen[node.id]
        else:
            assert node.impact_level == 0.0


@given(profile=profiles)
@settings(max_examples=50)
def test_prop_cascade_zero_compromise_has_no_impact(profile):
    """With no compromised accounts no node is ever impacted."""
    nodes, edges = build_dependency_network(profile)
    results = compute_cascade(profile, 0, nodes, edges)
    assert results.cascade_levels == [[]]
    assert all(node.impact_level == 0.0 for node in results.nodes)
    assert results.converged


@given(profile=profiles, parameters=params)
@settings(max_examples=50)
def test_prop_default_network_receivers_bounded_by_feeders(profile, parameters):
    """
    Dependency strengths and receiver vulnerabilities are at most 1 in the
    default topology, so no receiver exceeds the strongest feeder.
    """
    compromised = calculate_compromised_accounts(profile.employee_count, parameters)
    nodes, edges = build_dependency_network(profile)
    results = compute_cascade(profile, compromised, nodes, edges)

    strongest_feeder = max(n.impact_level for n in results.nodes if n.type == NodeType.FEEDER)
    assert results.max_receiver_impact <= strongest_feeder + 1e-12
