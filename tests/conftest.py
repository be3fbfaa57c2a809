"""
Pytest configuration and shared fixtures for the PhishImpact test suite.

Provides data factories for profiles, parameters and synthetic network
graphs, plus settings isolation for configuration-dependent tests
(unit, golden, property-based).
"""

import pytest

from phishimpact.config import get_settings
from phishimpact.models.enums import CIACategory, DependencyCategory, NodeType
from phishimpact.models.network import NetworkEdge, NetworkNode
from phishimpact.models.profile import BusinessProfile, SimulationParameters


# ---------------------------------------------------------------------------
# Pydantic model factories, reusable across all test suites
# ---------------------------------------------------------------------------

def make_profile(**overrides) -> BusinessProfile:
    """Factory function for creating test BusinessProfile objects."""
    defaults = dict(
        company_name="Acme Advisory",
        industry="Finance",
        employee_count=100,
        annual_revenue=5_000_000.0,
        data_importance=8,
        tech_maturity=6,
        average_salary=75_000.0,
        critical_systems_count=5,
    )
    defaults.update(overrides)
    return BusinessProfile(**defaults)


def make_params(
    phishing_rate: float = 0.2,
    click_through_rate: float = 0.3,
    compromise_rate: float = 0.5,
) -> SimulationParameters:
    """Factory function for creating test SimulationParameters objects."""
    return SimulationParameters(
        phishing_rate=phishing_rate,
        click_through_rate=click_through_rate,
        compromise_rate=compromise_rate,
    )


def make_node(
    node_id: str,
    node_type: NodeType = NodeType.RECEIVER,
    vulnerability_level: float = 1.0,
    **overrides,
) -> NetworkNode:
    """Factory function for creating synthetic NetworkNode objects."""
    defaults = dict(
        id=node_id,
        name=node_id.replace("_", " ").title(),
        type=node_type,
        category=CIACategory.AVAILABILITY,
        importance=5,
        vulnerability_level=vulnerability_level,
    )
    defaults.update(overrides)
    return NetworkNode(**defaults)


def make_edge(
    source: str,
    target: str,
    dependency_strength: float = 1.0,
    category: DependencyCategory = DependencyCategory.A_TO_A,
) -> NetworkEdge:
    """Factory function for creating synthetic NetworkEdge objects."""
    return NetworkEdge(
        source=source,
        target=target,
        dependency_strength=dependency_strength,
        category=category,
    )


# ---------------------------------------------------------------------------
# Pytest fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def example_profile():
    """The documented Finance example business (100 employees, $5M revenue)."""
    return make_profile()


@pytest.fixture
def example_params():
    """The documented example attack funnel (0.2 x 0.3 x 0.5)."""
    return make_params()


@pytest.fixture
def clean_settings(monkeypatch):
    """Drop PHISHIMPACT_* overrides and the cached settings around a test."""
    import os

    for key in list(os.environ):
        if key.startswith("PHISHIMPACT_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()
