"""
PhishImpact: phishing attack impact simulation for small businesses.

Estimates the financial, operational and cascading-systemic impact of a
phishing campaign from a business profile and attack funnel parameters.

Usage:
    >>> from phishimpact import BusinessProfile, SimulationParameters, compute_simulation
    >>> results = compute_simulation(profile, SimulationParameters(
    ...     phishing_rate=0.2, click_through_rate=0.3, compromise_rate=0.5,
    ... ))
    >>> results.compromised_accounts
    3
"""

__version__ = "1.0.0"

from phishimpact.engine.network import (
    build_dependency_network,
    compute_cascade,
    compute_fdna_cyber_graph,
)
from phishimpact.engine.reference_data import (
    INDUSTRY_RISK_FACTORS,
    get_industry_risk_multiplier,
)
from phishimpact.engine.simulation import (
    PhishingImpactSimulator,
    compute_incidence_sweep,
    compute_simulation,
)
from phishimpact.models import BusinessProfile, SimulationParameters
from phishimpact.utils.formatting import format_currency, format_percentage

__all__ = [
    "BusinessProfile",
    "SimulationParameters",
    "PhishingImpactSimulator",
    "compute_simulation",
    "compute_incidence_sweep",
    "build_dependency_network",
    "compute_cascade",
    "compute_fdna_cyber_graph",
    "INDUSTRY_RISK_FACTORS",
    "get_industry_risk_multiplier",
    "format_currency",
    "format_percentage",
]
