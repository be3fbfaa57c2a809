"""
Phishing impact engine core components.

This package contains the calculation pipeline, including:

- Reference data: industry risk multipliers
- Impact calculation: compromised accounts, financial and operational impact
- Risk classification: four-tier financial/operational/reputational/overall levels
- Simulation: single runs, incidence sweeps and full assessments
- Network analysis: dependency network cascade and FDNA-Cyber graph

All engine components are designed for:
- Determinism (pure functions, no shared state between runs)
- Comprehensive observability (structured logging)
- Type safety (complete Pydantic validation)
- Testability (injectable topologies and settings)
"""

__version__ = "1.0.0"

__all__ = [
    "PhishingImpactSimulator",
    "compute_simulation",
    "compute_incidence_sweep",
]

from phishimpact.engine.simulation import (
    PhishingImpactSimulator,
    compute_incidence_sweep,
    compute_simulation,
)
