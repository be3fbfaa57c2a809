"""
Simulation result models for the phishing impact engine.

This module defines the financial and operational impact breakdowns, the
categorical risk levels derived from them, and the containers returned by
single runs, incidence sweeps and full assessments.
"""

import math

from pydantic import BaseModel, Field, field_validator

from .enums import RiskLevel
from .fdna import FDNAGraph
from .network import CascadeResults


class FinancialImpact(BaseModel):
    """
    Monetary cost of a phishing incident, broken down by cost driver.

    Attributes:
        remediation_costs: IT labor, tooling and cleanup per compromised account
        productivity_costs: Salary cost of compromised employees' downtime
        revenue_loss: Direct revenue lost during the incident
        revenue_loss_percentage: Share of annual revenue lost (capped at 15%)
        reputation_costs: Customer loss and brand damage
        regulatory_fines: Fines for high-sensitivity data exposure
        direct_costs_total: remediation_costs + productivity_costs
        total_financial_impact: direct costs + revenue loss + reputation + fines
    """

    remediation_costs: float = Field(ge=0.0, description="Remediation costs (USD)")
    productivity_costs: float = Field(ge=0.0, description="Productivity costs (USD)")
    revenue_loss: float = Field(ge=0.0, description="Revenue loss (USD)")
    revenue_loss_percentage: float = Field(
        ge=0.0, le=0.15, description="Revenue loss as a fraction of annual revenue"
    )
    reputation_costs: float = Field(ge=0.0, description="Reputation costs (USD)")
    regulatory_fines: float = Field(ge=0.0, description="Regulatory fines (USD)")
    direct_costs_total: float = Field(ge=0.0, description="Remediation plus productivity")
    total_financial_impact: float = Field(ge=0.0, description="Sum of all cost drivers")

    @field_validator("direct_costs_total")
    @classmethod
    def validate_direct_costs(cls, v: float, info) -> float:
        """Ensure direct costs equal remediation plus productivity."""
        data = info.data
        if "remediation_costs" in data and "productivity_costs" in data:
            expected = data["remediation_costs"] + data["productivity_costs"]
            if not math.isclose(v, expected, rel_tol=1e-9, abs_tol=1e-6):
                raise ValueError("direct_costs_total must equal remediation + productivity")
        return v

    @field_validator("total_financial_impact")
    @classmethod
    def validate_total(cls, v: float, info) -> float:
        """Ensure the total is the sum of its parts."""
        data = info.data
        parts = ("direct_costs_total", "revenue_loss", "reputation_costs", "regulatory_fines")
        if all(p in data for p in parts):
            expected = sum(data[p] for p in parts)
            if not math.isclose(v, expected, rel_tol=1e-9, abs_tol=1e-6):
                raise ValueError("total_financial_impact must equal the sum of cost drivers")
        return v


class OperationalImpact(BaseModel):
    """
    Operational disruption caused by a phishing incident.

    Attributes:
        systems_downtime: Expected systems downtime in hours
        productivity_loss: Organization-wide productivity loss in percent (0-90)
        recovery_time: Days until normal operations resume
        affected_systems: Number of critical systems affected (rounded up)
    """

    systems_downtime: float = Field(ge=0.0, description="Downtime (hours)")
    productivity_loss: float = Field(ge=0.0, le=90.0, description="Productivity loss (%)")
    recovery_time: float = Field(ge=0.0, description="Recovery time (days)")
    affected_systems: int = Field(ge=0, description="Critical systems affected")


class RiskLevels(BaseModel):
    """
    Categorical risk assessment.

    The overall level is derived from the other three and is never computed
    from raw impact figures.
    """

    financial: RiskLevel
    operational: RiskLevel
    reputational: RiskLevel
    overall: RiskLevel


class SimulationResults(BaseModel):
    """
    Outcome of one simulation run.

    Derived entirely from a BusinessProfile and SimulationParameters; there
    is no hidden state.
    """

    compromised_accounts: int = Field(ge=0, description="Number of compromised accounts")
    financial_impact: FinancialImpact
    operational_impact: OperationalImpact
    risk_levels: RiskLevels


class IncidenceStep(BaseModel):
    """One sample of an incidence sweep."""

    phishing_rate: float = Field(ge=0.0, le=1.0)
    results: SimulationResults


class ImpactAssessment(BaseModel):
    """
    Everything the engine knows about one profile and parameter set.

    Bundles the direct simulation, the impact-vs-incidence curve, the
    dependency network cascade and the FDNA-Cyber performance view.
    """

    results: SimulationResults
    incidence_sweep: list[IncidenceStep]
    cascade: CascadeResults
    fdna_graph: FDNAGraph
