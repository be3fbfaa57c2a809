"""
Phishing Impact Simulation Engine.

Runs the impact pipeline for a business profile and an attack funnel:

- Compromised-account estimation from phishing, click-through and
  compromise rates
- Financial and operational impact calculation
- Categorical risk classification
- Incidence sweeps across phishing rates for impact-vs-incidence curves
- Full assessments that add the dependency network cascade and the
  FDNA-Cyber performance view

Every run is a pure function of its inputs: sweep samples share no state
and the same inputs always yield the same results.

Example usage:
    >>> simulator = PhishingImpactSimulator()
    >>> results = simulator.simulate(profile, params)
    >>> print(results.risk_levels.overall)
"""

from typing import Optional

import structlog

from phishimpact.config import get_settings
from phishimpact.engine.impact_calculator import (
    calculate_compromised_accounts,
    calculate_financial_impact,
    calculate_operational_impact,
)
from phishimpact.engine.network.cascade import CascadeEngine
from phishimpact.engine.network.fdna_cyber import compute_fdna_cyber_graph
from phishimpact.engine.network.topology import build_dependency_network
from phishimpact.engine.reference_data import get_industry_risk_multiplier
from phishimpact.engine.risk_classifier import calculate_risk_levels
from phishimpact.models.network import NetworkTopology
from phishimpact.models.profile import BusinessProfile, SimulationParameters
from phishimpact.models.simulation import (
    ImpactAssessment,
    IncidenceStep,
    SimulationResults,
)

logger = structlog.get_logger()


class PhishingImpactSimulator:
    """
    Estimates the impact of phishing attacks on a small business.

    Attributes:
        sweep_steps: Default number of intervals for incidence sweeps
        max_phishing_rate: Phishing rate reached by the last sweep sample
        cascade_engine: Engine used for dependency network propagation
        topology: Network topology override (configured default if None)
        logger: Structured logger for observability
    """

    def __init__(
        self,
        sweep_steps: Optional[int] = None,
        max_phishing_rate: Optional[float] = None,
        cascade_engine: Optional[CascadeEngine] = None,
        topology: Optional[NetworkTopology] = None,
    ):
        """
        Initialize the simulator.

        Args:
            sweep_steps: Incidence sweep intervals (Settings.incidence_sweep_steps if None)
            max_phishing_rate: Sweep ceiling (Settings.max_phishing_rate if None)
            cascade_engine: Optional custom cascade engine
            topology: Optional dependency network topology
        """
        settings = get_settings()
        self.sweep_steps = sweep_steps if sweep_steps is not None else settings.incidence_sweep_steps
        self.max_phishing_rate = (
            max_phishing_rate if max_phishing_rate is not None else settings.max_phishing_rate
        )
        self.cascade_engine = cascade_engine or CascadeEngine()
        self.topology = topology
        self.logger = structlog.get_logger()

    def simulate(
        self, profile: BusinessProfile, params: SimulationParameters
    ) -> SimulationResults:
        """
        Run the impact pipeline once.

        Args:
            profile: Validated business profile
            params: Attack funnel parameters

        Returns:
            SimulationResults with impacts and risk levels
        """
        industry_risk_multiplier = get_industry_risk_multiplier(profile.industry)

        compromised_accounts = calculate_compromised_accounts(profile.employee_count, params)
        financial_impact = calculate_financial_impact(
            compromised_accounts, profile, industry_risk_multiplier
        )
        operational_impact = calculate_operational_impact(compromised_accounts, profile)
        risk_levels = calculate_risk_levels(financial_impact, operational_impact, profile)

        self.logger.debug(
            "simulation_completed",
            industry=profile.industry,
            phishing_rate=params.phishing_rate,
            compromised_accounts=compromised_accounts,
            total_financial_impact=financial_impact.total_financial_impact,
            overall_risk=risk_levels.overall.value,
        )

        return SimulationResults(
            compromised_accounts=compromised_accounts,
            financial_impact=financial_impact,
            operational_impact=operational_impact,
            risk_levels=risk_levels,
        )

    def sweep_incidence(
        self,
        profile: BusinessProfile,
        base_params: SimulationParameters,
        steps: Optional[int] = None,
    ) -> list[IncidenceStep]:
        """
        Run the pipeline across a range of phishing rates.

        Produces steps + 1 samples at phishing_rate = (i / steps) x max rate,
        holding click-through and compromise rates fixed.

        Args:
            profile: Validated business profile
            base_params: Parameters whose click-through and compromise rates are kept
            steps: Number of intervals (simulator default if None)

        Returns:
            IncidenceSteps ordered by increasing phishing rate

        Raises:
            ValueError: If steps is less than 1
        """
        steps = self.sweep_steps if steps is None else steps
        if steps < 1:
            raise ValueError(f"Incidence sweep needs at least 1 step, got {steps}")

        samples = []
        for i in range(steps + 1):
            phishing_rate = (i / steps) * self.max_phishing_rate
            params = base_params.model_copy(update={"phishing_rate": phishing_rate})
            samples.append(
                IncidenceStep(phishing_rate=phishing_rate, results=self.simulate(profile, params))
            )

        self.logger.info(
            "incidence_sweep_completed",
            samples=len(samples),
            max_phishing_rate=self.max_phishing_rate,
            peak_financial_impact=samples[-1].results.financial_impact.total_financial_impact,
        )

        return samples

    def assess(
        self, profile: BusinessProfile, params: SimulationParameters
    ) -> ImpactAssessment:
        """
        Run the full assessment: simulation, sweep, cascade and FDNA view.

        The network analyses use the compromised-account count from the
        direct simulation.

        Args:
            profile: Validated business profile
            params: Attack funnel parameters

        Returns:
            ImpactAssessment bundling every analysis
        """
        self.logger.info(
            "assessment_started",
            company_name=profile.company_name,
            industry=profile.industry,
            employee_count=profile.employee_count,
        )

        results = self.simulate(profile, params)
        sweep = self.sweep_incidence(profile, params)

        nodes, edges = build_dependency_network(profile, self.topology)
        cascade = self.cascade_engine.run(profile, results.compromised_accounts, nodes, edges)
        fdna_graph = compute_fdna_cyber_graph(profile, results.compromised_accounts)

        self.logger.info(
            "assessment_completed",
            compromised_accounts=results.compromised_accounts,
            overall_risk=results.risk_levels.overall.value,
            max_receiver_impact=cascade.max_receiver_impact,
            overall_performance=fdna_graph.overall_performance,
        )

        return ImpactAssessment(
            results=results,
            incidence_sweep=sweep,
            cascade=cascade,
            fdna_graph=fdna_graph,
        )


def compute_simulation(
    profile: BusinessProfile, params: SimulationParameters
) -> SimulationResults:
    """Run the impact pipeline once for a profile and parameter set."""
    return PhishingImpactSimulator().simulate(profile, params)


def compute_incidence_sweep(
    profile: BusinessProfile,
    base_params: SimulationParameters,
    steps: Optional[int] = None,
) -> list[IncidenceStep]:
    """Run the impact pipeline across phishing rates 0 .. max rate."""
    return PhishingImpactSimulator().sweep_incidence(profile, base_params, steps)
