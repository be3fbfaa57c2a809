#!/usr/bin/env python3
"""
PhishImpact Demo — Full assessment for one business profile.

Runs the complete engine workflow:
1. Simulates the phishing campaign (compromise, impact, risk levels)
2. Sweeps phishing incidence from 0% to the configured maximum
3. Propagates the compromise through the dependency network
4. Prints an FDNA-Cyber performance summary

Usage:
    python scripts/demo_run.py                              # Default profile
    python scripts/demo_run.py --industry Healthcare --employees 40
    python scripts/demo_run.py --json                       # Full JSON output
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from phishimpact.engine.risk_classifier import classify_impact_level
from phishimpact.engine.simulation import PhishingImpactSimulator
from phishimpact.models import BusinessProfile, SimulationParameters
from phishimpact.utils.formatting import format_currency, format_percentage
from phishimpact.utils.logging import configure_logging


def main():
    parser = argparse.ArgumentParser(description="Run a PhishImpact assessment")
    parser.add_argument("--company", default="Demo Company", help="Company name")
    parser.add_argument("--industry", default="Technology", help="Industry name")
    parser.add_argument("--employees", type=int, default=50, help="Employee count")
    parser.add_argument("--revenue", type=float, default=5_000_000, help="Annual revenue (USD)")
    parser.add_argument("--data-importance", type=int, default=7, help="Data importance (1-10)")
    parser.add_argument("--tech-maturity", type=int, default=6, help="Tech maturity (1-10)")
    parser.add_argument("--salary", type=float, default=75_000, help="Average salary (USD)")
    parser.add_argument("--critical-systems", type=int, default=5, help="Critical systems count")
    parser.add_argument("--phishing-rate", type=float, default=0.2)
    parser.add_argument("--click-through-rate", type=float, default=0.3)
    parser.add_argument("--compromise-rate", type=float, default=0.5)
    parser.add_argument("--json", action="store_true", help="Print the full assessment as JSON")
    args = parser.parse_args()

    configure_logging()

    profile = BusinessProfile(
        company_name=args.company,
        industry=args.industry,
        employee_count=args.employees,
        annual_revenue=args.revenue,
        data_importance=args.data_importance,
        tech_maturity=args.tech_maturity,
        average_salary=args.salary,
        critical_systems_count=args.critical_systems,
    )
    params = SimulationParameters(
        phishing_rate=args.phishing_rate,
        click_through_rate=args.click_through_rate,
        compromise_rate=args.compromise_rate,
    )

    assessment = PhishingImpactSimulator().assess(profile, params)

    if args.json:
        print(assessment.model_dump_json(indent=2))
        return

    results = assessment.results
    fin = results.financial_impact
    ops = results.operational_impact
    risk = results.risk_levels

    print("\n" + "=" * 60)
    print(f"PhishImpact Assessment: {profile.company_name} ({profile.industry})")
    print("=" * 60)

    print(f"\n  Compromised accounts: {results.compromised_accounts} of {profile.employee_count}")

    print("\n  Financial impact")
    print(f"    Remediation:       {format_currency(fin.remediation_costs)}")
    print(f"    Productivity:      {format_currency(fin.productivity_costs)}")
    print(f"    Revenue loss:      {format_currency(fin.revenue_loss)}")
    print(f"    Reputation:        {format_currency(fin.reputation_costs)}")
    print(f"    Regulatory fines:  {format_currency(fin.regulatory_fines)}")
    print(f"    Total:             {format_currency(fin.total_financial_impact)}")

    print("\n  Operational impact")
    print(f"    Systems downtime:  {ops.systems_downtime:.1f} hours")
    print(f"    Productivity loss: {format_percentage(ops.productivity_loss / 100)}")
    print(f"    Recovery time:     {ops.recovery_time:.1f} days")
    print(f"    Affected systems:  {ops.affected_systems}")

    print("\n  Risk levels")
    for label in ("financial", "operational", "reputational", "overall"):
        print(f"    {label.capitalize():<13} {getattr(risk, label).value.upper()}")

    print("\n  Impact vs incidence")
    for sample in assessment.incidence_sweep:
        print(
            f"    {format_percentage(sample.phishing_rate):>5}  "
            f"{format_currency(sample.results.financial_impact.total_financial_impact):>12}  "
            f"{sample.results.risk_levels.overall.value}"
        )

    print("\n  Dependency network cascade")
    for index, wave in enumerate(assessment.cascade.cascade_levels):
        title = "Initial impact" if index == 0 else f"Cascade step {index}"
        entries = ", ".join(
            f"{impact.node_id} {format_percentage(impact.impact_level)}" for impact in wave
        )
        print(f"    {title}: {entries or 'none'}")
    for node in assessment.cascade.nodes:
        band = classify_impact_level(node.impact_level).value
        print(f"    {node.name:<28} {format_percentage(node.impact_level):>6}  {band}")

    fdna = assessment.fdna_graph
    print(
        f"\n  FDNA-Cyber overall performance: {format_percentage(fdna.overall_performance)} "
        f"({fdna.performance_level.value})"
    )
    print("=" * 60 + "\n")


if __name__ == "__main__":
    main()
