"""
Input models: the business being assessed and the attack parameters.

Field constraints here are the caller-validation boundary. The calculators
trust any instance that made it through validation and do not re-check.
"""

from pydantic import BaseModel, ConfigDict, Field


class BusinessProfile(BaseModel):
    """
    Profile of the small business under assessment.

    Immutable for the duration of a simulation run.

    Attributes:
        company_name: Display name, opaque to the engine
        industry: Key into the industry risk multiplier table
        employee_count: Headcount, always positive
        annual_revenue: Annual revenue (USD)
        data_importance: Sensitivity of held data, 1-10
        tech_maturity: Security and IT maturity, 1-10
        average_salary: Average annual salary (USD)
        critical_systems_count: Number of business-critical systems
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "company_name": "Acme Advisory",
                "industry": "Finance",
                "employee_count": 100,
                "annual_revenue": 5000000.0,
                "data_importance": 8,
                "tech_maturity": 6,
                "average_salary": 75000.0,
                "critical_systems_count": 5,
            }
        },
    )

    company_name: str = Field(default="", description="Display name of the business")
    industry: str = Field(description="Industry name used for the risk multiplier lookup")
    employee_count: int = Field(gt=0, description="Number of employees")
    annual_revenue: float = Field(gt=0.0, description="Annual revenue (USD)")
    data_importance: int = Field(ge=1, le=10, description="Data sensitivity (1-10)")
    tech_maturity: int = Field(ge=1, le=10, description="Technology maturity (1-10)")
    average_salary: float = Field(gt=0.0, description="Average annual salary (USD)")
    critical_systems_count: int = Field(gt=0, description="Number of critical systems")


class SimulationParameters(BaseModel):
    """
    Attack funnel parameters.

    The product of the three rates is the share of employees whose accounts
    end up compromised. A phishing rate of 0 is admitted so that incidence
    sweeps can start from a no-attack baseline.
    """

    model_config = ConfigDict(frozen=True)

    phishing_rate: float = Field(
        ge=0.0, le=1.0, description="Share of employees receiving phishing emails"
    )
    click_through_rate: float = Field(
        ge=0.0, le=1.0, description="Share of recipients who click the phishing link"
    )
    compromise_rate: float = Field(
        ge=0.0, le=1.0, description="Share of clicks that result in a compromised account"
    )
