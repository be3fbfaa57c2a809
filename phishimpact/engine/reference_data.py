"""
Industry Reference Data.

Static per-industry risk multipliers that amplify revenue, reputation and
regulatory estimates. Sectors holding regulated or high-value data (finance,
government, healthcare) carry the largest multipliers.

Unknown industries are not an error: they fall back to a neutral 1.0.
"""

import structlog

logger = structlog.get_logger()

DEFAULT_RISK_MULTIPLIER = 1.0

# Industry name -> risk multiplier
INDUSTRY_RISK_FACTORS: dict[str, float] = {
    "Healthcare": 1.5,
    "Finance": 1.8,
    "Technology": 1.3,
    "Retail": 1.2,
    "Manufacturing": 1.0,
    "Education": 1.4,
    "Government": 1.6,
    "Nonprofit": 1.1,
    "Other": 1.0,
}


def get_industry_risk_multiplier(industry: str) -> float:
    """
    Look up the risk multiplier for an industry.

    Matching is exact. Unrecognized names degrade to the neutral multiplier.

    Args:
        industry: Industry name as stored on the business profile

    Returns:
        Risk multiplier (1.0 when the industry is unknown)
    """
    multiplier = INDUSTRY_RISK_FACTORS.get(industry)
    if multiplier is None:
        logger.debug(
            "industry_not_recognized",
            industry=industry,
            fallback_multiplier=DEFAULT_RISK_MULTIPLIER,
        )
        return DEFAULT_RISK_MULTIPLIER
    return multiplier
