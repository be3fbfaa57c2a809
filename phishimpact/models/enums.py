"""
Enumeration types for the phishing impact engine.

All enums inherit from str to ensure JSON serialization compatibility.
"""

from enum import Enum


class RiskLevel(str, Enum):
    """
    Four-tier ordinal risk classification.

    Used for the financial, operational, reputational and overall risk
    levels of a simulation, and for banding node impact in a cascade.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class NodeType(str, Enum):
    """Role of a node in the dependency network."""

    FEEDER = "feeder"
    RECEIVER = "receiver"


class CIACategory(str, Enum):
    """Security dimension of a node (CIA triad)."""

    CONFIDENTIALITY = "confidentiality"
    INTEGRITY = "integrity"
    AVAILABILITY = "availability"


class DependencyCategory(str, Enum):
    """
    CIA-pair label of a dependency edge.

    The first letter is the source dimension and the last letter the
    target dimension, e.g. C_TO_I means a confidentiality loss upstream
    degrades integrity downstream.
    """

    C_TO_C = "c_to_c"
    C_TO_I = "c_to_i"
    C_TO_A = "c_to_a"
    I_TO_C = "i_to_c"
    I_TO_I = "i_to_i"
    I_TO_A = "i_to_a"
    A_TO_C = "a_to_c"
    A_TO_I = "a_to_i"
    A_TO_A = "a_to_a"


class PerformanceLevel(str, Enum):
    """Qualitative band for FDNA-Cyber node performance."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
