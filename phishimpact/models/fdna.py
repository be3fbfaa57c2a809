"""
FDNA-Cyber graph models.

A compact Functional Dependency Network Analysis view in which each node
carries a performance value per CIA dimension and each edge carries the
FDNA operability-dependency (alpha) and strength-of-dependency (beta)
coefficients.
"""

from pydantic import BaseModel, Field

from .enums import CIACategory, NodeType, PerformanceLevel


class FDNAGraphNode(BaseModel):
    """Node with per-dimension performance, 1.0 meaning fully operable."""

    id: str
    name: str
    type: NodeType
    confidentiality: float = Field(ge=0.0, le=1.0)
    integrity: float = Field(ge=0.0, le=1.0)
    availability: float = Field(ge=0.0, le=1.0)
    performance: float = Field(ge=0.0, le=1.0)


class FDNAGraphEdge(BaseModel):
    """Dependency between one CIA dimension of the source and one of the target."""

    id: str
    source: str
    target: str
    source_category: CIACategory
    target_category: CIACategory
    alpha: float = Field(ge=0.0, le=1.0, description="Operability dependency")
    beta: float = Field(ge=0.0, le=1.0, description="Strength of dependency")


class FDNAGraph(BaseModel):
    """FDNA-Cyber graph with the receiver's performance as the overall figure."""

    nodes: list[FDNAGraphNode]
    edges: list[FDNAGraphEdge]
    overall_performance: float = Field(ge=0.0, le=1.0)
    performance_level: PerformanceLevel
