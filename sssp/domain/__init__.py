"""Domain layer - Core result models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    ConfigurationError,
    GraphError,
    InvariantViolationError,
    NoRouteFoundError,
    RowParseError,
    SSSPError,
    VertexNotFoundError,
)
from .models import (
    AdjacencyCheck,
    GraphSummary,
    Operation,
    RejectedRow,
    RoutePlan,
    RouteResult,
    RouteStop,
)

__all__ = [
    # Models
    "Operation",
    "RouteStop",
    "RouteResult",
    "RoutePlan",
    "RejectedRow",
    "AdjacencyCheck",
    "GraphSummary",
    # Errors
    "SSSPError",
    "GraphError",
    "VertexNotFoundError",
    "RowParseError",
    "InvariantViolationError",
    "NoRouteFoundError",
    "ConfigurationError",
]
