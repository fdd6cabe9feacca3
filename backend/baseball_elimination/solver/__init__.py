"""
Baseball Elimination Solver

Max-flow based detection of mathematically eliminated teams.
"""

from .models import Team, EliminationResult, TRIVIAL, FLOW
from .errors import EliminationError, UnknownTeamError, MalformedInputError, InvalidNetworkError
from .division import Division
from .flow_network import FlowEdge, FlowNetwork, NetworkSetup, build_network
from .maxflow import FordFulkerson
from .engine import EliminationEngine

__all__ = [
    # Models
    "Team",
    "EliminationResult",
    "TRIVIAL",
    "FLOW",
    # Errors
    "EliminationError",
    "UnknownTeamError",
    "MalformedInputError",
    "InvalidNetworkError",
    # Registry
    "Division",
    # Flow network
    "FlowEdge",
    "FlowNetwork",
    "NetworkSetup",
    "build_network",
    "FordFulkerson",
    # Engine
    "EliminationEngine",
]
