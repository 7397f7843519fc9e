"""Agent modules."""

from .base_agent import BaseAgent
from .heuristic_agent import HeuristicAgent

__all__ = ["BaseAgent", "HeuristicAgent"]
