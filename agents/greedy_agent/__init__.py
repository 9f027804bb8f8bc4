from .decision_table import Bearing, DECISION_TABLE, bearing_of, lookup, take_action
from .greedy_agent import GreedyAgent

__all__ = [
    "Bearing",
    "DECISION_TABLE",
    "bearing_of",
    "lookup",
    "take_action",
    "GreedyAgent",
]
