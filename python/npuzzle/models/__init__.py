from npuzzle.models.board import Action, Board, goal_flat, goal_position
from npuzzle.models.metrics import Metrics
from npuzzle.models.node import Node

__all__ = ["Action", "Board", "Metrics", "Node", "goal_flat", "goal_position"]
