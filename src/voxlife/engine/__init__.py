from .index import GenerationIndex, build_index
from .rules import DEFAULT_RULE, LifeRule, should_live
from .transition import count_alive_neighbors, transition

__all__ = [
    "DEFAULT_RULE",
    "GenerationIndex",
    "LifeRule",
    "build_index",
    "count_alive_neighbors",
    "should_live",
    "transition",
]
