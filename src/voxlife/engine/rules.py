from dataclasses import dataclass

from ..exceptions import ConfigurationError


@dataclass(frozen=True)
class LifeRule:
    """
    Inclusive survival band [lower, upper].

    A living cell survives while its live-neighbour count lies inside the
    band. A dead cell is born only when the count equals `upper` exactly.
    """

    lower: int = 2
    upper: int = 3

    def __post_init__(self):
        if self.lower < 0 or self.upper < 0:
            raise ConfigurationError(
                f"Rule thresholds must be non-negative, got {self.lower}/{self.upper}"
            )
        if self.lower > self.upper:
            raise ConfigurationError(
                f"Lower threshold {self.lower} exceeds upper threshold {self.upper}"
            )


DEFAULT_RULE = LifeRule()


def should_live(alive: bool, alive_neighbors: int, rule: LifeRule = DEFAULT_RULE) -> bool:
    if alive:
        return rule.lower <= alive_neighbors <= rule.upper
    return alive_neighbors == rule.upper
