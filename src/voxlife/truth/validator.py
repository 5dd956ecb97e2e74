from typing import Dict

from ..engine.rules import DEFAULT_RULE, LifeRule
from ..runtime.bus import MessageBus
from ..runtime.events import VerificationMismatch
from .golden import GoldenLife3D, count_mismatches, to_array


class ReferenceVerifier:
    """
    Re-computes every adopted generation with the dense reference automaton
    and reports cells where the two disagree.
    """

    def __init__(self, bus: MessageBus, rule: LifeRule = DEFAULT_RULE):
        self.bus = bus
        self.rule = rule
        self.stats: Dict[str, int] = {"verified": 0, "mismatched_cells": 0}

    def __call__(self, update) -> int:
        golden = GoldenLife3D(update.previous.extents, self.rule)
        golden.seed(to_array(update.previous))
        expected = golden.step()

        mismatched = count_mismatches(update.current, expected)
        self.stats["verified"] += 1
        self.stats["mismatched_cells"] += mismatched
        if mismatched:
            self.bus.publish(
                VerificationMismatch(generation=update.generation, mismatched_cells=mismatched)
            )
        return mismatched
