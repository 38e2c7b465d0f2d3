"""Packed binary synapses and their XNOR-popcount dot product."""

from dataclasses import dataclass, field
from typing import Sequence

from .config import WORD_MASK


def xnor_popcount(a: int, b: int) -> int:
    """Number of equal bits between two packed weight words."""
    return (~(a ^ b) & WORD_MASK).bit_count()


@dataclass
class SynapseBlock:
    """A block of packed 64-bit binary weight words."""

    weights: list[int] = field(default_factory=list)

    @property
    def word_count(self) -> int:
        return len(self.weights)

    def dot_xnor_popcount(self, a: Sequence[int]) -> int:
        """Sum of XNOR-popcounts of the activity words against the weights."""
        if len(a) < len(self.weights):
            raise ValueError(
                f"activity has {len(a)} words, block needs {len(self.weights)}"
            )
        return sum(xnor_popcount(x, w) for x, w in zip(a, self.weights))