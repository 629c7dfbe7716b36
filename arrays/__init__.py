"""Array utilities: cumulative sums and permutations."""

from arrays.permutations import permutations
from arrays.prefix_sum import PrefixSum

__all__ = ["PrefixSum", "permutations"]
