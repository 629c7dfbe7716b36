"""Ordered k-length selections of a sequence."""

import itertools
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def permutations(data: Sequence[T], count: int) -> Optional[List[List[T]]]:
  """Return every ordered selection of `count` distinct positions of `data`.

  Permutations come out in ascending order of the chosen indices:

  >>> permutations([1, 2, 3], 2)
  [[1, 2], [1, 3], [2, 1], [2, 3], [3, 1], [3, 2]]

  Equal values at different positions are treated as distinct, so duplicates
  in `data` produce duplicate permutations.

  Returns None when `count` is negative or larger than `len(data)`.
  `count == 0` yields a single empty permutation.

  Complexity: O(n! / (n - count)! * count)
  """
  data = list(data)
  if count < 0 or count > len(data):
    return None
  return [list(p) for p in itertools.permutations(data, count)]
