"""
Prefix sums over a numeric array.

`PrefixSum` precomputes cumulative sums once (`numpy.cumsum`) so that any
inclusive range sum is answered in O(1), and answers "is there a contiguous
subarray summing to X" in O(n) with a seen-set of prefix sums.

Invalid ranges are reported as `None`, never raised.
"""

import numbers
from typing import Optional, Sequence, Union

import numpy as np


def _scalar(value):
  """numpy scalar -> plain Python number (object arrays already hold Python values)."""
  return value.item() if isinstance(value, np.generic) else value


class PrefixSum:
  """Cumulative sums of `array`.

  Attributes
  ----------
  array : list
      The original values.
  prefix_sum : numpy.ndarray
      `prefix_sum[i] == sum(array[:i + 1])`.
  """

  def __init__(self, array: Sequence):
    self.array = list(array)
    if all(isinstance(x, numbers.Integral) for x in self.array):
      # object dtype keeps exact Python ints; int64 would wrap on overflow
      values = np.asarray([int(x) for x in self.array], dtype=object)
    else:
      values = np.asarray(self.array)
    self.prefix_sum = np.cumsum(values)

  def __len__(self):
    return len(self.array)

  def get_sum(self, start: int, end: int) -> Optional[Union[int, float]]:
    """Sum of `array[start..end]`, both ends inclusive.

    Examples
    --------
    >>> ps = PrefixSum([8, 3, 4, 2, 6, 7])
    >>> ps.get_sum(0, 3)
    17
    >>> ps.get_sum(-1, 3) is None
    True

    Returns
    -------
    int | float | None
        None when either index is outside `[0, len(array))` or `start > end`.

    Complexity
    ----------
    O(1)
    """
    length = len(self.array)
    if not (0 <= start < length and 0 <= end < length and start <= end):
      return None
    total = self.prefix_sum[end]
    if start > 0:
      total = total - self.prefix_sum[start - 1]
    return _scalar(total)

  def contains_sum(self, target_sum) -> bool:
    """True if some non-empty contiguous subarray sums to `target_sum`.

    A subarray `array[i+1..j]` sums to target exactly when
    `prefix_sum[j] - target` was already seen as an earlier prefix sum
    (0 stands for the empty prefix).

    Complexity
    ----------
    O(n)
    """
    seen = {0}
    for total in self.prefix_sum.tolist():
      if total - target_sum in seen:
        return True
      seen.add(total)
    return False

  def __repr__(self):
    return f"PrefixSum({self.array!r})"
