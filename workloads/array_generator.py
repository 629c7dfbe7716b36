import numpy as np


def generate_numbers(size, low=-100, high=100, seed=None):
  """Return `size` random integers in [low, high] as a plain list."""
  if size < 0:
    raise ValueError(f"size must be >= 0, got {size}")
  if low > high:
    raise ValueError(f"low ({low}) must not exceed high ({high})")
  rng = np.random.default_rng(seed)
  return rng.integers(low, high, size=size, endpoint=True).tolist()
