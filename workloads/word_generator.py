import logging
import math
import random
import string

from faker import Faker
from faker.exceptions import UniquenessException

log = logging.getLogger("prefix_bench.workloads")

ALPHABET = string.ascii_lowercase
MIN_LEN, MAX_LEN = 3, 10
MIN_STEM = 2


def _faker(seed):
  fake = Faker()
  if seed is not None:
    fake.seed_instance(seed)
  return fake


def generate_random_words(num_words, seed=None, unique=False):
  """
  Return n random dictionary-like words drawn from Faker's lorem provider.
  - unique=False: sample with replacement (fast, allows duplicates)
  - unique=True: sample without replacement; raises ValueError once Faker runs
    out of distinct words
  """
  if num_words < 1:
    raise ValueError(f"num_words must be >= 1, got {num_words}")
  fake = _faker(seed)
  if not unique:
    return [fake.word() for _ in range(num_words)]
  try:
    return [fake.unique.word() for _ in range(num_words)]
  except UniquenessException as e:
    raise ValueError(f"cannot draw {num_words} unique words from the word list") from e


def _p_eff_log(x, max_mean=100) -> float:
  # Logarithmic mapping of prefix frequency to effective prefix frequency
  if x < 0 or x > 1:
    raise ValueError("Prefix frequency must be between 0 and 1")
  x = max(0.0, min(0.999999, x))
  k = math.log(max_mean)
  p = 1.0 - math.exp(-k * x)
  return min(p, 0.999999)


def _random_word(rng, min_len=MIN_LEN, max_len=MAX_LEN):
  return "".join(rng.choice(ALPHABET) for _ in range(rng.randint(min_len, max_len)))


def gen_words_with_prefix_freq(num_words, prefix_freq=0.0, seed=None, unique=False):
  """Generates a list of random lowercase words with a given prefix frequency.
  A higher prefix_freq means longer runs of consecutive words sharing a stem
  (at least two characters) with the word before them.
  Prefix frequency is applied logarithmically
  prefix_freq: 0 -> 1
  """
  if num_words < 1:
    raise ValueError(f"num_words must be >= 1, got {num_words}")
  p = _p_eff_log(prefix_freq)
  rng = random.Random(seed)

  words = []
  seen = set()
  prev = None
  while len(words) < num_words:
    if prev is not None and rng.random() < p:
      stem = prev[:rng.randint(MIN_STEM, len(prev))]
      word = stem + _random_word(rng, 1, MAX_LEN - MIN_STEM)
    else:
      word = _random_word(rng)
    if unique:
      if word in seen:
        continue
      seen.add(word)
    words.append(word)
    prev = word
  log.debug("generated %d words (prefix_freq=%.2f -> p=%.3f)", num_words, prefix_freq, p)
  return words
