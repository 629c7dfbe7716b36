from workloads.array_generator import generate_numbers
from workloads.word_generator import generate_random_words, gen_words_with_prefix_freq


class WorkLoad:
    def __init__(self, seed=None):
        self.seed = seed

    def words(self, num_words, p_freq=0, unique=False):
        if not 0 <= p_freq <= 1:
            raise ValueError(f"p_freq must be between 0 and 1, got {p_freq}")
        if p_freq > 0:
            return gen_words_with_prefix_freq(num_words, p_freq, self.seed, unique)
        else:
            return generate_random_words(num_words, self.seed, unique)

    def numbers(self, size, low=-100, high=100):
        return generate_numbers(size, low, high, self.seed)


__all__ = ["WorkLoad", "generate_numbers", "generate_random_words", "gen_words_with_prefix_freq"]
