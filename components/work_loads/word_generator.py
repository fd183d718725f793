import random
import math
from collections import defaultdict

from faker.providers.lorem.en_US import Provider as LoremProvider

# Word pool: Faker's English lorem list, deduplicated, order preserved
WORDS = list(dict.fromkeys(w.lower() for w in LoremProvider.word_list if w))


## Bucket words by their first two letters
## This is to generate words with common prefixes
prefix_bucket = defaultdict(list)
for word in WORDS:
  prefix_bucket[word[:2]].append(word)
prefixes = list(prefix_bucket.keys())
prefix_weights = [len(prefix_bucket[p]) for p in prefixes]


def generate_random_words(num_words, seed=None, unique=False):
  """
  Return n random words from WORDS.
  - unique=False: sample with replacement (allows duplicates, i.e. multiplicity > 1)
  - unique=True: sample without replacement (requires n <= len(WORDS))
  """
  if num_words < 1 or (unique is True and num_words > len(WORDS)):
    raise ValueError(f"num_words must be between 1 and {len(WORDS)}")
  rng = random.Random(seed)
  if unique:
    return rng.sample(WORDS, num_words)
  return rng.choices(WORDS, k=num_words)


def _p_eff_log(x, max_mean=100):
  """Logarithmic mapping of prefix frequency to the probability of staying in a bucket."""
  if x < 0 or x > 1:
    raise ValueError("prefix_freq must be between 0 and 1")
  x = max(0.0, min(0.999999, x))
  k = math.log(max_mean)
  p = 1.0 - math.exp(-k * x)
  return min(p, 0.999999)


def gen_words_with_prefix_freq(num_words, prefix_freq=0.0, seed=None, unique=False):
  """Generate words whose neighbours tend to share a two-letter prefix.

  A higher prefix_freq keeps drawing from the same bucket for longer, which
  produces deeper shared edges (and more splits) in a radix tree.
  prefix_freq: 0 -> 1
  """
  p_stay = _p_eff_log(prefix_freq)
  if num_words < 1 or (unique is True and num_words > len(WORDS)):
    raise ValueError(f"num_words must be between 1 and {len(WORDS)}")
  rng = random.Random(seed)

  out = []
  seen = set()
  exhausted = set()

  while len(out) < num_words:
    prefix = rng.choices(prefixes, weights=prefix_weights)[0]
    if prefix in exhausted:
      continue
    options = prefix_bucket[prefix]
    while len(out) < num_words:
      if unique:
        remaining = [w for w in options if w not in seen]
        if not remaining:
          exhausted.add(prefix)
          break
        new_word = rng.choice(remaining)
        seen.add(new_word)
      else:
        new_word = rng.choice(options)
      out.append(new_word)
      if rng.random() >= p_stay:
        break
  return out
