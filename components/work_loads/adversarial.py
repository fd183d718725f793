import random
import string


def branching_keys(num_keys, seed=None, fanout=32, max_len=4, alphabet=string.ascii_lowercase):
  """Short keys under a wide root, plus extensions of some of them.

  With `fanout` distinct first edges and keys no longer than `max_len`, most
  lookups run with fewer query characters than children, i.e. on the
  substring-probe path. Half the keys extend an earlier key so edges get
  split and shared prefixes appear at every depth.
  """
  if num_keys < 1:
    raise ValueError("num_keys must be positive")
  if fanout < 1 or max_len < 1:
    raise ValueError("fanout and max_len must be positive")
  rng = random.Random(seed)
  heads = set()
  while len(heads) < min(fanout, len(alphabet) ** 2):
    heads.add("".join(rng.choices(alphabet, k=rng.randint(1, 2))))
  heads = sorted(heads)

  keys = []
  for _ in range(num_keys):
    if keys and rng.random() < 0.5:
      base = rng.choice(keys)
    else:
      base = rng.choice(heads)
    extra = rng.randint(0, max(0, max_len - len(base)))
    keys.append(base + "".join(rng.choices(alphabet[:4], k=extra)))
  return keys
