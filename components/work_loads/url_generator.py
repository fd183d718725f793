import random
import string
from urllib.parse import quote

from faker import Faker

from components.work_loads.word_generator import WORDS


### ================= URL Key Probability Config ================= ###

# --- File extensions and their weights for path generation --- #
file_exts = ["js", "css", "html", "jpg", "png", "gif", "svg", "woff2", "pdf", "json", "txt", "mp4"]
file_ext_weights = [0.28, 0.10, 0.03, 0.10, 0.09, 0.05, 0.02, 0.08, 0.03, 0.03, 0.01, 0.03]

# --- Path segment probability config --- #
slug_separators = ["-", "_", " "]
slug_separator_weights = [0.82, 0.12, 0.06]

sub_segments = [1, 2, 3, 4]
sub_segment_weights = [0.45, 0.30, 0.17, 0.08]

depths = [0, 1, 2, 3, 4, 5]
depth_weights = [0.20, 0.30, 0.25, 0.13, 0.10, 0.02]

param_keys = ["q", "id", "page", "ref", "utm_source", "lang", "session"]
param_weights = [0.25, 0.20, 0.20, 0.10, 0.10, 0.08, 0.07]


### ================= URL Key Generation Functions ================= ###

def sample_hosts(fake, num_hosts):
  """A small host pool keeps many keys under the same long host prefix."""
  if num_hosts <= 0:
    raise ValueError("num_hosts must be greater than 0")
  return [fake.domain_name() for _ in range(num_hosts)]


def pick_scheme(rng):
  """Pick a scheme (http or https) with a realistic probability."""
  return rng.choices(["http", "https"], weights=[0.12, 0.88], k=1)[0]


def slug(rng, min_len=2, max_len=12, digit_p=0.15, sep_p=0.15):
  pool = string.ascii_lowercase + (string.digits if rng.random() < digit_p else "")
  s = "".join(rng.choices(pool, k=rng.randint(min_len, max_len)))
  if rng.random() < sep_p and len(s) > 3:
    indx = rng.randint(2, len(s) - 2)
    separator = rng.choices(slug_separators, slug_separator_weights, k=1)[0]
    s = s[:indx] + separator + s[indx:]
  return quote(s, safe='-_.~')


def segment(rng, slug_p):
  """Generate a single path segment."""
  num_segs = rng.choices(sub_segments, weights=sub_segment_weights, k=1)[0]
  parts = []
  for _ in range(num_segs):
    if rng.random() < slug_p:
      parts.append(slug(rng))
    else:
      parts.append(quote(rng.choice(WORDS), safe='-_.~'))
  return "-".join(parts)


def gen_path(rng, slug_p=0.3):
  """Generate a random path with a depth up to 5.
    slug_p: probability of a segment being a slug (vs. a common word)."""
  if slug_p < 0 or slug_p > 1:
    raise ValueError("slug_p must be between 0 and 1")
  depth = rng.choices(depths, weights=depth_weights, k=1)[0]
  if depth == 0:
    return "/"
  segs = []
  for _ in range(depth):
    segs.append(segment(rng, slug_p))
    slug_p += ((1 - slug_p) * 0.15)
  path = "/" + "/".join(segs)
  if rng.random() < 0.3:
    return path + '.' + rng.choices(file_exts, weights=file_ext_weights, k=1)[0]
  return path + '/'


def query_string(rng):
  """Generate a query string (or none) with sorted parameters."""
  num_params = rng.choices([0, 1, 2, 3], weights=[0.5, 0.3, 0.15, 0.05], k=1)[0]
  if num_params == 0:
    return ''
  keys = set()
  while len(keys) < num_params:
    keys.add(rng.choices(param_keys, weights=param_weights, k=1)[0])
  pairs = []
  for key in sorted(keys):
    if key in ("id", "page"):
      val = str(rng.randint(1, 500))
    elif key in ("ref", "session"):
      val = slug(rng, min_len=8, max_len=16, digit_p=0.5, sep_p=0.0)
    else:
      val = "+".join(rng.choices(WORDS, k=rng.randint(1, 3)))
    pairs.append(key + '=' + val)
  return '?' + '&'.join(pairs)


### ================= Final URL Generation Logic ================= ###

def generate_urls(num_urls, seed=None, num_hosts=20):
  """Generate a list of random URLs over a small pool of Faker hosts."""
  if num_urls < 1:
    raise ValueError("num_urls must be positive")
  rng = random.Random(seed)
  fake = Faker()
  if seed is not None:
    fake.seed_instance(seed)
  hosts = sample_hosts(fake, num_hosts)
  urls = []
  for _ in range(num_urls):
    url = f"{pick_scheme(rng)}://{rng.choice(hosts)}{gen_path(rng)}{query_string(rng)}"
    urls.append(url)
  return urls
