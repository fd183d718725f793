# dev_tests/test_work_loads.py
"""
Tests for the key-set generators under components.work_loads and the
components.workload.WorkLoad facade.

Focus:
  1) Validity (sizes, types, parseable URLs, IPv4 addresses)
  2) Reproducibility under a fixed seed
  3) Prefix clustering: higher prefix_freq => longer runs of shared prefixes
"""

import os
import sys
import unittest
import ipaddress
from collections import Counter
from urllib.parse import urlparse

# ---------------- Import shim (works from dev_tests/) ----------------
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, os.pardir))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from components.work_loads.word_generator import WORDS, generate_random_words, gen_words_with_prefix_freq  # noqa: E402
from components.work_loads.ip_generator import IPConfig, IPGenerator  # noqa: E402
from components.work_loads.url_generator import generate_urls  # noqa: E402
from components.work_loads.adversarial import branching_keys  # noqa: E402
from components.workload import WorkLoad  # noqa: E402
from tries.radix_set import RadixSet  # noqa: E402


# ---------- Helpers for prefix clustering metrics ----------
def two_prefix(w: str) -> str:
    return w[:2] if len(w) >= 2 else w


def avg_run_length(words):
    """Average run-length of consecutive identical 2-char prefixes."""
    if not words:
        return 0.0
    prev = two_prefix(words[0])
    run = 1
    runs = []
    for w in words[1:]:
        p = two_prefix(w)
        if p == prev:
            run += 1
        else:
            runs.append(run)
            run = 1
            prev = p
    runs.append(run)
    return sum(runs) / len(runs)


def prefix_hhi(words):
    """Herfindahl-Hirschman index over 2-char prefixes; higher => more concentrated."""
    n = len(words)
    if n == 0:
        return 0.0
    counts = Counter(two_prefix(w) for w in words)
    return sum((c / n) ** 2 for c in counts.values())


# ---------------------------------- Tests ----------------------------------
class TestGenerateRandomWords(unittest.TestCase):
    def test_pool_is_lowercase_and_unique(self):
        self.assertGreater(len(WORDS), 100)
        self.assertEqual(len(WORDS), len(set(WORDS)))
        self.assertTrue(all(w == w.lower() and w for w in WORDS))

    def test_length_and_types_nonunique(self):
        words = generate_random_words(5_000, seed=123, unique=False)
        self.assertEqual(len(words), 5_000)
        self.assertTrue(all(isinstance(w, str) and len(w) > 0 for w in words))

    def test_reproducibility(self):
        a = generate_random_words(2_000, seed=999)
        b = generate_random_words(2_000, seed=999)
        c = generate_random_words(2_000, seed=1000)
        self.assertEqual(a, b)
        self.assertNotEqual(a, c)

    def test_uniqueness(self):
        words = generate_random_words(100, seed=42, unique=True)
        self.assertEqual(len(set(words)), 100)

    def test_unique_overflow_raises(self):
        with self.assertRaises(ValueError):
            generate_random_words(len(WORDS) + 1, seed=1, unique=True)
        with self.assertRaises(ValueError):
            generate_random_words(0)


class TestPrefixFrequencyGenerator(unittest.TestCase):
    def test_prefix_clustering_effectiveness(self):
        low = gen_words_with_prefix_freq(5_000, prefix_freq=0.0, seed=123)
        high = gen_words_with_prefix_freq(5_000, prefix_freq=0.8, seed=123)
        self.assertEqual(len(low), 5_000)
        self.assertEqual(len(high), 5_000)
        self.assertGreater(avg_run_length(high), max(avg_run_length(low) * 3.0, 3.0))
        self.assertGreater(prefix_hhi(high), 0.0)

    def test_unique_mode_no_duplicates(self):
        words = gen_words_with_prefix_freq(300, prefix_freq=0.5, seed=9, unique=True)
        self.assertEqual(len(words), 300)
        self.assertEqual(len(set(words)), 300)

    def test_same_seed_reproducibility(self):
        a = gen_words_with_prefix_freq(2_000, prefix_freq=0.5, seed=2024)
        b = gen_words_with_prefix_freq(2_000, prefix_freq=0.5, seed=2024)
        self.assertEqual(a, b)

    def test_invalid_arguments_raise(self):
        with self.assertRaises(ValueError):
            gen_words_with_prefix_freq(0, prefix_freq=0.3, seed=1)
        with self.assertRaises(ValueError):
            gen_words_with_prefix_freq(10, prefix_freq=1.5, seed=1)


class TestIPGenerator(unittest.TestCase):
    def test_addresses_are_ipv4(self):
        ips = IPGenerator(IPConfig(seed=5)).batch(500)
        for ip in ips:
            self.assertEqual(ipaddress.ip_address(ip).version, 4)

    def test_private_share(self):
        ips = IPGenerator(IPConfig(public_share=0.0, seed=5)).batch(200)
        self.assertTrue(all(ipaddress.ip_address(ip).is_private for ip in ips))

    def test_truncated_octets(self):
        ips = IPGenerator(IPConfig(public_share=0.5, keep_octets=2, seed=3)).batch(300)
        self.assertTrue(all(ip.count(".") == 1 for ip in ips))
        # truncation collapses addresses onto repeated keys
        self.assertLess(len(set(ips)), len(ips))

    def test_seeded_reproducibility(self):
        a = IPGenerator(IPConfig(seed=11)).batch(100)
        b = IPGenerator(IPConfig(seed=11)).batch(100)
        self.assertEqual(a, b)

    def test_invalid_config_raises(self):
        with self.assertRaises(ValueError):
            IPConfig(private_weights={'a': 1.0})
        with self.assertRaises(ValueError):
            IPConfig(private_weights={'a': 0, 'b': 0, 'c': 0})
        with self.assertRaises(ValueError):
            IPConfig(keep_octets=5)
        with self.assertRaises(ValueError):
            IPConfig(public_share=1.5)
        with self.assertRaises(ValueError):
            IPGenerator(IPConfig()).batch(0)


class TestURLGenerator(unittest.TestCase):
    def test_urls_parse(self):
        urls = generate_urls(300, seed=17)
        self.assertEqual(len(urls), 300)
        for u in urls:
            pu = urlparse(u)
            self.assertIn(pu.scheme, {"http", "https"})
            self.assertTrue(pu.hostname)
            self.assertTrue(pu.path.startswith("/"))
            self.assertEqual(pu.fragment, "")

    def test_hosts_are_shared(self):
        urls = generate_urls(300, seed=17, num_hosts=5)
        self.assertLessEqual(len({urlparse(u).hostname for u in urls}), 5)

    def test_seeded_reproducibility(self):
        self.assertEqual(generate_urls(50, seed=4), generate_urls(50, seed=4))

    def test_invalid_arguments_raise(self):
        with self.assertRaises(ValueError):
            generate_urls(0)
        with self.assertRaises(ValueError):
            generate_urls(5, num_hosts=0)


class TestBranchingKeys(unittest.TestCase):
    def test_lengths_bounded(self):
        keys = branching_keys(1_000, seed=1, max_len=4)
        self.assertEqual(len(keys), 1_000)
        self.assertTrue(all(1 <= len(k) <= 4 for k in keys))

    def test_builds_wide_root(self):
        s = RadixSet()
        for k in branching_keys(500, seed=2, fanout=32, max_len=3):
            s.insert(k)
        # wider than the longest key, so root lookups use the substring probe
        self.assertGreater(len(s.children), 3)

    def test_invalid_arguments_raise(self):
        with self.assertRaises(ValueError):
            branching_keys(0)
        with self.assertRaises(ValueError):
            branching_keys(10, fanout=0)


class TestWorkLoad(unittest.TestCase):
    def test_every_kind_produces_keys(self):
        wl = WorkLoad(seed=3)
        for kind in WorkLoad.KINDS:
            keys = wl.keys(kind, 50)
            self.assertEqual(len(keys), 50, kind)
            self.assertTrue(all(isinstance(k, str) for k in keys), kind)

    def test_words_with_prefix_freq(self):
        self.assertEqual(len(WorkLoad(seed=3).words(100, p_freq=0.5)), 100)

    def test_unknown_kind_raises(self):
        with self.assertRaises(ValueError):
            WorkLoad().keys("emails", 10)


if __name__ == "__main__":
    unittest.main(verbosity=2)
