#!/usr/bin/env python3
from components.work_loads.word_generator import generate_random_words, gen_words_with_prefix_freq
from components.work_loads.url_generator import generate_urls
from components.work_loads.ip_generator import IPConfig, IPGenerator
from components.work_loads.adversarial import branching_keys


class WorkLoad:
    """Seeded key-set factory for radix set tests and benchmarks."""

    KINDS = ("words", "urls", "ips", "branching")

    def __init__(self, seed=None):
        self.seed = seed

    def words(self, num_words, p_freq=0, unique=False):
        if p_freq > 0:
            return gen_words_with_prefix_freq(num_words, p_freq, self.seed, unique)
        else:
            return generate_random_words(num_words, self.seed, unique)

    def urls(self, num_urls):
        return generate_urls(num_urls, self.seed)

    def ips(self, num_ips, keep_octets=4):
        return IPGenerator(IPConfig(keep_octets=keep_octets, seed=self.seed)).batch(num_ips)

    def branching(self, num_keys, fanout=32):
        return branching_keys(num_keys, self.seed, fanout=fanout)

    def keys(self, kind, n, p_freq=0):
        """Dispatch on a workload name from KINDS."""
        if kind == "words":
            return self.words(n, p_freq=p_freq)
        if kind == "urls":
            return self.urls(n)
        if kind == "ips":
            return self.ips(n)
        if kind == "branching":
            return self.branching(n)
        raise ValueError(f"unknown workload {kind!r}, expected one of {self.KINDS}")
