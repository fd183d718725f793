import random
from typing import Dict, Optional
from dataclasses import dataclass
from faker import Faker

## === Config Class === ##

@dataclass
class IPConfig:
    """
    Configuration for IPGenerator
        public_share: float, proportion of public IPs
        private_weights: dict, weights for private IPs {a: x, b: x, c: x}
        keep_octets: int, number of leading octets kept (1-4); shorter keys
            collapse many addresses onto the same string, raising multiplicity
        seed: int, seed for random number generator
    """
    public_share: float = 0.9  # fraction of public IPs
    private_weights: Optional[Dict[str, float]] = None  # weights for {'a','b','c'}
    keep_octets: int = 4
    seed: Optional[int] = None  # seed for random number generator

    def __post_init__(self):
        if not 0.0 <= self.public_share <= 1.0:
            raise ValueError("public_share must be between 0 and 1")
        if self.keep_octets not in (1, 2, 3, 4):
            raise ValueError("keep_octets must be between 1 and 4")
        if self.private_weights is None:
            self.private_weights = {'a': 0.35, 'b': 0.10, 'c': 0.55}
        else:
            missing = [k for k in ('a', 'b', 'c') if k not in self.private_weights]
            if missing:
                raise ValueError(f"private_weights missing keys: {missing}")
            if any(self.private_weights[k] < 0 for k in ('a', 'b', 'c')):
                raise ValueError("private_weights must be non-negative")
            if sum(self.private_weights[k] for k in ('a', 'b', 'c')) == 0:
                raise ValueError("Sum of private_weights must be > 0")
            self.private_weights = {cls: self.private_weights[cls] for cls in sorted(self.private_weights)}


class IPGenerator:
    """Dotted-quad IPv4 keys; shared leading octets give long shared edges."""

    def __init__(self, config: IPConfig):
        self.config = config
        self.rng = random.Random(self.config.seed)

        self.fake = Faker()
        if self.config.seed is not None:
            self.fake.seed_instance(self.config.seed)
        self.priv_classes, self.weights = zip(*self.config.private_weights.items())

    def _priv_class(self):
        return self.rng.choices(self.priv_classes, weights=self.weights, k=1)[0]

    def _truncate(self, addr: str) -> str:
        if self.config.keep_octets == 4:
            return addr
        return ".".join(addr.split(".")[:self.config.keep_octets])

    def single(self) -> str:
        if self.rng.random() > self.config.public_share:
            addr = self.fake.ipv4_private(address_class=self._priv_class())
        else:
            addr = self.fake.ipv4_public()
        return self._truncate(addr)

    def batch(self, n: int):
        if n <= 0:
            raise ValueError("n must be positive")
        return [self.single() for _ in range(n)]
