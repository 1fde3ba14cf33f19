from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class RNGManager:
    seed: int

    def __post_init__(self) -> None:
        self.sequence = np.random.SeedSequence(self.seed)
        self.numpy = np.random.default_rng(self.sequence.spawn(1)[0])

    def spawn(self) -> np.random.Generator:
        return np.random.default_rng(self.sequence.spawn(1)[0])

    def spawn_seed(self) -> int:
        return int(self.numpy.integers(0, 2**31 - 1))
