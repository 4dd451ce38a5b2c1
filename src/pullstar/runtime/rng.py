# runtime/rng.py
from __future__ import annotations

from functools import cache
from zlib import crc32

import numpy as np


def _tag(s: str) -> int:
    return crc32(s.encode("utf-8")) & 0xFFFFFFFF


class RNGRegistry:
    """
    Deterministic numpy generators keyed by stream name.
    Entropy path: [master_seed, scenario, stream, *parts]; draws from one
    stream never shift another.
    """

    def __init__(self, master_seed: int, *, scenario: str | int = 0):
        self.master_seed = master_seed & 0xFFFFFFFF
        self.scenario_tag = _tag(str(scenario))

    @cache
    def stream(self, name: str, *parts: int | str) -> np.random.Generator:
        key = [p & 0xFFFFFFFF if isinstance(p, int) else _tag(p) for p in parts]
        ss = np.random.SeedSequence(
            entropy=[self.master_seed, self.scenario_tag, _tag(name), *key]
        )
        return np.random.Generator(np.random.PCG64(ss))
