# sim/rng.py
from __future__ import annotations

from dataclasses import dataclass
from zlib import crc32

import numpy as np


def _u32(x: int) -> int:
    return int(x & 0xFFFFFFFF)


def _crc32_u32(s: str) -> int:
    return _u32(crc32(s.encode("utf-8")))


@dataclass(frozen=True)
class RNGKey:
    """Stream name plus optional sub-keys (ints, strings), normalised to u32."""

    stream: str
    parts: tuple[int, ...]

    @classmethod
    def from_parts(cls, stream: str, *parts: object) -> RNGKey:
        norm: list[int] = [_crc32_u32(stream)]
        for p in parts:
            if isinstance(p, (int, np.integer)):
                norm.append(_u32(int(p)))
            elif isinstance(p, str):
                norm.append(_crc32_u32(p))
            else:
                norm.append(_crc32_u32(repr(p)))
        return cls(stream=stream, parts=tuple(norm))


class RNGRegistry:
    """
    Deterministic source of numpy.random.Generator streams.
    Entropy path: [master_seed, scenario, *key.parts]; the same path always
    yields the same draws regardless of the order streams are requested in.
    """

    def __init__(self, master_seed: int, *, scenario: str | int = 0):
        self.master_seed = _u32(master_seed)
        self.scenario_tag = _crc32_u32(str(scenario))
        self._generators: dict[RNGKey, np.random.Generator] = {}

    def generator(self, key: RNGKey) -> np.random.Generator:
        """A fresh generator positioned at the start of the key's stream."""
        ss = np.random.SeedSequence(entropy=[self.master_seed, self.scenario_tag, *key.parts])
        return np.random.Generator(np.random.PCG64(ss))

    def stream(self, name: str) -> np.random.Generator:
        """Named stream, shared (and advanced) across calls on this registry."""
        key = RNGKey.from_parts(name)
        if key not in self._generators:
            self._generators[key] = self.generator(key)
        return self._generators[key]

    def substream(self, name: str, *parts: object) -> np.random.Generator:
        """Uncached: every call restarts the sub-keyed stream from its seed."""
        return self.generator(RNGKey.from_parts(name, *parts))

    def cached_streams(self) -> int:
        return len(self._generators)
