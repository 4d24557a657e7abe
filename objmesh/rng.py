# objmesh/rng.py
"""
Reproducible pseudo-random source for navmesh sampling in tests and demos.

The generator is deliberately trivial: every draw adds 0xDEADBEEF to a 64-bit
state. It is passed explicitly to whatever samples points (for example a navmesh
query picking random start and end positions) so two runs with the same seed see
the same sequence.

Example:
    rng = SteppingRandom()
    rng.next_u64()   # 0xDEADBEEF
    rng()            # float in [0, 1)
"""
from __future__ import annotations

from dataclasses import dataclass

STEP = 0xDEADBEEF
_MASK64 = (1 << 64) - 1
_FLOAT_BITS = 24  # significand bits of a single precision float


@dataclass
class SteppingRandom:
    seed: int = 0
    counter: int = 0

    def __post_init__(self) -> None:
        if self.counter < 0:
            raise ValueError(f"counter must be >= 0 (got {self.counter})")
        self.seed &= _MASK64

    @property
    def state(self) -> int:
        return (self.seed + self.counter * STEP) & _MASK64

    def next_u64(self) -> int:
        self.counter += 1
        return self.state

    def random(self) -> float:
        """Uniform float in [0, 1) from the low 24 bits of the next state."""
        bits = self.next_u64() & ((1 << _FLOAT_BITS) - 1)
        return bits / float(1 << _FLOAT_BITS)

    __call__ = random

    def reset(self) -> None:
        self.counter = 0
