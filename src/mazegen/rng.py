from dataclasses import dataclass
from typing import List, Optional, Tuple

MULTIPLIER = 0x5DEECE66D
ADDEND = 0xB
MASK = (1 << 48) - 1  # 48-bit state

def scramble(seed: int) -> int:
    return (seed ^ MULTIPLIER) & MASK

def lcg_next(state: int) -> int:
    return (state * MULTIPLIER + ADDEND) & MASK

def to_int32(x: int) -> int:
    x &= 0xFFFFFFFF
    if x & 0x80000000:
        x -= 1 << 32
    return x

def to_int64(x: int) -> int:
    x &= 0xFFFFFFFFFFFFFFFF
    if x & 0x8000000000000000:
        x -= 1 << 64
    return x

@dataclass
class SeededRandom:
    """
    48-bit LCG with the same stream as the original generator, so a seed
    reproduces the same maze on any interpreter.
    """
    state: int

    @classmethod
    def from_seed(cls, seed: int) -> "SeededRandom":
        return cls(scramble(to_int64(seed)))

    def next_bits(self, bits: int) -> int:
        self.state = lcg_next(self.state)
        return to_int32(self.state >> (48 - bits))

    def next_int(self, bound: Optional[int] = None) -> int:
        if bound is None:
            return self.next_bits(32)
        if bound <= 0:
            raise ValueError("bound must be positive")
        if bound & -bound == bound:
            return (bound * self.next_bits(31)) >> 31
        while True:
            bits = self.next_bits(31)
            val = bits % bound
            # reject the partial bucket at the top of the 31-bit range
            if bits - val + (bound - 1) < (1 << 31):
                return val

    def next_float(self) -> float:
        return self.next_bits(24) / float(1 << 24)

def draw_layout_sequence(
    rng: SeededRandom, size_x: int, size_y: int
) -> Tuple[Tuple[int, int], List[float]]:
    """
    Fixed draw order: start column first, then one priority per cell in
    row-major order. New draws go after these, never in between.
    """
    start = (rng.next_int(size_x), 0)
    priorities = [rng.next_float() for _ in range(size_x * size_y)]
    return start, priorities
