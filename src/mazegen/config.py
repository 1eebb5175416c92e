from dataclasses import dataclass
from enum import IntEnum
import random

class Difficulty(IntEnum):
    EASY = 1
    MEDIUM = 5
    HARD = 8
    EXTREME = 10

MIN_DIFFICULTY, MAX_DIFFICULTY = 1, 10
DEFAULT_SIZE = (16, 16)
DEFAULT_DIFFICULTY = Difficulty.MEDIUM

@dataclass(frozen=True)
class ModeFlags:
    # True reproduces the original integer division (difficulty // 10),
    # which leaves every level below EXTREME on the same curve.
    original_difficulty_curve: bool = False

# Global flags (can be swapped by launcher)
FLAGS = ModeFlags()

def resolve_difficulty(value) -> int:
    """Accept 1..10, a Difficulty, or a level name; raise ValueError otherwise."""
    if isinstance(value, str):
        try:
            return int(Difficulty[value.strip().upper()])
        except KeyError:
            raise ValueError(f"Unknown difficulty name {value!r}") from None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Difficulty must be an integer or level name, got {value!r}")
    if not (MIN_DIFFICULTY <= value <= MAX_DIFFICULTY):
        raise ValueError("Difficulty must be between 1 and 10.")
    return int(value)

def check_size(size_x, size_y) -> None:
    for v in (size_x, size_y):
        if isinstance(v, bool) or not isinstance(v, int) or v < 1:
            raise ValueError(f"Maze size must be positive integers, got {size_x}x{size_y}")

def check_seed(seed) -> int:
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise ValueError(f"Seed must be an integer, got {seed!r}")
    return seed

def random_seed() -> int:
    # Signed 64-bit, like the seeds the original accepted.
    return random.getrandbits(64) - (1 << 63)
