import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")

_rng = random.Random()


def get_rng() -> random.Random:
    return _rng


def shuffle_and_take(items: Sequence[T], limit: int, rng: Optional[random.Random] = None) -> List[T]:
    """Shuffle a copy of ``items`` and keep at most ``limit`` of them."""
    pool = list(items)
    (rng or _rng).shuffle(pool)
    return pool[:limit]
