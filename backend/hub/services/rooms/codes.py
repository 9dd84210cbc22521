import random
from typing import Collection, Optional

from .errors import RoomCodeSpaceExhausted


class RoomCodeAllocator:
    """Draws fixed-width numeric room codes that are not currently live.

    Candidates come uniformly from ``[low, high]``; any candidate already in
    use is discarded and redrawn. Pass a seeded ``random.Random`` as ``rng``
    for repeatable codes.
    """

    def __init__(self, low: int = 1000, high: int = 9999, rng: Optional[random.Random] = None):
        if low > high:
            raise ValueError(f'Empty room code range: {low}-{high}')
        self.low = low
        self.high = high
        self.rng = rng or random.Random()

    @property
    def capacity(self) -> int:
        return self.high - self.low + 1

    def allocate(self, in_use: Collection[str]) -> str:
        # Only a full code space can starve the loop below
        if len(in_use) >= self.capacity and all(str(n) in in_use for n in range(self.low, self.high + 1)):
            raise RoomCodeSpaceExhausted(self.capacity)
        code = str(self.rng.randint(self.low, self.high))
        while code in in_use:
            code = str(self.rng.randint(self.low, self.high))
        return code
