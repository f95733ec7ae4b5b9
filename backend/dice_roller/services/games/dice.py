import random
from typing import List, Optional


class DiceRoller:
    """Rolls pairs of dice from an injectable random source.

    Any object with a ``randint(a, b)`` method works as ``rng``; tests pass
    a scripted source to get deterministic faces.
    """

    def __init__(self, rng=None, sides: int = 6, dice_per_side: int = 2):
        if sides < 1:
            raise ValueError('sides must be at least 1')
        if dice_per_side < 1:
            raise ValueError('dice_per_side must be at least 1')
        self.rng = rng if rng is not None else random.SystemRandom()
        self.sides = sides
        self.dice_per_side = dice_per_side

    @classmethod
    def from_seed(cls, seed: Optional[int]) -> 'DiceRoller':
        if seed is None:
            return cls()
        return cls(rng=random.Random(seed))

    def roll_die(self) -> int:
        return self.rng.randint(1, self.sides)

    def roll_pair(self) -> List[int]:
        return [self.roll_die() for _ in range(self.dice_per_side)]
