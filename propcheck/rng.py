# rng.py - Deterministic random source
import time

import attr

__all__ = [
    'SimpleRNG',
    'nextInt',
]

MULTIPLIER = 0x5DEECE66D
INCREMENT = 0xB
MASK = (1 << 48) - 1

@attr.s(frozen=True)
class SimpleRNG:
    '''An immutable position in a linear-congruential random sequence

    Never mutated: advancing it with :func:`nextInt` returns a new SimpleRNG.
    '''
    seed = attr.ib(converter=int)

    @classmethod
    def fromTime(cls):
        return cls(time.time_ns())

    def next(self):
        return nextInt(self)

    def __str__(self):
        return 'SimpleRNG{{seed: {}}}'.format(self.seed)

def nextInt(rng):
    '''Advance `rng` one step

    Returns (n, SimpleRNG) where n is the top 32 bits of the 48-bit state,
    read as a signed integer.
    '''
    new_seed = (rng.seed * MULTIPLIER + INCREMENT) & MASK
    n = new_seed >> 16
    if n >= 1 << 31:
        n -= 1 << 32
    return n, SimpleRNG(new_seed)
