# generators.py - Default generators built on the generator algebra
import bisect
import string as _string
import datetime
import itertools
import logging

import attr

from .gen import Gen, pure, mapG, flatMap, map2, sequence
from .rng import nextInt

log = logging.getLogger('propcheck.generators')

__all__ = [
    'ALPHABET',
    'REFERENCE_DATE',
    'WeightedGen',
    'integer',
    'nonNegativeInt',
    'chooseInt',
    'chooseBoolean',
    'chooseFloat',
    'chooseDate',
    'string',
    'emptyString',
    'arrayOf',
    'chooseArray',
    'chooseSet',
    'weighted',
]

ALPHABET = _string.digits + _string.ascii_lowercase + _string.ascii_uppercase
REFERENCE_DATE = datetime.date(1999, 12, 31)

@attr.s(frozen=True)
class WeightedGen:
    gen = attr.ib()
    weight = attr.ib(converter=int)

def integer() -> Gen:
    '''Any signed 32-bit integer
    '''
    return nextInt

def nonNegativeInt(rng):
    i, rng2 = nextInt(rng)
    if i < 0:
        return -(i + 1), rng2
    return i, rng2

def chooseInt(low, highExclusive) -> Gen:
    '''Integers in [low, highExclusive)

    An empty or inverted range always produces `low`.
    '''
    divisor = highExclusive - low
    if divisor <= 0:
        divisor = 1
    return mapG(nonNegativeInt, lambda n: low + n % divisor)

def chooseBoolean() -> Gen:
    return mapG(nonNegativeInt, lambda n: n % 2 == 0)

def _reciprocal(n):
    if n > 0:
        return 1.0 / n
    return 0.0

def chooseFloat() -> Gen:
    '''Floats in [0, 1], the reciprocal of a non-negative integer
    '''
    return mapG(nonNegativeInt, _reciprocal)

def chooseDate(start, stopExclusive) -> Gen:
    '''Dates between `start` and `stopExclusive` days either side of 1999-12-31
    '''
    def to_date(days, past):
        ordinal = REFERENCE_DATE.toordinal() + (-days if past else days)
        # offsets beyond year 1 or 9999 pin to the nearest representable date
        ordinal = min(max(ordinal, datetime.date.min.toordinal()), datetime.date.max.toordinal())
        return datetime.date.fromordinal(ordinal)

    return map2(chooseInt(start, stopExclusive), chooseBoolean(), to_date)

def string(maxCodepoints) -> Gen:
    '''Strings of up to `maxCodepoints` characters drawn from ALPHABET

    The length is uniform in [0, maxCodepoints], so with a large maximum
    the empty string becomes rare.
    '''
    maxCodepoints = max(maxCodepoints, 0)
    symbol = mapG(chooseInt(0, len(ALPHABET)), ALPHABET.__getitem__)

    return flatMap(
        chooseInt(0, maxCodepoints + 1),
        lambda n: mapG(arrayOf(symbol, n), ''.join))

def emptyString() -> Gen:
    return pure('')

def arrayOf(gen, length) -> Gen:
    '''Lists of exactly `length` independent values of `gen`
    '''
    return sequence(itertools.repeat(gen, max(length, 0)))

def chooseArray(minLen, maxLenInclusive, gen) -> Gen:
    '''Lists of `gen` values whose length is in [minLen, maxLenInclusive]
    '''
    minLen = max(minLen, 0)
    maxLenInclusive = max(maxLenInclusive, minLen)
    return flatMap(chooseInt(minLen, maxLenInclusive + 1), lambda n: arrayOf(gen, n))

def _dedup(xs, key):
    seen = set()
    out = []
    for x in xs:
        k = key(x)
        if k not in seen:
            seen.add(k)
            out.append(x)
    return out

def chooseSet(minLen, maxLenInclusive, gen, key=None) -> Gen:
    '''Lists of distinct `gen` values, first occurrence kept

    Duplicates are dropped after generation so the result may be shorter
    than `minLen` (there is no set of three booleans).
    '''
    key = key or (lambda x: x)
    return mapG(chooseArray(minLen, maxLenInclusive, gen), lambda xs: _dedup(xs, key))

def weighted(weightedGens) -> Gen:
    '''Pick one of several generators with probability proportional to its weight

    i.e.
        weighted([WeightedGen(chooseInt(1, 5), 3), WeightedGen(chooseInt(10, 20), 1)])
    produces a value in [1, 5) three times out of four.

    Generators with a non-positive weight are never picked. With no positive
    weight at all there is nothing to pick from and every draw is None.
    '''
    live = [wg for wg in weightedGens if wg.weight > 0]
    if not live:
        log.warning('weighted: no generator has a positive weight, producing None')
        return pure(None)

    # cumulative weights index the same space as repeating each generator `weight` times
    bounds = list(itertools.accumulate(wg.weight for wg in live))
    gens = [wg.gen for wg in live]
    log.debug('weighted: {} generator(s), total weight {}'.format(len(gens), bounds[-1]))

    return flatMap(
        chooseInt(0, bounds[-1]),
        lambda i: gens[bisect.bisect_right(bounds, i)])
