# gen.py - The generator algebra
#
# A generator is any callable taking a SimpleRNG and returning a
# (value, SimpleRNG) pair. Everything here composes generators without
# ever reading or mutating shared state.
import typing
import operator

from .rng import SimpleRNG

__all__ = [
    'Gen',
    'pure',
    'Id',
    'mapG',
    'flatMap',
    'map2',
    'product',
    'mapN',
    'map3',
    'map4',
    'map8',
    'map16',
    'map32',
    'sequence',
]

A = typing.TypeVar('A')
B = typing.TypeVar('B')
C = typing.TypeVar('C')

Gen = typing.Callable[[SimpleRNG], typing.Tuple[A, SimpleRNG]]

def pure(a: A) -> Gen:
    '''The generator that always produces `a`, leaving the state untouched
    '''
    def gen(rng):
        return a, rng
    return gen

Id = pure

def mapG(gen: Gen, f: typing.Callable[[A], B]) -> Gen:
    '''Functor map: apply `f` to every value `gen` produces

    i.e.
        mapG(pure(2), lambda x: x * 3) ~= pure(6)
    '''
    def mapped(rng):
        a, rng2 = gen(rng)
        return f(a), rng2
    return mapped

def flatMap(gen: Gen, f: typing.Callable[[A], Gen]) -> Gen:
    '''Monadic bind: run `gen`, then run the generator `f` picks for its value

    Use this when the distribution of one value depends on another.
    '''
    def bound(rng):
        a, rng1 = gen(rng)
        return f(a)(rng1)
    return bound

def map2(ga: Gen, gb: Gen, f: typing.Callable[[A, B], C]) -> Gen:
    '''Applicative combination of two independent generators

    `ga` always runs before `gb`, `f` can only combine their outputs.
    '''
    def combined(rng):
        a, rng1 = ga(rng)
        b, rng2 = gb(rng1)
        return f(a, b), rng2
    return combined

def product(ga: Gen, gb: Gen) -> Gen:
    return map2(ga, gb, lambda a, b: (a, b))

def _tupled(gens):
    # pair off halves with map2, each leaf wrapped in a 1-tuple
    # so concatenation re-flattens without touching tuple-valued outputs
    if len(gens) == 1:
        return mapG(gens[0], lambda a: (a,))

    mid = len(gens) // 2
    return map2(_tupled(gens[:mid]), _tupled(gens[mid:]), operator.add)

def mapN(f, *gens):
    '''Applicative combination of any number of generators

    Runs `gens` left to right and calls `f` with one positional argument per generator.
    '''
    if not gens:
        raise TypeError('mapN requires at least one generator')

    return mapG(_tupled(gens), lambda values: f(*values))

def _fixed_arity(n):
    def mapK(*args):
        if len(args) != n + 1:
            raise TypeError('map{} takes {} generators and a function ({} arguments given)'.format(n, n, len(args)))

        *gens, f = args
        return mapN(f, *gens)

    mapK.__name__ = 'map{}'.format(n)
    mapK.__qualname__ = mapK.__name__
    mapK.__doc__ = 'map{0}(g1, ..., g{0}, f) combines {0} generators, see :func:`mapN`'.format(n)
    return mapK

map3 = _fixed_arity(3)
map4 = _fixed_arity(4)
map8 = _fixed_arity(8)
map16 = _fixed_arity(16)
map32 = _fixed_arity(32)

def sequence(gens):
    '''Fold a list of generators into one generator of the list of their outputs

    Equivalent to folding `map2` over `gens` from `pure([])` with list append,
    but threads the state in a loop so arbitrarily long lists do not recurse.
    '''
    gens = tuple(gens)

    def sequenced(rng):
        values = []
        for g in gens:
            v, rng = g(rng)
            values.append(v)
        return values, rng
    return sequenced
