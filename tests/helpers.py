import time

from propcheck import SimpleRNG, arrayOf

SEEDS = [0, 1, 42, 0xDEADBEEF, 2**47 + 5, time.time_ns()]

def rngs():
    return [SimpleRNG(s) for s in SEEDS]

def identity(x):
    return x

def draw(gen, n, seed=42):
    '''n values from `gen`, threading the state from `seed`
    '''
    values, _ = arrayOf(gen, n)(SimpleRNG(seed))
    return values
