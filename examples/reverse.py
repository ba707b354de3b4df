#!/usr/bin/env python3
from propcheck import *

def prop_reverse_involution():
    '''reversing a list twice gives the list back
    '''
    return forAll(
        chooseArray(0, 50, string(8)),
        'reverse . reverse == id',
        lambda xs: (xs, list(reversed(list(reversed(xs))))),
        lambda pair: (pair[0] == pair[1], '{} != {}'.format(*pair)))

def prop_reverse_keeps_length():
    return forAll(
        chooseArray(0, 50, integer()),
        'len(reverse(xs)) == len(xs)',
        lambda xs: len(xs) - len(list(reversed(xs))),
        assertEqual(0))

if __name__ == '__main__':
    enableLogging()
    check([prop_reverse_involution, prop_reverse_keeps_length], trials=500, seed=2024)
