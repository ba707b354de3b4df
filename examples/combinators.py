#!/usr/bin/env python3
from propcheck import *

MIN, MAX = 2, 10

lists = chooseArray(MIN, MAX, chooseInt(0, 1000))

long_enough = assertThat(lambda xs: len(xs) >= MIN, fmt_fail='{value} is shorter than 2')
short_enough = assertThat(lambda xs: len(xs) <= MAX, fmt_fail='{value} is longer than 10')
has_small = assertThat(lambda xs: any(x < 10 for x in xs), fmt_fail='{value} has no element under 10')

# assertionAnd only runs short_enough once long_enough has held
bounded = forAll(lists, 'bounded length', lambda xs: xs, assertionAnd(long_enough, short_enough))

# has_small fails on most lists; | falls back to the length check
either = forAll(lists, 'small element', lambda xs: xs, has_small) | bounded

# dates and weighted choice
dates = forAll(
    chooseDate(0, 365),
    'within a year of 1999-12-31',
    lambda d: abs((d - REFERENCE_DATE).days),
    assertInRange(0, 365))

mostly_small = weighted([WeightedGen(chooseInt(0, 10), 9), WeightedGen(chooseInt(1000, 2000), 1)])
in_either_range = forAll(
    mostly_small,
    'weighted ranges',
    lambda x: x,
    assertionOr(assertInRange(0, 10), assertInRange(1000, 2000)))

if __name__ == '__main__':
    check([bounded & dates, either, in_either_range], trials=200)
