#!/usr/bin/env python3
from propcheck import check, forAll, chooseArray, chooseInt

def is_sorted(xs):
    return xs == list(sorted(xs))

def prop_all_lists_are_sorted():
    return forAll(
        chooseArray(0, 10, chooseInt(0, 100)),
        'all lists are sorted',
        lambda xs: xs,
        lambda xs: (is_sorted(xs), '{} is not sorted'.format(xs)))

if __name__ == '__main__':
    # obviously false, to show the failure report
    check(prop_all_lists_are_sorted, trials=100)
