'''Ready-made assertion functions for :func:`propcheck.forAll`

Each builder returns a function of one value that gives back (True, None)
when the value passes, or (False, AssertionError(message)) when it does not.
'''
from . import misc

__all__ = [
    'assertThat',
    'assertTrue',
    'assertFalse',
    'assertEqual',
    'assertNotEqual',
    'assertIn',
    'assertIsInstance',
    'assertInRange',
    'assertLength',
]

def _assertion(p, fmt_fail, label, **fmt):
    def assertion(value):
        if p(value):
            return True, None
        return False, AssertionError(fmt_fail.format(value=value, **fmt))

    assertion.__name__ = assertion.__qualname__ = label
    return assertion

def assertThat(f, fmt_fail='{name}({value!r}) is false'):
    name = misc.func_name(f, 'predicate')
    return _assertion(f, fmt_fail, 'assertThat({})'.format(name), name=name)

def assertTrue(fmt_fail='{value!r} is not true'):
    return _assertion(bool, fmt_fail, 'assertTrue')

def assertFalse(fmt_fail='{value!r} is not false'):
    return _assertion(lambda v: not v, fmt_fail, 'assertFalse')

def assertEqual(expected, fmt_fail='{value!r} != {expected!r}'):
    return _assertion(lambda v: v == expected, fmt_fail, 'assertEqual', expected=expected)

def assertNotEqual(expected, fmt_fail='{value!r} == {expected!r}'):
    return _assertion(lambda v: v != expected, fmt_fail, 'assertNotEqual', expected=expected)

def assertIn(container, fmt_fail='{value!r} not in {container!r}'):
    return _assertion(lambda v: v in container, fmt_fail, 'assertIn', container=container)

def assertIsInstance(t, fmt_fail='not isinstance({value!r}, {t.__name__})'):
    return _assertion(lambda v: isinstance(v, t), fmt_fail, 'assertIsInstance', t=t)

def assertInRange(low, highExclusive, fmt_fail='{value!r} not in [{low}, {high})'):
    return _assertion(lambda v: low <= v < highExclusive, fmt_fail, 'assertInRange', low=low, high=highExclusive)

def assertLength(minLen, maxLenInclusive, fmt_fail='len({value!r}) not in [{low}, {high}]'):
    return _assertion(lambda v: minLen <= len(v) <= maxLenInclusive, fmt_fail, 'assertLength', low=minLen, high=maxLenInclusive)
