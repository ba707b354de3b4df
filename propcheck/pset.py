import io
import unittest

from . import runner
from . import clauses

__all__ = [
    'PropertySet',
    'unittest_wrapper',
]

def _extend_properties(props, bases):
    for b in bases:
        if getattr(b, '__properties__', False):
            props = props.union(b.__properties__)
            props = _extend_properties(props, b.__bases__)
    return props


class PSetMeta(type):
    '''Collects the `prop_*` methods of a class into `__properties__`
    '''
    def __new__(mcls, name, bases, namespace):
        cls = super().__new__(mcls, name, bases, namespace)
        props = {
            name
            for name in namespace.keys()
            if name.startswith('prop_') and callable(namespace[name])}
        props = _extend_properties(props, bases)
        cls.__properties__ = frozenset(props)
        return cls

    def __iter__(self):
        return iter(sorted(self.__properties__))

class PropertySet(metaclass=PSetMeta):
    '''A group of properties, one per `prop_*` method returning a :class:`Property`

    class IntProps(PropertySet):
        def prop_bounded(self):
            return forAll(chooseInt(0, 10), 'bounded', lambda x: x, assertInRange(0, 10))
    '''

def unittest_wrapper(trials, seed=None):
    '''Class decorator turning a :class:`PropertySet` into a `unittest.TestCase`

    Each `prop_x` becomes a `test_prop_x` that runs the property for `trials`
    trials and fails with the full report if it is falsified.
    '''
    def _wrapper(pset):
        class NewPSet(pset, unittest.TestCase):
            pass

        for p in NewPSet.__properties__:
            def _f(self, p=p):
                self.trials = trials
                buf = io.StringIO()
                out = runner.check(getattr(self, p), trials=trials, seed=seed, outfile=buf)
                if out.is_falsified():
                    self.fail(buf.getvalue())

                self.assertIsInstance(out, clauses.Passed)

            setattr(NewPSet, 'test_{}'.format(p), _f)

        NewPSet.__name__ = pset.__name__
        NewPSet.__qualname__ = pset.__qualname__
        NewPSet.__module__ = pset.__module__
        return NewPSet
    return _wrapper
