import unittest

from propcheck import *

def identity(x):
    return x

@unittest_wrapper(trials=200)
class GeneratorProperties(PropertySet):
    def prop_bounded(self):
        return forAll(chooseInt(1, 501), 'bounded', identity, assertInRange(1, 501))

    def prop_zero_length_arrays(self):
        return forAll(chooseArray(0, 0, integer()), 'empty', identity, assertEqual([]))

    def prop_weighted_in_either_range(self):
        g = weighted([WeightedGen(chooseInt(1000, 5000), 300), WeightedGen(chooseInt(100000, 200000), 10)])
        return forAll(
            g, 'weighted', identity,
            assertionOr(assertInRange(1000, 5000), assertInRange(100000, 200000)))

    def prop_uses_trials(self):
        return forAll(pure(self.trials), 'trials', identity, assertEqual(200))

class Base(PropertySet):
    def prop_a(self):
        return forAll(pure(1), 'a', identity, assertEqual(1))

class Derived(Base):
    def prop_b(self):
        return forAll(pure(2), 'b', identity, assertEqual(2))

    def helper(self):
        pass

def test_properties_collected():
    assert Base.__properties__ == frozenset({'prop_a'})
    assert Derived.__properties__ == frozenset({'prop_a', 'prop_b'})
    assert list(Derived) == ['prop_a', 'prop_b']
    assert len(Derived.__properties__) == 2

def test_wrapper_generates_tests():
    for p in GeneratorProperties.__properties__:
        assert hasattr(GeneratorProperties, 'test_{}'.format(p))
    assert issubclass(GeneratorProperties, unittest.TestCase)
    assert GeneratorProperties.__name__ == 'GeneratorProperties'

def test_wrapper_fails_on_falsified_property():
    @unittest_wrapper(trials=10, seed=3)
    class Failing(PropertySet):
        def prop_fails(self):
            return forAll(integer(), 'fails', identity, lambda x: (False, 'forced failure'))

    result = unittest.TestResult()
    unittest.defaultTestLoader.loadTestsFromTestCase(Failing).run(result)
    assert result.testsRun == 1
    assert len(result.failures) == 1
    assert 'forced failure' in result.failures[0][1]

def test_check_property_set():
    result = check(Derived, trials=5, seed=1, outfile=_Sink())
    assert result == Passed()

class _Sink:
    def write(self, s):
        pass
