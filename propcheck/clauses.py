import abc
import logging

import attr

from . import misc
from .rng import SimpleRNG, nextInt
from .error_types import InvalidRunParameters, AssertionErrors, merge_errors

log = logging.getLogger('propcheck.clauses')

__all__ = [
    'RunParameters',
    'Result',
    'Passed',
    'Falsified',
    'Property',
    'forAll',
    'propAnd',
    'propOr',
    'assertionAnd',
    'assertionOr',
]

def _to_rng(rng):
    if isinstance(rng, SimpleRNG):
        return rng

    if isinstance(rng, int) and not isinstance(rng, bool):
        return SimpleRNG(rng)

    raise InvalidRunParameters('rng must be a SimpleRNG or an integer seed, not {!r}'.format(rng))

def _positive(instance, attribute, value):
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidRunParameters('{} must be a positive integer, not {!r}'.format(attribute.name, value))

@attr.s(frozen=True)
class RunParameters:
    trials = attr.ib(validator=_positive)
    rng = attr.ib(converter=_to_rng)

class Result(abc.ABC):
    '''Outcome of running a :class:`Property`, either :class:`Passed` or :class:`Falsified`
    '''
    @abc.abstractmethod
    def is_falsified(self):
        pass

    def match(self, passed, falsified):
        '''Dispatch on the variant: passed() or falsified(self)
        '''
        if isinstance(self, Passed):
            return passed()
        if isinstance(self, Falsified):
            return falsified(self)
        raise TypeError('{!r} is neither Passed nor Falsified'.format(self))

@attr.s(frozen=True)
class Passed(Result):
    def is_falsified(self):
        return False

    def __str__(self):
        return 'Passed{}'

@attr.s(frozen=True)
class Falsified(Result):
    '''A property found a value its assertions reject

    `failed_case` and `last_success_case` are raw generator outputs,
    `errors` every assertion error raised against `failed_case`, in order.
    '''
    name = attr.ib()
    failed_case = attr.ib()
    successes = attr.ib()
    last_success_case = attr.ib(default=None)
    errors = attr.ib(default=(), converter=tuple)

    def is_falsified(self):
        return True

    @property
    def messages(self):
        return tuple(map(str, self.errors))

    @property
    def error(self):
        return AssertionErrors(self.errors)

    def __str__(self):
        return 'Falsified{{name: {}, failed case: {!r}, successes: {}, last success case: {!r}, errors: {}}}'.format(
            self.name, self.failed_case, self.successes, self.last_success_case, '; '.join(self.messages))

@attr.s(frozen=True)
class Property:
    '''A Property is a named, repeatable check

    `run` takes :class:`RunParameters` and returns a :class:`Result`,
    a fresh one each time it is called.
    '''
    name = attr.ib()
    run = attr.ib(repr=False)

    def __and__(self, other):
        if not isinstance(other, Property):
            raise TypeError('Can only & together Property instances')

        return propAnd(self, other)

    def __or__(self, other):
        if not isinstance(other, Property):
            raise TypeError('Can only | together Property instances')

        return propOr(self, other)

    def __str__(self):
        return self.name

def _apply_assertion(assertion, value):
    '''Run one assertion function, normalising what it gives back to (ok, error)

    Accepts (bool, error) pairs, a bare bool, None for success,
    or a raised AssertionError.
    '''
    try:
        out = assertion(value)
    except AssertionError as e:
        return False, e

    if out is None:
        return True, None
    if isinstance(out, tuple):
        if len(out) != 2:
            raise TypeError('{} returned {!r}, expected an (ok, error) pair, a bool or None'.format(
                misc.func_name(assertion, 'assertion'), out))
        ok, error = out
        return bool(ok), error
    return bool(out), None

def _check_all(assertions, value):
    '''Run `assertions` against `value` in order, stopping at the first failure

    Returns the failing assertion's errors as an AssertionErrors bundle,
    or None if every assertion held
    '''
    for assertion in assertions:
        ok, error = _apply_assertion(assertion, value)
        if not ok:
            if error is None or (isinstance(error, AssertionErrors) and not error.errors):
                error = '{} returned False for {!r}'.format(misc.func_name(assertion, 'assertion'), value)
            return merge_errors(error)

    return None

def forAll(gen, name, transform, *assertions):
    '''Universal quantification over the values of a generator

    Takes a generator `gen`, a `transform` applied to each generated value
    and a list of `assertions` each run against the transformed value,
    returning a Property that checks them for a fixed number of trials.

    >> prop = forAll(chooseInt(1, 501), 'bounded', lambda x: x, lambda x: x <= 500)
    >> prop.run(RunParameters(200, SimpleRNG.fromTime()))
    Passed()
    '''
    def run(params):
        rng = params.rng
        last_success = None

        for trial in range(params.trials):
            value, rng = gen(rng)
            errors = _check_all(assertions, transform(value))

            if errors is not None:
                log.info('{}: falsified after {} success(es) by {!r}'.format(name, trial, value))
                return Falsified(
                    name=name,
                    failed_case=value,
                    successes=trial,
                    last_success_case=last_success,
                    errors=errors.errors)

            log.debug('{}: trial {} passed with {!r}'.format(name, trial, value))
            last_success = value
            _, rng = nextInt(rng)

        return Passed()

    return Property(name=name, run=run)

def propAnd(p1, p2):
    '''p1 & p2, lazily: p2 only runs if p1 passes
    '''
    def run(params):
        result = p1.run(params)
        if result.is_falsified():
            return result
        return p2.run(params)

    return Property(name='({} and {})'.format(p1.name, p2.name), run=run)

def propOr(p1, p2):
    '''p1 | p2, lazily: p2 only runs if p1 is falsified
    '''
    def run(params):
        result = p1.run(params)
        if not result.is_falsified():
            return result
        return p2.run(params)

    return Property(name='({} or {})'.format(p1.name, p2.name), run=run)

def assertionAnd(*assertions):
    '''Logical AND of assertion functions, stopping at the first that fails
    '''
    def conjunction(value):
        errors = _check_all(assertions, value)
        return errors is None, errors
    return conjunction

def assertionOr(*assertions):
    '''Logical OR of assertion functions, stopping at the first that holds

    If none hold, every branch's error is returned.
    '''
    def disjunction(value):
        errors = None
        for assertion in assertions:
            ok, error = _apply_assertion(assertion, value)
            if ok:
                return True, None
            errors = merge_errors(errors, error)
        return False, errors
    return disjunction
