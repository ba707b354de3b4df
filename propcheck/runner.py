import sys
import logging

import attr

from . import clauses
from . import pset
from .config import CONFIG
from .rng import SimpleRNG

log = logging.getLogger('propcheck.runner')

__all__ = [
    'Options',
    'check',
    'expectSuccess',
    'expectFailure',
    'render',
]

RED = '\u001b[31m'
RESET = '\u001b[0m'

@attr.s
class Options:
    trials = attr.ib(default=None)
    seed = attr.ib(default=None)
    output_file = attr.ib(default=attr.Factory(lambda: sys.stdout))

    def parameters(self):
        trials = self.trials if self.trials is not None else CONFIG.trials
        seed = self.seed if self.seed is not None else CONFIG.seed
        rng = SimpleRNG.fromTime() if seed is None else SimpleRNG(seed)
        return clauses.RunParameters(trials, rng)

def render(result):
    '''Multi-line description of a :class:`Falsified` result
    '''
    lines = [
        'In property `{}`'.format(result.name),
        'After {} successful trial(s)'.format(result.successes),
        '',
        ' counterexample:',
        '  {!r}'.format(result.failed_case),
    ]

    if result.successes:
        lines.append(' last success:')
        lines.append('  {!r}'.format(result.last_success_case))

    lines.append('')
    lines.append(' failure reason(s):')
    for m in result.messages:
        lines.append(' >  {}'.format(m))

    text = '\n'.join(lines)
    if CONFIG.colour:
        return RED + text + RESET
    return text

def _print_header(prop, params, outfile):
    outfile.write('Checking `{}` for {} trial(s) from seed {}\n'.format(prop.name, params.trials, params.rng.seed))

def _print_success(outfile):
    outfile.write('-' * 80 + '\n')
    outfile.write('Found no counterexample\n')
    outfile.write('\nOK\n')

def _print_failure(params, failure, outfile):
    outfile.write('=' * 80 + '\n')
    outfile.write('Failure\n')
    outfile.write(render(failure))
    outfile.write('\n\n')
    outfile.write('Rerun with seed={} to reproduce\n'.format(params.rng.seed))
    outfile.write('\nFAIL\n')

def _check_prop(prop, options):
    params = options.parameters()
    outfile = options.output_file

    _print_header(prop, params, outfile)
    log.debug('check: {} with {}'.format(prop.name, params))

    result = prop.run(params)
    result.match(
        passed=lambda: _print_success(outfile),
        falsified=lambda f: _print_failure(params, f, outfile))
    return result

def _renamed(prop, name):
    '''`prop` under a new name, carried through to the results it returns

    Results naming some inner property (of an & or |) keep that name.
    '''
    def run(params):
        result = prop.run(params)
        if result.is_falsified() and result.name == prop.name:
            return attr.evolve(result, name=name)
        return result

    return attr.evolve(prop, name=name, run=run)

def _check(prop_or_props, options):
    if isinstance(prop_or_props, clauses.Property):
        return _check_prop(prop_or_props, options)

    if isinstance(prop_or_props, type) and issubclass(prop_or_props, pset.PropertySet):
        prop_or_props = prop_or_props()

    if isinstance(prop_or_props, pset.PropertySet):
        props = [getattr(prop_or_props, name) for name in type(prop_or_props)]
    elif callable(prop_or_props):
        f = prop_or_props
        prop = f()
        if not isinstance(prop, clauses.Property):
            raise TypeError('{} did not return a Property'.format(f.__name__))
        return _check_prop(_renamed(prop, f.__name__), options)
    else:
        props = prop_or_props

    result = clauses.Passed()
    for p in props:
        result = _check(p, options)
        if result.is_falsified():
            return result

        options.output_file.write('~' * 80)
        options.output_file.write('\n')
    return result

def check(prop, trials=None, seed=None, outfile=None):
    '''Run a :class:`Property`, printing a report to `outfile` (default stdout)

    `prop` may also be a function returning a Property (its name is used),
    a :class:`PropertySet` or an iterable of either; checking stops at the
    first falsified property.

    Without `trials` or `seed` the defaults come from :data:`propcheck.config.CONFIG`;
    a seed of None means the wall clock.

    > check(forAll(chooseInt(0, 10), 'small', lambda x: x, lambda x: x < 10), trials=200)
    '''
    return _check(prop, Options(trials=trials, seed=seed, output_file=sys.stdout if outfile is None else outfile))

def _require_result(result):
    if not isinstance(result, clauses.Result):
        raise TypeError('Expected a Passed or Falsified result, got {!r}'.format(result))

def expectSuccess(result):
    '''Fail the surrounding test unless `result` is :class:`Passed`
    '''
    _require_result(result)
    result.match(
        passed=lambda: None,
        falsified=lambda f: _fail('Test Falsified with:\n' + render(f)))

def expectFailure(result):
    '''Fail the surrounding test unless `result` is :class:`Falsified`
    '''
    _require_result(result)
    result.match(
        passed=lambda: _fail('Expected test to be Falsified but it was: {}'.format(result)),
        falsified=lambda f: None)

def _fail(msg):
    raise AssertionError(msg)
