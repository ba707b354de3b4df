'''Exceptions raised by propcheck and utilities over them
'''

class PropcheckError(Exception):
    pass

class InvalidRunParameters(PropcheckError, ValueError):
    pass

class AssertionErrors(AssertionError):
    '''Several assertion errors raised against the same value, kept in the order they were raised
    '''
    def __init__(self, errors):
        self.errors = tuple(errors)
        super().__init__('; '.join(map(str, self.errors)))

    def __iter__(self):
        return iter(self.errors)

    def __len__(self):
        return len(self.errors)

def _flatten(error):
    if error is None:
        return

    if isinstance(error, AssertionErrors):
        yield from error.errors
    elif isinstance(error, BaseException):
        yield error
    elif isinstance(error, str):
        yield AssertionError(error)
    else:
        for e in error:
            yield from _flatten(e)

def merge_errors(*errors):
    '''Merge errors (exceptions, strings, bundles or None) into one :class:`AssertionErrors`

    Returns None if there was nothing to merge
    '''
    flat = [e for error in errors for e in _flatten(error)]
    if not flat:
        return None

    return AssertionErrors(flat)
