import types
import contextlib

def func_name(func, other):
    '''A readable name for `func`, or `other` for lambdas and unnamed callables
    '''
    if not isinstance(func, types.LambdaType) or func.__name__ != '<lambda>':
        with contextlib.suppress(AttributeError):
            return func.__qualname__

        with contextlib.suppress(AttributeError):
            return func.__name__

    return other
