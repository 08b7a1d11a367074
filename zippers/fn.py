# Helpers for stringing zipper operations together.
# Like the rest of the package these are plain functions over values; the
# zipper methods they call never mutate anything.

import operator
from functools import reduce

from .errors import NotFound


def _apply(value, f):
    return f(value)


def pipe(value, *fns):
    """
    Feeds ``value`` through ``fns`` left to right.

    A ``NotFound`` raised by any step stops the chain and propagates.
    """
    return reduce(_apply, fns, value)


def compose(*fns):
    """
    Builds the right-to-left composition of ``fns``, so that
    ``compose(f, g)(v) == f(g(v))``.

    >>> compose(str, len)([1, 2, 3])
    '3'
    """
    ordered = fns[::-1]

    def compose_(value):
        return pipe(value, *ordered)
    return compose_


def step(name, *args):
    """
    Returns a function calling the zipper method ``name`` with ``args``.

    >>> from zippers import sequence
    >>> z = pipe(sequence.from_list([1, 2]), step('go_right'), step('set', 5))
    >>> z.to_list()
    [1, 5]
    """
    return operator.methodcaller(name, *args)


def maybe(f):
    """
    Wraps ``f`` so that a ``NotFound`` becomes a ``None`` result.

    >>> from zippers import sequence
    >>> maybe(step('go_left'))(sequence.from_list([1])) is None
    True
    """
    def maybe_(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except NotFound:
            return None

    maybe_.__name__ = 'maybe_{0}'.format(getattr(f, '__name__', 'fn'))
    return maybe_


def iterate(f, z):
    """
    Yields ``z`` and each result of repeatedly applying ``f``, stopping at
    the first ``NotFound``.

    >>> from zippers import sequence
    >>> [loc.get() for loc in iterate(step('go_right'), sequence.from_list('abc'))]
    ['a', 'b', 'c']
    """
    loc = z
    while True:
        yield loc
        try:
            loc = f(loc)
        except NotFound:
            return
