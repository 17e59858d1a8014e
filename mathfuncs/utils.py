r"""@package mathfuncs.utils

General utilities for simplifying certain tasks in Python.
"""


__all__ = [
    "lmap",
    "isiterable",
    "unpack_args",
    "get_chunks",
]


def lmap(func, *iterables):
    r"""Implementation of `map` that returns a list instead of a generator."""
    return list(map(func, *iterables))


def isiterable(obj):
    """Check whether an object is iterable.

    Strings count as iterable here, too.
    """
    try:
        iter(obj)
    except TypeError:
        return False
    return True


def unpack_args(args, scalar_types=()):
    r"""Allow both `f(a, b, c)` and `f([a, b, c])` call styles.

    If `args` consists of exactly one iterable which is not an instance of
    any of the `scalar_types`, its elements are returned as a tuple.
    Otherwise, `args` is returned unchanged.
    """
    if len(args) == 1 and not isinstance(args[0], (str,) + tuple(scalar_types)) \
            and isiterable(args[0]):
        return tuple(args[0])
    return args


def get_chunks(items, chunksize):
    r"""Generator for partitioning items into chunks.

    The last chunk is shorter if `len(items)` is not a multiple of
    `chunksize`.
    """
    if not isinstance(items, (list, tuple)):
        items = list(items)
    for i in range(0, len(items), chunksize):
        yield items[i:i+chunksize]
