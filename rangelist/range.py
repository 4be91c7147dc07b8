import numbers
import collections
import collections.abc
import numpy as np


class Range(collections.namedtuple('Range', ['start', 'end'])):
    '''
    Half-open integer interval [start, end).  Compares equal to a plain (start, end) tuple.
    '''

    __slots__ = ()

    def __str__(self):
        return f'[{self.start}, {self.end})'


def _bounds(rng):
    '''
    Unpacks a range-like value into its two bounds, or returns None if it doesn't look like a pair
    '''

    if isinstance(rng, (str, bytes)):
        return None
    if isinstance(rng, np.ndarray):
        if rng.ndim != 1:
            return None
    elif not isinstance(rng, collections.abc.Sequence):
        return None
    if len(rng) != 2:
        return None
    return rng[0], rng[1]


def is_integer(value):
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


def validate(rng):
    '''
    Check if a range input is valid: exactly two integers with end > start.

    Parameters
    ----------
    rng : sequence of two ints, or a builtin range with step 1
      Value to check.  Strings, floats and bools are never valid bounds.

    Returns
    -------
    valid : bool
    '''

    bounds = _bounds(rng)
    if bounds is None:
        return False
    start, end = bounds
    return is_integer(start) and is_integer(end) and end > start


def as_range(rng):
    '''
    Converts a range-like value to a Range, raising ValueError if it isn't valid
    '''

    if not validate(rng):
        raise ValueError(f'Invalid range: {rng!r}')
    start, end = _bounds(rng)
    return Range(int(start), int(end))


def intersects(a, b):
    '''
    Returns True if the two ranges share a point or touch at a boundary.
    Bounds are compared as closed intervals so that adjacent ranges, e.g. [1, 5) and [5, 10),
    are considered intersecting and get merged into one.
    '''

    return ((a[0] >= b[0] and a[0] <= b[1]) or
            (a[1] >= b[0] and a[1] <= b[1]) or
            (a[0] < b[0] and a[1] > b[1]))


def overlaps(a, b):
    '''
    Returns True if the two half-open ranges have at least one point in common.
    Unlike intersects(), ranges that only touch do not overlap.
    '''

    return a[0] < b[1] and b[0] < a[1]


def merge(a, b):
    '''
    Merge two ranges into the smallest range covering both.

    Returns
    -------
    merged : Range or None
      None if the ranges don't intersect, in which case no single range covers exactly both.
    '''

    if not intersects(a, b):
        return None
    return Range(min(a[0], b[0]), max(a[1], b[1]))


def subtract(remove, target):
    '''
    Removes the range "remove" from the range "target"

    Parameters
    ----------
    remove : Range
      Range whose points are taken out
    target : Range
      Range being operated on

    Returns
    -------
    remaining : list of Range
      Zero, one or two ranges left over from target, in ascending order.
    '''

    if not overlaps(remove, target):
        return [Range(target[0], target[1])]

    # target is split into two pieces
    if target[0] < remove[0] and target[1] > remove[1]:
        return [Range(target[0], remove[0]), Range(remove[1], target[1])]

    # target is removed entirely
    if remove[0] <= target[0] and remove[1] >= target[1]:
        return []

    # left side of target is cut off
    if remove[0] <= target[0] < remove[1]:
        return [Range(remove[1], target[1])]

    return [Range(target[0], remove[0])]
