import logging
import numpy as np
from rangelist.range import Range, validate, as_range, is_integer, merge, subtract


logger = logging.getLogger(__name__)


class RangeList:
    '''
    Sorted list of disjoint half-open integer ranges.
    Adding a range merges it with every stored range it overlaps or touches, and removing
    a range splits or trims whatever it covers, so the list is always the minimal set of
    ranges describing its coverage.
    '''

    def __init__(self, ranges=()):
        '''
        Parameters
        ----------
        ranges : iterable of (int, int) (optional)
          Initial ranges, added one at a time.  Invalid entries are ignored like in add().
        '''

        self._ranges = []
        for rng in ranges:
            self.add(rng)

    @classmethod
    def from_mask(cls, mask):
        '''
        Build a range list from a boolean mask, with one range per run of True values.

        Parameters
        ----------
        mask : array_like of bool, 1-D
          Index i is covered if mask[i] is True

        Returns
        -------
        range_list : RangeList
        '''

        mask = np.asarray(mask, dtype=bool)
        if mask.ndim != 1:
            raise ValueError(f'Expected a 1-D mask, got {mask.ndim} dimensions')

        # Rising edges mark starts and falling edges mark ends
        padded = np.concatenate(([0], mask.astype(np.int8), [0]))
        edges = np.flatnonzero(np.diff(padded))

        range_list = cls()
        range_list._ranges = [Range(int(start), int(end)) for start, end in zip(edges[0::2], edges[1::2])]
        return range_list

    def _bisect_left(self, x, key):
        '''
        Index of the first stored range with key(range) >= x.  Binary search, taken from bisect library
        '''
        low = 0
        high = len(self._ranges)
        while low < high:
            mid = (low + high)//2
            if key(self._ranges[mid]) < x:
                low = mid+1
            else:
                high = mid
        return low

    def _bisect_right(self, x, key):
        '''
        Index of the first stored range with key(range) > x
        '''
        low = 0
        high = len(self._ranges)
        while low < high:
            mid = (low + high)//2
            if x < key(self._ranges[mid]):
                high = mid
            else:
                low = mid+1
        return low

    def add(self, rng):
        '''
        Adds a range to the list, merging it with any stored ranges it overlaps or touches.

        Parameters
        ----------
        rng : (int, int)
          Start and end of the half-open range.  Invalid ranges are ignored.
        '''

        if not validate(rng):
            logger.debug('Ignoring invalid range %r in add()', rng)
            return
        new_range = as_range(rng)

        # Stored ranges are sorted by both start and end, so the ones touching the new range
        # form a contiguous run [first, last).  An empty run is a plain insertion.
        first = self._bisect_left(new_range.start, key=lambda r: r.end)
        last = self._bisect_right(new_range.end, key=lambda r: r.start)

        merged = new_range
        for existing in self._ranges[first:last]:
            merged = merge(merged, existing)
        self._ranges[first:last] = [merged]

    def remove(self, rng):
        '''
        Removes a range from the list, trimming or splitting any stored ranges it covers.

        Parameters
        ----------
        rng : (int, int)
          Start and end of the half-open range.  Invalid ranges are ignored.
        '''

        if not validate(rng):
            logger.debug('Ignoring invalid range %r in remove()', rng)
            return
        to_remove = as_range(rng)

        # Only ranges sharing a point with to_remove are affected, touching ones are left alone
        first = self._bisect_right(to_remove.start, key=lambda r: r.end)
        last = self._bisect_left(to_remove.end, key=lambda r: r.start)

        remaining = []
        for existing in self._ranges[first:last]:
            remaining.extend(subtract(to_remove, existing))
        self._ranges[first:last] = remaining

    def to_string(self):
        '''
        Returns the ranges as space separated "[start, end)" tokens, or an empty string if there are none
        '''
        return ' '.join(str(rng) for rng in self._ranges)

    toString = to_string

    @property
    def ranges(self):
        return list(self._ranges)

    def copy(self):
        range_list = type(self)()
        range_list._ranges = list(self._ranges)
        return range_list

    def clear(self):
        self._ranges = []

    def low(self):
        if not self._ranges:
            raise ValueError('Empty range list has no lower bound')
        return self._ranges[0].start

    def high(self):
        if not self._ranges:
            raise ValueError('Empty range list has no upper bound')
        return self._ranges[-1].end

    def total(self):
        '''
        Number of integers covered by the list
        '''
        return sum(rng.end - rng.start for rng in self._ranges)

    def slices(self):
        '''
        Returns a slice object for each range, for indexing arrays by the covered regions
        '''
        return [slice(rng.start, rng.end) for rng in self._ranges]

    def to_mask(self, size=None):
        '''
        Convert to a boolean coverage mask.

        Parameters
        ----------
        size : int (optional)
          Length of the mask.  Defaults to the upper bound of the list, or 0 if it is empty.
          Coverage outside of [0, size) is clipped.

        Returns
        -------
        mask : np.ndarray
          Boolean array, True where an index is covered
        '''

        if size is None:
            size = max(self.high(), 0) if self._ranges else 0
        if not is_integer(size):
            raise ValueError(f'Mask size must be an integer, got {size!r}')
        if size < 0:
            raise ValueError(f'Mask size must be non-negative, got {size}')

        mask = np.zeros(size, dtype=bool)
        for rng in self._ranges:
            low = min(max(rng.start, 0), size)
            high = min(max(rng.end, 0), size)
            mask[low:high] = True
        return mask

    def __contains__(self, value):
        '''
        Integers are checked for membership, ranges are checked for being entirely covered
        '''

        if is_integer(value):
            start, end = value, value + 1
        elif validate(value):
            start, end = as_range(value)
        else:
            return False

        idx = self._bisect_right(start, key=lambda r: r.start) - 1
        return idx >= 0 and self._ranges[idx].end >= end

    def __iter__(self):
        return iter(self._ranges)

    def __len__(self):
        return len(self._ranges)

    def __eq__(self, other):
        if not isinstance(other, RangeList):
            return NotImplemented
        return self._ranges == other._ranges

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f'<RangeList {self._ranges}>'
