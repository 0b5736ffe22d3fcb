import sys, bisect

class RangeMap(object):
    '''A map from every key of an ordered domain to a value.  Uses a sparse
    representation that stores only the keys at which the value changes:
    space costs are linear in the number of such boundaries, lookup time
    is logarithmic and assignment of a range is logarithmic plus linear
    in the number of boundaries it covers.

    Keys must be totally ordered by <; values must support ==.
    '''
    # _keys is sorted and strictly increasing; _values[i] is in force on
    # [_keys[i], _keys[i + 1]).  Below _keys[0] the default applies.
    # No entry carries the same value as the one before it (or the default,
    # for the first entry).
    def __init__(self, default):
        self.default = default
        self._keys = []
        self._values = []

    @classmethod
    def from_ranges(cls, default, ranges):
        '''Build a map by assigning each (lower, upper, value) triple in order.
        Upper bounds are exclusive; empty triples are skipped.'''
        rmap = cls(default)
        for lower, upper, value in ranges:
            rmap.assign(lower, upper, value)
        return rmap

    def _value_before(self, i):
        if i == 0:
            return self.default
        return self._values[i - 1]

    def lookup(self, key):
        return self._value_before(bisect.bisect_right(self._keys, key))

    def assign(self, begin, end, value):
        '''Map every key in [begin, end) to value.  Does nothing if the
        range is empty or inverted.'''
        if not (begin < end):
            return
        value_after_end = self.lookup(end)
        lo = bisect.bisect_left(self._keys, begin)
        hi = bisect.bisect_right(self._keys, end)

        new_keys = []
        new_values = []
        if not (self._value_before(lo) == value):
            new_keys.append(begin)
            new_values.append(value)
        if not (value_after_end == value):
            new_keys.append(end)
            new_values.append(value_after_end)

        self._keys[lo:hi] = new_keys
        self._values[lo:hi] = new_values

    def __getitem__(self, key):
        return self.lookup(key)

    def get(self, key, default=None):
        '''Same as lookup.  The default argument is only there so that get
        has the dict signature; lookup never misses, so it is never used.'''
        return self.lookup(key)

    def iterate(self):
        return iter(self)

    def items(self):
        return iter(self)

    def __iter__(self):
        return zip(list(self._keys), list(self._values))

    def ranges(self):
        '''Yield (lower, upper, value) for each stretch between boundaries.
        The last stretch is unbounded and has None as its upper bound.'''
        keys, values = list(self._keys), list(self._values)
        n = len(keys)
        for i in range(n):
            upper = keys[i + 1] if i + 1 < n else None
            yield keys[i], upper, values[i]

    def __len__(self):
        return len(self._keys)

    def __eq__(self, other):
        if not isinstance(other, RangeMap):
            return NotImplemented
        return (self.default == other.default and
                self._keys == other._keys and
                self._values == other._values)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def print(self, out=None):
        if out is None:
            out = sys.stdout
        for key, value in self:
            out.write('{0} : {1}\n'.format(key, value))

    def __repr__(self):
        return '%s(%r, %r)' % (type(self).__name__, self.default, list(self))
