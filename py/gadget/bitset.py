# © 2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

# Set of small non-negative integers, stored as the bits of an int

import numbers

from .set import Set

__all__ = ('BitSet',)

def _check(x):
    if not isinstance(x, int):
        raise TypeError('BitSet members must be int, not %s'
                        % (type(x).__name__,))
    if x < 0:
        raise ValueError('BitSet members must be non-negative: %d' % (x,))

def _bit(x):
    '''The bit number of x, or None if x equals no non-negative int.
    Values of other types count when Python considers them equal to
    one, such as 3.0, Fraction(6, 2), Decimal(3) or 3+0j.'''
    if isinstance(x, numbers.Integral):
        i = int(x)
    else:
        if isinstance(x, numbers.Complex) and not isinstance(x, numbers.Real):
            if x.imag != 0:
                return None
            y = x.real
        else:
            y = x
        try:
            i = int(y)
        except (TypeError, ValueError, OverflowError):
            return None
        # int() also truncates 3.5 and parses '3'
        if x != i:
            return None
    return i if i >= 0 else None

class BitSet(Set):
    '''Set of non-negative integers. Bit i of the mask is set iff i is
    a member. Iteration yields members in ascending order, although
    callers must not rely on that through the Set interface.

    add() is the only operation that can fail: it raises TypeError or
    ValueError for values outside the domain, without changing the
    set. contains() and remove() treat such values as non-members,
    except numbers equal to a member, such as 3.0 for 3.'''
    __slots__ = ('_mask',)
    kind = 'BitSet'

    def __init__(self, *values):
        self._mask = 0
        self.add(*values)

    @classmethod
    def _from_mask(cls, mask):
        s = cls()
        s._mask = mask
        return s

    def _has(self, x):
        i = _bit(x)
        return i is not None and (self._mask >> i) & 1 == 1

    def add(self, *vals):
        for v in vals:
            _check(v)
        for v in vals:
            self._mask |= 1 << v

    def remove(self, *vals):
        for v in vals:
            i = _bit(v)
            if i is not None:
                self._mask &= ~(1 << i)

    def iterate(self):
        m = self._mask
        while m:
            lsb = m & -m
            yield lsb.bit_length() - 1
            m ^= lsb

    def __len__(self):
        return bin(self._mask).count('1')

    # Fast paths when every operand is a BitSet; anything else goes
    # through the generic algorithms in Set

    def union(self, *others):
        if all(isinstance(o, BitSet) for o in others):
            mask = self._mask
            for o in others:
                mask |= o._mask
            return self._from_mask(mask)
        return Set.union(self, *others)

    def intersection(self, *others):
        if all(isinstance(o, BitSet) for o in others):
            mask = self._mask
            for o in others:
                mask &= o._mask
            return self._from_mask(mask)
        return Set.intersection(self, *others)

    def difference(self, *others):
        if all(isinstance(o, BitSet) for o in others):
            mask = self._mask
            for o in others:
                mask &= ~o._mask
            return self._from_mask(mask)
        return Set.difference(self, *others)

    def subset(self, other):
        if isinstance(other, BitSet):
            return self._mask & ~other._mask == 0
        return Set.subset(self, other)

    def disjoint(self, other):
        if isinstance(other, BitSet):
            return self._mask & other._mask == 0
        return Set.disjoint(self, other)
