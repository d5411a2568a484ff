# © 2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

import abc

__all__ = (
    'Set',
    'MapSet',
)

class Set(metaclass=abc.ABCMeta):
    '''Abstract mutable set of hashable values.

    A subclass supplies membership, mutation, iteration and length;
    the algebra and the relational predicates are expressed in terms
    of those, so any backing structure gets them for free. Algebra
    results are new sets of the receiver's class and never share
    storage with the operands.

    Iteration order is unspecified.
    '''
    __slots__ = ()

    @abc.abstractmethod
    def _has(self, x):
        '''True if the single value x is a member'''

    @abc.abstractmethod
    def add(self, *vals): pass

    @abc.abstractmethod
    def remove(self, *vals):
        '''Remove vals from the set; values that are not members are
        silently ignored'''

    @abc.abstractmethod
    def iterate(self):
        '''Return a fresh iterator over the members'''

    @abc.abstractmethod
    def __len__(self): pass

    # Short name used in str() and repr()
    kind = 'Set'

    def _new(self, els=()):
        return type(self)(*els)

    def contains(self, *vals):
        return all(self._has(v) for v in vals)

    def __contains__(self, x):
        return self._has(x)

    def __iter__(self):
        return self.iterate()

    def items(self):
        return list(self.iterate())

    def union(self, *others):
        result = self._new(self.iterate())
        for o in others:
            result.add(*o.iterate())
        return result

    def subset(self, other):
        return all(other._has(x) for x in self.iterate())

    def superset(self, other):
        return other.subset(self)

    def disjoint(self, other):
        return not any(other._has(x) for x in self.iterate())

    def intersection(self, *others):
        return self._new(x for x in self.iterate()
                         if all(o._has(x) for o in others))

    def difference(self, *others):
        return self._new(x for x in self.iterate()
                         if not any(o._has(x) for o in others))

    def _render(self, x):
        return repr(x)

    def __repr__(self):
        return '%s{%s}' % (self.kind,
                           ' '.join(map(self._render, self.iterate())))

    def __str__(self):
        return self.__repr__()

    def __eq__(self, other):
        if isinstance(other, Set):
            return (len(self) == len(other) and self.subset(other)
                    and other.subset(self))
        if isinstance(other, (set, frozenset)):
            return len(self) == len(other) and all(
                x in other for x in self.iterate())
        return NotImplemented

    __hash__ = None

class MapSet(Set):
    '''Set backed by a dict that maps each member to a presence
    marker. Members can be any hashable objects, of mixed types.
    Unhashable values cannot be added, but contains() and remove()
    accept them as non-members.

    >>> s = MapSet(1, 2, 3)
    >>> s.add(2)
    >>> len(s)
    3
    '''
    __slots__ = ('_d',)
    kind = 'MapSet'

    def __init__(self, *values):
        self._d = dict.fromkeys(values, True)

    def _has(self, x):
        try:
            return x in self._d
        except TypeError:
            # unhashable, so never a member
            return False

    def add(self, *vals):
        self._d.update(dict.fromkeys(vals, True))

    def remove(self, *vals):
        for v in vals:
            if self._has(v):
                del self._d[v]

    def iterate(self):
        return iter(self._d)

    def __len__(self):
        return len(self._d)

    def union(self, *others):
        d = dict(self._d)
        for o in others:
            d.update(dict.fromkeys(o.iterate(), True))
        result = self._new()
        result._d = d
        return result
