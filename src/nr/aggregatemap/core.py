# -*- coding: utf8 -*-
# The MIT License (MIT)
#
# Copyright (c) 2020 Niklas Rosenstein
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to
# deal in the Software without restriction, including without limitation the
# rights to use, copy, modify, merge, publish, distribute, sublicense, and/or
# sell copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING
# FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS
# IN THE SOFTWARE.

""" Provides the #AggregateMap wrapper. """

import collections.abc
import copy
import typing as t

from .capability import CollectionFactory, NotAggregatableError, aggregate, is_aggregatable, \
  register_collection

__all__ = ['AggregateMap', 'AggregateMapConsumedError']

K = t.TypeVar('K')
C = t.TypeVar('C')


class AggregateMapConsumedError(RuntimeError):
  pass


class AggregateMap(t.Mapping[K, C]):
  """
  Wraps a mapping of keys to value collections and aggregates key-value pairs
  into it. Every pair is inserted with #aggregate(), so values for the same
  key are collected instead of replacing each other.

  The wrapper is a read-only #Mapping view of the mapping it owns. Use the
  #mapping property for direct (mutable) access and #unwrap() to take the
  mapping back out of the wrapper.

  # Arguments
  mapping: The mapping to wrap. Defaults to a new #dict. Its type must
    implement the aggregation capability.
  factory: Creates the value collection for a new key. Defaults to the
    `default_factory` of a #collections.defaultdict, or #list.
  """

  def __init__(self, mapping: t.Optional[t.MutableMapping[K, C]] = None,
               factory: t.Optional[CollectionFactory] = None) -> None:
    if mapping is None:
      mapping = {}
    if not is_aggregatable(mapping):
      raise NotAggregatableError(type(mapping), 'mapping')
    if factory is None:
      factory = getattr(mapping, 'default_factory', None) or list
    self._mapping = mapping
    self._factory = factory
    self._consumed = False

  @classmethod
  def from_pairs(cls, pairs: t.Iterable[t.Tuple[K, t.Any]],
                 mapping: t.Optional[t.MutableMapping[K, C]] = None,
                 factory: t.Optional[CollectionFactory] = None) -> 'AggregateMap[K, C]':
    """
    Creates a new #AggregateMap and aggregates all *pairs* into it in
    iteration order.
    """

    self = cls(mapping, factory)
    self.extend(pairs)
    return self

  def _get(self) -> t.MutableMapping[K, C]:
    if self._consumed:
      raise AggregateMapConsumedError('AggregateMap was consumed by unwrap()')
    return self._mapping

  @property
  def mapping(self) -> t.MutableMapping[K, C]:
    """
    The wrapped mapping. Modifications are visible to the wrapper.
    """

    return self._get()

  @property
  def factory(self) -> CollectionFactory:
    return self._factory

  def aggregate(self, key: K, value: t.Any) -> None:
    aggregate(self._get(), key, value, self._factory)

  def extend(self, pairs: t.Iterable[t.Tuple[K, t.Any]]) -> None:
    mapping = self._get()
    for key, value in pairs:
      aggregate(mapping, key, value, self._factory)

  def unwrap(self, deep: bool = False) -> t.MutableMapping[K, C]:
    """
    Returns the wrapped mapping and invalidates the wrapper. If *deep* is
    True, values that are themselves an #AggregateMap are unwrapped as well.

    With *deep*, all nested wrappers are checked before anything is consumed.
    If one of them was already unwrapped (#AggregateMapConsumedError) or
    appears more than once (#ValueError), no wrapper is modified.
    """

    mapping = self._get()
    if deep:
      self._check_nested(set())
    self._consumed = True
    self._mapping = None
    if deep:
      for key, value in list(mapping.items()):
        if isinstance(value, AggregateMap):
          mapping[key] = value.unwrap(deep=True)
    return mapping

  def _check_nested(self, seen: t.Set[int]) -> None:
    if id(self) in seen:
      raise ValueError('AggregateMap is nested more than once')
    seen.add(id(self))
    for value in self._get().values():
      if isinstance(value, AggregateMap):
        value._check_nested(seen)

  def copy(self) -> 'AggregateMap[K, C]':
    """
    Returns a new #AggregateMap with a deep copy of the wrapped mapping.
    """

    return type(self)(copy.deepcopy(self._get()), self._factory)

  def __getitem__(self, key: K) -> C:
    return self._get()[key]

  def __contains__(self, key: object) -> bool:
    return key in self._get()

  def __iter__(self) -> t.Iterator[K]:
    return iter(self._get())

  def __len__(self) -> int:
    return len(self._get())

  def __eq__(self, other: object) -> bool:
    if isinstance(other, AggregateMap):
      other = other._get()
    if not isinstance(other, collections.abc.Mapping):
      return NotImplemented
    return self._get() == other

  def __repr__(self):
    if self._consumed:
      return 'AggregateMap(<consumed>)'
    return 'AggregateMap({!r})'.format(self._mapping)


@register_collection(AggregateMap)
def _extend_nested(collection, value):
  key, value = value
  collection.aggregate(key, value)
