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

"""
Aggregation for key-sorted mappings backed by #sortedcontainers.SortedDict.
Keys are kept in the order of their natural comparison (or of the *key*
function of the #SortedDict), inserting a new key costs O(log n).
"""

import typing as t

from sortedcontainers import SortedDict

from .capability import CollectionFactory, extend_one, register_map
from .core import AggregateMap

__all__ = ['sortedmap']


@register_map(SortedDict)
def _aggregate_sorted(mapping, key, value, factory=list):
  # Keys that don't compare with the existing keys raise a TypeError in
  # SortedDict.__setitem__(), before the mapping is modified.
  if key in mapping:
    extend_one(mapping[key], value)
  else:
    collection = factory()
    extend_one(collection, value)
    mapping[key] = collection


def sortedmap(pairs: t.Iterable[t.Tuple[t.Any, t.Any]] = (),
              key: t.Optional[t.Callable[[t.Any], t.Any]] = None,
              factory: CollectionFactory = list) -> AggregateMap:
  """
  Aggregates *pairs* into a new #SortedDict of value collections. The
  optional *key* function defines the sort order of the keys.
  """

  mapping = SortedDict(key) if key is not None else SortedDict()
  return AggregateMap.from_pairs(pairs, mapping, factory)
