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
Aggregation for hash-keyed mappings. Any #dict (including #collections.OrderedDict
and #collections.defaultdict) is supported, and so is every other
#collections.abc.MutableMapping. The latter makes it possible to aggregate
into mappings that hash their keys in a custom way.
"""

import collections.abc
import typing as t

from .capability import CollectionFactory, extend_one, register_map
from .core import AggregateMap

__all__ = ['hashmap']

_missing = object()


@register_map(dict)
def _aggregate_dict(mapping, key, value, factory=list):
  collection = mapping.get(key, _missing)
  if collection is _missing:
    collection = factory()
    extend_one(collection, value)
    mapping[key] = collection
  else:
    extend_one(collection, value)


@register_map(collections.abc.MutableMapping)
def _aggregate_mapping(mapping, key, value, factory=list):
  try:
    collection = mapping[key]
  except KeyError:
    collection = factory()
    extend_one(collection, value)
    mapping[key] = collection
  else:
    extend_one(collection, value)


def hashmap(pairs: t.Iterable[t.Tuple[t.Any, t.Any]] = (),
            factory: CollectionFactory = list) -> AggregateMap:
  """
  Aggregates *pairs* into a new #dict of value collections. Keys iterate in
  first-seen order, which is what #dict provides.

  ```python
  >>> hashmap([('dog', 'Terry'), ('cat', 'Jonathan'), ('dog', 'Zamboni')]).unwrap()
  {'dog': ['Terry', 'Zamboni'], 'cat': ['Jonathan']}
  ```
  """

  return AggregateMap.from_pairs(pairs, {}, factory)
