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
The aggregation capability. Two generic functions describe how a mapping of
value collections accepts one more value:

* #aggregate() inserts or appends a value under a key of a mapping
* #extend_one() appends a value to a single value collection

Both are #functools.singledispatch functions, so support for a mapping or
collection type is attached from the outside without touching the type
itself. Use #register_map() and #register_collection() to make third-party
types compatible with #AggregateMap.
"""

import functools
import logging
import typing as t
import typing_extensions as te

logger = logging.getLogger(__name__)

#: A callable that returns a new, empty value collection.
CollectionFactory = t.Callable[[], t.Any]

_F = t.TypeVar('_F', bound=t.Callable[..., None])


class NotAggregatableError(TypeError):
  """
  Raised if a mapping or value collection type does not implement the
  aggregation capability. The *kind* is either `'mapping'` or `'collection'`.
  """

  def __init__(self, type_: type, kind: te.Literal['mapping', 'collection']) -> None:
    super().__init__(type_, kind)
    self.type = type_
    self.kind = kind

  def __str__(self):
    return '{} type {}.{} does not implement aggregation'.format(
      self.kind, self.type.__module__, self.type.__qualname__)


@functools.singledispatch
def aggregate(mapping: t.Any, key: t.Any, value: t.Any, factory: CollectionFactory = list) -> None:
  """
  Insert one *value* into the collection stored under *key* in *mapping*. If
  the key is absent, a new collection is created with *factory*, receives the
  value and is stored under the key. Otherwise the value is appended to the
  existing collection. No other entry of the mapping is touched.
  """

  raise NotAggregatableError(type(mapping), 'mapping')


@functools.singledispatch
def extend_one(collection: t.Any, value: t.Any) -> None:
  """
  Append a single *value* to a value *collection*.
  """

  raise NotAggregatableError(type(collection), 'collection')


def register_map(type_: type) -> t.Callable[[_F], _F]:
  """
  Decorator to register an #aggregate() implementation for a mapping type.
  The decorated function receives the same arguments as #aggregate().
  """

  def decorator(func):
    logger.debug('registering mapping type %s.%s', type_.__module__, type_.__qualname__)
    return aggregate.register(type_, func)
  return decorator


def register_collection(type_: type) -> t.Callable[[_F], _F]:
  """
  Decorator to register an #extend_one() implementation for a value
  collection type.
  """

  def decorator(func):
    logger.debug('registering collection type %s.%s', type_.__module__, type_.__qualname__)
    return extend_one.register(type_, func)
  return decorator


def is_aggregatable(obj: t.Any) -> bool:
  """
  Returns True if *obj* (a mapping or a mapping type) has an #aggregate()
  implementation.
  """

  type_ = obj if isinstance(obj, type) else type(obj)
  return aggregate.dispatch(type_) is not aggregate.registry[object]
