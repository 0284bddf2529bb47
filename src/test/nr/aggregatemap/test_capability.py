
import collections
import pytest
from nr.aggregatemap import AggregateMap, NotAggregatableError, aggregate, extend_one, \
  is_aggregatable, register_collection, register_map


class Registry(object):
  """ A mapping-like type that is not a #MutableMapping. """

  def __init__(self):
    self.entries = []

  def lookup(self, key):
    for entry_key, values in self.entries:
      if entry_key == key:
        return values
    return None


class Bag(object):

  def __init__(self):
    self.items = []


@register_map(Registry)
def _aggregate_registry(mapping, key, value, factory=list):
  values = mapping.lookup(key)
  if values is None:
    values = factory()
    mapping.entries.append((key, values))
  extend_one(values, value)


@register_collection(Bag)
def _extend_bag(collection, value):
  collection.items.append(value)


def test_is_aggregatable():
  assert is_aggregatable({})
  assert is_aggregatable(dict)
  assert is_aggregatable(collections.OrderedDict)
  assert is_aggregatable(Registry)
  assert not is_aggregatable([])
  assert not is_aggregatable(object)


def test_aggregate_dict():
  d = {}
  aggregate(d, 'a', 1)
  aggregate(d, 'a', 2)
  aggregate(d, 'b', 3, factory=set)
  assert d == {'a': [1, 2], 'b': {3}}


def test_extend_one():
  values = []
  extend_one(values, 1)
  assert values == [1]

  values = collections.deque()
  extend_one(values, 1)
  extend_one(values, 2)
  assert list(values) == [1, 2]

  values = set()
  extend_one(values, 1)
  extend_one(values, 1)
  assert values == {1}

  values = collections.Counter()
  extend_one(values, 'a')
  extend_one(values, 'a')
  assert values['a'] == 2

  with pytest.raises(NotAggregatableError):
    extend_one(frozenset(), 1)


def test_custom_types():
  m = AggregateMap(Registry(), factory=Bag)
  m.extend([('a', 1), ('a', 2), ('b', 3)])
  registry = m.unwrap()
  assert [(k, v.items) for k, v in registry.entries] == [('a', [1, 2]), ('b', [3])]


def test_error_message():
  err = NotAggregatableError(frozenset, 'mapping')
  assert isinstance(err, TypeError)
  assert str(err) == 'mapping type builtins.frozenset does not implement aggregation'


def test_submodules_are_not_shadowed():
  import types
  import nr.aggregatemap
  from nr.aggregatemap import hashed, ordered
  assert isinstance(hashed, types.ModuleType)
  assert isinstance(ordered, types.ModuleType)
  assert nr.aggregatemap.hashmap is hashed.hashmap
  assert nr.aggregatemap.sortedmap is ordered.sortedmap
