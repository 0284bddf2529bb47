
import collections.abc
from nr.aggregatemap import AggregateMap, hashmap, is_aggregatable


class HashDict(collections.abc.MutableMapping):
  """ A mapping that uses *key_hash* instead of the builtin #hash(). """

  def __init__(self, key_hash):
    self.key_hash = key_hash
    self.data = {}

  def __getitem__(self, key):
    return self.data[self.key_hash(key)][1]

  def __setitem__(self, key, value):
    self.data[self.key_hash(key)] = (key, value)

  def __delitem__(self, key):
    del self.data[self.key_hash(key)]

  def __iter__(self):
    return (key for key, _ in self.data.values())

  def __len__(self):
    return len(self.data)


def test_hashmap():
  m = hashmap([('dog', 'Terry'), ('dog', 'Zamboni'), ('cat', 'Jonathan'), ('dog', 'Priscilla')])
  assert type(m.mapping) is dict
  assert m.unwrap() == {'dog': ['Terry', 'Zamboni', 'Priscilla'], 'cat': ['Jonathan']}
  assert hashmap().unwrap() == {}
  assert hashmap([('x', 1)]).unwrap() == {'x': [1]}


def test_hashmap_factory():
  m = hashmap([('a', 1), ('a', 1), ('b', 2)], factory=collections.deque)
  assert m['a'] == collections.deque([1, 1])

  m = hashmap([('a', 'x'), ('a', 'y'), ('a', 'x')], factory=collections.Counter)
  assert m['a'] == {'x': 2, 'y': 1}


def test_custom_hash():
  assert is_aggregatable(HashDict)

  m = AggregateMap(HashDict(lambda k: k.lower()))
  m.extend([('Dog', 'Terry'), ('DOG', 'Zamboni'), ('cat', 'Jonathan')])
  assert len(m) == 2
  assert m['dog'] == ['Terry', 'Zamboni']
  assert sorted(m.keys()) == ['Dog', 'cat']

  def increment(x, _c={}):
    _c['x'] = _c.get('x', -1) + 1
    return _c['x']

  m = AggregateMap(HashDict(increment))
  m.extend([('foo', 42), ('foo', 99), ('foo', 102)])
  assert len(m) == 3
  assert sorted(m.keys()) == ['foo', 'foo', 'foo']
  assert sorted(v for _, vs in m.mapping.data.values() for v in vs) == [42, 99, 102]
