import pytest

from cub.hashmap import HashMap, MapFullError, default_hash, hash_string


class Key:
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def __eq__(self, other):
        return (self.x, self.y) == (other.x, other.y)


def key_hash(key):
    return key.x + key.y


def test_empty_when_init():
    m = HashMap()
    assert m.empty()
    assert not m.full()
    assert len(m) == 0


def test_get_value_after_insert():
    m = HashMap()
    m.put(1, 2)
    m[2] = 4
    assert not m.empty()
    assert not m.full()
    assert len(m) == 2
    assert m[1] == 2


def test_erase_only_node():
    m = HashMap()
    m.put(1, 2)
    m.erase(1)
    assert m.empty()
    assert len(m) == 0
    assert m.get(1) is None


def test_erase_with_multiple_nodes():
    m = HashMap()
    m.put(1, 2)
    m.put(2, 4)
    m.erase(2)
    assert not m.empty()
    assert len(m) == 1
    assert m.get(1) == 2
    assert m.get(2) is None


def test_erase_missing_is_noop_but_del_raises():
    m = HashMap()
    m.put(1, 2)
    m.erase(5)
    assert len(m) == 1
    with pytest.raises(KeyError):
        del m[5]


def test_clear():
    m = HashMap()
    m.put(1, 2)
    m.put(2, 4)
    m.clear()
    assert m.empty()
    assert len(m) == 0
    assert m.get(1) is None


def test_same_key_replaces_value():
    m = HashMap()
    m.put(1, 2)
    m.put(1, 4)
    assert len(m) == 1
    assert m[1] == 4


def test_full_when_reaching_max():
    m = HashMap(1)
    m.put(1, 2)
    assert m.full()
    assert m.max_size() == 1


def test_put_fails_when_full():
    m = HashMap(1)
    m.put(1, 2)
    with pytest.raises(MapFullError):
        m.put(2, 2)
    assert len(m) == 1
    assert m[1] == 2


def test_put_existing_succeeds_when_full():
    m = HashMap(1)
    m.put(1, 2)
    m.put(1, 4)
    assert len(m) == 1
    assert m[1] == 4


def test_iteration_on_empty_map():
    m = HashMap()
    assert list(m.items()) == []
    assert list(m) == []


def test_iteration_with_one_elem():
    m = HashMap()
    m.put(1, 2)
    assert list(m.items()) == [(1, 2)]


def test_iteration_forward():
    m = HashMap()
    m.put(1, 2)
    m.put(3, 6)
    assert list(m.items()) == [(1, 2), (3, 6)]


def test_travel_the_map():
    m = HashMap(5, 5)
    m.put(1, 2)
    m.put(3, 6)
    m.put(8, 16)
    m.put(5, 10)
    assert sum(k for k, _ in m.items()) == 1 + 3 + 8 + 5
    assert sum(v for _, v in m.items()) == 2 + 6 + 16 + 10


def test_string_keys():
    m = HashMap()
    m["hello"] = 5
    m["ni hao ma"] = 9
    assert len(m) == 2
    assert m["hello"] == 5
    assert m["ni hao ma"] == 9


def test_transform_triples_values():
    m = HashMap()
    m[1] = 1
    m[2] = 2
    m.transform(lambda key, value: 3 * key)
    assert m[1] == 3
    assert m[2] == 6


def test_dump_through_visitor():
    m = HashMap()
    m[1] = "one"
    m[2] = "two"
    m[3] = "three"
    out = []
    m.visit(lambda key, value: out.append(f"map[{key}] = {value} \n"))
    assert "".join(out) == "map[1] = one \nmap[2] = two \nmap[3] = three \n"


def test_user_defined_hash_and_equal():
    m = HashMap(hash_fn=key_hash)
    m.put(Key(1, 3), "four")
    m[Key(2, 3)] = "five"
    assert m[Key(1, 3)] == "four"
    assert m.get(Key(2, 3)) == "five"
    assert m.get(Key(2, 4)) is None


def test_store_object_references():
    v1 = object()
    v2 = object()
    m = HashMap(hash_fn=key_hash)
    m.put(Key(0, 1), v1)
    m[Key(1, 1)] = v2
    assert m[Key(0, 1)] is v1
    assert m.get(Key(1, 1)) is v2
    assert m.get(Key(2, 4)) is None


def test_missing_key_without_default_raises():
    m = HashMap()
    with pytest.raises(KeyError):
        m[7]
    assert len(m) == 0
    assert m.get(7) is None


def test_missing_key_with_default_inserts():
    m = HashMap(default=int)
    assert m[7] == 0
    assert len(m) == 1
    assert 7 in m


def test_custom_eq_fn():
    m = HashMap(hash_fn=lambda k: len(k), eq_fn=lambda a, b: a.lower() == b.lower())
    m["Abc"] = 1
    m["aBC"] = 2
    assert len(m) == 1
    assert m["ABC"] == 2


def test_invalid_sizes():
    with pytest.raises(ValueError):
        HashMap(0)
    with pytest.raises(ValueError):
        HashMap(4, 0)


def test_hash_string_basics():
    assert hash_string("") == 0
    assert hash_string("a") == ord("a")
    assert hash_string("hello") == hash_string(b"hello")


def test_default_hash_in_range():
    for key in (0, 5, 1023, 1024, -3, "hello", "ni hao ma", (1, 2)):
        assert 0 <= default_hash(key, 7) < 7
    assert default_hash(9, 5) == 9 % 5