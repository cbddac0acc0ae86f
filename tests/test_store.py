import threading

from envstore.store import ROOT_KEY, EnvStore


def test_set_get_round_trip_and_overwrite():
    store = EnvStore()
    store.set("Found", "something")
    assert store.get("Found") == "something"
    store.set("Found", "other")
    assert store.get("Found") == "other"
    assert store.get("found") is None
    assert len(store) == 1


def test_string_defaults_only_on_absence():
    store = EnvStore()
    assert store.get_string("NotFound") == ""
    assert store.get_string("NotFound", "default") == "default"
    store.set("Empty", "")
    assert store.get_string("Empty", "default") == ""


def test_strings():
    store = EnvStore()
    assert store.get_strings("StringList") == []
    store.set("StringList", "a,b,c")
    assert store.get_strings("StringList") == ["a", "b", "c"]
    assert store.get_strings("NotFound", ["a", "b", "c"]) == ["a", "b", "c"]
    store.set("Joined", ["x", "y"])
    assert store.get_strings("Joined") == ["x", "y"]


def test_integer_accessors():
    store = EnvStore()
    for accessor in (store.get_int, store.get_int64, store.get_uint, store.get_uint64):
        assert accessor("integer") == 0
        assert accessor("NotFound", 123) == 123
    store.set("integer", 123)
    for accessor in (store.get_int, store.get_int64, store.get_uint, store.get_uint64):
        assert accessor("integer") == 123


def test_bool_and_float():
    store = EnvStore()
    assert store.get_bool("bool") is False
    assert store.get_bool("NotFound", True) is True
    store.set("bool", True)
    assert store.get_bool("bool") is True

    value = 12345678990.0987654321
    assert store.get_float("float64") == 0.0
    assert store.get_float("NotFound", value) == value
    store.set("float64", value)
    assert store.get_float("float64") == value


def test_malformed_value_returns_zero_not_default():
    store = EnvStore({"port": "eighty", "ratio": "1,5", "flag": "yes", "neg": "-3"})
    assert store.get_int("port", 8080) == 0
    assert store.get_float("ratio", 0.5) == 0.0
    assert store.get_bool("flag", True) is False
    assert store.get_uint("neg", 9) == 0
    assert store.get_int("neg") == -3


def test_initial_values_are_rendered():
    store = EnvStore({"n": 5, "b": False})
    assert store.as_dict() == {"n": "5", "b": "false"}
    assert sorted(store.keys()) == ["b", "n"]
    assert "n" in store


def test_root_property():
    store = EnvStore()
    assert store.root is None
    store.root = "/tmp"
    assert store.root == "/tmp"
    assert store.get(ROOT_KEY) == "/tmp"


def test_concurrent_writers_keep_every_key():
    store = EnvStore()

    def writer(prefix):
        for i in range(200):
            store.set(f"{prefix}{i}", i)

    threads = [threading.Thread(target=writer, args=(p,)) for p in "abcd"]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(store) == 800
    assert store.get_int("c199") == 199
