"""Unit tests for envedit.domain.collection."""

from envedit.domain.collection import Collection


class TestConstruction:
    def test_from_list_is_indexed_from_zero(self):
        """
        Given a list of values
        When a Collection is built from it
        Then keys are positions starting at zero
        """
        assert Collection(["a", "b"]).all() == {0: "a", 1: "b"}

    def test_from_mapping_keeps_keys_and_order(self):
        items = Collection({"z": 1, "a": 2})
        assert list(items.all()) == ["z", "a"]

    def test_from_collection_copies(self):
        """
        Given an existing Collection
        When another Collection is built from it
        Then mutating the copy leaves the original untouched
        """
        original = Collection(["a"])
        copy = Collection.make(original)
        copy.push("b")
        assert len(original) == 1
        assert len(copy) == 2

    def test_empty(self):
        assert Collection().is_empty() is True
        assert Collection([1]).is_empty() is False


class TestKeyedAccess:
    def test_get_put_and_contains(self):
        items = Collection()
        items.put("a", 1)
        items["b"] = 2
        assert items.get("a") == 1
        assert items["b"] == 2
        assert "a" in items
        assert items.get("missing", "default") == "default"

    def test_getitem_missing_returns_none(self):
        assert Collection()["nope"] is None

    def test_delete(self):
        items = Collection({"a": 1, "b": 2})
        del items["a"]
        del items["not-there"]
        assert items.all() == {"b": 2}

    def test_push_uses_next_integer_key(self):
        """
        Given a collection whose integer keys have a gap
        When a value is pushed
        Then it lands after the highest integer key
        """
        items = Collection({0: "a", 5: "b", "x": "c"})
        items.push("d")
        assert items.all()[6] == "d"

    def test_keys_and_values(self):
        items = Collection({"a": 1, "b": 2})
        assert items.keys().all() == {0: "a", 1: "b"}
        assert items.values().all() == {0: 1, 1: 2}

    def test_iterates_values_in_order(self):
        assert list(Collection({"b": 2, "a": 1})) == [2, 1]
        assert Collection([1, 2, 3]).count() == 3


class TestTransformations:
    def test_map_keeps_keys(self):
        doubled = Collection({"a": 1, "b": 2}).map(lambda value, key: value * 2)
        assert doubled.all() == {"a": 2, "b": 4}

    def test_filter_keeps_keys(self):
        """
        Given a positional collection
        When it is filtered
        Then surviving items keep their original keys
        """
        evens = Collection([1, 2, 3, 4]).filter(lambda value, key: value % 2 == 0)
        assert evens.all() == {1: 2, 3: 4}

    def test_filter_without_callback_drops_falsy(self):
        assert Collection(["a", "", None, 0, "b"]).filter().all() == {0: "a", 4: "b"}

    def test_reject_is_inverse_of_filter(self):
        odds = Collection([1, 2, 3]).reject(lambda value, key: value % 2 == 0)
        assert list(odds) == [1, 3]

    def test_each_stops_on_false(self):
        """
        Given a callback that returns False on the second item
        When each is called
        Then iteration stops after that item
        """
        seen = []

        def visit(value, key):
            seen.append(value)
            return value != "b"

        Collection(["a", "b", "c"]).each(visit)
        assert seen == ["a", "b"]

    def test_reduce(self):
        assert Collection([1, 2, 3]).reduce(lambda acc, value: acc + value, 10) == 16

    def test_only(self):
        assert Collection({"a": 1, "b": 2, "c": 3}).only(["a", "c"]).all() == {"a": 1, "c": 3}

    def test_pluck_attributes_and_mapping_keys(self):
        class Item:
            name = "obj"

        items = Collection([{"name": "dict"}, Item(), object()])
        assert list(items.pluck("name")) == ["dict", "obj", None]

    def test_unique_keeps_first_key(self):
        assert Collection(["a", "b", "a"]).unique().all() == {0: "a", 1: "b"}

    def test_implode(self):
        assert Collection(["a", 1, "c"]).implode(",") == "a,1,c"

    def test_subclass_survives_transformations(self):
        """
        Given a Collection subclass
        When it is filtered or mapped
        Then the result is an instance of the subclass
        """

        class Sub(Collection):
            pass

        assert isinstance(Sub([1]).filter(), Sub)
        assert isinstance(Sub([1]).map(lambda value, key: value), Sub)


class TestSearching:
    def test_first_without_callback(self):
        assert Collection(["a", "b"]).first() == "a"
        assert Collection().first(default="none") == "none"

    def test_first_with_callback(self):
        items = Collection(["apple", "banana", "blueberry"])
        assert items.first(lambda value, key: value.startswith("b")) == "banana"
        assert items.first(lambda value, key: value.startswith("z"), "none") == "none"

    def test_search_by_value(self):
        assert Collection({"a": 1, "b": 2}).search(2) == "b"
        assert Collection({"a": 1}).search(3) is None

    def test_search_by_predicate_returns_key(self):
        """
        Given a predicate matching the second and third items
        When search is called
        Then the key of the first match is returned
        """
        items = Collection(["x", "yes", "yes again"])
        assert items.search(lambda value, key: value.startswith("yes")) == 1

    def test_search_finds_key_zero(self):
        assert Collection(["a"]).search("a") == 0

    def test_contains(self):
        items = Collection([1, 2])
        assert items.contains(lambda value, key: value == 2) is True
        assert items.contains(lambda value, key: value == 3) is False
