"""Tests for the strategy-keyed hash containers."""

import unittest

from collit.containers import (
    CaseFoldStrategy,
    HashStrategy,
    IdentityStrategy,
    StrategyDict,
    StrategySet,
    get_strategy,
    list_strategies,
    register_strategy,
)


class LastDigitStrategy(HashStrategy):
    name = "last_digit"

    def normalize(self, key):
        return key % 10


class TypedStrategy(HashStrategy):
    name = "typed"

    def normalize(self, key):
        return type(key).__name__, key


class TestStrategyDict(unittest.TestCase):
    def test_casefold_last_write_wins(self):
        d = StrategyDict(CaseFoldStrategy())
        d["PATH"] = "a"
        d["Path"] = "b"
        self.assertEqual(len(d), 1)
        self.assertEqual(list(d.items()), [("Path", "b")])
        self.assertEqual(d["path"], "b")
        self.assertIn("pAtH", d)

    def test_delete(self):
        d = StrategyDict(CaseFoldStrategy(), items=[("Home", 1), ("Work", 2)])
        del d["HOME"]
        self.assertEqual(dict(d), {"Work": 2})
        with self.assertRaises(KeyError):
            del d["home"]

    def test_default_strategy_is_identity(self):
        d = StrategyDict(items=[(1, "a"), (2, "b")])
        self.assertEqual(d.strategy, IdentityStrategy())
        self.assertEqual(d, {1: "a", 2: "b"})
        self.assertIsNone(d.get(3))

    def test_capacity_never_below_length(self):
        d = StrategyDict(capacity=4)
        self.assertEqual(d.capacity, 4)
        for i in range(6):
            d[i] = i
        self.assertEqual(d.capacity, 6)

    def test_unhashable_key_raises_type_error(self):
        d = StrategyDict()
        with self.assertRaises(TypeError):
            d[[1]] = 1
        with self.assertRaises(TypeError):
            [1] in d

    def test_custom_strategy(self):
        d = StrategyDict(LastDigitStrategy(), items=[(11, "a"), (21, "b"), (2, "c")])
        self.assertEqual(len(d), 2)
        self.assertEqual(d[1], "b")
        self.assertEqual(list(d), [21, 2])

    def test_keys_equal_in_python_but_distinct_under_strategy(self):
        d = StrategyDict(TypedStrategy())
        d[1] = "int"
        d[1.0] = "float"
        self.assertEqual(len(d), 2)
        self.assertEqual(d[1], "int")
        self.assertEqual(d[1.0], "float")
        del d[1.0]
        self.assertEqual(len(d), 1)
        self.assertEqual(d[1], "int")
        self.assertEqual(list(d.items()), [(1, "int")])

    def test_overwrite_keeps_position(self):
        d = StrategyDict(CaseFoldStrategy(), items=[("A", 1), ("b", 2)])
        d["a"] = 3
        self.assertEqual(list(d.items()), [("a", 3), ("b", 2)])


class TestStrategySet(unittest.TestCase):
    def test_first_form_is_kept(self):
        s = StrategySet(CaseFoldStrategy(), elements=["A", "a", "b"])
        self.assertEqual(list(s), ["A", "b"])
        self.assertIn("B", s)

    def test_discard(self):
        s = StrategySet(CaseFoldStrategy(), elements=["A"])
        s.discard("a")
        s.discard("missing")
        self.assertEqual(len(s), 0)

    def test_equals_builtin_set(self):
        self.assertEqual(StrategySet(elements=[1, 2, 2]), {1, 2})

    def test_set_operations_keep_working(self):
        s = StrategySet(elements=[1, 2, 3])
        self.assertEqual(s & {2, 3, 4}, {2, 3})

    def test_capacity(self):
        s = StrategySet(capacity=8, elements=[1, 2])
        self.assertEqual(s.capacity, 8)

    def test_set_operations_keep_strategy(self):
        s = StrategySet(CaseFoldStrategy(), elements=["Key"])
        for result in (s | {"other"}, s & {"KEY"}, s - {"x"}, s ^ {"y"}):
            self.assertIsInstance(result, StrategySet)
            self.assertEqual(result.strategy, CaseFoldStrategy())
        union = s | {"other"}
        self.assertIn("KEY", union)
        self.assertIn("OTHER", union)
        self.assertEqual(len(s & {"KEY"}), 1)

    def test_unhashable_membership_raises_type_error(self):
        with self.assertRaises(TypeError):
            [1] in StrategySet(elements=[1])

    def test_distinct_under_strategy(self):
        s = StrategySet(TypedStrategy(), elements=[1, 1.0, True])
        self.assertEqual(len(s), 3)


class TestStrategyRegistry(unittest.TestCase):
    def test_builtin_strategies(self):
        self.assertIs(get_strategy("identity"), IdentityStrategy)
        self.assertIs(get_strategy("casefold"), CaseFoldStrategy)
        self.assertIn("casefold", list_strategies())

    def test_register_strategy(self):
        register_strategy("last_digit", LastDigitStrategy)
        self.assertIs(get_strategy("last_digit"), LastDigitStrategy)

    def test_register_rejects_non_strategies(self):
        with self.assertRaises(TypeError):
            register_strategy("bogus", dict)

    def test_unknown_strategy(self):
        with self.assertRaises(KeyError):
            get_strategy("nope")


if __name__ == "__main__":
    unittest.main()
