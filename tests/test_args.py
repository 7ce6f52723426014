"""Tests for ptargs.args: the Args multi-map."""

import pytest

from ptargs._internal.bag import ParameterBag
from ptargs.args import Args


class TestArgs:
    def test_empty(self) -> None:
        args = Args()
        assert len(args) == 0
        assert list(args) == []

    def test_add_and_getitem(self) -> None:
        args = Args()
        args.add("a", "1")
        assert args["a"] == "1"

    def test_add_appends_in_order(self) -> None:
        args = Args()
        args.add("a", "1")
        args.add("a", "2")
        assert args.get_list("a") == ["1", "2"]
        assert args["a"] == "1"

    def test_missing_key_raises(self) -> None:
        with pytest.raises(KeyError):
            Args()["missing"]

    def test_contains(self) -> None:
        args = Args({"a": ["1"]})
        assert "a" in args
        assert "missing" not in args

    def test_iter_preserves_insertion_order(self) -> None:
        args = Args()
        for key in ("z", "a", "m"):
            args.add(key, "")
        assert list(args) == ["z", "a", "m"]

    def test_len_counts_keys(self) -> None:
        args = Args({"a": ["1", "2"], "b": ["3"]})
        assert len(args) == 2


class TestGet:
    def test_get_first_value(self) -> None:
        args = Args({"a": ["first", "second"]})
        assert args.get("a") == "first"

    def test_get_missing(self) -> None:
        args = Args()
        assert args.get("missing") is None
        assert args.get("missing", "fallback") == "fallback"

    def test_get_empty_value(self) -> None:
        args = Args({"a": [""]})
        assert args.get("a", "fallback") == ""

    def test_lookup_found(self) -> None:
        args = Args({"a": ["1", "2"]})
        assert args.lookup("a") == ("1", True)

    def test_lookup_empty_value_is_found(self) -> None:
        args = Args({"a": [""]})
        assert args.lookup("a") == ("", True)

    def test_lookup_missing(self) -> None:
        assert Args().lookup("a") == ("", False)

    def test_get_list_missing(self) -> None:
        assert Args().get_list("a") == []

    def test_get_list_returns_copy(self) -> None:
        args = Args({"a": ["1"]})
        args.get_list("a").append("2")
        assert args.get_list("a") == ["1"]


class TestInvariant:
    def test_empty_value_list_dropped(self) -> None:
        args = Args({"a": [], "b": ["1"]})
        assert "a" not in args
        assert len(args) == 1

    def test_no_key_without_values(self) -> None:
        args = Args({"a": ["1"], "b": ["", "x"]})
        assert all(args.get_list(key) for key in args)

    def test_copy_from_args_keeps_every_value(self) -> None:
        source = Args({"secret": ["abc"], "mode": ["1", "2"]})
        copy = Args(source)
        assert copy == source
        assert copy.get_list("secret") == ["abc"]
        assert copy.get_list("mode") == ["1", "2"]

    def test_copy_from_args_is_independent(self) -> None:
        source = Args({"mode": ["1"]})
        copy = Args(source)
        source.add("mode", "2")
        assert copy.get_list("mode") == ["1"]

    def test_bare_string_values_rejected(self) -> None:
        with pytest.raises(TypeError, match="'k'"):
            Args({"k": "v"})  # type: ignore[dict-item]

    def test_constructor_copies_input(self) -> None:
        source = {"a": ["1"]}
        args = Args(source)
        source["a"].append("2")
        assert args.get_list("a") == ["1"]


class TestConversions:
    def test_multi_items(self) -> None:
        args = Args()
        args.add("a", "1")
        args.add("b", "2")
        args.add("a", "3")
        assert list(args.multi_items()) == [("a", "1"), ("a", "3"), ("b", "2")]

    def test_to_dict(self) -> None:
        args = Args({"a": ["1", "2"]})
        assert args.to_dict() == {"a": ["1", "2"]}

    def test_to_dict_is_copy(self) -> None:
        args = Args({"a": ["1"]})
        args.to_dict()["a"].append("2")
        assert args.get_list("a") == ["1"]

    def test_equality_compares_all_values(self) -> None:
        assert Args({"a": ["1", "2"]}) == Args({"a": ["1", "2"]})
        assert Args({"a": ["1", "2"]}) != Args({"a": ["1"]})

    def test_not_equal_to_plain_dict(self) -> None:
        assert Args({"a": ["1"]}) != {"a": ["1"]}

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(Args())

    def test_satisfies_parameter_bag(self) -> None:
        assert isinstance(Args(), ParameterBag)

    def test_repr(self) -> None:
        assert "secret" in repr(Args({"secret": ["x"]}))
