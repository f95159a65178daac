"""Tests for combining compatible editions across versions."""

from compat.combinators import all_compatible, exclusive_compatible, mutual_compatible
from versioning.models import NodeCompatibilityResult


def _result(version, compatible):
    return NodeCompatibilityResult(
        node_version=version, node_flag="", v8="", es_versions_compatible=list(compatible)
    )


ES5 = ["ES1", "ES2", "ES3", "ES5"]
ES2018 = ES5 + ["ES2015", "ES2016", "ES2017", "ES2018"]
ES2019 = ES2018 + ["ES2019"]


class TestMutualCompatible:
    """Intersection."""

    def test_lowest_common_denominator(self):
        assert mutual_compatible([_result("12.0.0", ES2018), _result("4.9.1", ES5)]) == ES5

    def test_order_of_inputs_irrelevant(self):
        results = [_result("14.0.0", ES2019), _result("12.0.0", ES2018)]
        assert mutual_compatible(results) == mutual_compatible(list(reversed(results))) == ES2018

    def test_same_version_twice(self):
        assert mutual_compatible([_result("14.0.0", ES2019), _result("14.0.0", ES2019)]) == ES2019

    def test_empty_input(self):
        assert mutual_compatible([]) == []

    def test_disjoint(self):
        assert mutual_compatible([_result("a", ["ES5"]), _result("b", [])]) == []


class TestExclusiveCompatible:
    """Latest edition per version."""

    def test_latest_of_each(self):
        assert exclusive_compatible([_result("14.0.0", ES2019), _result("4.9.1", ES5)]) == ["ES5", "ES2019"]

    def test_duplicates_collapse(self):
        results = [_result("14.0.0", ES2019), _result("14.1.0", ES2019), _result("4.9.1", ES5)]
        assert exclusive_compatible(results) == ["ES5", "ES2019"]

    def test_empty_list_contributes_nothing(self):
        assert exclusive_compatible([_result("0.1.0", []), _result("4.9.1", ES5)]) == ["ES5"]


class TestAllCompatible:
    """Union."""

    def test_union_matches_newest(self):
        assert all_compatible([_result("14.0.0", ES2019), _result("4.9.1", ES5)]) == ES2019

    def test_union_sorted(self):
        assert all_compatible([_result("a", ["ES2016"]), _result("b", ["ES5", "ES2015"])]) == [
            "ES5", "ES2015", "ES2016",
        ]

    def test_empty_input(self):
        assert all_compatible([]) == []
