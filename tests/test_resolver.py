"""Tests for threshold and chronology resolution."""

from datetime import date

import pytest

from compat.normalizer import normalize_matrix
from compat.resolver import apply_resolution, resolve_es_versions, validate_threshold
from conftest import load_fixture
from versioning.es_versions import compare_es_versions, get_es_versions_by_date
from versioning.models import ESVersionCompatibility


def _matrix(**percents):
    return {
        name: ESVersionCompatibility(
            es_version=name, node_version="1.0.0", node_flag="", v8="",
            successful=0, total=0, percent=percent,
        )
        for name, percent in percents.items()
    }


class TestResolveEsVersions:
    """The three derived lists."""

    def test_node_4(self):
        compatibility = normalize_matrix(load_fixture("4.9.1.json"), "4.9.1").compatibility
        tested, above, compatible = resolve_es_versions(compatibility, 0.85, date(2018, 3, 29))
        assert tested == ["ES2015", "ES2016", "ES2017", "ES2018"]
        assert above == []
        assert compatible == ["ES1", "ES2", "ES3", "ES5"]

    def test_node_14(self):
        compatibility = normalize_matrix(load_fixture("14.0.0.json"), "14.0.0").compatibility
        tested, above, compatible = resolve_es_versions(compatibility, 0.85, date(2020, 4, 21))
        assert "ESNEXT" not in tested
        assert above == ["ES2015", "ES2016", "ES2017", "ES2018", "ES2019"]
        assert compatible == [
            "ES1", "ES2", "ES3", "ES5",
            "ES2015", "ES2016", "ES2017", "ES2018", "ES2019",
        ]

    def test_tested_sorted_regardless_of_input_order(self):
        tested, _, _ = resolve_es_versions(
            _matrix(ES2017=1, ES2015=1, ESNext=1, ES2016=1), 0.85, date(2020, 1, 1)
        )
        assert tested == ["ES2015", "ES2016", "ES2017"]
        for earlier, later in zip(tested, tested[1:]):
            assert compare_es_versions(earlier, later) == -1

    def test_threshold_is_inclusive(self):
        _, above, _ = resolve_es_versions(_matrix(ES2015=0.85), 0.85, date(2020, 1, 1))
        assert above == ["ES2015"]

    def test_lower_threshold_admits_more(self):
        compatibility = normalize_matrix(load_fixture("4.9.1.json"), "4.9.1").compatibility
        _, above, compatible = resolve_es_versions(compatibility, 0.5, date(2018, 3, 29))
        assert above == ["ES2015", "ES2016"]
        assert compatible == ["ES1", "ES2", "ES3", "ES5", "ES2015", "ES2016"]

    def test_tested_failure_is_a_ceiling(self):
        _, _, compatible = resolve_es_versions(
            _matrix(ES2015=1, ES2016=0.2, ES2017=1), 0.85, date(2018, 1, 1)
        )
        assert compatible == ["ES1", "ES2", "ES3", "ES5", "ES2015"]

    def test_untested_editions_trusted_by_chronology(self):
        _, _, compatible = resolve_es_versions(_matrix(ES2015=1), 0.85, date(2018, 1, 1))
        assert compatible == ["ES1", "ES2", "ES3", "ES5", "ES2015", "ES2016", "ES2017"]

    def test_compatible_is_prefix_of_date_list(self):
        by_date = get_es_versions_by_date(date(2019, 4, 23))
        compatibility = normalize_matrix(load_fixture("12.0.0.json"), "12.0.0").compatibility
        _, _, compatible = resolve_es_versions(compatibility, 0.85, date(2019, 4, 23))
        assert compatible == by_date[: len(compatible)]

    def test_threshold_subset_of_tested(self):
        compatibility = normalize_matrix(load_fixture("12.0.0.json"), "12.0.0").compatibility
        tested, above, _ = resolve_es_versions(compatibility, 0.85, date(2019, 4, 23))
        assert set(above) <= set(tested)
        assert "ES2020" in tested and "ES2020" not in above

    def test_empty_matrix(self):
        tested, above, compatible = resolve_es_versions({}, 0.85, date(2010, 1, 1))
        assert tested == [] and above == []
        assert compatible == ["ES1", "ES2", "ES3", "ES5"]


class TestApplyResolution:
    """Filling a normalized result."""

    def test_fills_result_in_place(self):
        result = normalize_matrix(load_fixture("12.0.0.json"), "12.0.0")
        returned = apply_resolution(result, 0.85, date(2019, 4, 23))
        assert returned is result
        assert result.latest_compatible == "ES2018"


class TestValidateThreshold:
    """Threshold input checks."""

    @pytest.mark.parametrize("value", [0, 0.85, 1])
    def test_accepts_fractions(self, value):
        assert validate_threshold(value) == float(value)

    @pytest.mark.parametrize("value", [-0.1, 1.5, 85, "0.85", None, True])
    def test_rejects_others(self, value):
        with pytest.raises(ValueError):
            validate_threshold(value)
