import logging
import math

import numpy as np
import pytest

from empstats import DistributionContext, EmpiricalDistribution


def _assert_cleared(ed: EmpiricalDistribution):
    assert ed.n == 0
    assert not ed.ready
    for value in (ed.mean, ed.variance, ed.standard_deviation, ed.median, ed.x_min, ed.x_max, ed.skewness):
        assert value == 0.0
    assert ed.sorted_data.size == 0
    assert ed.percentiles.size == 0
    assert ed.histogram is None
    assert ed.nr_of_histogram_bins == 0
    assert ed.histogram_bin_counts.size == 0
    assert ed.kde_pdf is None


def test_default_construction_is_cleared():
    ed = EmpiricalDistribution()
    _assert_cleared(ed)
    assert ed.get_percentile(50) == 0.0
    assert ed.get_cdf(1.0) == 0.0
    assert ed.get_pdf(0.0) == 0.0
    assert ed.get_kde_pdf(0.0) == 0.0
    assert ed.trimmed_mean(0.2) == 0.0
    assert ed.calculate_kde_pdf_bandwidth("gaussian") == 0.0
    assert ed.estimate_kde_pdf() is None


def test_empty_input_clears_previous_state(sample_data):
    ed = EmpiricalDistribution(sample_data)
    ed.set_data([])
    _assert_cleared(ed)
    ed.set_data(np.array([]))
    _assert_cleared(ed)


def test_cleared_report_and_tests():
    ed = EmpiricalDistribution()
    assert ed.jarque_bera_test_statistic() == 0.0
    assert ed.summary()["n"] == 0
    assert "Sample size: 0" in ed.to_string()
    ed.recalculate_pdf(5)
    assert ed.histogram is None


@pytest.mark.parametrize("value", [2.5, 0.1, -7.0])
def test_constant_sample(value):
    data = np.full(7, value)
    ed = EmpiricalDistribution(data)
    assert ed.variance == 0.0
    assert ed.standard_deviation == 0.0
    assert ed.mean == value
    assert ed.median == value
    assert ed.interquartile_range == 0.0
    assert np.all(ed.z_scores == 0.0)
    assert not ed.outliers.any()
    assert math.isnan(ed.skewness)
    assert math.isnan(ed.kurtosis)
    assert math.isnan(ed.skewness_z_statistic)
    assert math.isnan(ed.jarque_bera_test_statistic())
    assert not ed.is_jarque_bera_test_accepted()
    assert ed.skewness_interpretation().startswith("inconclusive")
    assert ed.kurtosis_interpretation().startswith("inconclusive")


def test_constant_sample_histogram_holds_everything():
    ed = EmpiricalDistribution(np.full(20, 4.0))
    assert ed.nr_of_histogram_bins == 10
    assert ed.histogram_bin_counts.sum() == 20
    assert ed.histogram_bin_frequencies.sum() == pytest.approx(1.0)


def test_constant_sample_kde_without_bandwidth_is_skipped(caplog):
    ed = EmpiricalDistribution(np.full(5, 1.0))
    kde = ed.estimate_kde_pdf("gaussian", bandwidth=0.5, min_support=-1.0, max_support=3.0)
    assert kde.y[np.argmin(np.abs(kde.x - 1.0))] == pytest.approx(kde.y.max())

    with caplog.at_level(logging.WARNING, logger="empstats.empirical"):
        assert ed.estimate_kde_pdf("gaussian") is None
    assert "bandwidth" in caplog.text
    assert ed.kde_pdf is None
    assert ed.kde_pdf_modes is None
    assert ed.kde_x_range == 0.0
    assert ed.get_kde_pdf(1.0) == 0.0


def test_single_observation_kde_is_skipped():
    ed = EmpiricalDistribution([2.0])
    assert ed.estimate_kde_pdf() is None
    assert ed.kde_pdf is None


def test_non_positive_explicit_bandwidth_still_raises():
    ed = EmpiricalDistribution(np.full(5, 1.0))
    with pytest.raises(ValueError, match="bandwidth"):
        ed.estimate_kde_pdf("gaussian", bandwidth=0.0)


def test_constant_sample_pdf_at_its_value():
    ed = EmpiricalDistribution(np.full(6, 2.5))
    assert ed.get_pdf(2.5) == pytest.approx(1.0)
    assert ed.get_pdf(2.4) == 0.0
    assert ed.get_pdf(2.6) == 0.0


def test_single_observation():
    ed = EmpiricalDistribution([3.0])
    assert ed.n == 1
    assert ed.mean == 3.0
    assert ed.variance == 0.0
    assert ed.cdf.tolist() == [1.0]
    assert math.isnan(ed.skewness)
    assert math.isnan(ed.skewness_confidence_bounds)
    assert math.isnan(ed.kurtosis)
    assert ed.get_cdf(3.0) == 1.0
    assert ed.histogram_bin_counts.sum() == 1


def test_two_observations():
    ed = EmpiricalDistribution([1.0, 3.0])
    assert ed.variance == pytest.approx(2.0)
    assert math.isnan(ed.skewness)
    assert math.isnan(ed.kurtosis)
    assert ed.get_cdf(2.0) == pytest.approx(0.5)


def test_three_observations_have_skewness_only():
    ed = EmpiricalDistribution([1.0, 2.0, 10.0])
    assert np.isfinite(ed.skewness)
    assert np.isfinite(ed.skewness_z_statistic)
    assert math.isnan(ed.kurtosis)
    assert math.isnan(ed.kurtosis_z_statistic)


def test_ties_are_preserved():
    ed = EmpiricalDistribution([2.0, 1.0, 2.0, 2.0, 3.0])
    assert ed.sorted_data.tolist() == [1.0, 2.0, 2.0, 2.0, 3.0]
    assert ed.median == 2.0
    assert ed.get_cdf(2.0) == pytest.approx(ed.cdf[3])


def test_nan_propagates_by_default():
    ed = EmpiricalDistribution([1.0, np.nan, 3.0])
    assert ed.n == 3
    assert math.isnan(ed.mean)


def test_bin_count_below_one_is_raised_to_one():
    ed = EmpiricalDistribution([1.0, 2.0, 3.0], histogram_bins=0)
    assert ed.nr_of_histogram_bins == 1
    assert ed.histogram_bin_counts.tolist() == [3]


def test_requested_bin_count_is_not_floored():
    ed = EmpiricalDistribution([1.0, 2.0, 3.0, 4.0], histogram_bins=3)
    assert ed.nr_of_histogram_bins == 3


def test_distant_outlier_caps_freedman_diaconis_bins():
    rng = np.random.default_rng(11)
    ed = EmpiricalDistribution(np.r_[rng.random(1000), 1e17])
    assert ed.nr_of_histogram_bins == DistributionContext().max_histogram_bins
    assert ed.histogram_bin_counts.sum() == 1001
    assert ed.histogram_bin_counts[0] == 1000
    assert ed.histogram_bin_counts[-1] == 1


def test_bin_ceiling_follows_context(caplog):
    rng = np.random.default_rng(11)
    ctx = DistributionContext(max_histogram_bins=500)
    with caplog.at_level(logging.DEBUG, logger="empstats.empirical"):
        ed = EmpiricalDistribution(np.r_[rng.random(1000), 1e6], context=ctx)
    assert ed.nr_of_histogram_bins == 500
    assert ed.histogram_bin_width == pytest.approx(ed.x_range / 500)
    assert "capped at 500" in caplog.text
    ed.recalculate_pdf()
    assert ed.nr_of_histogram_bins == 500


def test_empty_edges_fall_back_to_freedman_diaconis():
    ed = EmpiricalDistribution([1.0, 2.0, 3.0], histogram_bin_right_edges=[])
    assert ed.nr_of_histogram_bins == 10


def test_single_explicit_edge():
    ed = EmpiricalDistribution([1.0, 2.0, 3.0], histogram_bin_right_edges=[2.0])
    assert ed.histogram_bin_counts.tolist() == [3]
    assert ed.get_pdf(1.5) == pytest.approx(1.0)
    assert ed.get_pdf(2.5) == pytest.approx(0.5)


def test_data_outside_explicit_edges_goes_to_last_bin():
    ed = EmpiricalDistribution([5.0, 6.0, 7.0], histogram_bin_right_edges=[1.0, 2.0])
    assert ed.histogram_bin_counts.tolist() == [0, 3]


def test_multidimensional_input_is_flattened():
    ed = EmpiricalDistribution(np.arange(6.0).reshape(2, 3))
    assert ed.n == 6
    assert ed.median == 2.5
