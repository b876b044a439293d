import numpy as np
import pytest

from empstats.context import DistributionContext, NanPolicy, clean_sample, ensure_context


class TestDistributionContext:
    """Configuration object"""

    def test_defaults(self):
        ctx = DistributionContext()
        assert ctx.min_histogram_bins == 10
        assert ctx.max_histogram_bins == 10_000
        assert ctx.outlier_z_threshold == 3.0
        assert ctx.nan_policy == "propagate"
        assert ctx.kde_nr_of_support_points == 512
        assert ctx.kde_block_elements == 1_000_000

    def test_with_overrides_returns_copy(self):
        ctx = DistributionContext()
        other = ctx.with_overrides(outlier_z_threshold=2.0, nan_policy=NanPolicy.omit)
        assert other.outlier_z_threshold == 2.0
        assert other.nan_policy == "omit"
        assert ctx.outlier_z_threshold == 3.0

    @pytest.mark.parametrize(
        "field, value, match",
        [
            ("min_histogram_bins", 0, "min_histogram_bins"),
            ("max_histogram_bins", 5, "max_histogram_bins"),
            ("outlier_z_threshold", 0.0, "outlier_z_threshold"),
            ("nan_policy", "raise", "nan_policy"),
            ("kde_nr_of_support_points", 1, "kde_nr_of_support_points"),
            ("kde_block_elements", 0, "kde_block_elements"),
        ],
    )
    def test_validation(self, field, value, match):
        with pytest.raises(ValueError, match=match):
            DistributionContext(**{field: value})

    def test_validation_on_override(self):
        with pytest.raises(ValueError):
            DistributionContext().with_overrides(min_histogram_bins=-1)


class TestEnsureContext:
    def test_none_dict_and_instance(self):
        assert ensure_context(None) == DistributionContext()
        assert ensure_context({"min_histogram_bins": 20}).min_histogram_bins == 20
        ctx = DistributionContext(outlier_z_threshold=2.5)
        assert ensure_context(ctx) is ctx

    def test_wrong_type(self):
        with pytest.raises(TypeError):
            ensure_context(42)


class TestCleanSample:
    def test_copies_and_flattens(self):
        raw = np.array([[1.0, 2.0], [3.0, 4.0]])
        out = clean_sample(raw, DistributionContext())
        raw[0, 0] = 99.0
        assert out.tolist() == [1.0, 2.0, 3.0, 4.0]

    def test_nan_policies(self):
        raw = [1.0, np.nan, 2.0, np.inf, 3.0]
        assert clean_sample(raw, DistributionContext(nan_policy="omit")).tolist() == [1.0, 2.0, 3.0]
        assert clean_sample(raw, DistributionContext()).size == 5
