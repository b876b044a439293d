import multiprocessing as mp

import numpy as np
import pytest

from empstats import DistributionContext, EmpiricalDistribution


@pytest.fixture(autouse=True)
def _stable_seed():
    # Keep global state stable for any code that still touches np.random.*
    np.random.seed(42)


@pytest.fixture(scope="session", autouse=True)
def _set_spawn_start_method():
    try:
        mp.set_start_method("spawn")
    except RuntimeError:
        pass  # already set


@pytest.fixture
def sample_data():
    """Fixture providing sample data for testing"""
    np.random.seed(42)
    return np.random.normal(5.0, 2.0, 1000)


@pytest.fixture
def skewed_data():
    """Right-skewed sample (exponential)"""
    rng = np.random.default_rng(7)
    return rng.exponential(1.0, 2000)


@pytest.fixture
def small_data():
    """Tiny hand-checkable sample in unsorted order"""
    return np.array([3.0, 1.0, 4.0, 1.0, 5.0, 9.0, 2.0, 6.0])


@pytest.fixture
def distribution(sample_data):
    """Analysed distribution over the normal sample"""
    return EmpiricalDistribution(sample_data)


@pytest.fixture
def ctx_basic():
    """Basic context for engine tests"""
    return DistributionContext(min_histogram_bins=10, outlier_z_threshold=3.0)
