import numpy as np
import pytest

from sevenpoint import logger, synthetic


@pytest.fixture(params=[0, 1, 2, 3, 4])
def scene(request):
    """Seven exact matches and the fundamental matrix they were generated from"""
    rng = np.random.default_rng(request.param)
    return synthetic.make_correspondences(rng, num_points=7)


@pytest.fixture
def restore_log_level():
    saved = logger.LOG_LEVEL
    yield
    logger.LOG_LEVEL = saved