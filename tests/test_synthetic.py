import numpy as np
import pytest

from sevenpoint import epipolar, synthetic


def test_random_rotation_is_a_rotation():
    rng = np.random.default_rng(11)
    rotation = synthetic.random_rotation(rng, min_angle=0.3, max_angle=0.3)
    np.testing.assert_allclose(rotation @ rotation.T, np.identity(3), atol=1e-12)
    assert np.linalg.det(rotation) == pytest.approx(1)
    # the trace of a rotation by theta is 1 + 2 cos(theta)
    assert np.trace(rotation) == pytest.approx(1 + 2 * np.cos(0.3))


def test_project_points():
    camera_matrix = np.hstack((np.identity(3), np.zeros((3, 1))))
    projected = synthetic.project_points(camera_matrix, np.asarray([[2.0, 4.0, 2.0], [0.0, 0.0, 5.0]]))
    np.testing.assert_allclose(projected, [[1, 2], [0, 0]])


def test_correspondences_with_intrinsics():
    rng = np.random.default_rng(5)
    intrinsic_camera_matrix = np.asarray([[500.0, 0.0, 320.0],
                                          [0.0, 500.0, 240.0],
                                          [0.0, 0.0, 1.0]])
    data, fundamental_matrix = synthetic.make_correspondences(rng, num_points=12,
                                                              intrinsic_camera_matrix=intrinsic_camera_matrix)
    assert data.shape == (12, 4)
    assert fundamental_matrix[2, 2] == 1.0
    singular_values = np.linalg.svd(fundamental_matrix, compute_uv=False)
    assert singular_values[2] < 1e-8 * singular_values[0]
    distances = epipolar.sampson_distances(fundamental_matrix, data[:, :2], data[:, 2:4])
    assert distances.max() < 1e-12
