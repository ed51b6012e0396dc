import numpy as np

from sevenpoint import opencv, seven_point


def test_opencv_and_estimate_both_recover_ground_truth(scene):
    data, true_fundamental = scene
    # OpenCV may scale its candidates differently, bring them to F[2, 2] == 1 as well
    theirs = [c / c[2, 2] for c in opencv.find_fundamental_mat_seven_point(data[:, :2], data[:, 2:4])]
    success, mine = seven_point.estimate(data, list(range(7)))
    assert success
    assert theirs
    for candidates in (theirs, mine):
        errors = [np.linalg.norm(c - true_fundamental) / np.linalg.norm(true_fundamental) for c in candidates]
        assert min(errors) < 1e-5
