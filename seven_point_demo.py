#!/usr/bin/env python3

import sys

import numpy as np

from sevenpoint import epipolar, logger, opencv, seven_point, synthetic

INTRINSIC_CAMERA_MATRIX = np.asarray([[500.0, 0.0, 320.0],
                                      [0.0, 500.0, 240.0],
                                      [0.0, 0.0, 1.0]])


def normalize_correspondences(data, intrinsic_camera_matrix):
    """Maps pixel matches (x0, y0, x1, y1) into normalized camera coordinates"""
    intrinsic_inverse = np.linalg.inv(intrinsic_camera_matrix)
    return np.hstack(((epipolar.to_homogenous_coordinates(data[:, :2]) @ intrinsic_inverse.T)[:, :2],
                      (epipolar.to_homogenous_coordinates(data[:, 2:4]) @ intrinsic_inverse.T)[:, :2]))


def estimate_in_pixels(data, sample, intrinsic_camera_matrix):
    """Runs the seven-point estimator on normalized points and returns pixel space candidates, F[2, 2] == 1"""
    success, candidates = seven_point.estimate(normalize_correspondences(data, intrinsic_camera_matrix), sample)
    # F = K^-T F_normalized K^-1
    intrinsic_inverse = np.linalg.inv(intrinsic_camera_matrix)
    candidates = [intrinsic_inverse.T @ candidate @ intrinsic_inverse for candidate in candidates]
    return success, [candidate / candidate[2, 2] for candidate in candidates]


def main(argv):
    seed = int(argv[1]) if len(argv) > 1 and argv[1] != "--plot" else 0
    show_plot = "--plot" in argv
    logger.set_log_level("DEBUG")

    rng = np.random.default_rng(seed)
    data, true_fundamental = synthetic.make_correspondences(rng, num_points=20,
                                                            intrinsic_camera_matrix=INTRINSIC_CAMERA_MATRIX)
    img0_points, img1_points = data[:, :2], data[:, 2:4]

    sample = sorted(rng.choice(len(data), seven_point.SAMPLE_SIZE, replace=False))
    success, candidates = estimate_in_pixels(data, sample, INTRINSIC_CAMERA_MATRIX)
    print("sample: ", sample, " success: ", success)

    print("true fundamental matrix")
    print(true_fundamental)
    for i, candidate in enumerate(candidates):
        print("my candidate %d" % i)
        print(candidate)
        print("max sampson distance over all %d matches: %g"
              % (len(data), epipolar.sampson_distances(candidate, img0_points, img1_points).max()))

    print("their candidates")
    for candidate in opencv.find_fundamental_mat_seven_point(img0_points[sample], img1_points[sample]):
        print(candidate)

    if show_plot:
        import matplotlib.pyplot as plt
        from sevenpoint import plot
        plot.plot_epipolar_lines(img0_points, img1_points, candidates)
        plt.show()


if __name__ == "__main__":
    main(sys.argv)
