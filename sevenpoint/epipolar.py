# Epipolar constraint checks
#
# A fundamental matrix F maps a point a in image 0 onto its epipolar line F a in image 1, and the match b of a
# has to lie on that line: (b, 1)^T F (a, 1) = 0

import numpy as np


def to_homogenous_coordinates(points):
    """Appends a column of ones to an (N, 2) array of points"""
    points = np.asarray(points, dtype=np.float64)
    assert points.ndim == 2 and points.shape[1] == 2
    return np.hstack((points, np.ones((len(points), 1))))


def epipolar_residuals(fundamental_matrix, img0_points, img1_points):
    """Algebraic error (b, 1)^T F (a, 1) of every match, signed"""
    fundamental_matrix = np.asarray(fundamental_matrix)
    assert fundamental_matrix.shape == (3, 3)
    img0_points_with_z = to_homogenous_coordinates(img0_points)
    img1_points_with_z = to_homogenous_coordinates(img1_points)
    assert img0_points_with_z.shape == img1_points_with_z.shape
    return np.einsum("ij,jk,ik->i", img1_points_with_z, fundamental_matrix, img0_points_with_z)


def sampson_distances(fundamental_matrix, img0_points, img1_points):
    """First order approximation of the squared geometric distance of every match to its epipolar lines"""
    fundamental_matrix = np.asarray(fundamental_matrix)
    img0_points_with_z = to_homogenous_coordinates(img0_points)
    img1_points_with_z = to_homogenous_coordinates(img1_points)
    # epipolar lines in image 1 (F a) and in image 0 (F^T b)
    img1_lines = img0_points_with_z @ fundamental_matrix.T
    img0_lines = img1_points_with_z @ fundamental_matrix
    residuals = np.sum(img1_points_with_z * img1_lines, axis=1)
    denominator = img1_lines[:, 0]**2 + img1_lines[:, 1]**2 + img0_lines[:, 0]**2 + img0_lines[:, 1]**2
    return residuals**2 / denominator
