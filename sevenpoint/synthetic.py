# Noise-free two-view scenes with a known fundamental matrix

import numpy as np

from . import util


def random_rotation(rng, min_angle=0.2, max_angle=0.5):
    """Rotation about a random axis by a random angle, using Rodrigues' formula"""
    axis = rng.normal(size=3)
    axis /= np.linalg.norm(axis)
    angle = rng.uniform(min_angle, max_angle)
    k = util.vector_to_cross_product_matrix(axis)
    return np.identity(3) + np.sin(angle) * k + (1 - np.cos(angle)) * (k @ k)


def fundamental_from_pose(pose, intrinsic_camera_matrix):
    """Fundamental matrix between a camera at the world origin and a camera with the given pose,
    both sharing one intrinsic matrix. The result is scaled so that F[2, 2] == 1."""
    assert pose.shape == (4, 4)
    # the pose maps world (= camera 0) coordinates into camera 1: x1 = R x0 + t, so E = [t]x R
    essential_matrix = util.vector_to_cross_product_matrix(pose[:3, 3]) @ pose[:3, :3]
    intrinsic_inverse = np.linalg.inv(intrinsic_camera_matrix)
    fundamental_matrix = intrinsic_inverse.T @ essential_matrix @ intrinsic_inverse
    return fundamental_matrix / fundamental_matrix[2, 2]


def project_points(camera_matrix, points_3d):
    """Projects (N, 3) world points with a 3x4 camera matrix into (N, 2) image points"""
    assert camera_matrix.shape == (3, 4)
    points_with_w = np.hstack((points_3d, np.ones((len(points_3d), 1))))
    projected = points_with_w @ camera_matrix.T
    return projected[:, :2] / projected[:, 2:]


def make_correspondences(rng, num_points=7, intrinsic_camera_matrix=None):
    """Returns an (N, 4) table of exact matches (x0, y0, x1, y1) and the fundamental matrix relating them"""
    if intrinsic_camera_matrix is None:
        intrinsic_camera_matrix = np.identity(3)
    points_3d = np.column_stack((rng.uniform(-2, 2, num_points),
                                 rng.uniform(-2, 2, num_points),
                                 rng.uniform(4, 6, num_points)))

    rotation = random_rotation(rng)
    translation = rng.normal(size=3)
    translation /= np.linalg.norm(translation)
    pose = util.rotation_translation_to_pose(rotation, translation)

    img0_camera_matrix = intrinsic_camera_matrix @ np.hstack((np.identity(3), np.zeros((3, 1))))
    img1_camera_matrix = intrinsic_camera_matrix @ pose[:3]
    img0_points = project_points(img0_camera_matrix, points_3d)
    img1_points = project_points(img1_camera_matrix, points_3d)
    return np.hstack((img0_points, img1_points)), fundamental_from_pose(pose, intrinsic_camera_matrix)
