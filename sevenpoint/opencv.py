import cv2
import numpy as np


def find_fundamental_mat_seven_point(img0_points, img1_points):
    """OpenCV's seven-point solver, for comparison. Returns a list of up to three 3x3 matrices."""
    pts0 = np.ascontiguousarray(img0_points, dtype=np.float64)
    pts1 = np.ascontiguousarray(img1_points, dtype=np.float64)
    assert pts0.shape == pts1.shape == (7, 2)
    fundamental_matrices, _ = cv2.findFundamentalMat(pts0, pts1, cv2.FM_7POINT)
    if fundamental_matrices is None:
        return []
    # the candidates come stacked on top of each other as a (3n, 3) array
    return [fundamental_matrices[i:i + 3] for i in range(0, len(fundamental_matrices), 3)]
