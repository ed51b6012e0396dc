import matplotlib.pyplot as plt
import numpy as np

CANDIDATE_COLORS = ['#ff245c', '#24d2ff', '#e7ed46']


def _draw_line(axes, line, x_limits, color):
    # ax + by + c = 0
    a, b, c = line
    xs = np.asarray(x_limits)
    axes.plot(xs, -(c + a * xs) / b, linewidth=1, color=color)


def plot_epipolar_lines(img0_points, img1_points, fundamental_matrices):
    """Draws the points of both images and, for every candidate, the epipolar lines of image 1.
    Returns the figure so the caller decides whether to show or save it."""
    img0_points = np.asarray(img0_points)
    img1_points = np.asarray(img1_points)
    figure, axes = plt.subplots()
    axes.scatter(img1_points[:, 0], img1_points[:, 1], facecolors='none', edgecolors='k')
    margin = 0.1 * np.ptp(img1_points[:, 0])
    x_limits = (img1_points[:, 0].min() - margin, img1_points[:, 0].max() + margin)
    for fundamental_matrix, color in zip(fundamental_matrices, CANDIDATE_COLORS):
        for img0_pt in img0_points:
            line = fundamental_matrix @ np.asarray([img0_pt[0], img0_pt[1], 1])
            _draw_line(axes, line, x_limits, color)
    axes.set_xlim(*x_limits)
    margin = 0.1 * np.ptp(img1_points[:, 1])
    axes.set_ylim(img1_points[:, 1].min() - margin, img1_points[:, 1].max() + margin)
    axes.set_title("epipolar lines of %d candidate(s)" % len(fundamental_matrices))
    return figure
