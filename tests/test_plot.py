import matplotlib
matplotlib.use("Agg")
import numpy as np

from sevenpoint import plot, seven_point


def test_one_line_per_point_and_candidate(scene):
    data, _ = scene
    _, candidates = seven_point.estimate(data, list(range(7)))
    figure = plot.plot_epipolar_lines(data[:, :2], data[:, 2:4], candidates)
    axes = figure.axes[0]
    assert len(axes.lines) == 7 * len(candidates)
    assert str(len(candidates)) in axes.get_title()
    matplotlib.pyplot.close(figure)
