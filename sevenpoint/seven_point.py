# The seven-point algorithm
#
# Given exactly seven matching points in two images, calculates up to three fundamental matrices
# that map every one of them onto its epipolar line.

import operator

import numpy as np

from . import logger

SAMPLE_SIZE = 7
MAXIMUM_SOLUTIONS = 3
NORMALIZATION_EPSILON = np.finfo(np.float64).eps
IMAGINARY_THRESHOLD = 1e-12


def _check_sample(data, sample, sample_number):
    """Validates the correspondence table and the sample indices before anything is read from them"""
    if data.ndim != 2 or data.shape[1] < 4:
        raise ValueError("correspondences must be a 2D table with at least 4 columns (x0, y0, x1, y1), got shape %s"
                         % (data.shape,))
    if sample_number != SAMPLE_SIZE:
        raise ValueError("the seven-point algorithm needs a sample of %d correspondences, got %d"
                         % (SAMPLE_SIZE, sample_number))
    if len(sample) < sample_number:
        raise ValueError("expected %d sample indices, got %d" % (sample_number, len(sample)))
    for sample_idx in sample[:sample_number]:
        try:
            sample_idx = operator.index(sample_idx)
        except TypeError:
            raise ValueError("sample indices must be integers, got %r" % (sample_idx,)) from None
        if not 0 <= sample_idx < len(data):
            raise ValueError("sample index %d is out of range for %d correspondences" % (sample_idx, len(data)))


def build_coefficient_matrix(data, sample, sample_number=SAMPLE_SIZE):
    """Sets up the homogenous system of seven linear equations in the nine entries of the fundamental matrix."""
    data = np.asarray(data, dtype=np.float64)
    _check_sample(data, sample, sample_number)

    # Let a = (x0, y0) be the point in image 0 and b = (x1, y1) its match in image 1.
    # Each match must satisfy (b, 1)^T F (a, 1) = 0, which is linear in f = [f11 f12 f13 f21 ... f33]:
    # f∙c = 0, where c = [x1*x0, x1*y0, x1, y1*x0, y1*y0, y1, x0, y0, 1]
    coefficients = np.empty((sample_number, 9))
    for i, sample_idx in enumerate(sample[:sample_number]):
        x0, y0, x1, y1 = data[sample_idx, :4]
        coefficients[i] = [x1*x0, x1*y0, x1, y1*x0, y1*y0, y1, x0, y0, 1]
    return coefficients


def null_space_basis(coefficients):
    """Returns two vectors spanning the null space of the 7x9 coefficient matrix"""
    assert coefficients.shape == (SAMPLE_SIZE, 9)
    # Seven equations for nine unknowns leave a 2D solution space, spanned by the right singular vectors
    # of the two smallest singular values. Decomposing the 9x9 normal matrix is cheaper than decomposing
    # the coefficient matrix itself and gives the same right singular vectors.
    u, s, vh = np.linalg.svd(coefficients.T @ coefficients)
    return vh[7], vh[8]


def cubic_coefficients(basis_difference, f2):
    """Coefficients of det(lambda*basis_difference + f2), from the constant term up to lambda^3.

    Any fundamental matrix consistent with the sample is f = lambda*f1 + (1 - lambda)*f2, which is
    lambda*(f1 - f2) + f2. The rank 2 constraint det(f) = 0 is a cubic in lambda."""
    d = basis_difference
    assert d.shape == (9,) and f2.shape == (9,)

    # 2x2 minors of the bottom two rows of f2
    t0 = f2[4]*f2[8] - f2[5]*f2[7]
    t1 = f2[3]*f2[8] - f2[5]*f2[6]
    t2 = f2[3]*f2[7] - f2[4]*f2[6]

    c0 = f2[0]*t0 - f2[1]*t1 + f2[2]*t2

    c1 = (d[0]*t0 - d[1]*t1 + d[2]*t2
          - d[3]*(f2[1]*f2[8] - f2[2]*f2[7])
          + d[4]*(f2[0]*f2[8] - f2[2]*f2[6])
          - d[5]*(f2[0]*f2[7] - f2[1]*f2[6])
          + d[6]*(f2[1]*f2[5] - f2[2]*f2[4])
          - d[7]*(f2[0]*f2[5] - f2[2]*f2[3])
          + d[8]*(f2[0]*f2[4] - f2[1]*f2[3]))

    # same minors, of the difference vector
    t0 = d[4]*d[8] - d[5]*d[7]
    t1 = d[3]*d[8] - d[5]*d[6]
    t2 = d[3]*d[7] - d[4]*d[6]

    c2 = (f2[0]*t0 - f2[1]*t1 + f2[2]*t2
          - f2[3]*(d[1]*d[8] - d[2]*d[7])
          + f2[4]*(d[0]*d[8] - d[2]*d[6])
          - f2[5]*(d[0]*d[7] - d[1]*d[6])
          + f2[6]*(d[1]*d[5] - d[2]*d[4])
          - f2[7]*(d[0]*d[5] - d[2]*d[3])
          + f2[8]*(d[0]*d[4] - d[1]*d[3]))

    c3 = d[0]*t0 - d[1]*t1 + d[2]*t2

    return np.asarray([c0, c1, c2, c3])


def find_real_roots(coefficients):
    """Real roots of the polynomial with the given coefficients, lowest power first"""
    # polyroots trims vanishing leading coefficients, so a degenerate cubic is solved as a lower degree polynomial
    roots = np.polynomial.polynomial.polyroots(np.asarray(coefficients, dtype=np.float64))
    return [float(root.real) for root in np.atleast_1d(roots) if abs(root.imag) < IMAGINARY_THRESHOLD]


def fundamental_matrices_from_roots(basis_difference, f2, roots, models=None):
    """Forms one fundamental matrix per root, scaled so that F[2, 2] == 1.
    Roots where F[2, 2] vanishes cannot be scaled that way and are skipped."""
    if models is None:
        models = []
    for root in roots:
        s = basis_difference[8]*root + f2[8]
        if abs(s) <= NORMALIZATION_EPSILON:
            logger.debug("seven point - skipping root", root, "F[2, 2] is", s)
            continue
        mu = 1.0 / s
        lam = root * mu
        f = basis_difference[:8]*lam + f2[:8]*mu
        models.append(np.append(f, 1.0).reshape((3, 3)))
    return models


def estimate(data, sample, sample_number=SAMPLE_SIZE, models=None):
    """Estimates the fundamental matrices consistent with seven sampled correspondences.

    data is a table whose rows start with (x0, y0, x1, y1), a point in image 0 followed by its match in
    image 1, and sample holds the indices of the rows to use. Candidates are appended to models (a new
    list if not given), and (success, models) is returned. success is False when the sample is
    degenerate and should be discarded, in which case nothing is appended."""
    if models is None:
        models = []
    coefficients = build_coefficient_matrix(data, sample, sample_number)
    f1, f2 = null_space_basis(coefficients)
    basis_difference = f1 - f2

    polynomial = cubic_coefficients(basis_difference, f2)
    roots = find_real_roots(polynomial)
    if len(roots) < 1 or len(roots) > MAXIMUM_SOLUTIONS:
        logger.debug("seven point - unusable sample, found", len(roots), "real roots of", polynomial)
        return False, models

    fundamental_matrices_from_roots(basis_difference, f2, roots, models)
    return True, models
