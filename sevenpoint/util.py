import numpy as np


def vector_to_cross_product_matrix(vector):
    """Skew-symmetric matrix [v]x, so that [v]x @ w == np.cross(v, w)"""
    vector = np.asarray(vector, dtype=np.float64)
    assert vector.shape == (3,)
    return np.array([[0, -vector[2], vector[1]],
                     [vector[2], 0, -vector[0]],
                     [-vector[1], vector[0], 0]])


def rotation_translation_to_pose(rotation, translation):
    """Takes rotation/translation of camera with respect to world coordinates, and returns a pose that has
    the world coordinates with respect to the camera coordinates"""
    assert rotation.shape == (3, 3)
    assert translation.shape == (3,)
    transposed_rotation = rotation.transpose()
    return np.vstack((np.hstack((transposed_rotation, (-1*transposed_rotation @ translation).reshape((3, 1)))),
                      [0, 0, 0, 1]))


def collect_symbolic_equation_with_respect_to_vars(eq, vars):
    """Splits a sympy expression into {monomial of vars: coefficient}"""
    assert isinstance(vars, list)
    eq = eq.expand()
    if len(vars) == 0:
        return {1: eq}
    var_map = eq.collect(vars[0], evaluate=False)
    final_var_map = {}
    for var_power in var_map:
        sub_expression = var_map[var_power]
        sub_var_map = collect_symbolic_equation_with_respect_to_vars(sub_expression, vars[1:])
        for sub_var_power in sub_var_map:
            final_var_map[var_power*sub_var_power] = sub_var_map[sub_var_power]
    return final_var_map
