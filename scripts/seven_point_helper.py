#!/usr/bin/env python3

import datetime
import sympy as sp

from sevenpoint import util

"""F = l*F1 + F2, where F1 is the difference of the two null space vectors. det(F) = 0 is a cubic in l."""

# Define symbolic vars
var_str = "l"
for i in range(2):
    for j in range(9):
        var_str += " f%d%d" % (i, j)
sp.var(var_str)

f1 = sp.Matrix([[f00, f01, f02], [f03, f04, f05], [f06, f07, f08]])
f2 = sp.Matrix([[f10, f11, f12], [f13, f14, f15], [f16, f17, f18]])

f = l*f1 + f2

# singularity condition
singularity_eq = f.det(method="berkowitz")
print(datetime.datetime.now(), 'determinant expanded')

var_map = util.collect_symbolic_equation_with_respect_to_vars(singularity_eq, [l])
for power in range(4):
    coefficient = var_map.get(l**power, 0)
    print("c[%d] =" % power, sp.factor_terms(coefficient))
print(datetime.datetime.now(), 'coefficients calculated')
