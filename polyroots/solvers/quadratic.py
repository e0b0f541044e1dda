# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright 2018 Kornia Team
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""Module containing the closed-form solver of the quadratic equation."""

from polyroots.core import Scalar, Tensor, sqrt
from polyroots.solvers.linear import solve_linear
from polyroots.utils import as_coefficients, sort_roots, stack_roots


# Reference : https://github.com/opencv/opencv/blob/4.x/modules/calib3d/src/polynom_solver.cpp
def solve_quadratic(a2: Scalar, a1: Scalar, a0: Scalar) -> Tensor:
    r"""Solve given quadratic equation.

    The function takes the coefficients of quadratic equation and returns the real roots.

    .. math:: a_2 x^2 + a_1 x + a_0 = 0

    Args:
        a2: coefficient of :math:`x^2`.
        a1: coefficient of :math:`x`.
        a0: constant term.

    Returns:
        A tensor of shape :math:`(N,)`, :math:`N \le 2`, with the ascending real roots.

    Example:
        >>> solve_quadratic(1.0, -5.0, 6.0)
        tensor([2., 3.], dtype=torch.float64)

    .. note::
       A double root is returned once and a negative discriminant gives an empty tensor. A vanishing
       ``a2`` falls back to :func:`solve_linear`.

    """
    a2, a1, a0 = as_coefficients(a2, a1, a0)
    if a2 == 0:
        return solve_linear(a1, a0)

    # Calculate discriminant
    delta = a1 * a1 - 4 * a2 * a0

    if delta < 0:
        return stack_roots([], a2)

    two_a = 2 * a2

    if delta == 0:
        return stack_roots([-a1 / two_a], a2)

    sqrt_delta = sqrt(delta)
    roots = stack_roots([(-a1 - sqrt_delta) / two_a, (-a1 + sqrt_delta) / two_a], a2)
    return sort_roots(roots)
