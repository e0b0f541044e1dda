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

"""Module containing the closed-form solver of the biquadratic equation."""

import torch

from polyroots.core import Scalar, Tensor, sqrt
from polyroots.solvers.quadratic import solve_quadratic
from polyroots.utils import as_coefficients, sort_roots, stack_roots


def solve_biquadratic(a4: Scalar, a2: Scalar, a0: Scalar) -> Tensor:
    r"""Solve given biquadratic equation.

    .. math:: a_4 x^4 + a_2 x^2 + a_0 = 0

    The substitution :math:`z = x^2` leaves a quadratic equation in :math:`z`. Every positive
    :math:`z` gives the pair :math:`\pm\sqrt{z}`, :math:`z = 0` gives the single root zero and
    negative :math:`z` gives no real root.

    Args:
        a4: coefficient of :math:`x^4`, expected to be non-zero.
        a2: coefficient of :math:`x^2`.
        a0: constant term.

    Returns:
        A tensor of shape :math:`(N,)`, :math:`N \le 4`, with the ascending real roots.

    Example:
        >>> solve_biquadratic(1.0, -5.0, 4.0)
        tensor([-2., -1.,  1.,  2.], dtype=torch.float64)

    """
    a4, a2, a0 = as_coefficients(a4, a2, a0)

    roots = []
    for z in solve_quadratic(a4, a2, a0):
        if z > 0:
            sqrt_z = sqrt(z)
            roots += [-sqrt_z, sqrt_z]
        elif z == 0:
            roots.append(torch.zeros_like(z))

    return sort_roots(stack_roots(roots, a4))
