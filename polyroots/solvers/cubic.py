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

"""Module containing the closed-form solvers of the cubic equation."""

import torch

from polyroots.config import polyroots_config
from polyroots.constants import pi
from polyroots.core import Scalar, Tensor, acos, clamp, concatenate, cos, sqrt
from polyroots.solvers.quadratic import solve_quadratic
from polyroots.utils import as_coefficients, sort_roots, stack_roots


def _cbrt(x: Tensor) -> Tensor:
    # real cube root, pow alone is NaN for negative bases
    return torch.sign(x) * torch.abs(x).pow(1.0 / 3.0)


def _discriminant_tolerance(q_2: Tensor, p_3: Tensor, p_mag: Tensor, q_mag: Tensor) -> Tensor:
    # first order bound of the rounding carried into (q/2)^2 + (p/3)^3 when p and q
    # were computed from terms of size p_mag and q_mag
    eps = torch.finfo(q_2.dtype).eps
    bound = q_2 * q_2 + torch.abs(p_3 * p_3 * p_3) + torch.abs(q_2) * q_mag + p_3 * p_3 * p_mag
    return polyroots_config.discriminant_ulps * eps * bound


def _solve_depressed(p: Tensor, q: Tensor, p_mag: Tensor, q_mag: Tensor) -> Tensor:
    if q == 0:
        # y * (y^2 + p) = 0
        roots = [torch.zeros_like(q)]
        if p < 0:
            sqrt_p = sqrt(-p)
            roots += [-sqrt_p, sqrt_p]
        return sort_roots(stack_roots(roots, q))

    if p == 0:
        return stack_roots([-_cbrt(q)], q)

    q_2 = 0.5 * q
    p_3 = p / 3
    delta = q_2 * q_2 + p_3 * p_3 * p_3

    if torch.abs(delta) <= _discriminant_tolerance(q_2, p_3, p_mag, q_mag):
        # simple root 2u and double root -u
        u = _cbrt(-q_2)
        return sort_roots(stack_roots([2 * u, -u], q))

    if delta > 0:
        # cbrt(-q/2 + sqrt(D)) + cbrt(-q/2 - sqrt(D)), with the second term recovered from
        # the product of both terms being -p/3 to avoid cancellation
        u = _cbrt(-q_2 - torch.copysign(sqrt(delta), q))
        return stack_roots([u - p_3 / u], q)

    # three distinct real roots, p < 0 here
    amplitude = 2 * sqrt(-p_3)
    cos_3phi = clamp(3 * q / (2 * p) * sqrt(-3 / p), -1.0, 1.0)
    phi = acos(cos_3phi) / 3
    _2PI_3 = 2 * pi.to(device=q.device, dtype=q.dtype) / 3
    roots = [amplitude * cos(phi - k * _2PI_3) for k in range(3)]
    return sort_roots(stack_roots(roots, q))


def solve_cubic_depressed(p: Scalar, q: Scalar) -> Tensor:
    r"""Solve given depressed cubic equation.

    .. math:: y^3 + p y + q = 0

    The roots are classified by the discriminant :math:`\Delta = (q/2)^2 + (p/3)^3`:

    - :math:`\Delta > 0`: one real root, Cardano's formula.
    - :math:`\Delta = 0`: a simple and a double root (a triple root when :math:`p = q = 0`).
    - :math:`\Delta < 0`: three real roots, trigonometric form (casus irreducibilis).

    :math:`\Delta` counts as zero when it lies within ``polyroots_config.discriminant_ulps`` machine
    epsilons of its rounding error, otherwise a double root would split into a complex pair.

    Args:
        p: coefficient of :math:`y`.
        q: constant term.

    Returns:
        A tensor of shape :math:`(N,)`, :math:`1 \le N \le 3`, with the ascending real roots.

    Example:
        >>> solve_cubic_depressed(-1.0, 0.0)
        tensor([-1.,  0.,  1.], dtype=torch.float64)

    """
    p, q = as_coefficients(p, q)
    return _solve_depressed(p, q, torch.abs(p), torch.abs(q))


def solve_cubic_normalized(a: Scalar, b: Scalar, c: Scalar) -> Tensor:
    r"""Solve given monic cubic equation.

    .. math:: x^3 + a x^2 + b x + c = 0

    The substitution :math:`x = y - a/3` removes the quadratic term, the resulting depressed cubic is
    solved as in :func:`solve_cubic_depressed` and its roots shifted back. A vanishing ``c`` factors
    out the root zero and leaves a quadratic.

    Args:
        a: coefficient of :math:`x^2`.
        b: coefficient of :math:`x`.
        c: constant term.

    Returns:
        A tensor of shape :math:`(N,)`, :math:`1 \le N \le 3`, with the ascending real roots.

    Example:
        >>> solve_cubic_normalized(0.0, -1.0, 0.0)
        tensor([-1.,  0.,  1.], dtype=torch.float64)

    """
    a, b, c = as_coefficients(a, b, c)

    if c == 0:
        # x * (x^2 + a*x + b) = 0
        return sort_roots(concatenate([a.new_zeros((1,)), solve_quadratic(1.0, a, b)]))

    a_3 = a / 3
    a_b = a_3 * b
    a_cube = 2 * a_3 * a_3 * a_3
    p = b - a * a_3
    q = a_cube - a_b + c

    # size of the terms p and q are built from
    p_mag = torch.abs(b) + torch.abs(a * a_3)
    q_mag = torch.abs(a_cube) + torch.abs(a_b) + torch.abs(c)

    y_roots = _solve_depressed(p, q, p_mag, q_mag)
    return sort_roots(y_roots - a_3)


def solve_cubic(a3: Scalar, a2: Scalar, a1: Scalar, a0: Scalar) -> Tensor:
    r"""Solve given cubic equation.

    The function takes the coefficients of cubic equation and returns the real roots.

    .. math:: a_3 x^3 + a_2 x^2 + a_1 x + a_0 = 0

    Args:
        a3: coefficient of :math:`x^3`.
        a2: coefficient of :math:`x^2`.
        a1: coefficient of :math:`x`.
        a0: constant term.

    Returns:
        A tensor of shape :math:`(N,)` with the ascending real roots. A true cubic always has at least
        one real root, a vanishing ``a3`` falls back to :func:`solve_quadratic`.

    Example:
        >>> roots = solve_cubic(2.0, 3.0, -11.0, -6.0)

    """
    a3, a2, a1, a0 = as_coefficients(a3, a2, a1, a0)
    if a3 == 0:
        return solve_quadratic(a2, a1, a0)

    return solve_cubic_normalized(a2 / a3, a1 / a3, a0 / a3)
