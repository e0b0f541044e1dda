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

"""Module containing the closed-form solvers of the quartic equation."""

import logging
from typing import Optional

import torch

from polyroots.config import polyroots_config
from polyroots.core import Scalar, Tensor, concatenate, sqrt
from polyroots.solvers.biquadratic import solve_biquadratic
from polyroots.solvers.cubic import solve_cubic, solve_cubic_depressed, solve_cubic_normalized
from polyroots.solvers.quadratic import solve_quadratic
from polyroots.utils import as_coefficients, sort_roots

logger = logging.getLogger(__name__)


def _factorization_residual(m: Tensor, p: Tensor, q: Tensor, r: Tensor) -> Tensor:
    # the two Ferrari quadratics multiply back to y^4 + p*y^2 + q*y + c with
    # c = (p/2 + m)^2 - q^2/(8m); c == r for an exact resolvent root
    half_p_plus_m = 0.5 * p + m
    return torch.abs(half_p_plus_m * half_p_plus_m - q * q / (8 * m) - r)


def _resolvent_slope(m: Tensor, p: Tensor, r: Tensor) -> Tensor:
    # derivative of the monic resolvent m^3 + p*m^2 + (p^2/4 - r)*m - q^2/8
    return torch.abs(3 * m * m + 2 * p * m + 0.25 * p * p - r)


def _select_resolvent_root(resolvent: Tensor, p: Tensor, q: Tensor, r: Tensor) -> Optional[Tensor]:
    r"""Pick the resolvent root used to split the depressed quartic into two quadratics.

    Only positive roots give a real :math:`\sqrt{2m}`. The largest one is preferred, except when the
    resolvent has a double root: the quartic then has a repeated root and only the simple resolvent
    root keeps both copies in the same quadratic, so it is returned as is. When rounding made the
    largest root inconsistent every positive root is scanned and the one reproducing ``r`` best is returned.
    ``None`` means rounding left no positive root at all.
    """
    candidates = [m for m in resolvent if m > 0]
    if len(candidates) == 0:
        return None

    if len(resolvent) == 2 and len(candidates) == 2:
        # the double root is the one where the resolvent is flat
        return max(candidates, key=lambda m: _resolvent_slope(m, p, r).item())

    m0 = candidates[-1]
    half_p_plus_m = 0.5 * p + m0
    scale = torch.maximum(torch.maximum(half_p_plus_m * half_p_plus_m, q * q / (8 * m0)), torch.abs(r))
    tolerance = polyroots_config.resolvent_ulps * torch.finfo(r.dtype).eps * scale
    if _factorization_residual(m0, p, q, r) <= tolerance:
        return m0

    logger.debug(
        "Resolvent root %s does not factor y^4 + %s*y^2 + %s*y + %s, scanning %d candidates.",
        m0.item(),
        p.item(),
        q.item(),
        r.item(),
        len(candidates),
    )
    return min(candidates, key=lambda m: _factorization_residual(m, p, q, r).item())


def _solve_factor(s: Tensor, c: Tensor, error_mag: Tensor) -> Tensor:
    # y^2 + s*y + c = 0, one of the two Ferrari quadratics. A repeated root of the quartic
    # sits in a single factor, whose discriminant is zero up to rounding of size error_mag.
    delta = s * s - 4 * c
    tolerance = polyroots_config.discriminant_ulps * torch.finfo(c.dtype).eps * (s * s + error_mag)
    if torch.abs(delta) <= tolerance:
        return (-0.5 * s).reshape(1)
    return solve_quadratic(1.0, s, c)


def solve_quartic_depressed(p: Scalar, q: Scalar, r: Scalar) -> Tensor:
    r"""Solve given depressed quartic equation with Ferrari's method.

    .. math:: y^4 + p y^2 + q y + r = 0

    A positive root :math:`m` of the resolvent cubic

    .. math:: 8m^3 + 8p m^2 + (2p^2 - 8r) m - q^2 = 0

    splits the quartic into the two quadratics

    .. math::
        y^2 \pm \sqrt{2m}\, y + \frac{p}{2} + m \mp \frac{q}{2\sqrt{2m}} = 0

    Args:
        p: coefficient of :math:`y^2`.
        q: coefficient of :math:`y`.
        r: constant term.

    Returns:
        A tensor of shape :math:`(N,)`, :math:`N \le 4`, with the ascending real roots.

    Example:
        >>> solve_quartic_depressed(-5.0, 0.0, 4.0)
        tensor([-2., -1.,  1.,  2.], dtype=torch.float64)

    """
    p, q, r = as_coefficients(p, q, r)

    if q == 0:
        return solve_biquadratic(1.0, p, r)

    if r == 0:
        # y * (y^3 + p*y + q) = 0
        return sort_roots(concatenate([p.new_zeros((1,)), solve_cubic_depressed(p, q)]))

    # monic form of the resolvent cubic
    resolvent = solve_cubic_normalized(p, 0.25 * p * p - r, -0.125 * q * q)
    m0 = _select_resolvent_root(resolvent, p, q, r)
    if m0 is None:
        logger.debug("No positive resolvent root for q = %s, solving as a biquadratic.", q.item())
        return solve_biquadratic(1.0, p, r)

    sqrt_2m = sqrt(2 * m0)
    half_p_plus_m = 0.5 * p + m0
    q_term = q / (2 * sqrt_2m)
    # rounding in c, plus the rounding in m0 carried into both discriminants
    # -2m - 2p +- 2q/sqrt(2m) through their slope in m
    m_slope = 2 + 2 * torch.abs(q) / (sqrt_2m * sqrt_2m * sqrt_2m)
    error_mag = 4 * (torch.abs(0.5 * p) + m0 + torch.abs(q_term)) + m_slope * (torch.abs(p) + m0)

    roots = concatenate(
        [
            _solve_factor(sqrt_2m, half_p_plus_m - q_term, error_mag),
            _solve_factor(-sqrt_2m, half_p_plus_m + q_term, error_mag),
        ]
    )
    return sort_roots(roots)


def solve_quartic(a4: Scalar, a3: Scalar, a2: Scalar, a1: Scalar, a0: Scalar) -> Tensor:
    r"""Solve given quartic equation.

    The function takes the coefficients of quartic equation and returns the real roots.

    .. math:: a_4 x^4 + a_3 x^3 + a_2 x^2 + a_1 x + a_0 = 0

    Args:
        a4: coefficient of :math:`x^4`.
        a3: coefficient of :math:`x^3`.
        a2: coefficient of :math:`x^2`.
        a1: coefficient of :math:`x`.
        a0: constant term.

    Returns:
        A tensor of shape :math:`(N,)`, :math:`N \le 4`, with the ascending real roots. Precision is
        about 5e-15 for ``torch.float64`` and 5e-7 for ``torch.float32``.

    Example:
        >>> solve_quartic(1.0, 0.0, 0.0, 0.0, 0.0)
        tensor([0.], dtype=torch.float64)
        >>> solve_quartic(torch.tensor(1.0), 0.0, 0.0, 0.0, -1.0)
        tensor([-1.,  1.])

    .. note::
       Roots are sorted with NaN comparing equal to any value and duplicates are dropped with exact
       equality, a root of multiplicity four is therefore returned once.

    """
    a4, a3, a2, a1, a0 = as_coefficients(a4, a3, a2, a1, a0)

    if a4 == 0:
        # a3*x^3 + a2*x^2 + a1*x + a0 = 0
        roots = solve_cubic(a3, a2, a1, a0)
    elif a0 == 0:
        # x * (a4*x^3 + a3*x^2 + a2*x + a1) = 0
        roots = concatenate([a4.new_zeros((1,)), solve_cubic(a4, a3, a2, a1)])
    elif a1 == 0 and a3 == 0:
        # a4*x^4 + a2*x^2 + a0 = 0
        roots = solve_biquadratic(a4, a2, a0)
    else:
        # a4*x^4 + a3*x^3 + a2*x^2 + a1*x + a0 = 0 => x^4 + a*x^3 + b*x^2 + c*x + d = 0
        a, b, c, d = a3 / a4, a2 / a4, a1 / a4, a0 / a4
        # x = y - a/4 => y^4 + p*y^2 + q*y + r = 0
        a_2 = a * a
        subst = -a3 / (4 * a4)
        p = (8 * b - 3 * a_2) / 8
        q = (a_2 * a - 4 * a * b + 8 * c) / 8
        r = (256 * d - 3 * a_2 * a_2 - 64 * c * a + 16 * a_2 * b) / 256

        roots = solve_quartic_depressed(p, q, r) + subst

    return sort_roots(roots)
