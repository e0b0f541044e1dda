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

"""Module containing the closed-form solver of the linear equation."""

from polyroots.core import Scalar, Tensor
from polyroots.utils import as_coefficients, stack_roots


def solve_linear(a1: Scalar, a0: Scalar) -> Tensor:
    r"""Solve given linear equation.

    .. math:: a_1 x + a_0 = 0

    Args:
        a1: coefficient of :math:`x`.
        a0: constant term.

    Returns:
        A tensor of shape :math:`(N,)` with :math:`N \in \{0, 1\}` holding the root.

    Example:
        >>> solve_linear(2.0, -1.0)
        tensor([0.5000], dtype=torch.float64)

    .. note::
       A vanishing ``a1`` leaves either no solution or every real number as a solution. Neither has
       a finite encoding, so both return an empty tensor.

    """
    a1, a0 = as_coefficients(a1, a0)
    if a1 == 0:
        return stack_roots([], a1)
    return stack_roots([-a0 / a1], a1)
