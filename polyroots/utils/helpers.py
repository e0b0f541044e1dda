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

from __future__ import annotations

import numbers
from functools import cmp_to_key
from typing import List, Optional, Sequence, Tuple

import torch

from polyroots.core import Scalar, Tensor, as_tensor, stack
from polyroots.core.check import (
    POLYROOTS_CHECK_IS_SCALAR,
    POLYROOTS_CHECK_SAME_DEVICES,
    POLYROOTS_CHECK_SAME_DTYPES,
    POLYROOTS_CHECK_TYPE,
)


def _extract_device_dtype(tensor_list: List[Optional[Tensor]]) -> Tuple[torch.device, torch.dtype]:
    """Check if all the tensor inputs share device and dtype.

    If so, it would return a tuple of (device, dtype). Default: (cpu, ``torch.float64``), since a python
    float is a double. Integer tensors are promoted to ``torch.float64`` as well.

    Returns:
        [torch.device, torch.dtype]
    """
    tensors = [tensor for tensor in tensor_list if isinstance(tensor, Tensor)]
    if len(tensors) == 0:
        return (torch.device("cpu"), torch.float64)

    POLYROOTS_CHECK_SAME_DEVICES(tensors)
    POLYROOTS_CHECK_SAME_DTYPES(tensors)
    device, dtype = tensors[0].device, tensors[0].dtype
    if not dtype.is_floating_point:
        dtype = torch.float64
    return (device, dtype)


def as_coefficients(*coeffs: Scalar) -> Tuple[Tensor, ...]:
    r"""Convert polynomial coefficients into 0-d tensors of a common precision.

    Real numbers adopt the device and dtype of the tensor coefficients; if there are none the
    coefficients are evaluated in double precision.

    Args:
        coeffs: real numbers (python, numpy or any :class:`numbers.Real`) or 0-d tensors, highest degree
            first.

    Returns:
        a tuple with one 0-d tensor per coefficient.

    Example:
        >>> a, b = as_coefficients(torch.tensor(1.0, dtype=torch.float32), 2)
        >>> b.dtype
        torch.float32

    """
    for coeff in coeffs:
        POLYROOTS_CHECK_TYPE(coeff, (Tensor, numbers.Real), "Coefficients must be real numbers or 0-d tensors.")
        if isinstance(coeff, Tensor):
            POLYROOTS_CHECK_IS_SCALAR(coeff, "Coefficients must be real numbers or 0-d tensors.")

    device, dtype = _extract_device_dtype(list(coeffs))
    return tuple(
        as_tensor(coeff if isinstance(coeff, Tensor) else float(coeff), device=device, dtype=dtype) for coeff in coeffs
    )


def _compare(lhs: float, rhs: float) -> int:
    if lhs < rhs:
        return -1
    if lhs > rhs:
        return 1
    # equal, or incomparable because one of them is NaN
    return 0


def stack_roots(roots: Sequence[Tensor], like: Tensor) -> Tensor:
    """Pack a list of 0-d roots into a 1-d tensor with the precision of ``like``."""
    if len(roots) == 0:
        return like.new_zeros((0,))
    return stack(list(roots))


def sort_roots(roots: Tensor) -> Tensor:
    r"""Sort roots ascending and drop adjacent duplicates.

    NaN values compare equal to everything, so the sort never fails and keeps the relative
    position of NaN entries. Duplicates are removed with exact floating point equality, callers
    needing a tolerance must merge close roots themselves.

    The result is built by indexing ``roots`` so gradients flow back to the coefficients.

    Args:
        roots: a 1-d tensor of roots.

    Returns:
        the strictly ascending roots.

    Example:
        >>> sort_roots(torch.tensor([2.0, -1.0, 2.0]))
        tensor([-1.,  2.])

    """
    if roots.numel() < 2:
        return roots

    values = roots.detach().tolist()
    order = sorted(range(len(values)), key=cmp_to_key(lambda i, j: _compare(values[i], values[j])))
    keep = [order[0]]
    for prev, idx in zip(order[:-1], order[1:]):
        if values[idx] != values[prev]:
            keep.append(idx)
    return roots[torch.tensor(keep, dtype=torch.long, device=roots.device)]


def polyval(coeffs: Sequence[Scalar], x: Tensor) -> Tensor:
    r"""Evaluate a polynomial with Horner's scheme.

    .. math:: coeffs[0]x^n + coeffs[1]x^{n-1} + \dots + coeffs[n]

    Args:
        coeffs: the coefficients, highest degree first.
        x: the evaluation points, any shape.

    Returns:
        a tensor with the shape of ``x`` holding the polynomial values.

    Example:
        >>> polyval([1.0, 0.0, -1.0], torch.tensor([-1.0, 0.0, 2.0]))
        tensor([ 0., -1.,  3.])

    """
    out = torch.zeros_like(x)
    for coeff in coeffs:
        out = out * x + coeff
    return out
