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

"""Argument guards used by the public solvers."""

from __future__ import annotations

import os
from typing import Optional, TypeVar

import torch
from typing_extensions import TypeGuard

from polyroots.core.exceptions import (
    BaseError,
    DeviceError,
    ShapeError,
    TypeCheckError,
)

__all__ = [
    "POLYROOTS_CHECK",
    "POLYROOTS_CHECK_IS_SCALAR",
    "POLYROOTS_CHECK_SAME_DEVICES",
    "POLYROOTS_CHECK_SAME_DTYPES",
    "POLYROOTS_CHECK_TYPE",
    "are_checks_enabled",
    "disable_checks",
    "enable_checks",
]


def _should_enable_checks() -> bool:
    """Determine if checks should be enabled.

    Checks are enabled by default in debug mode (normal Python execution).
    Checks are disabled when:
    - Running with `python -O` (optimized mode)
    - Environment variable POLYROOTS_CHECKS=0 is set
    """
    env_var = os.getenv("POLYROOTS_CHECKS", None)
    if env_var is not None:
        return env_var.lower() in ("1", "true", "yes", "on")
    return __debug__


# Module-level flag - evaluated once at import time, but can be changed at runtime
_POLYROOTS_CHECKS_ENABLED: bool = _should_enable_checks()


def are_checks_enabled() -> bool:
    """Check if validation is currently enabled.

    Example:
        >>> are_checks_enabled()
        True
    """
    return _POLYROOTS_CHECKS_ENABLED


def disable_checks() -> None:
    """Disable the argument checks of every solver.

    Example:
        >>> disable_checks()
        >>> are_checks_enabled()
        False
        >>> enable_checks()
    """
    global _POLYROOTS_CHECKS_ENABLED  # noqa: PLW0603
    _POLYROOTS_CHECKS_ENABLED = False


def enable_checks() -> None:
    """Enable the argument checks of every solver.

    Example:
        >>> enable_checks()
        >>> are_checks_enabled()
        True
    """
    global _POLYROOTS_CHECKS_ENABLED  # noqa: PLW0603
    _POLYROOTS_CHECKS_ENABLED = True


def POLYROOTS_CHECK(condition: bool, msg: Optional[str] = None, raises: bool = True) -> bool:
    """Check any arbitrary boolean condition.

    Args:
        condition: the condition to evaluate.
        msg: message to show in the exception.
        raises: bool indicating whether an exception should be raised upon failure.

    Raises:
        BaseError: if the condition is not met and raises is True.

    Example:
        >>> POLYROOTS_CHECK(3 > 2, "Invalid degree")
        True

    """
    if not _POLYROOTS_CHECKS_ENABLED:
        return True

    if not condition:
        if raises:
            raise BaseError(msg if msg is not None else "Validation condition failed")
        return False
    return True


T = TypeVar("T", bound=type)


def POLYROOTS_CHECK_TYPE(
    x: object, typ: T | tuple[T, ...], msg: Optional[str] = None, raises: bool = True
) -> TypeGuard[T]:
    """Check the type of an arbitrary variable.

    Args:
        x: any input variable.
        typ: the expected type of the variable.
        msg: message to show in the exception.
        raises: bool indicating whether an exception should be raised upon failure.

    Raises:
        TypeCheckError: if the input variable does not match with the expected and raises is True.

    Example:
        >>> POLYROOTS_CHECK_TYPE(1.0, (int, float), "Invalid coefficient")
        True

    """
    if not _POLYROOTS_CHECKS_ENABLED:
        return True

    if not isinstance(x, typ):
        if raises:
            expected_type_str = typ.__name__ if not isinstance(typ, tuple) else " | ".join(t.__name__ for t in typ)
            error_msg = f"Type mismatch: expected {expected_type_str}, got {type(x).__name__}."
            if msg is not None:
                error_msg += f"\n  {msg}"
            raise TypeCheckError(
                error_msg,
                actual_type=type(x),
                expected_type=typ,
            )
        return False
    return True


def POLYROOTS_CHECK_IS_SCALAR(x: torch.Tensor, msg: Optional[str] = None, raises: bool = True) -> bool:
    """Check whether a tensor holds exactly one value with no dimensions.

    Args:
        x: the tensor to evaluate.
        msg: optional custom message to append to error.
        raises: bool indicating whether an exception should be raised upon failure.

    Raises:
        ShapeError: if the input tensor is not 0-d and raises is True.

    Example:
        >>> POLYROOTS_CHECK_IS_SCALAR(torch.tensor(2.0))
        True
        >>> POLYROOTS_CHECK_IS_SCALAR(torch.rand(2), raises=False)
        False

    """
    if not _POLYROOTS_CHECKS_ENABLED:
        return True

    if x.dim() != 0:
        if raises:
            x_shape_list = list(x.shape)
            error_msg = f"Shape dimension mismatch: expected a 0-d tensor, got {x.dim()} dimensions.\n"
            error_msg += f"  Actual shape: {x_shape_list}"
            if msg is not None:
                error_msg += f"\n  {msg}"
            raise ShapeError(
                error_msg,
                actual_shape=x_shape_list,
                expected_shape=[],
            )
        return False
    return True


def POLYROOTS_CHECK_SAME_DEVICES(tensors: list[torch.Tensor], msg: Optional[str] = None, raises: bool = True) -> bool:
    """Check whether a list provided tensors live in the same device.

    Args:
        tensors: a list of tensors.
        msg: message to show in the exception.
        raises: bool indicating whether an exception should be raised upon failure.

    Raises:
        DeviceError: if all the tensors are not in the same device and raises is True.

    Example:
        >>> POLYROOTS_CHECK_SAME_DEVICES([torch.tensor(1.0), torch.tensor(2.0)])
        True

    """
    if not _POLYROOTS_CHECKS_ENABLED:
        return True

    POLYROOTS_CHECK(isinstance(tensors, list) and len(tensors) >= 1, "Expected a list with at least one element", raises)
    if not all(tensors[0].device == x.device for x in tensors):
        if raises:
            devices = [x.device for x in tensors]
            error_msg = "Device mismatch: all coefficients must be on the same device.\n"
            error_msg += f"  Expected device: {tensors[0].device}\n"
            error_msg += f"  Actual devices: {devices}"
            if msg is not None:
                error_msg += f"\n  {msg}"
            raise DeviceError(
                error_msg,
                actual_devices=devices,
                expected_device=tensors[0].device,
            )
        return False
    return True


def POLYROOTS_CHECK_SAME_DTYPES(tensors: list[torch.Tensor], msg: Optional[str] = None, raises: bool = True) -> bool:
    """Check whether a list provided tensors share one dtype.

    Args:
        tensors: a list of tensors.
        msg: message to show in the exception.
        raises: bool indicating whether an exception should be raised upon failure.

    Raises:
        TypeCheckError: if the tensors do not share the same dtype and raises is True.

    Example:
        >>> POLYROOTS_CHECK_SAME_DTYPES([torch.tensor(1.0), torch.tensor(2.0)])
        True

    """
    if not _POLYROOTS_CHECKS_ENABLED:
        return True

    POLYROOTS_CHECK(isinstance(tensors, list) and len(tensors) >= 1, "Expected a list with at least one element", raises)
    if not all(tensors[0].dtype == x.dtype for x in tensors):
        if raises:
            dtypes = [x.dtype for x in tensors]
            error_msg = "Precision mismatch: all coefficients must share one dtype.\n"
            error_msg += f"  Expected dtype: {tensors[0].dtype}\n"
            error_msg += f"  Actual dtypes: {dtypes}"
            if msg is not None:
                error_msg += f"\n  {msg}"
            raise TypeCheckError(
                error_msg,
                actual_type=dtypes,
                expected_type=tensors[0].dtype,
            )
        return False
    return True
