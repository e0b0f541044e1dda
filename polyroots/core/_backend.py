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

from typing import Union

import torch

# classes
Tensor = torch.Tensor
Dtype = torch.dtype
Device = torch.device

# functions
# NOTE: only the elementwise ops the closed-form solvers need
acos = torch.acos
clamp = torch.clamp
concatenate = torch.cat
cos = torch.cos
sqrt = torch.sqrt
stack = torch.stack

# constructors
as_tensor = torch.as_tensor

# a coefficient is either a python number or a 0-d tensor
Scalar = Union[float, int, Tensor]
