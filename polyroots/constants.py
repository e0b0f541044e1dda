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

import torch

__all__ = ["ROOT_TOLERANCES", "pi"]

pi = torch.tensor(3.14159265358979323846, dtype=torch.float64)

# {dtype: relative error bound of a returned root}
ROOT_TOLERANCES = {
    torch.float32: 5e-7,
    torch.float64: 5e-15,
}
