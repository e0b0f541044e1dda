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

from .biquadratic import solve_biquadratic
from .cubic import solve_cubic, solve_cubic_depressed, solve_cubic_normalized
from .linear import solve_linear
from .quadratic import solve_quadratic
from .quartic import solve_quartic, solve_quartic_depressed

__all__ = [
    "solve_biquadratic",
    "solve_cubic",
    "solve_cubic_depressed",
    "solve_cubic_normalized",
    "solve_linear",
    "solve_quadratic",
    "solve_quartic",
    "solve_quartic_depressed",
]
