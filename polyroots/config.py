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

import os
from dataclasses import dataclass

__all__ = ["PolyrootsConfig", "polyroots_config"]


@dataclass
class PolyrootsConfig:
    # accepted mismatch, in machine epsilons, between the constant term of a
    # Ferrari factorization and the depressed quartic it came from
    resolvent_ulps: float = 64.0
    # discriminants within this many machine epsilons of their rounding error
    # bound are treated as zero, i.e. the equation has a double root
    discriminant_ulps: float = 32.0


polyroots_config = PolyrootsConfig(
    resolvent_ulps=float(os.getenv("POLYROOTS_RESOLVENT_ULPS", "64")),
    discriminant_ulps=float(os.getenv("POLYROOTS_DISCRIMINANT_ULPS", "32")),
)
