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

# NOTE: core and utils must go first since the solvers are built on top of them
# and by changing the import order you might get into a circular dependencies issue.
from . import core
from . import utils
from . import solvers

# import the other modules for convenience
from . import config, constants

# NOTE: we are going to expose to top level the public solvers only
from polyroots.solvers import (
    solve_biquadratic,
    solve_cubic,
    solve_cubic_depressed,
    solve_cubic_normalized,
    solve_linear,
    solve_quadratic,
    solve_quartic,
    solve_quartic_depressed,
)
from polyroots.utils import polyval

# Version variable
__version__ = "0.1.0"
