# Copyright 2024 inuex35
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

"""Core Module.

This module provides the building blocks shared by the conversion code:

- **Constants**: tolerances and reference values (origin, identity, axes)
- **Data Structures**: ReceiverPose and the DegeneratePolicy enum
- **Configuration**: ConversionConfig defaults with dictionary loading
- **Exceptions**: the PyUVWError hierarchy

Example Usage:
    >>> from pyuvw.core import ConversionConfig, ReceiverPose
    >>>
    >>> config = ConversionConfig.from_dict({'include_w': True, 'degenerate': 'nan'})
    >>> pose = ReceiverPose(position=[0.0, 0.0, 10.0])
    >>> pose.boresight
    array([0., 0., 1.])
"""

from .config import DEFAULT_CONFIG, ConversionConfig
from .constants import *
from .data_structures import DegeneratePolicy, ReceiverPose, stack_poses
from .exceptions import (
    ConfigurationError,
    DegenerateGeometryError,
    InvalidRotationError,
    PyUVWError,
    ShapeMismatchError,
)
