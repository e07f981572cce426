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

"""Direction-cosine coordinate transformations

This module provides:
- cart2uv: global Cartesian points to receiver [u, v] / [u, v, w]
- Broadcasting of receiver positions and rotations to a point batch
- DirectionCosineConverter, an object wrapper holding a ConversionConfig
- cart2uv_frame, a pandas DataFrame front end

For building receiver rotation matrices, use pyuvw.attitude.
"""

from .broadcast import as_points, broadcast_positions, broadcast_rotations
from .converter import DirectionCosineConverter
from .frames import cart2uv_frame
from .uv_transforms import cart2uv
