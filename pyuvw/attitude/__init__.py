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

"""
Attitude module for receiver orientations.

This module builds and checks the global-to-local rotation matrices consumed
by the direction-cosine conversion:
- Single-axis frame rotations and roll-pitch-yaw DCMs
- Rotations from a boresight pointing direction
- Proper-rotation validation

All rotations assume right-hand coordinate frames with euler angles in the order
'roll-pitch-yaw' and DCMs with the order of 'ZYX'.
"""

from .dcm import boresight2dcm, is_rotation_matrix, validate_rotations
from .euler import euler2dcm, euler2dcm_batch, rot_x, rot_y, rot_z

__all__ = [
    'rot_x', 'rot_y', 'rot_z', 'euler2dcm', 'euler2dcm_batch',
    'boresight2dcm', 'is_rotation_matrix', 'validate_rotations',
]
