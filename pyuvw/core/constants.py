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
Numeric constants and defaults
==============================

Default tolerances and reference values used by the direction-cosine
conversion and the rotation helpers.
"""

import numpy as np

__all__ = [
    'ROTATION_TOL', 'ZERO_NORM_TOL', 'UNIT_NORM_TOL',
    'ORIGIN', 'IDENTITY', 'AXIS_X', 'AXIS_Y', 'AXIS_Z',
    'UV_DIM', 'UVW_DIM',
]
# ============================================================================
# TOLERANCES
# ============================================================================
ROTATION_TOL = 1e-9     # Max deviation of R^T R from I and det(R) from +1
ZERO_NORM_TOL = 0.0     # Local range at or below this is degenerate (m)
UNIT_NORM_TOL = 1e-9    # Expected accuracy of |[u, v, w]| = 1

# ============================================================================
# REFERENCE VALUES
# ============================================================================
ORIGIN = np.zeros(3, dtype=np.float64)
IDENTITY = np.eye(3, dtype=np.float64)

# Global axes, used as default "up" hints when building boresight frames
AXIS_X = np.array([1.0, 0.0, 0.0])
AXIS_Y = np.array([0.0, 1.0, 0.0])
AXIS_Z = np.array([0.0, 0.0, 1.0])

# Output dimensions
UV_DIM = 2
UVW_DIM = 3
