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

"""Cartesian to direction-cosine (u-v-w) transformations"""

import logging
from typing import Optional

import numpy as np
from numba import njit

from ..attitude.dcm import validate_rotations
from ..core.config import DEFAULT_CONFIG, ConversionConfig
from ..core.constants import UV_DIM, UVW_DIM
from ..core.data_structures import DegeneratePolicy
from ..core.exceptions import DegenerateGeometryError
from .broadcast import as_points, broadcast_positions, broadcast_rotations

logger = logging.getLogger(__name__)


@njit(cache=True)
def _local_displacements(points, rx_pos, rotation):
    """d_i = R_i (p_i - r_i) for every row"""
    n = points.shape[0]
    out = np.empty((n, 3), dtype=np.double)
    for i in range(n):
        dx = points[i, 0] - rx_pos[i, 0]
        dy = points[i, 1] - rx_pos[i, 1]
        dz = points[i, 2] - rx_pos[i, 2]
        for k in range(3):
            out[i, k] = rotation[i, k, 0] * dx + rotation[i, k, 1] * dy + rotation[i, k, 2] * dz
    return out


def cart2uv(points: np.ndarray,
            rx_pos: Optional[np.ndarray] = None,
            rotation: Optional[np.ndarray] = None,
            include_w: Optional[bool] = None,
            *,
            degenerate=None,
            check_rotation: Optional[bool] = None,
            config: Optional[ConversionConfig] = None) -> np.ndarray:
    """Convert global Cartesian positions into receiver direction cosines

    Direction cosines u and v are the x and y coordinates of the unit vector
    from the receiver to the target, expressed in the receiver's local frame
    whose z-axis is the boresight. Assuming the target is in front of the
    receiver the third component is not needed, but it can be requested with
    `include_w` to resolve front/back ambiguity.

    Parameters
    ----------
    points : np.ndarray
        Target positions [x, y, z] in the global frame, shape (N, 3) or (3,)
    rx_pos : np.ndarray, optional
        Receiver positions, shape (3,), (1, 3) or (N, 3). Omitted or empty
        places every receiver at the origin; a single position is shared by
        all points.
    rotation : np.ndarray, optional
        Global-to-local rotation matrices, shape (3, 3), (1, 3, 3) or
        (N, 3, 3). Omitted or empty means the identity; a single matrix is
        shared by all points.
    include_w : bool, optional
        Also return the third component w. Defaults to config.include_w
        (False).
    degenerate : DegeneratePolicy or str, optional
        'raise' (default) or 'nan' when a target coincides with its receiver
    check_rotation : bool, optional
        Verify every rotation matrix is a proper rotation
    config : ConversionConfig, optional
        Defaults for the keyword arguments above

    Returns
    -------
    np.ndarray
        Direction cosines [u, v] or [u, v, w], shape (N, 2) / (N, 3), in the
        order of `points`. A single (3,) point gives a (2,) / (3,) vector.

    Raises
    ------
    ShapeMismatchError
        If rx_pos or rotation has a count other than 0, 1 or N
    DegenerateGeometryError
        If a target coincides with its receiver and the policy is 'raise'
    InvalidRotationError
        If rotation checking is enabled and a matrix is not a proper rotation

    Notes
    -----
    With the 'nan' policy coincident targets yield NaN rows, following
    IEEE-754 propagation, and a warning is logged.

    References
    ----------
    D. F. Crouse, "Basic tracking using nonlinear 3D monostatic and bistatic
    measurements," IEEE Aerospace and Electronic Systems Magazine, vol. 29,
    no. 8, Part II, pp. 4-53, Aug. 2014.

    Examples
    --------
    >>> import numpy as np
    >>> cart2uv(np.array([[1.0, 0.0, 0.0], [0.0, 0.0, 5.0]]))
    array([[1., 0.],
           [0., 0.]])
    >>> cart2uv(np.array([0.0, 0.0, 5.0]), include_w=True)
    array([0., 0., 1.])
    """
    cfg = (config or DEFAULT_CONFIG).override(include_w, degenerate, check_rotation)

    pts, single = as_points(points)
    n = pts.shape[0]
    rx = broadcast_positions(rx_pos, n)
    R = broadcast_rotations(rotation, n)

    if cfg.check_rotation:
        validate_rotations(R, cfg.rotation_tol)

    dim = UVW_DIM if cfg.include_w else UV_DIM
    if n == 0:
        return np.empty((0, dim))

    d_local = _local_displacements(pts, rx, R)

    # Scale rows by their largest component so squaring cannot overflow or underflow
    s = np.max(np.abs(d_local), axis=1)
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        scaled = d_local / s[:, np.newaxis]
        rho = np.linalg.norm(scaled, axis=1)
        r = s * rho

    bad = np.flatnonzero((s == 0.0) | (r <= cfg.zero_tol))
    if bad.size:
        if cfg.degenerate is DegeneratePolicy.RAISE:
            raise DegenerateGeometryError(bad.tolist())
        logger.warning(f"Target coincident with receiver at {bad.size} of {n} points, "
                       f"returning NaN")

    with np.errstate(divide='ignore', invalid='ignore'):
        z = scaled[:, :dim] / rho[:, np.newaxis]
    z[bad] = np.nan

    return z[0] if single else z
