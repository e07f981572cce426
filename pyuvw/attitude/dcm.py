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

"""Receiver DCM construction and validation"""

import logging
from typing import Optional

import numpy as np
from numba import njit

from ..core.constants import AXIS_X, AXIS_Z, ROTATION_TOL
from ..core.exceptions import DegenerateGeometryError, InvalidRotationError, ShapeMismatchError

logger = logging.getLogger(__name__)

# |cross(up, boresight)| below this means the up hint is parallel to the boresight
_PARALLEL_TOL = 1e-12


def boresight2dcm(direction: np.ndarray, up: Optional[np.ndarray] = None) -> np.ndarray:
    """
    Build the global-to-local rotation of a receiver pointing along `direction`.

    The rows of the returned matrix are the local x, y and z axes expressed in
    the global frame. The local z-axis is the normalised boresight. The local
    x-axis is perpendicular to both `up` and the boresight, and the local
    y-axis completes a right-handed frame.

    Parameters
    ----------
    direction : np.ndarray
        Pointing direction in the global frame, shape (3,). Need not be unit.
    up : np.ndarray, optional
        Hint fixing the roll about the boresight. Defaults to the global
        z-axis, or the global x-axis when the boresight is parallel to z.

    Returns
    -------
    np.ndarray
        Rotation matrix (3x3)

    Raises
    ------
    DegenerateGeometryError
        If `direction` is the zero vector, or `up` is zero or parallel to it
    """
    d = np.asarray(direction, dtype=np.float64)
    if d.shape != (3,):
        raise ShapeMismatchError("direction", d.size, 1,
                                 message=f"direction must be a 3-vector, got shape {d.shape}")
    norm = np.linalg.norm(d)
    if norm == 0.0:
        raise DegenerateGeometryError(message="boresight direction is the zero vector")
    z_l = d / norm

    if up is None:
        hint = AXIS_Z
        if np.linalg.norm(np.cross(hint, z_l)) < _PARALLEL_TOL:
            hint = AXIS_X
    else:
        hint = np.asarray(up, dtype=np.float64)

    x_l = np.cross(hint, z_l)
    x_norm = np.linalg.norm(x_l)
    if x_norm < _PARALLEL_TOL:
        raise DegenerateGeometryError(message="up hint is zero or parallel to the boresight")
    x_l = x_l / x_norm
    y_l = np.cross(z_l, x_l)

    return np.vstack((x_l, y_l, z_l))


@njit(cache=True)
def _rotation_errors(R):
    """Worst-case deviation from orthonormality / unit determinant per matrix"""
    n = R.shape[0]
    err = np.empty(n, dtype=np.double)
    eye = np.eye(3)
    for i in range(n):
        M = R[i]
        ortho = np.max(np.abs(M.T @ M - eye))
        det = np.abs(np.linalg.det(M) - 1.0)
        err[i] = max(ortho, det)
    return err


def is_rotation_matrix(R: np.ndarray, tol: float = ROTATION_TOL) -> bool:
    """Check that R is a proper rotation: R^T R = I and det(R) = +1"""
    R = np.asarray(R, dtype=np.float64)
    if R.shape != (3, 3):
        return False
    if not np.all(np.isfinite(R)):
        return False
    return bool(_rotation_errors(np.ascontiguousarray(R[np.newaxis]))[0] <= tol)


def validate_rotations(R: np.ndarray, tol: float = ROTATION_TOL) -> None:
    """
    Raise if any matrix in an (N, 3, 3) stack is not a proper rotation.

    Raises
    ------
    InvalidRotationError
        Lists the indices of every failing matrix
    """
    R = np.ascontiguousarray(R, dtype=np.float64)
    if R.shape[0] == 0:
        return
    err = _rotation_errors(R)
    bad = np.flatnonzero(~(err <= tol))
    if bad.size:
        logger.debug(f"Rotation check failed, max error {np.nanmax(err):.3e}")
        raise InvalidRotationError(bad.tolist(), tol)
