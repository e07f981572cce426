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

"""Explicit broadcasting of receiver positions and rotations to a point batch

Receiver inputs follow a 0/1/N rule: nothing (or an empty array) means the
default value for every point, a single entry is repeated for every point,
and N entries are paired one-to-one. Anything else is rejected up front.
"""

import logging
from typing import Tuple

import numpy as np

from ..core.constants import IDENTITY
from ..core.exceptions import ShapeMismatchError

logger = logging.getLogger(__name__)


def as_points(points) -> Tuple[np.ndarray, bool]:
    """
    Normalise target points to a float64 (N, 3) array.

    Parameters
    ----------
    points : array_like
        Shape (N, 3), or a single point of shape (3,)

    Returns
    -------
    Tuple[np.ndarray, bool]
        The (N, 3) array and whether the input was a single point
    """
    arr = np.asarray(points, dtype=np.float64)
    if arr.ndim == 1 and arr.shape == (3,):
        return arr.reshape(1, 3), True
    if arr.ndim == 1 and arr.size == 0:
        return arr.reshape(0, 3), False
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ShapeMismatchError("points", arr.shape[0] if arr.ndim else 0, 0,
                                 message=f"points must have shape (N, 3) or (3,), got {arr.shape}")
    return arr, False


def broadcast_positions(rx_pos, n: int) -> np.ndarray:
    """
    Broadcast receiver positions to an (n, 3) array.

    Parameters
    ----------
    rx_pos : array_like or None
        None / empty -> origin; shape (3,) or (1, 3) -> repeated;
        shape (n, 3) -> used as is
    n : int
        Number of points

    Returns
    -------
    np.ndarray
        Receiver positions, shape (n, 3)

    Raises
    ------
    ShapeMismatchError
        If the number of positions is not 0, 1 or n, or they are not 3-vectors
    """
    if rx_pos is None:
        return np.zeros((n, 3))

    arr = np.asarray(rx_pos, dtype=np.float64)
    if arr.size == 0:
        return np.zeros((n, 3))
    if arr.ndim == 1:
        if arr.shape != (3,):
            raise ShapeMismatchError("rx_pos", 1, n,
                                     message=f"receiver position must be a 3-vector, got shape {arr.shape}")
        arr = arr.reshape(1, 3)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ShapeMismatchError("rx_pos", arr.shape[0] if arr.ndim else 0, n,
                                 message=f"receiver positions must have shape (N, 3), got {arr.shape}")

    count = arr.shape[0]
    if count == n:
        return arr.copy()
    if count == 1:
        logger.debug(f"Broadcasting single receiver position to {n} points")
        return np.repeat(arr, n, axis=0)
    raise ShapeMismatchError("rx_pos", count, n)


def broadcast_rotations(rotation, n: int) -> np.ndarray:
    """
    Broadcast rotation matrices to an (n, 3, 3) array.

    Parameters
    ----------
    rotation : array_like or None
        None / empty -> identity; shape (3, 3) or (1, 3, 3) -> repeated;
        shape (n, 3, 3) -> used as is
    n : int
        Number of points

    Returns
    -------
    np.ndarray
        Rotation matrices, shape (n, 3, 3)

    Raises
    ------
    ShapeMismatchError
        If the number of matrices is not 0, 1 or n, or they are not 3x3
    """
    if rotation is None:
        return np.repeat(IDENTITY[np.newaxis], n, axis=0)

    arr = np.asarray(rotation, dtype=np.float64)
    if arr.size == 0:
        return np.repeat(IDENTITY[np.newaxis], n, axis=0)
    if arr.ndim == 2:
        if arr.shape != (3, 3):
            raise ShapeMismatchError("rotation", 1, n,
                                     message=f"rotation matrix must be 3x3, got shape {arr.shape}")
        arr = arr[np.newaxis]
    if arr.ndim != 3 or arr.shape[1:] != (3, 3):
        raise ShapeMismatchError("rotation", arr.shape[0] if arr.ndim else 0, n,
                                 message=f"rotation matrices must have shape (N, 3, 3), got {arr.shape}")

    count = arr.shape[0]
    if count == n:
        return np.ascontiguousarray(arr).copy()
    if count == 1:
        logger.debug(f"Broadcasting single rotation matrix to {n} points")
        return np.repeat(arr, n, axis=0)
    raise ShapeMismatchError("rotation", count, n)
