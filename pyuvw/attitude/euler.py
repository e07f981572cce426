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
Receiver orientation from euler angles.

All matrices returned here are frame (passive) rotations: they map a vector
expressed in the global frame into the frame of a receiver that has been
turned by the given angle(s). This is the convention expected by cart2uv.

Euler angles are in the order 'roll-pitch-yaw' and the composite DCM follows
the 'ZYX' sequence, i.e. C = rot_x(roll) @ rot_y(pitch) @ rot_z(yaw).

References:
    Principles of GNSS, Inertial, and Multisensor Integrated Navigation Systems
    - (2013) Paul D. Groves
"""

import numpy as np
from numba import njit


@njit(cache=True, fastmath=True)
def rot_x(phi):
    """
    Frame rotation by `phi` radians about the x-axis.

    Parameters
    ----------
    phi : float
        Rotation angle in radians

    Returns
    -------
    R : ndarray, shape (3, 3)
        Global-to-local direction cosine matrix
    """
    s = np.sin(phi)
    c = np.cos(phi)
    return np.array([[1.0, 0.0, 0.0],
                     [0.0,   c,   s],
                     [0.0,  -s,   c]],
                    dtype=np.double)


@njit(cache=True, fastmath=True)
def rot_y(theta):
    """
    Frame rotation by `theta` radians about the y-axis.

    Parameters
    ----------
    theta : float
        Rotation angle in radians

    Returns
    -------
    R : ndarray, shape (3, 3)
        Global-to-local direction cosine matrix
    """
    s = np.sin(theta)
    c = np.cos(theta)
    return np.array([[  c, 0.0,  -s],
                     [0.0, 1.0, 0.0],
                     [  s, 0.0,   c]],
                    dtype=np.double)


@njit(cache=True, fastmath=True)
def rot_z(psi):
    """
    Frame rotation by `psi` radians about the z-axis (the boresight).

    Parameters
    ----------
    psi : float
        Rotation angle in radians

    Returns
    -------
    R : ndarray, shape (3, 3)
        Global-to-local direction cosine matrix
    """
    s = np.sin(psi)
    c = np.cos(psi)
    return np.array([[  c,   s, 0.0],
                     [ -s,   c, 0.0],
                     [0.0, 0.0, 1.0]],
                    dtype=np.double)


@njit(cache=True, fastmath=True)
def euler2dcm(e):
    """
    Convert euler angles (roll-pitch-yaw) to the 'ZYX' global-to-local DCM.

    Parameters
    ----------
    e : array_like, shape (3,)
        RPY euler angles [roll, pitch, yaw] in radians

    Returns
    -------
    C : ndarray, shape (3, 3)
        Global-to-local direction cosine matrix
    """
    return rot_x(e[0]) @ rot_y(e[1]) @ rot_z(e[2])


@njit(cache=True)
def euler2dcm_batch(e):
    """
    Vectorised euler2dcm over rows of an (N, 3) array.

    Returns
    -------
    C : ndarray, shape (N, 3, 3)
    """
    n = e.shape[0]
    out = np.empty((n, 3, 3), dtype=np.double)
    for i in range(n):
        out[i] = euler2dcm(e[i])
    return out
