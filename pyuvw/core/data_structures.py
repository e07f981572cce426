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

"""Core data structures for direction-cosine conversion"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence, Tuple

import numpy as np

from .constants import IDENTITY, ORIGIN
from .exceptions import ConfigurationError, ShapeMismatchError


class DegeneratePolicy(Enum):
    """What to do when a target coincides with its receiver.

    Attributes
    ----------
    RAISE : str
        Fail the whole batch with DegenerateGeometryError
    NAN : str
        Fill the affected rows with NaN and log a warning
    """
    RAISE = "raise"
    NAN = "nan"

    @classmethod
    def parse(cls, value) -> "DegeneratePolicy":
        """Accept an enum member or its (case-insensitive) string value"""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ConfigurationError(
                f"Unknown degenerate policy: {value!r} "
                f"(expected one of {[p.value for p in cls]})"
            ) from None


@dataclass
class ReceiverPose:
    """Position and orientation of a single receiver.

    Attributes
    ----------
    position : np.ndarray
        Receiver location in the global Cartesian frame, shape (3,)
    rotation : np.ndarray
        Global-to-local rotation matrix, shape (3, 3). The local z-axis is
        the receiver boresight.
    """
    position: np.ndarray = field(default_factory=lambda: ORIGIN.copy())
    rotation: np.ndarray = field(default_factory=lambda: IDENTITY.copy())

    def __post_init__(self):
        self.position = np.array(self.position, dtype=np.float64)
        self.rotation = np.array(self.rotation, dtype=np.float64)
        if self.position.shape != (3,):
            raise ShapeMismatchError(
                "position", self.position.size, 1,
                message=f"position must be a 3-vector, got shape {self.position.shape}")
        if self.rotation.shape != (3, 3):
            raise ShapeMismatchError(
                "rotation", self.rotation.size, 1,
                message=f"rotation must be 3x3, got shape {self.rotation.shape}")

    @property
    def boresight(self) -> np.ndarray:
        """Pointing direction in the global frame (local z-axis)"""
        return self.rotation[2].copy()

    def to_local(self, point: np.ndarray) -> np.ndarray:
        """Displacement from receiver to point expressed in the local frame"""
        return self.rotation @ (np.asarray(point, dtype=np.float64) - self.position)


def stack_poses(poses: Sequence[ReceiverPose]) -> Tuple[np.ndarray, np.ndarray]:
    """Split a sequence of poses into (N, 3) positions and (N, 3, 3) rotations"""
    if len(poses) == 0:
        return np.empty((0, 3)), np.empty((0, 3, 3))
    positions = np.stack([p.position for p in poses])
    rotations = np.stack([p.rotation for p in poses])
    return positions, rotations
