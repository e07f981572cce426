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

"""Exceptions raised by the direction-cosine conversion"""

from typing import Optional, Sequence


class PyUVWError(ValueError):
    """Base class for all pyuvw errors"""


class ShapeMismatchError(PyUVWError):
    """Receiver positions or rotation matrices cannot be paired with the points

    Raised when a sequence has a length other than 0, 1 or N, or when its
    trailing dimensions are not (3,) / (3, 3).
    """

    def __init__(self, name: str, count: int, n_points: int, message: Optional[str] = None):
        self.name = name
        self.count = count
        self.n_points = n_points
        if message is None:
            message = (f"{name}: got {count} entries for {n_points} points "
                       f"(expected 0, 1 or {n_points})")
        super().__init__(message)


class DegenerateGeometryError(PyUVWError):
    """Target coincides with the receiver, so the direction is undefined"""

    def __init__(self, indices: Sequence[int] = (), message: Optional[str] = None):
        self.indices = list(indices)
        if message is None:
            shown = ", ".join(str(i) for i in self.indices[:10])
            if len(self.indices) > 10:
                shown += ", ..."
            message = (f"target coincident with receiver at {len(self.indices)} "
                       f"point(s): [{shown}]")
        super().__init__(message)


class InvalidRotationError(PyUVWError):
    """A rotation matrix is not orthonormal with determinant +1"""

    def __init__(self, indices: Sequence[int], tol: float):
        self.indices = list(indices)
        self.tol = tol
        super().__init__(f"rotation matrices at {self.indices} are not proper "
                         f"rotations (tol={tol:g})")


class ConfigurationError(PyUVWError):
    """Invalid conversion configuration"""
