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

"""Conversion configuration"""

from dataclasses import asdict, dataclass, fields, replace
from numbers import Real
from typing import Optional

import numpy as np

from .constants import ROTATION_TOL, ZERO_NORM_TOL
from .data_structures import DegeneratePolicy
from .exceptions import ConfigurationError


@dataclass(frozen=True)
class ConversionConfig:
    """Defaults applied by DirectionCosineConverter.

    Attributes
    ----------
    include_w : bool
        Return [u, v, w] instead of [u, v]
    degenerate : DegeneratePolicy
        Handling of targets coincident with their receiver
    check_rotation : bool
        Verify every rotation matrix is a proper rotation
    rotation_tol : float
        Tolerance used by the rotation check
    zero_tol : float
        Local ranges at or below this value are treated as degenerate
    """
    include_w: bool = False
    degenerate: DegeneratePolicy = DegeneratePolicy.RAISE
    check_rotation: bool = False
    rotation_tol: float = ROTATION_TOL
    zero_tol: float = ZERO_NORM_TOL

    def __post_init__(self):
        object.__setattr__(self, 'degenerate', DegeneratePolicy.parse(self.degenerate))
        for name in ('include_w', 'check_rotation'):
            value = getattr(self, name)
            if not isinstance(value, (bool, np.bool_)):
                raise ConfigurationError(f"{name} must be a bool, got {value!r}")
            object.__setattr__(self, name, bool(value))
        for name in ('rotation_tol', 'zero_tol'):
            value = getattr(self, name)
            if isinstance(value, (bool, np.bool_)) or not isinstance(value, Real) \
                    or not np.isfinite(value):
                raise ConfigurationError(f"{name} must be a finite real number, got {value!r}")
            object.__setattr__(self, name, float(value))
        if self.rotation_tol <= 0:
            raise ConfigurationError(f"rotation_tol must be positive, got {self.rotation_tol}")
        if self.zero_tol < 0:
            raise ConfigurationError(f"zero_tol must be non-negative, got {self.zero_tol}")

    @classmethod
    def from_dict(cls, config: dict) -> "ConversionConfig":
        """Build a config from a plain dictionary

        Example config:
        {
            'include_w': True,
            'degenerate': 'nan',
            'check_rotation': True,
            'rotation_tol': 1e-6
        }
        """
        known = {f.name for f in fields(cls)}
        unknown = set(config) - known
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**config)

    def to_dict(self) -> dict:
        d = asdict(self)
        d['degenerate'] = self.degenerate.value
        return d

    def override(self,
                 include_w: Optional[bool] = None,
                 degenerate=None,
                 check_rotation: Optional[bool] = None) -> "ConversionConfig":
        """Return a copy with the non-None arguments applied"""
        changes = {}
        if include_w is not None:
            changes['include_w'] = include_w
        if degenerate is not None:
            changes['degenerate'] = DegeneratePolicy.parse(degenerate)
        if check_rotation is not None:
            changes['check_rotation'] = check_rotation
        return replace(self, **changes) if changes else self


DEFAULT_CONFIG = ConversionConfig()
