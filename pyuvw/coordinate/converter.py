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

"""Object-oriented direction-cosine converter"""

from typing import Optional, Sequence

import numpy as np

from ..core.config import DEFAULT_CONFIG, ConversionConfig
from ..core.data_structures import ReceiverPose, stack_poses
from ..core.exceptions import ConfigurationError
from .uv_transforms import cart2uv

_OVERRIDABLE = {'include_w', 'degenerate', 'check_rotation'}


class DirectionCosineConverter:
    """Converts Cartesian targets into receiver direction cosines

    This class wraps cart2uv with a fixed ConversionConfig so that the
    output dimension, degenerate-geometry policy and rotation checking are
    chosen once and reused across calls.
    """

    def __init__(self, config: Optional[ConversionConfig] = None, **overrides):
        """Initialize converter

        Parameters:
        -----------
        config : ConversionConfig, optional
            Base configuration (defaults to ConversionConfig())
        **overrides
            include_w, degenerate or check_rotation applied on top of config
        """
        unknown = set(overrides) - _OVERRIDABLE
        if unknown:
            raise ConfigurationError(f"Unknown converter options: {sorted(unknown)}")
        self._config = (config or DEFAULT_CONFIG).override(**overrides)

    @classmethod
    def from_dict(cls, config: dict) -> "DirectionCosineConverter":
        """Create a converter from a configuration dictionary"""
        return cls(ConversionConfig.from_dict(config))

    @property
    def config(self) -> ConversionConfig:
        """Active configuration"""
        return self._config

    @property
    def output_dim(self) -> int:
        """Number of components per output row (2 or 3)"""
        return 3 if self._config.include_w else 2

    def convert(self,
                points: np.ndarray,
                rx_pos: Optional[np.ndarray] = None,
                rotation: Optional[np.ndarray] = None,
                include_w: Optional[bool] = None) -> np.ndarray:
        """Convert points to [u, v] or [u, v, w]

        Parameters:
        -----------
        points : np.ndarray
            Target positions, shape (N, 3) or (3,)
        rx_pos : np.ndarray, optional
            Receiver position(s), broadcast with the 0/1/N rule
        rotation : np.ndarray, optional
            Rotation matrix / matrices, broadcast with the 0/1/N rule
        include_w : bool, optional
            Overrides the configured output dimension for this call

        Returns:
        --------
        np.ndarray
            Direction cosines, shape (N, 2) or (N, 3)
        """
        return cart2uv(points, rx_pos, rotation, include_w, config=self._config)

    def convert_poses(self,
                      points: np.ndarray,
                      poses: Sequence[ReceiverPose],
                      include_w: Optional[bool] = None) -> np.ndarray:
        """Convert points observed by one ReceiverPose each (or one shared pose)"""
        rx_pos, rotation = stack_poses(poses)
        return self.convert(points, rx_pos, rotation, include_w)

    def __call__(self, points, rx_pos=None, rotation=None, include_w=None) -> np.ndarray:
        return self.convert(points, rx_pos, rotation, include_w)

    def __repr__(self) -> str:
        return f"DirectionCosineConverter({self._config!r})"
