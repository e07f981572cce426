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

"""pandas front end for the direction-cosine conversion"""

from typing import Optional, Sequence

import numpy as np
import pandas as pd

from ..core.config import ConversionConfig
from .uv_transforms import cart2uv


def cart2uv_frame(df: pd.DataFrame,
                  rx_pos: Optional[np.ndarray] = None,
                  rotation: Optional[np.ndarray] = None,
                  include_w: Optional[bool] = None,
                  columns: Sequence[str] = ('x', 'y', 'z'),
                  config: Optional[ConversionConfig] = None) -> pd.DataFrame:
    """
    Convert the target columns of a DataFrame into direction cosines

    Parameters:
    -----------
    df : pd.DataFrame
        One target per row
    rx_pos, rotation, include_w, config
        As for cart2uv, broadcast against len(df)
    columns : Sequence[str]
        Names of the x, y, z columns

    Returns:
    --------
    pd.DataFrame
        Columns u, v (and w), indexed like `df`
    """
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise KeyError(f"Missing point columns: {missing}")
    if len(columns) != 3:
        raise ValueError(f"Expected 3 point columns, got {len(columns)}")

    points = df.loc[:, list(columns)].to_numpy(dtype=np.float64)
    z = cart2uv(points, rx_pos, rotation, include_w, config=config)
    names = ['u', 'v', 'w'][:z.shape[1]]
    return pd.DataFrame(z, columns=names, index=df.index)
