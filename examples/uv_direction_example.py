#!/usr/bin/env python3
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

"""Example usage of the direction-cosine conversion"""

import numpy as np
import pandas as pd

from pyuvw import DirectionCosineConverter, ReceiverPose, boresight2dcm, cart2uv, cart2uv_frame, euler2dcm
from pyuvw.logger import setup_logger


def example_single_receiver():
    """One receiver at the origin looking along global z"""
    print("=== Example 1: Receiver at the origin ===\n")

    targets = np.array([
        [1.0, 0.0, 0.0],
        [0.0, 0.0, 5.0],
        [100.0, 50.0, 1000.0],
    ])
    uv = cart2uv(targets)
    for p, z in zip(targets, uv):
        print(f"target {p} -> u={z[0]:+.4f}, v={z[1]:+.4f}")


def example_pointed_receiver():
    """A receiver on a mast pointing at a region of interest"""
    print("\n=== Example 2: Pointed receiver ===\n")

    rx = np.array([0.0, 0.0, 10.0])
    look_at = np.array([1000.0, 1000.0, 0.0])
    R = boresight2dcm(look_at - rx)

    targets = look_at + np.array([[0.0, 0.0, 0.0], [50.0, -50.0, 0.0], [0.0, 0.0, 100.0]])
    uvw = cart2uv(targets, rx, R, include_w=True)
    for p, z in zip(targets, uvw):
        print(f"target {p} -> u={z[0]:+.4f}, v={z[1]:+.4f}, w={z[2]:+.4f}")


def example_multiple_receivers():
    """One target seen by three receivers with different attitudes"""
    print("\n=== Example 3: Multiple receivers ===\n")

    poses = [
        ReceiverPose([0.0, 0.0, 0.0], euler2dcm(np.radians([0.0, 0.0, 0.0]))),
        ReceiverPose([500.0, 0.0, 0.0], euler2dcm(np.radians([0.0, 10.0, 45.0]))),
        ReceiverPose([0.0, 500.0, 0.0], euler2dcm(np.radians([5.0, -10.0, 90.0]))),
    ]
    target = np.array([[250.0, 250.0, 2000.0]] * len(poses))

    converter = DirectionCosineConverter(include_w=True, check_rotation=True)
    for pose, z in zip(poses, converter.convert_poses(target, poses)):
        print(f"receiver at {pose.position} -> {np.round(z, 4)}")


def example_dataframe():
    """Tabular targets"""
    print("\n=== Example 4: DataFrame input ===\n")

    df = pd.DataFrame({
        'x': [10.0, -10.0, 0.0],
        'y': [0.0, 10.0, 0.0],
        'z': [100.0, 100.0, 100.0],
    }, index=['a', 'b', 'c'])
    print(cart2uv_frame(df, include_w=True))


if __name__ == "__main__":
    setup_logger(level="INFO")
    example_single_receiver()
    example_pointed_receiver()
    example_multiple_receivers()
    example_dataframe()
