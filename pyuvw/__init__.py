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
PyUVW - Receiver Direction Cosine Library

A Python library for converting global Cartesian target positions into
direction cosines (u, v, w) in the local frame of one or more receivers,
with explicit broadcasting of receiver positions and orientations.
"""

__version__ = "1.0.0"
__author__ = "PyUVW Development Team"
__title__ = "pyuvw"
__description__ = "Receiver direction cosine conversion library"

from .core import *
from .attitude import *
from .coordinate import *
