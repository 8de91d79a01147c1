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

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SortKey(str, Enum):
    """Which timestamp a listing is ranked by."""

    MODIFIED = "modified"
    CREATED = "created"


@dataclass(frozen=True)
class FileCandidate:
    """
    A regular, non-hidden file found during a walk.

    `path` is the root as given joined with each path component below it.
    `metadata` is None when the entry was listed but its stat call failed.
    """

    path: str
    metadata: Optional[os.stat_result] = None


@dataclass(frozen=True)
class RankedEntry:
    """A candidate with its resolved timestamp and a root-relative path."""

    path: str
    timestamp: int
