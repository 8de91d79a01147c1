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
Fixed policy constants and argument parsing shared by the CLI and the core.

None of the constants here are user-configurable; the only values a user
controls are the root directory, the result count and the sort key.
"""

import os
from typing import Optional, Union

from .domain.errors import InvalidArgument
from .domain.models import SortKey

# Never use more than four stat workers, nor more than half the CPU cores.
MAX_WALK_WORKERS = 4
DEFAULT_RESULT_COUNT = 10
DEFAULT_SORT_KEY = SortKey.MODIFIED
HIDDEN_PREFIX = "."


def walk_worker_count(cpu_count: Optional[int] = None) -> int:
    """
    Size of the walker's thread pool. 0 means walk serially in the caller.
    """
    if cpu_count is None:
        cpu_count = os.cpu_count() or 1
    return max(0, min(MAX_WALK_WORKERS, int(cpu_count) // 2))


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


def parse_result_count(value: Union[str, int, None]) -> int:
    """
    Parse a result count. None means the default.

    Raises:
        InvalidArgument: if the value is not a non-negative integer.
    """
    if value is None:
        return DEFAULT_RESULT_COUNT
    if isinstance(value, bool):
        raise InvalidArgument(f"Not a number: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise InvalidArgument(f"Result count must be >= 0, got {value}")
        return value
    # Plain ASCII digits only: no sign, padding, underscores or decimals.
    text = str(value)
    if not (text.isascii() and text.isdigit()):
        raise InvalidArgument(f"Not a non-negative integer: {value!r}")
    return int(text)


def parse_sort_key(value: Union[str, SortKey, None]) -> SortKey:
    if value is None:
        return DEFAULT_SORT_KEY
    try:
        return SortKey(str(getattr(value, "value", value)).lower())
    except ValueError:
        valid = ", ".join(k.value for k in SortKey)
        raise InvalidArgument(
            f"Unknown sort key: {value!r}. Valid options: {valid}"
        ) from None
