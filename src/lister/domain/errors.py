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

from typing import Optional


class ListerError(Exception):
    """Base exception for domain-specific errors."""


class RootInaccessible(ListerError):
    """The directory a listing starts from cannot be opened or read."""

    def __init__(self, path: str, cause: Optional[BaseException] = None) -> None:
        self.path = path
        self.cause = cause
        reason = getattr(cause, "strerror", None) or cause or "not readable"
        super().__init__(f"Cannot read directory {path}: {reason}")


class EntryUnreadable(ListerError):
    """A single file or directory entry could not be listed or stat'ed."""

    def __init__(self, path: str, cause: Optional[BaseException] = None) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause}")


class TimestampUnavailable(ListerError):
    """Metadata was read, but the requested timestamp could not be produced."""


class InvalidArgument(ListerError, ValueError):
    """Bad result count or sort key."""
