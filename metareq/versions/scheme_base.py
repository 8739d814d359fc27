# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Version scheme base classes."""
from abc import ABC, abstractmethod
from typing import Any


class InvalidVersion(ValueError):
  """Version string is not valid for the scheme."""


class VersionScheme(ABC):
  """Parses and identifies totally ordered version values.

  Values produced by a scheme must support the rich comparison operators,
  equality and `str()`. The range algebra never looks inside them.
  """

  @property
  def name(self) -> str:
    """Get the name of the scheme."""
    return self.__class__.__name__

  @abstractmethod
  def parse(self, version: str) -> Any:
    """Parse a version string.

    Raises:
      InvalidVersion: if the string is not a valid version.
    """

  @abstractmethod
  def is_version(self, value: Any) -> bool:
    """Return whether `value` is already a version of this scheme."""

  @property
  def zero(self) -> Any:
    """The version parsed from "0"."""
    return self.parse('0')
