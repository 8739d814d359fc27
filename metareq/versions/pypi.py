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
"""PyPI version scheme."""
from typing import Any

import packaging.version

from .scheme_base import InvalidVersion, VersionScheme


class PyPI(VersionScheme):
  """PEP 440 versions."""

  def parse(self, version: str) -> packaging.version.Version:
    """Parse a version."""
    try:
      return packaging.version.Version(version)
    except packaging.version.InvalidVersion as e:
      raise InvalidVersion(str(e)) from e

  def is_version(self, value: Any) -> bool:
    return isinstance(value, packaging.version.Version)
