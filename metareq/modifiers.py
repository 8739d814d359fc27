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
"""Range modifiers."""
import enum
from typing import Any, NamedTuple

# Module name used in conflict messages when a range is used on its own.
DEFAULT_MODULE = 'module'


class Operation(enum.Enum):
  """A primitive constraint operation."""
  MINIMUM = 'minimum'
  MAXIMUM = 'maximum'
  EXCLUSION = 'exclusion'
  EXACT_VERSION = 'exact_version'


class Modifier(NamedTuple):
  """A single operation applied to a range, with its version argument."""
  operation: Operation
  version: Any

  def apply(self, range_, module: str = DEFAULT_MODULE):
    """Apply this modifier to a range, returning the new range."""
    if self.operation is Operation.MINIMUM:
      return range_.with_minimum(self.version, module)
    if self.operation is Operation.MAXIMUM:
      return range_.with_maximum(self.version, module)
    if self.operation is Operation.EXCLUSION:
      return range_.with_exclusion(self.version, module)
    if self.operation is Operation.EXACT_VERSION:
      return range_.with_exact_version(self.version, module)
    raise ValueError(f'Unknown operation: {self.operation}')
