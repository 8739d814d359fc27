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
"""Requirements errors."""


class RequirementsError(Exception):
  """Base class for all requirements errors."""


class RangeConflict(RequirementsError):
  """A constraint is incompatible with the existing range for a module."""

  def __init__(self, module: str, reason: str):
    super().__init__(f'illegal requirements for {module}: {reason}')
    self.module = module
    self.reason = reason


class FinalizedMutation(RequirementsError):
  """Attempted to change finalized requirements."""


class ParseError(RequirementsError, ValueError):
  """Malformed requirement string."""

  def __init__(self, requirement: str):
    super().__init__(f'illegal requirement string: {requirement}')
    self.requirement = requirement


class VersionConflict(RequirementsError, ValueError):
  """A version string could not be converted to a version."""

  def __init__(self, version: str, reason: str):
    super().__init__(f"Can't convert '{version}': {reason}")
    self.version = version
    self.reason = reason
