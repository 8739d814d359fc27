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
"""SemVer version scheme."""
import re
from typing import Any

import semver

from .scheme_base import InvalidVersion, VersionScheme

_CORE = re.compile(r'^(\d+)(?:\.(\d+))?(?:\.(\d+))?(.*)$')


def _strip_leading_zeros(component: str) -> str:
  if component.isdigit():
    return str(int(component))
  return component


def coerce(version: str) -> str:
  """Coerce a potentially invalid semver into valid semver.

  A leading v is stripped, missing minor and patch components are filled in
  with 0 and leading zeros are removed from numeric components. Anything that
  does not start with a number is returned unchanged.
  """
  version = version.strip()
  if version.startswith('v'):
    version = version[1:]

  match = _CORE.match(version)
  if not match:
    return version

  major, minor, patch, suffix = match.groups()
  if suffix.startswith('-'):
    pre, plus, build = suffix[1:].partition('+')
    pre = '.'.join(_strip_leading_zeros(c) for c in pre.split('.'))
    suffix = f'-{pre}{plus}{build}'

  return '.'.join(
      _strip_leading_zeros(c or '0') for c in (major, minor, patch)) + suffix


class SemVer(VersionScheme):
  """Semantic versions."""

  def parse(self, version: str) -> semver.Version:
    """Parse a version."""
    try:
      return semver.Version.parse(coerce(version))
    except ValueError as e:
      raise InvalidVersion(str(e)) from e

  def is_version(self, value: Any) -> bool:
    return isinstance(value, semver.Version)
