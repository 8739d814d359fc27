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
"""Version schemes."""
from typing import Optional

from .cpan import CPAN, CpanVersion
from .pypi import PyPI
from .scheme_base import InvalidVersion, VersionScheme
from .semver_scheme import SemVer

_schemes = {
    'CPAN': CPAN(),
    'PyPI': PyPI(),
    'SemVer': SemVer(),
}


def get(name: str) -> Optional[VersionScheme]:
  """Get the version scheme with the given name, or None if unknown."""
  return _schemes.get(name)


def names() -> list[str]:
  """Return the names of all known version schemes."""
  return sorted(_schemes)
