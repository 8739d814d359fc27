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
"""CPAN version scheme.

Follows the "lax" rules of Perl's version.pm, which is what META.json and
META.yml use. There are two notations:

  * decimal versions, e.g. 1.208, .5 or 1.23_01. The fraction is read in
    groups of three digits, so 1.5 is 1.500 and sorts after 1.10.
  * dotted-decimal versions, e.g. v1.2.3 or 1.2.3 (at least two dots without
    the leading v). Each component is an integer.

Both notations reduce to a tuple of integer components and compare
component-wise, so 1.002003 == v1.2.3.
"""
from __future__ import annotations

import re
from typing import Any, Tuple

import attr

from .scheme_base import InvalidVersion, VersionScheme

_DECIMAL = re.compile(
    r'^(?:[0-9]+(?:\.|\.[0-9]+(?:_[0-9]+)?)?|\.[0-9]+(?:_[0-9]+)?)$')
_DOTTED = re.compile(
    r'^(?:v[0-9]+(?:(?:\.[0-9]+)+(?:_[0-9]+)?)?'
    r'|[0-9]*(?:\.[0-9]+){2,}(?:_[0-9]+)?)$')
_NORMAL_COMPONENTS = 3


def _decimal_components(version: str) -> Tuple[int, ...]:
  """Split a decimal version into components of three fraction digits."""
  integer, _, fraction = version.replace('_', '').partition('.')
  components = [int(integer or '0')]
  for i in range(0, len(fraction), 3):
    components.append(int(fraction[i:i + 3].ljust(3, '0')))
  return tuple(components)


def _dotted_components(version: str) -> Tuple[int, ...]:
  """Split a dotted-decimal version into its integer components."""
  version = version.lstrip('v').replace('_', '')
  return tuple(int(part or '0') for part in version.split('.'))


def _strip_trailing_zeros(components: Tuple[int, ...]) -> Tuple[int, ...]:
  end = len(components)
  while end > 1 and components[end - 1] == 0:
    end -= 1
  return components[:end]


@attr.s(frozen=True, eq=False, repr=False)
class CpanVersion:
  """A parsed CPAN version."""

  string: str = attr.ib()
  components: Tuple[int, ...] = attr.ib()
  is_dotted: bool = attr.ib(default=False)
  is_alpha: bool = attr.ib(default=False)

  @classmethod
  def from_string(cls, version: str) -> CpanVersion:
    """Parse a version."""
    text = version.strip()
    is_alpha = '_' in text
    if _DOTTED.match(text):
      components = _dotted_components(text)
      return cls(_normal(components), components, True, is_alpha)

    if _DECIMAL.match(text):
      if text.startswith('.'):
        text = '0' + text
      return cls(text, _decimal_components(text), False, is_alpha)

    raise InvalidVersion(f'Invalid version format: {version!r}')

  def _key(self) -> Tuple[int, ...]:
    return _strip_trailing_zeros(self.components)

  def numify(self) -> str:
    """Return the decimal notation of this version."""
    integer, *rest = self.components
    if not rest:
      return str(integer)
    return f'{integer}.' + ''.join(f'{c:03d}' for c in rest)

  def normal(self) -> str:
    """Return the dotted-decimal notation of this version."""
    return _normal(self.components)

  def __str__(self) -> str:
    return self.string

  def __repr__(self) -> str:
    return f'CpanVersion({self.string!r})'

  def __hash__(self):
    return hash(self._key())

  def __eq__(self, other: Any) -> bool:
    if not isinstance(other, CpanVersion):
      return NotImplemented
    return self._key() == other._key()

  def __lt__(self, other: Any) -> bool:
    if not isinstance(other, CpanVersion):
      return NotImplemented
    return self._key() < other._key()

  def __le__(self, other: Any) -> bool:
    if not isinstance(other, CpanVersion):
      return NotImplemented
    return self._key() <= other._key()

  def __gt__(self, other: Any) -> bool:
    if not isinstance(other, CpanVersion):
      return NotImplemented
    return self._key() > other._key()

  def __ge__(self, other: Any) -> bool:
    if not isinstance(other, CpanVersion):
      return NotImplemented
    return self._key() >= other._key()


def _normal(components: Tuple[int, ...]) -> str:
  padded = list(components)
  padded.extend([0] * (_NORMAL_COMPONENTS - len(padded)))
  return 'v' + '.'.join(str(c) for c in padded)


class CPAN(VersionScheme):
  """CPAN version scheme."""

  def parse(self, version: str) -> CpanVersion:
    """Parse a version."""
    return CpanVersion.from_string(version)

  def is_version(self, value: Any) -> bool:
    return isinstance(value, CpanVersion)
