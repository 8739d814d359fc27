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
"""Version ranges for a single module.

A range is either a `BoundedRange` (an optional inclusive minimum, an
optional inclusive maximum and a set of excluded versions) or an
`ExactRange` that accepts a single version. Ranges are immutable: every
`with_*` method returns a new range and reduces it to its simplest form,
raising `RangeConflict` as soon as the constraints become impossible.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

import attr

from . import grammar
from .errors import RangeConflict
from .modifiers import DEFAULT_MODULE, Modifier, Operation


class Range(ABC):
  """Constraints on the acceptable versions of a module."""

  @abstractmethod
  def accepts(self, version: Any) -> bool:
    """Return whether the version satisfies this range."""

  @abstractmethod
  def with_minimum(self, minimum: Any, module: str = DEFAULT_MODULE) -> Range:
    """Add an inclusive minimum."""

  @abstractmethod
  def with_maximum(self, maximum: Any, module: str = DEFAULT_MODULE) -> Range:
    """Add an inclusive maximum."""

  @abstractmethod
  def with_exclusion(self,
                     exclusion: Any,
                     module: str = DEFAULT_MODULE) -> Range:
    """Exclude a single version."""

  @abstractmethod
  def with_exact_version(self,
                         version: Any,
                         module: str = DEFAULT_MODULE) -> Range:
    """Require exactly the given version."""

  @abstractmethod
  def as_struct(self) -> grammar.Struct:
    """Return the (operator, version string) pairs describing this range."""

  @abstractmethod
  def as_modifiers(self) -> List[Modifier]:
    """Return the modifiers that rebuild this range from an empty one."""

  def as_string(self) -> str:
    """Return the canonical requirement string."""
    return grammar.format_struct(self.as_struct())

  def merge(self, other: Range, module: str = DEFAULT_MODULE) -> Range:
    """Apply every constraint of another range to this one."""
    merged = self
    for modifier in other.as_modifiers():
      merged = modifier.apply(merged, module)
    return merged

  def __str__(self) -> str:
    return self.as_string()


@attr.s(frozen=True)
class BoundedRange(Range):
  """A range with optional bounds and excluded versions."""

  minimum: Optional[Any] = attr.ib(default=None)
  maximum: Optional[Any] = attr.ib(default=None)
  exclusions: Tuple[Any, ...] = attr.ib(default=(), converter=tuple)

  def accepts(self, version):
    if self.minimum is not None and version < self.minimum:
      return False
    if self.maximum is not None and version > self.maximum:
      return False
    return not any(version == exclusion for exclusion in self.exclusions)

  def with_minimum(self, minimum, module=DEFAULT_MODULE):
    # On a tie the new value wins.
    if self.minimum is not None and self.minimum > minimum:
      minimum = self.minimum
    return attr.evolve(self, minimum=minimum)._simplify(module)

  def with_maximum(self, maximum, module=DEFAULT_MODULE):
    if self.maximum is not None and self.maximum < maximum:
      maximum = self.maximum
    return attr.evolve(self, maximum=maximum)._simplify(module)

  def with_exclusion(self, exclusion, module=DEFAULT_MODULE):
    return attr.evolve(
        self, exclusions=self.exclusions + (exclusion,))._simplify(module)

  def with_exact_version(self, version, module=DEFAULT_MODULE):
    if not self.accepts(version):
      raise RangeConflict(
          module,
          f'exact specification {version} outside of range {self.as_string()}')
    return ExactRange(version)

  def _simplify(self, module: str) -> Range:
    """Reduce to the simplest equivalent range."""
    minimum, maximum = self.minimum, self.maximum
    if minimum is not None and maximum is not None:
      if minimum == maximum:
        if any(exclusion == minimum for exclusion in self.exclusions):
          raise RangeConflict(
              module,
              f'minimum and maximum are both {minimum}, which is excluded')
        return ExactRange(minimum)

      if minimum > maximum:
        raise RangeConflict(module,
                            f'minimum {minimum} exceeds maximum {maximum}')

    # Drop exclusions outside of the bounds, and duplicates.
    exclusions = []
    for exclusion in self.exclusions:
      if minimum is not None and exclusion < minimum:
        continue
      if maximum is not None and exclusion > maximum:
        continue
      if any(exclusion == kept for kept in exclusions):
        continue
      exclusions.append(exclusion)

    return attr.evolve(self, exclusions=exclusions)

  def as_struct(self):
    parts = []
    exclusions = list(self.exclusions)
    for operator, strict_operator, bound in (('>=', '>', self.minimum),
                                             ('<=', '<', self.maximum)):
      if bound is None:
        continue

      remaining = [exclusion for exclusion in exclusions if exclusion != bound]
      if len(remaining) == len(exclusions):
        parts.append((operator, str(bound)))
      else:
        parts.append((strict_operator, str(bound)))
        exclusions = remaining

    parts.extend(('!=', str(exclusion)) for exclusion in exclusions)
    return parts

  def as_modifiers(self):
    modifiers = []
    if self.minimum is not None:
      modifiers.append(Modifier(Operation.MINIMUM, self.minimum))
    if self.maximum is not None:
      modifiers.append(Modifier(Operation.MAXIMUM, self.maximum))
    modifiers.extend(
        Modifier(Operation.EXCLUSION, exclusion)
        for exclusion in self.exclusions)
    return modifiers


@attr.s(frozen=True)
class ExactRange(Range):
  """A range accepting exactly one version."""

  version: Any = attr.ib()

  def accepts(self, version):
    return self.version == version

  def with_minimum(self, minimum, module=DEFAULT_MODULE):
    if self.version >= minimum:
      return self
    raise RangeConflict(
        module, f'minimum {minimum} exceeds exact specification {self.version}')

  def with_maximum(self, maximum, module=DEFAULT_MODULE):
    if self.version <= maximum:
      return self
    raise RangeConflict(
        module, f'maximum {maximum} below exact specification {self.version}')

  def with_exclusion(self, exclusion, module=DEFAULT_MODULE):
    if exclusion != self.version:
      return self
    raise RangeConflict(
        module,
        f'tried to exclude {exclusion}, which is already exactly specified')

  def with_exact_version(self, version, module=DEFAULT_MODULE):
    if self.accepts(version):
      return self
    raise RangeConflict(
        module, f"can't be exactly {version} when exact requirement is "
        f'already {self.version}')

  def as_struct(self):
    return [('==', str(self.version))]

  def as_modifiers(self):
    return [Modifier(Operation.EXACT_VERSION, self.version)]
