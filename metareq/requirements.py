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
"""A set of version requirements for a distribution.

Requirements map module names to version ranges, as found in the prereqs of
META.json and META.yml files:

  requirements = Requirements()
  requirements.add_minimum('Library::Foo', '1.208')
  requirements.add_minimum('Library::Foo', '2.602')
  requirements.add_minimum('Module::Bar', 'v1.2.3')
  requirements.as_string_hash()
  # {'Library::Foo': '2.602', 'Module::Bar': 'v1.2.3'}

Constraints are reduced to their simplest form as they are added, and
impossible combinations raise immediately. A Requirements object is not
thread-safe; callers sharing one across threads must serialize mutations.
"""
import logging
import re
from typing import (Any, Callable, Dict, List, Mapping, Optional, Set, Tuple,
                    Union)

from . import config
from . import grammar
from . import versions
from .errors import FinalizedMutation, RequirementsError, VersionConflict
from .modifiers import Modifier, Operation
from .ranges import BoundedRange, Range
from .versions import InvalidVersion, VersionScheme

BadVersionHook = Callable[[str, str], Any]

_WHITESPACE = re.compile(r'\s')


def _is_zero(version: Any) -> bool:
  """Whether the version is absent or literally "0"."""
  return version is None or str(version) == '0'


class Requirements:
  """Version requirements keyed by module name.

  Args:
    bad_version_hook: called as `hook(version_string, module)` when a version
      string cannot be parsed. It must return a version of the active scheme.
    scheme: a VersionScheme or the name of one. Defaults to
      `config.default_scheme`.
  """

  def __init__(self,
               bad_version_hook: Optional[BadVersionHook] = None,
               scheme: Optional[Union[VersionScheme, str]] = None):
    if bad_version_hook is not None and not callable(bad_version_hook):
      raise TypeError('bad_version_hook must be callable')

    if scheme is None:
      scheme = config.default_scheme
    if isinstance(scheme, str):
      resolved = versions.get(scheme)
      if resolved is None:
        raise ValueError(f'Unknown version scheme: {scheme} '
                         f'(known: {", ".join(versions.names())})')
      scheme = resolved

    self.bad_version_hook = bad_version_hook
    self.scheme: VersionScheme = scheme
    self._requirements: Dict[str, Range] = {}
    self._finalized = False

  @classmethod
  def from_string_hash(cls,
                       string_hash: Mapping[str, Optional[str]],
                       options: Optional[Mapping[str, Any]] = None):
    """Construct requirements from a module -> requirement string mapping.

    `options` holds the constructor keyword arguments.
    """
    if options is None:
      options = {}
    if not isinstance(options, Mapping):
      raise TypeError(f'Options to {cls.__name__} must be a mapping')

    requirements = cls(**options)
    for module, requirement in string_hash.items():
      requirements.add_string_requirement(module, requirement)

    return requirements

  def _version_object(self, module: str, version: Any) -> Any:
    """Convert a version argument to a version of the active scheme."""
    if version is None or str(version).strip() in ('', '0'):
      return self.scheme.zero

    if self.scheme.is_version(version):
      return version

    text = str(version)
    try:
      return self.scheme.parse(text)
    except InvalidVersion as e:
      if self.bad_version_hook is not None:
        coerced = self.bad_version_hook(text, module)
        if self.scheme.is_version(coerced):
          return coerced
      raise VersionConflict(text, str(e)) from e

  def _modify_entry(self, module: str, operation: Operation, version: Any):
    """Apply a modifier to the entry for a module.

    All changes to existing entries go through here so that finalized
    requirements can only be changed in ways that do not alter them.
    """
    old = self._requirements.get(module)
    if self._finalized and old is None:
      raise FinalizedMutation(
          "can't add new requirements to finalized requirements")

    new = Modifier(operation, version).apply(old or BoundedRange(), module)
    if self._finalized and old.as_string() != new.as_string():
      raise FinalizedMutation("can't modify finalized requirements")

    self._requirements[module] = new

  def add_minimum(self, module: str, version: Any):
    """Add an inclusive minimum version for a module.

    A redundant minimum has no effect.
    """
    if _is_zero(version):
      # A zero minimum never narrows an existing entry.
      if module in self._requirements:
        return
      if self._finalized:
        raise FinalizedMutation(
            "can't add new requirements to finalized requirements")
      self._requirements[module] = BoundedRange(minimum=self.scheme.zero)
      return

    self._modify_entry(module, Operation.MINIMUM,
                       self._version_object(module, version))

  def add_maximum(self, module: str, version: Any):
    """Add an inclusive maximum version for a module."""
    self._modify_entry(module, Operation.MAXIMUM,
                       self._version_object(module, version))

  def add_exclusion(self, module: str, version: Any):
    """Exclude a single version of a module."""
    self._modify_entry(module, Operation.EXCLUSION,
                       self._version_object(module, version))

  def exact_version(self, module: str, version: Any):
    """Require exactly the given version of a module."""
    self._modify_entry(module, Operation.EXACT_VERSION,
                       self._version_object(module, version))

  def _apply(self, module: str, operation: Operation, version: Any):
    if operation is Operation.MINIMUM:
      self.add_minimum(module, version)
    elif operation is Operation.MAXIMUM:
      self.add_maximum(module, version)
    elif operation is Operation.EXCLUSION:
      self.add_exclusion(module, version)
    elif operation is Operation.EXACT_VERSION:
      self.exact_version(module, version)
    else:
      raise ValueError(f'Unknown operation: {operation}')

  def add_requirements(self, other: 'Requirements'):
    """Add all requirements of another Requirements object.

    Either every requirement is added or, if any of them conflicts, none are.
    """
    snapshot = dict(self._requirements)
    try:
      for module, range_ in other._requirements.items():  # pylint: disable=protected-access
        for modifier in range_.as_modifiers():
          self._apply(module, modifier.operation, modifier.version)
    except RequirementsError:
      self._requirements = snapshot
      raise

  def add_string_requirement(self, module: str, requirement: Any):
    """Parse a requirement string and add it for a module.

    For example `'>= 1.208, <= 2.206, != 1.5'`. A version without an
    operator is a minimum. A blank requirement is treated as '0'.
    """
    if requirement is None or not str(requirement).strip():
      logging.warning("Undefined requirement for %s treated as '0'", module)
      requirement = '0'

    parsed: List[Tuple[Operation, Any]] = [
        (operation, self._version_object(module, version))
        for operation, version in grammar.parse(str(requirement))
    ]

    previous = self._requirements.get(module)
    try:
      for operation, version in parsed:
        self._apply(module, operation, version)
    except RequirementsError:
      if previous is None:
        self._requirements.pop(module, None)
      else:
        self._requirements[module] = previous
      raise

  def accepts_module(self, module: str, version: Any) -> bool:
    """Return whether the version satisfies the requirements for a module.

    Modules without requirements accept every version.
    """
    version = self._version_object(module, version)
    range_ = self._requirements.get(module)
    if range_ is None:
      return True
    return range_.accepts(version)

  def clear_requirement(self, module: str):
    """Remove the requirement for a module."""
    if module not in self._requirements:
      return
    if self._finalized:
      raise FinalizedMutation(
          "can't clear requirements on finalized requirements")

    del self._requirements[module]

  def required_modules(self) -> Set[str]:
    """Return the modules that have requirements."""
    return set(self._requirements)

  def requirements_for_module(self, module: str) -> Optional[str]:
    """Return the requirement string for a module, or None."""
    range_ = self._requirements.get(module)
    if range_ is None:
      return None
    return range_.as_string()

  def structured_requirements_for_module(
      self, module: str) -> Optional[grammar.Struct]:
    """Return the (operator, version) pairs for a module, or None."""
    range_ = self._requirements.get(module)
    if range_ is None:
      return None
    return range_.as_struct()

  def clone(self) -> 'Requirements':
    """Return an independent, unfinalized copy."""
    clone = self.__class__(
        bad_version_hook=self.bad_version_hook, scheme=self.scheme)
    # Ranges are immutable, so sharing them is safe.
    clone._requirements = dict(self._requirements)  # pylint: disable=protected-access
    return clone

  def finalize(self):
    """Prevent any further change to the requirements.

    Mutations that would leave the requirements unchanged are still allowed.
    """
    self._finalized = True

  def is_finalized(self) -> bool:
    return self._finalized

  def is_simple(self) -> bool:
    """Return whether every requirement is a plain minimum version."""
    return not any(
        _WHITESPACE.search(range_.as_string())
        for range_ in self._requirements.values())

  def as_string_hash(self) -> Dict[str, str]:
    """Return the requirement string for every module."""
    return {
        module: range_.as_string()
        for module, range_ in self._requirements.items()
    }

  def __contains__(self, module: str) -> bool:
    return module in self._requirements

  def __len__(self) -> int:
    return len(self._requirements)
