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
"""Textual requirement grammar.

A requirement string is a comma-separated list of tokens, each an optional
operator followed by a version:

  >= 1.2, != 1.5, <= 2.0

A token without an operator is a minimum. Extra whitespace is allowed.
"""
import re
from typing import Iterable, List, Tuple

from .errors import ParseError
from .modifiers import Operation

OPERATORS = {
    '==': (Operation.EXACT_VERSION,),
    '!=': (Operation.EXCLUSION,),
    '>=': (Operation.MINIMUM,),
    '<=': (Operation.MAXIMUM,),
    '>': (Operation.MINIMUM, Operation.EXCLUSION),
    '<': (Operation.MAXIMUM, Operation.EXCLUSION),
}

_SEPARATOR = re.compile(r'\s*,\s*')
_TOKEN = re.compile(r'^(==|!=|>=|<=|>|<)\s*(.*)$')
# Anything starting like an operator that _TOKEN did not accept.
_OPERATOR_LIKE = re.compile(r'^[=!<>~^]')

Struct = List[Tuple[str, str]]


def parse(requirement: str) -> List[Tuple[Operation, str]]:
  """Parse a requirement string into (operation, version string) pairs.

  Versions are returned as written; converting them is left to the caller.

  Raises:
    ParseError: if a token has an unknown operator, a missing version or is
      empty.
  """
  modifiers = []
  for token in _SEPARATOR.split(requirement.strip()):
    match = _TOKEN.match(token)
    if match:
      operator, version = match.groups()
      if not version or _OPERATOR_LIKE.match(version):
        raise ParseError(requirement)
      modifiers.extend(
          (operation, version) for operation in OPERATORS[operator])
    elif not token or _OPERATOR_LIKE.match(token):
      raise ParseError(requirement)
    else:
      modifiers.append((Operation.MINIMUM, token))

  return modifiers


def format_struct(struct: Iterable[Tuple[str, str]]) -> str:
  """Render a structured requirement as a requirement string."""
  parts = list(struct)
  # A bare minimum is written as just the version number.
  if len(parts) == 1 and parts[0][0] == '>=':
    return parts[0][1]

  return ', '.join(f'{operator} {version}' for operator, version in parts)
