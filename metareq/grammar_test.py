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
"""Requirement grammar tests."""

import unittest

from . import grammar
from .errors import ParseError
from .modifiers import Operation

_MIN = Operation.MINIMUM
_MAX = Operation.MAXIMUM
_EXCL = Operation.EXCLUSION
_EXACT = Operation.EXACT_VERSION


class ParseTest(unittest.TestCase):
  """parse() tests."""

  def test_operators(self):
    """Test each operator."""
    self.assertEqual([(_MIN, '1.3')], grammar.parse('1.3'))
    self.assertEqual([(_MIN, '1.3')], grammar.parse('>= 1.3'))
    self.assertEqual([(_MAX, '1.3')], grammar.parse('<= 1.3'))
    self.assertEqual([(_EXACT, '1.3')], grammar.parse('== 1.3'))
    self.assertEqual([(_EXCL, '1.3')], grammar.parse('!= 1.3'))
    self.assertEqual([(_MIN, '1.3'), (_EXCL, '1.3')], grammar.parse('> 1.3'))
    self.assertEqual([(_MAX, '1.3'), (_EXCL, '1.3')], grammar.parse('< 1.3'))

  def test_list(self):
    """Test comma-separated requirements."""
    self.assertEqual([(_MIN, '1.2'), (_EXCL, '1.5'), (_MAX, '2.0')],
                     grammar.parse('>= 1.2, != 1.5, <= 2.0'))

  def test_whitespace(self):
    """Test that extra whitespace is allowed."""
    self.assertEqual([(_MIN, '1'), (_MAX, '2')],
                     grammar.parse('  >=1 ,<=   2  '))
    self.assertEqual([(_EXACT, 'v1.2.3')], grammar.parse('==v1.2.3'))

  def test_malformed(self):
    """Test malformed requirement strings."""
    for requirement in ('= 2', '=> 2', '~ 2', '^1.2', '>=', '>== 2',
                        '>= 1,, <= 2', '>= 1,', ', 1', ''):
      with self.subTest(requirement=requirement):
        with self.assertRaises(ParseError) as cm:
          grammar.parse(requirement)
        self.assertEqual(f'illegal requirement string: {requirement}',
                         str(cm.exception))
        self.assertIsInstance(cm.exception, ValueError)


class FormatStructTest(unittest.TestCase):
  """format_struct() tests."""

  def test_format(self):
    """Test formatting."""
    self.assertEqual('1', grammar.format_struct([('>=', '1')]))
    self.assertEqual('> 1', grammar.format_struct([('>', '1')]))
    self.assertEqual('== 1', grammar.format_struct([('==', '1')]))
    self.assertEqual('>= 1, <= 2',
                     grammar.format_struct([('>=', '1'), ('<=', '2')]))
    self.assertEqual('', grammar.format_struct([]))


if __name__ == '__main__':
  unittest.main()
