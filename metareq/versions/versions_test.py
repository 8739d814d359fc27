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
"""Version scheme registry tests."""

import unittest

from .. import versions


class VersionsTest(unittest.TestCase):
  """Version scheme registry tests."""

  def test_get(self):
    """Test get."""
    self.assertIsInstance(versions.get('CPAN'), versions.CPAN)
    self.assertIsInstance(versions.get('PyPI'), versions.PyPI)
    self.assertIsInstance(versions.get('SemVer'), versions.SemVer)
    self.assertIsNone(versions.get('Perl6'))

  def test_names(self):
    """Test names."""
    self.assertEqual(['CPAN', 'PyPI', 'SemVer'], versions.names())
    for name in versions.names():
      self.assertEqual(name, versions.get(name).name)


if __name__ == '__main__':
  unittest.main()
