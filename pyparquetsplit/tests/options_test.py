################################################################################
#  Licensed to the Apache Software Foundation (ASF) under one
#  or more contributor license agreements.  See the NOTICE file
#  distributed with this work for additional information
#  regarding copyright ownership.  The ASF licenses this file
#  to you under the Apache License, Version 2.0 (the
#  "License"); you may not use this file except in compliance
#  with the License.  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
# limitations under the License.
################################################################################

import unittest

from pyparquetsplit.common.memory_size import MemorySize
from pyparquetsplit.common.options import Options
from pyparquetsplit.common.options.options_utils import OptionsUtils
from pyparquetsplit.common.options.split_options import SplitOptions


class MemorySizeTest(unittest.TestCase):

    def test_parse(self):
        self.assertEqual(50, MemorySize.parse_bytes("50"))
        self.assertEqual(1024, MemorySize.parse_bytes("1kb"))
        self.assertEqual(1024, MemorySize.parse_bytes("1 k"))
        self.assertEqual(128 * 1024 * 1024, MemorySize.parse("128mb").get_bytes())
        self.assertEqual(3 << 30, MemorySize.parse_bytes("3 GB"))
        self.assertEqual(10, MemorySize.parse_bytes(" 10 bytes "))

    def test_parse_invalid(self):
        for text in ["", "  ", "abc", "-5", "1.5mb"]:
            with self.assertRaises(ValueError):
                MemorySize.parse_bytes(text)
        with self.assertRaises(ValueError) as context:
            MemorySize.parse_bytes("10xb")
        self.assertIn("does not match any of the recognized units", str(context.exception))
        with self.assertRaises(ValueError):
            MemorySize.parse_bytes("9223372036854775808")

    def test_to_string(self):
        self.assertEqual("0 bytes", str(MemorySize.ZERO))
        self.assertEqual("128 mb", str(MemorySize.of_mebi_bytes(128)))
        self.assertEqual("1 kb", str(MemorySize.of_kibi_bytes(1)))
        self.assertEqual("1025 bytes", str(MemorySize.of_bytes(1025)))
        self.assertEqual(MemorySize.MAX_VALUE, MemorySize.parse(str(MemorySize.MAX_VALUE)))

    def test_negative(self):
        with self.assertRaises(ValueError):
            MemorySize(-1)


class SplitOptionsTest(unittest.TestCase):

    def test_defaults(self):
        split_options = SplitOptions(Options.from_none())
        self.assertEqual(0, split_options.split_min_size())
        self.assertEqual(2 ** 63 - 1, split_options.split_max_size())
        self.assertEqual(128 * 1024 * 1024, split_options.block_size())
        self.assertEqual(["localhost"], split_options.block_hosts())

    def test_configured(self):
        split_options = SplitOptions(Options({
            'split.min-size': '64mb',
            'split.max-size': 256 * 1024 * 1024,
            'fs.block.size': MemorySize.of_mebi_bytes(64),
            'fs.block.hosts': 'dn1.example.com, dn2.example.com,,',
        }))
        self.assertEqual(64 * 1024 * 1024, split_options.split_min_size())
        self.assertEqual(256 * 1024 * 1024, split_options.split_max_size())
        self.assertEqual(64 * 1024 * 1024, split_options.block_size())
        self.assertEqual(["dn1.example.com", "dn2.example.com"], split_options.block_hosts())

    def test_set_and_copy(self):
        options = Options.from_none()
        options.set(SplitOptions.SPLIT_MAX_SIZE, MemorySize.of_kibi_bytes(4))
        self.assertEqual("4 kb", options.to_map()['split.max-size'])
        self.assertTrue(options.contains(SplitOptions.SPLIT_MAX_SIZE))
        self.assertFalse(options.contains(SplitOptions.SPLIT_MIN_SIZE))

        copied = options.copy()
        copied.set(SplitOptions.SPLIT_MIN_SIZE, MemorySize.of_bytes(1))
        self.assertFalse(options.contains(SplitOptions.SPLIT_MIN_SIZE))
        self.assertEqual(4096, SplitOptions(copied).split_max_size())

    def test_from_map(self):
        options = Options({'a': 'b'})
        self.assertIs(options, Options.from_map(options))
        self.assertEqual({}, Options.from_map(None).to_map())
        source = {'a': 'b'}
        self.assertIsNot(source, Options.from_map(source).to_map())

    def test_convert_value(self):
        self.assertEqual("7", OptionsUtils.convert_value(7, str))
        self.assertEqual(MemorySize.of_kibi_bytes(2), OptionsUtils.convert_value("2kb", MemorySize))
        self.assertEqual(MemorySize.of_bytes(50), OptionsUtils.convert_value(50, MemorySize))
        self.assertIsNone(OptionsUtils.convert_value(None, MemorySize))
        with self.assertRaises(ValueError):
            OptionsUtils.convert_value(True, MemorySize)
        with self.assertRaises(ValueError):
            OptionsUtils.convert_value(1.5, MemorySize)
        with self.assertRaises(ValueError):
            OptionsUtils.convert_value("1", int)


if __name__ == '__main__':
    unittest.main()
