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

import random
import unittest
from concurrent.futures import ThreadPoolExecutor

from pyparquetsplit.metadata.block_location import BlockLocation
from pyparquetsplit.metadata.row_group import RowGroup
from pyparquetsplit.read.scanner.split_generator import plan_splits


def random_file(rnd: random.Random):
    """Contiguous row groups and storage blocks tiling the same bytes."""
    row_groups = []
    offset = 0
    for _ in range(rnd.randint(1, 60)):
        size = rnd.randint(1, 50)
        row_groups.append(RowGroup.of(offset, size, rnd.randint(0, 1000)))
        offset += size

    blocks = []
    block_size = rnd.randint(10, 200)
    block_offset = 0
    while block_offset < offset:
        index = len(blocks)
        blocks.append(BlockLocation(block_offset, block_size, ("host%d-a" % index, "host%d-b" % index)))
        block_offset += block_size

    min_size = rnd.randint(0, 150)
    max_size = rnd.randint(max(min_size, 1), 300)
    return row_groups, blocks, min_size, max_size


class SplitPropertiesTest(unittest.TestCase):

    def test_invariants_over_random_files(self):
        rnd = random.Random(20240611)
        for _ in range(300):
            row_groups, blocks, min_size, max_size = random_file(rnd)
            context = {"job": "random"}
            splits = plan_splits(row_groups, blocks, "schema", context, min_size, max_size)

            # complete ordered partition
            members = [row_group for split in splits for row_group in split.row_groups]
            self.assertEqual(row_groups, members)

            # size conservation
            self.assertEqual(sum(rg.size for rg in row_groups), sum(split.size for split in splits))

            for i, split in enumerate(splits):
                self.assertGreater(split.row_group_count, 0)
                self.assertEqual(sum(rg.size for rg in split.row_groups), split.size)
                self.assertEqual(sum(rg.row_count for rg in split.row_groups), split.length)
                if i < len(splits) - 1:
                    self.assertGreaterEqual(split.size, min_size)
                # at most the last row group goes past the max size
                self.assertLess(split.size - split.row_groups[-1].size, max_size)

                containing = [block for block in blocks if block.contains(split.start)]
                self.assertEqual(containing[0].hosts, split.locations)
                self.assertEqual(context, split.read_support_metadata)

    def test_deterministic(self):
        rnd = random.Random(7)
        for _ in range(50):
            row_groups, blocks, min_size, max_size = random_file(rnd)
            first = plan_splits(row_groups, blocks, "schema", {}, min_size, max_size)
            second = plan_splits(row_groups, blocks, "schema", {}, min_size, max_size)
            self.assertEqual(first, second)

    def test_concurrent_planning_matches_sequential(self):
        rnd = random.Random(11)
        files = [random_file(rnd) for _ in range(40)]

        def plan(file):
            row_groups, blocks, min_size, max_size = file
            return plan_splits(row_groups, blocks, "schema", {"k": "v"}, min_size, max_size)

        expected = [plan(file) for file in files]
        with ThreadPoolExecutor(max_workers=8) as executor:
            actual = list(executor.map(plan, files))
        self.assertEqual(expected, actual)


if __name__ == '__main__':
    unittest.main()
