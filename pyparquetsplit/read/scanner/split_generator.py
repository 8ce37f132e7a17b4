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

import logging
from typing import Dict, List, Mapping, Optional, Sequence

from pyparquetsplit.common.exceptions import ConfigurationError
from pyparquetsplit.filesystem.block_locator import BlockLocator
from pyparquetsplit.metadata.block_location import BlockLocation
from pyparquetsplit.metadata.row_group import RowGroup
from pyparquetsplit.read.split import ParquetSplit

logger = logging.getLogger(__name__)


def validate_split_size(min_size: int, max_size: int):
    if max_size <= 0 or max_size < min_size:
        raise ConfigurationError(min_size, max_size)


class SplitAccumulator:
    """
    The row groups gathered so far for one split, along with the storage block
    its first byte falls in and the block boundary the split should not cross.
    """

    def __init__(self, block: Optional[BlockLocation], boundary: Optional[int]):
        self.block = block
        self.boundary = boundary
        self.members: List[RowGroup] = []
        self.size = 0

    def add(self, row_group: RowGroup):
        self.members.append(row_group)
        self.size += row_group.size

    def is_empty(self) -> bool:
        return not self.members

    def crosses_block(self, row_group: RowGroup) -> bool:
        """Whether the row group starts at or past this split's block boundary."""
        return self.boundary is not None and row_group.start_offset >= self.boundary

    def should_close_before(self, row_group: RowGroup, min_size: int) -> bool:
        # a split that reached the minimum stays inside its block
        return not self.is_empty() and self.size >= min_size and self.crosses_block(row_group)

    def to_split(self, schema: str, context: Mapping[str, str], path: Optional[str] = None,
                 extra_metadata: Optional[Mapping[str, str]] = None) -> ParquetSplit:
        return ParquetSplit(
            row_groups=tuple(self.members),
            size=self.size,
            length=sum(member.row_count for member in self.members),
            locations=self.block.hosts if self.block is not None else (),
            schema=schema,
            read_support_metadata=context,
            path=path,
            extra_metadata=extra_metadata or {},
        )


def plan_splits(
        row_groups: Sequence[RowGroup],
        blocks: Sequence[BlockLocation],
        schema: str,
        context: Mapping[str, str],
        min_size: int,
        max_size: int,
        path: Optional[str] = None,
        extra_metadata: Optional[Mapping[str, str]] = None,
) -> List[ParquetSplit]:
    """
    Partition the row groups of one file into splits.

    Row groups are taken in order. A split keeps taking row groups while its size is
    below `max_size`, so it may end up larger than `max_size` by part of its last row
    group. Once it holds at least `min_size` bytes it also stops in front of the first
    row group starting outside the block that contains the split's first byte. The
    hosts of that block become the split's locations. A split whose first byte lies
    in a gap between blocks stops at the start of the next block instead.

    Row groups must be sorted by start offset and must not overlap; blocks must be
    sorted by offset.

    Raises:
        ConfigurationError: If `max_size` is not positive or is smaller than `min_size`.
    """
    validate_split_size(min_size, max_size)

    locator = BlockLocator(blocks)
    splits = []
    next_index = 0
    while next_index < len(row_groups):
        start_offset = row_groups[next_index].start_offset
        accumulator = SplitAccumulator(locator.locate(start_offset), locator.boundary_after(start_offset))
        while accumulator.size < max_size and next_index < len(row_groups):
            row_group = row_groups[next_index]
            if accumulator.should_close_before(row_group, min_size):
                break
            accumulator.add(row_group)
            next_index += 1
        splits.append(accumulator.to_split(schema, context, path, extra_metadata))

    logger.debug("Planned %d splits from %d row groups over %d blocks (min size %d, max size %d)",
                 len(splits), len(row_groups), len(blocks), min_size, max_size)
    return splits


class SplitGenerator:
    """Plans splits of many files under one size window and job context."""

    def __init__(self, min_size: int, max_size: int, schema: str = "",
                 context: Optional[Mapping[str, str]] = None):
        validate_split_size(min_size, max_size)
        self.min_size = min_size
        self.max_size = max_size
        self.schema = schema
        self.context: Dict[str, str] = dict(context) if context else {}

    def generate(self, row_groups: Sequence[RowGroup], blocks: Sequence[BlockLocation],
                 schema: Optional[str] = None, path: Optional[str] = None,
                 extra_metadata: Optional[Mapping[str, str]] = None) -> List[ParquetSplit]:
        return plan_splits(
            row_groups,
            blocks,
            self.schema if schema is None else schema,
            self.context,
            self.min_size,
            self.max_size,
            path=path,
            extra_metadata=extra_metadata,
        )
