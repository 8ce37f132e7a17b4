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
from typing import List, Optional, Sequence

from pyparquetsplit.metadata.block_location import BlockLocation

logger = logging.getLogger(__name__)


class BlockLocator:
    """
    Finds the storage block holding a byte offset of one file.

    Blocks must be sorted by offset. Queries are expected in non-decreasing order,
    as produced by a front-to-back scan over the row groups, so the locator keeps a
    cursor and never looks at a block again once the scan has moved past its end.
    A query below the previous one restarts the cursor from the first block.

    When no block contains the offset, the nearest block before it is returned, or
    the first block when the offset lies before every block. The fallback is
    logged since the split will not be local to its data.
    """

    def __init__(self, blocks: Sequence[BlockLocation]):
        self.blocks: List[BlockLocation] = list(blocks)
        self._cursor = 0
        self._last_position = None

    def _advance(self, position: int):
        if self._last_position is not None and position < self._last_position:
            self._cursor = 0
        self._last_position = position

        while self._cursor < len(self.blocks) and self.blocks[self._cursor].end <= position:
            self._cursor += 1

    def locate(self, position: int) -> Optional[BlockLocation]:
        if not self.blocks:
            return None

        self._advance(position)
        if self._cursor < len(self.blocks) and self.blocks[self._cursor].contains(position):
            return self.blocks[self._cursor]

        fallback = self.blocks[self._cursor - 1] if self._cursor > 0 else self.blocks[0]
        logger.warning("No storage block contains offset %d, using %s instead", position, fallback)
        return fallback

    def boundary_after(self, position: int) -> Optional[int]:
        """
        The first block boundary after `position`: the end of the block holding it,
        or the start of the next block when it falls in a gap. None when no block
        lies ahead.
        """
        self._advance(position)
        if self._cursor >= len(self.blocks):
            return None
        block = self.blocks[self._cursor]
        return block.end if block.contains(position) else block.offset
