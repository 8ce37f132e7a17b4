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

from pyarrow.fs import FileSystem, FileType, LocalFileSystem

from pyparquetsplit.common.options import Options
from pyparquetsplit.common.options.split_options import SplitOptions
from pyparquetsplit.metadata.block_location import BlockLocation

logger = logging.getLogger(__name__)


class FileBlocks:
    """
    Storage block view of files on a pyarrow filesystem.

    pyarrow filesystems do not expose replica placement, so a file is cut into
    fixed size blocks that all report the same configured hosts, the way a local
    filesystem presents itself to a block-aware scheduler.
    """

    def __init__(self, filesystem: Optional[FileSystem] = None, block_size: int = 128 << 20,
                 hosts: Sequence[str] = ("localhost",)):
        if block_size <= 0:
            raise ValueError(f"block size must be positive, got {block_size}")
        self.filesystem = filesystem if filesystem is not None else LocalFileSystem()
        self.block_size = block_size
        self.hosts = tuple(hosts)

    @classmethod
    def from_options(cls, options: Options, filesystem: Optional[FileSystem] = None) -> 'FileBlocks':
        split_options = SplitOptions(options)
        return cls(filesystem, split_options.block_size(), split_options.block_hosts())

    def get_file_size(self, path: str) -> int:
        file_info = self.filesystem.get_file_info(path)
        if file_info.type != FileType.File:
            raise FileNotFoundError(f"{path} is not a file")
        return file_info.size

    def get_file_block_locations(self, path: str, start: int = 0,
                                 length: Optional[int] = None) -> List[BlockLocation]:
        """Blocks of the file at `path` overlapping [start, start + length)."""
        return self.blocks_for_size(self.get_file_size(path), start, length)

    def blocks_for_size(self, file_size: int, start: int = 0,
                        length: Optional[int] = None) -> List[BlockLocation]:
        end = file_size if length is None else min(file_size, start + length)
        blocks = []
        offset = (start // self.block_size) * self.block_size
        while offset < end:
            block_length = min(self.block_size, file_size - offset)
            blocks.append(BlockLocation(offset, block_length, self.hosts))
            offset += block_length
        logger.debug("File of %d bytes spans %d blocks of %d bytes", file_size, len(blocks), self.block_size)
        return blocks
