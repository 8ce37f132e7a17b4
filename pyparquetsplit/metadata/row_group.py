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

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class ColumnChunk:
    """Location and size of one column's data inside a row group."""
    path: str
    codec: str
    start_offset: int  # first page of the chunk, dictionary page included
    total_compressed_size: int
    total_uncompressed_size: int
    num_values: int
    encodings: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RowGroup:
    """
    A row group as seen by the split planner.

    Only `start_offset`, `size` and `row_count` take part in planning; the column
    chunks are carried along for the readers that open the split later.
    """
    start_offset: int
    size: int
    row_count: int
    columns: Tuple[ColumnChunk, ...] = field(default=(), compare=False)
    ordinal: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, 'columns', tuple(self.columns))

    @classmethod
    def of(cls, start_offset: int, size: int, row_count: int) -> 'RowGroup':
        return cls(start_offset=start_offset, size=size, row_count=row_count)

    @property
    def compressed_size(self) -> int:
        return sum(column.total_compressed_size for column in self.columns)

    def __str__(self):
        return f"RowGroup(start={self.start_offset}, size={self.size}, rows={self.row_count})"
