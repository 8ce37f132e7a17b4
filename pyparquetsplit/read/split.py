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
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from pyparquetsplit.metadata.row_group import RowGroup


@dataclass(frozen=True)
class ParquetSplit:
    """A contiguous run of row groups of one file, handed to one task."""
    row_groups: Tuple[RowGroup, ...]
    size: int
    length: int  # rows
    locations: Tuple[str, ...]
    schema: str
    read_support_metadata: Mapping[str, str] = field(default_factory=dict, hash=False)
    path: Optional[str] = None
    extra_metadata: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        object.__setattr__(self, 'row_groups', tuple(self.row_groups))
        object.__setattr__(self, 'locations', tuple(self.locations))
        object.__setattr__(self, 'read_support_metadata', MappingProxyType(dict(self.read_support_metadata)))
        object.__setattr__(self, 'extra_metadata', MappingProxyType(dict(self.extra_metadata)))

    @property
    def start(self) -> int:
        return self.row_groups[0].start_offset

    @property
    def row_group_count(self) -> int:
        return len(self.row_groups)

    def get_locations(self) -> List[str]:
        return list(self.locations)

    def __str__(self):
        return (f"ParquetSplit(path={self.path}, start={self.start}, size={self.size}, "
                f"length={self.length}, row_groups={self.row_group_count}, locations={list(self.locations)})")
