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

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class BlockLocation:
    """
    A replicated storage block of a file: the byte range [offset, offset + length)
    and the hosts holding a replica of it, in the order the filesystem reports them.
    """
    offset: int
    length: int
    hosts: Tuple[str, ...] = ()
    names: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'hosts', tuple(self.hosts))
        object.__setattr__(self, 'names', tuple(self.names))

    @property
    def end(self) -> int:
        return self.offset + self.length

    def contains(self, position: int) -> bool:
        return self.offset <= position < self.end

    def __str__(self):
        return f"BlockLocation([{self.offset}, {self.end}), hosts={list(self.hosts)})"
