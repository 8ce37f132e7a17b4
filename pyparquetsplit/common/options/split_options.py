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
from typing import List

from pyparquetsplit.common.memory_size import MemorySize
from pyparquetsplit.common.options.config_option import ConfigOption
from pyparquetsplit.common.options.config_options import ConfigOptions
from pyparquetsplit.common.options.options import Options


class SplitOptions:
    """Options that control how Parquet files are planned into splits."""

    SPLIT_MIN_SIZE: ConfigOption[MemorySize] = (
        ConfigOptions.key("split.min-size")
        .memory_type()
        .default_value(MemorySize.ZERO)
        .with_description(
            "The minimum size of a split. A split stops at a storage block boundary "
            "only once it holds at least this many bytes.")
    )

    SPLIT_MAX_SIZE: ConfigOption[MemorySize] = (
        ConfigOptions.key("split.max-size")
        .memory_type()
        .default_value(MemorySize.MAX_VALUE)
        .with_description(
            "The maximum size of a split. A split may exceed it by at most one row group.")
    )

    FS_BLOCK_SIZE: ConfigOption[MemorySize] = (
        ConfigOptions.key("fs.block.size")
        .memory_type()
        .default_value(MemorySize.of_mebi_bytes(128))
        .with_description(
            "The storage block size used to derive block locations for files whose "
            "filesystem does not report any.")
    )

    FS_BLOCK_HOSTS: ConfigOption[str] = (
        ConfigOptions.key("fs.block.hosts")
        .string_type()
        .default_value("localhost")
        .with_description("Comma separated hosts holding a replica of every derived block.")
    )

    def __init__(self, options: Options):
        self.options = options

    def split_min_size(self, default=None) -> int:
        return self.options.get(SplitOptions.SPLIT_MIN_SIZE, default).get_bytes()

    def split_max_size(self, default=None) -> int:
        return self.options.get(SplitOptions.SPLIT_MAX_SIZE, default).get_bytes()

    def block_size(self, default=None) -> int:
        return self.options.get(SplitOptions.FS_BLOCK_SIZE, default).get_bytes()

    def block_hosts(self, default=None) -> List[str]:
        hosts = self.options.get(SplitOptions.FS_BLOCK_HOSTS, default)
        return [host.strip() for host in hosts.split(",") if host.strip()]
