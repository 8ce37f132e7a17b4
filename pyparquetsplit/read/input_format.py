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
from typing import Iterable, List, Mapping, Optional, Union

from pyarrow.fs import FileSystem

from pyparquetsplit.common.options import Options
from pyparquetsplit.common.options.split_options import SplitOptions
from pyparquetsplit.filesystem.file_blocks import FileBlocks
from pyparquetsplit.metadata.footer import Footer, read_footer
from pyparquetsplit.read.plan import Plan
from pyparquetsplit.read.scanner.split_generator import SplitGenerator
from pyparquetsplit.read.split import ParquetSplit

logger = logging.getLogger(__name__)


class ParquetInputFormat:
    """
    Turns Parquet files into splits for a job.

    The job configuration decides the split size window and the block layout, and
    is copied into every split so readers see the same settings as the planner.
    """

    def __init__(self, options: Union[Options, Mapping[str, str], None] = None,
                 filesystem: Optional[FileSystem] = None):
        self.options = Options.from_map(options)
        split_options = SplitOptions(self.options)
        # fail on a bad size window before touching any file
        self.split_generator = SplitGenerator(
            split_options.split_min_size(),
            split_options.split_max_size(),
            context=self.options.to_map(),
        )
        self.file_blocks = FileBlocks.from_options(self.options, filesystem)

    def get_splits_for_footer(self, footer: Footer) -> List[ParquetSplit]:
        blocks = self.file_blocks.get_file_block_locations(footer.path)
        return self.split_generator.generate(
            footer.row_groups,
            blocks,
            schema=footer.schema,
            path=footer.path,
            extra_metadata=footer.key_value_metadata,
        )

    def get_splits_for_file(self, path: str) -> List[ParquetSplit]:
        footer = read_footer(path, self.file_blocks.filesystem)
        splits = self.get_splits_for_footer(footer)
        logger.debug("File %s: %d row groups planned into %d splits",
                     path, len(footer.row_groups), len(splits))
        return splits

    def get_splits(self, paths: Iterable[str]) -> Plan:
        splits = []
        file_count = 0
        for path in paths:
            splits.extend(self.get_splits_for_file(path))
            file_count += 1
        plan = Plan(splits)
        logger.info("Planned %d splits for %d files (%d bytes, %d rows)",
                    len(plan), file_count, plan.total_size(), plan.total_length())
        return plan
