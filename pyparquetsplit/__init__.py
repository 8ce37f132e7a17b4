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

from pyparquetsplit.common.exceptions import (ConfigurationError,
                                              ParquetDecodingException)
from pyparquetsplit.common.options import Options
from pyparquetsplit.common.options.split_options import SplitOptions
from pyparquetsplit.metadata.block_location import BlockLocation
from pyparquetsplit.metadata.row_group import ColumnChunk, RowGroup
from pyparquetsplit.read.input_format import ParquetInputFormat
from pyparquetsplit.read.plan import Plan
from pyparquetsplit.read.scanner.split_generator import (SplitGenerator,
                                                         plan_splits)
from pyparquetsplit.read.split import ParquetSplit

__all__ = [
    'BlockLocation',
    'ColumnChunk',
    'ConfigurationError',
    'Options',
    'ParquetDecodingException',
    'ParquetInputFormat',
    'ParquetSplit',
    'Plan',
    'RowGroup',
    'SplitGenerator',
    'SplitOptions',
    'plan_splits',
]
