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


class ConfigurationError(ValueError):
    """The split size window is not usable for planning."""

    def __init__(self, min_split_size: int, max_split_size: int):
        self.min_split_size = min_split_size
        self.max_split_size = max_split_size
        super().__init__(
            f"maxSplitSize should be positive and greater or equal to the minSplitSize: "
            f"maxSplitSize = {max_split_size}; minSplitSize is {min_split_size}")


class ParquetDecodingException(Exception):
    """Parquet file metadata cannot be turned into row groups"""

    def __init__(self, message: str, path: str = None):
        self.path = path
        if path is not None:
            message = f"{message} (file: {path})"
        super().__init__(message)


class RowGroupsNotSortedException(ParquetDecodingException):
    """Row groups do not appear in ascending start offset order"""

    def __init__(self, previous_offset: int, current_offset: int, path: str = None):
        self.previous_offset = previous_offset
        self.current_offset = current_offset
        super().__init__(
            f"row groups are not sorted: previous row groups starts at {previous_offset}, "
            f"current row group starts at {current_offset}",
            path)
