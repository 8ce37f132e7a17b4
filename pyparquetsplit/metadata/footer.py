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
from dataclasses import dataclass, field
from typing import Dict, List, Optional

import pyarrow.parquet as pq
from pyarrow.fs import FileSystem

from pyparquetsplit.common.exceptions import (ParquetDecodingException,
                                              RowGroupsNotSortedException)
from pyparquetsplit.metadata.row_group import ColumnChunk, RowGroup

logger = logging.getLogger(__name__)


@dataclass
class Footer:
    """The parts of a Parquet footer that split planning needs."""
    path: str
    row_groups: List[RowGroup]
    schema: str
    key_value_metadata: Dict[str, str] = field(default_factory=dict)
    created_by: Optional[str] = None

    @property
    def num_rows(self) -> int:
        return sum(row_group.row_count for row_group in self.row_groups)

    @classmethod
    def from_metadata(cls, path: str, metadata: pq.FileMetaData) -> 'Footer':
        """
        Convert pyarrow file metadata into planner row groups.

        Raises:
            RowGroupsNotSortedException: If a row group starts before the one preceding it.
            ParquetDecodingException: If a row group has no column chunks.
        """
        row_groups = []
        for i in range(metadata.num_row_groups):
            row_group = _to_row_group(path, i, metadata.row_group(i))
            if row_groups and row_group.start_offset < row_groups[-1].start_offset:
                raise RowGroupsNotSortedException(row_groups[-1].start_offset, row_group.start_offset, path)
            row_groups.append(row_group)

        key_value_metadata = {}
        if metadata.metadata:
            for key, value in metadata.metadata.items():
                key_value_metadata[_decode(key)] = _decode(value)

        return cls(
            path=path,
            row_groups=row_groups,
            schema=_message_type(metadata.schema),
            key_value_metadata=key_value_metadata,
            created_by=metadata.created_by,
        )


def read_footer(path: str, filesystem: Optional[FileSystem] = None) -> Footer:
    """Read the footer of the Parquet file at `path`."""
    metadata = pq.read_metadata(path, filesystem=filesystem)
    logger.debug("Read footer of %s: %d row groups, %d rows",
                 path, metadata.num_row_groups, metadata.num_rows)
    return Footer.from_metadata(path, metadata)


def _to_row_group(path: str, ordinal: int, row_group_metadata) -> RowGroup:
    if row_group_metadata.num_columns == 0:
        raise ParquetDecodingException(f"row group {ordinal} has no column chunks", path)

    columns = []
    for j in range(row_group_metadata.num_columns):
        column = row_group_metadata.column(j)
        columns.append(ColumnChunk(
            path=column.path_in_schema,
            codec=column.compression,
            start_offset=_column_start_offset(column),
            total_compressed_size=column.total_compressed_size,
            total_uncompressed_size=column.total_uncompressed_size,
            num_values=column.num_values,
            encodings=tuple(column.encodings),
        ))

    return RowGroup(
        start_offset=columns[0].start_offset,
        size=row_group_metadata.total_byte_size,
        row_count=row_group_metadata.num_rows,
        columns=tuple(columns),
        ordinal=ordinal,
    )


def _column_start_offset(column) -> int:
    # the dictionary page, when present, precedes the data pages
    offset = column.data_page_offset
    dictionary_offset = column.dictionary_page_offset
    if column.has_dictionary_page and dictionary_offset is not None and 0 < dictionary_offset < offset:
        offset = dictionary_offset
    return offset


def _message_type(schema) -> str:
    # the object address leads the repr of a ParquetSchema, the message type follows
    text = str(schema)
    if text.startswith("<"):
        text = text.partition("\n")[2]
    return text.strip()


def _decode(value) -> str:
    if isinstance(value, bytes):
        return value.decode('utf-8', errors='replace')
    return str(value)
