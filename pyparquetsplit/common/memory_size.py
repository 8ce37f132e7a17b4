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

"""
Byte sizes for split planning options.

A size is written as a number with an optional unit. A bare number is a count
of bytes; units are binary multiples:
- 1b or 1bytes
- 1k or 1kb or 1kibibytes (1024 bytes)
- 1m or 1mb or 1mebibytes (1024 kibibytes)
- 1g or 1gb or 1gibibytes (1024 mebibytes)
- 1t or 1tb or 1tebibytes (1024 gibibytes)
"""

import re
from typing import List


class MemoryUnit:
    """A named multiple of bytes, used when parsing sizes from configuration."""

    BYTES = None  # Will be set after class definition
    KILO_BYTES = None
    MEGA_BYTES = None
    GIGA_BYTES = None
    TERA_BYTES = None

    def __init__(self, units: List[str], multiplier: int):
        self.units = units
        self.multiplier = multiplier

    @staticmethod
    def all_units() -> List['MemoryUnit']:
        return [MemoryUnit.BYTES, MemoryUnit.KILO_BYTES, MemoryUnit.MEGA_BYTES,
                MemoryUnit.GIGA_BYTES, MemoryUnit.TERA_BYTES]

    @staticmethod
    def parse_unit(unit_str: str) -> 'MemoryUnit':
        """
        Resolve a unit suffix, with no suffix meaning bytes.

        Raises:
            ValueError: If the unit is not recognized
        """
        unit_str = unit_str.strip().lower()
        if not unit_str:
            return MemoryUnit.BYTES

        for unit in MemoryUnit.all_units():
            if unit_str in unit.units:
                return unit

        recognized = " / ".join("(" + " | ".join(unit.units) + ")" for unit in MemoryUnit.all_units())
        raise ValueError(
            f"Memory size unit '{unit_str}' does not match any of the recognized units: {recognized}")


class MemorySize:
    """A non-negative number of bytes."""

    ZERO = None  # Will be set after class definition
    MAX_VALUE = None  # Will be set after class definition

    def __init__(self, bytes: int):
        if bytes < 0:
            raise ValueError("bytes must be >= 0")
        self.bytes = bytes

    @staticmethod
    def of_bytes(bytes: int) -> 'MemorySize':
        return MemorySize(bytes)

    @staticmethod
    def of_kibi_bytes(kibi_bytes: int) -> 'MemorySize':
        return MemorySize(kibi_bytes << 10)

    @staticmethod
    def of_mebi_bytes(mebi_bytes: int) -> 'MemorySize':
        return MemorySize(mebi_bytes << 20)

    def get_bytes(self) -> int:
        return self.bytes

    @staticmethod
    def parse(text: str) -> 'MemorySize':
        return MemorySize(MemorySize.parse_bytes(text))

    @staticmethod
    def parse_bytes(text: str) -> int:
        """
        Parse a size expression such as "50", "64kb" or "128 mb" into bytes.

        Raises:
            ValueError: If the expression cannot be parsed or does not fit in 64 bits.
        """
        if text is None:
            raise ValueError("text cannot be None")

        trimmed = text.strip()
        if not trimmed:
            raise ValueError("argument is an empty- or whitespace-only string")

        match = re.match(r'^(\d+)\s*([a-zA-Z]*)$', trimmed)
        if not match:
            raise ValueError(f"cannot parse memory size: '{text}'")

        multiplier = MemoryUnit.parse_unit(match.group(2) or "").multiplier
        result = int(match.group(1)) * multiplier
        if result > MAX_BYTES:
            raise ValueError(
                f"The value '{text}' cannot be represented as 64bit number of bytes (numeric overflow).")
        return result

    def __eq__(self, other) -> bool:
        if not isinstance(other, MemorySize):
            return False
        return self.bytes == other.bytes

    def __hash__(self) -> int:
        return hash(self.bytes)

    def __lt__(self, other: 'MemorySize') -> bool:
        return self.bytes < other.bytes

    def __le__(self, other: 'MemorySize') -> bool:
        return self.bytes <= other.bytes

    def __str__(self) -> str:
        if self.bytes == 0:
            return "0 bytes"
        for unit in reversed(MemoryUnit.all_units()):
            if self.bytes % unit.multiplier == 0:
                return f"{self.bytes // unit.multiplier} {unit.units[1]}"
        return f"{self.bytes} bytes"

    def __repr__(self) -> str:
        return f"MemorySize({self.bytes})"


MAX_BYTES = 2**63 - 1

MemoryUnit.BYTES = MemoryUnit(["b", "bytes"], 1)
MemoryUnit.KILO_BYTES = MemoryUnit(["k", "kb", "kibibytes"], 1024)
MemoryUnit.MEGA_BYTES = MemoryUnit(["m", "mb", "mebibytes"], 1024 * 1024)
MemoryUnit.GIGA_BYTES = MemoryUnit(["g", "gb", "gibibytes"], 1024 * 1024 * 1024)
MemoryUnit.TERA_BYTES = MemoryUnit(["t", "tb", "tebibytes"], 1024 * 1024 * 1024 * 1024)

MemorySize.ZERO = MemorySize(0)
MemorySize.MAX_VALUE = MemorySize(MAX_BYTES)  # Long.MAX_VALUE equivalent
