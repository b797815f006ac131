# Recidiviz - a data platform for criminal justice reform
# Copyright (C) 2024 Recidiviz, Inc.
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
# =============================================================================
"""Defines a class that parses an enum value from legacy raw text, given a
provided set of enum mappings.
"""
from enum import Enum
from typing import Dict, Generic, Optional, Type, TypeVar

from incident_reporting.common.constants.enum_parser import EnumParsingError

EnumT = TypeVar("EnumT", bound=Enum)


class StrictEnumParser(Generic[EnumT]):
    """Class that parses an enum value from raw text, given a provided set of enum
    mappings. It does no normalization of the input text before attempting to find a
    mapping.
    """

    def __init__(self, enum_cls: Type[EnumT]) -> None:
        self.enum_cls = enum_cls
        self.raw_text_mappings: Dict[str, EnumT] = {}

    def add_raw_text_mapping(
        self, enum_value: EnumT, raw_text_value: str
    ) -> "StrictEnumParser[EnumT]":
        if not isinstance(enum_value, self.enum_cls):
            raise ValueError(
                f"Unexpected type [{type(enum_value)}] for mapped value "
                f"[{enum_value}]. Expected [{self.enum_cls}]."
            )
        self._check_not_already_mapped(raw_text_value)
        self.raw_text_mappings[raw_text_value] = enum_value
        return self

    def _check_not_already_mapped(self, raw_text_value: str) -> None:
        if raw_text_value in self.raw_text_mappings:
            raise ValueError(f"Raw text value [{raw_text_value}] already mapped.")

    def parse(self, raw_text: Optional[str]) -> EnumT:
        """Parses an enum value from raw text, given the mappings provided to this
        class.

        It does no normalization of the input text before attempting to find a
        mapping. Throws an EnumParsingError if no mapping is found.
        """
        parsed_enum = self.raw_text_mappings.get(raw_text) if raw_text else None
        if parsed_enum is None:
            raise EnumParsingError(self.enum_cls, str(raw_text))
        return parsed_enum
