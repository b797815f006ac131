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
"""Errors raised when an enum value can't be built from legacy raw text."""


class EnumParsingError(Exception):
    """Raised if an enum can't be built from the provided string."""

    def __init__(self, cls: type, string_to_parse: str):
        msg = f"Could not parse {string_to_parse} when building {cls}"
        self.entity_type = cls
        super().__init__(msg)


class UnmappedNomisCodeError(EnumParsingError):
    """Raised if a NOMIS code has no mapping onto the given enum."""

    def __init__(self, cls: type, nomis_code: str):
        super().__init__(cls, nomis_code)
        self.nomis_code = nomis_code
