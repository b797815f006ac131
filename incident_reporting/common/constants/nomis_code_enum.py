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
"""Contains logic related to NomisCodeEnums, the closed sets of values that
incident reports are described with and that have an equivalent code in NOMIS."""

from typing import Dict, Type, TypeVar

from aenum import Enum
from opencensus.stats import aggregation, measure, view

from incident_reporting.common.constants.enum_parser import (
    EnumParsingError,
    UnmappedNomisCodeError,
)
from incident_reporting.common.constants.strict_enum_parser import StrictEnumParser
from incident_reporting.utils import monitoring

m_unmapped_codes = measure.MeasureInt(
    "nomis/unmapped_code_count", "The number of unmapped NOMIS codes", "1"
)
unmapped_codes_view = view.View(
    "incident_reporting/nomis/unmapped_code_count",
    "The sum of unmapped NOMIS codes",
    [monitoring.TagKey.ENTITY_TYPE],
    m_unmapped_codes,
    aggregation.SumAggregation(),
)
monitoring.register_views([unmapped_codes_view])

NomisCodeEnumT = TypeVar("NomisCodeEnumT", bound="NomisCodeEnum")


class DescribedEnum(Enum):
    """Enum class whose members carry a human readable description.

    When extending this class, you must override: _get_description_map
    """

    @staticmethod
    def _get_description_map() -> Dict["DescribedEnum", str]:
        raise NotImplementedError

    @property
    def description(self) -> str:
        return self._get_description_map()[self]


class NomisCodeEnum(DescribedEnum):
    """Enum class that can be mapped from a NOMIS code.

    When extending this class, you must override: _get_description_map,
    _get_nomis_parser
    """

    @staticmethod
    def _get_nomis_parser() -> StrictEnumParser:
        raise NotImplementedError

    @classmethod
    def from_nomis_code(cls: Type[NomisCodeEnumT], code: str) -> NomisCodeEnumT:
        """Returns the member the NOMIS |code| maps to, raising an
        UnmappedNomisCodeError if there is no such member."""
        try:
            return cls._get_nomis_parser().parse(code)
        except EnumParsingError as e:
            with monitoring.measurements(
                {monitoring.TagKey.ENTITY_TYPE: cls.__name__}
            ) as m:
                m.measure_int_put(m_unmapped_codes, 1)
            raise UnmappedNomisCodeError(cls, code) from e
