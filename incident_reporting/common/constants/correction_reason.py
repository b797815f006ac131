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
"""Constants related to requests for corrections to an incident report."""
from typing import Dict

from incident_reporting.common.constants.nomis_code_enum import DescribedEnum


class CorrectionReason(DescribedEnum):
    MISTAKE = "MISTAKE"
    INCORRECT_INFORMATION = "INCORRECT_INFORMATION"
    MISSING_INFORMATION = "MISSING_INFORMATION"
    OTHER = "OTHER"

    @staticmethod
    def _get_description_map() -> Dict["CorrectionReason", str]:
        return _CORRECTION_REASON_DESCRIPTIONS


_CORRECTION_REASON_DESCRIPTIONS: Dict[CorrectionReason, str] = {
    CorrectionReason.MISTAKE: "Mistake",
    CorrectionReason.INCORRECT_INFORMATION: "Incorrect information",
    CorrectionReason.MISSING_INFORMATION: "Missing information",
    CorrectionReason.OTHER: "Other",
}
