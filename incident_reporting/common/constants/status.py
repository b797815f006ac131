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
"""Constants related to the status of an incident report."""
from typing import Dict

from incident_reporting.common.constants.nomis_code_enum import NomisCodeEnum
from incident_reporting.common.constants.strict_enum_parser import StrictEnumParser


class Status(NomisCodeEnum):
    DRAFT = "DRAFT"
    AWAITING_ANALYSIS = "AWAITING_ANALYSIS"
    IN_ANALYSIS = "IN_ANALYSIS"
    INFORMATION_REQUIRED = "INFORMATION_REQUIRED"
    INFORMATION_AMENDED = "INFORMATION_AMENDED"
    CLOSED = "CLOSED"
    POST_INCIDENT_UPDATE = "POST_INCIDENT_UPDATE"
    INCIDENT_UPDATED = "INCIDENT_UPDATED"
    DUPLICATE = "DUPLICATE"

    @staticmethod
    def _get_description_map() -> Dict["Status", str]:
        return _STATUS_DESCRIPTIONS

    @staticmethod
    def _get_nomis_parser() -> StrictEnumParser["Status"]:
        return _STATUS_NOMIS_PARSER


_STATUS_DESCRIPTIONS: Dict[Status, str] = {
    Status.DRAFT: "Draft",
    Status.AWAITING_ANALYSIS: "Awaiting analysis",
    Status.IN_ANALYSIS: "In analysis",
    Status.INFORMATION_REQUIRED: "Information required",
    Status.INFORMATION_AMENDED: "Information amended",
    Status.CLOSED: "Closed",
    Status.POST_INCIDENT_UPDATE: "Post-incident update",
    Status.INCIDENT_UPDATED: "Incident updated",
    Status.DUPLICATE: "Duplicate",
}

# Reports are only ever drafted in this service, so DRAFT has no NOMIS code.
_STATUS_NOMIS_PARSER: StrictEnumParser[Status] = (
    StrictEnumParser(Status)
    .add_raw_text_mapping(Status.AWAITING_ANALYSIS, "AWAN")
    .add_raw_text_mapping(Status.IN_ANALYSIS, "INAN")
    .add_raw_text_mapping(Status.INFORMATION_REQUIRED, "INREQ")
    .add_raw_text_mapping(Status.INFORMATION_AMENDED, "INAME")
    .add_raw_text_mapping(Status.CLOSED, "CLOSE")
    .add_raw_text_mapping(Status.POST_INCIDENT_UPDATE, "PIU")
    .add_raw_text_mapping(Status.INCIDENT_UPDATED, "IUP")
    .add_raw_text_mapping(Status.DUPLICATE, "DUP")
)
