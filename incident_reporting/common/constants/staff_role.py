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
"""Constants related to a staff member's involvement in an incident."""
from typing import Dict

from incident_reporting.common.constants.nomis_code_enum import NomisCodeEnum
from incident_reporting.common.constants.strict_enum_parser import StrictEnumParser


class StaffRole(NomisCodeEnum):
    ACTIVELY_INVOLVED = "ACTIVELY_INVOLVED"
    AUTHORISING_OFFICER = "AUTHORISING_OFFICER"
    CR_HEAD = "CR_HEAD"
    CR_LEFT_ARM = "CR_LEFT_ARM"
    CR_LEGS = "CR_LEGS"
    CR_RIGHT_ARM = "CR_RIGHT_ARM"
    CR_SUPERVISOR = "CR_SUPERVISOR"
    DECEASED = "DECEASED"
    FIRST_ON_SCENE = "FIRST_ON_SCENE"
    HEALTHCARE = "HEALTHCARE"
    HOSTAGE = "HOSTAGE"
    IN_POSSESSION = "IN_POSSESSION"
    NEGOTIATOR = "NEGOTIATOR"
    PRESENT_AT_SCENE = "PRESENT_AT_SCENE"
    SUSPECTED_INVOLVEMENT = "SUSPECTED_INVOLVEMENT"
    VICTIM = "VICTIM"
    WITNESS = "WITNESS"

    @staticmethod
    def _get_description_map() -> Dict["StaffRole", str]:
        return _STAFF_ROLE_DESCRIPTIONS

    @staticmethod
    def _get_nomis_parser() -> StrictEnumParser["StaffRole"]:
        return _STAFF_ROLE_NOMIS_PARSER


_STAFF_ROLE_DESCRIPTIONS: Dict[StaffRole, str] = {
    StaffRole.ACTIVELY_INVOLVED: "Actively Involved",
    StaffRole.AUTHORISING_OFFICER: "Authorising Officer",
    StaffRole.CR_HEAD: "C&R Head",
    StaffRole.CR_LEFT_ARM: "C&R Left Arm",
    StaffRole.CR_LEGS: "C&R Legs",
    StaffRole.CR_RIGHT_ARM: "C&R Right Arm",
    StaffRole.CR_SUPERVISOR: "C&R Supervisor",
    StaffRole.DECEASED: "Deceased",
    StaffRole.FIRST_ON_SCENE: "First on Scene",
    StaffRole.HEALTHCARE: "Healthcare",
    StaffRole.HOSTAGE: "Hostage",
    StaffRole.IN_POSSESSION: "In Possession",
    StaffRole.NEGOTIATOR: "Negotiator",
    StaffRole.PRESENT_AT_SCENE: "Present at Scene",
    StaffRole.SUSPECTED_INVOLVEMENT: "Suspected Involvement",
    StaffRole.VICTIM: "Victim",
    StaffRole.WITNESS: "Witness",
}

# NOMIS has two codes for active involvement: AI and the older INV.
_STAFF_ROLE_NOMIS_PARSER: StrictEnumParser[StaffRole] = (
    StrictEnumParser(StaffRole)
    .add_raw_text_mapping(StaffRole.ACTIVELY_INVOLVED, "AI")
    .add_raw_text_mapping(StaffRole.AUTHORISING_OFFICER, "AO")
    .add_raw_text_mapping(StaffRole.CR_HEAD, "CRH")
    .add_raw_text_mapping(StaffRole.CR_SUPERVISOR, "CRS")
    .add_raw_text_mapping(StaffRole.CR_LEGS, "CRLG")
    .add_raw_text_mapping(StaffRole.CR_LEFT_ARM, "CRL")
    .add_raw_text_mapping(StaffRole.CR_RIGHT_ARM, "CRR")
    .add_raw_text_mapping(StaffRole.DECEASED, "DECEASED")
    .add_raw_text_mapping(StaffRole.FIRST_ON_SCENE, "FOS")
    .add_raw_text_mapping(StaffRole.HEALTHCARE, "HEALTH")
    .add_raw_text_mapping(StaffRole.HOSTAGE, "HOST")
    .add_raw_text_mapping(StaffRole.IN_POSSESSION, "INPOS")
    .add_raw_text_mapping(StaffRole.ACTIVELY_INVOLVED, "INV")
    .add_raw_text_mapping(StaffRole.NEGOTIATOR, "NEG")
    .add_raw_text_mapping(StaffRole.PRESENT_AT_SCENE, "PAS")
    .add_raw_text_mapping(StaffRole.SUSPECTED_INVOLVEMENT, "SUSIN")
    .add_raw_text_mapping(StaffRole.VICTIM, "VICT")
    .add_raw_text_mapping(StaffRole.WITNESS, "WIT")
)
