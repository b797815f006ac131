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
"""Constants related to a prisoner's involvement in an incident."""
from typing import Dict

from incident_reporting.common.constants.nomis_code_enum import NomisCodeEnum
from incident_reporting.common.constants.strict_enum_parser import StrictEnumParser


class PrisonerRole(NomisCodeEnum):
    ABSCONDER = "ABSCONDER"
    ACTIVE_INVOLVEMENT = "ACTIVE_INVOLVEMENT"
    ASSAILANT = "ASSAILANT"
    ASSISTED_STAFF = "ASSISTED_STAFF"
    DECEASED = "DECEASED"
    ESCAPE = "ESCAPE"
    FIGHTER = "FIGHTER"
    HOSTAGE = "HOSTAGE"
    IMPEDED_STAFF = "IMPEDED_STAFF"
    IN_POSSESSION = "IN_POSSESSION"
    INTENDED_RECIPIENT = "INTENDED_RECIPIENT"
    LICENSE_FAILURE = "LICENSE_FAILURE"
    PERPETRATOR = "PERPETRATOR"
    PRESENT_AT_SCENE = "PRESENT_AT_SCENE"
    SUSPECTED_ASSAILANT = "SUSPECTED_ASSAILANT"
    SUSPECTED_INVOLVED = "SUSPECTED_INVOLVED"
    TEMPORARY_RELEASE_FAILURE = "TEMPORARY_RELEASE_FAILURE"
    VICTIM = "VICTIM"

    @staticmethod
    def _get_description_map() -> Dict["PrisonerRole", str]:
        return _PRISONER_ROLE_DESCRIPTIONS

    @staticmethod
    def _get_nomis_parser() -> StrictEnumParser["PrisonerRole"]:
        return _PRISONER_ROLE_NOMIS_PARSER


_PRISONER_ROLE_DESCRIPTIONS: Dict[PrisonerRole, str] = {
    PrisonerRole.ABSCONDER: "Absconder",
    PrisonerRole.ACTIVE_INVOLVEMENT: "Active Involvement",
    PrisonerRole.ASSAILANT: "Assailant",
    PrisonerRole.ASSISTED_STAFF: "Assisted Staff",
    PrisonerRole.DECEASED: "Deceased",
    PrisonerRole.ESCAPE: "Escapee",
    PrisonerRole.FIGHTER: "Fighter",
    PrisonerRole.HOSTAGE: "Hostage",
    PrisonerRole.IMPEDED_STAFF: "Impeded Staff",
    PrisonerRole.IN_POSSESSION: "In Possession",
    PrisonerRole.INTENDED_RECIPIENT: "Intended Recipient",
    PrisonerRole.LICENSE_FAILURE: "License Failure",
    PrisonerRole.PERPETRATOR: "Perpetrator",
    PrisonerRole.PRESENT_AT_SCENE: "Present at scene",
    PrisonerRole.SUSPECTED_ASSAILANT: "Suspected Assailant",
    PrisonerRole.SUSPECTED_INVOLVED: "Suspected Involved",
    PrisonerRole.TEMPORARY_RELEASE_FAILURE: "Temporary Release Failure",
    PrisonerRole.VICTIM: "Victim",
}

_PRISONER_ROLE_NOMIS_PARSER: StrictEnumParser[PrisonerRole] = (
    StrictEnumParser(PrisonerRole)
    .add_raw_text_mapping(PrisonerRole.ABSCONDER, "ABSCONDEE")
    .add_raw_text_mapping(PrisonerRole.ACTIVE_INVOLVEMENT, "ACTIVE_INVOLVEMENT")
    .add_raw_text_mapping(PrisonerRole.ASSAILANT, "ASSAILANT")
    .add_raw_text_mapping(PrisonerRole.ASSISTED_STAFF, "ASSISTED_STAFF")
    .add_raw_text_mapping(PrisonerRole.DECEASED, "DECEASED")
    .add_raw_text_mapping(PrisonerRole.ESCAPE, "ESCAPE")
    .add_raw_text_mapping(PrisonerRole.FIGHTER, "FIGHT")
    .add_raw_text_mapping(PrisonerRole.HOSTAGE, "HOST")
    .add_raw_text_mapping(PrisonerRole.IMPEDED_STAFF, "IMPED")
    .add_raw_text_mapping(PrisonerRole.IN_POSSESSION, "INPOSS")
    .add_raw_text_mapping(PrisonerRole.INTENDED_RECIPIENT, "INREC")
    .add_raw_text_mapping(PrisonerRole.LICENSE_FAILURE, "LICFAIL")
    .add_raw_text_mapping(PrisonerRole.PERPETRATOR, "PERP")
    .add_raw_text_mapping(PrisonerRole.PRESENT_AT_SCENE, "PRESENT")
    .add_raw_text_mapping(PrisonerRole.SUSPECTED_ASSAILANT, "SUSASS")
    .add_raw_text_mapping(PrisonerRole.SUSPECTED_INVOLVED, "SUSINV")
    .add_raw_text_mapping(PrisonerRole.TEMPORARY_RELEASE_FAILURE, "TRF")
    .add_raw_text_mapping(PrisonerRole.VICTIM, "VICT")
)
