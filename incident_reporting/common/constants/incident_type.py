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
"""Constants related to the type of an incident."""
from typing import Dict

from incident_reporting.common.constants.nomis_code_enum import NomisCodeEnum
from incident_reporting.common.constants.strict_enum_parser import StrictEnumParser


class IncidentType(NomisCodeEnum):
    SELF_HARM = "SELF_HARM"
    ASSAULT = "ASSAULT"
    DAMAGE = "DAMAGE"
    FINDS = "FINDS"
    KEY_LOCK_INCIDENT = "KEY_LOCK_INCIDENT"
    DISORDER = "DISORDER"
    DRONE_SIGHTING = "DRONE_SIGHTING"
    FIRE = "FIRE"
    TOOL_LOSS = "TOOL_LOSS"
    FOOD_REFUSAL = "FOOD_REFUSAL"
    DEATH_IN_CUSTODY = "DEATH_IN_CUSTODY"
    TEMPORARY_RELEASE_FAILURE = "TEMPORARY_RELEASE_FAILURE"
    RADIO_COMPROMISE = "RADIO_COMPROMISE"
    ABSCONDER = "ABSCONDER"
    RELEASED_IN_ERROR = "RELEASED_IN_ERROR"
    BOMB_THREAT = "BOMB_THREAT"
    FULL_CLOSE_DOWN_SEARCH = "FULL_CLOSE_DOWN_SEARCH"
    BREACH_OF_SECURITY = "BREACH_OF_SECURITY"
    DEATH_OTHER = "DEATH_OTHER"
    ATTEMPTED_ESCAPE_FROM_CUSTODY = "ATTEMPTED_ESCAPE_FROM_CUSTODY"
    ESCAPE_FROM_CUSTODY = "ESCAPE_FROM_CUSTODY"
    ATTEMPTED_ESCAPE_FROM_ESCORT = "ATTEMPTED_ESCAPE_FROM_ESCORT"
    ESCAPE_FROM_ESCORT = "ESCAPE_FROM_ESCORT"
    MISCELLANEOUS = "MISCELLANEOUS"

    @staticmethod
    def _get_description_map() -> Dict["IncidentType", str]:
        return _INCIDENT_TYPE_DESCRIPTIONS

    @staticmethod
    def _get_nomis_parser() -> StrictEnumParser["IncidentType"]:
        return _INCIDENT_TYPE_NOMIS_PARSER


_INCIDENT_TYPE_DESCRIPTIONS: Dict[IncidentType, str] = {
    IncidentType.SELF_HARM: "Self Harm",
    IncidentType.ASSAULT: "Assault",
    IncidentType.DAMAGE: "Damage",
    IncidentType.FINDS: "Finds",
    IncidentType.KEY_LOCK_INCIDENT: "Key Lock Incident",
    IncidentType.DISORDER: "Disorder",
    IncidentType.DRONE_SIGHTING: "Drone Sighting",
    IncidentType.FIRE: "Fire",
    IncidentType.TOOL_LOSS: "Tool Loss",
    IncidentType.FOOD_REFUSAL: "Food Refusal",
    IncidentType.DEATH_IN_CUSTODY: "Death In Custody",
    IncidentType.TEMPORARY_RELEASE_FAILURE: "Temporary Release Failure",
    IncidentType.RADIO_COMPROMISE: "Radio Compromise",
    IncidentType.ABSCONDER: "Absconder",
    IncidentType.RELEASED_IN_ERROR: "Released In Error",
    IncidentType.BOMB_THREAT: "Bomb Threat",
    IncidentType.FULL_CLOSE_DOWN_SEARCH: "Full Close Down Search",
    IncidentType.BREACH_OF_SECURITY: "Breach Of Security",
    IncidentType.DEATH_OTHER: "Death (Other)",
    IncidentType.ATTEMPTED_ESCAPE_FROM_CUSTODY: "Attempted Escape From Custody",
    IncidentType.ESCAPE_FROM_CUSTODY: "Escape From Custody",
    IncidentType.ATTEMPTED_ESCAPE_FROM_ESCORT: "Attempted Escape From Escort",
    IncidentType.ESCAPE_FROM_ESCORT: "Escape From Escort",
    IncidentType.MISCELLANEOUS: "Miscellaneous",
}

_INCIDENT_TYPE_NOMIS_PARSER: StrictEnumParser[IncidentType] = (
    StrictEnumParser(IncidentType)
    .add_raw_text_mapping(IncidentType.SELF_HARM, "SELF_HARM")
    .add_raw_text_mapping(IncidentType.MISCELLANEOUS, "MISC")
    .add_raw_text_mapping(IncidentType.ASSAULT, "ASSAULTS3")
    .add_raw_text_mapping(IncidentType.DAMAGE, "DAMAGE")
    .add_raw_text_mapping(IncidentType.FINDS, "FIND0422")
    .add_raw_text_mapping(IncidentType.KEY_LOCK_INCIDENT, "KEY_LOCKNEW")
    .add_raw_text_mapping(IncidentType.DISORDER, "DISORDER1")
    .add_raw_text_mapping(IncidentType.FIRE, "FIRE")
    .add_raw_text_mapping(IncidentType.TOOL_LOSS, "TOOL_LOSS")
    .add_raw_text_mapping(IncidentType.FOOD_REFUSAL, "FOOD_REF")
    .add_raw_text_mapping(IncidentType.DEATH_IN_CUSTODY, "DEATH")
    .add_raw_text_mapping(IncidentType.TEMPORARY_RELEASE_FAILURE, "TRF3")
    .add_raw_text_mapping(IncidentType.RADIO_COMPROMISE, "RADIO_COMP")
    .add_raw_text_mapping(IncidentType.DRONE_SIGHTING, "DRONE1")
    .add_raw_text_mapping(IncidentType.ABSCONDER, "ABSCOND")
    .add_raw_text_mapping(IncidentType.RELEASED_IN_ERROR, "REL_ERROR")
    .add_raw_text_mapping(IncidentType.BOMB_THREAT, "BOMB")
    .add_raw_text_mapping(IncidentType.FULL_CLOSE_DOWN_SEARCH, "CLOSE_DOWN")
    .add_raw_text_mapping(IncidentType.BREACH_OF_SECURITY, "BREACH")
    .add_raw_text_mapping(IncidentType.DEATH_OTHER, "DEATH_NI")
    .add_raw_text_mapping(IncidentType.ESCAPE_FROM_CUSTODY, "ESCAPE_EST")
    .add_raw_text_mapping(IncidentType.ATTEMPTED_ESCAPE_FROM_CUSTODY, "ATT_ESCAPE")
    .add_raw_text_mapping(IncidentType.ESCAPE_FROM_ESCORT, "ESCAPE_ESC")
    .add_raw_text_mapping(IncidentType.ATTEMPTED_ESCAPE_FROM_ESCORT, "ATT_ESC_E")
)
