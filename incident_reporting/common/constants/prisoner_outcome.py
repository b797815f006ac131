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
"""Constants related to the outcome of a prisoner's involvement in an incident."""
from typing import Dict

from incident_reporting.common.constants.nomis_code_enum import NomisCodeEnum
from incident_reporting.common.constants.strict_enum_parser import StrictEnumParser


class PrisonerOutcome(NomisCodeEnum):
    ACCT = "ACCT"
    CHARGED_BY_POLICE = "CHARGED_BY_POLICE"
    CONVICTED = "CONVICTED"
    CORONER_INFORMED = "CORONER_INFORMED"
    DEATH = "DEATH"
    FURTHER_CHARGES = "FURTHER_CHARGES"
    LOCAL_INVESTIGATION = "LOCAL_INVESTIGATION"
    NEXT_OF_KIN_INFORMED = "NEXT_OF_KIN_INFORMED"
    PLACED_ON_REPORT = "PLACED_ON_REPORT"
    POLICE_INVESTIGATION = "POLICE_INVESTIGATION"
    REMAND = "REMAND"
    SEEN_DUTY_GOV = "SEEN_DUTY_GOV"
    SEEN_HEALTHCARE = "SEEN_HEALTHCARE"
    SEEN_IMB = "SEEN_IMB"
    SEEN_OUTSIDE_HOSP = "SEEN_OUTSIDE_HOSP"
    TRANSFER = "TRANSFER"
    TRIAL = "TRIAL"

    @staticmethod
    def _get_description_map() -> Dict["PrisonerOutcome", str]:
        return _PRISONER_OUTCOME_DESCRIPTIONS

    @staticmethod
    def _get_nomis_parser() -> StrictEnumParser["PrisonerOutcome"]:
        return _PRISONER_OUTCOME_NOMIS_PARSER


_PRISONER_OUTCOME_DESCRIPTIONS: Dict[PrisonerOutcome, str] = {
    PrisonerOutcome.ACCT: "ACCT",
    PrisonerOutcome.CHARGED_BY_POLICE: "Charged by Police",
    PrisonerOutcome.CONVICTED: "Convicted",
    PrisonerOutcome.CORONER_INFORMED: "Coroner informed",
    PrisonerOutcome.DEATH: "Death",
    PrisonerOutcome.FURTHER_CHARGES: "Further charges",
    PrisonerOutcome.LOCAL_INVESTIGATION: "Investigation (local)",
    PrisonerOutcome.NEXT_OF_KIN_INFORMED: "Next of kin informed",
    PrisonerOutcome.PLACED_ON_REPORT: "Placed on report",
    PrisonerOutcome.POLICE_INVESTIGATION: "Investigation (Police)",
    PrisonerOutcome.REMAND: "Remand",
    PrisonerOutcome.SEEN_DUTY_GOV: "Seen by Duty Governor",
    PrisonerOutcome.SEEN_HEALTHCARE: "Seen by Healthcare",
    PrisonerOutcome.SEEN_IMB: "Seen by IMB",
    PrisonerOutcome.SEEN_OUTSIDE_HOSP: "Seen by outside hospital",
    PrisonerOutcome.TRANSFER: "Transfer",
    PrisonerOutcome.TRIAL: "Trial",
}

_PRISONER_OUTCOME_NOMIS_PARSER: StrictEnumParser[PrisonerOutcome] = (
    StrictEnumParser(PrisonerOutcome)
    .add_raw_text_mapping(PrisonerOutcome.ACCT, "ACCT")
    .add_raw_text_mapping(PrisonerOutcome.CHARGED_BY_POLICE, "CBP")
    .add_raw_text_mapping(PrisonerOutcome.CONVICTED, "CON")
    .add_raw_text_mapping(PrisonerOutcome.CORONER_INFORMED, "CORIN")
    .add_raw_text_mapping(PrisonerOutcome.DEATH, "DEA")
    .add_raw_text_mapping(PrisonerOutcome.SEEN_DUTY_GOV, "DUTGOV")
    .add_raw_text_mapping(PrisonerOutcome.FURTHER_CHARGES, "FCHRG")
    .add_raw_text_mapping(PrisonerOutcome.SEEN_HEALTHCARE, "HELTH")
    .add_raw_text_mapping(PrisonerOutcome.LOCAL_INVESTIGATION, "ILOC")
    .add_raw_text_mapping(PrisonerOutcome.SEEN_IMB, "IMB")
    .add_raw_text_mapping(PrisonerOutcome.POLICE_INVESTIGATION, "IPOL")
    .add_raw_text_mapping(PrisonerOutcome.NEXT_OF_KIN_INFORMED, "NKI")
    .add_raw_text_mapping(PrisonerOutcome.SEEN_OUTSIDE_HOSP, "OUTH")
    .add_raw_text_mapping(PrisonerOutcome.PLACED_ON_REPORT, "POR")
    .add_raw_text_mapping(PrisonerOutcome.REMAND, "RMND")
    .add_raw_text_mapping(PrisonerOutcome.TRIAL, "TRL")
    .add_raw_text_mapping(PrisonerOutcome.TRANSFER, "TRN")
)
