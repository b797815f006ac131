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
"""Incident report payloads as they are sent from NOMIS.

These mirror the shape of the NOMIS data exactly and carry raw NOMIS codes.
They are converted into domain entities by
incident_reporting.nomis.entity_mapping.
"""
import datetime
import uuid
from typing import List, Optional, Tuple

import attr

from incident_reporting.nomis.description_parts import (
    DescriptionAddendum,
    get_description_parts,
)
from incident_reporting.nomis.errors import NomisSyncValidationError


@attr.s(frozen=True, kw_only=True)
class NomisCode:
    code: str = attr.ib()
    description: str = attr.ib()


@attr.s(frozen=True, kw_only=True)
class NomisStatus:
    code: str = attr.ib()
    description: str = attr.ib()


@attr.s(frozen=True, kw_only=True)
class NomisStaff:
    username: str = attr.ib()
    staff_id: int = attr.ib()
    first_name: str = attr.ib()
    last_name: str = attr.ib()


@attr.s(frozen=True, kw_only=True)
class NomisStaffParty:
    staff: NomisStaff = attr.ib()
    role: NomisCode = attr.ib()
    comment: Optional[str] = attr.ib(default=None)


@attr.s(frozen=True, kw_only=True)
class NomisOffender:
    offender_no: str = attr.ib()
    first_name: str = attr.ib()
    last_name: str = attr.ib()


@attr.s(frozen=True, kw_only=True)
class NomisOffenderParty:
    offender: NomisOffender = attr.ib()
    role: NomisCode = attr.ib()
    outcome: Optional[NomisCode] = attr.ib(default=None)
    comment: Optional[str] = attr.ib(default=None)


@attr.s(frozen=True, kw_only=True)
class NomisRequirement:
    """A request, made in NOMIS, for more information on an incident."""

    comment: Optional[str] = attr.ib()
    date: datetime.date = attr.ib()
    staff: NomisStaff = attr.ib()
    prison_id: str = attr.ib()


@attr.s(frozen=True, kw_only=True)
class NomisResponse:
    question_response_id: Optional[int] = attr.ib()
    sequence: int = attr.ib()
    answer: Optional[str] = attr.ib()
    comment: Optional[str] = attr.ib()
    recording_staff: NomisStaff = attr.ib()


@attr.s(frozen=True, kw_only=True)
class NomisQuestion:
    question_id: int = attr.ib()
    sequence: int = attr.ib()
    question: str = attr.ib()
    answers: List[NomisResponse] = attr.ib(factory=list)


@attr.s(frozen=True, kw_only=True)
class NomisHistoryResponse:
    question_response_id: Optional[int] = attr.ib()
    response_sequence: int = attr.ib()
    answer: Optional[str] = attr.ib()
    response_date: Optional[datetime.date] = attr.ib(default=None)
    comment: Optional[str] = attr.ib()
    recording_staff: NomisStaff = attr.ib()


@attr.s(frozen=True, kw_only=True)
class NomisHistoryQuestion:
    question_id: int = attr.ib()
    sequence: int = attr.ib()
    question: str = attr.ib()
    question_label: str = attr.ib()
    answers: List[NomisHistoryResponse] = attr.ib(factory=list)


@attr.s(frozen=True, kw_only=True)
class NomisHistory:
    """The questionnaire an incident had before its type was changed."""

    questionnaire_id: int = attr.ib()
    type: str = attr.ib()
    description: Optional[str] = attr.ib(default=None)
    questions: List[NomisHistoryQuestion] = attr.ib(factory=list)
    incident_change_date: datetime.date = attr.ib()
    incident_change_staff: NomisStaff = attr.ib()


@attr.s(frozen=True, kw_only=True)
class NomisReport:
    """A full incident report from NOMIS."""

    incident_id: int = attr.ib()
    questionnaire_id: int = attr.ib()
    title: Optional[str] = attr.ib()
    description: Optional[str] = attr.ib()
    prison: NomisCode = attr.ib()

    status: NomisStatus = attr.ib()
    # Incident type code, e.g. ASSAULTS3
    type: str = attr.ib()

    locked_response: bool = attr.ib()

    incident_date_time: datetime.datetime = attr.ib()

    reporting_staff: NomisStaff = attr.ib()
    reported_date_time: datetime.datetime = attr.ib()

    create_date_time: datetime.datetime = attr.ib()
    created_by: str = attr.ib()

    last_modified_date_time: Optional[datetime.datetime] = attr.ib()
    last_modified_by: Optional[str] = attr.ib()

    follow_up_date: Optional[datetime.date] = attr.ib(default=None)

    staff_parties: List[NomisStaffParty] = attr.ib(factory=list)
    offender_parties: List[NomisOffenderParty] = attr.ib(factory=list)
    requirements: List[NomisRequirement] = attr.ib(factory=list)
    questions: List[NomisQuestion] = attr.ib(factory=list)
    history: List[NomisHistory] = attr.ib(factory=list)

    @last_modified_date_time.default
    def _default_last_modified_date_time(self) -> datetime.datetime:
        return self.create_date_time

    @last_modified_by.default
    def _default_last_modified_by(self) -> str:
        return self.created_by

    def get_description_parts(
        self,
    ) -> Tuple[Optional[str], List[DescriptionAddendum]]:
        return get_description_parts(self.description)


@attr.s(frozen=True, kw_only=True)
class NomisSyncRequest:
    """A report sent from NOMIS to be created, or to update the report with |id|."""

    id: Optional[uuid.UUID] = attr.ib(default=None)
    initial_migration: bool = attr.ib(default=False)
    incident_report: NomisReport = attr.ib()

    def validate(self) -> None:
        if self.initial_migration and self.id is not None:
            raise NomisSyncValidationError(
                f"Cannot update an existing report ({self.id}) during initial "
                f"migration"
            )
