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
"""Converts NOMIS incident report payloads into Report entities."""
import datetime
from typing import List, Optional

from incident_reporting.common.constants.correction_reason import CorrectionReason
from incident_reporting.common.constants.incident_type import IncidentType
from incident_reporting.common.constants.information_source import (
    InformationSource,
)
from incident_reporting.common.constants.prisoner_outcome import PrisonerOutcome
from incident_reporting.common.constants.prisoner_role import PrisonerRole
from incident_reporting.common.constants.staff_role import StaffRole
from incident_reporting.common.constants.status import Status
from incident_reporting.common.date import start_of_day
from incident_reporting.nomis.description_parts import DescriptionAddendum
from incident_reporting.nomis.nomis_report import (
    NomisHistory,
    NomisOffenderParty,
    NomisQuestion,
    NomisReport,
    NomisRequirement,
    NomisStaffParty,
)
from incident_reporting.persistence.entities import Event, Report

NO_DETAILS_GIVEN = "NO DETAILS GIVEN"


def question_code(question_id: int) -> str:
    return f"QID-{question_id:012d}"


def report_from_nomis(nomis_report: NomisReport, now: datetime.datetime) -> Report:
    """Builds a new Report, with all of its child entities, from |nomis_report|.

    Raises UnmappedNomisCodeError if any NOMIS code in the payload is unknown.
    """
    description, addenda = nomis_report.get_description_parts()
    title = nomis_report.title or NO_DETAILS_GIVEN
    description = description or NO_DETAILS_GIVEN
    reported_by = nomis_report.reporting_staff.username

    report = Report(
        incident_number=str(nomis_report.incident_id),
        incident_date_and_time=nomis_report.incident_date_time,
        prison_id=nomis_report.prison.code,
        type=IncidentType.from_nomis_code(nomis_report.type),
        title=title,
        description=description,
        reported_by=reported_by,
        reported_date=nomis_report.reported_date_time,
        event=Event(
            event_id=str(nomis_report.incident_id),
            event_date_and_time=nomis_report.incident_date_time,
            prison_id=nomis_report.prison.code,
            title=title,
            description=description,
            created_date=now,
            last_modified_date=now,
            last_modified_by=reported_by,
        ),
        assigned_to=reported_by,
        question_set_id=str(nomis_report.questionnaire_id),
        created_date=now,
        last_modified_date=now,
        last_modified_by=reported_by,
        status=Status.from_nomis_code(nomis_report.status.code),
        source=InformationSource.NOMIS,
        modified_in=InformationSource.NOMIS,
    )
    _add_nomis_children(report, nomis_report)
    _add_description_addenda(report, addenda)
    return report


def update_report_from_nomis(
    report: Report,
    nomis_report: NomisReport,
    updated_by: str,
    now: datetime.datetime,
) -> Report:
    """Overwrites |report| with the contents of |nomis_report|.

    Fields shared with the report's event are updated on the event too. The
    status history only grows if the status actually changed, and all child
    collections are replaced by those in the payload.
    """
    description, addenda = nomis_report.get_description_parts()
    event = report.event

    report.type = IncidentType.from_nomis_code(nomis_report.type)

    report.incident_date_and_time = nomis_report.incident_date_time
    event.event_date_and_time = report.incident_date_and_time

    report.prison_id = nomis_report.prison.code
    event.prison_id = report.prison_id

    report.title = nomis_report.title or NO_DETAILS_GIVEN
    event.title = report.title

    report.description = description or NO_DETAILS_GIVEN
    event.description = report.description

    report.reported_by = nomis_report.reporting_staff.username
    report.reported_date = nomis_report.reported_date_time

    report.change_status(
        Status.from_nomis_code(nomis_report.status.code), now, updated_by
    )

    report.question_set_id = str(nomis_report.questionnaire_id)
    report.modified_in = InformationSource.NOMIS

    report.last_modified_date = now
    event.last_modified_date = now
    report.last_modified_by = updated_by
    event.last_modified_by = updated_by

    report.staff_involved.clear()
    report.prisoners_involved.clear()
    report.correction_requests.clear()
    report.questions.clear()
    report.history.clear()
    _add_nomis_children(report, nomis_report)

    report.description_addendums.clear()
    _add_description_addenda(report, addenda)
    return report


def _add_nomis_children(report: Report, nomis_report: NomisReport) -> None:
    _add_nomis_staff_involvements(report, nomis_report.staff_parties)
    _add_nomis_prisoner_involvements(report, nomis_report.offender_parties)
    _add_nomis_correction_requests(report, nomis_report.requirements)
    _add_nomis_questions(report, nomis_report.questions)
    _add_nomis_history(report, nomis_report.history)


def _add_description_addenda(
    report: Report, addenda: List[DescriptionAddendum]
) -> None:
    for addendum in addenda:
        report.add_description_addendum(
            created_by=addendum.created_by,
            created_at=addendum.created_at,
            first_name=addendum.first_name,
            last_name=addendum.last_name,
            text=addendum.text,
        )


def _add_nomis_staff_involvements(
    report: Report, staff_parties: List[NomisStaffParty]
) -> None:
    for staff_party in staff_parties:
        report.add_staff_involved(
            staff_role=StaffRole.from_nomis_code(staff_party.role.code),
            username=staff_party.staff.username,
            comment=staff_party.comment,
        )


def _add_nomis_prisoner_involvements(
    report: Report, offender_parties: List[NomisOffenderParty]
) -> None:
    for offender_party in offender_parties:
        outcome: Optional[PrisonerOutcome] = None
        if offender_party.outcome is not None:
            outcome = PrisonerOutcome.from_nomis_code(offender_party.outcome.code)
        report.add_prisoner_involved(
            prisoner_number=offender_party.offender.offender_no,
            prisoner_role=PrisonerRole.from_nomis_code(offender_party.role.code),
            outcome=outcome,
            comment=offender_party.comment,
        )


def _add_nomis_correction_requests(
    report: Report, requirements: List[NomisRequirement]
) -> None:
    for requirement in requirements:
        report.add_correction_request(
            correction_requested_by=requirement.staff.username,
            correction_requested_at=start_of_day(requirement.date),
            reason=CorrectionReason.OTHER,
            description_of_change=requirement.comment or NO_DETAILS_GIVEN,
        )


def _add_nomis_questions(report: Report, questions: List[NomisQuestion]) -> None:
    for nomis_question in sorted(questions, key=lambda q: q.sequence):
        question = report.add_question(
            code=question_code(nomis_question.question_id),
            question=nomis_question.question,
        )
        answers = [a for a in nomis_question.answers if a.answer is not None]
        for answer in sorted(answers, key=lambda a: a.sequence):
            question.add_response(
                response=answer.answer,
                additional_information=answer.comment,
                recorded_by=answer.recording_staff.username,
                recorded_on=report.reported_date,
            )


def _add_nomis_history(report: Report, nomis_history: List[NomisHistory]) -> None:
    for history_entry in nomis_history:
        history = report.add_history(
            IncidentType.from_nomis_code(history_entry.type),
            start_of_day(history_entry.incident_change_date),
            history_entry.incident_change_staff.username,
        )
        for nomis_question in sorted(history_entry.questions, key=lambda q: q.sequence):
            question = history.add_question(
                code=question_code(nomis_question.question_id),
                question=nomis_question.question,
            )
            answers = [a for a in nomis_question.answers if a.answer is not None]
            for answer in sorted(answers, key=lambda a: a.response_sequence):
                question.add_response(
                    response=answer.answer,
                    additional_information=answer.comment,
                    recorded_by=answer.recording_staff.username,
                    recorded_on=report.reported_date,
                )
