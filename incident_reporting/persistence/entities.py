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
"""Domain entities for incident reports.

A Report owns its child entities; they are only ever created through the
Report (or the Question / History they belong to) so that ordering is kept.
"""
import datetime
import uuid
from typing import List, Optional

import attr

from incident_reporting.common.constants.correction_reason import CorrectionReason
from incident_reporting.common.constants.incident_type import IncidentType
from incident_reporting.common.constants.information_source import (
    InformationSource,
)
from incident_reporting.common.constants.prisoner_outcome import PrisonerOutcome
from incident_reporting.common.constants.prisoner_role import PrisonerRole
from incident_reporting.common.constants.staff_role import StaffRole
from incident_reporting.common.constants.status import Status


@attr.s
class Event:
    event_id: str = attr.ib()
    event_date_and_time: datetime.datetime = attr.ib()
    prison_id: str = attr.ib()
    title: str = attr.ib()
    description: str = attr.ib()
    created_date: datetime.datetime = attr.ib()
    last_modified_date: datetime.datetime = attr.ib()
    last_modified_by: str = attr.ib()


@attr.s
class StatusHistory:
    status: Status = attr.ib()
    set_on: datetime.datetime = attr.ib()
    set_by: str = attr.ib()


@attr.s
class StaffInvolvement:
    staff_username: str = attr.ib()
    staff_role: StaffRole = attr.ib()
    comment: Optional[str] = attr.ib(default=None)


@attr.s
class PrisonerInvolvement:
    prisoner_number: str = attr.ib()
    prisoner_role: PrisonerRole = attr.ib()
    outcome: Optional[PrisonerOutcome] = attr.ib(default=None)
    comment: Optional[str] = attr.ib(default=None)


@attr.s
class CorrectionRequest:
    correction_requested_by: str = attr.ib()
    correction_requested_at: datetime.datetime = attr.ib()
    reason: CorrectionReason = attr.ib()
    description_of_change: str = attr.ib()


@attr.s
class Response:
    response: str = attr.ib()
    recorded_by: str = attr.ib()
    recorded_on: datetime.datetime = attr.ib()
    additional_information: Optional[str] = attr.ib(default=None)


@attr.s
class Question:
    code: str = attr.ib()
    question: str = attr.ib()
    additional_information: Optional[str] = attr.ib(default=None)
    responses: List[Response] = attr.ib(factory=list)

    def add_response(
        self,
        response: str,
        additional_information: Optional[str],
        recorded_by: str,
        recorded_on: datetime.datetime,
    ) -> "Question":
        self.responses.append(
            Response(
                response=response,
                recorded_by=recorded_by,
                recorded_on=recorded_on,
                additional_information=additional_information,
            )
        )
        return self


@attr.s
class HistoricalResponse:
    response: str = attr.ib()
    recorded_by: str = attr.ib()
    recorded_on: datetime.datetime = attr.ib()
    additional_information: Optional[str] = attr.ib(default=None)


@attr.s
class HistoricalQuestion:
    code: str = attr.ib()
    question: str = attr.ib()
    additional_information: Optional[str] = attr.ib(default=None)
    responses: List[HistoricalResponse] = attr.ib(factory=list)

    def add_response(
        self,
        response: str,
        additional_information: Optional[str],
        recorded_by: str,
        recorded_on: datetime.datetime,
    ) -> "HistoricalQuestion":
        self.responses.append(
            HistoricalResponse(
                response=response,
                recorded_by=recorded_by,
                recorded_on=recorded_on,
                additional_information=additional_information,
            )
        )
        return self


@attr.s
class History:
    """The questions a report had while it was of a previous |type|."""

    type: IncidentType = attr.ib()
    change_date: datetime.datetime = attr.ib()
    change_staff_username: str = attr.ib()
    questions: List[HistoricalQuestion] = attr.ib(factory=list)

    def add_question(
        self, code: str, question: str, additional_information: Optional[str] = None
    ) -> HistoricalQuestion:
        historical_question = HistoricalQuestion(
            code=code, question=question, additional_information=additional_information
        )
        self.questions.append(historical_question)
        return historical_question


@attr.s
class DescriptionAddendum:
    sequence: int = attr.ib()
    created_by: str = attr.ib()
    created_at: datetime.datetime = attr.ib()
    first_name: str = attr.ib()
    last_name: str = attr.ib()
    text: str = attr.ib()


@attr.s
class Report:
    """An incident report, and the event it describes."""

    incident_number: str = attr.ib()
    incident_date_and_time: datetime.datetime = attr.ib()
    prison_id: str = attr.ib()
    type: IncidentType = attr.ib()
    title: str = attr.ib()
    description: str = attr.ib()
    reported_by: str = attr.ib()
    reported_date: datetime.datetime = attr.ib()
    event: Event = attr.ib()
    assigned_to: str = attr.ib()
    question_set_id: Optional[str] = attr.ib()
    created_date: datetime.datetime = attr.ib()
    last_modified_date: datetime.datetime = attr.ib()
    last_modified_by: str = attr.ib()

    status: Status = attr.ib(default=Status.DRAFT)
    source: InformationSource = attr.ib(default=InformationSource.DPS)
    modified_in: InformationSource = attr.ib(default=InformationSource.DPS)

    # Assigned when the report is first saved
    id: Optional[uuid.UUID] = attr.ib(default=None)

    history_of_statuses: List[StatusHistory] = attr.ib(factory=list)
    staff_involved: List[StaffInvolvement] = attr.ib(factory=list)
    prisoners_involved: List[PrisonerInvolvement] = attr.ib(factory=list)
    correction_requests: List[CorrectionRequest] = attr.ib(factory=list)
    questions: List[Question] = attr.ib(factory=list)
    history: List[History] = attr.ib(factory=list)
    description_addendums: List[DescriptionAddendum] = attr.ib(factory=list)

    def add_status_history(
        self, status: Status, set_on: datetime.datetime, set_by: str
    ) -> StatusHistory:
        status_history = StatusHistory(status=status, set_on=set_on, set_by=set_by)
        self.history_of_statuses.append(status_history)
        return status_history

    def change_status(
        self, new_status: Status, changed_at: datetime.datetime, changed_by: str
    ) -> "Report":
        """Sets the status, recording the change in the status history if the
        status is different from the current one."""
        if new_status != self.status:
            self.status = new_status
            self.add_status_history(new_status, changed_at, changed_by)
        return self

    def change_type(
        self, new_type: IncidentType, changed_at: datetime.datetime, changed_by: str
    ) -> "Report":
        """Sets the type. Questions asked for the previous type are moved into
        the report history, since they don't apply to the new type."""
        self._copy_questions_to_history(changed_at, changed_by)
        self.questions.clear()
        self.type = new_type
        return self

    def _copy_questions_to_history(
        self, changed_at: datetime.datetime, changed_by: str
    ) -> History:
        history = self.add_history(self.type, changed_at, changed_by)
        for question in self.questions:
            historical_question = history.add_question(
                question.code, question.question, question.additional_information
            )
            for response in question.responses:
                historical_question.add_response(
                    response.response,
                    response.additional_information,
                    response.recorded_by,
                    response.recorded_on,
                )
        return history

    def add_staff_involved(
        self, staff_role: StaffRole, username: str, comment: Optional[str] = None
    ) -> StaffInvolvement:
        staff_involvement = StaffInvolvement(
            staff_username=username, staff_role=staff_role, comment=comment
        )
        self.staff_involved.append(staff_involvement)
        return staff_involvement

    def add_prisoner_involved(
        self,
        prisoner_number: str,
        prisoner_role: PrisonerRole,
        outcome: Optional[PrisonerOutcome] = None,
        comment: Optional[str] = None,
    ) -> PrisonerInvolvement:
        prisoner_involvement = PrisonerInvolvement(
            prisoner_number=prisoner_number,
            prisoner_role=prisoner_role,
            outcome=outcome,
            comment=comment,
        )
        self.prisoners_involved.append(prisoner_involvement)
        return prisoner_involvement

    def add_correction_request(
        self,
        correction_requested_by: str,
        correction_requested_at: datetime.datetime,
        reason: CorrectionReason,
        description_of_change: str,
    ) -> CorrectionRequest:
        correction_request = CorrectionRequest(
            correction_requested_by=correction_requested_by,
            correction_requested_at=correction_requested_at,
            reason=reason,
            description_of_change=description_of_change,
        )
        self.correction_requests.append(correction_request)
        return correction_request

    def add_question(
        self, code: str, question: str, additional_information: Optional[str] = None
    ) -> Question:
        new_question = Question(
            code=code, question=question, additional_information=additional_information
        )
        self.questions.append(new_question)
        return new_question

    def add_history(
        self,
        type_: IncidentType,
        change_date: datetime.datetime,
        change_staff_username: str,
    ) -> History:
        history = History(
            type=type_,
            change_date=change_date,
            change_staff_username=change_staff_username,
        )
        self.history.append(history)
        return history

    def add_description_addendum(
        self,
        created_by: str,
        created_at: datetime.datetime,
        first_name: str,
        last_name: str,
        text: str,
    ) -> DescriptionAddendum:
        addendum = DescriptionAddendum(
            sequence=(
                self.description_addendums[-1].sequence + 1
                if self.description_addendums
                else 0
            ),
            created_by=created_by,
            created_at=created_at,
            first_name=first_name,
            last_name=last_name,
            text=text,
        )
        self.description_addendums.append(addendum)
        return addendum
