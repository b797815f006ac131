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
"""Changes made from within DPS to the objects attached to a report: staff and
prisoners involved, correction requests and description addenda.

Related objects are addressed by their 1-based position in the report's list,
and every change takes ownership of the report for DPS.
"""
import abc
import datetime
import uuid
from typing import Any, Callable, Dict, FrozenSet, Generic, List, Optional, TypeVar

from incident_reporting.common.constants.correction_reason import CorrectionReason
from incident_reporting.common.constants.prisoner_outcome import PrisonerOutcome
from incident_reporting.common.constants.prisoner_role import PrisonerRole
from incident_reporting.common.constants.staff_role import StaffRole
from incident_reporting.common.date import Clock, now_in_local_time_zone
from incident_reporting.persistence.entities import (
    CorrectionRequest,
    DescriptionAddendum,
    PrisonerInvolvement,
    Report,
    StaffInvolvement,
)
from incident_reporting.persistence.errors import (
    RelatedObjectNotFoundError,
    ReportNotFoundError,
)
from incident_reporting.persistence.report_repository import ReportRepository
from incident_reporting.services.report_service import (
    mark_modified_in_dps,
    record_report_change,
)
from incident_reporting.utils.user_context import UserContext

RelatedT = TypeVar("RelatedT")

ReportChange = Callable[[Report, datetime.datetime, str], None]


class RelatedObjectService(abc.ABC, Generic[RelatedT]):
    """Base class for services that manage one list of objects on a report."""

    object_type: type
    # Metric tag and log label for changes made by this service
    change_name: str
    # Fields of an object that update_object may set
    updatable_fields: FrozenSet[str] = frozenset()

    def __init__(
        self, repository: ReportRepository, clock: Clock = now_in_local_time_zone
    ):
        self.repository = repository
        self.clock = clock

    @abc.abstractmethod
    def related_objects(self, report: Report) -> List[RelatedT]:
        """The list on |report| that this service manages."""

    def list_objects(self, report_id: uuid.UUID) -> List[RelatedT]:
        return list(self.related_objects(self._find_report_or_raise(report_id)))

    def update_object(
        self,
        report_id: uuid.UUID,
        index: int,
        user_context: UserContext,
        **changes: Any,
    ) -> List[RelatedT]:
        """Sets the given fields on the object at 1-based |index| of the report
        with |report_id|, returning the updated list."""
        if not changes:
            raise ValueError("No changes given")
        unknown_fields = set(changes) - self.updatable_fields
        if unknown_fields:
            raise ValueError(
                f"Cannot update fields {sorted(unknown_fields)}, expected some of "
                f"{sorted(self.updatable_fields)}"
            )

        def update(report: Report, now: datetime.datetime, username: str) -> None:
            objects = self.related_objects(report)
            self._check_index(objects, index)
            self._apply_changes(objects[index - 1], changes, now, username)

        return self._change_report(report_id, user_context, "updated", update)

    def delete_object(
        self, report_id: uuid.UUID, index: int, user_context: UserContext
    ) -> List[RelatedT]:
        """Removes the object at 1-based |index| of the report with |report_id|,
        returning the remaining list."""

        def delete(report: Report, _now: datetime.datetime, _username: str) -> None:
            objects = self.related_objects(report)
            self._check_index(objects, index)
            del objects[index - 1]

        return self._change_report(report_id, user_context, "deleted", delete)

    def _apply_changes(
        self,
        related_object: RelatedT,
        changes: Dict[str, Any],
        now: datetime.datetime,
        username: str,
    ) -> None:
        for name, value in changes.items():
            setattr(related_object, name, value)

    def _find_report_or_raise(self, report_id: uuid.UUID) -> Report:
        report = self.repository.find_by_id(report_id)
        if report is None:
            raise ReportNotFoundError(report_id)
        return report

    def _change_report(
        self,
        report_id: uuid.UUID,
        user_context: UserContext,
        action: str,
        change: ReportChange,
    ) -> List[RelatedT]:
        report = self._find_report_or_raise(report_id)
        now = self.clock()
        username = user_context.username_or_system()

        change(report, now, username)
        mark_modified_in_dps(report, now, username)
        report = self.repository.save(report)

        record_report_change(
            report, self.change_name, f"{self.change_name} {action} by {username}"
        )
        return list(self.related_objects(report))

    def _check_index(self, objects: List[RelatedT], index: int) -> None:
        if not 1 <= index <= len(objects):
            raise RelatedObjectNotFoundError(self.object_type, index)


class DescriptionAddendumService(RelatedObjectService[DescriptionAddendum]):
    """Addenda appended to a report's description."""

    object_type = DescriptionAddendum
    change_name = "description_addendums"
    updatable_fields = frozenset(
        {"created_by", "created_at", "first_name", "last_name", "text"}
    )

    def related_objects(self, report: Report) -> List[DescriptionAddendum]:
        return report.description_addendums

    def add_object(
        self,
        report_id: uuid.UUID,
        user_context: UserContext,
        first_name: str,
        last_name: str,
        text: str,
        created_by: Optional[str] = None,
        created_at: Optional[datetime.datetime] = None,
    ) -> List[DescriptionAddendum]:
        """Appends an addendum. It is attributed to the requesting user at the
        current time unless |created_by| or |created_at| say otherwise."""

        def add(report: Report, now: datetime.datetime, username: str) -> None:
            report.add_description_addendum(
                created_by=created_by or username,
                created_at=created_at or now,
                first_name=first_name,
                last_name=last_name,
                text=text,
            )

        return self._change_report(report_id, user_context, "added", add)

    def _apply_changes(
        self,
        related_object: DescriptionAddendum,
        changes: Dict[str, Any],
        now: datetime.datetime,
        username: str,
    ) -> None:
        # An explicit empty created_at resets it to now
        if "created_at" in changes and changes["created_at"] is None:
            changes = {**changes, "created_at": now}
        super()._apply_changes(related_object, changes, now, username)


class StaffInvolvementService(RelatedObjectService[StaffInvolvement]):
    object_type = StaffInvolvement
    change_name = "staff_involved"
    updatable_fields = frozenset({"staff_username", "staff_role", "comment"})

    def related_objects(self, report: Report) -> List[StaffInvolvement]:
        return report.staff_involved

    def add_object(
        self,
        report_id: uuid.UUID,
        user_context: UserContext,
        staff_username: str,
        staff_role: StaffRole,
        comment: Optional[str] = None,
    ) -> List[StaffInvolvement]:
        def add(report: Report, _now: datetime.datetime, _username: str) -> None:
            report.add_staff_involved(staff_role, staff_username, comment)

        return self._change_report(report_id, user_context, "added", add)


class PrisonerInvolvementService(RelatedObjectService[PrisonerInvolvement]):
    object_type = PrisonerInvolvement
    change_name = "prisoners_involved"
    updatable_fields = frozenset(
        {"prisoner_number", "prisoner_role", "outcome", "comment"}
    )

    def related_objects(self, report: Report) -> List[PrisonerInvolvement]:
        return report.prisoners_involved

    def add_object(
        self,
        report_id: uuid.UUID,
        user_context: UserContext,
        prisoner_number: str,
        prisoner_role: PrisonerRole,
        outcome: Optional[PrisonerOutcome] = None,
        comment: Optional[str] = None,
    ) -> List[PrisonerInvolvement]:
        def add(report: Report, _now: datetime.datetime, _username: str) -> None:
            report.add_prisoner_involved(
                prisoner_number, prisoner_role, outcome=outcome, comment=comment
            )

        return self._change_report(report_id, user_context, "added", add)


class CorrectionRequestService(RelatedObjectService[CorrectionRequest]):
    """Requests for corrections to a report. A correction request is always
    attributed to the user who last added or changed it."""

    object_type = CorrectionRequest
    change_name = "correction_requests"
    updatable_fields = frozenset({"reason", "description_of_change"})

    def related_objects(self, report: Report) -> List[CorrectionRequest]:
        return report.correction_requests

    def add_object(
        self,
        report_id: uuid.UUID,
        user_context: UserContext,
        reason: CorrectionReason,
        description_of_change: str,
    ) -> List[CorrectionRequest]:
        def add(report: Report, now: datetime.datetime, username: str) -> None:
            report.add_correction_request(
                correction_requested_by=username,
                correction_requested_at=now,
                reason=reason,
                description_of_change=description_of_change,
            )

        return self._change_report(report_id, user_context, "added", add)

    def _apply_changes(
        self,
        related_object: CorrectionRequest,
        changes: Dict[str, Any],
        now: datetime.datetime,
        username: str,
    ) -> None:
        super()._apply_changes(related_object, changes, now, username)
        related_object.correction_requested_by = username
        related_object.correction_requested_at = now
