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
"""Changes made to incident reports from within DPS."""
import datetime
import logging
import uuid
from typing import Optional

from opencensus.stats import aggregation, measure, view

from incident_reporting.common.constants.incident_type import IncidentType
from incident_reporting.common.constants.information_source import (
    InformationSource,
)
from incident_reporting.common.constants.status import Status
from incident_reporting.common.date import Clock, now_in_local_time_zone
from incident_reporting.common.maybe_changed import Changed, MaybeChanged, Unchanged
from incident_reporting.persistence.entities import Report
from incident_reporting.persistence.report_repository import ReportRepository
from incident_reporting.utils import monitoring
from incident_reporting.utils.user_context import UserContext

m_report_changes = measure.MeasureInt(
    "report/change_count", "The number of changes made to reports", "1"
)
report_changes_view = view.View(
    "incident_reporting/report/change_count",
    "The sum of changes made to reports",
    [monitoring.TagKey.CHANGE, monitoring.TagKey.PRISON_ID],
    m_report_changes,
    aggregation.SumAggregation(),
)
monitoring.register_views([report_changes_view])


def mark_modified_in_dps(report: Report, now: datetime.datetime, username: str) -> None:
    """Records that |report| was last changed in DPS by |username|. NOMIS can no
    longer update it after this."""
    report.last_modified_date = now
    report.last_modified_by = username
    report.modified_in = InformationSource.DPS


def record_report_change(report: Report, change: str, details: str) -> None:
    logging.info("Report %s: %s", report.id, details)
    with monitoring.measurements(
        {
            monitoring.TagKey.CHANGE: change,
            monitoring.TagKey.PRISON_ID: report.prison_id,
        }
    ) as m:
        m.measure_int_put(m_report_changes, 1)


class ReportService:
    """Makes changes to stored reports on behalf of a user."""

    def __init__(
        self, repository: ReportRepository, clock: Clock = now_in_local_time_zone
    ):
        self.repository = repository
        self.clock = clock

    def change_report_status(
        self, report_id: uuid.UUID, new_status: Status, user_context: UserContext
    ) -> Optional[MaybeChanged[Report]]:
        """Sets the status of the report with |report_id|.

        Returns None if there is no such report, otherwise Changed or Unchanged
        depending on whether the status was already |new_status|.
        """
        report = self.repository.find_by_id(report_id)
        if report is None:
            return None
        if report.status == new_status:
            return Unchanged(report)

        old_status = report.status
        now = self.clock()
        username = user_context.username_or_system()
        report.change_status(new_status, now, username)
        mark_modified_in_dps(report, now, username)
        return Changed(self.repository.save(report)).also_if_changed(
            lambda changed: record_report_change(
                changed,
                "status",
                f"status changed from {old_status.value} to {new_status.value}",
            )
        )

    def change_report_type(
        self,
        report_id: uuid.UUID,
        new_type: IncidentType,
        user_context: UserContext,
    ) -> Optional[MaybeChanged[Report]]:
        """Sets the type of the report with |report_id|, moving its current
        questions into the report history.

        Returns None if there is no such report, otherwise Changed or Unchanged
        depending on whether the type was already |new_type|.
        """
        report = self.repository.find_by_id(report_id)
        if report is None:
            return None
        if report.type == new_type:
            return Unchanged(report)

        old_type = report.type
        now = self.clock()
        username = user_context.username_or_system()
        report.change_type(new_type, now, username)
        mark_modified_in_dps(report, now, username)
        return Changed(self.repository.save(report)).also_if_changed(
            lambda changed: record_report_change(
                changed,
                "type",
                f"type changed from {old_type.value} to {new_type.value}",
            )
        )
