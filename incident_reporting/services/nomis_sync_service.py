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
"""Creates and updates incident reports from reports sent by NOMIS."""
import logging
import uuid

from opencensus.stats import aggregation, measure, view

from incident_reporting.common.constants.information_source import (
    InformationSource,
)
from incident_reporting.common.date import Clock, now_in_local_time_zone
from incident_reporting.nomis.entity_mapping import (
    report_from_nomis,
    update_report_from_nomis,
)
from incident_reporting.nomis.nomis_report import NomisReport, NomisSyncRequest
from incident_reporting.persistence.entities import Report
from incident_reporting.persistence.errors import (
    ReportAlreadyExistsError,
    ReportModifiedInDpsError,
    ReportNotFoundError,
)
from incident_reporting.persistence.report_repository import ReportRepository
from incident_reporting.utils import monitoring
from incident_reporting.utils.user_context import UserContext

m_syncs = measure.MeasureInt(
    "nomis/sync_count", "The number of reports synchronised from NOMIS", "1"
)
syncs_view = view.View(
    "incident_reporting/nomis/sync_count",
    "The sum of reports synchronised from NOMIS",
    [
        monitoring.TagKey.CREATED,
        monitoring.TagKey.UPDATED,
        monitoring.TagKey.PRISON_ID,
    ],
    m_syncs,
    aggregation.SumAggregation(),
)
monitoring.register_views([syncs_view])


class NomisSyncService:
    """Keeps reports in line with their NOMIS counterparts."""

    def __init__(
        self, repository: ReportRepository, clock: Clock = now_in_local_time_zone
    ):
        self.repository = repository
        self.clock = clock

    def upsert(
        self, sync_request: NomisSyncRequest, user_context: UserContext
    ) -> Report:
        """Creates a new report from the request, or updates the existing report
        with the request's id.

        Raises NomisSyncValidationError for an invalid request,
        ReportNotFoundError / ReportModifiedInDpsError when the report to update
        is missing or now owned by DPS, and ReportAlreadyExistsError when a new
        report's incident number is already taken.
        """
        sync_request.validate()

        created = sync_request.id is None
        if sync_request.id is not None:
            report = self._update_existing_report(
                sync_request.id,
                sync_request.incident_report,
                user_context.username_or_system(),
            )
        else:
            report = self._create_new_report(sync_request.incident_report)

        logging.info(
            "Synchronised Incident Report: %s (created: %s, updated: %s)",
            report.id,
            created,
            not created,
        )
        with monitoring.measurements(
            {
                monitoring.TagKey.CREATED: created,
                monitoring.TagKey.UPDATED: not created,
                monitoring.TagKey.PRISON_ID: report.prison_id,
            }
        ) as m:
            m.measure_int_put(m_syncs, 1)
        return report

    def _update_existing_report(
        self, report_id: uuid.UUID, nomis_report: NomisReport, updated_by: str
    ) -> Report:
        report = self.repository.find_by_id(report_id)
        if report is None:
            raise ReportNotFoundError(report_id)
        if report.modified_in != InformationSource.NOMIS:
            raise ReportModifiedInDpsError(report_id)

        update_report_from_nomis(report, nomis_report, updated_by, self.clock())
        return self.repository.save(report)

    def _create_new_report(self, nomis_report: NomisReport) -> Report:
        incident_number = str(nomis_report.incident_id)
        if self.repository.find_by_incident_number(incident_number) is not None:
            raise ReportAlreadyExistsError(incident_number)

        return self.repository.save(report_from_nomis(nomis_report, self.clock()))
