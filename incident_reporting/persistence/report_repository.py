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
"""Storage of incident reports."""
import abc
import logging
import uuid
from typing import Dict, Optional

from more_itertools import only

from incident_reporting.persistence.entities import Report
from incident_reporting.persistence.errors import ReportAlreadyExistsError
from incident_reporting.utils import environment


class ReportRepository(abc.ABC):
    """Interface for loading and saving Reports."""

    @abc.abstractmethod
    def find_by_id(self, report_id: uuid.UUID) -> Optional[Report]:
        """Returns the report with |report_id|, or None if there is none."""

    @abc.abstractmethod
    def find_by_incident_number(self, incident_number: str) -> Optional[Report]:
        """Returns the report with |incident_number|, or None if there is none."""

    @abc.abstractmethod
    def save(self, report: Report) -> Report:
        """Saves |report|, assigning it an id if it does not have one yet.

        Raises ReportAlreadyExistsError if a different report already has the
        same incident number.
        """


class InMemoryReportRepository(ReportRepository):
    """ReportRepository that keeps reports in a dict. Not thread-safe."""

    def __init__(self) -> None:
        self._reports: Dict[uuid.UUID, Report] = {}

    def find_by_id(self, report_id: uuid.UUID) -> Optional[Report]:
        return self._reports.get(report_id)

    def find_by_incident_number(self, incident_number: str) -> Optional[Report]:
        return only(
            report
            for report in self._reports.values()
            if report.incident_number == incident_number
        )

    def save(self, report: Report) -> Report:
        existing = self.find_by_incident_number(report.incident_number)
        if existing is not None and (report.id is None or existing.id != report.id):
            raise ReportAlreadyExistsError(report.incident_number)

        if report.id is None:
            report.id = uuid.uuid4()
            logging.info(
                "Assigned id [%s] to report [%s]", report.id, report.incident_number
            )
        self._reports[report.id] = report
        return report

    def __len__(self) -> int:
        return len(self._reports)

    @environment.test_only
    def clear(self) -> None:
        self._reports.clear()
