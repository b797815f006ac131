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
"""Contains errors for the persistence directory."""
import uuid


class PersistenceError(Exception):
    """Raised when an error with the persistence layer is encountered."""


class ReportNotFoundError(PersistenceError):
    def __init__(self, report_id: uuid.UUID):
        self.report_id = report_id
        super().__init__(f"There is no report found for ID = {report_id}")


class ReportAlreadyExistsError(PersistenceError):
    def __init__(self, incident_number: str):
        self.incident_number = incident_number
        super().__init__(
            f"A report with incident number [{incident_number}] already exists"
        )


class ReportModifiedInDpsError(PersistenceError):
    """Raised when NOMIS tries to update a report that has since been changed in
    DPS."""

    def __init__(self, report_id: uuid.UUID):
        self.report_id = report_id
        super().__init__(
            f"Report {report_id} has been modified in DPS and can no longer be "
            f"updated from NOMIS"
        )


class RelatedObjectNotFoundError(PersistenceError):
    """Raised when a report has no related object at the given 1-based
    |index|."""

    def __init__(self, object_type: type, index: int):
        self.object_type = object_type
        self.index = index
        super().__init__(f"Object {object_type.__name__} at index {index} not found")
