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
"""Tests for services/related_object_service.py."""
import datetime
import uuid
from unittest import TestCase

from mock import patch

from incident_reporting.common.constants.correction_reason import CorrectionReason
from incident_reporting.common.constants.information_source import (
    InformationSource,
)
from incident_reporting.common.constants.prisoner_outcome import PrisonerOutcome
from incident_reporting.common.constants.prisoner_role import PrisonerRole
from incident_reporting.common.constants.staff_role import StaffRole
from incident_reporting.persistence.entities import (
    CorrectionRequest,
    PrisonerInvolvement,
    StaffInvolvement,
)
from incident_reporting.persistence.errors import (
    RelatedObjectNotFoundError,
    ReportNotFoundError,
)
from incident_reporting.persistence.report_repository import (
    InMemoryReportRepository,
)
from incident_reporting.services.related_object_service import (
    CorrectionRequestService,
    DescriptionAddendumService,
    PrisonerInvolvementService,
    StaffInvolvementService,
)
from incident_reporting.tests.persistence.report_fixtures import (
    CREATED_AT,
    build_report,
)
from incident_reporting.utils import monitoring
from incident_reporting.utils.user_context import UserContext

_NOW = datetime.datetime(2024, 6, 12, 16, 45)


class RelatedObjectServiceTestCase(TestCase):
    """Shared setup: a stored report last modified in NOMIS and patched
    monitoring."""

    def setUp(self) -> None:
        self.repository = InMemoryReportRepository()
        self.user_context = UserContext(username="USER1")
        self.report = self.repository.save(
            build_report(modified_in=InformationSource.NOMIS)
        )

        self.stats_patcher = patch("incident_reporting.utils.monitoring.stats")
        self.mock_stats = self.stats_patcher.start()
        self.mock_mmap = (
            self.mock_stats.return_value.stats_recorder.new_measurement_map.return_value
        )

    def tearDown(self) -> None:
        self.stats_patcher.stop()

    def assert_modified_in_dps(self, username: str = "USER1") -> None:
        self.assertEqual(InformationSource.DPS, self.report.modified_in)
        self.assertEqual(_NOW, self.report.last_modified_date)
        self.assertEqual(username, self.report.last_modified_by)

    def assert_not_modified(self) -> None:
        self.assertEqual(InformationSource.NOMIS, self.report.modified_in)
        self.assertEqual(CREATED_AT, self.report.last_modified_date)
        self.assertEqual("JSMITH", self.report.last_modified_by)
        self.mock_mmap.record.assert_not_called()


class DescriptionAddendumServiceTest(RelatedObjectServiceTestCase):
    """Tests for adding, changing and removing description addenda."""

    def setUp(self) -> None:
        super().setUp()
        self.service = DescriptionAddendumService(self.repository, clock=lambda: _NOW)

    def _add(self, text: str) -> None:
        self.service.add_object(
            self.report.id, self.user_context, "Tony", "Stark", text
        )

    def testAddObject(self) -> None:
        addenda = self.service.add_object(
            self.report.id, self.user_context, "Tony", "Stark", "More details"
        )

        self.assertEqual(1, len(addenda))
        addendum = addenda[0]
        self.assertEqual(0, addendum.sequence)
        self.assertEqual("USER1", addendum.created_by)
        self.assertEqual(_NOW, addendum.created_at)
        self.assertEqual("Tony", addendum.first_name)
        self.assertEqual("Stark", addendum.last_name)
        self.assertEqual("More details", addendum.text)
        self.assertEqual(addenda, self.report.description_addendums)
        self.assert_modified_in_dps()

        self.mock_mmap.measure_int_put.assert_called_once()
        (tags,) = self.mock_mmap.record.call_args[0]
        self.assertEqual(
            {
                monitoring.TagKey.CHANGE: "description_addendums",
                monitoring.TagKey.PRISON_ID: "MDI",
            },
            tags.map,
        )

    def testAddObject_ExplicitCreator(self) -> None:
        created_at = datetime.datetime(2024, 6, 1, 8, 0)

        addenda = self.service.add_object(
            self.report.id,
            UserContext(),
            "Steve",
            "Rogers",
            "Witness statement",
            created_by="SROGERS",
            created_at=created_at,
        )

        self.assertEqual("SROGERS", addenda[0].created_by)
        self.assertEqual(created_at, addenda[0].created_at)
        self.assert_modified_in_dps(username="INCIDENT_REPORTING_API")

    def testAddObject_SequenceFollowsLastAddendum(self) -> None:
        for text in ("First", "Second", "Third"):
            self._add(text)
        self.service.delete_object(self.report.id, 1, self.user_context)

        addenda = self.service.add_object(
            self.report.id, self.user_context, "Tony", "Stark", "Fourth"
        )

        self.assertEqual([1, 2, 3], [a.sequence for a in addenda])
        self.assertEqual(["Second", "Third", "Fourth"], [a.text for a in addenda])

    def testAddObject_ReportNotFound(self) -> None:
        with self.assertRaises(ReportNotFoundError):
            self.service.add_object(
                uuid.uuid4(), self.user_context, "Tony", "Stark", "More details"
            )
        self.mock_mmap.record.assert_not_called()

    def testListObjects(self) -> None:
        self._add("First")
        self._add("Second")

        self.assertEqual(
            ["First", "Second"],
            [a.text for a in self.service.list_objects(self.report.id)],
        )

    def testListObjects_ReportNotFound(self) -> None:
        with self.assertRaises(ReportNotFoundError):
            self.service.list_objects(uuid.uuid4())

    def testUpdateObject(self) -> None:
        self._add("First")
        self._add("Second")

        addenda = self.service.update_object(
            self.report.id, 2, UserContext(username="USER2"), text="Corrected"
        )

        self.assertEqual(["First", "Corrected"], [a.text for a in addenda])
        self.assertEqual(1, addenda[1].sequence)
        self.assertEqual("USER1", addenda[1].created_by)
        self.assert_modified_in_dps(username="USER2")

    def testUpdateObject_EmptyCreatedAtResetsToNow(self) -> None:
        self.service.add_object(
            self.report.id,
            self.user_context,
            "Tony",
            "Stark",
            "First",
            created_at=datetime.datetime(2024, 1, 1, 0, 0),
        )

        addenda = self.service.update_object(
            self.report.id, 1, self.user_context, created_at=None
        )

        self.assertEqual(_NOW, addenda[0].created_at)

    def testUpdateObject_IndexOutOfRange(self) -> None:
        self._add("First")
        self.report.modified_in = InformationSource.NOMIS

        for index in (0, 2):
            with self.assertRaises(RelatedObjectNotFoundError) as e:
                self.service.update_object(
                    self.report.id, index, self.user_context, text="Corrected"
                )
            self.assertEqual(index, e.exception.index)
        self.assertEqual(
            "Object DescriptionAddendum at index 2 not found", str(e.exception)
        )
        self.assertEqual("First", self.report.description_addendums[0].text)
        self.assertEqual(InformationSource.NOMIS, self.report.modified_in)

    def testUpdateObject_UnknownField(self) -> None:
        self._add("First")

        with self.assertRaises(ValueError):
            self.service.update_object(self.report.id, 1, self.user_context, sequence=5)
        self.assertEqual(0, self.report.description_addendums[0].sequence)

    def testUpdateObject_NoChanges(self) -> None:
        self._add("First")

        with self.assertRaises(ValueError):
            self.service.update_object(self.report.id, 1, self.user_context)

    def testUpdateObject_ReportNotFound(self) -> None:
        with self.assertRaises(ReportNotFoundError):
            self.service.update_object(
                uuid.uuid4(), 1, self.user_context, text="Corrected"
            )

    def testDeleteObject(self) -> None:
        self._add("First")
        self._add("Second")

        addenda = self.service.delete_object(self.report.id, 1, self.user_context)

        self.assertEqual(["Second"], [a.text for a in addenda])
        self.assertEqual(addenda, self.report.description_addendums)
        self.assert_modified_in_dps()

    def testDeleteObject_IndexOutOfRange(self) -> None:
        with self.assertRaises(RelatedObjectNotFoundError):
            self.service.delete_object(self.report.id, 1, self.user_context)
        self.assert_not_modified()

    def testDeleteObject_ReportNotFound(self) -> None:
        with self.assertRaises(ReportNotFoundError):
            self.service.delete_object(uuid.uuid4(), 1, self.user_context)


class StaffInvolvementServiceTest(RelatedObjectServiceTestCase):
    """Tests for changing the staff involved in a report."""

    def setUp(self) -> None:
        super().setUp()
        self.service = StaffInvolvementService(self.repository, clock=lambda: _NOW)

    def testAddObject(self) -> None:
        staff = self.service.add_object(
            self.report.id, self.user_context, "JSMITH", StaffRole.FIRST_ON_SCENE
        )

        self.assertEqual(
            [StaffInvolvement("JSMITH", StaffRole.FIRST_ON_SCENE, comment=None)],
            staff,
        )
        self.assert_modified_in_dps()
        (tags,) = self.mock_mmap.record.call_args[0]
        self.assertEqual("staff_involved", tags.map[monitoring.TagKey.CHANGE])

    def testUpdateObject(self) -> None:
        self.service.add_object(
            self.report.id,
            self.user_context,
            "JSMITH",
            StaffRole.WITNESS,
            comment="Saw it happen",
        )

        staff = self.service.update_object(
            self.report.id,
            1,
            self.user_context,
            staff_role=StaffRole.ACTIVELY_INVOLVED,
            comment=None,
        )

        self.assertEqual(
            [StaffInvolvement("JSMITH", StaffRole.ACTIVELY_INVOLVED, comment=None)],
            staff,
        )

    def testDeleteObject(self) -> None:
        self.service.add_object(
            self.report.id, self.user_context, "JSMITH", StaffRole.WITNESS
        )
        self.service.add_object(
            self.report.id, self.user_context, "ABROWN", StaffRole.HEALTHCARE
        )

        staff = self.service.delete_object(self.report.id, 2, self.user_context)

        self.assertEqual(["JSMITH"], [s.staff_username for s in staff])

    def testDeleteObject_IndexOutOfRange(self) -> None:
        with self.assertRaises(RelatedObjectNotFoundError) as e:
            self.service.delete_object(self.report.id, 1, self.user_context)
        self.assertIs(StaffInvolvement, e.exception.object_type)
        self.assert_not_modified()


class PrisonerInvolvementServiceTest(RelatedObjectServiceTestCase):
    """Tests for changing the prisoners involved in a report."""

    def setUp(self) -> None:
        super().setUp()
        self.service = PrisonerInvolvementService(self.repository, clock=lambda: _NOW)

    def testAddObject(self) -> None:
        prisoners = self.service.add_object(
            self.report.id,
            self.user_context,
            "A1234AA",
            PrisonerRole.PERPETRATOR,
            outcome=PrisonerOutcome.CHARGED_BY_POLICE,
        )

        self.assertEqual(
            [
                PrisonerInvolvement(
                    "A1234AA",
                    PrisonerRole.PERPETRATOR,
                    outcome=PrisonerOutcome.CHARGED_BY_POLICE,
                    comment=None,
                )
            ],
            prisoners,
        )
        self.assert_modified_in_dps()

    def testUpdateObject(self) -> None:
        self.service.add_object(
            self.report.id, self.user_context, "A1234AA", PrisonerRole.FIGHTER
        )

        prisoners = self.service.update_object(
            self.report.id,
            1,
            self.user_context,
            outcome=PrisonerOutcome.LOCAL_INVESTIGATION,
            comment="Started the fight",
        )

        self.assertEqual(PrisonerOutcome.LOCAL_INVESTIGATION, prisoners[0].outcome)
        self.assertEqual("Started the fight", prisoners[0].comment)
        self.assertEqual(PrisonerRole.FIGHTER, prisoners[0].prisoner_role)

    def testDeleteObject(self) -> None:
        self.service.add_object(
            self.report.id, self.user_context, "A1234AA", PrisonerRole.FIGHTER
        )

        self.assertEqual(
            [], self.service.delete_object(self.report.id, 1, self.user_context)
        )
        self.assertEqual([], self.report.prisoners_involved)


class CorrectionRequestServiceTest(RelatedObjectServiceTestCase):
    """Tests for changing the correction requests on a report."""

    def setUp(self) -> None:
        super().setUp()
        self.service = CorrectionRequestService(self.repository, clock=lambda: _NOW)

    def testAddObject(self) -> None:
        requests = self.service.add_object(
            self.report.id,
            self.user_context,
            CorrectionReason.MISTAKE,
            "Wrong location recorded",
        )

        self.assertEqual(
            [
                CorrectionRequest(
                    correction_requested_by="USER1",
                    correction_requested_at=_NOW,
                    reason=CorrectionReason.MISTAKE,
                    description_of_change="Wrong location recorded",
                )
            ],
            requests,
        )
        self.assert_modified_in_dps()

    def testUpdateObject_AttributedToUpdatingUser(self) -> None:
        later = datetime.datetime(2024, 6, 13, 9, 0)
        self.service.add_object(
            self.report.id,
            self.user_context,
            CorrectionReason.MISTAKE,
            "Wrong location recorded",
        )
        self.service.clock = lambda: later

        requests = self.service.update_object(
            self.report.id,
            1,
            UserContext(username="USER2"),
            reason=CorrectionReason.MISSING_INFORMATION,
        )

        self.assertEqual(CorrectionReason.MISSING_INFORMATION, requests[0].reason)
        self.assertEqual("Wrong location recorded", requests[0].description_of_change)
        self.assertEqual("USER2", requests[0].correction_requested_by)
        self.assertEqual(later, requests[0].correction_requested_at)
        self.assertEqual(later, self.report.last_modified_date)

    def testUpdateObject_RequesterNotUpdatable(self) -> None:
        self.service.add_object(
            self.report.id,
            self.user_context,
            CorrectionReason.MISTAKE,
            "Wrong location recorded",
        )

        with self.assertRaises(ValueError):
            self.service.update_object(
                self.report.id,
                1,
                self.user_context,
                correction_requested_by="SOMEONE_ELSE",
            )
