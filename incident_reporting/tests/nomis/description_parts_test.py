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
"""Tests for nomis/description_parts.py."""
import datetime
import unittest

from incident_reporting.common.constants.system import SYSTEM_USERNAME
from incident_reporting.nomis.description_parts import (
    DescriptionAddendum,
    get_description_parts,
)


class GetDescriptionPartsTest(unittest.TestCase):
    """Tests for splitting addenda out of NOMIS descriptions."""

    def test_single_addendum(self) -> None:
        description, addenda = get_description_parts(
            "Original description"
            "User:STARK,TONY Date:07-JUN-2024 12:13Some updated details"
        )

        self.assertEqual("Original description", description)
        self.assertEqual(
            [
                DescriptionAddendum(
                    sequence=0,
                    created_by=SYSTEM_USERNAME,
                    created_at=datetime.datetime(2024, 6, 7, 12, 13),
                    first_name="TONY",
                    last_name="STARK",
                    text="Some updated details",
                )
            ],
            addenda,
        )

    def test_multiple_addenda(self) -> None:
        description, addenda = get_description_parts(
            "Original description"
            "User:STARK,TONY Date:07-JUN-2024 12:13Some updated details"
            "User:ROGERS,STEVE Date:08-JUN-2024 15:58Second lot of updated details"
            "User:BANNER,BRUCE Date:11-JUN-2024 08:42Third lot of updated details"
        )

        self.assertEqual("Original description", description)
        self.assertEqual(
            [
                DescriptionAddendum(
                    sequence=0,
                    created_by=SYSTEM_USERNAME,
                    created_at=datetime.datetime(2024, 6, 7, 12, 13),
                    first_name="TONY",
                    last_name="STARK",
                    text="Some updated details",
                ),
                DescriptionAddendum(
                    sequence=1,
                    created_by=SYSTEM_USERNAME,
                    created_at=datetime.datetime(2024, 6, 8, 15, 58),
                    first_name="STEVE",
                    last_name="ROGERS",
                    text="Second lot of updated details",
                ),
                DescriptionAddendum(
                    sequence=2,
                    created_by=SYSTEM_USERNAME,
                    created_at=datetime.datetime(2024, 6, 11, 8, 42),
                    first_name="BRUCE",
                    last_name="BANNER",
                    text="Third lot of updated details",
                ),
            ],
            addenda,
        )

    def test_no_addenda(self) -> None:
        self.assertEqual(
            ("Original description", []),
            get_description_parts("Original description"),
        )

    def test_none(self) -> None:
        self.assertEqual((None, []), get_description_parts(None))

    def test_empty(self) -> None:
        self.assertEqual(("", []), get_description_parts(""))

    def test_slash_date_format(self) -> None:
        _, addenda = get_description_parts(
            "Original description"
            "User:STARK,TONY Date:07/06/2024 12:13Some updated details"
        )

        self.assertEqual(1, len(addenda))
        self.assertEqual(datetime.datetime(2024, 6, 7, 12, 13), addenda[0].created_at)

    def test_date_formats_are_equivalent(self) -> None:
        _, month_name_addenda = get_description_parts(
            "User:STARK,TONY Date:07-JUN-2024 12:13Some updated details"
        )
        _, numeric_addenda = get_description_parts(
            "User:STARK,TONY Date:07/06/2024 12:13Some updated details"
        )

        self.assertEqual(month_name_addenda, numeric_addenda)

    def test_lowercase_month(self) -> None:
        _, addenda = get_description_parts(
            "Original descriptionUser:STARK,TONY Date:07-jun-2024 09:05Details"
        )

        self.assertEqual(datetime.datetime(2024, 6, 7, 9, 5), addenda[0].created_at)

    def test_description_starting_with_addendum(self) -> None:
        description, addenda = get_description_parts(
            "User:STARK,TONY Date:07-JUN-2024 12:13Some updated details"
        )

        self.assertEqual("", description)
        self.assertEqual(1, len(addenda))

    def test_empty_addendum_text(self) -> None:
        _, addenda = get_description_parts(
            "Original descriptionUser:STARK,TONY Date:07-JUN-2024 12:13"
        )

        self.assertEqual("", addenda[0].text)

    def test_missing_date(self) -> None:
        self._assert_unchanged(
            "Original descriptionUser:STARK,TONY Date:Some updated details"
        )

    def test_single_digit_day(self) -> None:
        self._assert_unchanged(
            "Original descriptionUser:STARK,TONY Date:7-JUN-2024 12:13"
            "Some updated details"
        )

    def test_missing_date_marker(self) -> None:
        self._assert_unchanged(
            "Original descriptionUser:STARK,TONYSome updated details"
        )

    def test_missing_comma_in_name(self) -> None:
        self._assert_unchanged(
            "Original description"
            "User:STARK TONY Date:07-JUN-2024 12:13Some updated details"
        )

    def test_missing_first_name(self) -> None:
        self._assert_unchanged(
            "Original descriptionUser:STARK, Date:07-JUN-2024 12:13Some details"
        )

    def test_space_after_date_marker(self) -> None:
        self._assert_unchanged(
            "Original description"
            "User:STARK,TONY Date: 07-JUN-2024 12:13Some updated details"
        )

    def test_invalid_calendar_date(self) -> None:
        self._assert_unchanged(
            "Original descriptionUser:STARK,TONY Date:31-FEB-2024 12:13Details"
        )

    def test_one_malformed_addendum_discards_all(self) -> None:
        self._assert_unchanged(
            "Original description"
            "User:STARK,TONY Date:07-JUN-2024 12:13Some updated details"
            "User:ROGERS STEVE Date:08-JUN-2024 15:58Second lot of updated details"
        )

    def _assert_unchanged(self, description: str) -> None:
        with self.assertLogs(level="ERROR"):
            self.assertEqual((description, []), get_description_parts(description))
