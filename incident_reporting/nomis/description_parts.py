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
"""Splits a NOMIS incident description into the original description and the
addenda NOMIS users appended to it.

NOMIS has no separate field for updates to an incident description. Instead,
each update is appended to the description text after a marker of the form:

    User:<LAST NAME>,<FIRST NAME> Date:<dd-MON-yyyy | dd/MM/yyyy> <HH:mm>

and the text of the update runs until the next marker or the end of the string.
"""
import datetime
import logging
import re
from typing import List, Optional, Tuple

import attr

from incident_reporting.common.constants.system import SYSTEM_USERNAME

ADDENDUM_MARKER = "User:"

_DATETIME_PATTERN = r"\d{2}[-/](?:[A-Za-z]{3}|\d{2})[-/]\d{4} \d{2}:\d{2}"
_DATE_MARKER_REGEX = re.compile(f" Date:({_DATETIME_PATTERN})")

# Month abbreviations are matched case-insensitively by strptime
_DATETIME_FORMATS = ("%d-%b-%Y %H:%M", "%d/%m/%Y %H:%M")


@attr.s(frozen=True)
class DescriptionAddendum:
    """A single update appended to a NOMIS incident description."""

    sequence: int = attr.ib()
    created_by: str = attr.ib()
    created_at: datetime.datetime = attr.ib()
    first_name: str = attr.ib()
    last_name: str = attr.ib()
    text: str = attr.ib()


class _MalformedAddendumError(ValueError):
    pass


def get_description_parts(
    description: Optional[str],
) -> Tuple[Optional[str], List[DescriptionAddendum]]:
    """Returns the original description and the list of addenda parsed from the
    NOMIS |description|, in the order they appear.

    If any addendum marker is malformed, the whole |description| is returned
    unchanged with no addenda. Never raises.
    """
    if description is None:
        return None, []

    original_description, *entries = description.split(ADDENDUM_MARKER)
    if not entries:
        return description, []

    try:
        addenda = [
            _build_addendum(entry, sequence) for sequence, entry in enumerate(entries)
        ]
    except _MalformedAddendumError as e:
        logging.error(
            "Could not parse addenda from incident description, keeping the full "
            "description instead: %s. Description: [%s]",
            e,
            description,
        )
        return description, []

    return original_description, addenda


def _build_addendum(entry: str, sequence: int) -> DescriptionAddendum:
    match = _DATE_MARKER_REGEX.search(entry)
    if not match:
        raise _MalformedAddendumError(
            f"No valid date found in addendum [{sequence}]: [{entry}]"
        )

    full_name = entry[: match.start()]
    text = entry[match.end() :]

    last_name, separator, first_name = full_name.partition(",")
    if not separator or not last_name or not first_name:
        raise _MalformedAddendumError(
            f"Could not split name [{full_name}] in addendum [{sequence}]"
        )

    return DescriptionAddendum(
        sequence=sequence,
        created_by=SYSTEM_USERNAME,
        created_at=_parse_datetime(match.group(1)),
        first_name=first_name,
        last_name=last_name,
        text=text,
    )


def _parse_datetime(datetime_str: str) -> datetime.datetime:
    for datetime_format in _DATETIME_FORMATS:
        try:
            return datetime.datetime.strptime(datetime_str, datetime_format)
        except ValueError:
            continue
    raise _MalformedAddendumError(f"Could not parse date [{datetime_str}]")
