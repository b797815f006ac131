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
"""Utils for working with local dates and times.

Incident times are recorded as naive local datetimes in the configured time
zone, matching how NOMIS records them.
"""
import datetime
from typing import Callable

import pytz

from incident_reporting.utils import environment

Clock = Callable[[], datetime.datetime]


def local_time_zone() -> datetime.tzinfo:
    return pytz.timezone(environment.get_time_zone_name())


def now_in_local_time_zone() -> datetime.datetime:
    """Returns the current wall-clock time in the local time zone, without tzinfo."""
    return datetime.datetime.now(tz=pytz.UTC).astimezone(local_time_zone()).replace(
        tzinfo=None
    )


def start_of_day(date: datetime.date) -> datetime.datetime:
    return datetime.datetime(date.year, date.month, date.day)
