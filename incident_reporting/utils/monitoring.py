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
"""Creates monitoring client for measuring and recording stats."""
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

from opencensus.stats import stats as stats_module
from opencensus.stats.measurement_map import MeasurementMap
from opencensus.tags import TagMap


def stats():
    return stats_module.stats


def register_views(views):
    for view in views:
        stats().view_manager.register_view(view)


@contextmanager
def measurements(tags: Optional[Dict[str, Any]] = None) -> Iterator[MeasurementMap]:
    mmap = stats().stats_recorder.new_measurement_map()
    try:
        yield mmap
    finally:
        tag_map = TagMap()
        for key, value in (tags or {}).items():
            tag_map.insert(key, str(value))
        mmap.record(tag_map)


class TagKey:
    CHANGE = "change"
    CREATED = "created"
    ENTITY_TYPE = "entity_type"
    PRISON_ID = "prison_id"
    UPDATED = "updated"
