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
"""Helpers to convert NOMIS JSON payloads to and from the attrs classes in
incident_reporting.nomis.nomis_report.

NOMIS payload keys are camelCase, dates and datetimes are ISO-8601 strings and
datetimes carry no offset.
"""
import datetime
import uuid
from typing import Any, Dict, Type, TypeVar

import attr
import cattrs
from cattrs.gen import make_dict_structure_fn, make_dict_unstructure_fn, override

from incident_reporting.nomis.errors import NomisPayloadError
from incident_reporting.nomis.nomis_report import NomisReport, NomisSyncRequest

AttrT = TypeVar("AttrT")


def to_camel_case(name: str) -> str:
    first, *rest = name.split("_")
    return first + "".join(part.capitalize() for part in rest)


def _camel_case_overrides(cls: type) -> Dict[str, Any]:
    return {
        field.name: override(rename=to_camel_case(field.name))
        for field in attr.fields(cls)
    }


def _naive_datetime_from_iso(value: str) -> datetime.datetime:
    parsed = datetime.datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        raise ValueError(f"Expected a local datetime without offset, got [{value}]")
    return parsed


def _build_converter() -> cattrs.Converter:
    converter = cattrs.Converter()

    converter.register_structure_hook(
        datetime.datetime, lambda value, _: _naive_datetime_from_iso(value)
    )
    converter.register_structure_hook(
        datetime.date, lambda value, _: datetime.date.fromisoformat(value)
    )
    converter.register_structure_hook(uuid.UUID, lambda value, _: uuid.UUID(value))

    converter.register_unstructure_hook(datetime.datetime, lambda d: d.isoformat())
    converter.register_unstructure_hook(datetime.date, lambda d: d.isoformat())
    converter.register_unstructure_hook(uuid.UUID, str)

    converter.register_structure_hook_factory(
        attr.has,
        lambda cls: make_dict_structure_fn(
            cls, converter, **_camel_case_overrides(cls)
        ),
    )
    converter.register_unstructure_hook_factory(
        attr.has,
        lambda cls: make_dict_unstructure_fn(
            cls, converter, **_camel_case_overrides(cls)
        ),
    )
    return converter


_converter = _build_converter()


def _structure(json_dict: Dict[str, Any], cls: Type[AttrT]) -> AttrT:
    try:
        return _converter.structure(json_dict, cls)
    except Exception as e:
        raise NomisPayloadError(
            f"Could not build {cls.__name__} from NOMIS payload: {e}"
        ) from e


def nomis_sync_request_from_json_dict(json_dict: Dict[str, Any]) -> NomisSyncRequest:
    return _structure(json_dict, NomisSyncRequest)


def nomis_report_from_json_dict(json_dict: Dict[str, Any]) -> NomisReport:
    return _structure(json_dict, NomisReport)


def to_json_dict(attr_obj: Any) -> Any:
    """Converts an attrs object (or a list of them) to a JSON-serializable value
    with camelCase keys."""
    return _converter.unstructure(attr_obj)

