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
"""Script that splits the description of a NOMIS incident report into the
original description and the addenda appended to it, and prints the result as
JSON.

Example usage:

python -m incident_reporting.tools.split_nomis_description --payload_path ~/Downloads/nomis_report.json
"""
import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Tuple

from incident_reporting.nomis.serialization import (
    nomis_report_from_json_dict,
    to_json_dict,
)
from incident_reporting.utils import environment, structured_logging


def parse_arguments(argv: List[str]) -> Tuple[argparse.Namespace, List[str]]:
    parser = argparse.ArgumentParser(
        description="Print the description parts of a NOMIS incident report."
    )
    parser.add_argument(
        "--payload_path",
        dest="payload_path",
        type=str,
        required=True,
        help="Path to a JSON file holding a single NOMIS incident report.",
    )
    return parser.parse_known_args(argv)


def split_description(payload: Dict[str, Any]) -> Dict[str, Any]:
    nomis_report = nomis_report_from_json_dict(payload)
    description, addenda = nomis_report.get_description_parts()
    logging.info(
        "Found %d addenda in the description of incident %s",
        len(addenda),
        nomis_report.incident_id,
    )
    return {"description": description, "addenda": to_json_dict(addenda)}


@environment.local_only
def main(payload_path: str) -> None:
    with open(payload_path, encoding="utf-8") as f:
        payload = json.load(f)
    print(json.dumps(split_description(payload), indent=2))


if __name__ == "__main__":
    structured_logging.setup()
    known_args, _ = parse_arguments(sys.argv[1:])
    main(known_args.payload_path)
