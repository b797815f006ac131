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
"""Tools for working with environment variables.

All deployment-specific configuration is read from the process environment so
that the same code runs unchanged locally, in tests and in each deployed
environment.
"""
import logging
import os
import sys
from enum import Enum
from functools import wraps
from typing import Any, Callable, Optional

import incident_reporting

ENVIRONMENT_VAR = "INCIDENT_REPORTING_ENV"
TIME_ZONE_VAR = "INCIDENT_REPORTING_TIME_ZONE"
LOG_LEVEL_VAR = "INCIDENT_REPORTING_LOG_LEVEL"

DEFAULT_TIME_ZONE = "Europe/London"
DEFAULT_LOG_LEVEL = "INFO"


class DeployedEnvironment(Enum):
    DEV = "dev"
    PREPROD = "preprod"
    PRODUCTION = "production"


DEPLOYED_ENVIRONMENTS = {env.value for env in DeployedEnvironment}


def get_deployed_environment() -> Optional[str]:
    """Get the environment we are running in

    Returns:
        The deployed environment name, or None if it is not set
    """
    return os.getenv(ENVIRONMENT_VAR)


def is_deployed() -> bool:
    """Check whether we're currently running on a local dev machine or in a
    deployed environment."""
    return get_deployed_environment() in DEPLOYED_ENVIRONMENTS


def get_time_zone_name() -> str:
    """Name of the time zone local times are recorded in, e.g. 'Europe/London'."""
    return os.getenv(TIME_ZONE_VAR) or DEFAULT_TIME_ZONE


def get_log_level() -> int:
    level_name = (os.getenv(LOG_LEVEL_VAR) or DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level [{level_name}] in {LOG_LEVEL_VAR}")
    return level


def local_only(func: Callable) -> Callable:
    """Decorator function to verify a call only runs locally

    If running in a deployed environment, raises before any work can be done.
    """

    @wraps(func)
    def check_env(*args: Any, **kwargs: Any) -> Any:
        if is_deployed():
            logging.error("This call is not allowed in a deployed environment.")
            raise RuntimeError("Not available, see service logs.")

        return func(*args, **kwargs)

    return check_env


def in_test() -> bool:
    """Check whether we are running in a test"""
    # Pytest sets incident_reporting.called_from_test in conftest.py
    if not hasattr(incident_reporting, "called_from_test"):
        # Not set when run through unittest directly
        setattr(incident_reporting, "called_from_test", "unittest" in sys.modules)
    return getattr(incident_reporting, "called_from_test")


def test_only(func: Callable) -> Callable:
    """Decorator to verify function only runs in tests

    If called while not in tests, throws an exception.
    """

    @wraps(func)
    def check_test_and_call(*args: Any, **kwargs: Any) -> Callable:
        if not in_test():
            raise RuntimeError("Function may only be called from tests")
        return func(*args, **kwargs)

    return check_test_and_call
