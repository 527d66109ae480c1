# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
The machine a sweep runs on.

Timings are only comparable between runs on the same interpreter and the same
core count, so the bootstrap records both next to the numbers. The interpreter
floor is enforced here too.
"""

import os
import platform
import sys
from typing import Final, NamedTuple, Optional

MINIMUM_PYTHON: Final[tuple[int, int]] = (3, 11)


class SystemInfo(NamedTuple):
    """What the timing numbers depend on."""

    python_version: str
    implementation: str
    platform: str
    architecture: str
    hostname: str
    cpu_count: int


def require_python(version: Optional[tuple[int, ...]] = None) -> None:
    """
    Refuse to run on an interpreter older than MINIMUM_PYTHON.

    Args:
        version: The version to check; the running interpreter's by default.

    Raises:
        RuntimeError: If the version is below the floor.
    """
    current = tuple(version if version is not None else sys.version_info[:2])[:2]
    if current < MINIMUM_PYTHON:
        wanted = ".".join(str(part) for part in MINIMUM_PYTHON)
        found = ".".join(str(part) for part in current)
        raise RuntimeError(f"quadbench requires Python >= {wanted}, found {found}")


def get_system_info() -> SystemInfo:
    cpu_count = os.cpu_count() or 1
    return SystemInfo(
        python_version=platform.python_version(),
        implementation=platform.python_implementation(),
        platform=platform.system(),
        architecture=platform.machine(),
        hostname=platform.node(),
        cpu_count=cpu_count,
    )
