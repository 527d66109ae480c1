# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Runtime bootstrap for quadbench.

The one-time setup before a sweep:
  1. Validate the environment (Python version)
  2. Initialize logging at the configured level
  3. Record the machine the numbers are about to come from
"""

import logging
from pathlib import Path

from quadbench.config.schema import GlobalConfig
from quadbench.logging.logger import get_logger, set_package_log_level
from quadbench.runtime.environment import get_system_info, require_python


def bootstrap(config: GlobalConfig) -> logging.Logger:
    """
    Run the bootstrap sequence and return the runtime logger.

    Args:
        config: The validated global configuration.
    """
    require_python()

    log_file = None
    if config.log_file is not None:
        log_file = Path(config.log_file)

    set_package_log_level(config.log_level)
    logger = get_logger("quadbench.runtime", log_level=config.log_level, log_file=log_file)

    system_info = get_system_info()
    logger.info(
        "quadbench bootstrap complete",
        extra={
            "project": config.project_name,
            "python_version": system_info.python_version,
            "implementation": system_info.implementation,
            "platform": system_info.platform,
            "architecture": system_info.architecture,
            "cpu_count": system_info.cpu_count,
        },
    )
    return logger
