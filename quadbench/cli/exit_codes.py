# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Process exit statuses of the quadbench CLI.

Scripts that drive a sweep branch on these, so their values are fixed.
"""

SUCCESS: int = 0
# Bad command-line value, e.g. --workers 0.
USER_ERROR: int = 1
# Config file missing, unreadable, not YAML, or rejected by the schema.
CONFIG_ERROR: int = 2
# The sweep itself blew up.
RUNTIME_ERROR: int = 3
# Sequential and parallel checksums disagreed beyond rounding.
VALIDATION_ERROR: int = 4
