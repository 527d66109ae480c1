# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
quadbench benchmark package.

Subsystems:
  - models: RunResult and the execution modes
  - accumulator: the lock-guarded total shared by parallel workers
  - driver: one timed pass over n equations
  - sweep: the geometric series of passes
  - validation: parallel vs sequential checksum bounds
  - reporting: stdout lines and on-disk reports
"""
