# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
quadbench: what does it cost to signal errors, or results, through exceptions?

Solves a deterministic sweep of quadratic equations under three calling
conventions and times each pass, sequentially or on a thread pool.
"""

__version__ = "0.1.0"
