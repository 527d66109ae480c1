# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

from quadbench.cli.main import main

main()
