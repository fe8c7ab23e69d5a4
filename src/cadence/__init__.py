# SPDX-License-Identifier: MIT

from cadence.cleanup import register_cleanup
from cadence.terminal.app import run


def main() -> None:
    register_cleanup()
    run()
