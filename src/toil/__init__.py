# SPDX-License-Identifier: MIT

from toil.cleanup import register_cleanup
from toil.initialize import initialize
from toil.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
