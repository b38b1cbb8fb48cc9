# SPDX-License-Identifier: MIT

from trackmytime.cleanup import register_cleanup
from trackmytime.initialize import initialize
from trackmytime.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
