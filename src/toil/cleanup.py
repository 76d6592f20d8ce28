# SPDX-License-Identifier: MIT

import atexit

from toil.repository.configuration import CONFIGURATION_REPO
from toil.repository.snapshot import SNAPSHOT_REPO


def flush() -> None:
    CONFIGURATION_REPO.flush()
    SNAPSHOT_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush)
