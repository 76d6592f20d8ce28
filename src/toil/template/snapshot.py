# SPDX-License-Identifier: MIT

from toil.model.snapshot import Snapshot


def get_snapshot_template() -> Snapshot:
    return {"entries": [], "projects": [], "tags": []}
