# SPDX-License-Identifier: MIT

from toil.repository.snapshot import SNAPSHOT_REPO


def complete_project(incomplete: str) -> list[str]:
    """Return list of available project names for shell completion."""
    projects = SNAPSHOT_REPO.get_snapshot()["projects"]
    return sorted(
        project["name"]
        for project in projects
        if project["name"].startswith(incomplete)
    )


def complete_tag(incomplete: str) -> list[str]:
    """Return list of available tag names for shell completion."""
    tags = SNAPSHOT_REPO.get_snapshot()["tags"]
    return sorted(tag["name"] for tag in tags if tag["name"].startswith(incomplete))
