# SPDX-License-Identifier: MIT

from toil.color import DEFAULT_PROJECT_COLOR
from toil.model.project import Project


def get_project_template() -> Project:
    return {
        "id": None,
        "name": "",
        "color": DEFAULT_PROJECT_COLOR,
        "is_archived": False,
    }
