# SPDX-License-Identifier: MIT

from toil.color import DEFAULT_TAG_COLOR
from toil.model.tag import Tag


def get_tag_template() -> Tag:
    return {
        "id": None,
        "name": "",
        "color": DEFAULT_TAG_COLOR,
    }
