# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from toil.model.entity_id import EntityId


class Project(TypedDict):
    id: Optional[EntityId]
    name: str
    color: str
    is_archived: bool
