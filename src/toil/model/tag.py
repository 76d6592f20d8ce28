# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

from toil.model.entity_id import EntityId


class Tag(TypedDict):
    id: Optional[EntityId]
    name: str
    color: str
