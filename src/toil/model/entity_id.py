# SPDX-License-Identifier: MIT

import uuid
from typing import TypeAlias

EntityId: TypeAlias = str


def generate_entity_id() -> EntityId:
    return str(uuid.uuid4())


def short_entity_id(id: EntityId) -> str:
    """First block of a uuid, used for display and prefix lookups."""
    return id.split("-")[0]
