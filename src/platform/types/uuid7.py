"""
UUID7 identifiers for every entity owned by this service.

uuid_utils generates time-ordered UUID7 values (index friendly for PostgreSQL btree).
They are converted to stdlib `uuid.UUID` so SQLAlchemy's `Uuid` type and pydantic
handle them natively.
"""

from uuid import UUID

import uuid_utils


def generate_uuid7() -> UUID:
    return UUID(bytes=uuid_utils.uuid7().bytes)
