"""
Shared base class for API schemas.

Python code uses snake_case attribute names while the JSON surface uses
camelCase (``postId``, ``isCompleted``, ``createdAt``).  Both spellings
are accepted on input.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def changes_from(update: BaseModel) -> Dict[str, Any]:
    """Return the fields a client actually sent in an update payload.

    Only explicitly provided, non-null values are returned so that
    omitted fields keep their current value.
    """
    return update.model_dump(exclude_unset=True, exclude_none=True)
