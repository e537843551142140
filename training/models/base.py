from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DomainModel(BaseModel):
    """Immutable model with snake_case attributes and camelCase wire names.

    Both spellings are accepted on input; keys that do not belong to the model
    are dropped.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump to the JSON shape the training API expects."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
