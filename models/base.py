from pydantic import BaseModel, ConfigDict
from typing import Any, TypeVar

ModelT = TypeVar("ModelT", bound="BaseGolfModel")


class BaseGolfModel(BaseModel):
    """Shared configuration for course, player and result records."""
    model_config = ConfigDict(validate_assignment=True)

    def with_updates(self: ModelT, **changes: Any) -> ModelT:
        """Validated copy with some fields replaced. The original is left untouched."""
        return self.model_validate({**self.model_dump(), **changes})
