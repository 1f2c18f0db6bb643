"""
Base model for all Webdock entities

Provides common functionality for data validation, serialization, and API interaction.
"""
from pydantic import BaseModel
from typing import Dict, Any


class WebdockBaseModel(BaseModel):
    """Base model for all Webdock entities with common functionality."""

    model_config = {
        "validate_assignment": True,
        "use_enum_values": True,
        "populate_by_name": True,  # accept both camelCase API keys and field names
        "extra": "ignore"
    }

    def __repr__(self):
        fields = ', '.join(f'{k}={v}' for k, v in self.model_dump(exclude_none=True).items())
        return f"{self.__class__.__name__}({fields})"

    def to_dict(self, exclude_none: bool = True) -> Dict[str, Any]:
        """Convert model to an API payload (camelCase keys), optionally excluding None values."""
        return self.model_dump(exclude_none=exclude_none, by_alias=True)

    @classmethod
    def from_api_data(cls, data: Dict[str, Any]):
        """Create model instance from API response data."""
        if not data:
            raise ValueError(f"Cannot create {cls.__name__} from empty data")
        return cls.model_validate(data)
