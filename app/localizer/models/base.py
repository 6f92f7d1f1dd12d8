"""Base Pydantic model configuration for localizer models."""

from pydantic import BaseModel, ConfigDict


class LocalizerModel(BaseModel):
    """Base model for localizer data carriers.

    Provides standard Pydantic configuration for:
    - Accepting both field name and alias
    - Validation on assignment
    - Creating from objects with attributes
    """

    model_config = ConfigDict(
        use_enum_values=False,  # Keep enums as enum objects, not values
        populate_by_name=True,  # Accept both field name and alias
        validate_assignment=True,  # Validate on assignment
        from_attributes=True,  # Support creating from objects with attributes
    )
