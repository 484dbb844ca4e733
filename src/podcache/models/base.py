"""Base model shared by all podcache models.

Example:
    >>> from podcache.models.base import PodcacheModel
    >>> PodcacheModel.model_config["validate_assignment"]
    True
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PodcacheModel(BaseModel):
    """Base model with standard configuration.

    Wire names are camelCase; Python attributes are snake_case and either
    form is accepted on input.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        str_strip_whitespace=True,
        validate_assignment=True,
        # Wire records carry server-side fields the client does not model.
        extra="ignore",
    )
