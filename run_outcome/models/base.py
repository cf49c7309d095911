"""Base model configuration for outcome value types."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable, hashable value model.

    Unknown keys are rejected, so a misspelled config key is a validation error.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
