from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base for every configuration model; unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid", frozen=True)
