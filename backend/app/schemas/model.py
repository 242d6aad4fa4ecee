"""Model Schemas: request parsing and explicit response serialization.

Invariants:
    - ModelPayload only parses types; blank-name checks live in core/validate_model.py
    - Unknown body fields (including "id") are ignored
    - model_to_json emits a field only when it has a non-empty value

Design Decisions:
    - Serialization is a plain function over the ORM object, no response_model,
      so omission of empty fields is visible at the call site
"""

from pydantic import BaseModel, ConfigDict

from app.core.repository_protocols import ModelLike


class ModelPayload(BaseModel):
    """Body of POST /models and PATCH /models/{id}."""
    model_config = ConfigDict(extra="ignore")

    name: str | None = None


def model_to_json(model: ModelLike) -> dict:
    body: dict = {}
    if model.id is not None:
        body["id"] = model.id
    if model.name:
        body["name"] = model.name
    return body
