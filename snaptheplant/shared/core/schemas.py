# 📄 File: snaptheplant/shared/core/schemas.py
# 🧭 Purpose (Layman Explanation):
# The common base for every piece of JSON the API sends or accepts, so all of it uses the
# same camelCase naming the web app expects.
# 🧪 Purpose (Technical Summary):
# Pydantic base schema with a camelCase alias generator, snake_case input accepted via
# populate_by_name, and ORM/domain-object construction via from_attributes.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# Every presentation/api/schemas module

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Base schema for API bodies (camelCase on the wire)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(APIModel):
    message: str


class SuccessResponse(APIModel):
    success: bool = True
    message: str = ""


def dump(model: BaseModel) -> Dict[str, Any]:
    """Serialize a schema the way FastAPI would for a response."""
    return model.model_dump(mode="json", by_alias=True)
