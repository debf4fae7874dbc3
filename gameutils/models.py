import re
from typing import Any, TypeVar

from pydantic import BaseModel as _BaseModel
from pydantic import ConfigDict, Field, field_validator

T = TypeVar("T", bound="BaseModel")

ID_LITERAL = re.compile(r"[+-]?[0-9]+")


class BaseModel(_BaseModel):
    @classmethod
    def from_dict(cls: type[T], obj: dict[str, Any]) -> T:
        return cls.model_validate(obj)


class PlayerAttributes(BaseModel):
    """Attribute record of a single PLAYER element."""

    model_config = ConfigDict(frozen=True)

    id: int | None = Field(None, ge=0)
    first_name: str = Field("", alias="firstName")
    last_name: str = Field("", alias="lastName")
    nick_name: str = Field("", alias="nickName")

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, value: Any) -> Any:
        if isinstance(value, str):
            if not ID_LITERAL.fullmatch(value):
                raise ValueError(f"{value!r} is not an integer literal.")
            return int(value)
        return value
