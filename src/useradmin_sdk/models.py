from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class RawUser(BaseModel):
    """User as returned by the collection endpoint.

    The public source only carries a combined ``name``; servers that store the
    split fields send ``firstName``/``lastName`` (and maybe ``department``) too.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int
    name: str = ""
    email: str = ""
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    department: str | None = None


class UserPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    department: str

    def to_request_body(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


class CreatedUser(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int | None = None
    first_name: str | None = Field(default=None, alias="firstName")
    last_name: str | None = Field(default=None, alias="lastName")
    email: str | None = None
    department: str | None = None
