from pydantic import BaseModel, field_validator


class TokenPayload(BaseModel):
    sub: str  # "sub" is the standard claim for subject (user ID)
    exp: int  # Standard claim for expiration time

    model_config = {"from_attributes": True}

    @field_validator("sub")
    @classmethod
    def sub_must_be_numeric(cls, value: str) -> str:
        if not value.isdigit():
            raise ValueError("sub must be a numeric user id")
        return value

    @property
    def user_id(self) -> int:
        return int(self.sub)
