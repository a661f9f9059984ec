from typing import Optional

from pydantic import BaseModel, EmailStr, Field, model_validator


class UserCreate(BaseModel):
    email: EmailStr
    username: str = Field(min_length=3, max_length=100)
    password: str = Field(min_length=8, max_length=72)
    confirm_password: str
    full_name: str | None = None
    study_program: Optional[str] = None

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


class UserRead(BaseModel):
    id: int
    email: EmailStr
    username: str
    full_name: str | None = None
    role: str
    study_program: str | None = None

    class Config:
        from_attributes = True
