"""Pydantic schemas for Account registration and login.

The wire format keeps the camelCase keys the campus web client sends
(``usernameOrEmail``, ``userId``, ``phoneNumber``), mapped onto snake_case
attributes through an alias generator. Request fields are all optional so
that presence is checked by the services and reported as a 400 with the
registry's own messages. Student numbers may arrive as JSON numbers and are
read as strings.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, coerce_numbers_to_str=True
    )


class LoginRequest(CamelModel):
    username_or_email: Optional[str] = None
    password: Optional[str] = None


class RegisterRequest(CamelModel):
    user_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    password: Optional[str] = None


class LoginResponse(CamelModel):
    message: str = "Login successful!"
    user_id: str
    role: str
    name: str
    email: str
