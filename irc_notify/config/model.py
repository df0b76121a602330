from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

# Anything that would split or corrupt an IRC command line.
_UNSAFE_TOKEN = re.compile(r"[\s\x00-\x1f\x7f]")
_UNSAFE_PASSWORD = re.compile(r"[\r\n\x00]")


class DeliveryMode(str, Enum):
    DIRECT = "direct"
    CHANNEL = "channel"


class ConnectionTarget(BaseModel):
    """Resolved IRC endpoint, identity and recipient for a single run.

    Attributes:
        secure: Whether the transport must be TLS.
        insecure_tls: Skip certificate verification (only used when secure).
        user: Nick and user name used for registration.
        password: Optional server password sent with PASS.
        host: Server host name or address.
        port: Server port.
        delivery_mode: Private message to a nick or message to a channel.
        recipient_name: Raw recipient without any channel prefix.
    """

    model_config = ConfigDict(frozen=True)

    secure: bool = False
    insecure_tls: bool = False
    user: str
    password: SecretStr | None = None
    host: str = Field(min_length=1)
    port: int = Field(ge=1, le=65535)
    delivery_mode: DeliveryMode
    recipient_name: str = Field(min_length=1)

    @field_validator("user")
    @classmethod
    def validate_user(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("user must not be empty")
        if _UNSAFE_TOKEN.search(v):
            raise ValueError("user must not contain whitespace or control characters")
        return v

    @field_validator("host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("host must not be empty")
        return v

    @field_validator("recipient_name")
    @classmethod
    def validate_recipient(cls, v: str) -> str:
        if "/" in v or _UNSAFE_TOKEN.search(v):
            raise ValueError(
                "recipient must not contain slashes, whitespace or control characters"
            )
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: SecretStr | None) -> SecretStr | None:
        if v is not None and _UNSAFE_PASSWORD.search(v.get_secret_value()):
            raise ValueError("password must not contain line breaks or NUL")
        return v

    @property
    def recipient(self) -> str:
        """Recipient as written on the wire (channels get a ``#`` prefix)."""
        if self.delivery_mode is DeliveryMode.CHANNEL:
            return f"#{self.recipient_name}"
        return self.recipient_name

    @property
    def password_value(self) -> str:
        return self.password.get_secret_value() if self.password else ""

    @property
    def address(self) -> str:
        if ":" in self.host:
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"
