from __future__ import annotations

from enum import Enum


class ValueType(Enum):
    """Credential types understood by the CredHub data API."""

    VALUE = "value"
    JSON = "json"
    PASSWORD = "password"
    USER = "user"
    CERTIFICATE = "certificate"
    RSA = "rsa"
    SSH = "ssh"

    def type(self) -> str:
        return self.value
