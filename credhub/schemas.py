from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class UserCredential(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: Optional[str] = None
    password: str = Field(min_length=1)


class CertificateCredential(BaseModel):
    """PEM-encoded certificate material.

    A CA-only credential carries just ``ca``; a leaf certificate usually
    carries ``certificate`` and ``private_key`` plus either the CA PEM or
    the name of a CA credential already stored in CredHub.
    """
    model_config = ConfigDict(frozen=True)

    certificate: Optional[str] = None
    ca: Optional[str] = None
    private_key: Optional[str] = None
    ca_name: Optional[str] = None

    @model_validator(mode="after")
    def require_certificate_or_ca(self) -> "CertificateCredential":
        if not self.certificate and not self.ca:
            raise ValueError("one of certificate or ca must be provided")
        return self


class KeyPairCredential(BaseModel):
    model_config = ConfigDict(frozen=True)

    public_key: Optional[str] = None
    private_key: Optional[str] = None

    @model_validator(mode="after")
    def require_a_key(self) -> "KeyPairCredential":
        if not self.public_key and not self.private_key:
            raise ValueError("one of public_key or private_key must be provided")
        return self


class RsaCredential(KeyPairCredential):
    pass


class SshCredential(KeyPairCredential):
    pass
