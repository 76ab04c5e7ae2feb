from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict

from credhub.core.errors import InvalidRequestError
from credhub.schemas import CertificateCredential, RsaCredential, SshCredential, UserCredential
from credhub.support.value_type import ValueType
from credhub.support.write_request import WriteRequestBuilder


def _require(value: Any, expected: type | tuple, what: str) -> None:
    if value is None:
        raise InvalidRequestError(f"{what} credential must not be None")
    if not isinstance(value, expected):
        raise InvalidRequestError(f"{what} credential has unexpected type {type(value).__name__}")


class ValueCredentialRequestBuilder(WriteRequestBuilder[str]):
    """Arbitrary string credential."""

    def value(self, value: str) -> "ValueCredentialRequestBuilder":
        _require(value, str, "value")
        self._set_value(value, ValueType.VALUE)
        return self


class PasswordCredentialRequestBuilder(WriteRequestBuilder[str]):

    def value(self, value: str) -> "PasswordCredentialRequestBuilder":
        _require(value, str, "password")
        if not value:
            raise InvalidRequestError("password value must not be empty")
        self._set_value(value, ValueType.PASSWORD)
        return self


class JsonCredentialRequestBuilder(WriteRequestBuilder[Dict[str, Any]]):
    """JSON object credential; the mapping is stored as given, not copied."""

    def value(self, value: Dict[str, Any]) -> "JsonCredentialRequestBuilder":
        _require(value, Mapping, "json")
        self._set_value(value, ValueType.JSON)
        return self


class UserCredentialRequestBuilder(WriteRequestBuilder[UserCredential]):

    def value(self, value: UserCredential) -> "UserCredentialRequestBuilder":
        _require(value, UserCredential, "user")
        self._set_value(value, ValueType.USER)
        return self


class CertificateCredentialRequestBuilder(WriteRequestBuilder[CertificateCredential]):

    def value(self, value: CertificateCredential) -> "CertificateCredentialRequestBuilder":
        _require(value, CertificateCredential, "certificate")
        self._set_value(value, ValueType.CERTIFICATE)
        return self


class RsaCredentialRequestBuilder(WriteRequestBuilder[RsaCredential]):

    def value(self, value: RsaCredential) -> "RsaCredentialRequestBuilder":
        _require(value, RsaCredential, "rsa")
        self._set_value(value, ValueType.RSA)
        return self


class SshCredentialRequestBuilder(WriteRequestBuilder[SshCredential]):

    def value(self, value: SshCredential) -> "SshCredentialRequestBuilder":
        _require(value, SshCredential, "ssh")
        self._set_value(value, ValueType.SSH)
        return self
