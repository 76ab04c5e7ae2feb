from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from credhub.core.errors import InvalidRequestError

SEPARATOR = "/"
SERVICE_INSTANCE_PREFIX = "c"


class CredentialName(BaseModel):
    """Fully qualified name of a credential, e.g. ``/team/app/db-password``."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)

    def __str__(self) -> str:
        return self.name

    # names compare by path whichever naming scheme produced them
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CredentialName):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)


class SimpleCredentialName(CredentialName):

    @classmethod
    def of(cls, *segments: str) -> "SimpleCredentialName":
        parts = [s.strip(SEPARATOR) for s in segments if s and s.strip(SEPARATOR)]
        if not parts:
            raise InvalidRequestError("credential name needs at least one non-empty segment")
        return cls(name=SEPARATOR + SEPARATOR.join(parts))


class ServiceInstanceCredentialName(CredentialName):
    """Name of a credential owned by a service broker binding.

    Laid out as ``/c/<broker>/<offering>/<binding id>/<credential>``.
    """

    @classmethod
    def of(
        cls,
        service_broker_name: str,
        service_offering_name: str,
        service_binding_id: str,
        credential_name: str,
    ) -> "ServiceInstanceCredentialName":
        segments = {
            "service_broker_name": service_broker_name,
            "service_offering_name": service_offering_name,
            "service_binding_id": service_binding_id,
            "credential_name": credential_name,
        }
        for field, value in segments.items():
            if not value:
                raise InvalidRequestError(f"{field} must not be empty")
        return cls(name=SEPARATOR + SEPARATOR.join([SERVICE_INSTANCE_PREFIX, *segments.values()]))
