from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from credhub.core.errors import InvalidRequestError


class Operation(Enum):
    READ = "read"
    WRITE = "write"
    DELETE = "delete"
    READ_ACL = "read_acl"
    WRITE_ACL = "write_acl"


class ActorType(Enum):
    APP = "mtls-app"
    USER = "uaa-user"
    CLIENT = "uaa-client"


class Actor(BaseModel):
    """An identity that can be granted access to a credential."""

    model_config = ConfigDict(frozen=True)

    type: ActorType
    id: str = Field(min_length=1)

    @property
    def identity(self) -> str:
        return f"{self.type.value}:{self.id}"

    @classmethod
    def app(cls, app_guid: str) -> "Actor":
        return cls(type=ActorType.APP, id=app_guid)

    @classmethod
    def user(cls, user_id: str, zone_id: Optional[str] = None) -> "Actor":
        identity = f"{zone_id}/{user_id}" if zone_id else user_id
        return cls(type=ActorType.USER, id=identity)

    @classmethod
    def client(cls, client_id: str) -> "Actor":
        return cls(type=ActorType.CLIENT, id=client_id)

    def __str__(self) -> str:
        return self.identity


class AdditionalPermission(BaseModel):
    """Access granted to another actor when a credential is written.

    Serialised the way the data API expects it::

        {"actor": "mtls-app:<guid>", "operations": ["read", "write"]}
    """

    model_config = ConfigDict(frozen=True)

    actor: Actor
    operations: Tuple[Operation, ...] = Field(min_length=1)

    @field_serializer("actor")
    def serialize_actor(self, actor: Actor) -> str:
        return actor.identity

    @field_serializer("operations")
    def serialize_operations(self, operations: Tuple[Operation, ...]) -> List[str]:
        return [op.value for op in operations]

    @classmethod
    def builder(cls) -> "AdditionalPermissionBuilder":
        return AdditionalPermissionBuilder()


class AdditionalPermissionBuilder:

    def __init__(self) -> None:
        self._actor: Optional[Actor] = None
        self._operations: List[Operation] = []

    def app(self, app_guid: str) -> "AdditionalPermissionBuilder":
        self._actor = Actor.app(app_guid)
        return self

    def user(self, user_id: str, zone_id: Optional[str] = None) -> "AdditionalPermissionBuilder":
        self._actor = Actor.user(user_id, zone_id)
        return self

    def client(self, client_id: str) -> "AdditionalPermissionBuilder":
        self._actor = Actor.client(client_id)
        return self

    def operation(self, operation: Operation) -> "AdditionalPermissionBuilder":
        if not isinstance(operation, Operation):
            raise InvalidRequestError(f"unknown operation: {operation!r}")
        self._operations.append(operation)
        return self

    def operations(self, *operations: Operation) -> "AdditionalPermissionBuilder":
        for op in operations:
            self.operation(op)
        return self

    def build(self) -> AdditionalPermission:
        if self._actor is None:
            raise InvalidRequestError("an actor (app, user or client) must be set")
        if not self._operations:
            raise InvalidRequestError("at least one operation must be granted")
        return AdditionalPermission(actor=self._actor, operations=tuple(self._operations))
