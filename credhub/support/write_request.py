from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_serializer

from credhub.core.errors import InvalidRequestError
from credhub.support.credential_name import CredentialName
from credhub.support.permissions import AdditionalPermission
from credhub.support.value_type import ValueType

T = TypeVar("T")
B = TypeVar("B", bound="WriteRequestBuilder")

_NO_PERMISSIONS: Tuple[AdditionalPermission, ...] = ()
PAYLOAD_KEYS = ("overwrite", "name", "value", "type", "additional_permissions")

logger = logging.getLogger(__name__)


def _hash_value(value: Any) -> int:
    # JSON credentials are plain dicts/lists; hash them by content
    if isinstance(value, Mapping):
        return hash(frozenset((k, _hash_value(v)) for k, v in value.items()))
    if isinstance(value, (list, tuple)):
        return hash(tuple(_hash_value(v) for v in value))
    if isinstance(value, (set, frozenset)):
        return hash(frozenset(_hash_value(v) for v in value))
    return hash(value)


class WriteRequest(BaseModel, Generic[T]):
    """A request to create a credential or update an existing one.

    Instances are produced by a :class:`WriteRequestBuilder` subclass and
    are immutable. ``value`` is stored as passed in, so a mutable value
    (a JSON dict, for example) changed after ``build()`` is visible here.

    ``model_dump()`` yields the data API body: ``overwrite``, ``name``,
    ``value``, ``type`` and, only when non-empty,
    ``additional_permissions``.
    """

    model_config = ConfigDict(frozen=True)

    overwrite: bool = False
    credential_name: CredentialName = Field(exclude=True)
    value_type: ValueType = Field(exclude=True)
    value: T
    additional_permissions: Tuple[AdditionalPermission, ...] = _NO_PERMISSIONS

    @computed_field(repr=False)
    @property
    def name(self) -> str:
        return self.credential_name.name

    @computed_field(repr=False)
    @property
    def type(self) -> str:
        return self.value_type.type()

    @model_serializer(mode="wrap")
    def serialize_request(self, handler) -> Dict[str, Any]:
        data = handler(self)
        ordered = {key: data[key] for key in PAYLOAD_KEYS if key in data}
        if not ordered.get("additional_permissions"):
            ordered.pop("additional_permissions", None)
        return ordered

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready body for ``PUT /api/v1/data``."""
        return self.model_dump(mode="json", exclude_none=True)

    def __hash__(self) -> int:
        result = 1 if self.overwrite else 0
        for part in (self.credential_name, self.value_type, self.value, self.additional_permissions):
            result = 31 * result + _hash_value(part)
        return result


def _freeze_permissions(
    permissions: Optional[List[AdditionalPermission]],
) -> Tuple[AdditionalPermission, ...]:
    count = len(permissions) if permissions else 0
    if count == 0:
        return _NO_PERMISSIONS
    if count == 1:
        return (permissions[0],)
    return tuple(permissions)


class WriteRequestBuilder(ABC, Generic[T]):
    """Fluent builder for :class:`WriteRequest`.

    Subclasses implement :meth:`value`, storing the value together with
    the matching :class:`ValueType` via :meth:`_set_value`, and must
    reject ``None`` or wrongly shaped values before touching any state.

    Every setter returns the builder itself, so chains keep the concrete
    subclass type. A builder can be reused after ``build()``; later calls
    only affect requests built afterwards. Builders are not thread-safe.
    """

    def __init__(self) -> None:
        self._name: Optional[CredentialName] = None
        self._overwrite: bool = False
        self._value: Optional[T] = None
        self._value_type: Optional[ValueType] = None
        self._additional_permissions: Optional[List[AdditionalPermission]] = None

    @abstractmethod
    def value(self: B, value: T) -> B:
        """Set the credential value and its value type."""

    def _set_value(self, value: T, value_type: ValueType) -> None:
        self._value = value
        self._value_type = value_type

    def name(self: B, name: CredentialName) -> B:
        if name is None:
            raise InvalidRequestError("name must not be None")
        if not isinstance(name, CredentialName):
            raise InvalidRequestError(f"name must be a CredentialName, got {type(name).__name__}")
        self._name = name
        return self

    def overwrite(self: B, overwrite: bool) -> B:
        self._overwrite = bool(overwrite)
        return self

    def additional_permission(self: B, permission: AdditionalPermission) -> B:
        _check_permission(permission)
        self._init_permissions().append(permission)
        return self

    def additional_permissions(
        self: B,
        *permissions: Union[AdditionalPermission, Iterable[AdditionalPermission]],
    ) -> B:
        """Append permissions, given one by one or as iterables, in order."""
        collected: List[AdditionalPermission] = []
        for item in permissions:
            if isinstance(item, AdditionalPermission):
                collected.append(item)
                continue
            if isinstance(item, (str, bytes)) or not isinstance(item, Iterable):
                _check_permission(item)
            for permission in item:
                _check_permission(permission)
                collected.append(permission)
        self._init_permissions().extend(collected)
        return self

    def _init_permissions(self) -> List[AdditionalPermission]:
        if self._additional_permissions is None:
            self._additional_permissions = []
        return self._additional_permissions

    def build(self) -> WriteRequest[T]:
        if self._name is None:
            raise InvalidRequestError("name must be set before build()")
        if self._value is None or self._value_type is None:
            raise InvalidRequestError("value must be set before build()")

        request = WriteRequest(
            credential_name=self._name,
            overwrite=self._overwrite,
            value_type=self._value_type,
            value=self._value,
            additional_permissions=_freeze_permissions(self._additional_permissions),
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "built write request: name=%s type=%s overwrite=%s permissions=%d",
                request.name,
                request.type,
                request.overwrite,
                len(request.additional_permissions),
            )
        return request


def _check_permission(permission: Any) -> None:
    if not isinstance(permission, AdditionalPermission):
        raise InvalidRequestError(
            f"expected an AdditionalPermission, got {type(permission).__name__}"
        )
