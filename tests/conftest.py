import pytest

from credhub.support.builders import ValueCredentialRequestBuilder
from credhub.support.credential_name import CredentialName
from credhub.support.permissions import Actor, AdditionalPermission, Operation


@pytest.fixture
def secret_name() -> CredentialName:
    return CredentialName(name="secret1")


@pytest.fixture
def p1() -> AdditionalPermission:
    return AdditionalPermission(actor=Actor.app("app-1"), operations=(Operation.READ,))


@pytest.fixture
def p2() -> AdditionalPermission:
    return AdditionalPermission(
        actor=Actor.user("alice", zone_id="uaa"),
        operations=(Operation.READ, Operation.WRITE),
    )


@pytest.fixture
def p3() -> AdditionalPermission:
    return AdditionalPermission(actor=Actor.client("ci"), operations=(Operation.DELETE,))


@pytest.fixture
def value_builder(secret_name) -> ValueCredentialRequestBuilder:
    return ValueCredentialRequestBuilder().name(secret_name).value("hunter2")
