"""WriteRequest / WriteRequestBuilder tests."""

import pytest
from pydantic import ValidationError

from credhub.core.errors import InvalidRequestError
from credhub.support.builders import (
    JsonCredentialRequestBuilder,
    PasswordCredentialRequestBuilder,
    ValueCredentialRequestBuilder,
)
from credhub.support.credential_name import CredentialName, SimpleCredentialName
from credhub.support.value_type import ValueType
from credhub.support.write_request import WriteRequest


def test_build_value_request_without_permissions(value_builder):
    req = value_builder.overwrite(False).build()
    assert isinstance(req, WriteRequest)
    assert req.name == "secret1"
    assert req.type == "value"
    assert req.value == "hunter2"
    assert req.overwrite is False
    assert req.additional_permissions == ()


def test_accessors_round_trip(p1, p2):
    name = SimpleCredentialName.of("team", "db")
    req = (
        ValueCredentialRequestBuilder()
        .name(name)
        .overwrite(True)
        .value("s3cret")
        .additional_permissions(p1, p2)
        .build()
    )
    assert req.credential_name is name
    assert req.name == "/team/db"
    assert req.overwrite is True
    assert req.value_type is ValueType.VALUE
    assert req.value == "s3cret"
    assert req.additional_permissions == (p1, p2)


def test_overwrite_defaults_to_false(value_builder):
    assert value_builder.build().overwrite is False


def test_name_none_fails_without_changing_state(secret_name, p1):
    builder = ValueCredentialRequestBuilder().name(secret_name).value("v").additional_permission(p1)
    with pytest.raises(InvalidRequestError, match="name must not be None"):
        builder.name(None)
    req = builder.build()
    assert req.name == "secret1"
    assert req.additional_permissions == (p1,)


def test_name_error_is_a_value_error():
    with pytest.raises(ValueError):
        ValueCredentialRequestBuilder().name(None)


def test_name_rejects_plain_string():
    with pytest.raises(InvalidRequestError):
        ValueCredentialRequestBuilder().name("secret1")


def test_build_requires_name_and_value(secret_name):
    with pytest.raises(InvalidRequestError, match="name must be set"):
        ValueCredentialRequestBuilder().value("v").build()
    with pytest.raises(InvalidRequestError, match="value must be set"):
        ValueCredentialRequestBuilder().name(secret_name).build()


def test_permissions_are_allocated_lazily(value_builder, p1):
    assert value_builder._additional_permissions is None
    value_builder.build()
    assert value_builder._additional_permissions is None
    value_builder.additional_permission(p1)
    assert value_builder._additional_permissions == [p1]


def test_zero_one_many_permissions(value_builder, p1, p2, p3):
    assert value_builder.build().additional_permissions == ()

    one = value_builder.additional_permission(p1).build()
    assert one.additional_permissions == (p1,)

    many = value_builder.additional_permissions([p2, p3]).build()
    assert many.additional_permissions == (p1, p2, p3)
    assert isinstance(many.additional_permissions, tuple)


def test_permission_order_across_calls(value_builder, p1, p2, p3):
    req = (
        value_builder.additional_permission(p1)
        .additional_permission(p2)
        .additional_permissions([p3])
        .build()
    )
    assert req.additional_permissions == (p1, p2, p3)


def test_duplicate_permissions_are_kept(value_builder, p1):
    req = value_builder.additional_permissions(p1, [p1]).build()
    assert req.additional_permissions == (p1, p1)


def test_builder_reuse_does_not_touch_built_requests(value_builder, p1, p2, p3):
    first = value_builder.additional_permission(p1).build()
    second = value_builder.additional_permissions(p2, p3).build()
    value_builder.additional_permission(p1)

    assert first.additional_permissions == (p1,)
    assert second.additional_permissions == (p1, p2, p3)
    assert value_builder.build().additional_permissions == (p1, p2, p3, p1)


def test_invalid_permission_is_rejected_atomically(value_builder, p1):
    with pytest.raises(InvalidRequestError):
        value_builder.additional_permissions([p1, "read"])
    assert value_builder.build().additional_permissions == ()
    with pytest.raises(InvalidRequestError):
        value_builder.additional_permission(None)


def test_request_is_immutable(value_builder):
    req = value_builder.build()
    with pytest.raises(ValidationError):
        req.overwrite = True


def test_equal_inputs_give_equal_requests(secret_name, p1):
    def make():
        return (
            ValueCredentialRequestBuilder()
            .name(secret_name)
            .value("hunter2")
            .additional_permission(p1)
            .build()
        )

    a, b = make(), make()
    assert a == b
    assert hash(a) == hash(b)


def test_any_field_change_breaks_equality(secret_name, p1):
    base = ValueCredentialRequestBuilder().name(secret_name).value("hunter2").build()

    variants = [
        ValueCredentialRequestBuilder().name(CredentialName(name="other")).value("hunter2").build(),
        ValueCredentialRequestBuilder().name(secret_name).value("hunter2").overwrite(True).build(),
        ValueCredentialRequestBuilder().name(secret_name).value("other").build(),
        PasswordCredentialRequestBuilder().name(secret_name).value("hunter2").build(),
        ValueCredentialRequestBuilder().name(secret_name).value("hunter2").additional_permission(p1).build(),
    ]
    for other in variants:
        assert base != other


def test_hash_follows_field_order(secret_name):
    req = ValueCredentialRequestBuilder().name(secret_name).value("v").overwrite(True).build()
    expected = 1
    for part in (secret_name, ValueType.VALUE, "v", ()):
        expected = 31 * expected + hash(part)
    assert req.__hash__() == expected


def test_json_request_is_hashable_and_shares_value(secret_name):
    data = {"host": "db", "ports": [5432]}
    req = JsonCredentialRequestBuilder().name(secret_name).value(data).build()
    same = JsonCredentialRequestBuilder().name(secret_name).value({"ports": [5432], "host": "db"}).build()
    assert req == same
    assert hash(req) == hash(same)

    # the value is not copied on build
    data["host"] = "replica"
    assert req.value["host"] == "replica"


def test_repr_lists_fields_in_order(value_builder):
    text = repr(value_builder.build())
    fields = ["overwrite=", "credential_name=", "value_type=", "value=", "additional_permissions="]
    positions = [text.index(f) for f in fields]
    assert positions == sorted(positions)


@pytest.mark.parametrize("bad", [None, 42, "read"])
def test_permissions_reject_non_iterable_argument(value_builder, bad):
    with pytest.raises(InvalidRequestError):
        value_builder.additional_permissions(bad)
    assert value_builder._additional_permissions is None


def test_requests_equal_across_name_schemes():
    plain = ValueCredentialRequestBuilder().name(CredentialName(name="/a")).value("v").build()
    simple = ValueCredentialRequestBuilder().name(SimpleCredentialName.of("a")).value("v").build()
    assert plain == simple
    assert hash(plain) == hash(simple)
