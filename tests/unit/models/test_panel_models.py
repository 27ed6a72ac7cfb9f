"""
Unit tests for panel records and payload models.
"""

from datetime import datetime

import pytest
from pydantic import ValidationError as PydanticValidationError

from pterolink.exceptions import ValidationError
from pterolink.models import (
    CreateServerData,
    EggAttributes,
    NodeAttributes,
    Pagination,
    ServerAttributes,
    UpdateUserData,
    UserAttributes,
    attribute_value,
    extract_attributes,
    extract_items,
    extract_pagination,
    to_payload,
)


class TestUserAttributes:
    def test_two_factor_alias(self):
        user = UserAttributes.model_validate({"id": 1, "2fa": True})

        assert user.two_factor is True
        assert user.model_dump(by_alias=True)["2fa"] is True

    def test_populate_by_name(self):
        assert UserAttributes(id=1, two_factor=True).two_factor is True

    def test_timestamps_parsed(self):
        user = UserAttributes.model_validate({"id": 1, "created_at": "2024-01-01T10:00:00+00:00"})

        assert isinstance(user.created_at, datetime)

    def test_extra_fields_kept(self):
        user = UserAttributes.model_validate({"id": 1, "avatar": "x.png"})

        assert user.model_extra == {"avatar": "x.png"}

    def test_frozen(self):
        user = UserAttributes(id=1)

        with pytest.raises(PydanticValidationError):
            user.email = "x"  # type: ignore[misc]


class TestServerAttributes:
    def test_nested_models(self):
        server = ServerAttributes.model_validate(
            {"id": 1, "limits": {"memory": 512, "threads": "0-1"}, "container": {"image": "img"}}
        )

        assert server.limits.memory == 512
        assert server.limits.threads == "0-1"
        assert server.container.image == "img"
        assert server.feature_limits.databases == 0


class TestAttributeValue:
    def test_by_name_alias_and_extra(self):
        user = UserAttributes.model_validate({"id": 1, "2fa": True, "avatar": "a"})

        assert attribute_value(user, "two_factor") is True
        assert attribute_value(user, "2fa") is True
        assert attribute_value(user, "avatar") == "a"

    def test_dotted_path(self):
        node = NodeAttributes.model_validate({"id": 1, "allocated_resources": {"memory": 10}})
        egg = EggAttributes.model_validate({"id": 1, "config": {"stop": "^C"}})

        assert attribute_value(node, "allocated_resources.memory") == 10
        assert attribute_value(egg, "config.stop") == "^C"

    def test_unknown_field(self):
        with pytest.raises(ValidationError) as exc_info:
            attribute_value(UserAttributes(id=1), "missing")

        assert exc_info.value.errors[0]["detail"] == "missing: unknown field"


class TestPayloads:
    def test_to_payload_drops_none_and_uses_alias(self):
        data = UpdateUserData(email="a@example.com")

        assert to_payload(data) == {"email": "a@example.com"}

    def test_mapping_passes_through(self):
        assert to_payload({"name": "x", "external_id": None}) == {"name": "x", "external_id": None}

    def test_create_server_payload(self):
        data = CreateServerData(
            name="s",
            user=1,
            egg=2,
            docker_image="img",
            startup="./run",
            limits={"memory": 1},
            feature_limits={"databases": 0},
            allocation={"default": 3},
        )

        payload = data.to_payload()
        assert payload["allocation"] == {"default": 3}
        assert "deploy" not in payload


class TestResponseShapes:
    def test_extract_attributes(self):
        assert extract_attributes({"object": "user", "attributes": {"id": 1}}) == {"id": 1}

    def test_extract_attributes_rejects_bad_shape(self):
        with pytest.raises(ValidationError, match="Unexpected response shape"):
            extract_attributes({"data": []})

    def test_extract_items_and_pagination(self):
        body = {
            "data": [{"attributes": {"id": 1}}, {"attributes": {"id": 2}}],
            "meta": {"pagination": {"total": 2, "current_page": 1, "total_pages": 3}},
        }

        assert extract_items(body) == [{"id": 1}, {"id": 2}]
        pagination = extract_pagination(body)
        assert isinstance(pagination, Pagination)
        assert pagination.has_next is True

    def test_missing_pagination(self):
        assert extract_pagination({"data": []}) is None
        assert extract_items(None) == []
