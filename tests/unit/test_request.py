"""Unit tests for decoding and building create requests."""

import json

import pytest
from pydantic import ValidationError

from instance_docker.core.errors import InvalidInputError, MissingInputError
from instance_docker.core.models import CreateInstanceRequest
from instance_docker.core.request import (
    decode_request,
    example_request,
    validate_properties,
    with_labels,
    with_logical_address,
)


class TestDecodeRequest:

    def test_decode_from_json_text(self, properties):
        request = decode_request(json.dumps(properties))

        assert request.tags == {"tier": "web", "shared": "request"}
        assert request.config.image == "nginx:alpine"
        assert request.config.env == ["MODE=test"]
        assert request.host_config == {"Memory": 67108864}
        assert request.networking_config is None
        assert request.network_name == ""

    def test_decode_from_bytes_and_dict_agree(self, properties):
        from_bytes = decode_request(json.dumps(properties).encode())
        from_dict = decode_request(properties)

        assert from_bytes == from_dict

    def test_unknown_docker_config_fields_are_kept(self):
        request = decode_request({"Config": {"Image": "busybox", "Cmd": ["sleep", "60"]}})

        assert request.config.to_wire() == {"Image": "busybox", "Cmd": ["sleep", "60"]}

    def test_malformed_json_is_invalid_input(self):
        with pytest.raises(InvalidInputError) as exc_info:
            decode_request('{"Config": {"Image": ')

        assert "invalid input formatting" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_wrong_shape_is_invalid_input(self):
        with pytest.raises(InvalidInputError):
            decode_request({"Config": "nginx"})

        with pytest.raises(InvalidInputError):
            decode_request(["not", "an", "object"])


class TestWithLabels:

    def test_labels_are_replaced(self, properties):
        request = decode_request(properties)

        labelled = with_labels(request, {"a": "1"})

        assert labelled.config.labels == {"a": "1"}
        assert request.config.labels == {"stale": "label"}

    def test_missing_config(self):
        request = decode_request({"Tags": {}})

        with pytest.raises(MissingInputError, match="Config should be set"):
            with_labels(request, {"a": "1"})


class TestWithLogicalAddress:

    def test_creates_default_network_entry(self):
        request = decode_request({"Config": {"Image": "busybox"}})

        pinned = with_logical_address(request, "10.0.0.5")

        assert pinned.network_name == "bridge"
        assert pinned.networking_config.to_wire() == {
            "EndpointsConfig": {"bridge": {"IPAddress": "10.0.0.5"}}
        }
        assert request.networking_config is None

    def test_creates_missing_endpoint_map(self):
        request = decode_request({"Config": {"Image": "busybox"}, "NetworkingConfig": {}})

        pinned = with_logical_address(request, "10.0.0.5")

        assert list(pinned.networking_config.endpoints_config) == ["bridge"]

    def test_named_network_keeps_endpoint_settings_and_siblings(self):
        request = decode_request({
            "Config": {"Image": "busybox"},
            "NetworkName": "frontend",
            "NetworkingConfig": {
                "EndpointsConfig": {
                    "frontend": {"Aliases": ["web"]},
                    "backend": {"IPAddress": "172.20.0.9", "Aliases": ["db"]},
                }
            },
        })

        pinned = with_logical_address(request, "10.0.0.5")

        endpoints = pinned.networking_config.to_wire()["EndpointsConfig"]
        assert endpoints["frontend"] == {"IPAddress": "10.0.0.5", "Aliases": ["web"]}
        assert endpoints["backend"] == {"IPAddress": "172.20.0.9", "Aliases": ["db"]}
        assert pinned.network_name == "frontend"


class TestValidateProperties:

    def test_none_is_accepted(self):
        validate_properties(None)

    def test_example_is_valid(self):
        validate_properties(example_request().to_wire())

    def test_missing_config(self):
        with pytest.raises(MissingInputError):
            validate_properties({"Tags": {"a": "b"}})

    def test_malformed_payload(self):
        with pytest.raises(InvalidInputError):
            validate_properties("{nope")


def test_example_request_shape():
    example = example_request()

    assert isinstance(example, CreateInstanceRequest)
    assert example.to_wire() == {
        "Tags": {"tag1": "value1", "tag2": "value2"},
        "Config": {"Image": "docker/dind", "Env": ["var1=value1", "var2=value2"]},
        "HostConfig": {},
        "NetworkingConfig": {},
        "NetworkName": "",
    }
