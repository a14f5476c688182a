"""Tests for configuration schemas and serialization."""
import json

import pytest
from pydantic import ValidationError


def test_round_trip():
    from logsh.config import dump_configuration, parse_configuration
    from logsh.models import Configuration, ConnectionInfo

    config = Configuration(connections=[
        ConnectionInfo(endpoint="10.0.0.1:9000"),
        ConnectionInfo(endpoint="https://logs.example.com"),
    ])
    assert parse_configuration(dump_configuration(config)) == config


def test_dump_includes_connections():
    from logsh.config import dump_configuration
    from logsh.models import Configuration

    config = Configuration()
    config.upsert_connection("a:1")
    assert json.loads(dump_configuration(config)) == {"connections": [{"endpoint": "a:1"}]}


def test_parse_ignores_unknown_fields():
    from logsh.config import parse_configuration

    config = parse_configuration('{"extra": 1, "connections": [{"endpoint": "a:1", "name": "x"}]}')
    assert config.connections[0].model_dump() == {"endpoint": "a:1"}


def test_parse_invalid_json():
    from logsh.config import ConfigError, parse_configuration

    with pytest.raises(ConfigError):
        parse_configuration("")


def test_empty_endpoint_is_kept():
    from logsh.config import parse_configuration

    config = parse_configuration('{"connections": [{"endpoint": "keep:1"}, {"endpoint": ""}]}')
    assert [c.endpoint for c in config.connections] == ["keep:1", ""]


def test_endpoint_must_be_string():
    from logsh.models import ConnectionInfo

    with pytest.raises(ValidationError):
        ConnectionInfo(endpoint=None)


def test_upsert_does_not_duplicate():
    from logsh.models import Configuration

    config = Configuration()
    assert config.upsert_connection("a:1") is True
    assert config.upsert_connection("b:2") is True
    assert config.upsert_connection(" a:1 ") is False
    assert [c.endpoint for c in config.connections] == ["a:1", "b:2"]


def test_remove_connection():
    from logsh.models import Configuration

    config = Configuration()
    config.upsert_connection("a:1")
    config.upsert_connection("b:2")

    assert config.remove_connection("a:1") is True
    assert config.remove_connection("a:1") is False
    assert [c.endpoint for c in config.connections] == ["b:2"]
    assert config.find_connection("b:2") is not None
