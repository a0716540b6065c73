"""Settings, command line and id generation."""
import pytest

from catalog_service.__main__ import parse_args
from catalog_service.config import Settings
from catalog_service.core.utils import IDGenerator, LengthIDGenerator, make_id_generator


def test_settings_defaults():
    settings = Settings(_env_file=None)
    assert settings.port == 4000
    assert settings.graphql_path == "/graphql"
    assert settings.id_policy == "monotonic"
    assert settings.graphiql is True
    assert settings.introspection is True


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("CATALOG_PORT", "5000")
    monkeypatch.setenv("CATALOG_ID_POLICY", "length")
    monkeypatch.setenv("CATALOG_ENV", "production")
    settings = Settings(_env_file=None)
    assert settings.port == 5000
    assert settings.id_policy == "length"
    assert settings.is_development is False


def test_parse_args_overrides():
    args = parse_args(["--port", "8080", "--host", "127.0.0.1", "--reload"])
    assert args.port == 8080
    assert args.host == "127.0.0.1"
    assert args.reload is True


def test_id_generator_is_monotonic():
    gen = IDGenerator()
    assert [gen.next_id() for _ in range(3)] == ["1", "2", "3"]
    gen.advance_past("10")
    assert gen.next_id() == "11"
    gen.advance_past("2")
    assert gen.next_id() == "12"
    gen.reset()
    assert gen.next_id() == "1"


def test_length_generator_follows_size():
    items = ["a", "b"]
    gen = LengthIDGenerator(lambda: len(items))
    assert gen.next_id() == "3"
    items.pop()
    assert gen.next_id() == "2"


def test_unknown_policy():
    with pytest.raises(ValueError):
        make_id_generator("random", lambda: 0)
