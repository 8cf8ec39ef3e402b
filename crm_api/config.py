"""Configuration loading.

The service reads its settings from a JSON file (``config.json`` by
default) with the following shape::

    {
        "db": {"host": "...", "port": 5432, "dbname": "...",
               "user": "...", "password": "..."},
        "server": {"host": "0.0.0.0", "port": 8080}
    }

The ``server`` section is optional. Parsing and type checks are done
with Marshmallow schemas so that a malformed file is rejected at
startup rather than when the first request reaches the database.
"""
from __future__ import annotations

import json
import os
from typing import NamedTuple

from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_load
from sqlalchemy.engine import URL

from .errors import ConfigError

DEFAULT_CONFIG_PATH = "config.json"


class DbConfig(NamedTuple):
    host: str
    port: int
    dbname: str
    user: str
    password: str


class ServerConfig(NamedTuple):
    host: str = "0.0.0.0"
    port: int = 8080


class Config(NamedTuple):
    db: DbConfig
    server: ServerConfig = ServerConfig()

    @property
    def database_uri(self) -> str:
        """Return the SQLAlchemy URL for the configured PostgreSQL database."""
        url = URL.create(
            "postgresql+psycopg2",
            username=self.db.user,
            password=self.db.password,
            host=self.db.host,
            port=self.db.port,
            database=self.db.dbname,
        )
        return url.render_as_string(hide_password=False)


class PortField(fields.Integer):
    """Strict integer that also refuses JSON booleans."""

    def __init__(self, **kwargs) -> None:
        super().__init__(strict=True, **kwargs)

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, bool):
            raise self.make_error("invalid")
        return super()._deserialize(value, attr, data, **kwargs)


class DbConfigSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    host = fields.String(required=True)
    port = PortField(required=True)
    dbname = fields.String(required=True)
    user = fields.String(required=True)
    password = fields.String(required=True)

    @post_load
    def make_config(self, data: dict, **kwargs) -> DbConfig:
        return DbConfig(**data)


class ServerConfigSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    host = fields.String(load_default="0.0.0.0")
    port = PortField(load_default=8080)

    @post_load
    def make_config(self, data: dict, **kwargs) -> ServerConfig:
        return ServerConfig(**data)


class ConfigSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    db = fields.Nested(DbConfigSchema, required=True)
    server = fields.Nested(ServerConfigSchema, load_default=lambda: ServerConfig())

    @post_load
    def make_config(self, data: dict, **kwargs) -> Config:
        return Config(**data)


def load_config(path: str | os.PathLike) -> Config:
    """Read and validate the JSON configuration file at ``path``.

    Raises
    ------
    ConfigError
        If the file is missing or unreadable, is not valid JSON, or does
        not contain the expected ``db`` settings.
    """
    try:
        with open(path, encoding="utf-8") as fh:
            raw = json.load(fh)
    except FileNotFoundError as exc:
        raise ConfigError(f"Configuration file not found: {path}") from exc
    except OSError as exc:
        raise ConfigError(f"Could not read configuration file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Configuration file {path} is not valid JSON: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Configuration file {path} is not UTF-8 text: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Configuration file {path} must contain a JSON object.")
    try:
        return ConfigSchema().load(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {path}: {exc.messages}") from exc


def config_path_from_env() -> str:
    """Return the config file path, honouring the ``CRM_CONFIG`` variable."""
    return os.environ.get("CRM_CONFIG", DEFAULT_CONFIG_PATH)
