# Argtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Argtree command trees.

A command tree can be declared in a YAML or TOML document instead of code:

    name: tool
    help: Demo tool
    commands:
      - name: serve
        help: Start the server
        handler: mypkg.handlers.serve
        fields:
          - {kind: flag, name: daemon, short: d}
          - {kind: option, name: port, type: int, default: 8080, env: APP_PORT}
      - name: db
        commands:
          - name: migrate
            commands:
              - name: up
                fields:
                  - {kind: option, name: steps, type: int, default: 1}

An entry with `commands` is a category, any other entry is a leaf. A document
without top-level `commands` describes a single-command tool whose root is a
leaf. Every failure, from a malformed file to an invalid field declaration or
an unimportable handler, is raised as `ConfigError`.
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable, Mapping

import toml
import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from argtree.command import CommandNode, category, leaf
from argtree.exceptions import ArgtreeError, ConfigError
from argtree.logger import logger
from argtree.spec.argument_spec import ArgumentSpec
from argtree.spec.field import FieldSpec
from argtree.spec.field_kind import FieldKind
from argtree.spec.value_type import ValueType


def import_handler(dotted_path: str) -> Callable[..., Any]:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ConfigError(f"Invalid handler path: '{dotted_path}'")
    try:
        module = importlib.import_module(module_path)
    except ImportError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        handler = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ConfigError(f"Module '{module_path}' has no attribute '{attr}'") from error
    if not callable(handler):
        raise ConfigError(f"Handler '{dotted_path}' is not callable")
    return handler


class RawField(BaseModel):
    """Raw field model for Argtree configuration."""

    kind: FieldKind
    name: str
    type: str | None = None
    short: str | None = None
    help: str = ""
    default: Any = None
    env: str | None = None
    hidden: bool = False
    required: bool | None = None

    model_config = ConfigDict(extra="forbid")

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> FieldKind:
        if isinstance(value, FieldKind):
            return value
        return FieldKind(value)

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value: Any) -> str | None:
        if value is None:
            return None
        if isinstance(value, ValueType):
            return value.value
        if not isinstance(value, str):
            raise ValueError(f"Field type must be a string, got {value!r}")
        ValueType(value)
        return value.strip().lower()

    @model_validator(mode="after")
    def validate_required(self) -> RawField:
        if self.required is not None and self.kind is not FieldKind.POSITIONAL:
            raise ValueError(
                f"'required' only applies to positional fields, not '{self.name}'; "
                "use kind 'required' instead"
            )
        return self

    @property
    def value_type(self) -> ValueType:
        """The declared type, or bool for flags and string otherwise."""
        if self.type is None:
            return ValueType.BOOL if self.kind is FieldKind.FLAG else ValueType.STRING
        return ValueType(self.type)

    def to_field_spec(self) -> FieldSpec:
        positional_required = False
        if self.kind is FieldKind.POSITIONAL:
            positional_required = (
                self.default is None if self.required is None else self.required
            )
        return FieldSpec(
            name=self.name,
            kind=self.kind,
            value_type=self.value_type if self.type is None else self.type,
            short=self.short,
            help=self.help,
            default=self.default,
            env_var=self.env,
            hidden=self.hidden,
            positional_required=positional_required,
        )


class RawCommand(BaseModel):
    """Raw command model for Argtree configuration."""

    name: str
    help: str = ""
    hidden: bool = False
    handler: str | None = None
    title: str | None = None
    description: str | None = None
    fields: list[RawField] = Field(default_factory=list)
    commands: list[RawCommand] | None = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def validate_shape(self) -> RawCommand:
        if self.commands is not None:
            if self.fields or self.handler:
                raise ValueError(
                    f"Command '{self.name}' has sub-commands and cannot declare "
                    "fields or a handler"
                )
            if not self.commands:
                raise ValueError(f"Command '{self.name}' has an empty commands list")
        return self

    def to_node(self, parent_path: str = "") -> CommandNode:
        path = f"{parent_path} {self.name}".strip()
        if self.commands is not None:
            return category(
                self.name,
                [command.to_node(path) for command in self.commands],
                help=self.help,
                hidden=self.hidden,
            )
        return leaf(
            self.name,
            _build_spec(self.fields, self.title, self.description, path),
            import_handler(self.handler) if self.handler else None,
            help=self.help,
            hidden=self.hidden,
        )


class TreeConfig(BaseModel):
    """Argtree command tree configuration model."""

    name: str = "argtree"
    help: str = ""
    handler: str | None = None
    title: str | None = None
    description: str | None = None
    fields: list[RawField] = Field(default_factory=list)
    commands: list[RawCommand] | None = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def validate_root(self) -> TreeConfig:
        if self.commands is not None and (self.fields or self.handler):
            raise ValueError(
                "A configuration with top-level commands cannot declare top-level "
                "fields or a handler"
            )
        if self.commands is not None and not self.commands:
            raise ValueError("Top-level commands list is empty")
        return self

    def to_tree(self) -> CommandNode:
        if self.commands is not None:
            return category(
                self.name,
                [command.to_node() for command in self.commands],
                help=self.help,
            )
        return leaf(
            self.name,
            _build_spec(self.fields, self.title, self.description, ""),
            import_handler(self.handler) if self.handler else None,
            help=self.help,
        )


def _build_spec(
    fields: list[RawField],
    title: str | None,
    description: str | None,
    path: str,
) -> ArgumentSpec:
    try:
        return ArgumentSpec(
            [raw_field.to_field_spec() for raw_field in fields],
            title=title,
            description=description,
        )
    except ArgtreeError as error:
        raise ConfigError(f"Invalid fields for command '{path}': {error}") from error


def build_tree(raw_config: Mapping[str, Any]) -> CommandNode:
    """
    Build a command tree from an already parsed configuration mapping.

    Raises:
        ConfigError: If the mapping does not describe a valid tree.
    """
    if not isinstance(raw_config, Mapping):
        raise ConfigError(
            "Configuration must be a mapping with a list of commands.\n"
            "Example:\n"
            "commands:\n"
            "  - name: 'serve'\n"
            "    handler: 'my_module.serve'\n"
            "    fields:\n"
            "      - {kind: flag, name: daemon}"
        )
    try:
        tree_config = TreeConfig.model_validate(dict(raw_config))
    except ValidationError as error:
        raise ConfigError(f"Invalid configuration: {error}") from error
    try:
        return tree_config.to_tree()
    except ConfigError:
        raise
    except ArgtreeError as error:
        raise ConfigError(f"Invalid command tree: {error}") from error


def loader(file_path: Path | str) -> CommandNode:
    """
    Load an Argtree command tree from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to a `.yaml`, `.yml` or `.toml` file.

    Returns:
        CommandNode: The root of the assembled tree.

    Raises:
        ConfigError: If the file is missing, unreadable, in an unsupported
            format, or does not describe a valid tree.
    """
    if not isinstance(file_path, (str, Path)):
        raise TypeError("file_path must be a string or Path object.")
    path = Path(file_path)
    if not path.is_file():
        raise ConfigError(f"No such config file: {file_path}")

    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Could not parse {path}: {error}") from error

    logger.debug("Loaded configuration from %s", path)
    return build_tree(raw_config)
