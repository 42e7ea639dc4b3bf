"""Validation of mdlocale configuration mappings against the TypedDict schema."""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
from dataclasses import dataclass
from typing import (
    Any,
    Dict,
    Iterator,
    List,
    Literal,
    Mapping,
    Optional,
    Tuple,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from . import schema as schema_module
from .schema import MdlocaleConfig


@dataclass(frozen=True)
class ValidationError:
    """Represents a single configuration validation failure."""

    path: str
    message: str


# dotted path -> (minimum, maximum); None means unbounded
NUMERIC_RANGES: Dict[str, Tuple[Optional[int], Optional[int]]] = {
    "translation.max_workers": (1, None),
    "quality.max_workers": (1, None),
    "quality.min_score": (0, 100),
}


class ConfigValidator:
    """
    Validate a configuration mapping.

    Structure and types come from the TypedDict schema (required keys,
    unexpected keys, ``Literal`` choices, ``Optional`` values). Numeric
    settings are then checked against ``NUMERIC_RANGES``.
    """

    _ROOT_SCHEMA = MdlocaleConfig

    @classmethod
    def validate(cls, config: Mapping[str, Any]) -> List[ValidationError]:
        """Validate a configuration dictionary and return a list of errors."""
        if not isinstance(config, MappingABC):
            return [ValidationError("<root>", "Expected a mapping for the configuration root")]

        errors = list(cls._check(config, cls._ROOT_SCHEMA, ""))
        failed_paths = {error.path for error in errors}
        errors.extend(
            error for error in cls._check_ranges(config) if error.path not in failed_paths
        )
        return errors

    @classmethod
    def validate_or_raise(cls, config: Mapping[str, Any]) -> None:
        """Validate the configuration and raise ValueError on failure."""
        errors = cls.validate(config)
        if errors:
            details = "\n".join(f"- {err.path}: {err.message}" for err in errors)
            raise ValueError(f"Configuration validation failed:\n{details}")

    # Internal helpers -----------------------------------------------------

    @classmethod
    def _check(cls, value: Any, annotation: Any, path: str) -> Iterator[ValidationError]:
        if _is_typed_dict(annotation):
            yield from cls._check_typed_dict(value, annotation, path)
        elif not _matches(value, annotation):
            yield ValidationError(path, f"Expected {_describe(annotation)}, got {type(value).__name__}")

    @classmethod
    def _check_typed_dict(cls, value: Any, schema: type, path: str) -> Iterator[ValidationError]:
        if not isinstance(value, MappingABC):
            yield ValidationError(path or "<root>", f"Expected mapping compatible with {schema.__name__}")
            return

        fields = get_type_hints(schema, globalns=vars(schema_module))
        for key in sorted(getattr(schema, "__required_keys__", frozenset())):
            if key not in value:
                yield ValidationError(_join(path, key), "Required key is missing")

        for key in sorted(value):
            if key not in fields:
                yield ValidationError(_join(path, key), f"Unexpected key for {schema.__name__}")
            else:
                yield from cls._check(value[key], fields[key], _join(path, key))

    @staticmethod
    def _check_ranges(config: Mapping[str, Any]) -> Iterator[ValidationError]:
        for dotted, (minimum, maximum) in NUMERIC_RANGES.items():
            section, key = dotted.split(".")
            settings = config.get(section)
            value = settings.get(key) if isinstance(settings, MappingABC) else None
            if not isinstance(value, int) or isinstance(value, bool):
                continue
            if minimum is not None and value < minimum:
                yield ValidationError(dotted, f"Must be at least {minimum}, got {value}")
            elif maximum is not None and value > maximum:
                yield ValidationError(dotted, f"Must be at most {maximum}, got {value}")


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _is_typed_dict(annotation: Any) -> bool:
    return (
        isinstance(annotation, type)
        and issubclass(annotation, dict)
        and hasattr(annotation, "__required_keys__")
    )


def _is_union(annotation: Any) -> bool:
    origin = get_origin(annotation)
    # ``X | None`` builds types.UnionType rather than typing.Union
    return origin is Union or getattr(origin, "__name__", "") == "UnionType"


def _matches(value: Any, annotation: Any) -> bool:
    if annotation is Any:
        return True
    if annotation is type(None):
        return value is None
    if get_origin(annotation) is Literal:
        return value in get_args(annotation)
    if _is_union(annotation):
        return any(_matches(value, option) for option in get_args(annotation))
    if annotation in (int, float):
        # bool is an int subclass but never a valid number setting
        accepted = (int, float) if annotation is float else int
        return isinstance(value, accepted) and not isinstance(value, bool)
    if isinstance(annotation, type):
        return isinstance(value, annotation)
    return True


def _describe(annotation: Any) -> str:
    if get_origin(annotation) is Literal:
        return "literal (" + ", ".join(repr(arg) for arg in get_args(annotation)) + ")"
    if _is_union(annotation):
        return "(" + " | ".join(_describe(option) for option in get_args(annotation)) + ")"
    return getattr(annotation, "__name__", str(annotation))
