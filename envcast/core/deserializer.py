"""
Typed deserializer.

Bridges the variable mapping and pydantic: every declared field of the target
record is looked up, its raw string is converted into the shape the field
requires, and the collected data are validated by pydantic. Defaults,
renames and constraints stay with pydantic.
"""

import dataclasses
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar, get_args, get_origin, get_type_hints

from pydantic import AliasChoices, BaseModel, TypeAdapter, ValidationError
from pydantic.errors import PydanticUserError
from pydantic.fields import FieldInfo

from ..exceptions import CustomError, MissingValueError
from .common.base_deserializer import BaseValueDeserializer
from .protocols import VarSource
from .scalars import parse_scalar
from .shapes import OptionalShape, Shape, shape_of

logger = logging.getLogger(__name__)

T = TypeVar("T")

SEQUENCE_SEPARATOR = ","


class EnvValue(BaseValueDeserializer):
    """
    Deserializer for one raw variable value.

    Attributes:
        name: Field name the value is resolved for (used in error messages)
        key: Variable key the value was read from
        raw: The raw string value
    """

    def __init__(self, name: str, key: str, raw: str):
        self.name = name
        self.key = key
        self.raw = raw

    def deserialize_scalar(self, kind: type) -> Any:
        try:
            return parse_scalar(kind, self.raw)
        except ValueError as e:
            raise CustomError(
                f"{e} while parsing field '{self.name}' "
                f"from environment variable {self.key}",
                field=self.name,
            ) from e

    def deserialize_seq(self, inner: Shape) -> list[Any]:
        # No escaping: "" yields [""] and "a,,b" yields ["a", "", "b"]
        return [
            EnvValue(self.name, self.key, part).deserialize(inner)
            for part in self.raw.split(SEQUENCE_SEPARATOR)
        ]

    def deserialize_any(self, annotation: Any) -> Any:
        return self.raw


@dataclass(frozen=True)
class RecordField:
    """A declared record field as the deserializer sees it."""

    name: str
    input_key: str | None
    annotation: Any
    required: bool


class Deserializer:
    """
    Populates a target type from a variable mapping.

    Supported targets are typed records (pydantic models, pydantic or
    standard-library dataclasses, ``TypedDict`` classes) and
    ``dict[str, V]`` mappings; any other type is handed the lowercased
    mapping through ``TypeAdapter``. The first field that cannot be resolved
    aborts the whole call.

    Fields renamed only through an ``AliasPath`` cannot be expressed as a
    flat variable key and fail with ``CustomError``.
    """

    def __init__(self, variables: Mapping[str, str], source: VarSource):
        """
        Initialize the deserializer.

        Args:
            variables: Mapping built by ``source``
            source: The adapter that built the mapping, used for key lookups
        """
        self._variables = variables
        self._source = source
        self._logger = logger.getChild(self.__class__.__name__)

    def deserialize(self, target: type[T]) -> T:
        """
        Deserialize the mapping into ``target``.

        Args:
            target: A typed record class, a ``dict[str, V]`` type, or any
                    other type pydantic can validate a mapping into

        Returns:
            A fully populated instance of ``target``

        Raises:
            MissingValueError: If a required field has no variable and no default
            CustomError: If a value cannot be parsed or fails validation
        """
        self._logger.debug(
            f"Deserializing {_type_name(target)} "
            f"from {len(self._variables)} variables"
        )

        if get_origin(target) in (dict, Mapping):
            return self._deserialize_mapping(target)

        fields = _record_fields(target)
        if fields is not None:
            return self._deserialize_record(target, fields)

        data = {key.lower(): raw for key, raw in self._variables.items()}
        return self._validate(target, data)

    def _deserialize_record(self, target: Any, fields: list[RecordField]) -> Any:
        data: dict[str, Any] = {}

        for field in fields:
            input_key = field.input_key
            if input_key is None:
                raise CustomError(
                    f"field '{field.name}' is renamed through an alias path, "
                    "which has no flat environment variable key",
                    field=field.name,
                )
            env_key = self._source.lookup_key(input_key)
            shape = shape_of(field.annotation)
            raw = self._variables.get(env_key)

            if raw is None:
                if not field.required:
                    self._logger.debug(
                        f"Field '{input_key}' has no variable {env_key}; "
                        "using declared default"
                    )
                    continue
                if isinstance(shape, OptionalShape):
                    data[input_key] = None
                    continue
                self._logger.debug(f"Field '{input_key}' has no variable {env_key}")
                raise MissingValueError(input_key)

            self._logger.debug(f"Resolving field '{input_key}' from {env_key}")
            data[input_key] = EnvValue(input_key, env_key, raw).deserialize(shape)

        return self._validate(target, data)

    def _deserialize_mapping(self, target: Any) -> Any:
        args = get_args(target)
        shape = shape_of(args[1] if len(args) == 2 else str)

        data = {
            key.lower(): EnvValue(key.lower(), key, raw).deserialize(shape)
            for key, raw in self._variables.items()
        }
        return self._validate(target, data)

    def _validate(self, target: Any, data: dict[str, Any]) -> Any:
        try:
            if isinstance(target, type) and issubclass(target, BaseModel):
                return target.model_validate(data)
            return TypeAdapter(target).validate_python(data)
        except ValidationError as e:
            error = _translate_validation_error(e)
            self._logger.debug(f"Validation failed: {error}")
            raise error from e
        except PydanticUserError as e:
            self._logger.debug(f"Cannot build a validator for {_type_name(target)}")
            raise CustomError(
                f"cannot deserialize into {_type_name(target)}: {e}"
            ) from e


def deserialize_pairs(
    target: type[T],
    pairs: Iterable[tuple[str, str]] | Mapping[str, str],
    source: VarSource,
) -> T:
    """
    Build the variable mapping with ``source`` and deserialize ``target``.

    Args:
        target: Type to deserialize into
        pairs: Raw (key, value) pairs, or a mapping of strings
        source: Adapter used to build the mapping

    Returns:
        A populated instance of ``target``
    """
    variables = source.build(pairs)
    return Deserializer(variables, source).deserialize(target)


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", repr(target))


def _record_fields(target: Any) -> list[RecordField] | None:
    """
    Lists the declared fields of a typed record, in declaration order.

    Returns:
        The fields, or None if ``target`` is not a record type
    """
    if not isinstance(target, type):
        return None

    if issubclass(target, BaseModel):
        pydantic_fields: dict[str, FieldInfo] | None = target.model_fields
    elif dataclasses.is_dataclass(target):
        pydantic_fields = getattr(target, "__pydantic_fields__", None)
    else:
        pydantic_fields = None

    if pydantic_fields is not None:
        return [
            RecordField(
                name, _input_key(name, info), info.annotation, info.is_required()
            )
            for name, info in pydantic_fields.items()
        ]

    if dataclasses.is_dataclass(target):
        hints = get_type_hints(target)
        return [
            RecordField(
                field.name,
                field.name,
                hints[field.name],
                field.default is dataclasses.MISSING
                and field.default_factory is dataclasses.MISSING,
            )
            for field in dataclasses.fields(target)
            if field.init
        ]

    # TypedDict classes (typing or typing_extensions) are dict subclasses
    required_keys = getattr(target, "__required_keys__", None)
    if issubclass(target, dict) and required_keys is not None:
        hints = get_type_hints(target)
        return [
            RecordField(name, name, annotation, name in required_keys)
            for name, annotation in hints.items()
        ]

    return None


def _input_key(name: str, field: FieldInfo) -> str | None:
    """
    Returns the key pydantic validates ``field`` under (rename or name).

    None means the field is only reachable through an ``AliasPath``.
    """
    alias = field.validation_alias
    if isinstance(alias, str):
        return alias
    if isinstance(alias, AliasChoices):
        for choice in alias.choices:
            if isinstance(choice, str):
                return choice
    if alias is not None and field.alias is None:
        return None
    return field.alias or name


def _translate_validation_error(
    error: ValidationError,
) -> MissingValueError | CustomError:
    """Maps the first pydantic error onto the envcast error taxonomy."""
    details = error.errors()
    if not details:
        return CustomError(str(error))

    first = details[0]
    location = ".".join(str(part) for part in first["loc"])
    if first["type"] == "missing":
        return MissingValueError(location)
    if not location:
        return CustomError(first["msg"])
    return CustomError(
        f"{first['msg']} while validating field '{location}'",
        field=location,
    )
