"""Field schemas and resource definitions for the host plugin contract."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Iterable, Mapping

from bigcommerce_provider.sdk.diag import Diagnostics, error

if TYPE_CHECKING:
    from bigcommerce_provider.sdk.resource_data import ResourceData

SENSITIVE_PLACEHOLDER = "(sensitive value)"

LifecycleFunc = Callable[["ResourceData", Any], Diagnostics]


class ValueType(str, Enum):
    STRING = "string"
    BOOL = "bool"
    INT = "int"
    SET = "set"


@dataclass
class Schema:
    type: ValueType
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    description: str = ""
    env_default: str | None = None
    elem: dict[str, Schema] | None = None

    def zero(self) -> Any:
        if self.type is ValueType.STRING:
            return ""
        if self.type is ValueType.BOOL:
            return False
        if self.type is ValueType.INT:
            return 0
        return []

    def default(self) -> Any:
        """Value from ``env_default`` when set in the environment, else None."""
        if self.env_default:
            value = os.environ.get(self.env_default)
            if value:
                return value
        return None

    def normalize(self, value: Any) -> Any:
        """Check ``value`` against this schema and return its canonical form.

        Set values become a list of element dicts with exact duplicates
        removed; element order is not meaningful. Raises ValueError on a
        type mismatch.
        """
        if value is None:
            return self.zero()
        if self.type is ValueType.STRING:
            if not isinstance(value, str):
                raise ValueError(f"expected string, got {type(value).__name__}")
            return value
        if self.type is ValueType.BOOL:
            if not isinstance(value, bool):
                raise ValueError(f"expected bool, got {type(value).__name__}")
            return value
        if self.type is ValueType.INT:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"expected int, got {type(value).__name__}")
            return value

        if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
            raise ValueError(f"expected set of objects, got {type(value).__name__}")
        elements: list[dict[str, Any]] = []
        seen: set[frozenset[tuple[str, Any]]] = set()
        for item in value:
            element = self._normalize_element(item)
            marker = frozenset(element.items())
            if marker in seen:
                continue
            seen.add(marker)
            elements.append(element)
        return elements

    def _normalize_element(self, item: Any) -> dict[str, Any]:
        if not isinstance(item, Mapping):
            raise ValueError(f"expected set element object, got {type(item).__name__}")
        elem = self.elem or {}
        unknown = set(item) - set(elem)
        if unknown:
            raise ValueError(f"unsupported element attribute(s): {', '.join(sorted(unknown))}")
        missing = [name for name, sub in elem.items() if sub.required and item.get(name) is None]
        if missing:
            raise ValueError(f"missing required element attribute(s): {', '.join(missing)}")
        return {name: sub.normalize(item.get(name)) for name, sub in elem.items()}

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": self.type.value}
        for flag in ("required", "optional", "computed", "sensitive"):
            if getattr(self, flag):
                out[flag] = True
        if self.description:
            out["description"] = self.description
        if self.env_default:
            out["env_default"] = self.env_default
        if self.elem:
            out["elem"] = {name: sub.to_dict() for name, sub in self.elem.items()}
        return out


def set_key(value: list[dict[str, Any]]) -> frozenset[frozenset[tuple[str, Any]]]:
    """Order-independent comparison key for a normalized set value."""
    return frozenset(frozenset(element.items()) for element in value)


@dataclass
class Resource:
    """A managed resource or data source exposed to the host runtime."""

    schema: dict[str, Schema]
    description: str = ""
    create: LifecycleFunc | None = None
    read: LifecycleFunc | None = None
    update: LifecycleFunc | None = None
    delete: LifecycleFunc | None = None
    operations: tuple[str, ...] = field(init=False, default=())

    def __post_init__(self) -> None:
        self.operations = tuple(
            name for name in ("create", "read", "update", "delete") if getattr(self, name) is not None
        )

    def data(
        self,
        state: Mapping[str, Any] | None = None,
        config: Mapping[str, Any] | None = None,
    ) -> ResourceData:
        from bigcommerce_provider.sdk.resource_data import ResourceData

        return ResourceData(self.schema, state=state, config=config)

    def validate(self, config: Mapping[str, Any]) -> Diagnostics:
        """Check a configuration block against the schema."""
        diags = Diagnostics()
        for name in config:
            if name not in self.schema:
                diags.append(error("Unsupported argument", f"An argument named {name!r} is not expected here.", name))

        for name, sch in self.schema.items():
            present = config.get(name) is not None
            configurable = sch.required or sch.optional
            if present and not configurable:
                diags.append(
                    error(
                        "Value for unconfigurable attribute",
                        f"{name!r} is computed and cannot be set in configuration.",
                        name,
                    )
                )
                continue
            if not present:
                if sch.required and sch.default() is None:
                    diags.append(error("Missing required argument", f"The argument {name!r} is required.", name))
                continue
            try:
                sch.normalize(config[name])
            except ValueError as e:
                diags.append(error("Incorrect attribute value type", str(e), name))
        return diags

    def redact(self, state: Mapping[str, Any]) -> dict[str, Any]:
        return {
            name: SENSITIVE_PLACEHOLDER if name in self.schema and self.schema[name].sensitive else value
            for name, value in state.items()
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "operations": list(self.operations),
            "attributes": {name: sch.to_dict() for name, sch in self.schema.items()},
        }
