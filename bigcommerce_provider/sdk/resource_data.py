"""Per-invocation view of a resource's prior state and desired configuration."""

from __future__ import annotations

from typing import Any, Mapping

from bigcommerce_provider.sdk.schema import Schema, ValueType, set_key


class ResourceData:
    """State handed to a lifecycle callback.

    ``state`` is what the host persisted after the last successful call
    (``None`` for a create), ``config`` is the desired configuration. When
    ``config`` is omitted the prior state is also the desired one, which is
    what a plain refresh or destroy looks like. Callbacks write results with
    :meth:`set` / :meth:`set_id` and the host persists :meth:`state`.
    """

    def __init__(
        self,
        schema: Mapping[str, Schema],
        state: Mapping[str, Any] | None = None,
        config: Mapping[str, Any] | None = None,
    ) -> None:
        self._schema = dict(schema)
        prior = dict(state or {})
        desired = dict(config) if config is not None else dict(prior)
        self._id = str(prior.get("id") or desired.get("id") or "")
        self._old = self._normalize_all(prior)
        self._new = self._normalize_all(desired)

    def _normalize_all(self, values: Mapping[str, Any]) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for name, sch in self._schema.items():
            value = values.get(name)
            if value is None:
                value = sch.default()
            out[name] = sch.normalize(value)
        return out

    def _schema_for(self, key: str) -> Schema:
        try:
            return self._schema[key]
        except KeyError:
            raise ValueError(f"unknown attribute {key!r}") from None

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def id(self) -> str:
        return self._id

    def set_id(self, value: str) -> None:
        """Set the resource identity; an empty string marks it as gone."""
        self._id = value
        if "id" in self._schema:
            self._new["id"] = value

    # ------------------------------------------------------------------
    # Attribute access
    # ------------------------------------------------------------------

    def get(self, key: str) -> Any:
        self._schema_for(key)
        return self._new[key]

    def get_change(self, key: str) -> tuple[Any, Any]:
        self._schema_for(key)
        return self._old[key], self._new[key]

    def has_change(self, key: str) -> bool:
        sch = self._schema_for(key)
        old, new = self._old[key], self._new[key]
        if sch.type is ValueType.SET:
            return set_key(old) != set_key(new)
        return old != new

    def set(self, key: str, value: Any) -> None:
        sch = self._schema_for(key)
        try:
            self._new[key] = sch.normalize(value)
        except ValueError as e:
            raise ValueError(f"{key}: {e}") from None
        if key == "id":
            self._id = self._new[key]

    def state(self) -> dict[str, Any] | None:
        """Attributes to persist, or None when the resource no longer exists."""
        if not self._id:
            return None
        result = {name: value for name, value in self._new.items()}
        if "id" in self._schema:
            result["id"] = self._id
        return result
