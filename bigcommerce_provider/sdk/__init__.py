"""Plugin contract between the provider and its host runtime."""

from bigcommerce_provider.sdk.diag import Diagnostic, Diagnostics, Severity, error, from_err, warning
from bigcommerce_provider.sdk.resource_data import ResourceData
from bigcommerce_provider.sdk.schema import Resource, Schema, ValueType

__all__ = [
    "Diagnostic",
    "Diagnostics",
    "Severity",
    "error",
    "from_err",
    "warning",
    "ResourceData",
    "Resource",
    "Schema",
    "ValueType",
]
