"""
Contract Validation Module

JSON представления Span и Instant: проверка, выгрузка и загрузка по схемам.
"""

from .validators import (
    INSTANT_SCHEMA,
    SCHEMA_DIR,
    SPAN_SCHEMA,
    SchemaLoader,
    contract_errors,
    default_loader,
    dump_instant,
    dump_span,
    load_instant,
    load_span,
    validate_instant,
    validate_span,
)

__all__ = [
    # Constants
    "SCHEMA_DIR",
    "SPAN_SCHEMA",
    "INSTANT_SCHEMA",
    # Loader
    "SchemaLoader",
    "default_loader",
    # Checks
    "contract_errors",
    "validate_span",
    "validate_instant",
    # Dump / load
    "dump_span",
    "dump_instant",
    "load_span",
    "load_instant",
]
