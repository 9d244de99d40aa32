"""
Contract Validation Module

Валидация сериализованных результатов против JSON Schema контрактов.
"""

from .validators import SchemaLoader, validate_rfs_result

__all__ = [
    "SchemaLoader",
    "validate_rfs_result",
]
