# src/services/exceptions.py

"""Catalog domain exceptions.

Raised by :class:`~src.services.catalog_service.CatalogService` when an
operation is rejected. The shell catches them, reports the message on
stderr and keeps looping. None of them leave a mutation behind.
"""


class InventoryError(Exception):
    """Base class for rejected catalog operations."""


class InvalidSpecialValueError(InventoryError):
    """The special value is outside [0.0, 1.0]."""


class DuplicateProductError(InventoryError):
    """A product with the same name and special value already exists."""


class ProductNotFoundError(InventoryError):
    """No product has the requested name."""


class InvalidSelectionError(InventoryError):
    """The chosen match number is out of range."""


class InvalidRateError(InventoryError):
    """The dollar rate is zero or negative."""
