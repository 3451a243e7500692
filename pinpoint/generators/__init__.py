"""
PinPoint Generators
====================

Vendor default-PIN formulas and the generator catalog.

Modules:
    formulas  -- Pure BSSID -> base PIN functions
    catalog   -- PinGenerator, constructors and the 16-member catalog
"""

from pinpoint.generators.catalog import (
    CATALOG_KINDS,
    GeneratorError,
    GeneratorKind,
    PinGenerator,
    build_catalog,
    linear_generator,
    static_generator,
)

__all__ = [
    "CATALOG_KINDS",
    "GeneratorError",
    "GeneratorKind",
    "PinGenerator",
    "build_catalog",
    "linear_generator",
    "static_generator",
]
