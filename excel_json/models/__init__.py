"""Domain models for the Excel -> JSON converter.

This package contains the option records, row type aliases and result models
shared by the reader, the conversion services and the CLI.
"""

from .config_models import ConfigDefaults, ConvertOptions
from .processing_result import ConversionResult, SheetStat
from .row_data import (
    CellValue,
    ConversionData,
    JsonScalar,
    NormalizedRow,
    RawRow,
    SheetResult,
    is_empty_value,
)

__all__ = [
    # Options
    "ConfigDefaults",
    "ConvertOptions",
    # Row shapes
    "CellValue",
    "ConversionData",
    "JsonScalar",
    "NormalizedRow",
    "RawRow",
    "SheetResult",
    "is_empty_value",
    # Results
    "ConversionResult",
    "SheetStat",
]
