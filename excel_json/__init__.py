"""Excel -> JSON converter.

Reads workbook sheets with pandas/openpyxl, normalizes rows (column names,
empty rows, cell values, sequential ids) and writes JSON.
"""

__version__ = "0.1.0"
