"""Command-line interface (``python -m excel_json.cli`` / ``excel-json``)."""
