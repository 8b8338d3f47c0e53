"""Excel workbook reading (pandas + openpyxl)."""
