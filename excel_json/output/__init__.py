"""JSON output writer."""
