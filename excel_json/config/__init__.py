"""YAML config loading."""
