from __future__ import annotations

from dataclasses import dataclass

"""Option dataclasses for the Excel -> JSON converter.

ConvertOptions is built once at the CLI boundary (argparse + YAML defaults)
and passed by value into the conversion services. Core functions never read
global state; everything they need arrives through this record.
"""

__all__ = [
    "ConvertOptions",
    "ConfigDefaults",
]


@dataclass(frozen=True)
class ConfigDefaults:
    """Defaults loaded from the optional YAML config file.

    Every field mirrors a CLI flag; CLI flags always take precedence.
    """
    pretty: bool = False
    all_sheets: bool = False
    header: int = 0  # 0-indexed header row
    add_id: bool = True
    camel_case: bool = True
    na_strings: tuple[str, ...] = ()  # 空セル扱いする文字列 (例: "N/A")


@dataclass(frozen=True)
class ConvertOptions:
    """Recognized conversion options.

    sheet / all_sheets / list_sheets drive sheet selection, header / na_strings
    drive the reader, add_id / camel_case drive row normalization and
    output / pretty drive the writer.
    """
    output: str | None = None
    sheet: str | None = None
    all_sheets: bool = False
    pretty: bool = False
    list_sheets: bool = False
    header: int = 0
    add_id: bool = True
    camel_case: bool = True
    na_strings: tuple[str, ...] = ()

    @classmethod
    def from_defaults(cls, defaults: ConfigDefaults, **overrides: object) -> ConvertOptions:
        """Build options from config defaults, applying non-None overrides."""
        values: dict[str, object] = {
            "pretty": defaults.pretty,
            "all_sheets": defaults.all_sheets,
            "header": defaults.header,
            "add_id": defaults.add_id,
            "camel_case": defaults.camel_case,
            "na_strings": defaults.na_strings,
        }
        for key, value in overrides.items():
            if value is not None:
                values[key] = value
        return cls(**values)  # type: ignore[arg-type]
