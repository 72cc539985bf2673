# config.py
from dataclasses import dataclass, field
from typing import List, Optional

OUTPUT_FORMATS = ("csv", "markdown", "json", "docx")


@dataclass
class ReportConfig:
    # Row layout
    headers: List[str] = field(default_factory=lambda: [
        "Category Name", "Attribute Name", "Description", "Type", "Groups",
    ])
    # Field formatting
    mandatory_marker: str = "*"
    multi_value_suffix: str = "[]"
    # same prefix at every nesting depth, e.g. "Spec{\n  Width: int\n}"
    nested_indent: str = "  "
    group_separator: str = "\n"
    detect_cycles: bool = True


@dataclass
class OutputConfig:
    format: str = "csv"
    csv_delimiter: str = ","
    docx_table_style: Optional[str] = "Table Grid"
    docx_title: Optional[str] = None


@dataclass
class AppConfig:
    report: ReportConfig = field(default_factory=ReportConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "INFO"

# Global defaults used across modules
DEFAULTS = AppConfig()
