from .css import generate_css, generate_tailwind_config
from .html_preview import create_html_preview
from .json_export import export_json, system_to_dict
from .report import generate_contrast_report, print_system

__all__ = [
    "create_html_preview",
    "export_json",
    "generate_contrast_report",
    "generate_css",
    "generate_tailwind_config",
    "print_system",
    "system_to_dict",
]
