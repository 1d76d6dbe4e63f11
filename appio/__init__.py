# ================================
# file: appio/__init__.py
# ================================
from appio.logger import MapLogger, log_to_file, format_log_lines
from appio.package_parser import package_from_dict, parse_package_line, iter_packages

__all__ = ["MapLogger", "log_to_file", "format_log_lines", "package_from_dict", "parse_package_line", "iter_packages"]
