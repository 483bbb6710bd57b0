"""fmtgate: block commits whose staged source files are not formatted."""

__version__ = "0.1.0"
