"""
Configuration & Global Constants
================================
This module serves as the central registry for the constants shared by the
parser, the report and the command-line interface.

Exports:
    DELIMITER (str): Separator between numbers in MATRIX and VECTOR arguments.
    OUTPUT_DECIMALS (int): Number of decimals used when printing vectors.
    APP_NAME (str): Program name shown in the CLI help.
    APP_DESCRIPTION (str): One-line description shown in the CLI help.
    APP_VERSION (str): Installed package version.
"""
from importlib.metadata import version, PackageNotFoundError

DELIMITER: str = ","
OUTPUT_DECIMALS: int = 4

APP_NAME: str = "engimath"
APP_DESCRIPTION: str = "Engineering mathematics tool (dense matrix-vector products)"

try:
    APP_VERSION: str = version("engimath")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"
