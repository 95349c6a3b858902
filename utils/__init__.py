"""
Utilities Package
Argument parsing, error types and logging setup
"""

from .args_parser import parse_constructor_args
from .errors import DeployToolError
from .logging_config import configure_logging

__all__ = [
    'parse_constructor_args',
    'DeployToolError',
    'configure_logging'
]
