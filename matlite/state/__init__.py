"""
matlite State Package

The variable table: named matrix bindings populated by statement execution.
"""

from .variables import Variable, VariableTable, VariableTableFullError, DEFAULT_MAX_VARIABLES

__all__ = [
    "Variable",
    "VariableTable",
    "VariableTableFullError",
    "DEFAULT_MAX_VARIABLES",
]
