"""
Variable table for the calculator.

Holds every live binding from a name to a Matrix. Names are unique.
Assigning to an existing name overwrites the binding in place and releases
the old matrix once no other name still refers to it. Deleting swaps the
binding with the last one and pops, so iteration order is not stable across
deletions.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from ..matrix import Matrix

logger = logging.getLogger(__name__)

DEFAULT_MAX_VARIABLES = 255


class VariableTableFullError(Exception):
    """No room for another binding."""

    def __init__(self, name: str, capacity: int):
        super().__init__(f"Cannot add variable '{name}': table is full ({capacity} variables)")
        self.name = name
        self.capacity = capacity
        self.code = "V001"


@dataclass
class Variable:
    """A named binding that owns its matrix."""
    name: str
    value: Matrix

    def __str__(self) -> str:
        return f"{self.name}: ({self.value.rows} X {self.value.cols})"


class VariableTable:
    """
    Name -> Matrix store with upsert, lookup and swap-and-pop delete.

    Lookups are linear scans; the table is small and bounded.
    """

    def __init__(self, max_variables: int = DEFAULT_MAX_VARIABLES):
        self.max_variables = max_variables
        self._variables: List[Variable] = []

    def find(self, name: str) -> Optional[Variable]:
        """Return the binding for ``name`` or None."""
        for variable in self._variables:
            if variable.name == name:
                return variable
        return None

    def add(self, name: str, value: Matrix) -> Variable:
        """
        Bind ``name`` to ``value``, taking ownership of the matrix.

        An existing binding is updated in place; its old matrix is released
        unless another name is still bound to the same object. Otherwise a
        new binding is appended.

        Raises:
            VariableTableFullError: if ``name`` is new and the table is full
        """
        if not name:
            raise ValueError("Variable name must be a non-empty string")

        variable = self.find(name)
        if variable is not None:
            old = variable.value
            variable.value = value
            if old is not value and not self._is_bound(old):
                old.release()
            logger.debug("reassigned %s -> (%d X %d)", name, value.rows, value.cols)
            return variable

        if len(self._variables) >= self.max_variables:
            raise VariableTableFullError(name, self.max_variables)

        variable = Variable(name=str(name), value=value)
        self._variables.append(variable)
        logger.debug("defined %s -> (%d X %d)", name, value.rows, value.cols)
        return variable

    def delete(self, name: str) -> bool:
        """Remove ``name`` if bound. Returns whether anything was removed."""
        for index, variable in enumerate(self._variables):
            if variable.name == name:
                break
        else:
            return False

        last = len(self._variables) - 1
        self._variables[index], self._variables[last] = self._variables[last], self._variables[index]
        removed = self._variables.pop()
        if not self._is_bound(removed.value):
            removed.value.release()
        logger.debug("deleted %s", name)
        return True

    def _is_bound(self, value: Matrix) -> bool:
        return any(variable.value is value for variable in self._variables)

    def names(self) -> List[str]:
        return [variable.name for variable in self._variables]

    def clear(self) -> None:
        values = {id(variable.value): variable.value for variable in self._variables}
        self._variables.clear()
        for value in values.values():
            value.release()

    def __len__(self) -> int:
        return len(self._variables)

    def __contains__(self, name: object) -> bool:
        return self.find(name) is not None

    def __iter__(self) -> Iterator[Variable]:
        return iter(list(self._variables))

    def __repr__(self) -> str:
        return f"VariableTable({self.names()!r})"
