"""Translate specifications into parameterized PostgreSQL clauses.

Column names come only from the field map given to the translator; values
are always passed as asyncpg ``$n`` parameters.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping

from ...core.exceptions import DomainValidationError
from ...core.specifications import (
    AllOf,
    AnyOf,
    Criterion,
    Expression,
    MatchAll,
    Not,
    Operator,
    Specification,
)

_COMPARISONS = {
    Operator.EQ: "=",
    Operator.NE: "<>",
    Operator.GT: ">",
    Operator.GE: ">=",
    Operator.LT: "<",
    Operator.LE: "<=",
}


def _to_db_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


@dataclass
class SqlQueryParts:
    """Clauses for ``SELECT ... {where} {order_by} {paging}``."""

    where: str
    params: List[Any] = field(default_factory=list)
    order_by: str = ""
    paging: str = ""

    def select(self, table: str, columns: str = "*") -> str:
        return " ".join(part for part in (
            f"SELECT {columns} FROM {table} WHERE {self.where}", self.order_by, self.paging,
        ) if part)

    def count(self, table: str) -> str:
        """Count query; paging is ignored."""
        return f"SELECT COUNT(*) FROM {table} WHERE {self.where}"


class SpecificationSqlTranslator:
    """Walks a specification's expression tree into SQL.

    Args:
        column_map: Dotted entity path -> column name
    """

    def __init__(self, column_map: Mapping[str, str]):
        self._column_map = dict(column_map)

    def column_for(self, path: str) -> str:
        try:
            return self._column_map[path]
        except KeyError:
            raise DomainValidationError(f"No column mapped for field '{path}'", field_name=path)

    def translate(self, specification: Specification) -> SqlQueryParts:
        params: List[Any] = []
        where = self._expression(specification.to_expression(), params)
        parts = SqlQueryParts(where=where, params=params)

        order_terms = []
        if specification.order_by:
            order_terms.append(f"{self.column_for(specification.order_by)} ASC NULLS FIRST")
        if specification.order_by_descending:
            order_terms.append(f"{self.column_for(specification.order_by_descending)} DESC NULLS LAST")
        if order_terms:
            parts.order_by = "ORDER BY " + ", ".join(order_terms)

        if specification.is_paging_enabled:
            params.extend([specification.skip, specification.take])
            parts.paging = f"OFFSET ${len(params) - 1} LIMIT ${len(params)}"
        return parts

    def _expression(self, expression: Expression, params: List[Any]) -> str:
        if isinstance(expression, MatchAll):
            return "TRUE"
        if isinstance(expression, AllOf):
            return "(" + " AND ".join(self._expression(child, params) for child in expression.children) + ")"
        if isinstance(expression, AnyOf):
            return "(" + " OR ".join(self._expression(child, params) for child in expression.children) + ")"
        if isinstance(expression, Not):
            # NULL comparisons count as false, as they do in memory
            return f"NOT COALESCE({self._expression(expression.child, params)}, FALSE)"
        if isinstance(expression, Criterion):
            return self._criterion(expression, params)
        raise DomainValidationError(f"Unsupported expression type: {type(expression).__name__}")

    def _criterion(self, criterion: Criterion, params: List[Any]) -> str:
        column = self.column_for(criterion.field)
        operator = criterion.operator

        if operator is Operator.IS_NULL:
            return f"{column} IS NULL" if criterion.value else f"{column} IS NOT NULL"
        if operator is Operator.EQ and criterion.value is None:
            return f"{column} IS NULL"
        if operator is Operator.NE and criterion.value is None:
            return f"{column} IS NOT NULL"
        if operator is Operator.IN:
            values = [_to_db_value(item) for item in criterion.value]
            params.append([item for item in values if item is not None])
            if None in values:
                return f"({column} = ANY(${len(params)}) OR {column} IS NULL)"
            return f"{column} = ANY(${len(params)})"
        if operator is Operator.CONTAINS:
            params.append(f"%{_escape_like(str(_to_db_value(criterion.value)))}%")
            return f"{column} ILIKE ${len(params)} ESCAPE '\\'"

        params.append(_to_db_value(criterion.value))
        if operator is Operator.NE:
            # NULL differs from every value
            return f"({column} <> ${len(params)} OR {column} IS NULL)"
        return f"{column} {_COMPARISONS[operator]} ${len(params)}"
