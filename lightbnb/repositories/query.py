"""
Structured SQL assembly with positional PostgreSQL placeholders.

Predicates are collected as (template, value) pairs and rendered once against a
single ParameterList, so placeholder numbers always follow the order in which
they appear in the final SQL and match the parameter array.
"""

from dataclasses import dataclass, field
from sqlalchemy import text
from sqlalchemy.sql.elements import TextClause
from typing import Any, Dict, List, Optional, Tuple
import re

PLACEHOLDER_PATTERN = re.compile(r"\$(\d+)")


class ParameterList:
    """Ordered bound parameters; bind() hands out the next $n placeholder."""

    def __init__(self):
        self._values: List[Any] = []

    def bind(self, value: Any) -> str:
        self._values.append(value)
        return f"${len(self._values)}"

    @property
    def values(self) -> List[Any]:
        return list(self._values)

    def __len__(self) -> int:
        return len(self._values)


@dataclass(frozen=True)
class Predicate:
    """
    One filter condition.

    template holds a single ``{}`` where the placeholder for value goes,
    e.g. ``"properties.owner_id = {}"``.
    """

    template: str
    value: Any = None
    bound: bool = True

    def render(self, params: ParameterList) -> str:
        if not self.bound:
            return self.template
        return self.template.format(params.bind(self.value))


@dataclass
class ClauseList:
    """Predicates joined with AND and introduced by keyword (WHERE or HAVING)."""

    keyword: str
    predicates: List[Predicate] = field(default_factory=list)

    def add(self, template: str, value: Any) -> "ClauseList":
        self.predicates.append(Predicate(template, value))
        return self

    def add_static(self, sql: str) -> "ClauseList":
        """Add a condition that binds no parameter."""
        self.predicates.append(Predicate(sql, bound=False))
        return self

    def add_if(self, value: Any, template: str) -> "ClauseList":
        """Add the predicate only when value is not None."""
        if value is not None:
            self.add(template, value)
        return self

    def render(self, params: ParameterList) -> str:
        if not self.predicates:
            return ""
        rendered = [predicate.render(params) for predicate in self.predicates]
        return f"{self.keyword} " + " AND ".join(rendered)

    def __len__(self) -> int:
        return len(self.predicates)


@dataclass(frozen=True)
class CompiledQuery:
    """Rendered SQL with positional placeholders and its parameters in order."""

    sql: str
    params: List[Any]

    def to_statement(self) -> Tuple[TextClause, Dict[str, Any]]:
        """
        Convert to a SQLAlchemy text clause with named binds.

        ``$n`` becomes ``:p_n``; the asyncpg dialect renders them back to
        positional parameters when executing.
        """
        placeholders = [int(n) for n in PLACEHOLDER_PATTERN.findall(self.sql)]
        if sorted(set(placeholders)) != list(range(1, len(self.params) + 1)):
            raise ValueError(
                f"Placeholders {placeholders} do not match {len(self.params)} parameters"
            )
        sql = PLACEHOLDER_PATTERN.sub(lambda m: f":p_{m.group(1)}", self.sql)
        binds = {f"p_{i}": value for i, value in enumerate(self.params, start=1)}
        return text(sql), binds


class SelectQuery:
    """
    A SELECT assembled from fixed fragments plus WHERE/HAVING predicate lists.

    Rendering order is WHERE, GROUP BY, HAVING, ORDER BY, LIMIT, which is also
    the order parameters are bound in.
    """

    def __init__(self, select: str, from_: str):
        self.select = select
        self.from_ = from_
        self.where = ClauseList("WHERE")
        self.having = ClauseList("HAVING")
        self.group_by: Optional[str] = None
        self.order_by: Optional[str] = None
        self.limit: Optional[int] = None

    def compile(self) -> CompiledQuery:
        params = ParameterList()
        parts = [f"SELECT {self.select}", f"FROM {self.from_}"]

        where_sql = self.where.render(params)
        if where_sql:
            parts.append(where_sql)
        if self.group_by:
            parts.append(f"GROUP BY {self.group_by}")
        having_sql = self.having.render(params)
        if having_sql:
            parts.append(having_sql)
        if self.order_by:
            parts.append(f"ORDER BY {self.order_by}")
        if self.limit is not None:
            parts.append(f"LIMIT {params.bind(self.limit)}")

        return CompiledQuery("\n".join(parts), params.values)


def insert_query(table: str, columns: Tuple[str, ...], values: List[Any]) -> CompiledQuery:
    """Build ``INSERT ... VALUES ($1, ...) RETURNING *`` for one row."""
    if len(columns) != len(values):
        raise ValueError(f"{len(columns)} columns but {len(values)} values for {table}")

    params = ParameterList()
    placeholders = ", ".join(params.bind(value) for value in values)
    sql = (
        f"INSERT INTO {table} ({', '.join(columns)})\n"
        f"VALUES ({placeholders})\n"
        f"RETURNING *"
    )
    return CompiledQuery(sql, params.values)


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
