# rental_service/query_builder.py
"""Chainable SQL SELECT builder.

Clause fragments are accumulated in order and rendered as

    SELECT <columns> FROM <table> [JOIN ...] [WHERE c1 AND c2 ...]
    [ORDER BY <expr>] [LIMIT :limit] [OFFSET :offset]

Values never go into the SQL text: fragments reference named placeholders
(``:price_min``) and the values are carried in `params`, so the statement
handed to SQLAlchemy is always fully parameterized. The builder does not
validate anything; callers check identifiers (such as sort columns) before
passing fragments in.

Every clause method returns a new builder and leaves the receiver as it
was, so a partially built query can be shared or extended safely.
"""
import copy
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.sql.elements import TextClause


class QueryBuilder:
    def __init__(self):
        self._query_type = ""
        self._table = ""
        self._joins = ()
        self._columns = ()
        self._conditions = ()
        self._order_by: Optional[str] = None
        self._limit: Optional[int] = None
        self._offset: Optional[int] = None
        self._params: Dict[str, Any] = {}

    def _replace(self, **changes) -> "QueryBuilder":
        clone = copy.copy(self)
        for name, value in changes.items():
            setattr(clone, "_" + name, value)
        return clone

    def _with_params(self, params: Dict[str, Any]) -> Dict[str, Any]:
        merged = dict(self._params)
        merged.update(params)
        return merged

    def select(self) -> "QueryBuilder":
        return self._replace(query_type="SELECT ")

    def from_(self, table: str) -> "QueryBuilder":
        return self._replace(table=table)

    def from_subquery(self, subquery: "QueryBuilder", alias: str) -> "QueryBuilder":
        """Select from `subquery` rendered inline as ``(<subquery>) <alias>``."""
        return self._replace(
            table=f"({subquery.render()}) {alias}",
            params=self._with_params(subquery._params),
        )

    def join(self, *joins: str) -> "QueryBuilder":
        return self._replace(joins=self._joins + joins)

    def columns(self, *columns: str) -> "QueryBuilder":
        return self._replace(columns=self._columns + columns)

    def bind(self, **params: Any) -> "QueryBuilder":
        return self._replace(params=self._with_params(params))

    def where(self, condition: str, **params: Any) -> "QueryBuilder":
        return self._replace(
            conditions=self._conditions + (condition,),
            params=self._with_params(params),
        )

    def order_by(self, order_by: str) -> "QueryBuilder":
        return self._replace(order_by=order_by)

    def limit(self, limit: int) -> "QueryBuilder":
        return self._replace(limit=limit, params=self._with_params({"limit": limit}))

    def offset(self, offset: int) -> "QueryBuilder":
        return self._replace(offset=offset, params=self._with_params({"offset": offset}))

    @property
    def params(self) -> Dict[str, Any]:
        return dict(self._params)

    def render(self) -> str:
        parts = [self._query_type, ", ".join(self._columns), " FROM ", self._table]

        for join in self._joins:
            parts.append(" JOIN ")
            parts.append(join)

        if self._conditions:
            parts.append(" WHERE ")
            parts.append(" AND ".join(self._conditions))

        if self._order_by is not None:
            parts.append(" ORDER BY ")
            parts.append(self._order_by)

        if self._limit is not None:
            parts.append(" LIMIT :limit")

        if self._offset is not None:
            parts.append(" OFFSET :offset")

        return "".join(parts)

    def statement(self) -> TextClause:
        """The rendered query as a SQLAlchemy text clause with its parameters bound."""
        stmt = text(self.render())
        if self._params:
            stmt = stmt.bindparams(**self._params)
        return stmt

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"QueryBuilder({self.render()!r}, params={self._params!r})"
