"""
Builders for parameterized SQL fragments.

Both builders are pure: they take a sparse mapping coming from a request and
return a `SqlClause` whose values line up 1:1 with the `$1, $2, ...`
placeholders in the clause. Execute the result with `app.core.database.execute`.

Example:
    >>> sql_for_partial_update(
    ...     {"name": "Apple", "numEmployees": 100},
    ...     {"numEmployees": "num_employees"},
    ... )
    SqlClause(clause='"name"=$1, "num_employees"=$2', values=['Apple', 100])
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, List, Mapping, NamedTuple, Optional, Tuple

from app.core.exceptions import BadRequestError

logger = logging.getLogger(__name__)


class SqlClause(NamedTuple):
    """A SQL fragment and the values for its positional placeholders."""
    clause: str
    values: List[Any]


def _identity(value: Any) -> Any:
    return value


def _wrap_wildcards(value: Any) -> str:
    return f"%{value}%"


@dataclass(frozen=True)
class FilterRule:
    """
    A filter key that compares a column against one bound parameter.

    Attributes:
        column: Storage column the key filters on
        operator: SQL comparison operator placed between column and placeholder
        transform: Applied to the raw request value before binding
    """
    column: str
    operator: str
    transform: Callable[[Any], Any] = _identity

    # Rules that emit a fragment even when their key is not supplied
    always_applies: ClassVar[bool] = False

    def render(self, value: Any, position: int) -> Tuple[str, List[Any]]:
        return f'"{self.column}" {self.operator} ${position}', [self.transform(value)]


@dataclass(frozen=True)
class PositiveFlag:
    """
    Boolean filter key: "column holds a value greater than zero".

    Always emits exactly one literal fragment and never binds a parameter:
    `"column" > 0` when the flag is true, `"column" >= 0` when it is false
    or missing.
    """
    column: str

    always_applies: ClassVar[bool] = True

    def render(self, value: Optional[bool], position: int) -> Tuple[str, List[Any]]:
        operator = ">" if value is True else ">="
        return f'"{self.column}" {operator} 0', []


def contains(column: str) -> FilterRule:
    """Case-insensitive substring match."""
    return FilterRule(column, "ILIKE", _wrap_wildcards)


def at_least(column: str) -> FilterRule:
    return FilterRule(column, ">=")


def at_most(column: str) -> FilterRule:
    return FilterRule(column, "<=")


def sql_for_partial_update(data_to_update: Mapping[str, Any], js_to_sql: Mapping[str, str]) -> SqlClause:
    """
    Build the SET list of an UPDATE from the fields present in `data_to_update`.

    Args:
        data_to_update: Field name -> new value, in the order to emit them
        js_to_sql: Field name -> column name; unmapped fields are used as-is

    Returns:
        SqlClause like ('"first_name"=$1, "age"=$2', ['Aliya', 32])

    Raises:
        BadRequestError: If there is nothing to update
    """
    if not data_to_update:
        raise BadRequestError("No data")

    cols = [
        f'"{js_to_sql.get(field, field)}"=${idx}'
        for idx, field in enumerate(data_to_update, start=1)
    ]
    result = SqlClause(", ".join(cols), list(data_to_update.values()))
    logger.debug("Partial update clause: %s", result.clause)
    return result


def sql_for_filtered_data(data_to_filter: Mapping[str, Any], rules: Dict[str, Any]) -> SqlClause:
    """
    Build a WHERE predicate from the search filters present in `data_to_filter`.

    Supplied keys are rendered in the mapping's order; rules that always
    apply but were not supplied are appended after them. A placeholder is
    numbered by the values bound so far, so literal fragments never shift
    the numbering of later keys.

    Args:
        data_to_filter: Filter key -> raw value
        rules: Filter key -> FilterRule / PositiveFlag for one entity

    Returns:
        SqlClause like ('"title" ILIKE $1 AND "equity" > 0', ['%net%'])

    Raises:
        BadRequestError: If no filters are given or a key has no rule
    """
    if not data_to_filter:
        raise BadRequestError("No data")

    unknown = [key for key in data_to_filter if key not in rules]
    if unknown:
        raise BadRequestError(f"Unrecognized filter(s): {', '.join(unknown)}")

    pending = list(data_to_filter.items())
    pending += [
        (key, None) for key, rule in rules.items()
        if rule.always_applies and key not in data_to_filter
    ]

    cols: List[str] = []
    values: List[Any] = []
    for key, value in pending:
        fragment, params = rules[key].render(value, len(values) + 1)
        cols.append(fragment)
        values.extend(params)

    result = SqlClause(" AND ".join(cols), values)
    logger.debug("Filter clause: %s", result.clause)
    return result
