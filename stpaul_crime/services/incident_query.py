"""Build the filtered incident listing query."""

from dataclasses import dataclass

from pydantic import BaseModel

from stpaul_crime.services.parsing import is_valid_date_string, parse_int_list, resolve_limit

BASE_SELECT = (
    "SELECT case_number, date(date_time) AS date, time(date_time) AS time, "
    "code, incident, police_grid, neighborhood_number, block FROM Incidents"
)

# Query-string field -> column, in clause order
MEMBERSHIP_FILTERS = (
    ("code", "code"),
    ("grid", "police_grid"),
    ("neighborhood", "neighborhood_number"),
)


class IncidentFilters(BaseModel):
    """Raw, optional filter values as they arrive on the query string."""

    start_date: str | None = None
    end_date: str | None = None
    code: str | None = None
    grid: str | None = None
    neighborhood: str | None = None
    limit: str | None = None


@dataclass(frozen=True)
class IncidentQuery:
    """Parameterized SQL text and its ordered bound values."""

    sql: str
    params: list[int | str]


@dataclass(frozen=True)
class FilterError:
    """A filter value that failed validation."""

    field: str
    message: str


def _placeholders(count: int) -> str:
    return ",".join("?" * count)


def build_incident_query(filters: IncidentFilters) -> IncidentQuery | FilterError:
    """
    Translate incident filters into a single query.

    Date bounds are inclusive and compare the date part of date_time only.
    List filters that are empty after parsing add no clause. Results are
    always ordered newest first and capped by the resolved limit, which is
    bound last.
    """
    clauses: list[str] = []
    params: list[int | str] = []

    if filters.start_date:
        if not is_valid_date_string(filters.start_date):
            return FilterError(field="start_date", message="invalid start_date")
        clauses.append("date(date_time) >= date(?)")
        params.append(filters.start_date)

    if filters.end_date:
        if not is_valid_date_string(filters.end_date):
            return FilterError(field="end_date", message="invalid end_date")
        clauses.append("date(date_time) <= date(?)")
        params.append(filters.end_date)

    for name, column in MEMBERSHIP_FILTERS:
        values = parse_int_list(getattr(filters, name))
        if values:
            clauses.append(f"{column} IN ({_placeholders(len(values))})")
            params.extend(values)

    limit = resolve_limit(filters.limit)

    sql = BASE_SELECT
    if clauses:
        sql += " WHERE " + " AND ".join(clauses)
    sql += " ORDER BY date_time DESC LIMIT ?"
    params.append(limit)

    return IncidentQuery(sql=sql, params=params)
