from app.enums import SortField, SortOrder


class InvalidArgument(ValueError):
    pass


def require(condition: bool, message: str) -> None:
    if not condition:
        raise InvalidArgument(message)


def validate_search_query(query: str | None) -> str:
    if query is None or not query.strip():
        raise InvalidArgument("Query parameter is required and cannot be empty")
    return query


def parse_sort_field(value: str | None, *, default: SortField = SortField.stars) -> SortField:
    if value is None:
        return default
    try:
        return SortField(value.strip().lower())
    except ValueError as exc:
        allowed = ", ".join(field.value for field in SortField)
        raise InvalidArgument(f"Invalid sort option '{value}'. Must be one of: {allowed}") from exc


def parse_sort_order(value: str | None, *, default: SortOrder = SortOrder.desc) -> SortOrder:
    if value is None:
        return default
    try:
        return SortOrder(value.strip().lower())
    except ValueError as exc:
        raise InvalidArgument(f"Invalid sort order '{value}'. Must be 'asc' or 'desc'") from exc


def validate_threshold(value: int | None, label: str) -> None:
    if value is not None:
        require(value >= 0, f"Minimum {label} count cannot be negative")


def parse_optional_int(value: str | None, label: str) -> int | None:
    """Blank query values count as absent, as in ``?minStars=&minForks=``."""
    if value is None or not value.strip():
        return None
    try:
        return int(value.strip())
    except ValueError as exc:
        raise InvalidArgument(f"{label} must be an integer, got '{value}'") from exc
