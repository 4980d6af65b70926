"""
Query-parameter parsing shared by the list and report endpoints.
"""
from django.utils.dateparse import parse_date


DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def _positive_int(value, default):
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def get_pagination_params(request):
    """
    Read page/limit from the query string.

    Returns:
        tuple: (page, limit, offset) - invalid values fall back to page 1, limit 10
    """
    page = _positive_int(request.query_params.get('page'), DEFAULT_PAGE)
    limit = _positive_int(request.query_params.get('limit'), DEFAULT_LIMIT)
    offset = (page - 1) * limit
    return page, limit, offset


def parse_date_param(value, name):
    """
    Parse an optional YYYY-MM-DD query parameter.

    Returns:
        datetime.date or None when the parameter is absent

    Raises:
        ValueError: If the value is not a valid calendar date
    """
    if not value:
        return None
    try:
        parsed = parse_date(value)
    except ValueError:
        parsed = None
    if parsed is None:
        raise ValueError(f"Invalid '{name}' date '{value}', expected YYYY-MM-DD")
    return parsed


def get_date_range_params(request):
    """Return (start, end) dates from the query string."""
    start = parse_date_param(request.query_params.get('start'), 'start')
    end = parse_date_param(request.query_params.get('end'), 'end')
    return start, end


def get_body(request):
    """Request body as a mapping; JSON arrays and scalars count as empty."""
    return request.data if isinstance(request.data, dict) else {}
