"""
Days-together endpoint.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Query

from backend.backend_config import ANNIVERSARY_DATE
from backend.errors import InvalidInputError, ServiceUnavailableError
from backend.schemas import DaysTogetherResponse, ErrorResponse
from backend.utils import days_since, parse_iso_date

router = APIRouter(tags=["Days"])


@router.get(
    "/days-together",
    response_model=DaysTogetherResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def days_together(
    start: Optional[str] = Query(None, description="Start date (YYYY-MM-DD), defaults to the anniversary"),
):
    """Number of whole days since the start date."""
    if start is not None:
        try:
            start_date = parse_iso_date(start)
        except ValueError:
            raise InvalidInputError("Invalid 'start' parameter, expected YYYY-MM-DD.")
    else:
        try:
            start_date = parse_iso_date(ANNIVERSARY_DATE)
        except ValueError:
            raise ServiceUnavailableError(f"Invalid ANNIVERSARY_DATE configured: {ANNIVERSARY_DATE!r}")

    today = date.today()
    return DaysTogetherResponse(
        start_date=start_date,
        today=today,
        days=days_since(start_date, today),
    )
