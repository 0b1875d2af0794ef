"""Days-together Pydantic schemas."""

from datetime import date

from pydantic import BaseModel


class DaysTogetherResponse(BaseModel):
    start_date: date
    today: date
    days: int
