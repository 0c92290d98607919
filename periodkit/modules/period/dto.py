from pydantic import BaseModel, Field


class DateRangeResult(BaseModel):
    """Rendered boundaries of a computed date range."""

    start: str = Field(..., description="First instant of the range, rendered with the period's format")
    end: str = Field(..., description="Last instant of the range, rendered with the period's format")

    class Config:
        frozen = True
        json_schema_extra = {
            "examples": [
                {
                    "start": "2024-03-11T00:00:00.000000Z",
                    "end": "2024-03-17T23:59:59.999999Z",
                },
                {"start": "2024-02-01", "end": "2024-02-29"},
            ]
        }
