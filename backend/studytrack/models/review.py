"""Review models for API requests and responses."""

from pydantic import BaseModel, Field, StrictInt

from studytrack.srs.sm2 import DEFAULT_EASE_FACTOR, DEFAULT_INTERVAL, DEFAULT_REPETITIONS


# Largest prior interval accepted over the API (about 100 years)
MAX_INTERVAL_DAYS = 36500


class ReviewStateFields(BaseModel):
    """Prior scheduling state sent by the caller (defaults = never reviewed)."""

    interval: int = Field(DEFAULT_INTERVAL, ge=0, le=MAX_INTERVAL_DAYS, description="Previous interval in days")
    easeFactor: float = Field(DEFAULT_EASE_FACTOR, gt=0, description="Previous ease factor")
    repetitions: int = Field(DEFAULT_REPETITIONS, ge=0, description="Consecutive successful reviews")


class ReviewRequest(ReviewStateFields):
    """Model for rating one review attempt."""

    # Strict so JSON booleans are rejected; the range is checked by the scheduler
    quality: StrictInt = Field(..., description="Recall quality, 0 (blackout) to 5 (perfect)")

    class Config:
        """Pydantic config."""

        json_schema_extra = {
            "example": {
                "quality": 4,
                "interval": 6,
                "easeFactor": 2.6,
                "repetitions": 2,
            }
        }


class ReplayRequest(ReviewStateFields):
    """Model for recalculating a state from a history of ratings."""

    qualities: list[StrictInt] = Field(..., description="Ratings in the order they were given")


class ReviewResponse(BaseModel):
    """Next scheduling state returned by the API."""

    interval: int
    easeFactor: float
    repetitions: int
    dueDate: str = Field(..., description="Next review day (YYYY-MM-DD, local time)")
    qualityLabel: str | None = Field(None, description="Meaning of the last rating applied")


class OverdueResponse(BaseModel):
    """Overdue status of a stored due date."""

    dueDate: str
    overdue: bool
    daysUntil: int = Field(..., description="Days from today to the due day (negative when overdue)")
