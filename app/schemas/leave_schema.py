from pydantic import BaseModel, Field, ConfigDict


DEFAULT_LEAVE_NAME = "Verlof"


class LeavePeriodIn(BaseModel):
    start_date: str
    end_date: str
    name: str | None = None


# Stored in the leavePeriods collection of the site document
class LeavePeriod(BaseModel):
    id: int
    name: str = DEFAULT_LEAVE_NAME
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    created_at: str = Field(alias="createdAt")

    # Allow using field names or aliases
    model_config = ConfigDict(populate_by_name=True)
