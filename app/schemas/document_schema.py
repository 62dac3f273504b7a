from pydantic import BaseModel, Field, ConfigDict

from app.schemas.leave_schema import LeavePeriod
from app.schemas.popup_schema import Popup


class SiteDocument(BaseModel):
    """Root aggregate persisted as one JSON file.

    Both collections keep insertion order, which is also display order.
    """

    leave_periods: list[LeavePeriod] = Field(default_factory=list, alias="leavePeriods")
    popups: list[Popup] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True)
