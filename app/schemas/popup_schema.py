from pydantic import BaseModel, Field, ConfigDict


class PopupIn(BaseModel):
    title: str
    content: str
    active: bool = False


# Stored in the popups collection of the site document
class Popup(BaseModel):
    id: int
    title: str = ""
    content: str = ""
    active: bool = False
    created_at: str = Field(alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)
