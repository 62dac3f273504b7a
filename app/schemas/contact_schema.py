from pydantic import BaseModel


class ContactIn(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    subject: str = ""
    message: str = ""

    def missing_fields(self) -> list[str]:
        return [k for k, v in self.model_dump().items() if not (v or "").strip()]
