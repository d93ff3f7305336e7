from pydantic import BaseModel


class Guest(BaseModel):
    id: str
    name: str
    national_id: str
    phone: str

    def __repr__(self) -> str:
        return f"<Guest(id={self.id}, national_id={self.national_id})>"
