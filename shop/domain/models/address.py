# shop/domain/models/address.py
from pydantic import BaseModel, ConfigDict


class Address(BaseModel):
    model_config = ConfigDict(frozen=True)

    street: str
    city: str
    zip_code: str
    country: str

    @property
    def formatted_address(self) -> str:
        return f"{self.street}\n{self.city}, {self.zip_code}\n{self.country}"
