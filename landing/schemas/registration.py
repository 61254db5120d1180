from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator
from datetime import datetime

class WaitlistSubmission(BaseModel):
    # Solo texto: números, listas o null no se convierten a str
    email: StrictStr = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def email_has_at_sign(cls, value: str) -> str:
        # Única validación de formato: debe contener '@'
        if "@" not in value:
            raise ValueError("email must contain '@'")
        return value

class RegistrationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    created_at: datetime

class WaitlistResponse(BaseModel):
    success: bool
    message: str

class CountResponse(BaseModel):
    count: int

class ErrorResponse(BaseModel):
    error: str
