from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Token(BaseModel):
    access_token: str = Field(..., description="Access token string.")
    token_type: str = Field("bearer", description="Type of the token, always 'bearer'.")
    expires_in: int = Field(..., description="Time in seconds before token expires.")


class AdminUserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    full_name: str | None = None
    is_active: bool
    last_login_at: datetime | None = None
