from pydantic import BaseModel, Field


class NewUserRequest(BaseModel):
    """Administrative request schema for mirroring an identity provider account."""
    id: str = Field(..., min_length=1, description="Appwrite id of the user")
    username: str = Field(..., min_length=1, max_length=255, description="Display name")
    admin_key: str = Field(..., description="Administrative key")
