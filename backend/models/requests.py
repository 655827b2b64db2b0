from pydantic import BaseModel, Field


class ParseResumeRequest(BaseModel):
    user_id: str | None = Field(None, max_length=64, description="Existing profile id; a new one is created when omitted")
    name: str = Field("", max_length=200, description="Display name")
    text: str = Field(..., max_length=50000, description="Plain text resume content")


class UpdateProfileRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    bio: str | None = Field(None, max_length=2000)
    skills: list[str] | None = Field(None, description="Replaces the stored skills")
    availability: str | None = Field(None, min_length=1, max_length=100)
