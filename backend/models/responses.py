from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"
    gemini_configured: bool = False
