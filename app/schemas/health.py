"""Response body for GET /health."""

from typing import Literal

from pydantic import BaseModel, Field

DatabaseStatus = Literal["connected", "disconnected"]


class HealthResponse(BaseModel):
    """Liveness plus the result of a SELECT 1 run on every call."""

    status: Literal["ok"] = "ok"
    environment: Literal["dev", "prod"]
    database: DatabaseStatus = Field(description="Result of SELECT 1 on a pooled connection")
