"""
Health check response model.
Fixed-shape status document for liveness probes.
"""
from typing import Literal

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: Literal["healthy"] = "healthy"
    timestamp: str
    region: str

    class Config:
        from_attributes = True
