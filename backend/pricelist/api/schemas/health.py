"""Health endpoint payloads."""

from pydantic import BaseModel


class HealthStatus(BaseModel):
    status: str
    timestamp: str


class ReadinessStatus(BaseModel):
    status: str
    database: str
