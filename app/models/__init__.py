from app.models.health import HealthResponse
