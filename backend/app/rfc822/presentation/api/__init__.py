# FastAPI routers - emails, health
from app.rfc822.presentation.api import emails, health

__all__ = ["health", "emails"]
