from app.models.repository import Repository

__all__ = ["Repository"]
