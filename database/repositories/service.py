"""Service repository for database operations."""
from core.entities import Service
from database.models import ServiceModel
from database.repositories.base import BaseRepository


class ServiceRepository(BaseRepository[ServiceModel, Service]):
    """Repository for catalog Service documents."""
    
    model_class = ServiceModel
    entity_class = Service
