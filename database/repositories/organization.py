"""Organization repository for database operations."""
from core.entities import Organization
from database.models import OrganizationModel
from database.repositories.base import BaseRepository


class OrganizationRepository(BaseRepository[OrganizationModel, Organization]):
    """Repository for Organization documents."""
    
    model_class = OrganizationModel
    entity_class = Organization
