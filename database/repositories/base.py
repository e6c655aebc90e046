"""
Base repository with common CRUD operations.

Every collection in storage exposes the same contract used by the in-memory
stores: get_all, add, update, delete. Each call runs in its own transaction,
so an operation either fully succeeds or raises.
"""
from abc import ABC
from dataclasses import asdict, fields, is_dataclass
from enum import Enum
from typing import Any, Dict, Generic, List, Mapping, Optional, Type, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import RecordNotFoundError
from database.base import Base, async_session_maker

# Type variables for ORM model and domain entity classes
ModelType = TypeVar("ModelType", bound=Base)
EntityType = TypeVar("EntityType")


class BaseRepository(ABC, Generic[ModelType, EntityType]):
    """
    Abstract base repository with common CRUD operations.
    
    Provides:
    - get_all: Get all documents of the collection
    - get_by_id: Get single document by ID
    - add: Insert new document, storage assigns the ID
    - update: Apply partial changes to a document
    - delete: Delete document by ID
    - delete_all: Delete every document of the collection
    - count: Count all documents
    
    Rows are converted to domain entities on the way out, so callers never
    hold ORM instances.
    
    Usage:
        class EmployeeRepository(BaseRepository[EmployeeModel, Employee]):
            model_class = EmployeeModel
            entity_class = Employee
    """
    
    model_class: Type[ModelType]
    entity_class: Type[EntityType]
    
    def __init__(self, session_maker: async_sessionmaker[AsyncSession] = async_session_maker):
        """Initialize repository with a session factory."""
        self.session_maker = session_maker
    
    @property
    def collection(self) -> str:
        return self.model_class.__tablename__
    
    def to_entity(self, row: ModelType) -> EntityType:
        """Convert ORM row to domain entity."""
        return self.entity_class(
            **{f.name: getattr(row, f.name) for f in fields(self.entity_class)}
        )
    
    def to_values(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Convert entity fields to column values (ID is never written)."""
        values = {}
        for key, value in data.items():
            if key == "id":
                continue
            if isinstance(value, Enum):
                value = value.value
            elif is_dataclass(value):
                value = asdict(value)
            values[key] = value
        return values
    
    async def get_all(self) -> List[EntityType]:
        """
        Get all documents.
        
        Returns:
            List of entities
        """
        async with self.session_maker() as session:
            result = await session.execute(select(self.model_class))
            return [self.to_entity(row) for row in result.scalars().all()]
    
    async def get_by_id(self, entity_id: str) -> Optional[EntityType]:
        """
        Get document by its ID.
        
        Args:
            entity_id: Document ID
            
        Returns:
            Entity or None if not found
        """
        async with self.session_maker() as session:
            row = await session.get(self.model_class, entity_id)
            return self.to_entity(row) if row else None
    
    async def add(self, data: Mapping[str, Any]) -> EntityType:
        """
        Insert a new document.
        
        Args:
            data: Field values without ID
            
        Returns:
            Created entity with storage-assigned ID
        """
        async with self.session_maker() as session, session.begin():
            row = self.model_class(**self.to_values(data))
            session.add(row)
            await session.flush()
        return self.to_entity(row)
    
    async def update(self, entity_id: str, data: Mapping[str, Any]) -> EntityType:
        """
        Apply partial changes to a document.
        
        Args:
            entity_id: Document ID
            data: Fields to overwrite
            
        Returns:
            Entity as stored after the update
            
        Raises:
            RecordNotFoundError: If document doesn't exist
        """
        async with self.session_maker() as session, session.begin():
            row = await session.get(self.model_class, entity_id)
            if row is None:
                raise RecordNotFoundError(self.collection, entity_id)
            for key, value in self.to_values(data).items():
                setattr(row, key, value)
        return self.to_entity(row)
    
    async def delete(self, entity_id: str) -> str:
        """
        Delete document by ID.
        
        Args:
            entity_id: Document ID
            
        Returns:
            The deleted ID
        """
        async with self.session_maker() as session, session.begin():
            await session.execute(
                delete(self.model_class).where(self.model_class.id == entity_id)
            )
        return entity_id
    
    async def delete_all(self) -> int:
        """
        Delete every document of the collection.
        
        Returns:
            Number of deleted documents
        """
        async with self.session_maker() as session, session.begin():
            result = await session.execute(delete(self.model_class))
        return result.rowcount or 0
    
    async def count(self) -> int:
        """Count all documents."""
        async with self.session_maker() as session:
            result = await session.execute(
                select(func.count(self.model_class.id))
            )
            return result.scalar() or 0
