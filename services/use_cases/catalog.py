"""
Reference data use cases: employees, services and organizations.

Reference data is never removed from storage. Deleting hides an entry
from selection lists while appointments keep resolving it by ID.
"""
import logging
from typing import Any, ClassVar, Mapping, Type, TypeVar, Union

from pydantic import BaseModel

from core.dto import (
    CreateEmployeeDTO,
    CreateOrganizationDTO,
    CreateServiceDTO,
    UpdateEmployeeDTO,
    UpdateOrganizationDTO,
    UpdateServiceDTO,
    validate_dto,
)
from core.entities import Employee, Organization, Service
from services.state import SoftDeleteStore
from services.use_cases.base import BaseUseCase

logger = logging.getLogger(__name__)

EntityType = TypeVar("EntityType")


class CatalogUseCase(BaseUseCase[EntityType]):
    """Use case bound to one reference data store."""

    store_name: ClassVar[str]

    @property
    def store(self) -> SoftDeleteStore:
        return getattr(self.state, self.store_name)


class AddEntityUseCase(CatalogUseCase[EntityType]):
    """Validate and persist a new reference entry."""

    dto_class: ClassVar[Type[BaseModel]]

    async def execute(self, data: Union[BaseModel, Mapping[str, Any]]) -> EntityType:
        dto = validate_dto(self.dto_class, data)
        try:
            entity = await self.store.add(dto.model_dump())
        except Exception as e:
            logger.error(f"Failed to add to {self.store_name}: {e}", exc_info=True)
            raise
        logger.info(f"Added to {self.store_name}: {entity.id}")
        return entity


class UpdateEntityUseCase(CatalogUseCase[EntityType]):
    """Apply partial changes to a reference entry; omitted fields are kept."""

    dto_class: ClassVar[Type[BaseModel]]

    async def execute(
        self,
        entity_id: str,
        changes: Union[BaseModel, Mapping[str, Any]]
    ) -> EntityType:
        self.store.require(entity_id)
        dto = validate_dto(self.dto_class, changes)
        data = {
            key: value
            for key, value in dto.model_dump(exclude_unset=True).items()
            if value is not None
        }
        try:
            return await self.store.update(entity_id, data)
        except Exception as e:
            logger.error(f"Failed to update {self.store_name} {entity_id}: {e}", exc_info=True)
            raise


class DeleteEntityUseCase(CatalogUseCase[str]):
    """Soft-delete a reference entry."""

    async def execute(self, entity_id: str) -> str:
        self.store.require(entity_id)
        try:
            await self.store.soft_delete(entity_id)
        except Exception as e:
            logger.error(f"Failed to delete {self.store_name} {entity_id}: {e}", exc_info=True)
            raise
        logger.info(f"Soft-deleted from {self.store_name}: {entity_id}")
        return entity_id


# ============== Employees ==============

class AddEmployeeUseCase(AddEntityUseCase[Employee]):
    store_name = "employees"
    dto_class = CreateEmployeeDTO


class UpdateEmployeeUseCase(UpdateEntityUseCase[Employee]):
    store_name = "employees"
    dto_class = UpdateEmployeeDTO


class DeleteEmployeeUseCase(DeleteEntityUseCase):
    store_name = "employees"


# ============== Services ==============

class AddServiceUseCase(AddEntityUseCase[Service]):
    store_name = "services"
    dto_class = CreateServiceDTO


class UpdateServiceUseCase(UpdateEntityUseCase[Service]):
    store_name = "services"
    dto_class = UpdateServiceDTO


class DeleteServiceUseCase(DeleteEntityUseCase):
    store_name = "services"


# ============== Organizations ==============

class AddOrganizationUseCase(AddEntityUseCase[Organization]):
    store_name = "organizations"
    dto_class = CreateOrganizationDTO


class UpdateOrganizationUseCase(UpdateEntityUseCase[Organization]):
    store_name = "organizations"
    dto_class = UpdateOrganizationDTO


class DeleteOrganizationUseCase(DeleteEntityUseCase):
    store_name = "organizations"
