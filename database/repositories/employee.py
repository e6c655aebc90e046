"""Employee repository for database operations."""
from core.entities import Employee
from database.models import EmployeeModel
from database.repositories.base import BaseRepository


class EmployeeRepository(BaseRepository[EmployeeModel, Employee]):
    """Repository for Employee documents."""
    
    model_class = EmployeeModel
    entity_class = Employee
