from abc import ABC, abstractmethod
from typing import List, Optional

from organization_management.apps.employees.models import Employee


class EmployeeRepository(ABC):
    @abstractmethod
    def save(self, employee: Employee) -> Employee:
        pass

    @abstractmethod
    def find_all(self) -> List[Employee]:
        pass

    @abstractmethod
    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        pass

    @abstractmethod
    def delete_by_id(self, employee_id: int) -> None:
        """Удаляет запись; EmployeeNotFoundError, если записи нет"""
        pass
