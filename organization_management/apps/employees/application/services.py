"""
Сервисный слой для управления сотрудниками
"""
import logging
from typing import List, Optional

from organization_management.apps.employees.models import Employee
from organization_management.apps.employees.domain.exceptions import EmployeeNotFoundError
from organization_management.apps.employees.domain.repositories import EmployeeRepository
from organization_management.apps.employees.infrastructure.repositories import EmployeeRepositoryImpl

logger = logging.getLogger(__name__)


class EmployeeApplicationService:
    """
    Создание, просмотр, изменение и удаление сотрудников.

    Вся работа с хранилищем идет через EmployeeRepository. Ошибки
    хранилища (DatabaseError и т.п.) пробрасываются вызывающему без изменений.
    """

    def __init__(self, employee_repository: Optional[EmployeeRepository] = None):
        self.employee_repository = employee_repository or EmployeeRepositoryImpl()

    def create_employee(self, employee: Employee) -> Employee:
        """
        Сохранение нового сотрудника

        Args:
            employee: Сотрудник; переданный идентификатор игнорируется

        Returns:
            Employee: Сохраненный сотрудник с присвоенным идентификатором
        """
        employee.pk = None
        employee = self.employee_repository.save(employee)
        logger.info(f"Создан сотрудник {employee.pk}")
        return employee

    def get_employees(self) -> List[Employee]:
        """Все сотрудники в порядке, который вернуло хранилище"""
        return list(self.employee_repository.find_all())

    def get_employee(self, employee_id: int) -> Employee:
        employee = self.employee_repository.find_by_id(employee_id)
        if employee is None:
            logger.warning(f"Сотрудник {employee_id} не найден")
            raise EmployeeNotFoundError(employee_id)
        return employee

    def delete_employee(self, employee_id: int) -> None:
        """
        Удаление сотрудника

        Raises:
            EmployeeNotFoundError: если сотрудника с таким ID нет
        """
        try:
            self.employee_repository.delete_by_id(employee_id)
        except EmployeeNotFoundError:
            logger.warning(f"Удаление: сотрудник {employee_id} не найден")
            raise
        logger.info(f"Удален сотрудник {employee_id}")

    def update_employee(self, employee_id: int, employee_details) -> Employee:
        """
        Обновление ФИО и email сотрудника

        Копируются ровно три поля: first_name, last_name, email.
        Идентификатор не меняется. Если сотрудника нет, запись не создается.

        Args:
            employee_id: ID сотрудника
            employee_details: Объект с полями first_name, last_name, email

        Returns:
            Employee: Обновленный сотрудник

        Raises:
            EmployeeNotFoundError: если сотрудника с таким ID нет
        """
        employee = self.get_employee(employee_id)
        employee.first_name = employee_details.first_name
        employee.last_name = employee_details.last_name
        employee.email = employee_details.email
        employee = self.employee_repository.save(employee)
        logger.info(f"Обновлен сотрудник {employee_id}")
        return employee
