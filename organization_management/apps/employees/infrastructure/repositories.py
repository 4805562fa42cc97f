import copy
from typing import Dict, List, Optional

from organization_management.apps.employees.models import Employee
from organization_management.apps.employees.domain.exceptions import EmployeeNotFoundError
from organization_management.apps.employees.domain.repositories import EmployeeRepository


class EmployeeRepositoryImpl(EmployeeRepository):
    """Хранилище сотрудников на Django ORM"""

    def save(self, employee: Employee) -> Employee:
        if employee.pk is None:
            employee.save()
            return employee

        # без отката в INSERT: удаленная запись не должна появиться снова
        fields = {
            field.attname: getattr(employee, field.attname)
            for field in Employee._meta.concrete_fields
            if not field.primary_key
        }
        if not Employee.objects.filter(pk=employee.pk).update(**fields):
            raise EmployeeNotFoundError(employee.pk)
        return employee

    def find_all(self) -> List[Employee]:
        return list(Employee.objects.all())

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        return Employee.objects.filter(pk=employee_id).first()

    def delete_by_id(self, employee_id: int) -> None:
        deleted, _ = Employee.objects.filter(pk=employee_id).delete()
        if not deleted:
            raise EmployeeNotFoundError(employee_id)


class InMemoryEmployeeRepository(EmployeeRepository):
    """
    Хранилище сотрудников в памяти процесса.

    Наружу всегда отдаются копии, чтобы изменения у вызывающего
    не попадали в хранилище без явного save().
    """

    def __init__(self):
        self._employees: Dict[int, Employee] = {}
        self._last_id = 0

    def save(self, employee: Employee) -> Employee:
        if employee.pk is None:
            self._last_id += 1
            employee.pk = self._last_id
        else:
            # записи с явным ID не должны пересекаться с выдаваемыми
            self._last_id = max(self._last_id, employee.pk)
        self._employees[employee.pk] = copy.copy(employee)
        return employee

    def find_all(self) -> List[Employee]:
        return [copy.copy(employee) for employee in self._employees.values()]

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        employee = self._employees.get(employee_id)
        return copy.copy(employee) if employee is not None else None

    def delete_by_id(self, employee_id: int) -> None:
        if self._employees.pop(employee_id, None) is None:
            raise EmployeeNotFoundError(employee_id)
