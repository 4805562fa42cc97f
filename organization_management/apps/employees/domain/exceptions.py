class EmployeeDomainError(Exception):
    """Базовая ошибка доменного слоя сотрудников"""


class EmployeeNotFoundError(EmployeeDomainError):
    """Сотрудник с указанным идентификатором не найден"""

    def __init__(self, employee_id):
        self.employee_id = employee_id
        super().__init__(f"Employee with id {employee_id} not found.")
