from dataclasses import dataclass


@dataclass(frozen=True)
class EmployeeDetails:
    """Изменяемые реквизиты сотрудника, передаваемые при обновлении"""
    first_name: str
    last_name: str
    email: str

    def __str__(self):
        return f"{self.last_name} {self.first_name} <{self.email}>"
