import pytest
from organization_management.apps.employees.application.services import EmployeeApplicationService
from organization_management.apps.employees.domain.exceptions import EmployeeNotFoundError
from organization_management.apps.employees.domain.value_objects import EmployeeDetails
from organization_management.apps.employees.infrastructure.repositories import InMemoryEmployeeRepository
from organization_management.apps.employees.models import Employee


@pytest.fixture
def service():
    return EmployeeApplicationService(employee_repository=InMemoryEmployeeRepository())


def _fields(employee):
    return employee.first_name, employee.last_name, employee.email


class TestEmployeeLifecycleInMemory:
    def test_create_assigns_identifier(self, service):
        employee = service.create_employee(
            Employee(first_name='Ann', last_name='Lee', email='ann@x.com')
        )

        assert employee.id == 1
        assert _fields(employee) == ('Ann', 'Lee', 'ann@x.com')

    def test_identifiers_are_unique(self, service):
        first = service.create_employee(Employee(first_name='Ann'))
        second = service.create_employee(Employee(first_name='Bob'))

        assert first.id != second.id

    def test_get_employees_contains_exactly_created(self, service):
        created = [
            service.create_employee(Employee(first_name=name, last_name='Lee', email=f'{name}@x.com'))
            for name in ('Ann', 'Bob', 'Cid')
        ]

        listed = service.get_employees()

        assert {(e.id, *_fields(e)) for e in listed} == {(e.id, *_fields(e)) for e in created}

    def test_update_then_delete_scenario(self, service):
        """Сценарий: создание, обновление, удаление"""
        created = service.create_employee(
            Employee(first_name='Ann', last_name='Lee', email='ann@x.com')
        )

        updated = service.update_employee(
            created.id, EmployeeDetails(first_name='Anne', last_name='Lee', email='ann@x.com')
        )
        assert updated.id == created.id
        assert _fields(updated) == ('Anne', 'Lee', 'ann@x.com')
        assert _fields(service.get_employee(created.id)) == ('Anne', 'Lee', 'ann@x.com')

        service.delete_employee(created.id)
        assert created.id not in {e.id for e in service.get_employees()}

    def test_update_missing_does_not_create(self, service):
        with pytest.raises(EmployeeNotFoundError):
            service.update_employee(10, EmployeeDetails('Anne', 'Lee', 'ann@x.com'))

        assert service.get_employees() == []

    def test_delete_missing_raises(self, service):
        with pytest.raises(EmployeeNotFoundError):
            service.delete_employee(10)

    def test_returned_records_are_copies(self, service):
        created = service.create_employee(Employee(first_name='Ann'))

        listed = service.get_employees()[0]
        listed.first_name = 'Changed'

        assert service.get_employee(created.id).first_name == 'Ann'

    def test_create_after_explicit_id_does_not_overwrite(self):
        """Запись с явным ID не перезаписывается при создании следующей"""
        repository = InMemoryEmployeeRepository()
        repository.save(Employee(id=1, first_name='Ann'))
        service = EmployeeApplicationService(employee_repository=repository)

        created = service.create_employee(Employee(first_name='Bob'))

        assert created.id != 1
        assert {e.first_name for e in service.get_employees()} == {'Ann', 'Bob'}
