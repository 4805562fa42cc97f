from django.test import TestCase
from organization_management.apps.employees.application.services import EmployeeApplicationService
from organization_management.apps.employees.domain.exceptions import EmployeeNotFoundError
from organization_management.apps.employees.domain.value_objects import EmployeeDetails
from organization_management.apps.employees.models import Employee


class EmployeeApplicationServiceTest(TestCase):
    def setUp(self):
        self.service = EmployeeApplicationService()
        self.employee = Employee.objects.create(
            first_name='Test',
            last_name='User',
            email='test.user@example.com',
        )

    def test_create_employee(self):
        employee = self.service.create_employee(
            Employee(first_name='New', last_name='Employee', email='new@example.com')
        )
        self.assertIsNotNone(employee.id)
        self.assertEqual(employee.first_name, 'New')
        self.assertEqual(Employee.objects.count(), 2)

    def test_get_employees(self):
        employees = self.service.get_employees()
        self.assertEqual([e.id for e in employees], [self.employee.id])

    def test_update_employee(self):
        self.service.update_employee(
            self.employee.id,
            EmployeeDetails(first_name='Changed', last_name='Name', email='changed@example.com'),
        )

        self.employee.refresh_from_db()
        self.assertEqual(self.employee.first_name, 'Changed')
        self.assertEqual(self.employee.last_name, 'Name')
        self.assertEqual(self.employee.email, 'changed@example.com')

    def test_delete_employee(self):
        self.service.delete_employee(self.employee.id)
        self.assertFalse(Employee.objects.filter(pk=self.employee.id).exists())

    def test_delete_employee_twice(self):
        self.service.delete_employee(self.employee.id)
        with self.assertRaises(EmployeeNotFoundError):
            self.service.delete_employee(self.employee.id)
