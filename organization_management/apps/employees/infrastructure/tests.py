from django.test import TestCase
from organization_management.apps.employees.domain.exceptions import EmployeeNotFoundError
from organization_management.apps.employees.infrastructure.repositories import (
    EmployeeRepositoryImpl,
    InMemoryEmployeeRepository,
)
from organization_management.apps.employees.models import Employee


class EmployeeRepositoryImplTest(TestCase):
    def setUp(self):
        self.repository = EmployeeRepositoryImpl()

    def test_save_assigns_id(self):
        employee = self.repository.save(Employee(first_name='Ann', last_name='Lee'))
        self.assertIsNotNone(employee.id)
        self.assertEqual(Employee.objects.count(), 1)

    def test_save_existing_updates_row(self):
        employee = Employee.objects.create(first_name='Ann', last_name='Lee')
        employee.first_name = 'Anne'
        self.repository.save(employee)
        self.assertEqual(Employee.objects.get(pk=employee.pk).first_name, 'Anne')
        self.assertEqual(Employee.objects.count(), 1)

    def test_find_by_id_missing_returns_none(self):
        self.assertIsNone(self.repository.find_by_id(404))

    def test_find_all(self):
        first = Employee.objects.create(first_name='Ann')
        second = Employee.objects.create(first_name='Bob')
        self.assertCountEqual(self.repository.find_all(), [first, second])

    def test_save_deleted_row_raises_not_found(self):
        employee = Employee.objects.create(first_name='Ann')
        Employee.objects.filter(pk=employee.pk).delete()
        employee.first_name = 'Anne'
        with self.assertRaises(EmployeeNotFoundError):
            self.repository.save(employee)
        self.assertEqual(Employee.objects.count(), 0)

    def test_delete_by_id_missing_raises(self):
        with self.assertRaises(EmployeeNotFoundError):
            self.repository.delete_by_id(404)


class InMemoryEmployeeRepositoryTest(TestCase):
    def setUp(self):
        self.repository = InMemoryEmployeeRepository()

    def test_save_keeps_existing_id(self):
        employee = self.repository.save(Employee(first_name='Ann'))
        employee.first_name = 'Anne'
        self.repository.save(employee)
        self.assertEqual(len(self.repository.find_all()), 1)
        self.assertEqual(self.repository.find_by_id(employee.id).first_name, 'Anne')

    def test_delete_by_id(self):
        employee = self.repository.save(Employee(first_name='Ann'))
        self.repository.delete_by_id(employee.id)
        self.assertIsNone(self.repository.find_by_id(employee.id))
        with self.assertRaises(EmployeeNotFoundError):
            self.repository.delete_by_id(employee.id)
