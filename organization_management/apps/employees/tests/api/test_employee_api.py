import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient
from organization_management.apps.employees.models import Employee


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def employee():
    return Employee.objects.create(first_name='Ann', last_name='Lee', email='ann@x.com')


@pytest.mark.django_db
class TestEmployeeViewSetAPI:
    def test_get_employee_list(self, api_client, employee):
        """Тест получения списка сотрудников"""
        response = api_client.get(reverse('employee-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data == [
            {'id': employee.id, 'first_name': 'Ann', 'last_name': 'Lee', 'email': 'ann@x.com'}
        ]

    def test_create_employee(self, api_client):
        """Тест создания сотрудника"""
        response = api_client.post(
            reverse('employee-list'),
            {'first_name': 'Ann', 'last_name': 'Lee', 'email': 'ann@x.com'},
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['id'] is not None
        assert response.data['first_name'] == 'Ann'
        assert Employee.objects.filter(pk=response.data['id']).exists()

    def test_create_ignores_client_id(self, api_client, employee):
        response = api_client.post(
            reverse('employee-list'),
            {'id': employee.id, 'first_name': 'Bob', 'last_name': 'Ray', 'email': 'bob@x.com'},
            format='json',
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['id'] != employee.id
        assert Employee.objects.count() == 2

    def test_retrieve_employee(self, api_client, employee):
        response = api_client.get(reverse('employee-detail', args=[employee.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['email'] == 'ann@x.com'

    def test_update_employee(self, api_client, employee):
        """Тест обновления сотрудника"""
        response = api_client.put(
            reverse('employee-detail', args=[employee.id]),
            {'first_name': 'Anne', 'last_name': 'Lee', 'email': 'anne@x.com'},
            format='json',
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == employee.id
        employee.refresh_from_db()
        assert employee.first_name == 'Anne'
        assert employee.email == 'anne@x.com'

    def test_update_missing_employee(self, api_client):
        response = api_client.put(
            reverse('employee-detail', args=[999]),
            {'first_name': 'Anne', 'last_name': 'Lee', 'email': 'anne@x.com'},
            format='json',
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert Employee.objects.count() == 0

    def test_partial_update_not_allowed(self, api_client, employee):
        response = api_client.patch(
            reverse('employee-detail', args=[employee.id]),
            {'first_name': 'Anne'},
            format='json',
        )

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED

    def test_delete_employee(self, api_client, employee):
        """Тест удаления сотрудника"""
        response = api_client.delete(reverse('employee-detail', args=[employee.id]))

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Employee.objects.filter(pk=employee.id).exists()

    def test_delete_missing_employee(self, api_client):
        response = api_client.delete(reverse('employee-detail', args=[999]))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert 'detail' in response.data

    def test_retrieve_out_of_range_id(self, api_client):
        response = api_client.get('/api/employees/employees/99999999999999999999999/')

        assert response.status_code == status.HTTP_404_NOT_FOUND
