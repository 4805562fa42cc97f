"""
Конфигурация приложения employees
"""
from django.apps import AppConfig


class EmployeesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'organization_management.apps.employees'
    label = 'employees'
    verbose_name = 'Сотрудники'
