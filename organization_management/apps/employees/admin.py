from django.contrib import admin
from organization_management.apps.employees.models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ['id', 'last_name', 'first_name', 'email']
    search_fields = ['last_name', 'first_name', 'email']
    ordering = ['last_name', 'first_name']
    fieldsets = (
        ('Основная информация', {
            'fields': ('last_name', 'first_name', 'email')
        }),
    )
