"""
API Views для управления сотрудниками
"""
from rest_framework import viewsets, permissions, status
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from organization_management.apps.employees.models import Employee
from organization_management.apps.employees.application.services import EmployeeApplicationService
from organization_management.apps.employees.domain.exceptions import EmployeeNotFoundError
from organization_management.apps.employees.domain.value_objects import EmployeeDetails

from .serializers import EmployeeSerializer


@extend_schema(tags=['employees'])
class EmployeeViewSet(viewsets.ViewSet):
    """
    ViewSet для управления сотрудниками

    Endpoints:
    - GET /employees/ - Список сотрудников
    - POST /employees/ - Создание сотрудника
    - GET /employees/{id}/ - Сотрудник по ID
    - PUT /employees/{id}/ - Обновление ФИО и email
    - DELETE /employees/{id}/ - Удаление сотрудника
    """
    serializer_class = EmployeeSerializer
    permission_classes = [permissions.AllowAny]
    lookup_value_regex = r'\d+'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.service = EmployeeApplicationService()

    @staticmethod
    def _not_found(error: EmployeeNotFoundError) -> Response:
        return Response({'detail': str(error)}, status=status.HTTP_404_NOT_FOUND)

    @extend_schema(responses=EmployeeSerializer(many=True))
    def list(self, request):
        employees = self.service.get_employees()
        return Response(EmployeeSerializer(employees, many=True).data)

    @extend_schema(request=EmployeeSerializer, responses={201: EmployeeSerializer})
    def create(self, request):
        serializer = EmployeeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        employee = self.service.create_employee(Employee(**serializer.validated_data))
        return Response(EmployeeSerializer(employee).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses=EmployeeSerializer)
    def retrieve(self, request, pk=None):
        try:
            employee = self.service.get_employee(int(pk))
        except EmployeeNotFoundError as e:
            return self._not_found(e)
        return Response(EmployeeSerializer(employee).data)

    @extend_schema(request=EmployeeSerializer, responses=EmployeeSerializer)
    def update(self, request, pk=None):
        serializer = EmployeeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        details = EmployeeDetails(
            first_name=serializer.validated_data.get('first_name', ''),
            last_name=serializer.validated_data.get('last_name', ''),
            email=serializer.validated_data.get('email', ''),
        )
        try:
            employee = self.service.update_employee(int(pk), details)
        except EmployeeNotFoundError as e:
            return self._not_found(e)
        return Response(EmployeeSerializer(employee).data)

    def destroy(self, request, pk=None):
        try:
            self.service.delete_employee(int(pk))
        except EmployeeNotFoundError as e:
            return self._not_found(e)
        return Response(status=status.HTTP_204_NO_CONTENT)
