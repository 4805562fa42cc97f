from django.db import models


class Employee(models.Model):
    """Модель сотрудника"""

    first_name = models.CharField(max_length=100, default='')
    last_name = models.CharField(max_length=100, default='')
    email = models.EmailField(max_length=254, default='', blank=True)

    class Meta:
        db_table = 'employees'
        verbose_name = 'Сотрудник'
        verbose_name_plural = 'Сотрудники'
        ordering = ['id']

    def __str__(self):
        return f"{self.last_name} {self.first_name}"
