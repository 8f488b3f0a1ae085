"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("", views.employee_table, name="employee_table"),
    path("employees/<int:key>/edit/", views.edit_employee, name="edit_employee"),
    path("employees/<int:key>/delete/", views.delete_employee, name="delete_employee"),
]
