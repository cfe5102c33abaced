from src.veloria.client.auth import AuthSession
from src.veloria.client.calendar import CalendarLoader, projects_calendar
from src.veloria.client.dashboard import DashboardSummary, load_dashboard
from src.veloria.client.http import ApiClient, ApiError
from src.veloria.client.project_form import FormValidationError, ProjectForm
from src.veloria.client.storage import LocalStorage
from src.veloria.client.theme import ThemePreference

__all__ = [
    "ApiClient",
    "ApiError",
    "AuthSession",
    "CalendarLoader",
    "DashboardSummary",
    "FormValidationError",
    "LocalStorage",
    "ProjectForm",
    "ThemePreference",
    "load_dashboard",
    "projects_calendar",
]
