"""Editable state behind the admin project form.

The form keeps one camelCase project dict. Every edit builds a new dict and
copies only the group it touches, so callers holding the previous state (an
undo stack, a change detector) see it unchanged.
"""

import datetime as dt
from typing import Any
from uuid import uuid4

from src.veloria.client.http import ApiClient, ApiError
from src.veloria.core.logging import get_logger
from src.veloria.schemas.project import HEX_COLOR_RE, coerce_color, coerce_font, cut_iso_date

logger = get_logger(__name__)

LIST_GROUPS = frozenset({"milestones", "paymentSchedule", "additionalServices"})
REQUIRED_FIELDS = (
    "projectName",
    "projectDescription",
    "serviceType",
    "companyName",
    "name",
    "email",
)
SAVE_FAILED = "Failed to save project. Please try again."


class FormValidationError(ValueError):
    """A problem the user has to fix before the form can be sent."""


def _group_defaults() -> dict[str, dict[str, Any]]:
    return {
        "designChoices": {
            "colorPalette": [],
            "fonts": [],
            "designNotes": "",
            "approvalStatus": "pending",
        },
        "contentStatus": {"images": "not_started", "text": "not_started", "notes": ""},
        "hosting": {
            "provider": "",
            "account": "",
            "renewalDate": "",
            "cost": 0,
            "loginInfo": "",
            "notes": "",
        },
        "domain": {
            "name": "",
            "registrar": "",
            "renewalDate": "",
            "cost": 0,
            "loginInfo": "",
            "notes": "",
        },
        "referredBy": {
            "name": "",
            "email": "",
            "phone": "",
            "commissionPercentage": 0,
            "notes": "",
        },
    }


def blank_project(today: dt.date | None = None) -> dict[str, Any]:
    """Starting state for a new project: starts today, due in 30 days."""
    today = today or dt.date.today()
    return {
        "projectName": "",
        "projectDescription": "",
        "projectGoals": [""],
        "serviceType": "custom",
        "budget": "",
        "timeline": "standard",
        "companyName": "",
        "companyWebsite": "",
        "industry": "",
        "targetAudience": "",
        "name": "",
        "email": "",
        "phone": "",
        "status": "new",
        "notes": "",
        "workflowStage": "discovery",
        "projectValue": 0,
        "paymentSchedule": [],
        "milestones": [],
        "additionalServices": [],
        "startDate": today.isoformat(),
        "deadline": (today + dt.timedelta(days=30)).isoformat(),
        **_group_defaults(),
    }


def _form_date(value: Any) -> str:
    cut = cut_iso_date(value)
    if cut is None:
        return ""
    if isinstance(cut, dt.date):
        return cut.isoformat()
    return cut


def normalize_project(data: dict[str, Any]) -> dict[str, Any]:
    """Shape a fetched project for editing.

    Fills missing groups with defaults, upgrades legacy palette and font
    strings, and cuts timestamps to ``YYYY-MM-DD``.
    """
    project = dict(data)

    for key in ("startDate", "deadline"):
        if project.get(key):
            project[key] = _form_date(project[key])

    for key in LIST_GROUPS:
        project[key] = [dict(item) for item in project.get(key) or []]
    if not project.get("projectGoals"):
        project["projectGoals"] = [""]

    for group, defaults in _group_defaults().items():
        project[group] = {**defaults, **(project.get(group) or {})}

    for group in ("hosting", "domain"):
        project[group]["renewalDate"] = _form_date(project[group]["renewalDate"])

    design = project["designChoices"]
    design["colorPalette"] = [coerce_color(c) for c in design["colorPalette"] or []]
    design["fonts"] = [coerce_font(f) for f in design["fonts"] or []]

    for item in project["paymentSchedule"]:
        for key in ("dueDate", "paidDate"):
            if item.get(key):
                item[key] = _form_date(item[key])
    for item in project["milestones"]:
        for key in ("dueDate", "completedDate"):
            if item.get(key):
                item[key] = _form_date(item[key])

    return project


class ProjectForm:
    """Project editor bound to an API client.

    ``project_id`` is None until the project exists on the server.
    """

    def __init__(
        self,
        client: ApiClient,
        project: dict[str, Any] | None = None,
        project_id: str | None = None,
    ):
        self.client = client
        self.project_id = project_id
        self.project = normalize_project(project) if project is not None else blank_project()
        self.error: str | None = None

    @classmethod
    async def fetch(cls, client: ApiClient, project_id: str) -> "ProjectForm":
        data = await client.get(
            f"/projects/admin/{project_id}",
            fallback="Failed to load project. Please try again.",
        )
        return cls(client, data, project_id=project_id)

    @property
    def is_new(self) -> bool:
        return self.project_id is None

    # --- Field editing ---

    def update_field(self, name: str, value: Any) -> dict[str, Any]:
        self.project = {**self.project, name: value}
        return self.project

    def update_nested_field(self, group: str, field: str, value: Any) -> dict[str, Any]:
        """Set ``project[group][field]``; other groups and fields are untouched."""
        if group in LIST_GROUPS:
            raise KeyError(f"{group} is a list group, use replace_list")
        updated_group = {**(self.project.get(group) or {}), field: value}
        self.project = {**self.project, group: updated_group}
        return self.project

    def replace_list(self, group: str, items: list[dict[str, Any]]) -> dict[str, Any]:
        if group not in LIST_GROUPS:
            raise KeyError(f"{group} is not a list group")
        return self.update_field(group, list(items))

    def add_goal(self) -> None:
        self.update_field("projectGoals", [*self.project["projectGoals"], ""])

    def set_goal(self, index: int, value: str) -> None:
        goals = list(self.project["projectGoals"])
        goals[index] = value
        self.update_field("projectGoals", goals)

    def remove_goal(self, index: int) -> None:
        goals = list(self.project["projectGoals"])
        del goals[index]
        self.update_field("projectGoals", goals)

    # --- Sub-editors ---

    def add_color(self, color: str, category: str = "primary", name: str = "") -> None:
        if not color:
            raise FormValidationError("Please enter a color hex code")
        if not HEX_COLOR_RE.match(color):
            raise FormValidationError("Please enter a valid hex color (e.g. #FF5733)")
        palette = self.project["designChoices"].get("colorPalette", [])
        self.update_nested_field(
            "designChoices",
            "colorPalette",
            [*palette, {"color": color, "category": category, "name": name}],
        )

    def remove_color(self, index: int) -> None:
        palette = list(self.project["designChoices"].get("colorPalette", []))
        del palette[index]
        self.update_nested_field("designChoices", "colorPalette", palette)

    def add_font(self, family: str, category: str = "primary", source: str = "") -> None:
        if not family.strip():
            raise FormValidationError("Please enter a font family")
        fonts = self.project["designChoices"].get("fonts", [])
        self.update_nested_field(
            "designChoices",
            "fonts",
            [*fonts, {"family": family.strip(), "category": category, "source": source}],
        )

    def remove_font(self, index: int) -> None:
        fonts = list(self.project["designChoices"].get("fonts", []))
        del fonts[index]
        self.update_nested_field("designChoices", "fonts", fonts)

    def add_payment(
        self, name: str, amount: float, due_date: dt.date | str, notes: str = ""
    ) -> dict[str, Any]:
        """Append a pending payment and add its amount to the project value."""
        if not name or not amount or not due_date:
            raise FormValidationError("Please fill in all required payment fields")
        amount = float(amount)
        if amount <= 0:
            raise FormValidationError("Payment amount must be greater than zero")

        payment = {
            "id": uuid4().hex,
            "name": name,
            "amount": amount,
            "dueDate": _form_date(due_date),
            "status": "pending",
            "paidDate": None,
            "notes": notes,
        }
        self.update_field("paymentSchedule", [*self.project["paymentSchedule"], payment])
        self.update_field("projectValue", float(self.project.get("projectValue") or 0) + amount)
        return payment

    def add_milestone(
        self, name: str, due_date: dt.date | str, description: str = ""
    ) -> dict[str, Any]:
        if not name or not due_date:
            raise FormValidationError("Please fill in all required milestone fields")
        milestone = {
            "id": uuid4().hex,
            "name": name,
            "description": description,
            "dueDate": _form_date(due_date),
            "status": "pending",
            "completedDate": None,
        }
        self.update_field("milestones", [*self.project["milestones"], milestone])
        return milestone

    def add_service(self, name: str, description: str = "", price: float = 0) -> dict[str, Any]:
        if not name:
            raise FormValidationError("Please enter a service name")
        service = {
            "name": name,
            "description": description,
            "price": float(price),
            "status": "pending",
        }
        self.update_field(
            "additionalServices", [*self.project["additionalServices"], service]
        )
        return service

    def set_referral(self, **fields: Any) -> None:
        for field, value in fields.items():
            self.update_nested_field("referredBy", field, value)

    # --- Server round trips ---

    def validate(self) -> dict[str, Any]:
        """Check required fields and return the payload to send.

        Raises:
            FormValidationError: If a required field is blank or no goal is set.
        """
        if any(not self.project.get(field) for field in REQUIRED_FIELDS):
            raise FormValidationError("Please fill in all required fields")

        goals = [goal for goal in self.project["projectGoals"] if goal.strip()]
        if not goals:
            raise FormValidationError("Please add at least one project goal")

        return {**self.project, "projectGoals": goals}

    async def save(self) -> dict[str, Any]:
        """Create or update the project on the server.

        On failure ``error`` is set and the exception re-raised; the local
        edits are kept so the user can try again.
        """
        payload = self.validate()
        self.error = None
        try:
            if self.is_new:
                response = await self.client.post(
                    "/projects/admin", json=payload, fallback=SAVE_FAILED
                )
            else:
                response = await self.client.patch(
                    f"/projects/admin/{self.project_id}", json=payload, fallback=SAVE_FAILED
                )
        except ApiError as e:
            self.error = e.message
            logger.warning("Project save failed", project_id=self.project_id, error=e.message)
            raise

        saved = response["data"]
        self.project_id = saved["id"]
        self.project = normalize_project(saved)
        return self.project

    async def update_item_status(self, kind: str, item_id: str, status: str) -> dict[str, Any]:
        """Move a payment or milestone to ``status``, stamping today when it completes."""
        if self.is_new:
            raise FormValidationError("Save the project before updating its schedule")

        today = dt.date.today().isoformat()
        if kind == "payment":
            path = f"/projects/admin/{self.project_id}/payments/{item_id}"
            body = {"status": status, "paidDate": today if status == "paid" else None}
        elif kind == "milestone":
            path = f"/projects/admin/{self.project_id}/milestones/{item_id}"
            body = {
                "status": status,
                "completedDate": today if status == "completed" else None,
            }
        else:
            raise ValueError(f"Unknown item kind: {kind}")

        response = await self.client.patch(
            path, json=body, fallback=f"Failed to update {kind} status. Please try again."
        )
        self.project = normalize_project(response["data"])
        return self.project

    async def update_workflow_stage(self, stage: str) -> dict[str, Any]:
        if self.is_new:
            return self.update_field("workflowStage", stage)
        response = await self.client.patch(
            f"/projects/admin/{self.project_id}/workflow",
            json={"workflowStage": stage},
            fallback="Failed to update workflow stage",
        )
        self.project = normalize_project(response["data"])
        return self.project

    async def delete(self, *, confirm: bool = False) -> bool:
        """Delete the project; does nothing unless ``confirm`` is set."""
        if not confirm or self.is_new:
            return False
        await self.client.delete(
            f"/projects/admin/{self.project_id}",
            fallback="Failed to delete project. Please try again.",
        )
        logger.info("Project deleted", project_id=self.project_id)
        self.project_id = None
        return True
