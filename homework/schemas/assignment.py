from datetime import date
from typing import Optional

from pydantic import BaseModel, computed_field

# %A / %B はロケール依存なので英語名を固定で持つ
WEEKDAYS = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)
MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_due_date(due_date: date) -> str:
    """例: 01/01/2024 (Monday)"""
    return f"{due_date:%m/%d/%Y} ({WEEKDAYS[due_date.weekday()]})"


def format_due_date_extended(due_date: date) -> str:
    """例: Monday, January 1st 2024"""
    weekday = WEEKDAYS[due_date.weekday()]
    month = MONTHS[due_date.month - 1]
    return f"{weekday}, {month} {ordinal(due_date.day)} {due_date.year}"


class AssignmentSummary(BaseModel):
    assignment_id: int
    title: str
    priority: int
    subject_name: str
    subject_id: int
    due_date: date

    @computed_field
    @property
    def due_date_formatted(self) -> str:
        return format_due_date(self.due_date)


class AssignmentDetail(BaseModel):
    assignment_id: int
    title: str
    priority: int
    subject_name: str
    subject_id: int
    due_date: date
    description: Optional[str] = None

    @computed_field
    @property
    def due_date_extended(self) -> str:
        return format_due_date_extended(self.due_date)

    @computed_field
    @property
    def due_date_ymd(self) -> str:
        return self.due_date.isoformat()


class AssignmentForm(BaseModel):
    # 入力値の検証はDBの制約に任せるので、すべて文字列のまま受け取る
    title: Optional[str] = None
    priority: Optional[str] = None
    subject_id: Optional[str] = None
    due_date: Optional[str] = None
    description: Optional[str] = None
