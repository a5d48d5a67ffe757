from dataclasses import dataclass, replace
from typing import ClassVar, Tuple

from main.state import (IssueRequestBase, ItemRowBase, OTHERS, STUDENT, FACULTY, STAFF)


DEPARTMENTS = (
    'Computer Science and Engineering',
    'Communication and Computer Engineering',
    'Electronics and Communication Engineering',
    'Mechanical-Mechatronics Engineering',
    'Physics',
    'Mathematics',
    'Humanities and Social Sciences',
    OTHERS,
)

USER_TYPES = (STUDENT, FACULTY, STAFF)


@dataclass(frozen=True)
class CatalogItem(ItemRowBase):
    """Позиция заявки: название из каталога и количество."""


@dataclass(frozen=True)
class ItemIssueRequest(IssueRequestBase):
    """
    Заявка формы 1: даты выдачи/возврата общие на всю заявку,
    кафедра выбирается из списка (Others - ввод вручную),
    для студентов можно указать преподавателя.
    """
    item_class: ClassVar[type] = CatalogItem
    dependent_fields: ClassVar[dict] = {
        'other_department': ('department', frozenset({OTHERS})),
        'instructor_name': ('user_type', frozenset({STUDENT})),
    }
    required_fields: ClassVar[Tuple[str, ...]] = (
        'user_type', 'name', 'id_number', 'department', 'email', 'mobile',
    )

    other_department: str = ''
    instructor_name: str = ''
    issue_date: str = ''
    return_date: str = ''

    @property
    def resolved_department(self):
        if self.department == OTHERS:
            return self.other_department
        return self.department

    def for_submission(self):
        return replace(self, department=self.resolved_department, other_department='')

    def active_required_fields(self):
        if self.department == OTHERS:
            return self.required_fields + ('other_department',)
        return self.required_fields
