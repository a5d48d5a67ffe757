from dataclasses import dataclass
from typing import ClassVar, Tuple

from main.state import IssueRequestBase, ItemRowBase, STUDENT, FACULTY


USER_TYPES = (STUDENT, FACULTY)


@dataclass(frozen=True)
class DatedItem(ItemRowBase):
    """Позиция со своими датами выдачи/возврата и примечанием."""
    issue_date: str = ''
    return_date: str = ''
    remark: str = ''

    required_fields: ClassVar[Tuple[str, ...]] = ('name', 'quantity', 'issue_date', 'return_date')


@dataclass(frozen=True)
class LabIssueRequest(IssueRequestBase):
    """Заявка формы 2: кафедра вводится текстом, даты указываются по каждой позиции."""
    item_class: ClassVar[type] = DatedItem
    required_fields: ClassVar[Tuple[str, ...]] = (
        'user_type', 'name', 'id_number', 'department', 'email', 'mobile',
    )
