"""
Состояние формы заявки и чистые функции переходов.

Каждая функция принимает старое состояние и возвращает новое
(dataclasses.replace), исходный объект никогда не меняется.
Классы состояния конкретных форм объявляются в приложениях
issueform1 / issueform2 и наследуются от IssueRequestBase.
"""
from dataclasses import dataclass, fields, replace
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple


STUDENT = 'student'
FACULTY = 'faculty'
STAFF = 'staff'

OTHERS = 'Others'


@dataclass(frozen=True)
class IssueRequestBase:
    """
    Общая часть заявки на выдачу: данные заявителя и список позиций.

    dependent_fields описывает поля, которые существуют только при
    определенном значении другого поля (тег варианта):
        {'instructor_name': ('user_type', {'student'})}
    Если значение поля-тега не входит в набор, зависимое поле пустое.
    """
    item_class: ClassVar[type]
    dependent_fields: ClassVar[Dict[str, Tuple[str, frozenset]]] = {}
    required_fields: ClassVar[Tuple[str, ...]] = ()

    user_type: str = STUDENT
    name: str = ''
    id_number: str = ''
    department: str = ''
    email: str = ''
    mobile: str = ''
    items: Tuple[Any, ...] = ()

    def __post_init__(self):
        # Пустой список позиций недопустим: всегда минимум одна строка
        if not self.items:
            object.__setattr__(self, 'items', (self.item_class(),))

    @classmethod
    def editable_fields(cls):
        return tuple(f.name for f in fields(cls) if f.name != 'items')

    def active_required_fields(self):
        return self.required_fields

    def for_submission(self):
        """Состояние в том виде, в котором оно уходит на сервер."""
        return self

    def to_dict(self) -> Dict[str, Any]:
        data = {name: getattr(self, name) for name in self.editable_fields()}
        data['items'] = [item.to_dict() for item in self.items]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        known = set(cls.editable_fields())
        values = {k: str(v) for k, v in data.items() if k in known and v is not None}
        items = tuple(cls.item_class.from_dict(row) for row in data.get('items') or ())
        return _enforce_dependencies(cls(items=items, **values))


@dataclass(frozen=True)
class ItemRowBase:
    name: str = ''
    quantity: str = ''

    required_fields: ClassVar[Tuple[str, ...]] = ('name', 'quantity')

    @classmethod
    def field_names(cls):
        return tuple(f.name for f in fields(cls))

    def to_dict(self) -> Dict[str, str]:
        return {name: getattr(self, name) for name in self.field_names()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        known = set(cls.field_names())
        return cls(**{k: str(v) for k, v in data.items() if k in known and v is not None})


def _enforce_dependencies(state):
    cleared = {}
    for dependent, (trigger, allowed) in state.dependent_fields.items():
        if getattr(state, trigger) not in allowed and getattr(state, dependent):
            cleared[dependent] = ''
    return replace(state, **cleared) if cleared else state


# ==============================================================================
# Переходы над полями заявителя
# ==============================================================================

def set_field(state, name: str, value: str):
    if name not in state.editable_fields():
        raise KeyError(f"Unknown field: {name}")
    return _enforce_dependencies(replace(state, **{name: value}))


def set_fields(state, values: Mapping[str, str]):
    """
    Применяет сразу несколько полей (например, целиком отправленную форму).
    Зависимые поля очищаются по итоговым значениям полей-тегов.
    """
    editable = state.editable_fields()
    unknown = [name for name in values if name not in editable]
    if unknown:
        raise KeyError(f"Unknown fields: {', '.join(unknown)}")
    return _enforce_dependencies(replace(state, **dict(values)))


# ==============================================================================
# Переходы над списком позиций
# ==============================================================================

def replace_items(state, items):
    return replace(state, items=tuple(items))


def add_item(state):
    return replace(state, items=state.items + (state.item_class(),))


def remove_item(state, index: int):
    # Последнюю строку удалить нельзя
    if len(state.items) <= 1 or not 0 <= index < len(state.items):
        return state
    return replace(state, items=state.items[:index] + state.items[index + 1:])


def set_item_field(state, index: int, name: str, value: str):
    if not 0 <= index < len(state.items):
        raise IndexError(f"No item row {index}")
    if name not in state.item_class.field_names():
        raise KeyError(f"Unknown item field: {name}")
    items = list(state.items)
    items[index] = replace(items[index], **{name: value})
    return replace(state, items=tuple(items))


# ==============================================================================
# Жизненный цикл отправки
# ==============================================================================

EDITING = 'editing'
SUBMITTING = 'submitting'
SUBMITTED = 'submitted'

# Причина возврата в Editing после неудачной отправки
VALIDATION_FAILED = 'validation'
NETWORK_FAILED = 'network'


@dataclass(frozen=True)
class FormSession:
    """
    Editing -> Submitting -> Submitted | Editing (с ошибкой).
    Submitted - конечное состояние до явного закрытия (close).
    """
    state: Any
    phase: str = EDITING
    snapshot: Optional[Any] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None
    # Строка, для которой сейчас вводится новое название позиции (форма 1)
    adding_row: Optional[int] = None

    @property
    def is_submitted(self):
        return self.phase == SUBMITTED

    def to_dict(self):
        return {
            'state': self.state.to_dict(),
            'phase': self.phase,
            'snapshot': self.snapshot.to_dict() if self.snapshot is not None else None,
            'error': self.error,
            'error_kind': self.error_kind,
            'adding_row': self.adding_row,
        }

    @classmethod
    def from_dict(cls, state_class, data: Optional[Mapping[str, Any]]):
        if not data:
            return new_session(state_class)
        snapshot = data.get('snapshot')
        return cls(
            state=state_class.from_dict(data.get('state') or {}),
            phase=data.get('phase', EDITING),
            snapshot=state_class.from_dict(snapshot) if snapshot else None,
            error=data.get('error'),
            error_kind=data.get('error_kind'),
            adding_row=data.get('adding_row'),
        )


def new_session(state_class):
    return FormSession(state=state_class())


def update_state(session: FormSession, state):
    if session.is_submitted:
        return session
    return replace(session, state=state)


def begin_submit(session: FormSession):
    if session.phase != EDITING:
        return session
    return replace(session, phase=SUBMITTING, error=None, error_kind=None)


def fail_validation(session: FormSession, message: str):
    return replace(session, phase=EDITING, error=message, error_kind=VALIDATION_FAILED)


def submit_failed(session: FormSession, message: str):
    return replace(session, phase=EDITING, error=message, error_kind=NETWORK_FAILED)


def submit_succeeded(session: FormSession):
    # Снимок фиксируется в момент успешной отправки
    return replace(session, phase=SUBMITTED, snapshot=session.state, error=None,
                   error_kind=None, adding_row=None)


def close(session: FormSession):
    return new_session(type(session.state))
