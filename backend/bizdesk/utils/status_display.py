"""
Display metadata for enumerated columns: labels, badge colors and status menus.
"""

import enum
from dataclasses import dataclass
from typing import Callable, Dict, Generic, List, Optional, Type, TypeVar, Union

from bizdesk.models.client import ClientStatus
from bizdesk.models.project import ProjectStatus
from bizdesk.models.task import TaskPriority, TaskStatus, TaskType
from bizdesk.models.transaction import TransactionStatus, TransactionType

E = TypeVar("E", bound=enum.Enum)

DEFAULT_COLOR = "bg-gray-100 text-gray-800"


@dataclass(frozen=True)
class StatusOption(Generic[E]):
    value: E
    label: str
    color: str = DEFAULT_COLOR


def _options(enum_cls: Type[E], colors: Dict[E, str], labels: Optional[Dict[E, str]] = None) -> List[StatusOption[E]]:
    labels = labels or {}
    return [
        StatusOption(member, labels.get(member, status_label(member.value)), colors.get(member, DEFAULT_COLOR))
        for member in enum_cls
    ]


def status_label(value: Union[str, enum.Enum, None]) -> str:
    """``in_progress`` -> ``In Progress``, ``round-r1`` -> ``Round R1``."""
    if value is None:
        return ""
    raw = value.value if isinstance(value, enum.Enum) else str(value)
    return " ".join(word.capitalize() for word in raw.replace("-", "_").split("_") if word)


PROJECT_STATUS_OPTIONS = _options(ProjectStatus, {
    ProjectStatus.NOT_STARTED: "bg-gray-100 text-gray-800",
    ProjectStatus.PENDING: "bg-orange-100 text-orange-800",
    ProjectStatus.IN_PROGRESS: "bg-blue-100 text-blue-800",
    ProjectStatus.COMPLETED: "bg-green-100 text-green-800",
    ProjectStatus.CANCELLED: "bg-red-100 text-red-800",
})

TASK_STATUS_OPTIONS = _options(TaskStatus, {
    TaskStatus.PENDING: "bg-orange-100 text-orange-800",
    TaskStatus.IN_PROGRESS: "bg-blue-100 text-blue-800",
    TaskStatus.COMPLETED: "bg-green-100 text-green-800",
    TaskStatus.CANCELLED: "bg-red-100 text-red-800",
})

TASK_TYPE_OPTIONS = _options(
    TaskType,
    {
        TaskType.DEVELOPMENT: "bg-indigo-100 text-indigo-800",
        TaskType.DESIGN: "bg-pink-100 text-pink-800",
        TaskType.FIXING: "bg-red-100 text-red-800",
        TaskType.FEEDBACK: "bg-yellow-100 text-yellow-800",
        TaskType.ROUND_R1: "bg-purple-100 text-purple-800",
        TaskType.ROUND_R2: "bg-purple-100 text-purple-800",
        TaskType.ROUND_R3: "bg-purple-100 text-purple-800",
    },
    labels={
        TaskType.ROUND_R1: "Round R1",
        TaskType.ROUND_R2: "Round R2",
        TaskType.ROUND_R3: "Round R3",
    },
)

TASK_PRIORITY_OPTIONS = _options(TaskPriority, {
    TaskPriority.LOW: "bg-green-100 text-green-800",
    TaskPriority.MEDIUM: "bg-yellow-100 text-yellow-800",
    TaskPriority.HIGH: "bg-red-100 text-red-800",
})

TRANSACTION_TYPE_OPTIONS = _options(TransactionType, {
    TransactionType.INVOICE: "bg-blue-100 text-blue-800",
    TransactionType.PAYMENT: "bg-green-100 text-green-800",
    TransactionType.EXPENSE: "bg-red-100 text-red-800",
})

TRANSACTION_STATUS_OPTIONS = _options(TransactionStatus, {
    TransactionStatus.PENDING: "bg-yellow-100 text-yellow-800",
    TransactionStatus.COMPLETED: "bg-green-100 text-green-800",
    TransactionStatus.CANCELLED: "bg-red-100 text-red-800",
})

CLIENT_STATUS_OPTIONS = _options(ClientStatus, {
    ClientStatus.ACTIVE: "bg-green-100 text-green-800",
    ClientStatus.INACTIVE: "bg-gray-100 text-gray-800",
})

STATUS_OPTION_TABLES: Dict[str, List[StatusOption]] = {
    "project_status": PROJECT_STATUS_OPTIONS,
    "task_status": TASK_STATUS_OPTIONS,
    "task_type": TASK_TYPE_OPTIONS,
    "task_priority": TASK_PRIORITY_OPTIONS,
    "transaction_type": TRANSACTION_TYPE_OPTIONS,
    "transaction_status": TRANSACTION_STATUS_OPTIONS,
    "client_status": CLIENT_STATUS_OPTIONS,
}

BUTTON_SIZE_CLASSES = {
    "sm": "px-2 py-1 text-xs",
    "md": "px-3 py-1.5 text-sm",
    "lg": "px-4 py-2 text-base",
}


class StatusMenu(Generic[E]):
    """
    Dropdown model for picking one value of an enumerated column.

    Holds no state of its own: selecting an option only forwards the value to
    ``on_change``; the caller decides what to persist and re-renders with the
    new ``current`` value.
    """

    def __init__(
        self,
        options: List[StatusOption[E]],
        current: Union[E, str, None],
        on_change: Callable[[E], None],
        size: str = "md",
    ):
        if not options:
            raise ValueError("StatusMenu needs at least one option")
        if size not in BUTTON_SIZE_CLASSES:
            raise ValueError(f"Unknown size: {size}")
        self.options = options
        self.current = current
        self.on_change = on_change
        self.size = size

    def _find(self, value: Union[E, str, None]) -> Optional[StatusOption[E]]:
        raw = value.value if isinstance(value, enum.Enum) else value
        for option in self.options:
            if option.value.value == raw:
                return option
        return None

    @property
    def current_option(self) -> StatusOption[E]:
        """Option for the current value, or the first option when unknown."""
        return self._find(self.current) or self.options[0]

    @property
    def button_classes(self) -> str:
        return f"{BUTTON_SIZE_CLASSES[self.size]} {self.current_option.color}"

    def select(self, value: Union[E, str]) -> E:
        """Invoke the callback with the chosen value."""
        option = self._find(value)
        if option is None:
            raise ValueError(f"{value!r} is not one of the menu options")
        self.on_change(option.value)
        return option.value
