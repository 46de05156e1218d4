"""
Status label and status menu tests.
"""

import pytest

from bizdesk.models.project import ProjectStatus
from bizdesk.models.task import TaskType
from bizdesk.utils.status_display import (
    PROJECT_STATUS_OPTIONS,
    STATUS_OPTION_TABLES,
    TASK_TYPE_OPTIONS,
    StatusMenu,
    status_label,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("in_progress", "In Progress"),
        ("not_started", "Not Started"),
        ("round-r1", "Round R1"),
        (ProjectStatus.COMPLETED, "Completed"),
        (None, ""),
    ],
)
def test_status_label(value, expected):
    assert status_label(value) == expected


def test_option_tables_cover_every_enum_member():
    assert [o.value for o in PROJECT_STATUS_OPTIONS] == list(ProjectStatus)
    assert [o.value for o in TASK_TYPE_OPTIONS] == list(TaskType)
    for options in STATUS_OPTION_TABLES.values():
        assert all(option.label and option.color for option in options)


def test_menu_current_option_and_classes():
    menu = StatusMenu(PROJECT_STATUS_OPTIONS, "completed", on_change=lambda value: None, size="sm")

    assert menu.current_option.value is ProjectStatus.COMPLETED
    assert menu.button_classes == "px-2 py-1 text-xs bg-green-100 text-green-800"


def test_menu_unknown_current_value_falls_back_to_first_option():
    menu = StatusMenu(PROJECT_STATUS_OPTIONS, "archived", on_change=lambda value: None)

    assert menu.current_option is PROJECT_STATUS_OPTIONS[0]


def test_menu_select_invokes_callback_without_changing_current():
    selected = []
    menu = StatusMenu(PROJECT_STATUS_OPTIONS, ProjectStatus.NOT_STARTED, on_change=selected.append)

    result = menu.select("in_progress")

    assert result is ProjectStatus.IN_PROGRESS
    assert selected == [ProjectStatus.IN_PROGRESS]
    assert menu.current_option.value is ProjectStatus.NOT_STARTED


def test_menu_rejects_bad_input():
    with pytest.raises(ValueError):
        StatusMenu([], None, on_change=lambda value: None)
    with pytest.raises(ValueError):
        StatusMenu(PROJECT_STATUS_OPTIONS, None, on_change=lambda value: None, size="xl")

    menu = StatusMenu(PROJECT_STATUS_OPTIONS, None, on_change=lambda value: None)
    with pytest.raises(ValueError):
        menu.select("archived")
