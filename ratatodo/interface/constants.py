"""UI strings for every supported language. English is the fallback."""

from typing import Dict

LANG_PACK: Dict[str, Dict[str, str]] = {
    "en": {
        "APP_TITLE": " Ratatodo ",
        "STATUS_UPCOMING": "Upcoming",
        "STATUS_ACTIVE": "Active",
        "STATUS_COMPLETED": "Completed",
        "MODE_VIEW": "VIEW",
        "MODE_EDIT": "EDIT",
        "MODE_HELP": "HELP",
        "LIST_EMPTY": "No tasks yet. Press {hotkey} to create one.",
        "EDITOR_NEW": "New task",
        "EDITOR_EXISTING": "Edit task #{number}",
        "FIELD_TITLE": "Title",
        "FIELD_DETAIL": "Detail",
        "EDITOR_HINT": "Enter on Title moves to Detail, Enter on Detail saves. An empty title saves nothing.",
        "HELP_VIEW_TITLE": "List",
        "HELP_EDIT_TITLE": "Editor",
        "HELP_HELP_TITLE": "This screen",
        "ACTION_QUIT": "Quit",
        "ACTION_NEW": "New Task",
        "ACTION_DOWN": "Next task",
        "ACTION_UP": "Previous task",
        "ACTION_HELP": "Help",
        "ACTION_EDIT": "Edit",
        "ACTION_DELETE": "Delete",
        "ACTION_TOGGLE_STATUS": "Mark Status",
        "ACTION_CANCEL": "Cancel",
        "ACTION_SWITCH_FIELD": "Switch field",
        "ACTION_BACKSPACE": "Erase",
        "ACTION_CONFIRM": "Next / Save",
        "ACTION_BACK": "Back",
        "STATUS_MESSAGE_CREATED": "Task created",
        "STATUS_MESSAGE_UPDATED": "Task updated",
        "STATUS_MESSAGE_DELETED": "Task deleted",
        "STATUS_MESSAGE_STATUS_CHANGED": "Status: {status}",
    },
    "ru": {
        "STATUS_UPCOMING": "Предстоит",
        "STATUS_ACTIVE": "В работе",
        "STATUS_COMPLETED": "Готово",
        "MODE_VIEW": "СПИСОК",
        "MODE_EDIT": "ПРАВКА",
        "MODE_HELP": "СПРАВКА",
        "LIST_EMPTY": "Задач пока нет. Нажмите {hotkey}, чтобы создать.",
        "EDITOR_NEW": "Новая задача",
        "EDITOR_EXISTING": "Задача #{number}",
        "FIELD_TITLE": "Название",
        "FIELD_DETAIL": "Описание",
        "EDITOR_HINT": "Enter в названии переходит к описанию, Enter в описании сохраняет. Пустое название не сохраняется.",
        "HELP_VIEW_TITLE": "Список",
        "HELP_EDIT_TITLE": "Редактор",
        "HELP_HELP_TITLE": "Этот экран",
        "ACTION_QUIT": "Выход",
        "ACTION_NEW": "Новая",
        "ACTION_DOWN": "Следующая",
        "ACTION_UP": "Предыдущая",
        "ACTION_HELP": "Справка",
        "ACTION_EDIT": "Изменить",
        "ACTION_DELETE": "Удалить",
        "ACTION_TOGGLE_STATUS": "Статус",
        "ACTION_CANCEL": "Отмена",
        "ACTION_SWITCH_FIELD": "Сменить поле",
        "ACTION_BACKSPACE": "Стереть",
        "ACTION_CONFIRM": "Далее / Сохранить",
        "ACTION_BACK": "Назад",
        "STATUS_MESSAGE_CREATED": "Задача создана",
        "STATUS_MESSAGE_UPDATED": "Задача обновлена",
        "STATUS_MESSAGE_DELETED": "Задача удалена",
        "STATUS_MESSAGE_STATUS_CHANGED": "Статус: {status}",
    },
}

SUPPORTED_LANGS = tuple(LANG_PACK)
