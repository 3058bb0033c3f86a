"""UI strings. Every language carries the full key set of the English pack."""

LANG_PACK = {
    "en": {
        "TITLE_READY": "Beads — Ready",
        "TITLE_OPEN": "Beads — Open",
        "TITLE_ALL": "Beads — All",
        "TITLE_FILTERED": "{title} [filter: {term}]",
        "SEARCH_PROMPT": "Search: {term}_",
        "HELP_SEARCHING": "type to search • enter apply • esc cancel",
        "HELP_NAVIGATE": "↑↓/w/s navigate",
        "HELP_WORK": "enter work",
        "HELP_EDIT": "e edit",
        "HELP_PRIORITY": "0-4 priority",
        "HELP_SEARCH": "ctrl+f search",
        "HELP_CLEAR_FILTER": "esc clear filter",
        "HELP_CANCEL": "esc cancel",
        "HELP_SCROLL": "j/k scroll",
        "EDIT_HELP_NAV": "tab fields | space status | 0-4 priority | enter save | esc/q back",
        "EDIT_HELP_TITLE": "type | backspace | ←→ | enter save | tab desc | esc revert",
        "EDIT_HELP_DESC": "type | backspace | arrows | enter newline | ctrl+s save | tab nav | esc revert",
        "EDIT_TITLE_LABEL": "Title:",
        "EDIT_DESCRIPTION_LABEL": "Description:",
        "NO_DESCRIPTION": "(no description)",
        "NO_ISSUES": "No issues found",
        "NO_MATCHES": "No matches for \"{term}\"",
        "STATUS_LOADING": "Loading…",
        "STATUS_SAVING": "Saving…",
        "MSG_TITLE_UPDATED": "Title updated",
        "MSG_DESCRIPTION_UPDATED": "Description updated",
        "MSG_STATUS_UPDATED": "Status: {status}",
        "MSG_PRIORITY_UPDATED": "Priority: {priority}",
        "ERR_EMPTY_TITLE": "Title cannot be empty",
    },
    "ru": {
        "TITLE_READY": "Beads — Готовые",
        "TITLE_OPEN": "Beads — Открытые",
        "TITLE_ALL": "Beads — Все",
        "TITLE_FILTERED": "{title} [фильтр: {term}]",
        "SEARCH_PROMPT": "Поиск: {term}_",
        "HELP_SEARCHING": "вводите запрос • enter применить • esc отмена",
        "HELP_NAVIGATE": "↑↓/w/s навигация",
        "HELP_WORK": "enter в работу",
        "HELP_EDIT": "e правка",
        "HELP_PRIORITY": "0-4 приоритет",
        "HELP_SEARCH": "ctrl+f поиск",
        "HELP_CLEAR_FILTER": "esc сбросить фильтр",
        "HELP_CANCEL": "esc выход",
        "HELP_SCROLL": "j/k прокрутка",
        "EDIT_HELP_NAV": "tab поля | space статус | 0-4 приоритет | enter сохранить | esc/q назад",
        "EDIT_HELP_TITLE": "ввод | backspace | ←→ | enter сохранить | tab описание | esc откат",
        "EDIT_HELP_DESC": "ввод | backspace | стрелки | enter новая строка | ctrl+s сохранить | tab навигация | esc откат",
        "EDIT_TITLE_LABEL": "Заголовок:",
        "EDIT_DESCRIPTION_LABEL": "Описание:",
        "NO_DESCRIPTION": "(нет описания)",
        "NO_ISSUES": "Задачи не найдены",
        "NO_MATCHES": "Нет совпадений для \"{term}\"",
        "STATUS_LOADING": "Загрузка…",
        "STATUS_SAVING": "Сохранение…",
        "MSG_TITLE_UPDATED": "Заголовок обновлён",
        "MSG_DESCRIPTION_UPDATED": "Описание обновлено",
        "MSG_STATUS_UPDATED": "Статус: {status}",
        "MSG_PRIORITY_UPDATED": "Приоритет: {priority}",
        "ERR_EMPTY_TITLE": "Заголовок не может быть пустым",
    },
}
