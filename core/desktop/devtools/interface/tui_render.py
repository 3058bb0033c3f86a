"""Rendering helpers for the list and edit views.

Views are built as lists of lines, each line a list of ``(style, text)``
fragments, so they stay testable without a running application; the app
joins them into ``FormattedText``.
"""
from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText

from core import first_line, priority_label
from core.desktop.devtools.interface.constants import (
    DESCRIPTION_PART_SEPARATOR,
    EDIT_DESCRIPTION_ROWS,
    LIST_VISIBLE_ROWS,
    RULE_WIDTH,
)
from core.desktop.devtools.interface.i18n import translate
from core.desktop.devtools.interface.tui_display import display_width, trim_display
from core.desktop.devtools.interface.tui_text_edit import cursor_line_col

Fragment = Tuple[str, str]
StyledLine = List[Fragment]

SELECTED_MARKER = "→ "
UNSELECTED_MARKER = "  "
FOCUS_MARKER = "▸ "


def _merge_style(selected_style: str, fragment_style: str) -> str:
    if not selected_style:
        return fragment_style
    return f"{selected_style} {fragment_style}".strip()


def truncate_fragments(fragments: StyledLine, width: int) -> StyledLine:
    """Cut a line so its visible width doesn't exceed width."""
    out: StyledLine = []
    used = 0
    for style, text in fragments:
        if used >= width:
            break
        piece = trim_display(text, width - used)
        if piece:
            out.append((style, piece))
            used += display_width(piece)
    return out


def priority_style(priority) -> str:
    if priority is None:
        return "class:text.dim"
    return f"class:priority.p{priority}"


def issue_label(issue) -> str:
    return f"{priority_label(issue.priority)} {issue.short_id} {issue.title}"


def issue_meta(issue) -> str:
    parts = [issue.status.code]
    if issue.issue_type:
        parts.append(issue.issue_type)
    summary = first_line(issue.description)
    if summary:
        parts.append(summary)
    return DESCRIPTION_PART_SEPARATOR.join(parts)


def list_window(total: int, selected: int, rows: int = LIST_VISIBLE_ROWS) -> Tuple[int, int]:
    """Rows [start, end) that keep ``selected`` roughly centred."""
    if total <= rows:
        return 0, total
    start = max(0, min(selected - rows // 2, total - rows))
    return start, start + rows


def list_help_text(session) -> str:
    if session.mode.value == "searching":
        return translate("HELP_SEARCHING")
    parts = [translate("HELP_NAVIGATE"), translate("HELP_WORK"), translate("HELP_EDIT")]
    if session.allow_priority:
        parts.append(translate("HELP_PRIORITY"))
    if session.allow_search:
        parts.append(translate("HELP_SEARCH"))
    parts.append(translate("HELP_CLEAR_FILTER") if session.filter_term else translate("HELP_CANCEL"))
    parts.append(translate("HELP_SCROLL"))
    return DESCRIPTION_PART_SEPARATOR.join(parts)


def render_list(session, width: int) -> List[StyledLine]:
    width = max(1, width)
    lines: List[StyledLine] = [[("class:border", "─" * width)]]

    if session.mode.value == "searching":
        heading = translate("SEARCH_PROMPT", term=session.search_buffer)
    elif session.filter_term:
        heading = translate("TITLE_FILTERED", title=session.title, term=session.filter_term)
    else:
        heading = session.title
    lines.append([("class:header", heading)])

    visible = session.visible
    if not visible:
        lines.append([("class:text.dim", UNSELECTED_MARKER + translate("NO_ISSUES"))])
    else:
        selected = session.selected_index
        label_width = max(display_width(issue_label(issue)) for issue in session.records or visible)
        start, end = list_window(len(visible), selected)
        for idx in range(start, end):
            issue = visible[idx]
            is_selected = idx == selected
            sel_style = "class:selected" if is_selected else ""
            label_pad = " " * max(0, label_width - display_width(issue_label(issue)))
            row: StyledLine = [
                ("class:header" if is_selected else "class:text", SELECTED_MARKER if is_selected else UNSELECTED_MARKER),
                (_merge_style(sel_style, priority_style(issue.priority)), priority_label(issue.priority)),
                (sel_style or "class:text", " "),
                (_merge_style(sel_style, "class:text.dim"), issue.short_id),
                (sel_style or "class:text", f" {issue.title}{label_pad}"),
                ("class:text.dim", "  " + issue_meta(issue)),
            ]
            lines.append(truncate_fragments(row, width))
        if len(visible) > LIST_VISIBLE_ROWS:
            lines.append([("class:text.dim", f"  ({selected + 1}/{len(visible)})")])

    lines.append([("class:border", "─" * width)])
    for text in session.preview.visible_lines():
        lines.append([("class:text", trim_display(text, width))])
    lines.append([("class:border", "─" * width)])
    lines.append(truncate_fragments([("class:text.dim", list_help_text(session))], width))
    return lines


def _field_fragments(field, focused: bool) -> StyledLine:
    text = field.text
    if not focused:
        return [("class:text", text)]
    cursor = field.cursor
    under = text[cursor] if cursor < len(text) else " "
    return [
        ("class:text", text[:cursor]),
        ("class:cursor", under),
        ("class:text", text[cursor + 1 :]),
    ]


def _description_fragments(field, focused: bool, rows: int = EDIT_DESCRIPTION_ROWS) -> List[StyledLine]:
    all_lines = field.text.split("\n")
    cur_line, cur_col = cursor_line_col(field.text, field.cursor)
    start = max(0, cur_line - 2) if focused else 0
    end = min(len(all_lines), start + rows)
    out: List[StyledLine] = []
    for idx in range(start, end):
        text = all_lines[idx]
        if focused and idx == cur_line:
            under = text[cur_col] if cur_col < len(text) else " "
            out.append(
                [
                    ("class:text", "   " + text[:cur_col]),
                    ("class:cursor", under),
                    ("class:text", text[cur_col + 1 :]),
                ]
            )
        else:
            out.append([("class:text", "   " + text)])
    return out


def render_editor(editor, width: int) -> List[StyledLine]:
    width = max(1, width)
    rule = [("class:border", "─" * min(RULE_WIDTH, width))]
    focus = editor.focus
    lines: List[StyledLine] = [rule]
    lines.append(
        [
            (priority_style(editor.priority), priority_label(editor.priority)),
            ("class:text", " "),
            ("class:header", editor.issue.short_id),
            ("class:text", " ["),
            (f"class:{editor.status.style}", editor.status.code),
            ("class:text", "]"),
        ]
    )
    lines.append([])

    title_focused = focus == "title"
    lines.append(
        [
            ("class:header" if title_focused else "class:text.dim",
             (FOCUS_MARKER if title_focused else "  ") + translate("EDIT_TITLE_LABEL")),
        ]
    )
    lines.append([("class:text", "   ")] + _field_fragments(editor.title, title_focused))
    lines.append([])

    desc_focused = focus == "desc"
    lines.append(
        [
            ("class:header" if desc_focused else "class:text.dim",
             (FOCUS_MARKER if desc_focused else "  ") + translate("EDIT_DESCRIPTION_LABEL")),
        ]
    )
    lines.extend(_description_fragments(editor.description, desc_focused))
    lines.append([])

    help_key = {"title": "EDIT_HELP_TITLE", "desc": "EDIT_HELP_DESC"}.get(focus, "EDIT_HELP_NAV")
    lines.append([("class:text.dim", translate(help_key))])
    lines.append(rule)
    return [truncate_fragments(line, width) for line in lines]


def to_formatted_text(lines: List[StyledLine]) -> FormattedText:
    fragments: StyledLine = []
    for idx, line in enumerate(lines):
        if idx:
            fragments.append(("", "\n"))
        fragments.extend(line)
    return FormattedText(fragments)


def plain_text(lines: List[StyledLine]) -> str:
    return "\n".join("".join(text for _, text in line) for line in lines)


__all__ = [
    "StyledLine",
    "truncate_fragments",
    "issue_label",
    "issue_meta",
    "list_window",
    "list_help_text",
    "render_list",
    "render_editor",
    "to_formatted_text",
    "plain_text",
]
