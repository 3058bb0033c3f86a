from core.desktop.devtools.interface.tui_preview import (
    DescriptionPreview,
    TRUNCATED_MARKER,
    description_lines,
    max_scroll,
    window,
    wrap_text,
)


def test_wrap_packs_words_greedily():
    assert wrap_text("hello world foo", 11) == ["hello world", "foo"]


def test_wrap_hard_splits_long_words():
    assert wrap_text("abcdefghijklmnopqrstuvwxyz", 10) == ["abcdefghij", "klmnopqrst", "uvwxyz"]
    assert wrap_text("go abcdefghijkl", 5) == ["go", "abcde", "fghij", "kl"]


def test_wrap_counts_wide_characters_twice():
    assert wrap_text("日本語テキスト", 4) == ["日本", "語テ", "キス", "ト"]


def test_blank_description_shows_placeholder():
    assert description_lines("   ") == ["(no description)"]
    assert description_lines(None, placeholder="-") == ["-"]


def test_description_capped_with_marker():
    lines = description_lines("\n".join(str(i) for i in range(150)))
    assert len(lines) == 101
    assert lines[-1] == TRUNCATED_MARKER


def test_window_pads_to_height():
    assert window(["a", "b"], 0, 4) == ["a", "b", "", ""]
    assert max_scroll(3, 7) == 0
    assert max_scroll(10, 7) == 3


def test_preview_scroll_clamps_and_resets_on_selection(make_issue):
    preview = DescriptionPreview(height=3)
    preview.set_width(20)
    long_issue = make_issue(description="\n".join(f"line {i}" for i in range(10)))
    preview.select(long_issue)
    preview.scroll(100)
    assert preview.offset == 7
    assert preview.visible_lines() == ["line 7", "line 8", "line 9"]
    preview.scroll(-100)
    assert preview.offset == 0
    preview.scroll(2)
    preview.select(make_issue("bd-2", description="short"))
    assert preview.offset == 0
    assert preview.visible_lines() == ["short", "", ""]


def test_preview_rewraps_on_width_change(make_issue):
    preview = DescriptionPreview(height=2)
    preview.select(make_issue(description="alpha beta"))
    preview.set_width(20)
    assert preview.wrapped == ["alpha beta"]
    preview.set_width(5)
    assert preview.wrapped == ["alpha", "beta"]
