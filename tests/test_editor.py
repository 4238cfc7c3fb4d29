from cubenceline.editor import SegmentEditor


def test_nothing_edited_initially():
    editor = SegmentEditor()
    assert editor.editing_segment is None
    assert editor.is_editing("model") is False


def test_edit_segment():
    editor = SegmentEditor()
    editor.edit_segment("git")
    assert editor.is_editing("git") is True
    assert editor.is_editing("model") is False


def test_switch_segment():
    editor = SegmentEditor()
    editor.edit_segment("git")
    editor.edit_segment("cost")
    assert editor.is_editing("cost") is True
    assert editor.is_editing("git") is False


def test_stop_editing():
    editor = SegmentEditor()
    editor.edit_segment("usage")
    editor.stop_editing()
    assert editor.editing_segment is None
    assert editor.is_editing("usage") is False


def test_none_is_never_editing():
    editor = SegmentEditor()
    assert editor.is_editing(None) is False