"""Test key handling in editing mode and in the exit confirmation dialog."""

from unittest.mock import Mock

from levorg.commands import InputController
from levorg.cursor import CursorPosition
from levorg.document import Document
from levorg.keyboard import KeyEvent, KeyKind, KeyType
from levorg.session import EditorSession, Mode, StatusKind
from levorg.view import status_for


def make_session(lines, row=0, col=0):
    session = EditorSession("/tmp/levorg-test.txt", Document(lines))
    session.cursor = CursorPosition(row, col)
    return session


def special(name):
    return KeyEvent(key_type=KeyType.SPECIAL, value=name, raw=f"<{name.upper()}>", is_sequence=True)


def char(ch):
    return KeyEvent(key_type=KeyType.REGULAR, value=ch, raw=ch)


def ctrl(ch):
    return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=f"<Ctrl-{ch}>", is_ctrl=True)


def press(session, *events, controller=None):
    controller = controller or InputController()
    for event in events:
        controller.handle_key_event(session, event)


def test_backspace_three_times_empties_line():
    session = make_session(["abc"], 0, 3)
    press(session, special('backspace'), special('backspace'), special('backspace'))
    assert session.document.lines == [""]
    assert session.cursor == CursorPosition(0, 0)


def test_backspace_at_line_start_joins_lines():
    session = make_session(["ab", "cd"], 1, 0)
    press(session, special('backspace'))
    assert session.document.lines == ["abcd"]
    assert session.cursor == CursorPosition(0, 2)
    assert session.dirty == True


def test_backspace_at_document_start_changes_nothing():
    session = make_session(["ab"], 0, 0)
    press(session, special('backspace'))
    assert session.document.lines == ["ab"]
    assert session.dirty == False


def test_enter_at_line_end():
    session = make_session(["hello"], 0, 5)
    press(session, special('enter'))
    assert session.document.lines == ["hello", ""]
    assert session.cursor == CursorPosition(1, 0)
    assert session.dirty == True


def test_typing_inserts_and_advances():
    session = make_session([""])
    press(session, char('h'), char('i'), char(' '), char('Y'))
    assert session.document.lines == ["hi Y"]
    assert session.cursor == CursorPosition(0, 4)
    assert session.dirty == True


def test_arrows_move_without_dirtying():
    session = make_session(["abc", "de"], 0, 3)
    press(session, special('down'), special('left'), special('up'), special('right'))
    assert session.cursor == CursorPosition(0, 2)
    assert session.dirty == False


def test_ctrl_and_alt_keys_are_not_inserted():
    session = make_session(["abc"], 0, 1)
    alt_x = KeyEvent(key_type=KeyType.ALT, value='x', raw='<Esc+x>', is_alt=True)
    press(session, ctrl('x'), alt_x)
    assert session.document.lines == ["abc"]
    assert session.dirty == False


def test_control_characters_are_not_inserted():
    session = make_session(["abc"], 0, 1)
    press(session, char('\x00'), char('\x7f'))
    assert session.document.lines == ["abc"]


def test_unbound_special_keys_are_ignored():
    session = make_session(["abc"], 0, 1)
    press(session, special('tab'), special('escape'), special('home'), special('f1'))
    assert session.document.lines == ["abc"]
    assert session.cursor == CursorPosition(0, 1)


def test_release_and_repeat_events_are_ignored():
    session = make_session(["abc"], 0, 0)
    release = KeyEvent(key_type=KeyType.REGULAR, value='x', raw='x', kind=KeyKind.RELEASE)
    repeat = KeyEvent(key_type=KeyType.SPECIAL, value='right', raw='<RIGHT>', kind=KeyKind.REPEAT)
    press(session, release, repeat)
    assert session.document.lines == ["abc"]
    assert session.cursor == CursorPosition(0, 0)


def test_quit_when_clean_stops_immediately():
    session = make_session(["abc"])
    press(session, ctrl('q'))
    assert session.running == False
    assert session.dialog is None


def test_quit_when_dirty_asks_for_confirmation():
    session = make_session(["abc"])
    press(session, char('x'), ctrl('q'))
    assert session.running == True
    assert session.mode == Mode.CONFIRMING_EXIT
    assert session.dialog.title
    assert session.dialog.message


def test_confirm_dialog_no_returns_to_editing():
    session = make_session(["abc"])
    press(session, char('x'), ctrl('q'), char('n'))
    assert session.mode == Mode.EDITING
    assert session.running == True
    assert session.dirty == True


def test_confirm_dialog_yes_quits_without_saving(tmp_path):
    path = tmp_path / "keep.txt"
    path.write_text("abc", encoding='utf-8')
    session = EditorSession.open(str(path))
    press(session, char('x'), ctrl('q'), char('n'), ctrl('q'), char('Y'))
    assert session.running == False
    assert session.dialog is None
    assert path.read_text(encoding='utf-8') == "abc"


def test_save_uses_given_writer():
    writer = Mock()
    session = make_session(["a", "b"])
    assert session.save(writer=writer) == True
    writer.assert_called_once_with("/tmp/levorg-test.txt", "a\nb")


def test_confirm_dialog_swallows_other_keys():
    session = make_session(["abc"], 0, 3)
    press(session, char('x'), ctrl('q'))
    press(session, char('z'), special('backspace'), special('left'), ctrl('s'), special('enter'))
    assert session.mode == Mode.CONFIRMING_EXIT
    assert session.document.lines == ["abcx"]
    assert session.cursor == CursorPosition(0, 4)


def test_ctrl_s_saves_and_clears_dirty(tmp_path):
    path = tmp_path / "notes.txt"
    session = EditorSession(str(path), Document(["one", "two"]))
    press(session, special('enter'), char('3'), ctrl('s'))
    assert path.read_text(encoding='utf-8') == "\n3one\ntwo"
    assert session.dirty == False
    assert session.status.text == "Saved"
    assert session.status.kind == StatusKind.SUCCESS


def test_failed_save_keeps_dirty_and_quit_still_prompts(tmp_path):
    # A directory cannot be overwritten by a file
    session = EditorSession(str(tmp_path), Document(["x"]))
    press(session, char('y'), ctrl('s'))
    assert session.status.kind == StatusKind.ERROR
    assert session.dirty == True
    press(session, ctrl('q'))
    assert session.mode == Mode.CONFIRMING_EXIT


def test_status_message_persists_through_movement(tmp_path):
    session = EditorSession(str(tmp_path / "a.txt"), Document(["x"]))
    press(session, ctrl('s'), special('right'), special('left'), special('backspace'))
    assert session.status.text == "Saved"


def test_edit_after_save_clears_saved_status(tmp_path):
    session = EditorSession(str(tmp_path / "a.txt"), Document(["x"]))
    press(session, ctrl('s'), char('z'))
    assert session.dirty == True
    assert session.status is None
    assert "[Modified]" in status_for(session).text
