import pytest

from lazytask.input import Action, Character, InputHandler, KeyEvent


@pytest.fixture
def handler():
    return InputHandler()


@pytest.mark.parametrize(
    "code, expected",
    [
        ("q", Action.QUIT),
        ("F1", Action.HELP),
        ("F5", Action.REFRESH),
        ("a", Action.ADD_TASK),
        ("e", Action.EDIT_TASK),
        ("d", Action.DONE_TASK),
        ("Delete", Action.DELETE_TASK),
        ("Up", Action.MOVE_UP),
        ("Down", Action.MOVE_DOWN),
        ("Left", Action.MOVE_LEFT),
        ("Right", Action.MOVE_RIGHT),
        ("Enter", Action.SELECT),
        ("Esc", Action.BACK),
        ("/", Action.FILTER),
        ("c", Action.CONTEXT),
        ("r", Action.REPORTS),
        ("Tab", Action.TAB),
        ("Backspace", Action.BACKSPACE),
        (" ", Action.SPACE),
    ],
)
def test_list_mode_keys(handler, code, expected):
    assert handler.handle_key_event(KeyEvent(code)) is expected


def test_ctrl_c_quits_in_list_mode(handler):
    assert handler.handle_key_event(KeyEvent("c", ctrl=True)) is Action.QUIT


@pytest.mark.parametrize("char", ["t", "<", ">", "x"])
def test_other_characters_pass_through_in_list_mode(handler, char):
    assert handler.handle_key_event(KeyEvent(char)) == Character(char)


@pytest.mark.parametrize("code", ["F2", "BackTab", "Home"])
def test_unmapped_keys_in_list_mode(handler, code):
    assert handler.handle_key_event(KeyEvent(code)) is Action.NONE


@pytest.mark.parametrize(
    "code, expected",
    [
        ("Esc", Action.BACK),
        ("Enter", Action.SELECT),
        ("Up", Action.MOVE_UP),
        ("Down", Action.MOVE_DOWN),
        ("Left", Action.MOVE_LEFT),
        ("Right", Action.MOVE_RIGHT),
        ("Tab", Action.TAB),
        ("BackTab", Action.MOVE_UP),
        ("Backspace", Action.BACKSPACE),
        (" ", Action.SPACE),
    ],
)
def test_form_mode_keys(handler, code, expected):
    assert handler.handle_key_event(KeyEvent(code), in_form=True) is expected


@pytest.mark.parametrize("char", ["q", "a", "d", "/", "c", "r"])
def test_command_letters_are_text_in_forms(handler, char):
    assert handler.handle_key_event(KeyEvent(char), in_form=True) == Character(char)


def test_ctrl_c_is_text_in_forms(handler):
    assert handler.handle_key_event(KeyEvent("c", ctrl=True), in_form=True) == Character("c")


@pytest.mark.parametrize("code", ["F1", "F5", "Delete"])
def test_function_keys_ignored_in_forms(handler, code):
    assert handler.handle_key_event(KeyEvent(code), in_form=True) is Action.NONE


def test_handler_keeps_config():
    config = {"quit": "q"}
    assert InputHandler(config).config is config