from aggressive_squares.menu import MENU_LABELS, Menu, MenuChoice, instructions_text


def test_starts_on_play():
    assert Menu().confirm() is MenuChoice.PLAY


def test_move_up_wraps_to_quit():
    menu = Menu()
    menu.move_up()
    assert menu.confirm() is MenuChoice.QUIT


def test_move_down_wraps_to_play():
    menu = Menu()
    for _ in range(len(MENU_LABELS)):
        menu.move_down()
    assert menu.confirm() is MenuChoice.PLAY


def test_move_down_then_up_round_trips():
    menu = Menu()
    menu.move_down()
    assert menu.confirm() is MenuChoice.INSTRUCTIONS
    menu.move_up()
    assert menu.selected == 0


def test_cancel_quits():
    menu = Menu(selected=1)
    assert menu.cancel() is MenuChoice.QUIT


def test_labels_follow_choices():
    assert MenuChoice.PLAY.label == "JOGAR"
    assert MenuChoice.QUIT.label == "SAIR"
    assert Menu().labels == MENU_LABELS


def test_instructions_mention_controls():
    text = instructions_text()
    assert "ESPACO" in text
    assert text.endswith("DICA DO CHEFE: Mire na cabeca!")