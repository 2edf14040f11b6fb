"""The title menu and the instructions text."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MENU_LABELS = ("JOGAR", "INSTRUCOES", "CONFIGURACOES", "SAIR")

_INSTRUCTIONS = (
    "Use W, A, S, D para se mover e pular.\n"
    "Pressione ESPACO para atirar.\n"
    "Pressione C para correr (gasta estamina).\n"
    "Pressione R sobre um item para coleta-lo.\n"
    "Pressione P para pausar o jogo.\n\n"
    "DICA DO CHEFE: Mire na cabeca!"
)


class MenuChoice(Enum):
    """The menu entries, in the order they are listed."""

    PLAY = 0
    INSTRUCTIONS = 1
    SETTINGS = 2
    QUIT = 3

    @property
    def label(self) -> str:
        return MENU_LABELS[self.value]


@dataclass
class Menu:
    """A vertical menu whose selection wraps around at both ends."""

    selected: int = 0

    @property
    def labels(self) -> tuple[str, ...]:
        return MENU_LABELS

    def move_up(self) -> None:
        """Select the entry above, wrapping to the bottom."""
        self.selected = (self.selected - 1) % len(MENU_LABELS)

    def move_down(self) -> None:
        """Select the entry below, wrapping to the top."""
        self.selected = (self.selected + 1) % len(MENU_LABELS)

    def confirm(self) -> MenuChoice:
        """The entry currently selected."""
        return MenuChoice(self.selected)

    def cancel(self) -> MenuChoice:
        """Leaving the menu always means quitting."""
        return MenuChoice.QUIT


def instructions_text() -> str:
    """The help text shown on the instructions screen."""
    return _INSTRUCTIONS