"""The game window: title menu, option screens and the play loop."""

from __future__ import annotations

import argparse
import sys

import pygame

from .config import FPS, HEIGHT, WIDTH, Key, Settings
from .menu import Menu, MenuChoice
from .render import AssetError, Assets, Renderer
from .world import GameEvent, Outcome, World

VICTORY_PAUSE_MS = 500
BLANK_SIZE = (320, 320)
BLANK_FPS = 30

_KEYS = {
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
    pygame.K_c: Key.C,
    pygame.K_r: Key.R,
    pygame.K_p: Key.P,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.ENTER,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}

_EVENT_SOUNDS = {
    GameEvent.SHOT_FIRED: "shot",
    GameEvent.PLAYER_HURT: "player_hurt",
    GameEvent.ENEMY_HURT: "enemy_hurt",
    GameEvent.AMMO_COLLECTED: "reload",
    GameEvent.HEALTH_COLLECTED: "breathe",
}


def translate_key(pygame_key: int) -> Key | None:
    """The game key for a pygame key code, or None if the game ignores it."""
    return _KEYS.get(pygame_key)


class App:
    """Runs the menu and the screens it leads to until the player quits."""

    def __init__(self, screen, assets: Assets, settings: Settings | None = None, clock=None):
        self.screen = screen
        self.assets = assets
        self.settings = settings if settings is not None else Settings()
        self.clock = clock if clock is not None else pygame.time.Clock()
        self.renderer = Renderer(screen, assets)
        self.closing = False
        self.last_world: World | None = None

    def _next_key(self) -> Key | None:
        """Block until a known key is pressed; None once the window is closed."""
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                self.closing = True
                return None
            if event.type == pygame.KEYDOWN:
                key = translate_key(event.key)
                if key is not None:
                    return key

    def _wait_for(self, *accepted: Key) -> None:
        while True:
            key = self._next_key()
            if key is None or key in accepted:
                return

    # --- menu and screens ---------------------------------------------------

    def run(self) -> None:
        """Show the menu until the player quits or closes the window."""
        while not self.closing:
            choice = self._choose()
            if choice is MenuChoice.PLAY:
                self.play()
            elif choice is MenuChoice.INSTRUCTIONS:
                self._instructions()
            elif choice is MenuChoice.SETTINGS:
                self._settings()
            else:
                return

    def _choose(self) -> MenuChoice:
        menu = Menu()
        while True:
            self.renderer.draw_menu(menu)
            pygame.display.flip()
            key = self._next_key()
            if key is None:
                return MenuChoice.QUIT
            if key is Key.UP:
                menu.move_up()
            elif key is Key.DOWN:
                menu.move_down()
            elif key is Key.ENTER:
                return menu.confirm()
            elif key is Key.ESCAPE:
                return menu.cancel()

    def _instructions(self) -> None:
        self.renderer.draw_instructions()
        pygame.display.flip()
        self._wait_for(Key.ENTER, Key.ESCAPE)

    def _settings(self) -> None:
        while True:
            self.renderer.draw_settings(self.settings)
            pygame.display.flip()
            key = self._next_key()
            if key is None or key in (Key.ENTER, Key.ESCAPE):
                return
            if key is Key.LEFT:
                self.settings.decrease_volume()
            elif key is Key.RIGHT:
                self.settings.increase_volume()

    def _game_over(self, kills: int) -> None:
        self.renderer.draw_game_over(kills)
        pygame.display.flip()
        self._wait_for(Key.ENTER, Key.ESCAPE)

    def _victory(self) -> None:
        pygame.time.wait(VICTORY_PAUSE_MS)
        self.renderer.draw_victory()
        pygame.display.flip()
        self._wait_for(Key.ENTER, Key.ESCAPE)

    def _pause(self) -> None:
        self.renderer.draw_pause()
        pygame.display.flip()
        self._wait_for(Key.P)

    # --- play ---------------------------------------------------------------

    def _play_sound(self, name: str) -> None:
        sound = self.assets.sounds.get(name)
        if sound is not None:
            sound.set_volume(self.settings.volume)
            sound.play()

    def _react(self, world: World) -> None:
        events = world.events[:]
        world.events.clear()
        for event in events:
            sound = _EVENT_SOUNDS.get(event)
            if sound is not None:
                self._play_sound(sound)
            if event is GameEvent.AMMO_COLLECTED:
                print(f"Munição coletada! Total: {world.player.ammo}")
            elif event is GameEvent.HEALTH_COLLECTED:
                print(f"Vida coletada! HP atual: {world.player.hp}")
            elif event is GameEvent.OUT_OF_AMMO:
                print("Sem munição!")
            elif event is GameEvent.PAUSE_REQUESTED:
                self._pause()
                self.clock.tick()

    def play(self) -> Outcome:
        """Play one round and show how it ended."""
        world = World(world_width=self.assets.background.get_width())
        self.last_world = world
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.closing = True
                    return Outcome.QUIT
                if event.type == pygame.KEYDOWN:
                    key = translate_key(event.key)
                    if key is not None:
                        world.handle_key_down(key)
                elif event.type == pygame.KEYUP:
                    key = translate_key(event.key)
                    if key is not None:
                        world.handle_key_up(key)
                self._react(world)
                if self.closing:
                    return Outcome.QUIT
                if world.outcome is Outcome.QUIT:
                    return Outcome.QUIT

            outcome = world.tick()
            self._react(world)
            if self.closing:
                return Outcome.QUIT
            if outcome is Outcome.GAME_OVER:
                self._game_over(world.kills)
                return outcome
            if outcome is Outcome.VICTORY:
                self._victory()
                return outcome

            self.renderer.draw_world(world, world.draw_camera_x)
            pygame.display.flip()
            self.clock.tick(FPS)


def run_blank_window() -> None:
    """Open a small black window and keep it up until it is closed."""
    pygame.init()
    screen = pygame.display.set_mode(BLANK_SIZE)
    clock = pygame.time.Clock()
    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return
        screen.fill((0, 0, 0))
        pygame.display.flip()
        clock.tick(BLANK_FPS)


def main(argv=None) -> int:
    """Start the game; returns the process exit status."""
    parser = argparse.ArgumentParser(
        prog="aggressive-squares", description="A side-scrolling zombie shooter."
    )
    parser.add_argument("--assets", default=".", help="directory holding the game's files")
    parser.add_argument(
        "--blank", action="store_true", help="open an empty window and wait for it to close"
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        if args.blank:
            run_blank_window()
            return 0
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("Aggressive Squares")
        try:
            assets = Assets.load(args.assets)
        except AssetError as exc:
            print(exc, file=sys.stderr)
            return 1
        App(screen, assets).run()
        return 0
    finally:
        pygame.quit()