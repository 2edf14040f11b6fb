"""Drawing the menu, the screens and the playing field with pygame."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator

import pygame

from .animation import Frame
from .config import HEIGHT, PLAYER_SCALE, WIDTH, EnemyKind, ItemKind, Settings, StaminaState
from .entities import COOLDOWN_FRAMES, SPRINT_FRAMES, Enemy, Player
from .menu import Menu, instructions_text
from .world import World

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
YELLOW = (255, 255, 0)
GREY = (150, 150, 150)

STAMINA_NORMAL_COLOUR = (0, 200, 200)
STAMINA_TIRED_COLOUR = (200, 200, 0)
STAMINA_COOLDOWN_COLOUR = (100, 100, 100)
STAMINA_BAR_WIDTH = 100

INSTRUCTIONS_BG = (10, 10, 30)
SETTINGS_BG = (30, 10, 10)
GAME_OVER_BG = (20, 0, 0)
VICTORY_BG = (20, 40, 20)

FONT_SIZE = 40
BACKGROUND_TOP = 360
ITEM_SIZE = 25
SHOT_SCALE = 0.2
SPIT_SCALE = 0.1
BLINK_PERIOD = 6
VOLUME_BAR_WIDTH = 400

SOUND_FILES = {
    "player_hurt": "dano_personagem.wav",
    "enemy_hurt": "dano_zumbi.wav",
    "reload": "reload.wav",
    "shot": "tiro.wav",
    "breathe": "breathe.wav",
}


class AssetError(RuntimeError):
    """A required image or font could not be loaded."""


def stamina_bar(player: Player) -> tuple[float, tuple[int, int, int]]:
    """The fill ratio and colour of the stamina bar."""
    if player.stamina is StaminaState.RUNNING:
        return player.stamina_timer / SPRINT_FRAMES, STAMINA_NORMAL_COLOUR
    if player.stamina is StaminaState.TIRED:
        return 1.0, STAMINA_TIRED_COLOUR
    if player.stamina is StaminaState.COOLDOWN:
        return 1.0 - player.stamina_timer / COOLDOWN_FRAMES, STAMINA_COOLDOWN_COLOUR
    return 1.0, STAMINA_NORMAL_COLOUR


def player_visible(player: Player, frame_counter: int) -> bool:
    """Whether the player is drawn this frame; an invulnerable player blinks."""
    blinking = player.invulnerable_timer > 0 and player.active
    return not (blinking and (frame_counter // BLINK_PERIOD) % 2 != 0)


def death_offset(enemy: Enemy) -> float:
    """How far a dying zombie's frame is pushed down to stay on the ground."""
    if not enemy.dying:
        return 0
    animation = enemy.animator.animation
    if len(animation) == 0:
        return 0
    return animation.frames[0].h - enemy.animator.frame().h


@dataclass
class Assets:
    """Every image, font and sound the game draws or plays."""

    background: pygame.Surface
    font: pygame.font.Font
    hp_sprite: pygame.Surface
    skull: pygame.Surface
    player_sheet: pygame.Surface
    spitter_sheet: pygame.Surface
    zombie_sheets: tuple[pygame.Surface, ...]
    boss_sheet: pygame.Surface | None = None
    ammo_item: pygame.Surface | None = None
    heart_item: pygame.Surface | None = None
    shot_sprite: pygame.Surface | None = None
    spit_sprite: pygame.Surface | None = None
    sounds: dict[str, pygame.mixer.Sound] = field(default_factory=dict)

    @classmethod
    def load(cls, directory) -> Assets:
        """Load the game's files from a directory; raises AssetError if one is missing."""
        root = Path(directory)

        def image(name: str, required: bool = True) -> pygame.Surface | None:
            try:
                surface = pygame.image.load(str(root / name))
            except (pygame.error, OSError) as exc:
                if required:
                    raise AssetError(f"could not load {name}") from exc
                return None
            if pygame.display.get_surface() is not None:
                surface = surface.convert_alpha()
            return surface

        background = image("fundo.png")
        try:
            font = pygame.font.Font(str(root / "font.ttf"), FONT_SIZE)
        except (pygame.error, OSError) as exc:
            raise AssetError("could not load font.ttf") from exc
        hp_sprite = image("HP_sprites.png")
        skull = image("caveira.png")
        player_sheet = image("sprite_dave.png")
        spitter_sheet = image("sprites_ze.png")
        zombie_sheets = tuple(image(f"sprites_z{number}.png") for number in (1, 2, 3))

        sounds: dict[str, pygame.mixer.Sound] = {}
        if pygame.mixer.get_init():
            for key, name in SOUND_FILES.items():
                try:
                    sounds[key] = pygame.mixer.Sound(str(root / name))
                except (pygame.error, OSError):
                    continue

        return cls(
            background=background,
            font=font,
            hp_sprite=hp_sprite,
            skull=skull,
            player_sheet=player_sheet,
            spitter_sheet=spitter_sheet,
            zombie_sheets=zombie_sheets,
            boss_sheet=image("boss.png", required=False),
            ammo_item=image("municao.jpeg", required=False),
            heart_item=image("vida.png", required=False),
            shot_sprite=image("tiro.png", required=False),
            spit_sprite=image("cuspe.png", required=False),
            sounds=sounds,
        )


def _region(sheet: pygame.Surface, frame: Frame, flip: bool) -> pygame.Surface | None:
    if frame.w <= 0 or frame.h <= 0:
        return None
    piece = pygame.Surface((frame.w, frame.h), pygame.SRCALPHA)
    piece.blit(sheet, (0, 0), pygame.Rect(frame.x, frame.y, frame.w, frame.h))
    return pygame.transform.flip(piece, True, False) if flip else piece


def _wrap(font: pygame.font.Font, text: str, max_width: int) -> Iterator[str]:
    for paragraph in text.split("\n"):
        words = paragraph.split()
        if not words:
            yield ""
            continue
        line = words[0]
        for word in words[1:]:
            candidate = f"{line} {word}"
            if font.size(candidate)[0] <= max_width:
                line = candidate
            else:
                yield line
                line = word
        yield line


class Renderer:
    """Draws onto a target surface; the caller flips the display."""

    def __init__(self, screen: pygame.Surface, assets: Assets) -> None:
        self.screen = screen
        self.assets = assets

    def _text(self, text: str, colour, x: float, y: float, centred: bool = True) -> None:
        surface = self.assets.font.render(text, True, colour)
        if centred:
            rect = surface.get_rect(midtop=(round(x), round(y)))
        else:
            rect = surface.get_rect(topleft=(round(x), round(y)))
        self.screen.blit(surface, rect)

    # --- screens ------------------------------------------------------------

    def draw_menu(self, menu: Menu) -> None:
        """The title menu with the selected entry highlighted."""
        if self.assets.background is not None:
            self.screen.blit(self.assets.background, (0, 0))
        else:
            self.screen.fill(BLACK)
        for index, label in enumerate(menu.labels):
            colour = YELLOW if index == menu.selected else WHITE
            self._text(label, colour, WIDTH / 2, HEIGHT / 2 - 60 + index * 40)

    def draw_instructions(self) -> None:
        """The help screen."""
        self.screen.fill(INSTRUCTIONS_BG)
        self._text("INSTRUCOES", YELLOW, WIDTH / 2, 50)
        for row, line in enumerate(_wrap(self.assets.font, instructions_text(), WIDTH - 100)):
            if line:
                self._text(line, WHITE, WIDTH / 2, 150 + row * 40)
        self._text("Pressione ENTER ou ESC para voltar", GREY, WIDTH / 2, HEIGHT - 100)

    def draw_settings(self, settings: Settings) -> None:
        """The settings screen with its volume bar."""
        self.screen.fill(SETTINGS_BG)
        self._text("CONFIGURACOES", YELLOW, WIDTH / 2, 50)
        self._text("Volume Geral", WHITE, WIDTH / 2, 200)
        bar_x = (WIDTH - VOLUME_BAR_WIDTH) / 2
        filled = round(VOLUME_BAR_WIDTH * settings.volume)
        if filled > 0:
            pygame.draw.rect(self.screen, STAMINA_NORMAL_COLOUR, pygame.Rect(bar_x, 250, filled, 30))
        pygame.draw.rect(self.screen, WHITE, pygame.Rect(bar_x, 250, VOLUME_BAR_WIDTH, 30), 2)
        self._text(f"{settings.volume * 100:.0f} %", WHITE, WIDTH / 2, 300)
        self._text(
            "Use as setas para ajustar. ENTER ou ESC para voltar.", GREY, WIDTH / 2, HEIGHT - 100
        )

    def draw_game_over(self, kills: int) -> None:
        """The game-over screen with the number of zombies defeated."""
        self.screen.fill(GAME_OVER_BG)
        self._text("GAME OVER", (200, 0, 0), WIDTH / 2, HEIGHT / 3)
        self._text(f"Zumbis derrotados: {kills}", WHITE, WIDTH / 2, HEIGHT / 2)
        self._text("Pressione ENTER para voltar ao menu", GREY, WIDTH / 2, HEIGHT - 100)

    def draw_victory(self) -> None:
        """The victory screen."""
        self.screen.fill(VICTORY_BG)
        self._text("VOCE VENCEU!", (0, 200, 0), WIDTH / 2, HEIGHT / 3)
        self._text("Pressione ENTER para voltar ao menu", GREY, WIDTH / 2, HEIGHT - 100)

    def draw_pause(self) -> None:
        """Darken whatever is on screen and announce the pause."""
        overlay = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 128))
        self.screen.blit(overlay, (0, 0))
        self._text("PAUSADO", WHITE, WIDTH / 2, HEIGHT / 2 - 40)
        self._text("(Pressione 'P' para continuar)", (200, 200, 200), WIDTH / 2, HEIGHT / 2 + 20)

    # --- playing field ------------------------------------------------------

    def draw_world(self, world: World, camera_x: float) -> None:
        """The level, everything in it and the HUD."""
        assets = self.assets
        self.screen.fill(BLACK)
        self.screen.blit(
            assets.background, (0, 0), pygame.Rect(int(camera_x), BACKGROUND_TOP, WIDTH, HEIGHT)
        )
        self._draw_player(world, camera_x)
        self._draw_boss(world, camera_x)
        self._draw_enemies(world, camera_x)
        self._draw_items(world, world.camera_x)
        self._draw_shots(world, camera_x)
        self._draw_spits(world, world.camera_x)
        self._draw_hud(world.player)

    def _draw_player(self, world: World, camera_x: float) -> None:
        player = world.player
        if not player_visible(player, world.frame_counter):
            return
        piece = _region(self.assets.player_sheet, player.animator.frame(), player.direction == -1)
        if piece is None:
            return
        if PLAYER_SCALE != 1.0:
            width, height = piece.get_size()
            piece = pygame.transform.scale(
                piece, (round(width * PLAYER_SCALE), round(height * PLAYER_SCALE))
            )
        self.screen.blit(piece, (round(player.x - camera_x), round(player.y)))

    def _draw_boss(self, world: World, camera_x: float) -> None:
        boss = world.boss
        if (not boss.active and not boss.dying) or self.assets.boss_sheet is None:
            return
        piece = _region(self.assets.boss_sheet, boss.animator.frame(), boss.direction == -1)
        if piece is not None:
            self.screen.blit(piece, (round(boss.x - camera_x), round(boss.y)))

    def _draw_enemies(self, world: World, camera_x: float) -> None:
        for enemy in world.enemies:
            if not enemy.active:
                continue
            if enemy.kind is EnemyKind.SPITTER:
                sheet = self.assets.spitter_sheet
            else:
                sheet = self.assets.zombie_sheets[enemy.sprite_index]
            if sheet is None or len(enemy.animator.animation) == 0:
                continue
            piece = _region(sheet, enemy.animator.frame(), enemy.direction == -1)
            if piece is None:
                continue
            draw_y = enemy.y + death_offset(enemy)
            self.screen.blit(piece, (round(enemy.x - camera_x), round(draw_y)))

    def _draw_items(self, world: World, camera_x: float) -> None:
        for item in world.items:
            if not item.active:
                continue
            sprite = self.assets.ammo_item if item.kind is ItemKind.AMMO else self.assets.heart_item
            if sprite is None:
                continue
            scaled = pygame.transform.scale(sprite, (ITEM_SIZE, ITEM_SIZE))
            self.screen.blit(scaled, (round(item.x - camera_x), round(item.y)))

    def _draw_shots(self, world: World, camera_x: float) -> None:
        sprite = self.assets.shot_sprite
        if sprite is None:
            return
        for shot in world.shots:
            if not shot.active:
                continue
            angle = math.atan2(shot.dy, shot.dx)
            rotated = pygame.transform.rotozoom(sprite, -math.degrees(angle), SHOT_SCALE)
            rect = rotated.get_rect(center=(round(shot.x - camera_x), round(shot.y)))
            self.screen.blit(rotated, rect)

    def _draw_spits(self, world: World, camera_x: float) -> None:
        sprite = self.assets.spit_sprite
        if sprite is None:
            return
        width, height = sprite.get_size()
        size = (max(1, round(width * SPIT_SCALE)), max(1, round(height * SPIT_SCALE)))
        scaled = pygame.transform.scale(sprite, size)
        for spit in world.spits:
            if spit.active:
                self.screen.blit(scaled, (round(spit.x - camera_x), round(spit.y)))

    def _draw_hud(self, player: Player) -> None:
        icon_width = self.assets.hp_sprite.get_width()
        for slot in range(player.hp):
            self.screen.blit(self.assets.hp_sprite, (10 + slot * (icon_width + 5), 10))
        ratio, colour = stamina_bar(player)
        filled = round(STAMINA_BAR_WIDTH * ratio)
        if filled > 0:
            pygame.draw.rect(self.screen, colour, pygame.Rect(10, 35, filled, 10))
        pygame.draw.rect(self.screen, WHITE, pygame.Rect(10, 35, STAMINA_BAR_WIDTH, 10), 1)
        self._text(f"Municao: {player.ammo}", WHITE, 10, 45, centred=False)