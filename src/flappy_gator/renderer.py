"""
renderer.py: Draws a session onto a pygame surface.
"""

from typing import Optional

import pygame

from .constants import (
    BACKGROUND_COLOR, PIPE_COLOR, PIPE_EDGE_COLOR, GATOR_COLOR, GATOR_BELLY_COLOR,
    GROUND_COLOR, TEXT_COLOR, OVERLAY_COLOR
)
from .data_models import GameState, Pipe, Player, SessionState

GROUND_HEIGHT = 12
PIPE_CAP_HEIGHT = 20
PIPE_CAP_OVERHANG = 4


class FlappyRenderer:
    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self.width, self.height = surface.get_size()

        pygame.font.init()
        self.large_font = pygame.font.Font(None, 48)
        self.font = pygame.font.Font(None, 28)

        self._gator_sprite: Optional[pygame.Surface] = None
        self._gator_flap_sprite: Optional[pygame.Surface] = None

    # ----------------- Sprites -----------------

    def _build_gator_sprite(self, player: Player, flapping: bool) -> pygame.Surface:
        w, h = player.width, player.height
        sprite = pygame.Surface((w, h), pygame.SRCALPHA)
        pygame.draw.ellipse(sprite, GATOR_COLOR, (0, h // 6, w, h * 2 // 3))
        pygame.draw.ellipse(sprite, GATOR_BELLY_COLOR, (w // 6, h // 2, w * 2 // 3, h // 4))
        # Snout and eye
        pygame.draw.rect(sprite, GATOR_COLOR, (w * 2 // 3, h // 3, w // 3, h // 5))
        pygame.draw.circle(sprite, (255, 255, 255), (w * 2 // 3, h // 3), 4)
        pygame.draw.circle(sprite, (0, 0, 0), (w * 2 // 3 + 1, h // 3), 2)
        # Leg, tucked up while flapping
        leg_y = h // 2 if flapping else h * 2 // 3
        pygame.draw.rect(sprite, GATOR_COLOR, (w // 4, leg_y, w // 6, h // 4))
        return sprite

    def _gator_surface(self, player: Player) -> pygame.Surface:
        if self._gator_sprite is None:
            self._gator_sprite = self._build_gator_sprite(player, flapping=False)
            self._gator_flap_sprite = self._build_gator_sprite(player, flapping=True)
        return self._gator_flap_sprite if player.is_flapping else self._gator_sprite

    # ----------------- Drawing -----------------

    def draw_pipe(self, pipe: Pipe):
        top_height = pipe.top_height
        bottom_y = pipe.bottom_y

        pygame.draw.rect(self.surface, PIPE_COLOR, (pipe.x, 0, pipe.width, top_height))
        pygame.draw.rect(self.surface, PIPE_COLOR,
                         (pipe.x, bottom_y, pipe.width, self.height - bottom_y))

        cap_x = pipe.x - PIPE_CAP_OVERHANG
        cap_w = pipe.width + PIPE_CAP_OVERHANG * 2
        pygame.draw.rect(self.surface, PIPE_EDGE_COLOR,
                         (cap_x, top_height - PIPE_CAP_HEIGHT, cap_w, PIPE_CAP_HEIGHT))
        pygame.draw.rect(self.surface, PIPE_EDGE_COLOR, (cap_x, bottom_y, cap_w, PIPE_CAP_HEIGHT))

    def draw_gator(self, player: Player):
        # pygame rotates counter-clockwise; positive rotation means nose down
        sprite = pygame.transform.rotate(self._gator_surface(player), -player.rotation)
        rect = sprite.get_rect(center=(int(player.x), int(player.y)))
        self.surface.blit(sprite, rect)

    def _blit_centered(self, text: str, font: pygame.font.Font, y: int, color=TEXT_COLOR):
        rendered = font.render(text, True, color)
        self.surface.blit(rendered, (self.width // 2 - rendered.get_width() // 2, y))

    def _draw_overlay(self):
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR)
        self.surface.blit(overlay, (0, 0))

    def draw_hud(self, session: SessionState):
        self._blit_centered(f"Score: {session.score}", self.large_font, 20)

    def draw_start_screen(self, session: SessionState):
        self._draw_overlay()
        self._blit_centered("Flappy Gator", self.large_font, self.height // 3)
        self._blit_centered("Click or press SPACE to flap!", self.font, self.height // 3 + 60)
        self._blit_centered(f"High Score: {session.high_score}", self.font, self.height // 3 + 100)

    def draw_pause_screen(self):
        self._draw_overlay()
        self._blit_centered("Paused", self.large_font, self.height // 3)
        self._blit_centered("Press P to resume", self.font, self.height // 3 + 60)

    def draw_game_over_screen(self, session: SessionState):
        self._draw_overlay()
        top = self.height // 3
        self._blit_centered("Game Over!", self.large_font, top, (255, 80, 80))
        self._blit_centered(f"Score: {session.score}", self.font, top + 60)
        # Cached value when the score service was unreachable
        self._blit_centered(f"High Score: {session.high_score}", self.font, top + 95)
        self._blit_centered(f"Session Best: {session.best_score}", self.font, top + 130)
        self._blit_centered("Press SPACE to restart", self.font, top + 185)

    def render(self, session: SessionState):
        self.surface.fill(BACKGROUND_COLOR)

        if session.state is not GameState.START:
            for pipe in session.pipes:
                self.draw_pipe(pipe)

        pygame.draw.rect(self.surface, GROUND_COLOR,
                         (0, self.height - GROUND_HEIGHT, self.width, GROUND_HEIGHT))
        self.draw_gator(session.player)

        if session.state is GameState.START:
            self.draw_start_screen(session)
        elif session.state is GameState.PAUSED:
            self.draw_hud(session)
            self.draw_pause_screen()
        elif session.state is GameState.GAME_OVER:
            self.draw_game_over_screen(session)
        else:
            self.draw_hud(session)
