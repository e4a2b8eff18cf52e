#!/usr/bin/env python3
"""
flappy_client.py

Window, input handling and the frame loop around FlappyGatorGame.
"""

import argparse
import logging
import os
from typing import Optional

import pygame

from .api_client import ScoreServiceClient
from .audio_manager import AudioManager
from .constants import (
    CANVAS_WIDTH, CANVAS_HEIGHT, TARGET_FPS, DEFAULT_API_URL, API_URL_ENV,
    DEFAULT_PLAYER_NAME, SOUND_VOLUMES
)
from .data_models import GameState
from .game_engine import FlappyGatorGame
from .renderer import FlappyRenderer

logger = logging.getLogger(__name__)

SOUND_FILES = {name: f"{name}.wav" for name in SOUND_VOLUMES}


class FlappyClient:
    def __init__(self, api_url: str, player_name: str = DEFAULT_PLAYER_NAME,
                 muted: bool = False, sounds_dir: Optional[str] = None, fps: int = TARGET_FPS):
        pygame.init()
        self.screen = pygame.display.set_mode((CANVAS_WIDTH, CANVAS_HEIGHT))
        pygame.display.set_caption("Flappy Gator")
        self.fps = fps

        self.audio = AudioManager(muted=muted)
        if sounds_dir and self.audio.init_mixer():
            for name, filename in SOUND_FILES.items():
                self.audio.load_sound(name, os.path.join(sounds_dir, filename))

        self.api = ScoreServiceClient(api_url)
        self.game = FlappyGatorGame(CANVAS_WIDTH, CANVAS_HEIGHT, client=self.api,
                                    audio=self.audio, player_name=player_name)
        self.renderer = FlappyRenderer(self.screen)
        self.clock = pygame.time.Clock()

    def _on_primary(self):
        """Space / click: start, flap, or restart depending on the state."""
        state = self.game.state
        if state is GameState.START:
            self.game.start()
        elif state is GameState.GAME_OVER:
            self.game.restart()
        else:
            self.game.handle_input()

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.game.destroy()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.game.destroy()
            elif event.key in (pygame.K_SPACE, pygame.K_UP):
                self._on_primary()
            elif event.key == pygame.K_p:
                self.game.toggle_pause()
            elif event.key == pygame.K_m:
                self.audio.set_muted(not self.audio.is_muted())
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._on_primary()
        elif event.type == pygame.WINDOWFOCUSLOST and self.game.state is GameState.PLAYING:
            self.game.pause()

    def run(self):
        """The main client execution loop."""
        try:
            self.game.score_tracker.refresh_high_score()

            while self.game.running:
                self.clock.tick(self.fps)

                for event in pygame.event.get():
                    self.handle_event(event)

                self.game.tick()
                self.renderer.render(self.game.session)
                pygame.display.flip()
        finally:
            self.api.close()
            pygame.quit()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Flappy Gator")
    parser.add_argument("--api-url", default=os.environ.get(API_URL_ENV, DEFAULT_API_URL),
                        help=f"score service base URL (default: ${API_URL_ENV} or {DEFAULT_API_URL})")
    parser.add_argument("--player-name", default=DEFAULT_PLAYER_NAME)
    parser.add_argument("--sounds-dir", default=None, help="directory with flap/score/collision .wav files")
    parser.add_argument("--mute", action="store_true")
    parser.add_argument("--fps", type=int, default=TARGET_FPS)
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    client = FlappyClient(args.api_url, player_name=args.player_name, muted=args.mute,
                          sounds_dir=args.sounds_dir, fps=args.fps)
    try:
        client.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")


if __name__ == "__main__":
    main()
