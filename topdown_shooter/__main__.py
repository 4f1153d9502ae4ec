import logging

import pygame

from . import render
from .controls import intent_from_keys, intent_toward
from .game import Game
from .settings import FEATURES, FPS, HEIGHT, HIGHSCORE_FILE, WIDTH
from .sound import SoundManager
from .storage import HighscoreStore


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()
    flags = 0
    if FEATURES["FULLSCREEN"]:
        flags = pygame.FULLSCREEN | pygame.SCALED
    pygame.display.set_caption("Top-Down Shooter")
    screen = pygame.display.set_mode((WIDTH, HEIGHT), flags)
    clock = pygame.time.Clock()
    font = pygame.font.Font(None, 24)
    bigfont = pygame.font.Font(None, 60)
    game = Game(SoundManager(FEATURES["SOUNDS"]), HighscoreStore(HIGHSCORE_FILE))

    t = 0.0
    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0
        t += dt
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_p:
                    game.toggle_pause()
                elif event.key == pygame.K_RETURN and game.state == Game.IDLE:
                    game.start()

        if pygame.mouse.get_pressed()[0]:
            intent = intent_toward(game.player.pos, pygame.mouse.get_pos())
        else:
            intent = intent_from_keys(pygame.key.get_pressed())

        game.tick(dt, intent)
        render.draw(screen, game, font, bigfont, t)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
