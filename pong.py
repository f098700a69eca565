
import argparse
import logging
import sys

import pygame

from pingpong import Config, Phase, Simulation, SurfaceUnavailable
from pingpong.config import AI_COLOR, BG, CENTER_LINE, FPS, HEIGHT, PLAYER_COLOR, TEXT, WIDTH

FONT_NAME = "arial"
DIM = (160, 174, 192)

logger = logging.getLogger("pong")


def surface_size():
    surface = pygame.display.get_surface()
    if surface is None:
        raise SurfaceUnavailable("no display surface")
    return surface.get_size()


def draw_center_dashed_line(surface, w, h):
    dash_h = 10
    gap = 10
    x = w // 2 - 2
    for y in range(0, h, dash_h + gap):
        pygame.draw.rect(surface, CENTER_LINE, (x, y, 4, dash_h))


def draw_centered(surface, font, text, color, y):
    label = font.render(text, True, color)
    surface.blit(label, label.get_rect(center=(surface.get_width() // 2, y)))


def draw(screen, snap, fonts):
    font_big, font_small = fonts
    w, h = int(snap.width), int(snap.height)
    screen.fill(BG)
    draw_center_dashed_line(screen, w, h)

    pw = int(snap.paddle_w)
    pygame.draw.rect(screen, PLAYER_COLOR, (0, int(snap.player_y), pw, int(snap.player_h)))
    pygame.draw.rect(screen, AI_COLOR, (w - pw, int(snap.ai_y), pw, int(snap.ai_h)))
    pygame.draw.circle(screen, snap.ball_color, (int(snap.ball_x), int(snap.ball_y)), max(1, int(snap.ball_radius)))

    score_l = font_big.render(str(snap.player_score), True, TEXT)
    score_r = font_big.render(str(snap.ai_score), True, TEXT)
    screen.blit(score_l, score_l.get_rect(center=(w // 2 - 60, 40)))
    screen.blit(score_r, score_r.get_rect(center=(w // 2 + 60, 40)))

    if snap.flash is not None:
        overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        overlay.fill(snap.flash)
        screen.blit(overlay, (0, 0))

    if snap.phase is not Phase.PLAYING:
        overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        overlay.fill((*BG, 230))
        screen.blit(overlay, (0, 0))
        if snap.phase is Phase.START:
            draw_centered(screen, font_big, "Ping Pong", TEXT, h // 2 - 40)
            draw_centered(screen, font_small, "Click to start", DIM, h // 2 + 20)
        else:
            winner = "You win!" if snap.winner == "player" else "AI wins!"
            draw_centered(screen, font_big, "Game Over", TEXT, h // 2 - 60)
            draw_centered(screen, font_big, winner, TEXT, h // 2)
            draw_centered(screen, font_small, "Click to continue", DIM, h // 2 + 60)


def game(width=WIDTH, height=HEIGHT, fps=FPS, cfg=None, seed=None):
    pygame.init()
    pygame.display.set_caption("Ping Pong vs AI")
    screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
    clock = pygame.time.Clock()
    fonts = (pygame.font.SysFont(FONT_NAME, 48), pygame.font.SysFont(FONT_NAME, 24))

    sim = Simulation(surface_size, cfg=cfg, seed=seed)

    while True:
        now = pygame.time.get_ticks() / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                pygame.quit(); sys.exit(0)
            if event.type == pygame.MOUSEMOTION:
                sim.set_pointer(event.pos[1])
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                sim.activate(now)
            if event.type == pygame.VIDEORESIZE:
                screen = pygame.display.get_surface()
                sim.resize(now)

        sim.tick(now)
        snap = sim.snapshot(now)
        if snap is not None:
            draw(screen, snap, fonts)
            pygame.display.flip()
        clock.tick(fps)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Ping pong against a predictive AI paddle")
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--win-score", type=int, default=5)
    parser.add_argument("--legacy-ai", action="store_true", help="use the older ball-chasing AI")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    cfg = Config(win_score=args.win_score, opponent_policy="legacy" if args.legacy_ai else "lookahead")
    logger.info("starting %dx%d at %d fps", args.width, args.height, args.fps)
    game(args.width, args.height, args.fps, cfg=cfg, seed=args.seed)


if __name__ == "__main__":
    main()
