"""
Starfall Asteroids
Dodge the falling asteroids, catch the stars. Move with the mouse.
"""

import argparse
import logging
import sys

import pygame

from starfall import (
    ArcadeConfig,
    ArcadeSession,
    CollisionPolicy,
    GameOverEntered,
    HazardHit,
    MonotonicClock,
    PickupCollected,
    Playfield,
    player_marker,
)

logger = logging.getLogger("starfall.demo")

# --- Configuration ---
TITLE = "Starfall Asteroids"
MAX_STAR_ICONS = 20
COLLECT_ANIMATION_FRAMES = 36

# Colors
BG_COLOR = (0, 0, 0)
ROCKET_COLOR = (230, 40, 40)
ASTEROID_COLOR = (170, 60, 60)
STAR_COLOR = (255, 230, 0)
HUD_COLOR = (255, 255, 0)
HINT_COLOR = (200, 200, 220)
OVERLAY_COLOR = (0, 0, 0, 160)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Starfall Asteroids - arcade demo")
    p.add_argument("--width", type=int, default=800)
    p.add_argument("--height", type=int, default=900)
    p.add_argument("--fps", type=int, default=60)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument(
        "--policy",
        choices=[policy.value for policy in CollisionPolicy],
        default=CollisionPolicy.RESET_SCORE.value,
    )
    p.add_argument("--speed-ramp", type=float, default=0.0)
    p.add_argument("--log-level", default="INFO")
    return p.parse_args()


class CollectAnimation:
    """A star flying from where it was caught up to the score line."""

    def __init__(self, start: tuple[float, float], target: tuple[float, float]) -> None:
        self.start = start
        self.target = target
        self.frame = 0

    @property
    def done(self) -> bool:
        return self.frame >= COLLECT_ANIMATION_FRAMES

    def step(self) -> tuple[float, float, float]:
        self.frame += 1
        t = min(1.0, self.frame / COLLECT_ANIMATION_FRAMES)
        ease = 1 - (1 - t) ** 2
        x = self.start[0] + (self.target[0] - self.start[0]) * ease
        y = self.start[1] + (self.target[1] - self.start[1]) * ease
        return x, y, 1.0 - 0.5 * ease


def draw_hud(screen, font, session: ArcadeSession, width: int) -> None:
    score = session.state.score
    icons = min(score, MAX_STAR_ICONS)
    for i in range(icons):
        pygame.draw.circle(screen, STAR_COLOR, (30 + i * 28, 30), 10)
    label = font.render(str(score), True, HUD_COLOR)
    screen.blit(label, label.get_rect(center=(width // 2, 70)))
    best = font.render(f"Best {session.high_score}", True, HINT_COLOR)
    screen.blit(best, (width - best.get_width() - 20, 20))


def draw_game_over(screen, font, width: int, height: int, score: int) -> None:
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill(OVERLAY_COLOR)
    screen.blit(overlay, (0, 0))
    lines = [f"Game over - {score} stars", "Click or press R to play again"]
    for i, line in enumerate(lines):
        surf = font.render(line, True, HUD_COLOR if i == 0 else HINT_COLOR)
        screen.blit(surf, surf.get_rect(center=(width // 2, height // 2 + i * 50)))


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 32, bold=True)
    small = pygame.font.SysFont("monospace", 14)

    config = ArcadeConfig(
        collision_policy=CollisionPolicy(args.policy),
        speed_ramp_per_10_points=args.speed_ramp,
    )
    playfield = Playfield(float(args.width), float(args.height))
    session = ArcadeSession(playfield, config=config, seed=args.seed, clock=MonotonicClock())
    logger.info("Seed %d, policy %s", session.seed, config.collision_policy.value)

    animations: list[CollectAnimation] = []

    def on_pickup(event: PickupCollected) -> None:
        animations.append(CollectAnimation(event.center, (playfield.width / 2, 70.0)))

    def on_hazard(event: HazardHit) -> None:
        logger.debug("Hit by asteroid %d, lost %d stars", event.entity_id, event.score_before)

    def on_game_over(event: GameOverEntered) -> None:
        logger.debug("Overlay shown at score %d", event.score)

    session.bus.subscribe(PickupCollected, on_pickup)
    session.bus.subscribe(HazardHit, on_hazard)
    session.bus.subscribe(GameOverEntered, on_game_over)
    session.on_run_end(lambda score: logger.info("Run finished: %d", score))

    pointer_x = playfield.width / 2
    running = True

    while running:
        pg_clock.tick(args.fps)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r and session.state.game_over:
                    session.restart()
                    animations.clear()
            elif event.type == pygame.MOUSEBUTTONDOWN and session.state.game_over:
                session.restart()
                animations.clear()
            elif event.type == pygame.MOUSEMOTION:
                pointer_x = float(event.pos[0])
            elif event.type == pygame.VIDEORESIZE:
                playfield = Playfield(float(event.w), float(event.h))

        # --- Update ---
        session.tick(pointer_x, playfield)

        # --- Draw ---
        screen.fill(BG_COLOR)
        width, height = int(playfield.width), int(playfield.height)

        marker = player_marker(pointer_x, playfield, config)
        mx, my = marker.center
        rocket = pygame.Rect(
            int(mx - config.player_width / 2),
            int(my - config.player_height / 2),
            int(config.player_width),
            int(config.player_height),
        )
        pygame.draw.rect(screen, ROCKET_COLOR, rocket)

        for hazard in session.state.hazards:
            cx, cy = hazard.center
            pygame.draw.circle(screen, ASTEROID_COLOR, (int(cx), int(cy)), int(hazard.radius))
        for pickup in session.state.pickups:
            cx, cy = pickup.center
            pygame.draw.circle(screen, STAR_COLOR, (int(cx), int(cy)), int(pickup.radius))

        for anim in animations:
            x, y, scale = anim.step()
            pygame.draw.circle(screen, STAR_COLOR, (int(x), int(y)), max(1, int(20 * scale)))
        animations[:] = [a for a in animations if not a.done]

        draw_hud(screen, font, session, width)
        hint = small.render(
            f"FPS: {pg_clock.get_fps():.0f}   Mouse=Move  Esc=Quit", True, HINT_COLOR
        )
        screen.blit(hint, (10, height - 24))

        if session.state.game_over:
            draw_game_over(screen, font, width, height, session.state.score)

        pygame.display.flip()

    session.finish()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
