"""Replay several shape runs side by side in a grid window."""
from __future__ import annotations

import logging
import math

import pygame

from . import constants

logger = logging.getLogger(__name__)


def visualize_results_grid(
    base,
    results,
    window_size=(1200, 800),
    fps=constants.FPS,
):
    """Replay the logs in ``results`` (keyed by shape) on a side view of ``base``'s ramp."""

    sims = list(results.items())
    n_sims = len(sims)
    if n_sims == 0:
        logger.warning("No simulations to visualize.")
        return

    pygame.init()
    W, H = window_size
    screen = pygame.display.set_mode((W, H))
    pygame.display.set_caption("Rolling Shapes - Grid Replay")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 18)

    # Pick a near-square grid to pack all panels
    cols = math.ceil(math.sqrt(n_sims))
    rows = math.ceil(n_sims / cols)

    # Side view: horizontal axis is scene z, vertical axis is height
    length, theta = base.ramp_length, base.incline_angle_rad
    top = (0.5 * length * math.cos(theta), length * math.sin(theta))
    bottom = (-0.5 * length * math.cos(theta), 0.0)
    radius = base.radius
    min_x, max_x = bottom[0] - radius, top[0] + radius
    min_y, max_y = 0.0, top[1] + 2 * radius
    world_w = max_x - min_x
    world_h = max_y - min_y

    cell_w = W / cols
    cell_h = H / rows
    margin = 24

    max_len = max(len(data["log"]) for _, data in sims)

    def world_to_cell(ix, x, y):
        # Map side-view coordinates into the ix-th grid cell; +z is drawn to the left
        col = ix % cols
        row = ix // cols
        scale = min((cell_w - 2 * margin) / world_w, (cell_h - 2 * margin) / world_h)
        sx = col * cell_w + margin + (max_x - x) * scale
        sy = row * cell_h + cell_h - margin - (y - min_y) * scale
        return int(sx), int(sy), scale

    frame = 0
    playing = True
    running = True

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    playing = not playing
                elif event.key == pygame.K_r:
                    frame = 0
                    playing = True

        if playing:
            frame += 1
            if frame >= max_len:
                frame = max_len - 1
                playing = False

        screen.fill((10, 10, 10))

        for idx, (name, data) in enumerate(sims):
            log = data["log"]
            col = idx % cols
            row = idx // cols
            cell_rect = pygame.Rect(int(col * cell_w), int(row * cell_h), int(cell_w), int(cell_h))
            pygame.draw.rect(screen, (20, 20, 20), cell_rect, 0)
            pygame.draw.rect(screen, (60, 60, 60), cell_rect, 1)

            x0, y0, _ = world_to_cell(idx, *top)
            x1, y1, scale = world_to_cell(idx, *bottom)
            pygame.draw.line(screen, (14, 165, 233), (x0, y0), (x1, y1), 3)

            if log:
                state = log[min(frame, len(log) - 1)]
                bx, by, _ = world_to_cell(idx, state["z"], state["y"])
                r_px = max(2, int(radius * scale))
                pygame.draw.circle(screen, (212, 175, 55), (bx, by), r_px)
                # Marker shows the spin angle
                mx = bx - int(r_px * math.sin(state["angle"]))
                my = by - int(r_px * math.cos(state["angle"]))
                pygame.draw.line(screen, (248, 250, 252), (bx, by), (mx, my), 2)

                overlay_lines = [
                    f"t={state['t']:.3f}s  s={state['s']:.3f}m",
                    f"v={state['speed']:.2f}m/s  w={state['omega']:.2f}rad/s",
                    f"KE={state['KE_trans'] + state['KE_rot']:.2f}J  PE={state['PE']:.2f}J",
                ]
                for j, line in enumerate(overlay_lines):
                    text = font.render(line, True, (220, 220, 220))
                    screen.blit(text, (cell_rect.right - 5 - text.get_width(), cell_rect.y + 40 + 16 * j))

            t_finish = data["time"]
            label1 = f"{name}  a={data['acceleration']:.3f}m/s^2"
            label2 = f"t={t_finish:.3f}s" if t_finish is not None else "t=?"
            screen.blit(font.render(label1, True, (255, 255, 255)), (cell_rect.x + 5, cell_rect.y + 5))
            screen.blit(font.render(label2, True, (255, 255, 0)), (cell_rect.x + 5, cell_rect.y + 22))

        hint = "SPACE: pause/resume   R: replay   ESC: quit"
        screen.blit(font.render(hint, True, (200, 200, 200)), (10, H - 25))

        pygame.display.flip()
        clock.tick(fps)

    pygame.quit()
