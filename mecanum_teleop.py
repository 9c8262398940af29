from typing import Optional, Tuple
import numpy as np
import pygame as pg

from mecanum_constants import WHEEL_NAMES
from mecanum_drive import Point, mecanum_coordinate, wheel_commands

SCREEN_WIDTH, SCREEN_HEIGHT = 900, 600
PANEL_RADIUS = 200  # Unit circle radius on screen [px]
INPUT_CENTER = (SCREEN_WIDTH // 4, SCREEN_HEIGHT // 2)
OUTPUT_CENTER = (3 * SCREEN_WIDTH // 4, SCREEN_HEIGHT // 2)

BG_COLOR = (255, 255, 255)
AXIS_COLOR = (200, 200, 200)
INPUT_COLOR = (30, 30, 30)
GROUP_1_COLOR = (31, 119, 180)
GROUP_2_COLOR = (255, 127, 14)


def screen_to_direction(px: float, py: float,
                        center: Tuple[int, int] = INPUT_CENTER) -> Optional[Point]:
    """Direction from the panel center to a pixel; None on the center itself. Y is inverted."""
    x = px - center[0]
    y = center[1] - py
    if x == 0 and y == 0:
        return None
    return Point(float(x), float(y))


def direction_to_screen(x: float, y: float,
                        center: Tuple[int, int] = OUTPUT_CENTER,
                        scale: float = PANEL_RADIUS) -> Tuple[int, int]:
    """Unit circle coordinate to pixels around a panel center."""
    return int(round(center[0] + x * scale)), int(round(center[1] - y * scale))


def direction_from_keys(keys) -> Optional[Point]:
    """W/S drive, A/D strafe. None when no (or cancelling) keys are held."""
    x = float(keys[pg.K_d]) - float(keys[pg.K_a])
    y = float(keys[pg.K_w]) - float(keys[pg.K_s])
    if x == 0 and y == 0:
        return None
    return Point(x, y)


def draw_arrow(screen, start, end, color=(0, 0, 0), width=2, head_len=10, head_angle_deg=28):
    """Draw a line with an arrowhead from start to end."""
    x0, y0 = start
    x1, y1 = end
    pg.draw.line(screen, color, (x0, y0), (x1, y1), width)
    ang = np.arctan2(y1 - y0, x1 - x0)
    ha = np.deg2rad(head_angle_deg)
    lx = x1 - head_len * np.cos(ang - ha)
    ly = y1 - head_len * np.sin(ang - ha)
    rx = x1 - head_len * np.cos(ang + ha)
    ry = y1 - head_len * np.sin(ang + ha)
    pg.draw.polygon(screen, color, [(x1, y1), (lx, ly), (rx, ry)])


def draw_panel(screen, font, center, title, x_label, y_label):
    cx, cy = center
    pg.draw.circle(screen, AXIS_COLOR, center, PANEL_RADIUS, 1)
    pg.draw.line(screen, AXIS_COLOR, (cx - PANEL_RADIUS - 20, cy),
                 (cx + PANEL_RADIUS + 20, cy), 1)
    pg.draw.line(screen, AXIS_COLOR, (cx, cy - PANEL_RADIUS - 20),
                 (cx, cy + PANEL_RADIUS + 20), 1)
    screen.blit(font.render(title, True, (0, 0, 0)),
                (cx - PANEL_RADIUS, cy - PANEL_RADIUS - 50))
    screen.blit(font.render(x_label, True, (100, 100, 100)),
                (cx + PANEL_RADIUS - 40, cy + 6))
    screen.blit(font.render(y_label, True, (100, 100, 100)),
                (cx + 6, cy - PANEL_RADIUS - 20))


def print_controls():
    print(f"Controls:")
    print(f" - Mouse: Point in the left panel to request a direction")
    print(f" - W/S: Drive Forward/Back")
    print(f" - A/D: Strafe Left/Right")
    print(f" - ESC: Quit")


def main():
    pg.init()
    screen = pg.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pg.display.set_caption("Mecanum Direction Mapping")
    clock = pg.time.Clock()
    font = pg.font.Font(None, 26)
    running = True
    print_controls()
    while running:
        for event in pg.event.get():
            if event.type == pg.QUIT:
                running = False
            elif event.type == pg.KEYDOWN:
                if event.key == pg.K_ESCAPE:
                    running = False

        # Keyboard takes priority over the mouse
        direction = direction_from_keys(pg.key.get_pressed())
        if direction is None and pg.mouse.get_focused():
            direction = screen_to_direction(*pg.mouse.get_pos())

        screen.fill(BG_COLOR)
        draw_panel(screen, font, INPUT_CENTER,
                   "Requested Direction", "strafe", "drive")
        draw_panel(screen, font, OUTPUT_CENTER,
                   "Motor Group Coordinate", "group 1", "group 2")

        if direction is not None:
            norm = float(np.hypot(direction.x, direction.y))
            unit = Point(direction.x / norm, direction.y / norm)
            group = mecanum_coordinate(direction)
            wheels = wheel_commands(direction)

            draw_arrow(screen, INPUT_CENTER,
                       direction_to_screen(unit.x, unit.y, INPUT_CENTER),
                       INPUT_COLOR, width=3)
            draw_arrow(screen, OUTPUT_CENTER,
                       direction_to_screen(group.x, 0.0), GROUP_1_COLOR, width=3)
            draw_arrow(screen, OUTPUT_CENTER,
                       direction_to_screen(0.0, group.y), GROUP_2_COLOR, width=3)
            draw_arrow(screen, OUTPUT_CENTER,
                       direction_to_screen(group.x, group.y), INPUT_COLOR)

            wheel_text = "  ".join(
                f"{name}: {value:+.2f}" for name, value in wheels.as_dict().items())
            group_text = f"group 1: {group.x:+.3f}  group 2: {group.y:+.3f}"
            screen.blit(font.render(group_text, True, (0, 0, 0)),
                        (20, SCREEN_HEIGHT - 60))
            screen.blit(font.render(wheel_text, True, (0, 0, 0)),
                        (20, SCREEN_HEIGHT - 30))
        else:
            screen.blit(font.render("No direction requested (all wheels idle: "
                                    + ", ".join(WHEEL_NAMES) + ")", True, (0, 0, 0)),
                        (20, SCREEN_HEIGHT - 30))

        pg.display.flip()
        clock.tick(60)

    pg.quit()


if __name__ == "__main__":
    main()
