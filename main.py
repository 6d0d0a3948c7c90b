# main.py
import os

# Ensure SDL picks a usable video driver (helps when run from terminals that default to headless)
if os.name == "nt" and not os.environ.get("SDL_VIDEODRIVER"):
    os.environ["SDL_VIDEODRIVER"] = "windows"

import pygame
import tkinter as tk
from tkinter import filedialog

from guidepath.config import (
    WINDOW_WIDTH, WINDOW_HEIGHT, BG_COLOR, TEXT_COLOR,
    load_config, path_flat, follower_flat, ui_flat
)
from guidepath.draw import (
    View, draw_curve, draw_guides, draw_guide_lines, draw_follower, nearest_guide
)
from guidepath.follow import PathFollower
from guidepath.path import GuidePath
from guidepath.storage import save_path, load_path

APP_TITLE = "GUIDE PATH PREVIEW"

CONTROLS = [
    ("LeftClick + Drag", "Move the guide under the cursor"),
    ("D", "Duplicate selected guide"),
    ("A", "Add a guide at the cursor after the selection"),
    ("Delete / Backspace", "Remove selected guide"),
    ("+ / -", "Raise / lower curve resolution"),
    ("SPACE", "Run a follower along the path"),
    ("S / L", "Save / Load path"),
]


def _ask_filename(save: bool):
    """Native file dialog through a throwaway Tk root."""
    root = tk.Tk()
    root.withdraw()
    try:
        kw = dict(filetypes=[("JSON files", "*.json"), ("All files", "*.*")])
        if save:
            return filedialog.asksaveasfilename(title="Save path", defaultextension=".json", **kw)
        return filedialog.askopenfilename(title="Load path", **kw)
    finally:
        root.destroy()


def _start_follower(path, cfg):
    fcfg = follower_flat(cfg)
    if path.curve is None:
        print("No path available: add at least three guides.")
        return None
    return PathFollower.from_speed(
        path, float(fcfg.get("speed", 2.0)),
        loop=int(fcfg.get("loop", 0)),
        ping_pong=int(fcfg.get("ping_pong", 0)),
        align=bool(fcfg.get("align", 1)),
    )


def main():
    """Main preview loop."""
    cfg = load_config()
    pcfg, ucfg = path_flat(cfg), ui_flat(cfg)

    pygame.init()
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    pygame.display.set_caption(APP_TITLE)
    clock = pygame.time.Clock()
    font = pygame.font.SysFont(None, 18)

    view = View(ppu=float(ucfg.get("pixels_per_unit", 100.0)))
    path = GuidePath(resolution=int(pcfg.get("resolution", 15)),
                     facing_epsilon=float(pcfg.get("facing_epsilon", 0.01)))
    path.seed_default_guides((-1.5, 1.0, 0.0))

    selected_idx = None
    dragging = False
    follower = None

    running = True
    while running:
        dt = clock.tick(60) / 1000.0
        mouse_pos = pygame.mouse.get_pos()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                selected_idx = nearest_guide(path.positions, view, mouse_pos)
                dragging = selected_idx is not None

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                dragging = False

            elif event.type == pygame.MOUSEMOTION and dragging and selected_idx is not None:
                g = path.guides[selected_idx]
                g.position = view.to_world(mouse_pos, z=g.position[2])

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_d and selected_idx is not None:
                    dupe = path.duplicate_guide(selected_idx)
                    selected_idx = path.index_of(dupe)

                elif event.key == pygame.K_a:
                    pos = view.to_world(mouse_pos)
                    if selected_idx is None:
                        path.add_guide(pos)
                    else:
                        path.insert_guide_after(selected_idx, pos)
                        selected_idx += 1
                    path.renumber_guides()

                elif event.key in (pygame.K_DELETE, pygame.K_BACKSPACE) and selected_idx is not None:
                    path.remove_guide(selected_idx)
                    path.renumber_guides()
                    selected_idx = None

                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    path.resolution = path.resolution + 1

                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    path.resolution = path.resolution - 1

                elif event.key == pygame.K_SPACE:
                    follower = _start_follower(path, cfg)

                elif event.key == pygame.K_s:
                    save_path(_ask_filename(save=True), path)

                elif event.key == pygame.K_l:
                    loaded = load_path(_ask_filename(save=False))
                    if loaded is not None:
                        path, selected_idx, follower = loaded, None, None

        path.tick()
        if follower is not None and not follower.tick(dt):
            follower = None

        screen.fill(BG_COLOR)
        if ucfg.get("show_guide_lines", 1):
            draw_guide_lines(screen, path.positions, view)
        draw_curve(screen, path.curve, view)
        if ucfg.get("show_guides", 1):
            draw_guides(screen, path.positions, view, selected_idx)
        if follower is not None:
            draw_follower(screen, follower.position, follower.heading_deg, view)

        status = f"guides={len(path)}  resolution={path.resolution}  length={path.length:.3f}"
        screen.blit(font.render(status, True, TEXT_COLOR), (8, 8))
        for i, (key, desc) in enumerate(CONTROLS):
            screen.blit(font.render(f"{key}: {desc}", True, TEXT_COLOR), (8, WINDOW_HEIGHT - 18 * (len(CONTROLS) - i)))

        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
