# mazesolver/app/viewer.py
#!/usr/bin/env python3
"""
Maze Viewer: depth-first search, step by step

- Keyboard:
    [SPACE]      -> run/pause
    [N]          -> single step
    [R]          -> reset
    [+]/[-]      -> steps/sec
    [Q]/[ESC]    -> quit

The viewer drives DepthFirstSolver.step() and paints the StepResult it gets
back; the grid itself is marked by the solver.
"""

import logging
import sys
import time
from typing import Dict, List, Tuple

import pygame

from mazesolver.app.settings import DEFAULT_STEPS_PER_SEC, clamp_speed
from mazesolver.core.dfs import DepthFirstSolver
from mazesolver.core.types import Cell, Coord, Grid, StepResult

logger = logging.getLogger(__name__)

# ---------- Config ----------
PANEL_W = 320            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 24
FONT_NAME = None  # default pygame font

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
WALL_GRAY   = ( 52, 56, 66)
FLOOR_GRAY  = (200,200,200)
VISITED_A   = (255,0,120,90)
FRONTIER_A  = (0,150,255,110)
PATH_MINT   = (0,255,200)

CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)

CELL_COLORS: Dict[Cell, Tuple[int, int, int]] = {
    Cell.WALL: WALL_GRAY,
    Cell.PATH: FLOOR_GRAY,
    Cell.PATH_VISITED: FLOOR_GRAY,
    Cell.PATH_SOLUTION: FLOOR_GRAY,
    Cell.START: FLOOR_GRAY,
    Cell.END: FLOOR_GRAY,
}

STATUS_LABELS = {"done": "Done", "no_path": "No path"}


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        if self.active and self.togglable:
            bg = (58, 86, 160, 235)
        elif self.hover:
            bg = (46, 50, 60, 230)
        else:
            bg = (36, 40, 48, 220)
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, (120, 170, 255, 255), self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event):
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()


# ---------- Viewer ----------
class Viewer:
    def __init__(self, grid: Grid, title: str = "maze", steps_per_sec: int = DEFAULT_STEPS_PER_SEC):
        pygame.init()

        self.grid = grid
        self.title = title
        self.cell_size = self._auto_cell_size(grid)
        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        grid_px_w = GRID_MARGIN*2 + grid.cols * self.cell_size
        grid_px_h = GRID_MARGIN*2 + grid.rows * self.cell_size
        win_w = grid_px_w + PANEL_W
        win_h = max(grid_px_h, 480)

        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption(f"Maze - {title}")

        self._buttons: List[UIButton] = []
        self._layout(win_w, win_h)

        self.frontier: List[Coord] = []
        self.closed_set: set = set()
        self.path: List[Coord] = []

        self.running = False
        self.clock = pygame.time.Clock()
        self.steps_per_sec = clamp_speed(steps_per_sec)
        self.state = "Idle"

        self.algo = DepthFirstSolver()
        self.algo.init(self.grid)
        self._last_metrics = self.algo.metrics()
        self._last_step_t = 0.0

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and center the grid."""
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)

        cs_by_w = avail_w // self.grid.cols
        cs_by_h = avail_h // self.grid.rows
        self.cell_size = int(max(4, min(cs_by_w, cs_by_h)))

        grid_plate_w = self.grid.cols * self.cell_size + 2 * GRID_MARGIN
        grid_plate_h = self.grid.rows * self.cell_size + 2 * GRID_MARGIN

        left_x = max(0, (win_w - (grid_plate_w + PANEL_W)) // 2)
        top_y  = max(0, (win_h - grid_plate_h) // 2)

        self.canvas_rect = pygame.Rect(left_x, top_y, grid_plate_w, grid_plate_h)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN,
                             self.canvas_rect.y + GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right),
                                       win_h)
        self._build_buttons()

    def _auto_cell_size(self, grid: Grid) -> int:
        target_h = 720 - GRID_MARGIN*2
        return max(6, min(CELL_SIZE_DEFAULT, target_h // grid.rows))

    def run(self):
        while True:
            self._handle_events()
            if self.running:
                self._tick_algorithm()
            self._draw()
            self.clock.tick(60)

    def _tick_algorithm(self):
        t0 = time.time()
        if t0 - self._last_step_t >= 1.0 / max(1, self.steps_per_sec):
            self._last_step_t = t0
            self._do_step()

    def _do_step(self) -> StepResult:
        res = self.algo.step()
        self.frontier = list(self.algo.stack)
        for c in res.closed: self.closed_set.add(c)
        if res.path is not None: self.path = res.path
        if res.status in STATUS_LABELS:
            self.state = STATUS_LABELS[res.status]; self.running = False
        else:
            self.state = "Running" if self.running else "Paused"
        if res.metrics:
            self._last_metrics = res.metrics
        self._refresh_active_states()
        return res

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self._quit()
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    self._quit()
                elif e.key == pygame.K_SPACE:
                    self._toggle_run()
                elif e.key == pygame.K_r:
                    self._reset()
                elif e.key == pygame.K_n:
                    self._do_step()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._bump_speed(+1)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
                    self._bump_speed(-1)
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                for b in self._buttons:
                    b.handle_mouse(e)

    def _quit(self):
        logger.debug("viewer closed in state %s", self.state)
        pygame.quit(); sys.exit(0)

    def _reset(self):
        self.running = False
        self.state = "Idle"
        self.algo.reset()
        self.frontier = []
        self.closed_set.clear()
        self.path = []
        self._last_metrics = self.algo.metrics()
        self._refresh_active_states()

    def _toggle_run(self):
        if self.state in STATUS_LABELS.values():
            return
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _bump_speed(self, dv: int):
        self.steps_per_sec = clamp_speed(self.steps_per_sec + dv)

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h-1)
            c = tuple(int(a + (b - a) * t) for a, b in zip(top, bot))
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _cell_rect(self, c: Coord) -> pygame.Rect:
        cs = self.cell_size
        ox, oy = self._grid_origin
        row, col = c
        return pygame.Rect(ox + col*cs, oy + row*cs, cs, cs)

    def _overlay(self, cells, rgba):
        cs = self.cell_size
        s = pygame.Surface((cs, cs), pygame.SRCALPHA); s.fill(rgba)
        for c in cells:
            self.screen.blit(s, self._cell_rect(c).topleft)

    def _draw_grid(self):
        for row in range(self.grid.rows):
            for col in range(self.grid.cols):
                rect = self._cell_rect((row, col))
                pygame.draw.rect(self.screen, CELL_COLORS[self.grid.cells[row][col]], rect)
                pygame.draw.rect(self.screen, BLACK, rect, 1)

        self._overlay(self.closed_set - {self.grid.start}, VISITED_A)
        self._overlay(self.frontier, FRONTIER_A)

        if len(self.path) >= 2:
            pts = [self._cell_rect(c).center for c in self.path]
            pygame.draw.lines(self.screen, PATH_MINT, False, pts, max(2, self.cell_size // 5))

        self._draw_badge(self.grid.start, "S", BLUE)
        self._draw_badge(self.grid.end,   "E", RED)

    def _draw_badge(self, cell: Coord, label: str, color: Tuple[int,int,int]):
        rect = self._cell_rect(cell)
        pygame.draw.circle(self.screen, color, rect.center, max(3, self.cell_size//2 - 2))
        txt = self.font_small.render(label, True, WHITE)
        self.screen.blit(txt, txt.get_rect(center=rect.center))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 230  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 38
        gap = 10

        self.btn_run = UIButton("Run / Pause", pygame.Rect(x, y, w, h), self._toggle_run, togglable=True)
        y += h + gap
        btn_step  = UIButton("Step Once", pygame.Rect(x, y, w, h), self._do_step); y += h + gap
        btn_reset = UIButton("Reset", pygame.Rect(x, y, w, h), self._reset);       y += h + gap

        half = (w - 8) // 2
        btn_minus = UIButton("Speed -", pygame.Rect(x, y, half, h), lambda: self._bump_speed(-1))
        btn_plus  = UIButton("Speed +", pygame.Rect(x + half + 8, y, half, h), lambda: self._bump_speed(+1))

        self._buttons.extend([self.btn_run, btn_step, btn_reset, btn_minus, btn_plus])
        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(getattr(self, "running", False))

    def _draw_metrics_and_buttons(self):
        rb = self._right_band

        card = pygame.Surface((rb.width - 20, 210), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        m = self._last_metrics
        line("Metrics", big=True, color=ACCENT_GOLD)
        line(f"Popped: {m.get('popped', 0)}")
        line(f"Stack: {m.get('stack_size', 0)}")
        line(f"Visited: {m.get('visited_count', 0)}")
        line(f"Path Len: {m.get('path_len', 0)}")
        line("-" * 26)
        line(f"State: {self.state}")
        line(f"Speed: {self.steps_per_sec} steps/s")

        for b in self._buttons:
            b.draw(self.screen, self.font)
