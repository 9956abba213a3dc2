"""
hud_manager.py
--------------
Score, life hearts, and the start / game-over panels.

Responsibilities
----------------
- Show the instructions panel and best score before the first run.
- Show the in-game HUD (score + hearts) once a run starts.
- Show final score, best score and recent history after game over.

Panel visibility follows RunStartedEvent / GameOverEvent; score and lives
come from the frame snapshot. Text and metrics come from config/hud.yaml.
"""

import pygame

from corgi_run.core.debug.debug_logger import DebugLogger
from corgi_run.core.runtime.game_settings import Colors, Display
from corgi_run.core.services.event_manager import GameOverEvent, RunStartedEvent
from corgi_run.ui.ui_loader import load_hud_layout


class HUDManager:
    """Manages the HUD and overlay panels."""

    def __init__(self, events, best_score=0, width=Display.WIDTH, height=Display.HEIGHT,
                 layout=None):
        self.width = width
        self.height = height
        self.layout = layout or load_hud_layout()

        self.hud_visible = False
        self.instructions_visible = True
        self.gameover_visible = False

        self.best_score = best_score
        self.final_score = 0
        self.history = ()

        hud = self.layout["hud"]
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.Font(None, hud["font_size"])
        self.small_font = pygame.font.Font(None, hud["small_font_size"])

        events.subscribe(RunStartedEvent, self._on_run_started)
        events.subscribe(GameOverEvent, self._on_game_over)

        DebugLogger.init_entry("HUDManager")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _on_run_started(self, event):
        self.hud_visible = True
        self.instructions_visible = False
        self.gameover_visible = False
        self.best_score = event.best

    def _on_game_over(self, event):
        self.gameover_visible = True
        self.final_score = event.score
        self.best_score = event.best
        self.history = event.history

    # ===========================================================
    # Text Builders
    # ===========================================================

    def score_text(self, score):
        return f"Score: {score}"

    def history_lines(self):
        panel = self.layout["gameover_panel"]
        if not self.history:
            return [panel["empty_history"]]
        lines = [panel["history_title"]]
        lines.extend(f"{i}. {score}" for i, score in enumerate(self.history, start=1))
        return lines

    def start_lines(self):
        panel = self.layout["start_panel"]
        lines = [panel["title"], f"{panel['best_label']}: {self.best_score}", ""]
        lines.extend(panel["lines"])
        return lines

    def gameover_lines(self):
        panel = self.layout["gameover_panel"]
        lines = [
            panel["title"],
            f"{panel['final_label']}: {self.final_score}",
            f"{panel['best_label']}: {self.best_score}",
            "",
        ]
        lines.extend(self.history_lines())
        lines.extend(["", panel["footer"]])
        return lines

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, surface, snapshot):
        if self.hud_visible:
            self._draw_hud(surface, snapshot)
        if self.instructions_visible:
            self._draw_panel(surface, self.start_lines())
        if self.gameover_visible:
            self._draw_panel(surface, self.gameover_lines())

    def _draw_hud(self, surface, snapshot):
        hud = self.layout["hud"]
        margin = hud["margin"]

        text = self.font.render(self.score_text(snapshot.score), True, Colors.TEXT)
        surface.blit(text, (margin, margin - 4))

        for i in range(snapshot.max_lives):
            heart = self.heart_icon(hud["heart_size"], dimmed=i >= snapshot.lives)
            x = self.width - margin - (snapshot.max_lives - i) * hud["heart_spacing"]
            surface.blit(heart, (x, margin - 2))

    def _draw_panel(self, surface, lines):
        spacing = self.layout["panel"]
        rendered = [
            (self.font if i == 0 else self.small_font).render(line, True, Colors.TEXT)
            for i, line in enumerate(lines)
        ]
        line_gap = spacing["line_gap"]
        panel_w = max(r.get_width() for r in rendered) + spacing["padding"] * 2
        panel_h = sum(r.get_height() + line_gap for r in rendered) + spacing["top"] * 2

        panel = pygame.Surface((panel_w, panel_h), pygame.SRCALPHA)
        panel.fill(Colors.PANEL)
        y = spacing["top"]
        for r in rendered:
            panel.blit(r, ((panel_w - r.get_width()) // 2, y))
            y += r.get_height() + line_gap

        surface.blit(panel, ((self.width - panel_w) // 2, (self.height - panel_h) // 2))

    def heart_icon(self, size, dimmed=False):
        icon = pygame.Surface((size, size), pygame.SRCALPHA)
        radius = size / 4
        pygame.draw.circle(icon, Colors.HEART, (radius, radius), radius)
        pygame.draw.circle(icon, Colors.HEART, (size - radius, radius), radius)
        pygame.draw.polygon(icon, Colors.HEART,
                            [(0, radius * 1.2), (size, radius * 1.2), (size / 2, size)])
        if dimmed:
            icon.set_alpha(self.layout["hud"]["dimmed_heart_alpha"])
        return icon
