"""
draw_manager.py
---------------
pygame renderer for world snapshots.

Responsibilities:
- Cache the gradient sky and grass background
- Draw dust with per-particle alpha
- Draw the corgi with its running bob and tilt
- Draw each obstacle kind as a shape
- Optional hitbox overlay
"""

import math

import pygame

from corgi_run.core.debug.debug_logger import DebugLogger
from corgi_run.core.runtime.game_settings import Colors, Debug, Display, Ground, PlayerConfig
from corgi_run.entities.entity_types import ObstacleKind
from corgi_run.graphics.render_adapter import RenderAdapter

BOB_FREQUENCY = 15.0
BOB_AMPLITUDE = 4.0
TILT_FREQUENCY = 10.0
TILT_AMPLITUDE = 0.06  # radians


def _rect(r):
    return pygame.Rect(round(r.x), round(r.y), round(r.width), round(r.height))


def _lerp_color(a, b, t):
    return tuple(round(a[i] + (b[i] - a[i]) * t) for i in range(3))


def running_pose(player_view, anim_time):
    """Vertical bob offset and tilt (radians) for the current frame."""
    if player_view.on_ground and not player_view.is_sliding:
        bob = math.sin(anim_time * BOB_FREQUENCY) * BOB_AMPLITUDE
        tilt = math.sin(anim_time * TILT_FREQUENCY) * TILT_AMPLITUDE
        return bob, tilt
    return 0.0, 0.0


class DrawManager(RenderAdapter):
    """Draws snapshots onto a target surface."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, surface, width=Display.WIDTH, height=Display.HEIGHT):
        self.surface = surface
        self.width = width
        self.height = height
        self._bg_cache = None
        self._dust_layer = pygame.Surface((width, height), pygame.SRCALPHA)

        self._obstacle_painters = {
            ObstacleKind.LOG_HORIZONTAL: self._draw_log_horizontal,
            ObstacleKind.LOG_VERTICAL: self._draw_log_vertical,
            ObstacleKind.BIRD: self._draw_bird,
            ObstacleKind.HEART: self._draw_heart,
        }

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Frame
    # ===========================================================

    def render(self, snapshot):
        self.draw_background()
        self.draw_particles(snapshot.particles)
        self.draw_player(snapshot.player, snapshot.anim_time)
        self.draw_obstacles(snapshot.obstacles)

        if Debug.HITBOX_VISIBLE:
            self.draw_hitboxes(snapshot)

    # ===========================================================
    # Background
    # ===========================================================

    def draw_background(self):
        if self._bg_cache is None:
            self._bg_cache = self._build_background()
            DebugLogger.trace("Background cached", category="render")
        self.surface.blit(self._bg_cache, (0, 0))

    def _build_background(self):
        bg = pygame.Surface((self.width, self.height))
        ground_y = self.height - Ground.HEIGHT

        for y in range(ground_y):
            color = _lerp_color(Colors.SKY_TOP, Colors.SKY_BOTTOM, y / max(ground_y - 1, 1))
            pygame.draw.line(bg, color, (0, y), (self.width, y))

        for y in range(ground_y, self.height):
            t = (y - ground_y) / max(Ground.HEIGHT - 1, 1)
            pygame.draw.line(bg, _lerp_color(Colors.GRASS_TOP, Colors.GRASS_BOTTOM, t),
                             (0, y), (self.width, y))
        return bg

    # ===========================================================
    # Dust
    # ===========================================================

    def draw_particles(self, particles):
        if not particles:
            return
        layer = self._dust_layer
        layer.fill((0, 0, 0, 0))
        for p in particles:
            alpha = max(0, min(255, round(p.alpha * 255)))
            pygame.draw.circle(layer, (*Colors.DUST, alpha), (p.x, p.y), p.radius)
        self.surface.blit(layer, (0, 0))

    # ===========================================================
    # Player
    # ===========================================================

    def draw_player(self, player_view, anim_time):
        rect = player_view.rect
        bob, tilt = running_pose(player_view, anim_time)

        sprite = self._build_corgi(round(rect.width), round(rect.height))
        if tilt:
            # Screen y points down, so a positive tilt is a clockwise turn.
            sprite = pygame.transform.rotate(sprite, -math.degrees(tilt))

        center = (rect.x + rect.width / 2, rect.y + bob + rect.height / 2)
        self.surface.blit(sprite, sprite.get_rect(center=center))

    @staticmethod
    def _build_corgi(w, h):
        sprite = pygame.Surface((max(w, 1), max(h, 1)), pygame.SRCALPHA)
        leg_h = max(h // 5, 2)
        body = pygame.Rect(0, h // 4, int(w * 0.8), h - h // 4 - leg_h)
        pygame.draw.rect(sprite, Colors.CORGI_BODY, body, border_radius=max(h // 6, 1))
        pygame.draw.ellipse(sprite, Colors.CORGI_BELLY,
                            (body.x + w // 8, body.centery, body.width // 2, body.height // 2))

        head = pygame.Rect(int(w * 0.55), 0, int(w * 0.45), int(h * 0.55))
        pygame.draw.ellipse(sprite, Colors.CORGI_BODY, head)
        pygame.draw.polygon(sprite, Colors.CORGI_BODY, [
            (head.x + head.width * 0.2, head.y + head.height * 0.3),
            (head.x + head.width * 0.3, 0),
            (head.x + head.width * 0.5, head.y + head.height * 0.25),
        ])
        pygame.draw.circle(sprite, Colors.CORGI_EYE,
                           (head.x + head.width * 0.7, head.y + head.height * 0.45),
                           max(h // 18, 1))

        for lx in (body.x + w * 0.1, body.right - w * 0.2):
            pygame.draw.rect(sprite, Colors.CORGI_BODY,
                             (int(lx), body.bottom - 2, max(int(w * 0.1), 1), leg_h + 2))
        return sprite

    # ===========================================================
    # Obstacles
    # ===========================================================

    def draw_obstacles(self, obstacles):
        for view in obstacles:
            self._obstacle_painters[view.kind](_rect(view.rect))

    def _draw_log_horizontal(self, r):
        pygame.draw.rect(self.surface, Colors.LOG, r, border_radius=r.height // 2)
        ring_w = int(r.height * 0.6)
        ring = pygame.Rect(r.right - ring_w, r.y, ring_w, r.height)
        pygame.draw.ellipse(self.surface, Colors.LOG_RING, ring)

    def _draw_log_vertical(self, r):
        pygame.draw.rect(self.surface, Colors.LOG, r, border_radius=r.width // 4)
        ring = pygame.Rect(r.x, r.y, r.width, int(r.width * 0.4))
        pygame.draw.ellipse(self.surface, Colors.LOG_RING, ring)

    def _draw_bird(self, r):
        pygame.draw.ellipse(self.surface, Colors.BIRD, r.inflate(0, -r.height // 3))
        pygame.draw.polygon(self.surface, Colors.BIRD, [
            (r.centerx - r.width * 0.2, r.centery),
            (r.centerx + r.width * 0.1, r.y),
            (r.centerx + r.width * 0.2, r.centery),
        ])
        pygame.draw.polygon(self.surface, Colors.BIRD_BEAK, [
            (r.x, r.centery - 4), (r.x - r.width * 0.15, r.centery), (r.x, r.centery + 4),
        ])
        pygame.draw.circle(self.surface, Colors.CORGI_EYE, (r.x + r.width * 0.18, r.centery - 3), 3)

    def _draw_heart(self, r):
        radius = r.width / 4
        pygame.draw.circle(self.surface, Colors.HEART, (r.x + radius, r.y + radius), radius)
        pygame.draw.circle(self.surface, Colors.HEART, (r.right - radius, r.y + radius), radius)
        pygame.draw.polygon(self.surface, Colors.HEART, [
            (r.x, r.y + radius * 1.2), (r.right, r.y + radius * 1.2), (r.centerx, r.bottom),
        ])

    # ===========================================================
    # Debug Overlay
    # ===========================================================

    def draw_hitboxes(self, snapshot):
        player_box = snapshot.player.rect.inset(PlayerConfig.HITBOX_INSET)
        pygame.draw.rect(self.surface, (255, 0, 0), _rect(player_box), Debug.HITBOX_LINE_WIDTH)
        for view in snapshot.obstacles:
            pygame.draw.rect(self.surface, (0, 0, 255), _rect(view.rect), Debug.HITBOX_LINE_WIDTH)
