# ui/renderer.py
# Draws a FrameSnapshot. Never touches simulation state.
import math

import pygame

from core import settings
from ui.hud import HUD
from world.enemy_defs import ENEMIES
from world.snapshot import EntityView, FrameSnapshot
from world.weapon_defs import PROJECTILES, WEAPONS


class Renderer:
    def __init__(self, width: int, height: int):
        self.hud = HUD()
        pygame.font.init()
        self.big_font = pygame.font.SysFont("georgia", 40, bold=True)
        self.font = pygame.font.SysFont("georgia", 22)
        self.background = self._build_background(width, height)

    def _build_background(self, width, height) -> pygame.Surface:
        bg = pygame.Surface((width, height))
        top = pygame.Color(*settings.BG_COLOR)
        low = pygame.Color(*settings.BG_COLOR_LOW)
        for y in range(height):
            bg.fill(top.lerp(low, y / max(1, height - 1)), (0, y, width, 1))
        pygame.draw.circle(
            bg, settings.SACRED_CIRCLE_COLOR,
            (width // 2, height // 2), settings.SACRED_CIRCLE_RADIUS, 3,
        )
        return bg

    def draw(self, surf: pygame.Surface, snap: FrameSnapshot, player_name: str = ""):
        surf.blit(self.background, (0, 0))

        if snap.session_state != "menu":
            for s in snap.shrines:
                self._draw_shrine(surf, s)
            for pa in snap.particles:
                self._draw_particle(surf, pa)
            self._draw_player(surf, snap.player)
            for e in snap.enemies:
                self._draw_enemy(surf, e)
            for pr in snap.projectiles:
                self._draw_projectile(surf, pr)
            self.hud.draw(surf, snap.hud)

        if snap.session_state == "menu":
            self._overlay(surf, 80, "Defend the Sacred Ground!", "Press Enter to begin")
        elif snap.session_state == "paused":
            self._overlay(surf, 120, "PAUSED", "P to resume")
        elif snap.session_state == "game_over":
            sub = f"Score {snap.hud.score}  -  Wave {snap.hud.wave}   (R to restart)"
            if snap.new_high_score:
                sub = f"New high score! Name: {player_name}_   (Enter to save)"
            self._overlay(surf, 150, "The light fades...", sub)
        elif snap.hud.wave_state == "intermission":
            secs = math.ceil(snap.hud.intermission_remaining / settings.FPS)
            self._overlay(surf, 100, f"Next Wave in {secs}...", "")
        elif snap.hud.wave_state == "complete":
            self._banner(surf, "Wave Complete!")

    # ------------------------------------------------------------
    # Entities
    # ------------------------------------------------------------
    def _draw_player(self, surf, p: EntityView):
        pulse = 0.3 + math.sin(p.phase) * 0.2
        cx, cy = int(p.x), int(p.y)
        pygame.draw.circle(surf, (255, 235, 120), (cx, cy), int(p.radius * (1.6 + pulse)), 2)
        if p.extra and p.extra[1] > 0:
            pygame.draw.circle(surf, (255, 250, 200), (cx, cy), int(p.radius * 2.2), 3)

        color = settings.PLAYER_COLOR
        if p.health_fraction < 0.3:
            flash = math.sin(p.phase * 2) * 0.5 + 0.5
            color = (255, int(215 - flash * 100), 0)
        pygame.draw.circle(surf, color, (cx, cy), int(p.radius))
        pygame.draw.circle(surf, (255, 165, 0), (cx, cy), int(p.radius), 3)
        pygame.draw.circle(surf, (255, 255, 255), (cx, cy), int(p.radius * 0.5))

    def _draw_enemy(self, surf, e: EntityView):
        color = ENEMIES.get(e.kind, {}).get("color", (240, 120, 120))
        cx, cy = int(e.x), int(e.y)
        r = int(e.radius)

        if e.kind == "giant":
            for phase in e.extra:
                ex = cx + math.cos(phase) * r * 1.6
                ey = cy + math.sin(phase) * r * 1.6
                pygame.draw.line(surf, color, (cx, cy), (int(ex), int(ey)), 4)
        elif e.kind == "wraith":
            wing = int(r * (1.4 + math.sin(e.phase * 4) * 0.2))
            pygame.draw.ellipse(surf, color, (cx - wing, cy - r // 3, wing * 2, int(r * 0.66)))

        pygame.draw.circle(surf, color, (cx, cy), r)
        pygame.draw.circle(surf, (44, 10, 46), (cx, cy), r, 2)

        eye = max(2, r // 6)
        pygame.draw.circle(surf, (255, 0, 0), (int(cx - r * 0.3), int(cy - r * 0.2)), eye)
        pygame.draw.circle(surf, (255, 0, 0), (int(cx + r * 0.3), int(cy - r * 0.2)), eye)

        if e.health_fraction < 1.0:
            bar_w = r * 2
            bx = cx - r
            by = cy - r - 10
            pygame.draw.rect(surf, (40, 40, 55), (bx, by, bar_w, 4))
            pygame.draw.rect(surf, (220, 80, 80), (bx, by, int(bar_w * e.health_fraction), 4))

    def _draw_projectile(self, surf, pr: EntityView):
        color = PROJECTILES.get(pr.kind, {}).get("color", (255, 255, 0))
        cx, cy = int(pr.x), int(pr.y)
        if pr.kind == "phoenix_arrow":
            tail = (int(pr.x - math.cos(pr.phase) * 14), int(pr.y - math.sin(pr.phase) * 14))
            pygame.draw.line(surf, color, tail, (cx, cy), 3)
        pygame.draw.circle(surf, color, (cx, cy), int(pr.radius))
        pygame.draw.circle(surf, (255, 255, 255), (cx, cy), max(1, int(pr.radius * 0.4)))

    def _draw_shrine(self, surf, s: EntityView):
        color = WEAPONS.get(s.kind, {}).get("color", (200, 200, 200))
        if s.health_fraction <= 0.0:
            color = (90, 90, 100)
        cx = int(s.x)
        cy = int(s.y + math.sin(s.phase * 0.06) * 4)
        r = int(s.radius)
        pts = [(cx, cy - r), (cx + r, cy), (cx, cy + r), (cx - r, cy)]
        pygame.draw.polygon(surf, color, pts)
        pygame.draw.polygon(surf, (20, 20, 26), pts, 2)

    def _draw_particle(self, surf, pa: EntityView):
        life = pa.extra[0] if pa.extra else 1.0
        size = max(1, int(life * (8 if pa.kind == "sparkle" else 6)))
        color = {
            "light": (255, 215, 0),
            "explosion": (255, 107, 53),
            "damage": (231, 76, 60),
            "sparkle": (255, 215, 0),
            "healing": (76, 175, 80),
        }.get(pa.kind, (255, 255, 255))
        pygame.draw.circle(surf, color, (int(pa.x), int(pa.y)), size)

    # ------------------------------------------------------------
    # Overlays
    # ------------------------------------------------------------
    def _overlay(self, surf, alpha: int, title: str, subtitle: str):
        shade = pygame.Surface(surf.get_size(), pygame.SRCALPHA)
        shade.fill((0, 0, 0, alpha))
        surf.blit(shade, (0, 0))
        w, h = surf.get_size()
        t = self.big_font.render(title, True, settings.SACRED_CIRCLE_COLOR)
        surf.blit(t, t.get_rect(center=(w // 2, h // 2 - 30)))
        if subtitle:
            s = self.font.render(subtitle, True, settings.HUD_COLOR)
            surf.blit(s, s.get_rect(center=(w // 2, h // 2 + 20)))

    def _banner(self, surf, text: str):
        w, _ = surf.get_size()
        t = self.big_font.render(text, True, (46, 125, 50))
        surf.blit(t, t.get_rect(center=(w // 2, 90)))
