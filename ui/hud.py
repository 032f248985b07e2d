# ui/hud.py
import pygame

from core import settings
from world.snapshot import HudView
from world.weapon_defs import WEAPONS


class HUD:
    """
    Top-left status block:
    - health and light-energy bars
    - wave / score line
    - collected weapons, active one highlighted
    """

    def __init__(self, font_size: int = 18):
        pygame.font.init()
        fs = max(10, min(48, int(font_size)))
        self.font = pygame.font.SysFont("consolas", fs)

    def _bar(self, surf, x, y, w, h, pct, color):
        pct = max(0.0, min(1.0, pct))
        pygame.draw.rect(surf, (40, 40, 55), (x, y, w, h))
        pygame.draw.rect(surf, color, (x, y, int(w * pct), h))
        pygame.draw.rect(surf, (230, 230, 240), (x, y, w, h), 2)

    def draw(self, surf: pygame.Surface, hud: HudView):
        x = 14
        y = 12
        w = 220

        # -------------------------
        # Health / energy
        # -------------------------
        hp_pct = hud.health / max(1, hud.max_health)
        hp_color = (76, 175, 80) if hp_pct > 0.6 else (255, 152, 0) if hp_pct > 0.3 else (244, 67, 54)
        self._bar(surf, x, y, w, 16, hp_pct, hp_color)
        txt = self.font.render(f"HP {max(0, hud.health)}/{hud.max_health}", True, settings.HUD_COLOR)
        surf.blit(txt, (x + w + 10, y))

        self._bar(surf, x, y + 22, w, 10, hud.energy / max(1.0, hud.max_energy), (33, 150, 243))
        txt = self.font.render(f"LIGHT {int(hud.energy)}", True, settings.HUD_COLOR)
        surf.blit(txt, (x + w + 10, y + 18))

        # -------------------------
        # Wave / score
        # -------------------------
        status = f"WAVE {hud.wave}   SCORE {hud.score}"
        if hud.shielded:
            status += "   SHIELD"
        if hud.momentum:
            status += "   MOMENTUM"
        surf.blit(self.font.render(status, True, settings.HUD_COLOR), (x, y + 40))

        # -------------------------
        # Weapons
        # -------------------------
        yy = y + 64
        for i, kind in enumerate(hud.weapons):
            d = WEAPONS.get(kind, {})
            active = hud.active_weapon == i
            label = f"{'>' if active else ' '} {i + 1}. {d.get('name', kind)}"
            color = d.get("color", (210, 210, 225)) if active else (60, 60, 80)
            surf.blit(self.font.render(label, True, color), (x, yy))
            yy += 18
