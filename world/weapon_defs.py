# world/weapon_defs.py
# "none" is the unarmed light-orb attack; it never appears in a shrine.
from core import settings

WEAPONS = {
    "none": {
        "name": "Light Orb",
        "color": (255, 255, 0),
        "desc": "Single orb toward the cursor",
        "energy_cost": settings.UNARMED_ENERGY_COST,
        "cooldown": settings.UNARMED_COOLDOWN,
        "projectile": "light_orb",
    },
    "thunder_hammer": {
        "name": "Thunder Hammer",
        "color": (120, 180, 255),
        "desc": "Slam that strikes every enemy nearby",
        "energy_cost": 25,
        "cooldown": 45,
        "range": 120.0,
        "damage": 2,
    },
    "phoenix_bow": {
        "name": "Phoenix Bow",
        "color": (255, 120, 40),
        "desc": "Fan of five flaming arrows",
        "energy_cost": 15,
        "cooldown": 30,
        "projectile": "phoenix_arrow",
        "arrows": 5,
        "spread_deg": 40.0,     # total fan width
    },
    "shield_of_light": {
        "name": "Shield of Light",
        "color": (255, 250, 200),
        "desc": "Brief immunity to contact damage",
        "energy_cost": 30,
        "cooldown": 300,
        "duration": 180,
    },
    "spirit_cannon": {
        "name": "Spirit Cannon",
        "color": (150, 255, 230),
        "desc": "Cheap rapid bursts, long reload",
        "energy_cost": 4,
        "cooldown": 5,          # between shots inside a burst
        "burst": 6,
        "reload": 40,           # after the last shot of a burst
        "projectile": "spirit_blast",
    },
}

# Shrine weapons in corner order: top-left, top-right, bottom-left, bottom-right
SHRINE_LAYOUT = ("thunder_hammer", "phoenix_bow", "shield_of_light", "spirit_cannon")

PROJECTILES = {
    "light_orb": {"speed": 10.0, "radius": 6, "life": 120, "color": (255, 255, 0)},
    "phoenix_arrow": {"speed": 12.0, "radius": 5, "life": 90, "color": (255, 120, 40)},
    "spirit_blast": {"speed": 14.0, "radius": 4, "life": 60, "color": (150, 255, 230)},
}
