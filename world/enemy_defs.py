# world/enemy_defs.py
"""
Enemy variants. Stats scale linearly with the wave that spawned the enemy
and are clamped so late waves stay readable:

    value = min(max_value, base + per_wave * (wave - 1))

health scales in whole hits: base + (wave - 1) // health_every_waves.
"""

ENEMIES = {
    "crawler": {
        "name": "Shadow Crawler",
        "color": (90, 20, 110),
        "radius": 9.0, "radius_per_wave": 0.25, "max_radius": 12.0,
        "speed": 1.6, "speed_per_wave": 0.06, "max_speed": 2.8,
        "health": 1, "health_every_waves": 0, "max_health": 1,
        "points_mult": 1,
    },
    "demon": {
        "name": "Shadow Demon",
        "color": (74, 14, 78),
        "radius": 12.0, "radius_per_wave": 1.0, "max_radius": 20.0,
        "speed": 0.7, "speed_per_wave": 0.08, "max_speed": 2.2,
        "health": 1, "health_every_waves": 0, "max_health": 1,
        "points_mult": 1,
    },
    "stone": {
        "name": "Stone Golem",
        "color": (110, 100, 95),
        "radius": 20.0, "radius_per_wave": 0.5, "max_radius": 26.0,
        "speed": 0.45, "speed_per_wave": 0.03, "max_speed": 0.9,
        "health": 3, "health_every_waves": 4, "max_health": 5,
        "points_mult": 3,
    },
    "wraith": {
        "name": "Sky Wraith",
        "color": (140, 120, 200),
        "radius": 13.0, "radius_per_wave": 0.25, "max_radius": 16.0,
        "speed": 1.0, "speed_per_wave": 0.05, "max_speed": 1.8,
        "health": 2, "health_every_waves": 6, "max_health": 3,
        "points_mult": 2,
        "sine_amplitude": 2.2,   # px/step of sideways drift at the crest
        "sine_rate": 0.08,
    },
    "giant": {
        "name": "Abyssal Giant",
        "color": (50, 0, 40),
        "radius": 36.0, "radius_per_wave": 1.0, "max_radius": 48.0,
        "speed": 0.35, "speed_per_wave": 0.02, "max_speed": 0.6,
        "health": 15, "health_every_waves": 1, "max_health": 40,
        "points_mult": 10,
        "tentacles": 6,
    },
}

ENEMY_KINDS = tuple(ENEMIES.keys())


def scaled_stat(kind: str, stat: str, wave: int) -> float:
    d = ENEMIES[kind]
    w = max(0, int(wave) - 1)
    return min(d["max_" + stat], d[stat] + d[stat + "_per_wave"] * w)


def scaled_health(kind: str, wave: int) -> int:
    d = ENEMIES[kind]
    every = d["health_every_waves"]
    bonus = (max(0, int(wave) - 1) // every) if every > 0 else 0
    return int(min(d["max_health"], d["health"] + bonus))
