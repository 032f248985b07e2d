# core/settings.py
# All per-step values assume FPS logical steps per second.

TITLE = "Phoenix: Light Warrior"
WIDTH = 960
HEIGHT = 640
FPS = 60
MAX_STEPS_PER_FRAME = 5       # accumulator cap (drop time instead of spiralling)

# Colors (R,G,B)
BG_COLOR = (135, 206, 235)
BG_COLOR_LOW = (152, 251, 152)
SACRED_CIRCLE_COLOR = (255, 215, 0)
SACRED_CIRCLE_RADIUS = 100
HUD_COLOR = (245, 245, 255)
PLAYER_COLOR = (255, 215, 0)

# Arena edges
SPAWN_MARGIN = 50             # px outside the arena where enemies appear
OFFSCREEN_MARGIN = 50         # px past the arena before a projectile is dropped

# --- Player ---
PLAYER_RADIUS = 15
PLAYER_MAX_HEALTH = 100
PLAYER_MAX_SPEED = 4.0        # px/step
PLAYER_ACCEL = 0.3            # px/step^2 when input starts
PLAYER_ACCEL_MAX = 0.5        # px/step^2 after holding input for ACCEL_RAMP_STEPS
ACCEL_RAMP_STEPS = 20
PLAYER_FRICTION = 0.85        # velocity multiplier on an axis with no input

DASH_SPEED = 9.0              # px/step during dash
DASH_STEPS = 10
DASH_COOLDOWN = 60

MOMENTUM_STEPS = 120          # speed buff after a projectile kill
MOMENTUM_SPEED_MULT = 1.4

# --- Light energy ---
MAX_LIGHT_ENERGY = 100.0
ENERGY_REGEN = 0.5            # per step

# --- Combat ---
CONTACT_DAMAGE = 20
POINTS_PER_WAVE = 10          # points = POINTS_PER_WAVE * wave * type multiplier

UNARMED_ENERGY_COST = 10
UNARMED_COOLDOWN = 12

# --- Waves ---
BASE_ENEMY_COUNT = 8
ENEMIES_PER_WAVE = 4
INITIAL_SPAWN_DELAY = 30      # steps between spawns in wave 1
SPAWN_DELAY_STEP = 2          # shaved off every new wave
MIN_SPAWN_DELAY = 15
COMPLETE_GRACE_STEPS = 60
INTERMISSION_STEPS = 180

# --- Bosses ---
BOSS_WAVE = 9                 # first wave whose opening spawn is a giant
SWARM_INTERVAL = 240
SWARM_MIN = 3
SWARM_MAX = 4
SWARM_SPREAD = 40             # px jitter around the giant

# --- Shrines ---
SHRINE_RADIUS = 20
SHRINE_INSET = 70             # px from each corner

# --- High scores ---
HIGH_SCORE_LIMIT = 10
HIGH_SCORE_FILE = "highscores.json"
NAME_MAX_LENGTH = 12

LOG_LEVEL_ENV = "PHOENIX_LOG_LEVEL"
