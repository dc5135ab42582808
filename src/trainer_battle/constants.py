# =============================================================================
# BATTLE TIMING
# =============================================================================
MS_PER_TURN = 500  # one tick of in-game time
TURNS_PER_SEC = 1000 // MS_PER_TURN
TIME_LIMIT_SEC = 4 * 60 + 30  # 4m30s
TURN_LIMIT = TIME_LIMIT_SEC * TURNS_PER_SEC

CHARGE_MOVE_TURNS = 20  # time spent on the charge move cut scene
SWITCH_EXTRA_TURNS = 1  # extra time spent on a voluntary switch
SWITCH_COOLDOWN_TURNS = 60 * TURNS_PER_SEC

MAX_ITERATIONS = 10000  # hard ceiling for the auto-play loop

# =============================================================================
# PLAYER / CREATURE LIMITS
# =============================================================================
NUM_SHIELDS = 2
MAX_ENERGY = 100
MIN_IV = 0
MAX_IV = 15
MIN_LEVEL = 1.0
MAX_LEVEL = 50.0  # highest level reachable by powering up
MAX_TABLE_LEVEL = 51.0  # highest level in the multiplier table
MIN_CP = 10

# =============================================================================
# STAT STAGES
# =============================================================================
MIN_STAT_STAGE = -4
DEFAULT_STAT_STAGE = 0
MAX_STAT_STAGE = 4

# Indexed by stage + 4
STAT_STAGE_MULTIPLIERS = [1 / 2, 4 / 7, 2 / 3, 4 / 5, 1.0, 5 / 4, 3 / 2, 7 / 4, 2.0]

# =============================================================================
# DAMAGE
# =============================================================================
TRAINER_BATTLE_BONUS = 1.3
STAB_MULTIPLIER = 1.2
SHIELDED_DAMAGE = 1

# =============================================================================
# TYPE EFFECTIVENESS
# =============================================================================
TYPE_EFFECT_BASE = 1.6
MIN_TYPE_EFFECT_SUM = -3
MAX_TYPE_EFFECT_SUM = 2

# Indexed by clamped sum + 3
TYPE_EFFECT_MULTIPLIERS = [
    1 / TYPE_EFFECT_BASE**3,
    1 / TYPE_EFFECT_BASE**2,
    1 / TYPE_EFFECT_BASE,
    1.0,
    TYPE_EFFECT_BASE,
    TYPE_EFFECT_BASE**2,
]

# =============================================================================
# MESSAGES
# =============================================================================
MSG_SUPER_EFFECTIVE = "It's super effective!"
MSG_NOT_VERY_EFFECTIVE = "It's not very effective..."
