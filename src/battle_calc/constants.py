# =============================================================================
# INDIVIDUAL / EFFORT VALUE LIMITS
# =============================================================================
MIN_IV = 0
MAX_IV = 31
NUM_IVS = 32  # MAX_IV + 1
MAX_PER_STAT_EVS = 255

# =============================================================================
# LEVEL / FRIENDSHIP LIMITS
# =============================================================================
MIN_LEVEL = 1
MAX_LEVEL = 100
MAX_FRIENDSHIP = 255

# =============================================================================
# NATURE MULTIPLIERS - never applied to HP
# =============================================================================
NATURE_MULTIPLIER_NEGATIVE = 0.9
NATURE_MULTIPLIER_NEUTRAL = 1.0
NATURE_MULTIPLIER_POSITIVE = 1.1

# =============================================================================
# COMBAT STAGES
# =============================================================================
MIN_COMBAT_STAGE = -6
DEFAULT_COMBAT_STAGE = 0
MAX_COMBAT_STAGE = 6

# =============================================================================
# DAMAGE CALCULATION CONSTANTS
# =============================================================================
# Random damage multiplier range, one roll per value in 85..100
DAMAGE_RANDOM_MIN = 85
DAMAGE_RANDOM_RANGE = 16

BASE_DAMAGE_DIVISOR = 50
BASE_DAMAGE_CONSTANT = 2

STAB_MULTIPLIER = 1.5
TORRENT_MULTIPLIER = 1.5  # Torrent, Overgrow, Blaze, Swarm
WEATHER_BOOST_MULTIPLIER = 1.5
WEATHER_REDUCTION_MULTIPLIER = 0.5

# Critical hits: x2 through gen 5, x1.5 afterwards
CRIT_MULTIPLIER_LEGACY = 2.0
CRIT_MULTIPLIER_MODERN = 1.5

# Screens: halved in singles, 2/3 when the move hits several targets
SCREEN_MULTIPLIER_SINGLE = 0.5
SCREEN_MULTIPLIER_MULTI = 2 / 3

# Spread moves: halved in gen 3, x0.75 afterwards
MULTI_TARGET_MULTIPLIER_GEN3 = 0.5
MULTI_TARGET_MULTIPLIER = 0.75

# =============================================================================
# CRITICAL HIT ODDS
# =============================================================================
CRIT_CHANCE_DENOMINATOR_LEGACY = 16  # gen 6 and earlier

# Crit placements grow as 2^N
MAX_COMBINED_HITS = 8

# =============================================================================
# HIDDEN POWER
# =============================================================================
HIDDEN_POWER_MIN_POWER = 30

# =============================================================================
# EXPERIENCE MULTIPLIERS
# =============================================================================
TRAINER_BATTLE_EXP_MULTIPLIER = 1.5  # defeated Pokemon belonged to a trainer
LUCKY_EGG_EXP_MULTIPLIER = 1.5
AFFECTION_EXP_MULTIPLIER = 1.2
PAST_EVOLUTION_EXP_MULTIPLIER = 1.2  # gen 6+
DOMESTIC_TRADE_EXP_MULTIPLIER = 1.5
INTERNATIONAL_TRADE_EXP_MULTIPLIER_LEGACY = 1.5  # gen 1-3
INTERNATIONAL_TRADE_EXP_MULTIPLIER_GEN5 = 6963 / 4096
INTERNATIONAL_TRADE_EXP_MULTIPLIER = 1.7
