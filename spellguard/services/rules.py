"""
GAME RULES
==========
Fixed rules of the host arena. None of these are tunable: the host enforces
them, the bot only has to agree with it.

Distances are in arena units, times in turns.
"""

import sys


# =============================================================================
# 1. HEROES
# =============================================================================

HERO_SPEED = 800             # max move per turn
HERO_DAMAGE = 2              # melee damage per hazard per turn
HERO_DAMAGE_RANGE = 800      # melee reach
HERO_VISIBILITY_RANGE = 2200

# The full squad cuts a hazard down in
# ceil(health / (HERO_DAMAGE * MELEE_KILL_FACTOR)) turns.
MELEE_KILL_FACTOR = 3


# =============================================================================
# 2. HAZARDS (MONSTERS)
# =============================================================================

MONSTER_SPEED = 400
MONSTER_DAMAGE_RANGE = 300       # distance at which a hazard hits a structure
MONSTER_VISIBILITY_RANGE = 5000  # structure radius inside which hazards commit


# =============================================================================
# 3. SPELLS
# =============================================================================

SPELL_COST = 10

WIND_RANGE = 1280          # push reach, also the interception buffer

SHIELD_RANGE = 2200
SHIELD_LIFE = 12           # turns a fresh shield lasts

CONTROL_RANGE = 2200


# =============================================================================
# 4. NUMERICS
# =============================================================================

# Anything at or below this is "already arrived".
TIME_EPSILON = sys.float_info.epsilon

# Formation constants used to derive guard posts.
GOLDEN_RATIO = 1.618
COS_22_5 = 0.92387953
SIN_22_5 = 0.38268343
