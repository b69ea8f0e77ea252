"""Game configuration constants."""

# Grid dimensions
GRID_SIZE = 10

# Economy
UPGRADE_COST_PER_LEVEL = 5  # Upgrade cost = current level * 5

# Advertised action costs
WALL_DEMOLITION_COST = 10
RUIN_CLEANUP_COST = 5
CITY_FOUNDING_COST = 15

# Reach (Chebyshev distance from the acting city)
ACTION_RANGE = 2  # Demolition, cleanup and founding
ATTACK_RANGE = 3

# Combat
ROLL_WINDOW = 5  # Lowest roll is combat_level - 5 + 1

# Founded cities
NEW_CITY_LEVEL = 1

# Testing
RNG_SEED_DEFAULT = 42  # Default seed for testing
