"""Contains global constants and default values used throughout the project."""

from enums import CollapsePolicy, UpdateMode

# === MODEL CONSTANTS ===

GRID_WIDTH_DEFAULT: int = 20
GRID_HEIGHT_DEFAULT: int = 10

RANDOM_SEED_MAX: int = 999999999

COLLAPSE_POLICY_DEFAULT: CollapsePolicy = CollapsePolicy.NEIGHBOR_AWARE
UPDATE_MODE_DEFAULT: UpdateMode = UpdateMode.ON_EACH_STEP

# Highest possible entropy score under either collapse policy (four open sides / no fixed neighbors).
MAX_ENTROPY: int = 4

# Probability with which a single side is cleared (or kept out of the random mask) when a cell is resolved.
SIDE_DROP_PROBABILITY: float = 0.5

# === VIEW CONSTANTS ===

ANSI_FIXED_COLOR: str = "\033[31m"
ANSI_RESET: str = "\033[0m"

# === LOGGING CONSTANTS ===

LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)-24s | %(message)s"
LOG_DATE_FORMAT: str = "%H:%M:%S"
