"""Fixed chain and calendar constants shared by every deriver."""

from datetime import datetime, timedelta

from pytz import utc

GENESIS_BLOCK_HEIGHT = 0
GENESIS_BLOCK_DATE = utc.localize(datetime(2009, 1, 3, 18, 15, 5))
BLOCK_INTERVAL = timedelta(minutes=10)

HALVING_BLOCK = 210_000
DIFFICULTY_ADJUSTMENT_BLOCK = 2016
MAX_BLOCK_WEIGHT = 4_000_000

ERA_AFTER_GENESIS = "AG"
ERA_BEFORE_GENESIS = "BG"

# Lunar: 8 phases per cycle, 13 cycles per year
BLOCKS_IN_LUNAR_PHASE = DIFFICULTY_ADJUSTMENT_BLOCK // 4  # 504
BLOCKS_IN_LUNAR_CYCLE = DIFFICULTY_ADJUSTMENT_BLOCK * 2  # 4032
LUNAR_CYCLES_PER_YEAR = 13
BLOCKS_IN_LUNAR_YEAR = BLOCKS_IN_LUNAR_CYCLE * LUNAR_CYCLES_PER_YEAR  # 52416

# Solar: one cycle per halving, four seasons
BLOCKS_IN_SOLAR_CYCLE = HALVING_BLOCK
BLOCKS_IN_SOLAR_SEASON = BLOCKS_IN_SOLAR_CYCLE // 4  # 52500

# Tidal: continuous triangle wave, +18 at the top of each 72-block cycle
BLOCKS_PER_TIDE_CYCLE = 72
BLOCKS_PER_TIDAL_EVENT = BLOCKS_PER_TIDE_CYCLE // 2  # high or low every 36 blocks
MAX_HIGH_TIDE = 18
MAX_LOW_TIDE = -18
SLACK_TIDE = MAX_HIGH_TIDE - 1
SLACK_WATER_WINDOW = 4  # blocks either side of an extremum
TIDAL_EVENTS_PER_LUNAR_CYCLE = BLOCKS_IN_LUNAR_CYCLE // BLOCKS_PER_TIDAL_EVENT  # 112
TIDE_CYCLES_PER_LUNAR_CYCLE = TIDAL_EVENTS_PER_LUNAR_CYCLE // 2  # 56
