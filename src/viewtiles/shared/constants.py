import math

# Base tile edge (world units / pixels) at zoom 0
TILE_SIZE = 512

# Web Mercator latitude limit; sin() is clamped so poles stay finite
MERCATOR_MAX_LAT_DEG = 85.0511287798066
MERCATOR_MAX_SIN = math.sin(math.radians(MERCATOR_MAX_LAT_DEG))

# Longitude span of a single world copy (degrees)
WORLD_LNG_SPAN_DEG = 360.0
WORLD_LNG_HALF_SPAN_DEG = 180.0

# Lowest tile level; fractional zooms below it resolve to level 0
MIN_TILE_ZOOM = 0

# Profiles directory override and fallback
PROFILES_ENV_VAR = 'VIEWTILES_HOME'
PROFILES_DIRNAME = 'profiles'
PROFILE_SUFFIX = '.toml'
