"""Cache keys for the theme and time catalogs."""

THEMES_CACHE_KEY = "roomescape:themes"
TIMES_CACHE_KEY = "roomescape:times"
