"""Constants for the Digitraffic railway API adapter.

API Documentation: https://www.digitraffic.fi/en/railway-traffic/
No authentication required. Clients identify themselves with the Digitraffic-User header.
"""

DIGITRAFFIC_BASE_URL = "https://rata.digitraffic.fi/api/v1"

# Endpoint paths relative to the base URL
STATIONS_PATH = "metadata/stations"
TRAIN_PATH = "trains/{departure_date}/{number}"
LATEST_TRAIN_PATH = "trains/latest/{number}"
LIVE_TRAINS_PATH = "live-trains/station/{station_short_code}"
CAUSE_CATEGORIES_PATH = "metadata/cause-category-codes"
DETAILED_CAUSE_CATEGORIES_PATH = "metadata/detailed-cause-category-codes"
THIRD_LEVEL_CAUSE_CATEGORIES_PATH = "metadata/third-cause-category-codes"

TRAIN_CATEGORIES = "Long-Distance,Commuter"

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Accept-Encoding": "gzip",
}
USER_HEADER = "Digitraffic-User"
