import os

SCHEMA_VERSION = 1

MAX_SLOTS = 4
MAX_STOCKS = 255

# metadata path: players -> "<slot>" -> names -> {code, netplay}
METADATA_PLAYERS_KEY = "players"
METADATA_NAMES_KEY = "names"
METADATA_CODE_KEY = "code"
METADATA_TAG_KEY = "netplay"

DEFAULT_LOG_LEVEL = os.environ.get("REPLAY_OUTCOME_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
