"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    CONNECTION_ERROR = 2
    DATA_ERROR = 3
    USAGE_ERROR = 4


class NodeFlags(Enum):
    """Node.js startup flags that change which ECMAScript features are active.

    Args:
        Enum (string): Flag token as appended to the version identifier.
    """

    NONE = ""
    ES_STAGING = "--es_staging"
    HARMONY = "--harmony"


class Modes(Enum):
    """Result modes offered by the CLI."""

    ONE = "one"
    MUTUAL = "mutual"
    EXCLUSIVE = "exclusive"
    ALL = "all"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    COMPAT_TABLE_BASE_URL = (
        "https://raw.githubusercontent.com/williamkapke/node-compat-table/gh-pages/results/v8"
    )
    NODE_RELEASES_URL = "https://nodejs.org/dist/index.json"
    SUPPORTED_FLAGS = [flag.value for flag in NodeFlags]
    SUPPORTED_MODES = [mode.value for mode in Modes]
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    ENV_LOG_LEVEL = "NODECOMPAT_LOG_LEVEL"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests
    USER_AGENT = "nodecompat/1.0"

    # Keys in the compat-table documents that are metadata, not data
    RESERVED_PREFIX = "_"
    ES_PREFIX = "ES"
    BLEEDING_EDGE = "ESNext"

    # Some releases pass 85% of one edition yet 100% of the next two; a single
    # outlier feature must not sink an otherwise supported edition.
    DEFAULT_THRESHOLD = 0.85
