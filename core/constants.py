"""Constants for the SightGuide client."""

from enum import Enum


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"


class ApiErrorKind(str, Enum):
    INVALID_URL = "invalid_url"
    REQUEST_FAILED = "request_failed"
    PARSING_FAILED = "parsing_failed"


class Endpoint(str, Enum):
    # Glance
    GLANCE_DATA = "/glance/data"
    GLANCE_IMU = "/glance/imu"
    GLANCE_LIKE = "/glance/like"

    # Fixation
    FIXATION_DATA = "/fixation/data"
    FIXATION_IMAGE = "/fixation/img"
    FIXATION_LABEL_VOICE = "/fixation/label_voice"
    FIXATION_LABEL = "/fixation/label"

    # Memory
    MEMORY_LABELS = "/memory/labels"
    MEMORY_LABEL_VOICE = "/memory/label_voice"


# =============================================================================
# Wire Format Constants
# =============================================================================

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_AUDIO = "audio/m4a"

JSON_HEADERS = {"Content-Type": CONTENT_TYPE_JSON}
AUDIO_UPLOAD_HEADERS = {"Content-Type": CONTENT_TYPE_AUDIO}

# CommonResponse.result value for success
COMMON_RESULT_SUCCESS = 0

# Label timestamps are sent as "yyyy-MM-dd HH:mm:ss" in local time
LABEL_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# Field returned by the voice upload endpoint
RECORD_NAME_FIELD = "record_name"

ALLOWED_URL_SCHEMES = ("http", "https")


# =============================================================================
# Audio Constants
# =============================================================================

AUDIO_FILE_SUFFIX = ".m4a"

# Recording file name: <scene_id>_<obj_id>.m4a
RECORDING_FILE_TEMPLATE = "{scene_id}_{obj_id}" + AUDIO_FILE_SUFFIX

DEFAULT_AUDIO_PLAYER_COMMAND = "ffplay -nodisp -autoexit -loglevel error"


# =============================================================================
# HTTP Client Constants
# =============================================================================

# Timeout configuration (in seconds)
HTTP_CONNECT_TIMEOUT = 10.0  # Time to establish connection
HTTP_READ_TIMEOUT = 60.0  # Time to read response (audio downloads)
HTTP_WRITE_TIMEOUT = 30.0  # Time to write request (audio uploads)
HTTP_POOL_TIMEOUT = 5.0  # Time to acquire connection from pool

# Chunk size used when streaming audio responses to disk
AUDIO_STREAM_CHUNK_SIZE = 64 * 1024
