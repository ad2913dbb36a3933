"""Centralized error and log message templates for the SightGuide client."""


class ErrorMessages:
    """Centralized error message templates."""

    # URL errors
    URL_INVALID = "Invalid URL for path '{path}': {error}"
    URL_NOT_ABSOLUTE = (
        "Base endpoint '{base_url}' and path '{path}' do not form an absolute http(s) URL"
    )

    # Encoding / decoding errors
    BODY_ENCODE_FAILED = "Failed to encode request body for {path}: {error}"
    RESPONSE_DECODE_FAILED = "Failed to decode response from {path} as {type_name}: {error}"
    RESPONSE_JSON_INVALID = "Response from {path} is not valid JSON: {error}"

    # Transport errors
    REQUEST_FAILED = "Request to {path} failed: {error}"
    RESPONSE_EMPTY = "No data received from {path}"
    RESULT_NOT_SUCCESS = "Server rejected request to {path} (result={result})"

    # Audio errors
    AUDIO_READ_FAILED = "Error loading audio file {file}: {error}"
    AUDIO_PLAYER_NOT_FOUND = (
        "Audio player '{executable}' not found in PATH. "
        "Install ffmpeg or set AUDIO_PLAYER_COMMAND."
    )
    AUDIO_PLAYBACK_FAILED = "Audio playback failed for {file}: {error}"
    AUDIO_PLAYBACK_EXIT = "Audio player exited with code {code}: {stderr}"
    AUDIO_PLAYBACK_TIMEOUT = "Audio playback timed out after {timeout}s"


class LogMessages:
    """Centralized log message templates."""

    # Initialization
    INIT_HTTP_CLIENT = "Created HTTP client for {base_url}"
    INIT_GATEWAY = "RequestGateway initialized (base_url={base_url}, temp_dir={temp_dir})"
    INIT_SERVICE = "SightGuideService initialized (gateway={gateway}, recordings={recordings})"
    INIT_WORKER = "Started I/O worker thread '{name}'"
    STOP_WORKER = "Stopped I/O worker thread '{name}'"

    # Requests
    REQUEST_SENDING = "{method} {url}"
    REQUEST_DECODED = "Decoded {type_name} from {path}"

    # Soft failures
    IMAGE_UNAVAILABLE = "Image request to {path} returned no image: {reason}"
    IMAGE_DECODE_FAILED = "Response from {path} is not a decodable image: {error}"
    AUDIO_UNAVAILABLE = "Audio request to {path} not played: {reason}"
    AUDIO_HTTP_STATUS = "HTTP {status_code}"

    # Audio
    AUDIO_DOWNLOADED = "Downloaded {size_kb:.1f}KB of audio to {destination}"
    AUDIO_UPLOADING = "Uploading {size_kb:.1f}KB audio file {file} to {path}"
    AUDIO_UPLOADED = "Uploaded audio to {path} (record_name={record_name})"
    AUDIO_PLAYING = "Playing audio file {file}"
    AUDIO_CLEANUP_FAILED = "Failed to clean up temp audio file: {error}"
    RECORD_NAME_MISSING = "Upload response from {path} has no record_name"

    # Delivery
    DELIVERY_FAILED = "Operation failed, delivering error result: {error}"
