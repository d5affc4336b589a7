"""Magic values and message templates; modules import from here instead of inlining literals."""

# WAV encoding: mono 16-bit PCM at 16 kHz.
SAMPLE_RATE = 16000
CHANNELS = 1
SAMPLE_WIDTH_BYTES = 2
PCM16_SCALE = 32767.0
PCM16_MIN = -32768
PCM16_MAX = 32767
# Used when reading PCM back into floats.
PCM16_DIVISOR = 32768.0

# OpenAI-compatible transcription endpoint
TRANSCRIPTIONS_PATH = "/audio/transcriptions"
AUDIO_FILENAME = "audio.wav"
AUDIO_MEDIA_TYPE = "audio/wav"
FORM_FILE = "file"
FORM_MODEL = "model"
FORM_LANGUAGE = "language"
AUTH_HEADER = "Authorization"
AUTH_SCHEME = "Bearer"
LANGUAGE_AUTO = "auto"
# None disables httpx timeouts.
REQUEST_TIMEOUT: float | None = None

# Error descriptions
ERR_NO_AUDIO = "No audio data provided"
ERR_NO_API_KEY = "API key is required for transcription"
ERR_INVALID_HEADER = "Invalid authorization header value: API key contains characters not allowed in an HTTP header"
ERR_WAV_CREATE = "Failed to create WAV writer: %s"
ERR_WAV_WRITE = "Failed to write samples: %s"
ERR_WAV_READ = "Failed to read WAV: %s"
ERR_WAV_FORMAT = "Unsupported WAV format: expected %d channel, %d Hz, %d-bit PCM; got %d channel, %d Hz, %d-bit"
ERR_HTTP_CLIENT = "Failed to build HTTP client: %s"
ERR_HTTP_REQUEST = "HTTP request failed: %s"
ERR_READ_ERROR_BODY = "Failed to read error response"
ERR_API_MESSAGE = "API error (%s): %s"
ERR_API_STATUS = "API request failed with status %s: %s"
ERR_PARSE_RESPONSE = "Failed to parse API response: %s"

# Log messages
MSG_TRANSCRIBING = "Transcribing %d samples (%.2fs) with %s at %s"
MSG_ENCODED = "Encoded audio to %d bytes WAV"
MSG_RESULT = "Transcription result: %s"
MSG_API_FAILED = "Transcription request failed (%d)"
MSG_TRANSCRIPTION_FAILED = "Transcription failed: %s"
MSG_READING_FILE = "Reading %s"

# Configuration
DEFAULT_PROVIDER = "openai"
DEFAULT_LANGUAGE = LANGUAGE_AUTO
DEFAULT_LOG_LEVEL = "INFO"
