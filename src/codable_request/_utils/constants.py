# Headers
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CACHE_CONTROL = "Cache-Control"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"

# Content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"

CACHE_CONTROL_NO_CACHE = "no-cache"

# Client identification
USER_AGENT_PREFIX = "CodableRequest.Python"
VERSION = "1.0.0"

# Status codes at or above this value are decoded as errors
ERROR_STATUS_THRESHOLD = 400

# Environment variables consulted when truststore is unavailable
ENV_SSL_CERT_FILE = "SSL_CERT_FILE"
ENV_REQUESTS_CA_BUNDLE = "REQUESTS_CA_BUNDLE"
ENV_SSL_CERT_DIR = "SSL_CERT_DIR"

LOGGER_NAME = "codable_request"
