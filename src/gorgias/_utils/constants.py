# Environment variables
ENV_SUBDOMAIN = "GORGIAS_SUBDOMAIN"
ENV_EMAIL = "GORGIAS_EMAIL"
ENV_API_KEY = "GORGIAS_API_KEY"
ENV_BASE_URL = "GORGIAS_BASE_URL"
ENV_TIMEOUT_MS = "GORGIAS_TIMEOUT_MS"
DOTENV_FILE = ".env"

# Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
HEADER_USER_AGENT = "User-Agent"
HEADER_REQUEST_ID = "x-request-id"
HEADER_RETRY_AFTER = "Retry-After"
DEFAULT_TRACE_ID_HEADER = "x-trace-id"

# API
API_HOST_TEMPLATE = "https://{subdomain}.gorgias.com/api/"
JSON_CONTENT_TYPE = "application/json"
USER_AGENT = "Gorgias.Python.Sdk"

# Defaults
DEFAULT_TIMEOUT_MS = 30_000
DEFAULT_PAGE_SIZE = 100
