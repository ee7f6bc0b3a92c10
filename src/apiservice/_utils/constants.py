# Environment variables
ENV_BASE_URL = "APISERVICE_URL"
ENV_TIMEOUT = "APISERVICE_TIMEOUT"
ENV_DEBUG = "APISERVICE_DEBUG"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_USER_AGENT = "User-Agent"

# Defaults
DEFAULT_TIMEOUT_SECONDS = 30.0
LOGGER_NAME = "apiservice"
USER_AGENT_PREFIX = "apiservice-python"
