"""Shared constants for ydbauth."""

AUTH_TICKET_HEADER = "x-ydb-auth-ticket"

IAM_TOKEN_AUDIENCE = "https://iam.api.cloud.yandex.net/iam/v1/tokens"
DEFAULT_IAM_ENDPOINT = "iam.api.cloud.yandex.net:443"

# Seconds.
JWT_EXPIRATION_TIMEOUT = 3600
TOKEN_EXPIRATION_TIMEOUT = 120
TOKEN_REQUEST_TIMEOUT = 10

METADATA_TOKEN_URL = (
    "http://169.254.169.254/computeMetadata/v1/instance/service-accounts/default/token"
)
METADATA_REQUEST_TIMEOUT = 10
METADATA_MAX_TRIES = 5
METADATA_RETRY_DELAY = 2.0
METADATA_REFRESH_MARGIN = 60
METADATA_FALLBACK_TOKEN_LIFETIME = 300
