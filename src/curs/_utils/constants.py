# Headers
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_USER_AGENT = "User-Agent"

# Content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM_URLENCODED = "application/x-www-form-urlencoded"
CONTENT_TYPE_MULTIPART = "multipart/form-data"
CONTENT_TYPE_OCTET_STREAM = "application/octet-stream"

# Env vars
ENV_USER_AGENT = "CURS_USER_AGENT"
ENV_DISABLE_SSL_VERIFY = "CURS_DISABLE_SSL_VERIFY"
ENV_SSL_CERT_FILE = "SSL_CERT_FILE"
ENV_REQUESTS_CA_BUNDLE = "REQUESTS_CA_BUNDLE"
ENV_SSL_CERT_DIR = "SSL_CERT_DIR"

# Multipart
MULTIPART_BOUNDARY_LENGTH = 30

# Status codes accepted by decode_success
SUCCESS_STATUS_CODES = frozenset({200, 201, 202})
