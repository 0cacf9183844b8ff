"""All magic values live here — no inline literals anywhere else."""

# Service endpoints (single fixed host)
HOST_URL = "http://gw-q201.fit.vutbr.cz:8081"
TOKEN_PATH = "/api/v1/oauth/token/"
REVOKE_PATH = "/api/v1/oauth/revoke_token/"
ANNOTATION_PATH = "/api/v1/annotations/"
TOKEN_URL = HOST_URL + TOKEN_PATH
REVOKE_URL = HOST_URL + REVOKE_PATH
ANNOTATION_URL = HOST_URL + ANNOTATION_PATH

# OAuth form fields
GRANT_TYPE_FIELD = "grant_type"
GRANT_TYPE_CLIENT_CREDENTIALS = "client_credentials"
ACCESS_TOKEN_FIELD = "access_token"
REVOKE_TOKEN_FIELD = "token"
REVOKE_CLIENT_ID_FIELD = "client_id"
TOKEN_TYPE_HINT_FIELD = "token_type_hint"
TOKEN_TYPE_HINT_ACCESS = "access_token"

# Annotation upload
AUTHORIZATION_HEADER = "Authorization"
BEARER_PREFIX = "Bearer "
IMAGE_FIELD = "image"
IMAGE_FILENAME = "file.jpg"
IMAGE_CONTENT_TYPE = "image/jpeg"
STORE_DISABLED_QUERY = "?store=false"
ANNOTATION_CREATED_STATUS = 201
RESPONSE_TEXT_FIELD = "text"

# Durable token slot
TOKEN_STORAGE_KEY = "access_token"
DEFAULT_TOKEN_PATH = ".texie_token.json"

# Image preprocessing defaults
DEFAULT_JPEG_QUALITY = 30
DEFAULT_IMAGE_WIDTH = 1440.0

# Log messages
MSG_CREDENTIALS_MISSING = "Client credentials were not provided"
MSG_TOKEN_ACQUIRED = "Access token acquired (…%s)"
MSG_TOKEN_FAILED = "Token exchange failed: %s"
MSG_TOKEN_MALFORMED = "Token response has no access_token"
MSG_TOKEN_REVOKED = "Access token revoked"
MSG_REVOKE_FAILED = "Token revoke failed: %s"
MSG_REVOKE_IGNORED = "Revoke before authenticate ignored: %s"
MSG_UPLOAD_OK = "Image upload successful (%d bytes)"
MSG_UPLOAD_STATUS = "Image upload error with response status: %s"
MSG_UPLOAD_NETWORK = "Image upload failed: %s"
MSG_UPLOAD_ENCODING = "Could not encode image upload: %s"
MSG_UPLOAD_MALFORMED = "Malformed data received: %s"
MSG_STORE_LOAD_FAILED = "Token store load failed: %s, starting fresh"
MSG_STORE_SAVE_FAILED = "Token store save failed: %s"
MSG_STARTING = "Starting Texie Cloud client…"
MSG_IMAGE_READ_FAILED = "Could not read image %s: %s"

# Command-line output
CLI_PROG = "texie-annotate"
CLI_DESCRIPTION = "Recognise text in images with the Texie Cloud API."
CLI_RESULT_TEXT = "%s:\n%s"
CLI_RESULT_URL = "  stored at %s"
CLI_RESULT_ERROR = "%s: %s"
