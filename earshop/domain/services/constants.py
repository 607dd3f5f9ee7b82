# Collection names
EARPHONE_COLLECTION = "earphone"
USER_COLLECTION = "user"

# Pagination defaults for list endpoints
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20

# Field-format rules shared by the input contracts
ALPHANUM_PATTERN = r"^[a-zA-Z0-9]+$"
BRAND_MODEL_PATTERN = r"^[a-zA-Z0-9 ]+$"
TOKEN_PATTERN = r"^[a-z-]+$"             # type, connectors, otherType
STORE_PATTERN = r"^[a-z]+$"              # store, color
COLOR_LIST_PATTERN = r"^[a-z&,]+$"       # otherColor, several colors joined by & or ,
IMAGE_PATTERN = r"^[a-z0-9/.:-]+$"
EMAIL_CHARSET_PATTERN = r"^[a-z0-9@._-]+$"
PASSWORD_MIN_LENGTH = 6

# Search results never carry the nested reviews
SEARCH_PROJECTION = {"review": 0}
# Users are never returned with their password hash
PUBLIC_USER_PROJECTION = {"password": 0}
