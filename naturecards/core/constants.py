"""Global constants for the naturecards application."""

# Document store
USERS_COLLECTION = "users"
DEFAULT_BACKEND_URL = "https://nature-cards-e3f71dcee8d3.herokuapp.com"
FIND_USERNAME_PATH = "/db/findUsername/{username}"
GALLERY_FETCH_PATH = "/db/gallery/{user_id}"
GALLERY_UPDATE_PATH = "/db/gallery/{user_id}"
HTTP_TIMEOUT_SECONDS = 10.0

# Fields of a user document
USER_ID = "id"
USER_WIRE_ID = "_id"
USER_USERNAME = "username"
USER_PROFILE_PICTURE = "profile_picture"
USER_CARDS = "cards"
USER_FRIENDS = "friends"
USER_PENDING_FRIENDS = "pending_friends"
USER_TRADING = "trading"
USER_LIST_FIELDS = (USER_CARDS, USER_FRIENDS, USER_PENDING_FRIENDS, USER_TRADING)

# Fields of embedded records
PENDING_SENDING = "sending"
PENDING_RECEIVING = "receiving"
TRADE_OFFERED_CARD = "offeredCard"
TRADE_REQUESTED_CARD = "requestedCard"
CARD_ID = "id"
CARD_OWNER = "owner"
MONGO_OID = "$oid"

# Friendship statuses
STATUS_FRIEND = "friend"
STATUS_PENDING_OUTGOING = "pending_outgoing"
STATUS_PENDING_INCOMING = "pending_incoming"
STATUS_NONE = "none"

# Presentation
DEFAULT_AVATAR = "/default-avatar.png"
GALLERY_URL_TEMPLATE = "/gallery?userid={user_id}"

# Fan-out
FETCH_MAX_WORKERS = 8
