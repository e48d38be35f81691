"""Application-wide constants.

This module centralizes magic numbers, asset paths and canned texts so the
webhook, the response builders and the Send API client agree on them.
"""

# =============================================================================
# Facebook API
# =============================================================================

# Graph API host used for Send API calls
FACEBOOK_GRAPH_API_BASE_URL = "https://graph.facebook.com"

# Facebook Graph API version
FACEBOOK_GRAPH_API_VERSION = "v18.0"

# Timeout for Facebook Graph API calls (seconds)
FACEBOOK_API_TIMEOUT_SECONDS = 10.0

# =============================================================================
# Webhook
# =============================================================================

# Only subscriptions for this object type are dispatched
PAGE_OBJECT_TYPE = "page"

# Header carrying "sha1=<hexdigest>" of the raw request body
SIGNATURE_HEADER = "x-hub-signature"

# =============================================================================
# Account linking
# =============================================================================

# Authorization code handed back on successful login (generate per user in
# a real deployment)
DEFAULT_AUTHORIZATION_CODE = "1234567890"

# =============================================================================
# Server
# =============================================================================

DEFAULT_PORT = 5000

# Directory (relative to the project root) holding static assets
STATIC_ASSETS_DIR = "public/assets"

# =============================================================================
# Outbound message content
# =============================================================================

IMAGE_ASSET_PATH = "/assets/rift.png"
GIF_ASSET_PATH = "/assets/instagram_logo.gif"
AUDIO_ASSET_PATH = "/assets/sample.mp3"
VIDEO_ASSET_PATH = "/assets/allofus480.mov"
FILE_ASSET_PATH = "/assets/test.txt"
TOUCH_IMAGE_ASSET_PATH = "/assets/touch.png"
RIFT_SQUARE_ASSET_PATH = "/assets/riftsq.png"
GEAR_VR_SQUARE_ASSET_PATH = "/assets/gearvrsq.png"

TEXT_MESSAGE_METADATA = "DEVELOPER_DEFINED_METADATA"

# Receipt order numbers are "order" + an integer in [0, RECEIPT_ID_UPPER_BOUND)
RECEIPT_ID_UPPER_BOUND = 1000

AUTHENTICATION_SUCCESS_TEXT = "Authentication successful"
QUICK_REPLY_ACK_TEXT = "Quick reply tapped"
ATTACHMENT_ACK_TEXT = "Message with attachment received"
POSTBACK_ACK_TEXT = "Postback called"
