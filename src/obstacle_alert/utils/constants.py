"""
Constants used throughout the obstacle alert system
"""

# Vision API
DEFAULT_VISION_ENDPOINT = "https://vision.googleapis.com/v1/images:annotate"
DEFAULT_MAX_OBJECTS = 5  # OBJECT_LOCALIZATION maxResults
DEFAULT_MAX_LABELS = 10  # LABEL_DETECTION maxResults
DEFAULT_REQUEST_TIMEOUT = 30  # Seconds

# Capture
DEFAULT_JPEG_QUALITY = 70  # 0-100, matches a 0.7 still-capture quality

# Camera reconnection
MAX_CAMERA_RECONNECT_ATTEMPTS = 2
CAMERA_RECONNECT_DELAY = 2.0  # Seconds between reconnection attempts

# Stale frames
CAMERA_BUFFER_SIZE = 1  # Frames the driver may queue
FLUSH_FRAMES = 3  # Frames grabbed and dropped before each still

# Playback volume
MIN_VOLUME = 0.1
MAX_VOLUME = 1.0
VOLUME_SCALE = 1.5  # Applied to sqrt(area) of the bounding box
LABEL_ONLY_VOLUME = 0.8  # No localized objects, nothing to measure
DEFAULT_OBJECT_VOLUME = 1.0  # Objects present but polygon unusable
MIN_POLYGON_VERTICES = 4

# Confidence score bonuses
OBJECT_BONUS = 0.15
VOLUME_BONUS = 0.10

# Display
SUMMARY_LABEL_COUNT = 3  # Labels shown in the summary for label-only scans

# Runtime
DEFAULT_SCAN_INTERVAL = 0  # Seconds, 0 = manual trigger

# Environment variables
ENV_API_KEY = "GOOGLE_VISION_API_KEY"
ENV_CAMERA_URL = "CAMERA_URL"
