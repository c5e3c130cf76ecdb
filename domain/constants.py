# Artist/album for files not laid out as <artist>/<album>/<file>
UNKNOWN_SEGMENT = "Unknown"
TRACK_PATH_SEGMENTS = 3
PATH_SEPARATOR = "/"
