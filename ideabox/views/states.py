"""States shared by the list and development views."""

LOADING = "loading"
READY = "ready"
ERROR = "error"
