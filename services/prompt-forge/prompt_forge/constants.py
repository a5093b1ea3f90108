"""Shared constants for session state keys, storage keys and app-wide limits."""

# Session key names
APP_STATE = "app_state"
CONFIRM_CLEAR_HISTORY = "confirm_clear_history"
INPUT_TEXT = "input_text_value"
PENDING_WRITES = "pending_local_storage_writes"
STORED_SNAPSHOT = "stored_snapshot"
TEMPLATE_EDIT_ID = "template_edit_id"

# localStorage keys
LOCAL_STORAGE_THEME = "theme"
LOCAL_STORAGE_HISTORY = "prompt_history"
LOCAL_STORAGE_CUSTOM_STYLES = "custom_styles"
LOCAL_STORAGE_TEMPLATES = "prompt_templates"
LOCAL_STORAGE_KEYS = (
    LOCAL_STORAGE_THEME,
    LOCAL_STORAGE_HISTORY,
    LOCAL_STORAGE_CUSTOM_STYLES,
    LOCAL_STORAGE_TEMPLATES,
)

HISTORY_LIMIT = 20

THEMES = ("light", "dark")
DEFAULT_THEME = "light"
# Browser colour-scheme preference, read alongside the stored keys
PREFERS_DARK = "prefers_dark"

MIN_INTENSITY = 1
MAX_INTENSITY = 5
DEFAULT_INTENSITY = 3

ENHANCEMENT_FAILED_MESSAGE = "Failed to enhance prompt. Please try again."
