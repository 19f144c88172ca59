# promptpress/messages/reduce_messages.py

# ✅ Positive
REDUCE_SUCCESS = "Text reduced successfully."
STATS_SUCCESS = "Compression stats computed successfully."
OPTIONS_SUCCESS = "Reduction options fetched successfully."

# ❌ Errors
TEXT_TOO_LONG = "Text exceeds the maximum allowed length."
REDUCE_FAILED = "Text reduction failed due to internal server error."
