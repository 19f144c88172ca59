# promptpress/messages/token_messages.py

# ✅ Positive
TOKEN_COUNT_SUCCESS = "Tokens counted successfully."
TOKEN_SAVINGS_SUCCESS = "Token savings computed successfully."
PRICING_SUCCESS = "Model pricing fetched successfully."
COST_ESTIMATES_SUCCESS = "Cost estimates computed successfully."

# ❌ Errors
MODEL_NOT_FOUND = "No pricing available for the requested model."
