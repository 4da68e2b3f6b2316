# Sampling configuration for the suggestion model (fixed, not user-tunable).
TEMPERATURE = 0.7
TOP_P = 1.0  # nucleus mass
MAX_TOKENS = 512  # generated tokens per product

# Messages surfaced to API callers
ERR_EXPECTED_ARRAY = "Expected an array of products"
ERR_PROCESSING = "Something went wrong during processing."

# Risk levels the system prompt asks the model to pick from (not enforced on output)
RISK_LEVELS = ("None", "Low", "Moderate", "High")
