"""Chat behaviour constants.

Centralizes the fixed values every send uses.
"""

# Instruction sent as the system message with every request
DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."

# Assistant text recorded when a send fails for any reason
FALLBACK_REPLY = "Sorry, something went wrong."

# Component name used for diagnostic messages from the pipeline
LOG_COMPONENT = "LLM"
