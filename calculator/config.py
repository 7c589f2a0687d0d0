"""Settings for the interactive calculator, read from the environment."""
import os

LOG_LEVEL = os.getenv("CALCULATOR_LOG_LEVEL", "WARNING")
PROMPT = os.getenv("CALCULATOR_PROMPT", "> ")

# results of plain expressions are stored under this name
ANS_VARIABLE = "ans"
