"""Report formatting constants."""

SEPARATOR_WIDTH = 86
STATE_HEADER = "SIMULATION STATE"

# Two decimals for every real-valued figure in reports
NUMBER_FORMAT = "{:.2f}"
