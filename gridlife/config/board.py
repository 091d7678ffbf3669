"""Board layout constants."""

FOOD_MARKER = "x"
EMPTY_MARKER = " "
