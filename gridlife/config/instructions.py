"""Instruction alphabet constants.

Each instruction is a single character in an agent's program.
"""

TURN_LEFT_SYMBOL = "l"
TURN_RIGHT_SYMBOL = "p"
MOVE_FORWARD_SYMBOL = "i"
SNIFF_SYMBOL = "w"
EAT_SYMBOL = "j"

# Every symbol a program or the valid-instruction set may contain
CANONICAL_INSTRUCTIONS = (
    TURN_LEFT_SYMBOL + TURN_RIGHT_SYMBOL + MOVE_FORWARD_SYMBOL + SNIFF_SYMBOL + EAT_SYMBOL
)

# Energy spent on every executed instruction
INSTRUCTION_COST = 1.0
