from enum import Enum, auto


class UnaryOp(Enum):
    """Prefix operators understood by the parser"""
    NEGATION = auto()
    BITWISE_NOT = auto()
    LOGICAL_NEGATION = auto()


class BinaryOp(Enum):
    """Infix operators understood by the parser"""
    SUBTRACTION = auto()
    ADDITION = auto()
    MULTIPLICATION = auto()
    DIVISION = auto()
