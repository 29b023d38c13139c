from enum import Enum, auto

class OutputMode(Enum):
    TERMINAL = auto()
    COLOR = auto()

class ClassificationKind(Enum):
    ESCAPE = auto()
    ROOT = auto()

class EngineMode(Enum):
    FULL_FRAME = auto()
    STRIPED = auto()

class ColorPalette(Enum):
    GRAYSCALE = auto()
    FIRE = auto()
    OCEAN = auto()
    FOREST = auto()

class PolynomialId(Enum):
    CUBIC_UNITY = auto()
    QUINTIC_UNITY = auto()
    CUBIC_CYCLE = auto()
