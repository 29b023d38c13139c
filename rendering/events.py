from dataclasses import dataclass
from typing import Optional

from rendering.frame import Frame

@dataclass(frozen=True)
class FrameEvent:
    frame: Frame
    width: int
    height: int
    seq: int        # generation / render sequence number

@dataclass(frozen=True)
class LogEvent:
    message: str
    level: Optional[str]
