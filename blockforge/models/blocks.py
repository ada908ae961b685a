from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class InputLine:
    """One transcript line, without its terminator."""

    number: int  # 1-based
    text: str

    @property
    def stripped(self) -> str:
        return self.text.strip()

    @property
    def is_blank(self) -> bool:
        return not self.stripped


@dataclass
class Block:
    """Raw lines collected between a '+++BEGIN' marker and its '+++END'."""

    start_line: int
    end_line: int = 0  # set when the closing marker is seen
    lines: List[InputLine] = field(default_factory=list)

    def non_blank(self) -> List[InputLine]:
        return [ln for ln in self.lines if not ln.is_blank]


@dataclass(frozen=True)
class ExtractedFile:
    """A validated block, ready to be written under the root path."""

    relative_path: str
    code_lines: Tuple[str, ...]
    start_line: int = 0
    end_line: int = 0

    @property
    def content(self) -> str:
        return "\n".join(self.code_lines)
