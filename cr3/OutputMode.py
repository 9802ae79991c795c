# cr3/OutputMode.py
import string
from enum import Enum


class OutputMode(Enum):
    DIGIT = "n"
    LETTER = "l"
    HEX = "h"

    @property
    def alphabet(self) -> str:
        return _ALPHABETS[self]

    @property
    def base(self) -> int:
        return len(self.alphabet)

    def symbol(self, value: int) -> str:
        return self.alphabet[value % self.base]

    def index(self, ch: str) -> int:
        return self.alphabet.index(ch)

    def normalize(self, text: str) -> str:
        # 문자 모드는 대문자, hex 모드는 소문자 기준
        if self is OutputMode.LETTER:
            return text.upper()
        if self is OutputMode.HEX:
            return text.lower()
        return text


_ALPHABETS = {
    OutputMode.DIGIT: string.digits,
    OutputMode.LETTER: string.ascii_uppercase,
    OutputMode.HEX: "0123456789abcdef",
}
