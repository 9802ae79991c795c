# cr3/Lfsr.py
from typing import Iterable, List, Tuple

WIDTH = 32
MASK = (1 << WIDTH) - 1

# 이보다 적은 스텝은 그냥 한 스텝씩 돌림
JUMP_THRESHOLD = 4096


def pack_bits(bits: Iterable[int]) -> int:
    """비트열 → 정수 (첫 비트가 MSB)"""
    v = 0
    for bit in bits:
        v = (v << 1) | (bit & 1)
    return v


# ---------- GF(2) 전이 행렬 (i번째 열 = bit i 한 스텝 후 상태) ----------

def _apply(cols: List[int], x: int) -> int:
    out = 0
    i = 0
    while x:
        if x & 1:
            out ^= cols[i]
        x >>= 1
        i += 1
    return out


def _compose(outer: List[int], inner: List[int]) -> List[int]:
    return [_apply(outer, c) for c in inner]


def _matrix_pow(cols: List[int], exp: int) -> List[int]:
    res = [1 << i for i in range(WIDTH)]
    base = cols
    while exp:
        if exp & 1:
            res = _compose(base, res)
        exp >>= 1
        if exp:
            base = _compose(base, base)
    return res


class Lfsr:
    """
    32비트 레지스터 하나를 오른쪽으로 시프트하는 LFSR.

    taps 위치의 비트를 XOR 한 피드백을 feedback_bit 위치에 넣고,
    새 레지스터의 LSB (= 이전 레지스터의 bit 1) 를 출력한다.
    """

    taps: Tuple[int, ...] = ()
    feedback_bit: int = WIDTH - 1

    def __init__(self, seed: int):
        self.state = seed & MASK

    def next1(self) -> int:
        x = self.state
        fb = 0
        for pos in self.taps:
            fb ^= (x >> pos) & 1
        self.state = (fb << self.feedback_bit) | (x >> 1)
        return self.state & 1

    def next16(self) -> int:
        return pack_bits(self.next1() for _ in range(16))

    def transition(self) -> List[int]:
        cols = []
        for i in range(WIDTH):
            probe = type(self)(1 << i)
            probe.next1()
            cols.append(probe.state)
        return cols

    def skip(self, count: int) -> None:
        """count 스텝 전진 (출력 비트는 버림). 많으면 행렬 거듭제곱으로 점프"""
        if count < 0:
            raise ValueError("count must be >= 0")
        if count < JUMP_THRESHOLD:
            for _ in range(count):
                self.next1()
            return
        # 피드백 위 비트가 남아 있으면 OR 때문에 선형이 아님 → 다 빠질 때까지는 직접 스텝
        for _ in range(WIDTH):
            self.next1()
        self.state = _apply(_matrix_pow(self.transition(), count - WIDTH), self.state)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(0x{self.state:08x})"


class LfsrA(Lfsr):  # x^32 + x^7 + x^5 + x^2 + x + 1
    taps = (31, 6, 4, 1, 0)
    feedback_bit = 31


class LfsrB(Lfsr):  # x^24 + x^4 + x^3 + x + 1, 상위 8비트는 마스킹 안 함
    taps = (23, 3, 2, 0)
    feedback_bit = 23
