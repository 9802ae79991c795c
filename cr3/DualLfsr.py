# cr3/DualLfsr.py
from itertools import count as _count
from typing import Iterator, Optional

from cr3.KeyDerivation import derive_parameters
from cr3.Lfsr import Lfsr, LfsrA, LfsrB
from cr3.OutputMode import OutputMode

# 워밍업: precount 에 더해서 버리는 스텝 수
WARMUP_A_EXTRA = 109
WARMUP_B_EXTRA = 416


class DegenerateKeyError(ValueError):
    pass


def warm_up(lfsr_a: Lfsr, lfsr_b: Lfsr, precount: int) -> None:
    """
    A 는 precount+109, B 는 precount+416 스텝 돌리고 출력은 버린다.
    0 은 두 피드백 함수의 고정점이라 워밍업 후 0 이면 키를 못 쓴다.
    """
    lfsr_a.skip(precount + WARMUP_A_EXTRA)
    lfsr_b.skip(precount + WARMUP_B_EXTRA)

    if lfsr_a.state == 0 or lfsr_b.state == 0:
        raise DegenerateKeyError(
            "the key values MUST not be 0. Please run again with a different key value."
        )


class DualLfsr:
    """
    LFSR A / B 를 같이 돌리는 결합기.
    심볼 하나 = A 에서 16비트, B 에서 16비트 뽑아서 XOR 한 값.
    """

    def __init__(self, lfsr_a: Lfsr, lfsr_b: Lfsr) -> None:
        self.lfsr_a = lfsr_a
        self.lfsr_b = lfsr_b

    @classmethod
    def from_key(cls, key: str) -> "DualLfsr":
        params = derive_parameters(key)
        lfsr_a = LfsrA(params.seed_a)
        lfsr_b = LfsrB(params.seed_b)
        warm_up(lfsr_a, lfsr_b, params.precount)
        return cls(lfsr_a, lfsr_b)

    def next_value(self) -> int:
        num_a = self.lfsr_a.next16()
        num_b = self.lfsr_b.next16()
        return num_a ^ num_b

    def next_symbol(self, mode: OutputMode) -> str:
        return mode.symbol(self.next_value())

    def symbols(self, mode: OutputMode, count: Optional[int] = None) -> Iterator[str]:
        steps = _count() if count is None else range(count)
        for _ in steps:
            yield self.next_symbol(mode)
