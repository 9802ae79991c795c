# cr3/KeyDerivation.py
import string
from typing import NamedTuple, Sequence

KEY_LENGTH = 16

# 키 문자 위치표 (값을 바꾸면 기존 키스트림과 호환 안 됨)
PRECOUNT_POSITIONS = (0, 1, 2, 3, 4, 5, 6, 7)
SEED_A_POSITIONS = (12, 14, 10, 11, 8, 13, 9, 15)
SEED_B_POSITIONS = (11, 14, 8, 15, 13, 12, 15, 14)  # 14, 15 두 번씩 사용

HEX_DIGITS = frozenset(string.hexdigits)


class MalformedKeyError(ValueError):
    pass


class DerivedParameters(NamedTuple):
    precount: int
    seed_a: int
    seed_b: int


def validate_key(key: str) -> str:
    """16자리 16진수 문자열인지 확인 (0x 접두사, 공백 불가)"""
    if not isinstance(key, str) or len(key) != KEY_LENGTH:
        raise MalformedKeyError(f"key must be exactly {KEY_LENGTH} hex digits")
    bad = [c for c in key if c not in HEX_DIGITS]
    if bad:
        raise MalformedKeyError(f"key contains non-hex character {bad[0]!r}")
    return key


def pick(key: str, positions: Sequence[int]) -> int:
    # 위치표 순서대로 문자를 모아서 16진수로 해석
    return int("".join(key[i] for i in positions), 16)


def derive_parameters(key: str) -> DerivedParameters:
    """
    키 → (precount, seed_a, seed_b)

    앞 8자리는 그대로 precount, 뒤 8자리는 서로 다른 순서로 섞어서
    LFSR A / B 의 시드로 사용한다. 시드가 0 이어도 여기서는 허용
    (워밍업 이후에 검사).
    """
    key = validate_key(key)
    return DerivedParameters(
        precount=pick(key, PRECOUNT_POSITIONS),
        seed_a=pick(key, SEED_A_POSITIONS),
        seed_b=pick(key, SEED_B_POSITIONS),
    )
