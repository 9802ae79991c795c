# cr3/KeyGen.py
from Crypto.Random import get_random_bytes

from cr3.DualLfsr import DegenerateKeyError, DualLfsr
from cr3.KeyDerivation import validate_key

# precount 상한 (워밍업이 너무 길어지지 않게)
DEFAULT_MAX_PRECOUNT = 0xFFFF


def new_key(max_precount: int = DEFAULT_MAX_PRECOUNT) -> str:
    """
    메시지마다 새로 쓰는 16자리 키 생성.
    앞 8자리(precount)는 max_precount 이하, 뒤 8자리(시드)는 랜덤.
    워밍업 후 레지스터가 0 이 되는 키는 다시 뽑는다.
    """
    if not 0 <= max_precount <= 0xFFFFFFFF:
        raise ValueError("max_precount must fit in 32 bits")

    while True:
        raw = get_random_bytes(8)
        precount = int.from_bytes(raw[:4], "big") % (max_precount + 1)
        key = validate_key(f"{precount:08x}{raw[4:].hex()}")
        try:
            DualLfsr.from_key(key)
        except DegenerateKeyError:
            continue
        return key
