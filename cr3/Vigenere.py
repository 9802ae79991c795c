# cr3/Vigenere.py
from typing import Iterable, Iterator

from cr3.OutputMode import OutputMode


def _shift(text: str, keystream: Iterable[str], mode: OutputMode, sign: int) -> str:
    ks: Iterator[str] = iter(keystream)
    out = []

    for ch in text:
        c = mode.normalize(ch)
        if len(c) != 1 or c not in mode.alphabet:
            # 알파벳 밖 문자는 그대로 두고 키스트림도 안 씀
            out.append(ch)
            continue
        try:
            k = next(ks)
        except StopIteration:
            raise ValueError("keystream is shorter than the message") from None
        out.append(mode.symbol(mode.index(c) + sign * mode.index(k)))

    return "".join(out)


def encrypt(text: str, keystream: Iterable[str], mode: OutputMode) -> str:
    """평문 문자 + 키 문자 (mod 알파벳 크기)"""
    return _shift(text, keystream, mode, 1)


def decrypt(text: str, keystream: Iterable[str], mode: OutputMode) -> str:
    """암호문 문자 - 키 문자 (mod 알파벳 크기)"""
    return _shift(text, keystream, mode, -1)
