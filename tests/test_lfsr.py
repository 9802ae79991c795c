import pytest

from cr3.Lfsr import JUMP_THRESHOLD, LfsrA, LfsrB, pack_bits


def test_pack_bits_first_bit_is_msb():
    bits = [1, 0, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1]
    assert pack_bits(bits) == 0b1011000000000001


def test_pack_bits_all_ones():
    assert pack_bits([1] * 16) == 0xFFFF


def test_lfsr_a_outputs_old_bit_one():
    # bit 1 만 켜짐 → 피드백 1, 출력은 이전 bit 1
    lfsr = LfsrA(0x00000002)
    assert lfsr.next1() == 1
    assert lfsr.state == 0x80000001


def test_lfsr_a_output_is_not_feedback():
    # bit 0 만 켜짐 → 피드백 1 이지만 출력은 이전 bit 1 = 0
    lfsr = LfsrA(0x00000001)
    assert lfsr.next1() == 0
    assert lfsr.state == 0x80000000


def test_lfsr_b_feedback_at_bit_23():
    lfsr = LfsrB(0x00000001)
    assert lfsr.next1() == 0
    assert lfsr.state == 0x00800000


def test_lfsr_b_keeps_upper_bits():
    lfsr = LfsrB(0xFF000000)
    assert lfsr.next1() == 0
    assert lfsr.state == 0x7F800000


def test_zero_is_fixed_point():
    for cls in (LfsrA, LfsrB):
        lfsr = cls(0)
        assert [lfsr.next1() for _ in range(100)] == [0] * 100
        assert lfsr.state == 0


def test_seed_is_masked_to_32_bits():
    assert LfsrA(0x1_0000_0005).state == 5


def test_next16_matches_single_steps():
    a = LfsrA(0x03000000)
    b = LfsrA(0x03000000)
    assert a.next16() == pack_bits(b.next1() for _ in range(16))
    assert a.state == b.state


@pytest.mark.parametrize("cls", [LfsrA, LfsrB])
@pytest.mark.parametrize("count", [0, 1, 109, JUMP_THRESHOLD, JUMP_THRESHOLD + 517])
def test_skip_matches_stepping(cls, count):
    jumped = cls(0xDEADBEEF)
    stepped = cls(0xDEADBEEF)
    jumped.skip(count)
    for _ in range(count):
        stepped.next1()
    assert jumped.state == stepped.state


def test_skip_rejects_negative():
    with pytest.raises(ValueError):
        LfsrA(1).skip(-1)
