"""
Check Result and Opcode Checker Tests
=====================================

Test Categories
---------------
1. Results: CheckResult variants, equality, ordering
2. Pre-checks: block length and hex validation
3. Checkers: write width, reset layout, zero padding, always pass
"""

import pytest

from cheat_checker.cheat.models import Instruction
from cheat_checker.cheat.opcodes import Opcode
from cheat_checker.check import (
    AlwaysPassChecker,
    CheckResult,
    DetailedResult,
    DEFAULT_CATALOG,
    ErrorId,
    ResetChecker,
    Severity,
    WriteChecker,
    ZeroAfterOpcodeChecker,
    is_hex,
    is_well_formed,
    pre_check,
    worst,
)


def code_of(error_id: ErrorId) -> int:
    return DEFAULT_CATALOG.code(error_id)


# =============================================================================
# Result Model Tests
# =============================================================================

class TestCheckResult:
    """Test the three-valued result type."""

    def test_variants(self):
        assert CheckResult.passed().severity is Severity.PASS
        assert CheckResult.warning("w").severity is Severity.WARNING
        assert CheckResult.error(3, "e").severity is Severity.ERROR

    def test_predicates(self):
        assert CheckResult.passed().is_pass
        assert CheckResult.warning("w").is_warning
        assert CheckResult.error(1, "e").is_error
        assert not CheckResult.error(1, "e").is_pass

    def test_equality_same_payload(self):
        assert CheckResult.passed() == CheckResult.passed()
        assert CheckResult.warning("w") == CheckResult.warning("w")
        assert CheckResult.error(1, "e") == CheckResult.error(1, "e")

    def test_inequality_different_payload(self):
        assert CheckResult.warning("a") != CheckResult.warning("b")
        assert CheckResult.error(1, "e") != CheckResult.error(2, "e")
        assert CheckResult.error(0, "x") != CheckResult.warning("x")

    def test_severity_order(self):
        assert Severity.ERROR > Severity.WARNING > Severity.PASS

    def test_worst(self):
        results = [
            CheckResult.passed(),
            CheckResult.warning("w"),
            CheckResult.error(1, "first"),
            CheckResult.error(2, "second"),
        ]
        assert worst(results) == CheckResult.error(1, "first")
        assert worst([CheckResult.passed(), CheckResult.warning("w")]).is_warning
        assert worst([]) == CheckResult.passed()

    def test_str(self):
        assert str(CheckResult.passed()) == "pass"
        assert str(CheckResult.warning("odd")) == "warning: odd"
        assert str(CheckResult.error(4, "bad")) == "error[4]: bad"
        assert str(DetailedResult(CheckResult.error(4, "bad"), 2)) == "line 2: error[4]: bad"


# =============================================================================
# Pre-check Tests
# =============================================================================

class TestHexValidation:
    """Test is_hex() and is_well_formed()."""

    @pytest.mark.parametrize("block", ["0AF2CD18", "abcdef01", "0", "FFFFFFFFFF"])
    def test_valid_hex(self, block):
        assert is_hex(block)

    @pytest.mark.parametrize("block", [
        "", "0GZA7F9C", "+1234567", "-1234567", "0x123456", " 1234567", "1_234567",
    ])
    def test_invalid_hex(self, block):
        assert not is_hex(block)

    def test_well_formed(self):
        assert is_well_formed("0AF2CD18")
        assert not is_well_formed("0AF2CD1")
        assert not is_well_formed("0AF2CD18A")
        assert not is_well_formed("0AF2CD1G")


class TestPreCheck:
    """Test the opcode-independent structural checks."""

    def test_valid_instruction(self):
        instruction = Instruction(Opcode.WRITE_WORD, "0AF2CD18", "CFF2AD4C")
        assert pre_check(instruction) == []

    def test_wrong_length_a(self):
        instruction = Instruction(Opcode.WRITE_WORD, "0AF2CD1", "CFF2AD4C")
        assert pre_check(instruction) == [DEFAULT_CATALOG.error(ErrorId.WRONG_LENGTH_A)]

    def test_wrong_length_b(self):
        instruction = Instruction(Opcode.WRITE_WORD, "0AF2CD18", "CFF2AD4C00")
        assert pre_check(instruction) == [DEFAULT_CATALOG.error(ErrorId.WRONG_LENGTH_B)]

    def test_invalid_hex_a(self):
        instruction = Instruction(Opcode.WRITE_WORD, "0AF2CD1Z", "CFF2AD4C")
        assert pre_check(instruction) == [DEFAULT_CATALOG.error(ErrorId.INVALID_HEX_A)]

    def test_all_four_errors(self):
        """All checks run independently; order is length A, B, hex A, B."""
        instruction = Instruction(Opcode.RESET, "XYZ", "")
        codes = [r.code for r in pre_check(instruction)]
        assert codes == [
            code_of(ErrorId.WRONG_LENGTH_A),
            code_of(ErrorId.WRONG_LENGTH_B),
            code_of(ErrorId.INVALID_HEX_A),
            code_of(ErrorId.INVALID_HEX_B),
        ]

    def test_scenario_wrong_length_and_invalid_hex(self):
        instruction = Instruction(Opcode.WRITE_WORD, "0GZA7F9C", "A4B8LF7J8L82JK")
        codes = [r.code for r in pre_check(instruction)]
        assert codes == [
            code_of(ErrorId.WRONG_LENGTH_B),
            code_of(ErrorId.INVALID_HEX_A),
            code_of(ErrorId.INVALID_HEX_B),
        ]

    def test_custom_catalog(self):
        catalog = DEFAULT_CATALOG.with_messages({"WRONG_LENGTH_A": "Bloc A trop court."})
        instruction = Instruction(Opcode.WRITE_WORD, "0AF2", "CFF2AD4C")
        assert pre_check(instruction, catalog) == [CheckResult.error(1, "Bloc A trop court.")]


# =============================================================================
# Checker Tests
# =============================================================================

class TestAlwaysPassChecker:

    @pytest.mark.parametrize("opcode", [Opcode.EQ_WORD, Opcode.PATCH_CODE, Opcode.MEMORY_COPY])
    def test_passes_anything(self, opcode):
        checker = AlwaysPassChecker()
        assert checker.check(opcode, "5FFFFFFF", "12345678").is_pass
        assert checker.check(opcode, "garbage", "").is_pass


class TestWithCatalog:
    """Test re-binding a checker to another message catalog."""

    def test_same_catalog_returns_self(self):
        checker = ResetChecker()
        assert checker.with_catalog(DEFAULT_CATALOG) is checker

    def test_rebound_copy(self):
        catalog = DEFAULT_CATALOG.with_messages({"RESET_FIELD_NOT_ZERO": "{opcode}: zéros attendus"})
        checker = ResetChecker()
        rebound = checker.with_catalog(catalog)
        assert isinstance(rebound, ResetChecker)
        assert rebound.catalog is catalog
        assert checker.catalog is DEFAULT_CATALOG
        assert rebound.check(Opcode.RESET, "D2000001", "00000000") == CheckResult.error(
            code_of(ErrorId.RESET_FIELD_NOT_ZERO), "Reset: zéros attendus"
        )


class TestWriteChecker:
    """Test write width consistency and alignment."""

    checker = WriteChecker()

    def test_word_write_passes(self):
        assert self.checker.check(Opcode.WRITE_WORD, "0AF2CD18", "CFF2AD4C").is_pass

    def test_short_write_passes(self):
        assert self.checker.check(Opcode.WRITE_SHORT, "1213A0C4", "000003E7").is_pass

    def test_byte_write_passes(self):
        assert self.checker.check(Opcode.WRITE_BYTE, "2213A0C5", "000000FF").is_pass

    def test_short_write_overflow(self):
        result = self.checker.check(Opcode.WRITE_SHORT, "1213A0C4", "000103E7")
        assert result.is_error
        assert result.code == code_of(ErrorId.WRITE_DATA_OVERFLOW)
        assert result.message == "WriteShort only writes 16 bits, but block B has data above them."

    def test_byte_write_overflow(self):
        result = self.checker.check(Opcode.WRITE_BYTE, "2213A0C5", "00000100")
        assert result.is_error
        assert "8 bits" in result.message

    def test_short_write_misaligned(self):
        result = self.checker.check(Opcode.WRITE_SHORT, "1213A0C5", "00000001")
        assert result == CheckResult.warning(
            "WriteShort target address is not aligned to 2 bytes."
        )

    def test_word_write_misaligned(self):
        result = self.checker.check(Opcode.WRITE_WORD, "0213A0C2", "00000001")
        assert result.is_warning
        assert "4 bytes" in result.message

    def test_overflow_reported_before_alignment(self):
        """Only one result per rule: the error wins."""
        result = self.checker.check(Opcode.WRITE_SHORT, "1213A0C5", "FFFF0000")
        assert result.is_error

    def test_lowercase_blocks(self):
        assert self.checker.check(Opcode.WRITE_SHORT, "1213a0c4", "0000ffff").is_pass

    def test_malformed_blocks_pass(self):
        """Malformed blocks are left to the pre-checks."""
        assert self.checker.check(Opcode.WRITE_SHORT, "1213A0C", "FFFF0000").is_pass
        assert self.checker.check(Opcode.WRITE_BYTE, "2213A0C5", "FFFFFFZZ").is_pass

    def test_non_write_opcode_passes(self):
        assert self.checker.check(Opcode.RESET, "D2000000", "FFFFFFFF").is_pass


class TestResetChecker:
    """Test the D0/D2/B field layout."""

    checker = ResetChecker()

    def test_reset_passes(self):
        assert self.checker.check(Opcode.RESET, "D2000000", "00000000").is_pass

    def test_end_cond_passes(self):
        assert self.checker.check(Opcode.END_COND, "D0000000", "00000000").is_pass

    def test_reset_block_a_not_zero(self):
        result = self.checker.check(Opcode.RESET, "D2000001", "00000000")
        assert result.is_error
        assert result.code == code_of(ErrorId.RESET_FIELD_NOT_ZERO)

    def test_end_cond_block_b_not_zero(self):
        result = self.checker.check(Opcode.END_COND, "D0000000", "00000001")
        assert result == CheckResult.warning("EndCond ignores block B, it should be 00000000.")

    def test_set_offset_ptr_takes_address(self):
        """B codes carry an address in block A."""
        assert self.checker.check(Opcode.SET_OFFSET_PTR, "B2101234", "00000000").is_pass

    def test_set_offset_ptr_block_b_not_zero(self):
        result = self.checker.check(Opcode.SET_OFFSET_PTR, "B2101234", "00000010")
        assert result.is_warning

    def test_error_wins_over_warning(self):
        result = self.checker.check(Opcode.RESET, "D2000001", "00000001")
        assert result.is_error


class TestZeroAfterOpcodeChecker:
    """Test zero padding after the opcode digits."""

    checker = ZeroAfterOpcodeChecker()

    @pytest.mark.parametrize("opcode,block_a,block_b", [
        (Opcode.REPEAT, "C0000000", "00000010"),
        (Opcode.END_REPEAT, "D1000000", "00000000"),
        (Opcode.SET_OFFSET_IMMEDIATE, "D3000000", "02100000"),
        (Opcode.SET_DX_DATA, "D5000000", "12345678"),
        (Opcode.LOAD_DX_BYTE, "DB000000", "0213A0C4"),
        (Opcode.ADD_OFFSET, "dc000000", "00000004"),
        (Opcode.BTN_CODE, "94000130", "FFFB0000"),
    ])
    def test_valid_padding(self, opcode, block_a, block_b):
        assert self.checker.check(opcode, block_a, block_b).is_pass

    def test_padding_not_zero(self):
        result = self.checker.check(Opcode.SET_DX_DATA, "D5000100", "12345678")
        assert result == CheckResult.error(
            code_of(ErrorId.OPCODE_PADDING_NOT_ZERO),
            "SetDxData expects zeros after the 'D5' opcode digits in block A.",
        )

    def test_repeat_padding_not_zero(self):
        assert self.checker.check(Opcode.REPEAT, "C0000010", "00000010").is_error

    def test_end_repeat_block_b_not_zero(self):
        result = self.checker.check(Opcode.END_REPEAT, "D1000000", "00000001")
        assert result.is_warning

    def test_button_value_not_zero(self):
        result = self.checker.check(Opcode.BTN_CODE, "94000130", "FFFB0001")
        assert result == DEFAULT_CATALOG.warning(ErrorId.BUTTON_VALUE_NOT_ZERO)

    def test_malformed_blocks_pass(self):
        assert self.checker.check(Opcode.SET_DX_DATA, "D5000100", "123").is_pass
