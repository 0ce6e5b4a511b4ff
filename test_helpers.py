"""
Tests for request shaping helpers: phone numbers, code lists, batch sizing,
and upstream response parsing.
"""
import pytest

from core.errors import ValidationError
from core.helpers import (
    normalize_phone, validate_phone, format_phone_input, phone_display_value,
    full_phone_number, require_fields, parse_code_list, clamp_count, to_int,
    batch_amounts, money, extract_token, is_account_missing,
    is_insufficient_balance,
)


class TestPhoneNumbers:

    def test_normalize_adds_country_code(self):
        assert normalize_phone("9308201445") == "639308201445"

    def test_normalize_strips_formatting(self):
        assert normalize_phone("+63 930-820-1445") == "639308201445"

    def test_normalize_keeps_existing_prefix(self):
        assert normalize_phone("639308201445") == "639308201445"

    def test_validate_accepts_ten_local_digits(self):
        assert validate_phone("930 820 1445") == "639308201445"

    def test_validate_rejects_short_number(self):
        with pytest.raises(ValidationError) as exc:
            validate_phone("93082")
        assert "must be 10 digits" in exc.value.message

    def test_validate_rejects_long_number(self):
        with pytest.raises(ValidationError):
            validate_phone("93082014451234")

    def test_format_input_partial_number_untouched(self):
        assert format_phone_input("93082") == "93082"

    def test_format_input_prefixes_ten_digits(self):
        assert format_phone_input("9308201445") == "639308201445"

    def test_format_input_truncates_prefixed(self):
        assert format_phone_input("63930820144599") == "639308201445"

    def test_format_input_truncates_long_unprefixed(self):
        assert format_phone_input("930820144599") == "639308201445"

    def test_format_input_empty(self):
        assert format_phone_input("abc") == ""

    def test_display_value_hides_prefix(self):
        assert phone_display_value("639308201445") == "9308201445"
        assert phone_display_value("93082") == "93082"

    def test_full_number_incomplete_is_empty(self):
        assert full_phone_number("930820") == ""
        assert full_phone_number("9308201445") == "639308201445"


class TestPayloadHelpers:

    def test_require_fields_passes(self):
        require_fields({"a": 1, "b": "x"}, "a", "b")

    def test_require_fields_lists_missing(self):
        with pytest.raises(ValidationError) as exc:
            require_fields({"a": 1, "b": ""}, "a", "b", "c")
        assert "b, c" in exc.value.message

    def test_parse_code_list_commas_and_newlines(self):
        assert parse_code_list("AAA, BBB\nCCC\r\n\n,DDD ") == ["AAA", "BBB", "CCC", "DDD"]

    def test_parse_code_list_accepts_list(self):
        assert parse_code_list(["AAA", " BBB "]) == ["AAA", "BBB"]

    def test_parse_code_list_empty(self):
        assert parse_code_list(" ,\n ") == []

    @pytest.mark.parametrize("value,expected", [
        (None, 100),
        ("", 100),
        ("abc", 100),
        (0, 100),
        (5, 5),
        ("7", 7),
        ("12.9", 12),
        (250, 100),
        (-3, 1),
    ])
    def test_clamp_count(self, value, expected):
        assert clamp_count(value) == expected

    @pytest.mark.parametrize("value,default,expected", [
        ("3", 1, 3),
        (" 12 pages", 1, 12),
        ("n/a", 1, 1),
        (None, 1, 1),
        (7, 0, 7),
        ("", 5, 5),
    ])
    def test_to_int(self, value, default, expected):
        assert to_int(value, default) == expected

    def test_batch_amount_ladder(self):
        amounts = batch_amounts()
        assert amounts[0] == "300.00"
        assert amounts[-1] == "250.00"
        assert len(amounts) == 51

    def test_money(self):
        assert money("12.5") == "12.50"
        assert money(None) == "0.00"
        assert money("n/a") == "0.00"


class TestUpstreamParsing:

    def test_extract_token_prefers_data_token(self):
        assert extract_token({"data": {"token": "t1"}, "token": "t2"}) == "t1"

    def test_extract_token_fallbacks(self):
        assert extract_token({"token": "t2"}) == "t2"
        assert extract_token({"data": {"access_token": "t3"}}) == "t3"
        assert extract_token({"access_token": "t4"}) == "t4"
        assert extract_token({"data": []}) is None
        assert extract_token(None) is None

    def test_account_missing(self):
        assert is_account_missing({"success": False, "message": "The login account does not exist."})
        assert not is_account_missing({"success": True, "message": "account does not exist"})
        assert not is_account_missing({"success": False, "message": "Invalid code"})

    @pytest.mark.parametrize("message", [
        "Insufficient balance",
        "You have insufficient funds.",
        "Not enough balance!",
    ])
    def test_insufficient_balance_markers(self, message):
        assert is_insufficient_balance(message)

    def test_insufficient_balance_negative(self):
        assert not is_insufficient_balance("Gift card created")
        assert not is_insufficient_balance(None)
