import pytest

from UdtConverter.data_types import convert_type, reformat_string, radix_for, TYPE_MAP


@pytest.mark.parametrize("source, target", [
    ("Byte", "USINT"),
    ("Word", "UINT"),
    ("DWord", "UDINT"),
    ("LWord", "ULINT"),
    ("Time", "DINT"),
    ("LTime", "LINT"),
    ("DTL", "LDT"),
    ("Bool", "BOOL"),
    ("Int", "INT"),
    ("Real", "REAL"),
    ("String", "STRING"),
    ("Char", "CHAR"),
])
def test_elementary_types_translated(source, target):
    assert convert_type(source) == target


def test_translation_is_idempotent():
    for target in set(TYPE_MAP.values()):
        assert convert_type(target) == target
    assert convert_type("USINT") == "USINT"
    assert convert_type(convert_type("String[20]")) == "STRING_20"


def test_custom_length_string_reformatted():
    assert convert_type("String[20]") == "STRING_20"
    assert convert_type("STRING [ 82 ]") == "STRING_82"
    assert reformat_string("string[5]") == "STRING_5"


def test_unknown_types_pass_through():
    assert convert_type("MotorData") == "MotorData"
    assert convert_type("WString[10]") == "WString[10]"


def test_radix_selection():
    assert radix_for("DINT") == "Decimal"
    assert radix_for("BIT") == "Decimal"
    assert radix_for("bool") == "Decimal"
    assert radix_for("STRING") == "Char"
    assert radix_for("CHAR") == "Char"
    assert radix_for("STRING_20") == "NullType"
    assert radix_for("LDT") == "NullType"
    assert radix_for("MotorData") == "NullType"
