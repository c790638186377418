from proposal_intake.application.core.domain.services.extension_tokenizer import (
    split_extension_field,
    split_extension_input,
)


def test_form_input_splits_on_commas_and_whitespace():
    assert split_extension_input("Zfoo, Zbar  Zbaz,,Zqux\nZquux") == ["Zfoo", "Zbar", "Zbaz", "Zqux", "Zquux"]


def test_form_input_keeps_order_and_duplicates():
    assert split_extension_input("Zb Za Zb") == ["Zb", "Za", "Zb"]


def test_form_input_empty_gives_empty_list():
    assert split_extension_input("") == []
    assert split_extension_input(" , ") == []


def test_field_list_passes_through():
    assert split_extension_field(["Zfoo", "Zbar"]) == ("Zfoo", "Zbar")


def test_field_string_is_split_on_commas_only():
    assert split_extension_field(" Zfoo , Zbar baz,, ") == ("Zfoo", "Zbar baz")


def test_field_absent_or_empty():
    assert split_extension_field(None) == ()
    assert split_extension_field([]) == ()
    assert split_extension_field("") == ()


def test_field_list_skips_null_items():
    assert split_extension_field(["Zfoo", None, "Zbar"]) == ("Zfoo", "Zbar")
