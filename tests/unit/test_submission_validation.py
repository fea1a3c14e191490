import pytest

from services.sunscreen_sanitation import (
    REQUIRED_FIELDS,
    InvalidFieldError,
    InvalidSubmissionError,
    MissingFieldError,
    SanitationError,
    validate_submission,
)


@pytest.mark.parametrize("raw", [None, "sunscreen", 42, ["id", "brand"]])
def test_rejects_non_mapping_input(raw):
    with pytest.raises(InvalidSubmissionError):
        validate_submission(raw)


@pytest.mark.parametrize("field", REQUIRED_FIELDS)
def test_missing_field_is_named(submission, field):
    del submission[field]
    with pytest.raises(MissingFieldError) as exc:
        validate_submission(submission)
    assert exc.value.field == field
    assert str(exc.value) == f"Missing required field: {field}"


@pytest.mark.parametrize("field", REQUIRED_FIELDS)
@pytest.mark.parametrize("value", [None, "", 0, False])
def test_falsy_field_counts_as_missing(submission, field, value):
    submission[field] = value
    with pytest.raises(MissingFieldError) as exc:
        validate_submission(submission)
    assert exc.value.field == field


def test_first_missing_field_wins(submission):
    del submission["type"]
    del submission["brand"]
    with pytest.raises(MissingFieldError) as exc:
        validate_submission(submission)
    assert exc.value.field == "brand"


def test_ingredients_must_be_a_sequence(submission):
    submission["ingredients"] = "Water, Zinc Oxide"
    with pytest.raises(InvalidFieldError) as exc:
        validate_submission(submission)
    assert exc.value.field == "ingredients"


@pytest.mark.parametrize("field", ["brand", "product", "type"])
def test_text_fields_must_be_strings(submission, field):
    submission[field] = 123
    with pytest.raises(InvalidFieldError) as exc:
        validate_submission(submission)
    assert exc.value.field == field


def test_errors_share_a_value_error_base(submission):
    del submission["id"]
    with pytest.raises(ValueError):
        validate_submission(submission)
    with pytest.raises(SanitationError):
        validate_submission(submission)


def test_returns_independent_copy(submission):
    submission["filters"] = [{"name": "Zinc Oxide", "category": "mineral"}]
    result = validate_submission(submission)

    result.ingredients.append("Avobenzone")
    result.filters[0]["name"] = "Changed"
    result.raw_fields["spf"] = 30

    assert submission["ingredients"] == ["Water", "Zinc Oxide", "Glycerin"]
    assert submission["filters"][0]["name"] == "Zinc Oxide"
    assert submission["spf"] == 50


def test_accepts_tuple_ingredients(submission):
    submission["ingredients"] = ("Water", "Zinc Oxide")
    assert validate_submission(submission).ingredients == ["Water", "Zinc Oxide"]


def test_empty_ingredient_list_counts_as_present(submission):
    submission["ingredients"] = []
    assert validate_submission(submission).ingredients == []
