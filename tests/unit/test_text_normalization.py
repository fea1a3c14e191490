from services.sunscreen_sanitation import normalize, title_case_inci


def test_normalize_trims_and_lowercases():
    assert normalize("  Zinc Oxide \n") == "zinc oxide"


def test_normalize_keeps_inner_spacing():
    assert normalize("Zinc  Oxide") == "zinc  oxide"


def test_title_case_simple_name():
    assert title_case_inci("zinc oxide") == "Zinc Oxide"


def test_title_case_lowers_the_rest_of_each_word():
    assert title_case_inci("ZINC OXIDE") == "Zinc Oxide"


def test_title_case_only_splits_on_spaces():
    assert title_case_inci("Bis-Ethylhexyloxyphenol Methoxyphenyl Triazine") == (
        "Bis-ethylhexyloxyphenol Methoxyphenyl Triazine"
    )


def test_title_case_leading_digit_stays():
    assert title_case_inci("4-Methylbenzylidene Camphor") == "4-methylbenzylidene Camphor"


def test_title_case_preserves_double_spaces():
    assert title_case_inci("zinc  oxide") == "Zinc  Oxide"


def test_title_case_empty_string():
    assert title_case_inci("") == ""
