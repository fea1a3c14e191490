from services.sunscreen_batch import sanitize_sunscreens, sort_by_brand_product


def _records():
    return [
        {"id": 1, "brand": "Beta", "product": "Beta Gel SPF30", "type": "Chemical", "ingredients": ["Avobenzone"]},
        {"id": 2, "brand": "Acme", "product": "Ultra Sheer", "type": "mineral"},
        "not a record",
        {"id": 4, "brand": "acme", "product": "Daily Fluid", "type": "mineral", "ingredients": ["Zinc Oxide"]},
    ]


def test_batch_collects_results_and_failures(catalog):
    batch = sanitize_sunscreens(_records(), catalog)

    assert batch.total == 4
    assert [r.sunscreen.id for r in batch.results] == [1, 4]
    assert batch.indices == [0, 3]
    assert [(f.index, f.id, f.error) for f in batch.failures] == [
        (1, 2, "MissingFieldError"),
        (2, None, "InvalidSubmissionError"),
    ]
    assert batch.failures[0].message == "Missing required field: ingredients"


def test_batch_report(catalog):
    report = sanitize_sunscreens(_records(), catalog).to_report()

    assert (report.total, report.sanitized, report.failed) == (4, 2, 2)
    assert report.records[0].index == 0
    assert report.records[0].warnings == [
        {"type": "brand-removed-from-product", "brand": "Beta"},
        {"type": "spf-pa-removed-from-product", "original": "Beta Gel SPF30"},
        {"type": "inferred-filter", "filter": "Butyl Methoxydibenzoylmethane"},
    ]
    assert report.failures[1].error == "InvalidSubmissionError"


def test_empty_batch(catalog):
    batch = sanitize_sunscreens([], catalog)
    assert batch.total == 0
    assert batch.to_report().records == []


def test_sort_by_brand_then_product():
    records = [
        {"brand": "beta", "product": "A"},
        {"brand": "Acme", "product": "Zed"},
        {"brand": "acme", "product": "alpha"},
        {"product": "No Brand"},
    ]
    assert [(r.get("brand"), r["product"]) for r in sort_by_brand_product(records)] == [
        (None, "No Brand"),
        ("acme", "alpha"),
        ("Acme", "Zed"),
        ("beta", "A"),
    ]


def test_sanitized_records_are_plain_dicts(catalog):
    records = sanitize_sunscreens(_records(), catalog).sanitized_records()
    assert records[0]["product"] == "Gel"
    assert records[1]["filters"] == [{"name": "Zinc Oxide", "category": "mineral"}]
