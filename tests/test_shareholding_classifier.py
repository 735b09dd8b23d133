"""
Tests for shareholding relationship classification.
"""

import pytest

from shareholding_tool.classification import (
    ShareholdingClassifier,
    classify_shareholders,
)
from shareholding_tool.models import (
    DirectorRecord,
    ShareholderRecord,
    format_percentage,
    parse_percent,
)
from shareholding_tool.text_utils import NameMatcher

PERIOD = "2024-03-31"


def director(name, designation, cessation_date=None):
    return DirectorRecord(
        name=name, designation=designation, cessation_date=cessation_date
    )


def holder(name, percent, entity_type=None, period=PERIOD, remarks=None):
    return ShareholderRecord(
        entity_name=name,
        entity_type=entity_type,
        shareholding=percent,
        reporting_period_end=period,
        remarks=remarks,
    )


def relationships(pattern):
    return {row.entity_name: row.relationship for row in pattern.rows}


@pytest.fixture
def classifier():
    """Create a ShareholdingClassifier instance for testing."""
    return ShareholdingClassifier()


class TestScenarios:
    def test_managing_director_match(self, classifier):
        pattern = classifier.classify(
            [director("Ramesh K Gupta", "Managing Director")],
            [holder("Ramesh Gupta", "12.5%")],
        )
        assert len(pattern.rows) == 1
        row = pattern.rows[0]
        assert row.relationship == "Managing Director"
        assert row.shareholding_percent == 12.5
        assert row.shareholding_str == "12.5%"
        assert row.rank == 1
        assert pattern.latest_period == PERIOD

    def test_company_without_director(self, classifier):
        pattern = classifier.classify(
            [director("Ramesh K Gupta", "Managing Director")],
            [holder("XYZ Private Limited", "8%", entity_type="Company")],
        )
        assert relationships(pattern) == {"XYZ Private Limited": "Company"}


class TestDesignationRules:
    @pytest.mark.parametrize(
        "designation, expected",
        [
            ("Managing Director", "Managing Director"),
            ("MANAGING DIRECTOR & CEO", "Managing Director"),
            ("Whole-time Director", "Whole-time Director"),
            ("Company Secretary", "Company Secretary"),
            ("Director", "Director"),
            ("Additional Director", "Director"),
            ("Nominee Director", "Director"),
            ("Secretary", "Secretary"),
            ("Joint Secretary", "Joint Secretary"),
        ],
    )
    def test_designation_relationship(self, classifier, designation, expected):
        pattern = classifier.classify(
            [director("Sunita Rao", designation)],
            [holder("Sunita Rao", "10%")],
        )
        assert relationships(pattern) == {"Sunita Rao": expected}

    def test_first_director_in_register_wins(self, classifier):
        pattern = classifier.classify(
            [
                director("Ramesh Kumar Gupta", "Director"),
                director("R K Gupta", "Managing Director"),
            ],
            [holder("R K Gupta", "20%")],
        )
        assert relationships(pattern) == {"R K Gupta": "Director"}


class TestEntityRules:
    @pytest.mark.parametrize(
        "name, entity_type, expected",
        [
            ("Sharma Holdings Private Limited", None, "Company"),
            ("Sharma Holdings Limited", "Individual", "Company"),
            ("Gupta Family Trust", None, "Trust"),
            ("Metro Trust Limited", None, "Company"),
            ("Ananta Ventures LLP", None, "LLP"),
            ("Shri Ram Foundation", "Trust", "Trust"),
            ("Kaveri Agro Ventures", "Body Corporate - Company", "Company"),
            ("Vikram Mehta", "Individual", "Non-Director"),
            ("Vikram Mehta", "Foreign National", "Non-Director"),
            ("Vikram Mehta", None, "Non-Director"),
            ("Vikram Mehta", "", "Non-Director"),
        ],
    )
    def test_entity_relationship(self, classifier, name, entity_type, expected):
        pattern = classifier.classify(
            [director("Sunita Rao", "Director")],
            [holder(name, "6%", entity_type=entity_type)],
        )
        assert relationships(pattern) == {name: expected}


class TestDirectorCandidates:
    def test_former_director_not_matched(self, classifier):
        pattern = classifier.classify(
            [
                director("Sunita Rao", "Director"),
                director("Ramesh Gupta", "Managing Director", "2022-06-30"),
            ],
            [holder("Ramesh Gupta", "15%")],
        )
        assert relationships(pattern) == {"Ramesh Gupta": "Non-Director"}

    @pytest.mark.parametrize("cessation_date", [None, "", "-", " - "])
    def test_placeholder_cessation_is_active(self, classifier, cessation_date):
        pattern = classifier.classify(
            [director("Ramesh Gupta", "Managing Director", cessation_date)],
            [holder("Ramesh Gupta", "15%")],
        )
        assert relationships(pattern) == {"Ramesh Gupta": "Managing Director"}

    def test_non_director_designation_not_a_candidate(self, classifier):
        pattern = classifier.classify(
            [
                director("Sunita Rao", "Director"),
                director("Ramesh Gupta", "Chief Financial Officer"),
            ],
            [holder("Ramesh Gupta", "15%")],
        )
        assert relationships(pattern) == {"Ramesh Gupta": "Non-Director"}

    def test_missing_designation_not_a_candidate(self, classifier):
        candidates = classifier.director_candidates(
            [
                director("Sunita Rao", None),
                director("", "Director"),
                director("Ramesh Gupta", " Director "),
            ],
            [],
        )
        assert [(c.name, c.designation) for c in candidates] == [
            ("Ramesh Gupta", "Director")
        ]

    def test_din_remarks_fallback(self, classifier):
        shareholders = [
            holder("Ramesh Gupta", "40%", remarks="Person holding DIN 01234567"),
            holder(
                "Ramesh Gupta",
                "35%",
                period="2023-03-31",
                remarks="PERSON HOLDING DIN",
            ),
            holder("Sunita Rao", "30%"),
            holder("Kaveri Agro Private Limited", "30%"),
        ]
        candidates = classifier.director_candidates([], shareholders)
        assert [(c.name, c.designation) for c in candidates] == [
            ("Ramesh Gupta", "Director")
        ]

        pattern = classifier.classify([], shareholders)
        assert relationships(pattern) == {
            "Ramesh Gupta": "Director",
            "Sunita Rao": "Non-Director",
            "Kaveri Agro Private Limited": "Company",
        }

    def test_fallback_when_register_has_no_eligible_directors(self, classifier):
        pattern = classifier.classify(
            [director("Sunita Rao", "Chief Financial Officer")],
            [holder("Sunita Rao", "12%", remarks="person holding DIN 0999")],
        )
        assert relationships(pattern) == {"Sunita Rao": "Director"}

    def test_no_fallback_when_register_has_directors(self, classifier):
        pattern = classifier.classify(
            [director("Vikram Mehta", "Director")],
            [holder("Sunita Rao", "12%", remarks="person holding DIN 0999")],
        )
        assert relationships(pattern) == {"Sunita Rao": "Non-Director"}


class TestFilteringAndRanking:
    def test_latest_period_only(self, classifier):
        pattern = classifier.classify(
            [],
            [
                holder("Old Holder", "50%", period="2023-03-31"),
                holder("Ramesh Gupta", "30%"),
                holder("Sunita Rao", "25%"),
                holder("Older Holder", "20%", period="2022-03-31"),
            ],
        )
        assert pattern.latest_period == PERIOD
        assert [r.entity_name for r in pattern.rows] == ["Ramesh Gupta", "Sunita Rao"]
        assert all(r.reporting_period_end == PERIOD for r in pattern.rows)

    def test_unparseable_and_empty_records_dropped(self, classifier):
        pattern = classifier.classify(
            [],
            [
                holder("Zero Holder", "0%"),
                holder("Bad Holder", "n/a"),
                holder("Empty Holder", ""),
                holder("Missing Holder", None),
                holder("Negative Holder", "-5%"),
                holder("", "10%"),
                holder("   ", "10%"),
                holder("Ramesh Gupta", "7.25 %"),
            ],
        )
        assert [r.entity_name for r in pattern.rows] == ["Ramesh Gupta"]
        assert pattern.total == 7.25

    def test_trailing_text_after_percent_kept(self, classifier):
        """Only the leading number of a shareholding value is read."""
        pattern = classifier.classify(
            [],
            [
                holder("Vikram Mehta", "5.25 (equity)"),
                holder("Sunita Rao", "12.5% approx"),
                holder("Bad Holder", "approx 12%"),
            ],
        )
        assert [(r.entity_name, r.shareholding_percent) for r in pattern.rows] == [
            ("Sunita Rao", 12.5),
            ("Vikram Mehta", 5.25),
        ]
        assert pattern.total == 17.75
        assert pattern.rows[1].shareholding_str == "5.25 (equity)"

    def test_rank_and_total(self, classifier):
        pattern = classifier.classify(
            [],
            [
                holder("Sunita Rao", "10%"),
                holder("Ramesh Gupta", "45.5%"),
                holder("Vikram Mehta", "10%"),
                holder("Kaveri Agro Private Limited", "0.0005%"),
            ],
        )
        assert [(r.rank, r.entity_name) for r in pattern.rows] == [
            (1, "Ramesh Gupta"),
            (2, "Sunita Rao"),
            (3, "Vikram Mehta"),
            (4, "Kaveri Agro Private Limited"),
        ]
        assert pattern.total == pytest.approx(65.5005)
        assert pattern.total == sum(r.shareholding_percent for r in pattern.rows)
        assert pattern.rows[-1].formatted_percent == "0.000500%"
        assert pattern.formatted_total == "65.50%"

    def test_names_trimmed(self, classifier):
        pattern = classifier.classify([], [holder("  Ramesh Gupta ", "10%")])
        assert pattern.rows[0].entity_name == "Ramesh Gupta"

    def test_idempotent(self, classifier):
        directors = [
            director("Ramesh K Gupta", "Managing Director"),
            director("Sunita Rao", "Company Secretary"),
        ]
        shareholders = [
            holder("Ramesh Gupta", "30%"),
            holder("Sunita Rao", "30%"),
            holder("Gupta Family Trust", "12%"),
        ]
        first = classifier.classify(directors, shareholders)
        second = classifier.classify(directors, shareholders)
        assert first == second
        assert [r.entity_name for r in first.rows] == [
            "Ramesh Gupta",
            "Sunita Rao",
            "Gupta Family Trust",
        ]


class TestEmptyInput:
    @pytest.mark.parametrize(
        "directors, shareholders",
        [
            (None, None),
            ([], []),
            ([director("Ramesh Gupta", "Director")], []),
            ([], [holder("Ramesh Gupta", "10%", period=None)]),
            ([], [holder("Ramesh Gupta", "0%")]),
        ],
    )
    def test_empty_pattern(self, classifier, directors, shareholders):
        pattern = classifier.classify(directors, shareholders)
        assert pattern.is_empty
        assert pattern.total == 0.0


class TestMatcherInjection:
    def test_custom_matcher(self):
        class NeverMatcher(NameMatcher):
            def names_match(self, name_a, name_b):
                return False

        classifier = ShareholdingClassifier(matcher=NeverMatcher())
        pattern = classifier.classify(
            [director("Ramesh Gupta", "Managing Director")],
            [holder("Ramesh Gupta", "10%")],
        )
        assert relationships(pattern) == {"Ramesh Gupta": "Non-Director"}

    def test_module_level_helper(self):
        pattern = classify_shareholders(
            [director("Ramesh K Gupta", "Managing Director")],
            [holder("Ramesh Gupta", "12.5%")],
        )
        assert pattern.rows[0].relationship == "Managing Director"


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0005, "0.000500%"),
        (0.001, "0.00100%"),
        (0.005, "0.00500%"),
        (0.01, "0.01%"),
        (12.5, "12.50%"),
        (100, "100.00%"),
    ],
)
def test_format_percentage(value, expected):
    assert format_percentage(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("12.5%", 12.5),
        (" 8 % ", 8.0),
        ("5.25 (equity)", 5.25),
        ("12.5% approx", 12.5),
        (".5%", 0.5),
        ("1e1", 10.0),
        ("-5%", -5.0),
        (12.5, 12.5),
        ("approx 12%", 0.0),
        ("n/a", 0.0),
        ("nan", 0.0),
        ("1e999", 0.0),
        ("", 0.0),
        (None, 0.0),
    ],
)
def test_parse_percent(value, expected):
    assert parse_percent(value) == expected
