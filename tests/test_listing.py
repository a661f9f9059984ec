import copy
from types import SimpleNamespace

from hypothesis import given, strategies as st

from expo_portal.services.listing import (
    ListingCriteria,
    SortState,
    collation_key,
    filter_and_sort,
    matches_search,
    next_sort_directions,
)

SEARCH_FIELDS = ("name", "course", "members")
STATUSES = ["pending", "approved", "rejected"]
PROGRAMS = ["Teknik Informatika", "Sistem Informasi", "Teknik Komputer"]


def run(records, criteria):
    return filter_and_sort(
        records,
        criteria,
        search_fields=SEARCH_FIELDS,
        category_field="program",
    )


records_strategy = st.lists(
    st.fixed_dictionaries(
        {
            "name": st.text(max_size=12),
            "course": st.text(max_size=12),
            "members": st.lists(st.text(max_size=8), max_size=3),
            "status": st.sampled_from(STATUSES),
            "program": st.sampled_from(PROGRAMS),
        }
    ),
    max_size=15,
).map(lambda rows: [{**r, "id": i} for i, r in enumerate(rows)])

criteria_strategy = st.builds(
    ListingCriteria,
    search_term=st.one_of(st.just(""), st.text(max_size=3)),
    status_filter=st.sampled_from(["all"] + STATUSES),
    category_filter=st.sampled_from(["all"] + PROGRAMS),
    sort_field=st.sampled_from([None, "name", "course", "members"]),
    sort_direction=st.sampled_from(["asc", "desc"]),
)


def naive_filter(records, criteria):
    term = criteria.search_term.lower()
    kept = []
    for r in records:
        if criteria.status_filter != "all" and r["status"] != criteria.status_filter:
            continue
        if criteria.category_filter != "all" and r["program"] != criteria.category_filter:
            continue
        if term:
            haystack = [r["name"].lower(), r["course"].lower()] + [m.lower() for m in r["members"]]
            if not any(term in text for text in haystack):
                continue
        kept.append(r)
    return kept


@given(records_strategy)
def test_identity_criteria_returns_input_unchanged(records):
    assert run(records, ListingCriteria()) == records


@given(records_strategy, criteria_strategy)
def test_output_matches_naive_triple_filter(records, criteria):
    result = run(records, criteria)
    assert sorted(r["id"] for r in result) == sorted(r["id"] for r in naive_filter(records, criteria))


@given(records_strategy, criteria_strategy)
def test_applying_criteria_twice_is_idempotent(records, criteria):
    assert run(records, criteria) == run(records, criteria)


@given(records_strategy, criteria_strategy)
def test_inputs_are_not_mutated(records, criteria):
    before = copy.deepcopy(records)
    run(records, criteria)
    assert records == before


@given(st.lists(st.text(max_size=10), unique=True, max_size=12))
def test_toggle_to_descending_reverses_ascending_order(names):
    records = [{"name": n, "course": "", "members": [], "status": "approved", "program": PROGRAMS[0]} for n in names]
    state = SortState("name")

    ascending = run(records, state.as_criteria())
    state.toggle("name")
    assert state.direction == "desc"
    descending = run(records, state.as_criteria())

    assert descending == list(reversed(ascending))


def test_status_filter_scenario():
    records = [
        {"name": "Smart Campus", "course": "RPL", "members": [], "program": "Teknik Informatika", "status": "approved"},
        {"name": "IoT Monitor", "course": "IoT", "members": [], "program": "Teknik Informatika", "status": "pending"},
    ]
    result = run(records, ListingCriteria(status_filter="approved"))
    assert [r["name"] for r in result] == ["Smart Campus"]


def test_search_matches_member_list_element():
    record = {
        "name": "IoT-Based Environmental Monitoring",
        "course": "Internet of Things",
        "members": ["Maya Putri", "Eko Prasetyo"],
        "program": "Teknik Informatika",
        "status": "approved",
    }
    assert run([record], ListingCriteria(search_term="maya")) == [record]
    assert run([record], ListingCriteria(search_term="zzz")) == []


def test_search_is_case_insensitive_and_skips_missing_fields():
    record = SimpleNamespace(name="Smart Campus", course=None, members=None)
    assert matches_search(record, "CAMPUS", SEARCH_FIELDS)
    assert not matches_search(record, "iot", SEARCH_FIELDS)


def test_no_match_returns_empty_list():
    assert run([], ListingCriteria(search_term="x")) == []


def test_sort_is_case_and_accent_insensitive():
    records = [{"name": n} for n in ["beta", "Émile", "alpha", "Zulu"]]
    result = filter_and_sort(
        records,
        ListingCriteria(sort_field="name"),
        search_fields=("name",),
        category_field="program",
    )
    assert [r["name"] for r in result] == ["alpha", "beta", "Émile", "Zulu"]


def test_non_string_sort_field_keeps_filtered_order():
    records = [{"name": "b", "score": 2}, {"name": "a", "score": 1}]
    result = filter_and_sort(
        records,
        ListingCriteria(sort_field="score", sort_direction="desc"),
        search_fields=("name",),
        category_field="program",
    )
    assert result == records


def test_ties_keep_filtered_order_in_both_directions():
    records = [{"name": "Same", "id": 1}, {"name": "Same", "id": 2}]
    for direction in ("asc", "desc"):
        result = filter_and_sort(
            records,
            ListingCriteria(sort_field="name", sort_direction=direction),
            search_fields=("name",),
            category_field="program",
        )
        assert [r["id"] for r in result] == [1, 2]


def test_sort_state_switching_field_resets_to_ascending():
    state = SortState("name", "desc")
    state.toggle("course")
    assert (state.field, state.direction) == ("course", "asc")


def test_next_sort_directions():
    assert next_sort_directions("name", "asc", ["name", "course"]) == {"name": "desc", "course": "asc"}
    assert next_sort_directions(None, "asc", ["name"]) == {"name": "asc"}


def test_collation_key_orders_lowercase_first_on_ties():
    assert collation_key("a") < collation_key("A")


def test_punctuation_sorts_before_letters():
    records = [{"name": n} for n in ["apple", "~draft", "{beta}", "2nd demo"]]
    result = filter_and_sort(
        records,
        ListingCriteria(sort_field="name"),
        search_fields=("name",),
        category_field="program",
    )
    assert [r["name"] for r in result] == ["{beta}", "~draft", "2nd demo", "apple"]
