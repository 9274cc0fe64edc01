import pandas as pd
import pytest

from dotplt.core.records import ALL_COUNTRIES, LoadFailure, RecordStore, load_records

HEADER = "ID,Age,Gender,Country,Coffee_Intake,Caffeine_mg,Sleep_Hours\n"


def _write(tmp_path, body, header=HEADER):
    path = tmp_path / "survey.csv"
    path.write_text(header + body, encoding="utf-8")
    return path


def test_load_parses_typed_records(survey_csv):
    store = load_records(survey_csv)
    assert len(store) == 3
    first = store.records[0]
    assert (first.id, first.age, first.gender, first.country) == (1, 30, "Female", "US")
    assert (first.coffee, first.caffeine, first.sleep) == (1.0, 50.0, 8.0)
    assert isinstance(first.age, int)


def test_missing_or_non_numeric_metrics_become_zero(tmp_path):
    store = load_records(_write(tmp_path, "1,30,Female,US,,abc,7\n"))
    (r,) = store.records
    assert (r.coffee, r.caffeine, r.sleep) == (0.0, 0.0, 7.0)


def test_invalid_rows_are_excluded(tmp_path, caplog):
    body = (
        "1,30,Female,US,1,50,8\n"
        "2,0,Male,US,1,50,8\n"        # non-positive age
        "3,abc,Male,US,1,50,8\n"      # non-numeric age
        "4,,Male,US,1,50,8\n"         # missing age
        "5,30.5,Male,US,1,50,8\n"     # non-integral age
        "6,40,Male,US,-1,50,8\n"      # negative coffee
        "7,40,Male,US,1,50,-2\n"      # negative sleep
        "x,40,Male,US,1,50,8\n"       # bad id
        "1,41,Male,Japan,2,90,7\n"    # duplicate id
        "8,-3,Male,US,1,50,8\n"       # negative age
    )
    with caplog.at_level("INFO", logger="dotplt"):
        store = load_records(_write(tmp_path, body))
    assert [r.id for r in store] == [1]
    assert store.records[0].country == "US"
    assert "Excluded 9 invalid rows" in caplog.text


def test_missing_file_is_a_load_failure(tmp_path):
    with pytest.raises(LoadFailure, match="not found"):
        load_records(tmp_path / "nope.csv")


def test_empty_file_is_a_load_failure(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(LoadFailure):
        load_records(path)


def test_unparsable_file_is_a_load_failure(tmp_path):
    path = _write(tmp_path, "1,30\n2,30,Female,US,1,50,8,9\n", header="ID,Age\n")
    with pytest.raises(LoadFailure):
        load_records(path)


def test_missing_columns_is_a_load_failure(tmp_path):
    path = _write(tmp_path, "1,30\n", header="ID,Age\n")
    with pytest.raises(LoadFailure, match="missing required columns"):
        load_records(path)


def test_from_frame_matches_csv_loading():
    df = pd.DataFrame(
        {
            "ID": [10, 11],
            "Age": [25, 70],
            "Gender": ["Female", None],
            "Country": ["Brazil", "Italy"],
            "Coffee_Intake": [2.5, None],
            "Caffeine_mg": [230, 0],
            "Sleep_Hours": [6.1, 8],
        }
    )
    store = RecordStore.from_frame(df)
    assert [r.id for r in store] == [10, 11]
    assert store.records[1].gender == ""
    assert store.records[1].coffee == 0.0


def test_countries_in_first_seen_order(mixed_store):
    assert mixed_store.countries() == ["US", "Japan", "South Korea"]


def test_filter_narrows_without_mutating(mixed_store):
    japan = mixed_store.filter("Japan")
    assert [r.id for r in japan] == [3, 5]
    assert len(mixed_store) == 5
    assert mixed_store.filter(ALL_COUNTRIES) == mixed_store.records
    assert mixed_store.filter("Atlantis") == ()


def test_record_value_by_metric_name(two_us):
    assert two_us[1].value("caffeine") == 450
    with pytest.raises(ValueError):
        two_us[0].value("age")
