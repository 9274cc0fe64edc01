import pytest

from dotplt.core.records import Record, RecordStore


@pytest.fixture
def make_record():
    def _make(id, age=30, country="US", coffee=1.0, sleep=8.0, caffeine=50.0, gender="Female"):
        return Record(
            id=id,
            age=age,
            gender=gender,
            country=country,
            coffee=coffee,
            caffeine=caffeine,
            sleep=sleep,
        )

    return _make


@pytest.fixture
def two_us(make_record):
    """The two-respondent dataset of the end-to-end scenarios."""
    return [
        make_record(1, age=30, country="US", coffee=1, sleep=8, caffeine=50),
        make_record(2, age=40, country="US", coffee=5, sleep=5, caffeine=450, gender="Male"),
    ]


@pytest.fixture
def mixed_store(make_record, two_us):
    return RecordStore(
        two_us
        + [
            make_record(3, age=22, country="Japan", coffee=3, sleep=6.5, caffeine=300),
            make_record(4, age=61, country="South Korea", coffee=0, sleep=9, caffeine=0),
            make_record(5, age=50, country="Japan", coffee=2, sleep=7, caffeine=190),
        ]
    )


@pytest.fixture
def survey_csv(tmp_path):
    path = tmp_path / "survey.csv"
    path.write_text(
        "ID,Age,Gender,Country,Coffee_Intake,Caffeine_mg,Sleep_Hours\n"
        "1,30,Female,US,1,50,8\n"
        "2,40,Male,US,5,450,5\n"
        "3,22,Female,Japan,3,300,6.5\n",
        encoding="utf-8",
    )
    return path
