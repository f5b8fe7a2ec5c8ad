import pytest

from jsondoc_db_engine import FieldError
from jsondoc_db_engine.query import normalize
from conftest import Animal, Person, has_long_name_or_beak

def test_where_age_55(people_db):
    filtered = people_db.select_where(Person(), lambda p: p.age == 55, "prefix", "suffix")
    assert set(filtered) == {"n9878", "r8791"}
    assert filtered["n9878"] == Person("Junge", 55, True)

def test_where_not_sex(people_db):
    filtered = people_db.select_where(Person(), lambda p: not p.sex, "prefix", "suffix")
    assert set(filtered) == {"p0926", "r8791"}

def test_where_sex_and_55(people_db):
    filtered = people_db.select_where(Person(), lambda p: p.sex and p.age == 55, "prefix", "suffix")
    assert set(filtered) == {"n9878"}

def test_where_long_name_or_beak(animal_db):
    animals = animal_db.select_where(Animal(), has_long_name_or_beak, "prefix")
    assert set(animals) == {"ant", "chicken", "dog"}

def test_select_id_where(animal_db):
    ids = animal_db.select_id_where(Animal(), has_long_name_or_beak, "prefix")
    assert sorted(ids) == ["ant", "chicken", "dog"]

def test_where_nothing_matches(people_db):
    assert people_db.select_where(Person(), lambda p: p.age > 100, "prefix", "suffix") == {}

def test_normalize():
    assert normalize(True) == "true"
    assert normalize("  TRUE ") == "true"
    assert normalize(55) == "55"
    assert normalize(" Jonas\n") == "jonas"

def test_filter_single_field(people_db):
    got = people_db.select_filter(Person(), {"age": "55"}, "prefix", "suffix")
    assert set(got) == {"n9878", "r8791"}

def test_filter_is_case_and_whitespace_insensitive_on_values(people_db):
    got = people_db.select_filter(Person(), {"name": "  JONAS "}, "prefix", "suffix")
    assert list(got) == ["q9823"]

def test_filter_all_keys_must_match(people_db):
    got = people_db.select_filter(Person(), {"age": 55, "sex": "true"}, "prefix", "suffix")
    assert set(got) == {"n9878"}
    got = people_db.select_filter(Person(), {"age": 55, "sex": False}, "prefix", "suffix")
    assert set(got) == {"r8791"}

def test_empty_filter_keeps_everything(people_db):
    got = people_db.select_filter(Person(), {}, "prefix", "suffix")
    assert len(got) == 4

def test_filter_unknown_field_fails_fast(db):
    # the table does not even exist: the field check comes first
    with pytest.raises(FieldError) as ei:
        db.select_filter(Person(), {"Age": 55}, "nowhere")
    assert ei.value.field == "Age"
