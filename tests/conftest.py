from dataclasses import dataclass

import pytest

from jsondoc_db_engine import Database


@dataclass
class Person:
    name: str = ""
    age: int = 0
    sex: bool = False


@dataclass
class Animal:
    name: str = ""
    legs: int = 0
    beak: bool = False


@pytest.fixture
def db(tmp_path):
    return Database(str(tmp_path))


@pytest.fixture
def people_db(db):
    db.insert("p0926", Person("James", 33, False), "prefix", "suffix")
    db.insert("z0215", Person("Jenna", 11, False))
    db.insert("w1132", Person("Joerg", 22, True), "prefix")
    db.insert("q9823", Person("Jonas", 44, True), "prefix", "suffix")
    db.insert("r8791", Person("Jonna", 55, False), "prefix", "suffix")
    db.insert("n9878", Person("Junge", 55, True), "prefix", "suffix")
    return db


@pytest.fixture
def animal_db(db):
    db.insert("dinosaur", Animal("Barney", 2, False), "prefix")
    db.insert("chicken", Animal("Clotilde", 2, True), "prefix")
    db.insert("dog", Animal("Wallander, Mortimer", 4, False), "prefix")
    db.insert("cat", Animal("Watson", 3, False), "prefix")
    db.insert("ant", Animal("Woody", 5, True), "prefix")
    return db


def has_long_name_or_beak(a: Animal) -> bool:
    return len(a.name) > 6 or a.beak
