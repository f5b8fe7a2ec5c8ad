#!/usr/bin/env python3
# Example usage of jsondoc_db_engine: people and animals stored under ./demo_data/

from dataclasses import dataclass

from jsondoc_db_engine import Database, trace_printer

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

def main() -> None:
    # Trace every operation to stderr
    db = Database(on_trace=trace_printer())

    # ./demo_data/people/<id>.json
    db.insert("p0926", Person("James", 33, False), "demo_data", "people")
    db.insert("r8791", Person("Jonna", 55, False), "demo_data", "people")
    db.insert("n9878", Person("Junge", 55, True), "demo_data", "people")

    print("Loaded:", db.select("n9878", Person(), "demo_data", "people"))
    print("Missing is just empty:", db.select("a7654", Person(), "demo_data", "people"))

    # SELECT * FROM Person WHERE age == 55
    print("Having 55:", db.select_where(Person(), lambda p: p.age == 55, "demo_data", "people"))
    # SELECT * FROM Person WHERE name = 'james'
    print("Named James:", db.select_filter(Person(), {"name": "james"}, "demo_data", "people"))

    # ./demo_data/animal/<id>.json
    for rec_id, animal in {
        "dinosaur": Animal("Barney", 2, False),
        "chicken": Animal("Clotilde", 2, True),
        "dog": Animal("Wallander, Mortimer", 4, False),
        "cat": Animal("Watson", 3, False),
        "ant": Animal("Woody", 5, True),
    }.items():
        db.insert(rec_id, animal, "demo_data")

    def long_name_or_beak(a: Animal) -> bool:
        return len(a.name) > 6 or a.beak

    # SELECT COUNT(*), SUM(legs) FROM Animal WHERE LEN(name) > 6 OR beak
    acc = {"count": 0, "legs": 0}

    def add(acc, _rec_id, a):
        acc["count"] += 1
        acc["legs"] += a.legs

    db.select_where_aggreg(Animal(), long_name_or_beak, acc, add, "demo_data")
    print("COUNT:", acc["count"], "SUM(legs):", acc["legs"])
    print("SUM(legs) over all animals:", db.sum(Animal(), "legs", "demo_data"))

    for rec_id in db.select_ids(Animal(), "demo_data"):
        db.delete(rec_id, Animal(), "demo_data")
    print("Animals left:", db.count(Animal(), "demo_data"))

if __name__ == "__main__":
    main()
