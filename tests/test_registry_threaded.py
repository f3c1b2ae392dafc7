import threading
from typing import List, Optional

from oiddb import DataSet, OIDRegistry, get_instance


def _data_set(n: int) -> DataSet:
    return DataSet(
        f"set{n}",
        {f"name{n}": f"1.3.6.1.4.1.99999.{n}", "shared": f"1.3.6.1.4.1.88888.{n}"},
        {f"S{n}": f"name{n}"},
    )


def test_concurrent_register_and_lookup() -> None:
    r = OIDRegistry()

    def writer(n: int) -> None:
        r.register([_data_set(n)])

    def reader(results: List[Optional[str]]) -> None:
        for n in range(50):
            results.append(r.oid_to_name(f"1.3.6.1.4.1.99999.{n}"))

    read_results: List[Optional[str]] = []
    threads = [threading.Thread(target=writer, args=(n,)) for n in range(50)]
    threads += [threading.Thread(target=reader, args=(read_results,)) for _ in range(5)]

    for t in threads:
        t.start()
    for t in threads:
        t.join()

    for n in range(50):
        assert r.short_to_oid(f"S{n}") == f"1.3.6.1.4.1.99999.{n}"
    # unknown OIDs are echoed back, known ones resolve; nothing else is seen
    for val in read_results:
        assert val is not None
        assert val.startswith("name") or val.startswith("1.3.6.1.4.1.99999.")


def test_concurrent_first_wins_keeps_one_value() -> None:
    r = OIDRegistry()

    threads = [
        threading.Thread(target=r.register, args=([_data_set(n)],)) for n in range(20)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    shared_oid = r.name_to_oid("shared")
    assert shared_oid is not None
    assert r.oid_to_name(shared_oid) == "shared"
    owners = [
        n for n in range(20) if r.oid_to_name(f"1.3.6.1.4.1.88888.{n}", strict=True)
    ]
    assert len(owners) == 1
    assert len(r.registered_set_names) == 20


def test_concurrent_get_instance_returns_one_registry() -> None:
    OIDRegistry.reset_instance()
    seen: List[OIDRegistry] = []

    def getter() -> None:
        seen.append(get_instance())

    threads = [threading.Thread(target=getter) for _ in range(20)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len({id(x) for x in seen}) == 1


def test_snapshot_under_concurrent_registration() -> None:
    r = OIDRegistry()
    snapshots = []

    def mutator(n: int) -> None:
        r.register([_data_set(n)])

    def snapper() -> None:
        snapshots.append(r.snapshot())

    threads = []
    for n in range(10):
        threads.append(threading.Thread(target=mutator, args=(n,)))
        threads.append(threading.Thread(target=snapper))

    for t in threads:
        t.start()
    for t in threads:
        t.join()

    # every snapshot reflects whole data sets only
    for snap in snapshots:
        merged = snap["registered_set_names"]
        for set_name in merged:
            n = int(set_name[3:])
            assert snap["name_to_oid"][f"name{n}"] == f"1.3.6.1.4.1.99999.{n}"
            assert snap["short_to_name"][f"S{n}"] == f"name{n}"
        assert len(snap["short_to_name"]) == len(merged)
