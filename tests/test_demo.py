import pytest

from chainhash.chained import ChainedHashTable
from chainhash.demo import build_table, demo_entries, main
from chainhash.probing import LinearProbeHashTable


def test_demo_entries_content():
    entries = demo_entries()
    assert len(entries) == 45
    assert len({e.name for e in entries}) == 45
    assert (entries[0].name, entries[0].val) == ("+", 13)
    by_name = {e.name: e.val for e in entries}
    assert by_name[":="] == 1
    assert entries[-1].name == "type"


def test_demo_entries_are_fresh():
    first = demo_entries()
    second = demo_entries()
    assert first[0] is not second[0]
    assert first[0].name == second[0].name


def test_build_hash_table():
    table = build_table("hash")
    assert isinstance(table, ChainedHashTable)
    assert table.table_size == 44
    assert len(table) == 45
    assert table.lookup("+").val == 13


def test_build_chaining_table():
    table = build_table("chaining")
    assert isinstance(table, ChainedHashTable)
    assert table.table_size == 34
    assert len(table) == 45
    assert all(e.name in table for e in demo_entries())


def test_build_probing_table_fills_up():
    table = build_table("probing")
    assert isinstance(table, LinearProbeHashTable)
    assert len(table) == table.table_size == 34
    assert "---" not in table.render()
    assert table.lookup("+").val == 13


def test_build_unknown_kind():
    with pytest.raises(ValueError):
        build_table("bogus")


def test_main_default(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == "Found + (val=13)"
    assert len(lines) == 45


def test_main_probing_reports_collisions(capsys):
    assert main(["--kind", "probing"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines.count("Collision!") == 45 - 34
    assert lines[-1] == "Found + (val=13)"


def test_main_chaining(capsys):
    assert main(["--kind", "chaining"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 35
    assert "Collision!" not in lines


def test_main_rejects_unknown_kind():
    with pytest.raises(SystemExit):
        main(["--kind", "bogus"])