from probemap.debug import print_table, trace_probe
from probemap.table import NotFound, Table, set_debug_trace_rebuild


def test_print_table(capsys):
    t = Table()
    t.insert(0, "a")
    t.insert(11, "b")

    print_table(t, "small")
    out = capsys.readouterr().out.splitlines()

    assert out[0] == "== small (2/11) =="
    assert out[1] == "0000 0 -> 'a'"
    assert out[2] == "0001 11 -> 'b'"
    assert out[3] == "0002 x"
    assert len(out) == 12


def test_trace_probe_match(capsys):
    t = Table()
    t.insert(0, "a")
    t.insert(11, "b")

    assert trace_probe(t, 11) == 1
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "== probe 11 ==",
        "0000 0  skip",
        "0001 11 -> 'b'  match",
    ]


def test_trace_probe_agrees_with_find_slot(capsys):
    t = Table()
    for i in range(11):
        t.insert(i, i)

    # absent key on a full table
    assert trace_probe(t, 22) == t.find_slot(22) == NotFound()
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "exhausted after 11 slots"

    t2 = Table()
    t2.insert(3, "c")
    assert trace_probe(t2, 4) == t2.find_slot(4) == NotFound()
    assert capsys.readouterr().out.splitlines()[-1] == "0004 x  empty"


def test_trace_rebuild(capsys):
    set_debug_trace_rebuild(True)
    try:
        t = Table()
        for i in range(12):
            t.insert(i, i)
    finally:
        set_debug_trace_rebuild(False)

    assert capsys.readouterr().out == "rebuild 11 -> 23 (11 entries)\n"
