from lucky_wheel.config import MAX_ITEMS, PALETTE, DEFAULT_LABELS
from lucky_wheel.core.options import Option, OptionList


def test_defaults_are_loaded_with_palette_colors():
    options = OptionList.with_defaults()
    assert [o.label for o in options] == DEFAULT_LABELS
    assert [o.color for o in options] == PALETTE[:len(DEFAULT_LABELS)]
    assert len({o.id for o in options}) == len(options)


def test_add_trims_and_rejects_blank_labels():
    options = OptionList()
    assert options.add("   ") is None
    assert options.add("") is None

    added = options.add("  Pizza  ")
    assert isinstance(added, Option)
    assert added.label == "Pizza"
    assert len(options) == 1


def test_add_stops_at_max_items():
    options = OptionList([f"item {i}" for i in range(MAX_ITEMS)])
    assert options.is_full
    assert options.add("one more") is None
    assert len(options) == MAX_ITEMS


def test_remove_keeps_at_least_two():
    options = OptionList(["a", "b", "c"])
    assert options.remove(options[0].id)
    assert [o.label for o in options] == ["b", "c"]
    assert not options.remove(options[0].id)
    assert len(options) == 2


def test_remove_unknown_id():
    options = OptionList(["a", "b", "c"])
    assert not options.remove("missing")
    assert len(options) == 3


def test_ids_are_never_reused():
    options = OptionList(["a", "b", "c"])
    removed = options[2].id
    options.remove(removed)
    added = options.add("d")
    assert added.id != removed


def test_can_spin_needs_two_options():
    options = OptionList(["only"])
    assert not options.can_spin
    options.add("second")
    assert options.can_spin


def test_snapshot_is_immutable_copy():
    options = OptionList(["a", "b"])
    snap = options.snapshot()
    options.add("c")
    assert isinstance(snap, tuple)
    assert len(snap) == 2


def test_replace_all_with_suggestions():
    options = OptionList(["a", "b", "c"])
    kept = options.replace_all([" x ", "", "y"] + [f"z{i}" for i in range(20)])
    assert kept == MAX_ITEMS
    assert options[0].label == "x"
    assert options[1].label == "y"

    # Fewer than two usable labels leaves the list alone
    assert options.replace_all(["solo", "  "]) == 0
    assert options[0].label == "x"
