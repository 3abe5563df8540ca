import random

import pytest

from refboard.store import CardStore, StoreInvariantError


def z_values(store):
    return sorted(card.z for card in store)


def test_create_stacks_new_cards_on_top(store):
    first = store.create("a.png", (0, 0))
    second = store.create("b.png", (400, 0))

    assert store.get(first).z == 0
    assert store.get(second).z == 1
    assert store.get(second).rotation == 0
    assert store.get(second).size == (300, 300)


def test_create_returns_distinct_stable_ids(store):
    ids = [store.create("", (0, 0)) for _ in range(5)]
    store.remove(ids[1])
    new_id = store.create("", (0, 0))

    assert len(set(ids)) == 5
    assert new_id not in ids


def test_create_enforces_minimum_size():
    store = CardStore(min_card_size=11)
    card_id = store.create("", (0, 0), size=(3, 500))

    assert store.get(card_id).size == (11, 500)


def test_raise_to_front_swaps_two_cards(store):
    bottom = store.create("", (0, 0))
    top = store.create("", (400, 0))

    assert store.raise_to_front(bottom)

    assert store.get(bottom).z == 1
    assert store.get(top).z == 0


def test_raise_to_front_on_top_card_is_noop(store):
    ids = [store.create("", (0, 0)) for _ in range(4)]
    before = {card_id: store.get(card_id).z for card_id in ids}

    store.raise_to_front(ids[-1])

    assert {card_id: store.get(card_id).z for card_id in ids} == before


def test_raise_to_front_shifts_cards_above_down_by_one(store):
    ids = [store.create("", (0, 0)) for _ in range(5)]
    before = {card_id: store.get(card_id).z for card_id in ids}

    store.raise_to_front(ids[1])

    for card_id in ids:
        if card_id == ids[1]:
            assert store.get(card_id).z == 4
        elif before[card_id] >= 1:
            assert store.get(card_id).z == before[card_id] - 1
        else:
            assert store.get(card_id).z == before[card_id]


def test_z_order_stays_dense_under_random_raises(store):
    rng = random.Random(1234)
    ids = []
    for _ in range(30):
        ids.append(store.create("", (0, 0)))
        store.raise_to_front(rng.choice(ids))
        assert z_values(store) == list(range(len(ids)))
    store.check_invariant()


def test_remove_compacts_z_order(store):
    ids = [store.create("", (0, 0)) for _ in range(4)]

    assert store.remove(ids[1])

    assert ids[1] not in store
    assert z_values(store) == [0, 1, 2]
    assert store.get(ids[3]).z == 2
    store.check_invariant()


def test_remove_unknown_card_is_noop(store):
    store.create("", (0, 0))

    assert not store.remove(999)
    assert len(store) == 1


def test_unknown_ids_are_ignored(store):
    assert not store.raise_to_front(42)
    assert not store.reset_rotation(42)
    assert store.get(42) is None


def test_reset_rotation(store):
    card_id = store.create("", (0, 0))
    store.get(card_id).rotation = 7.5

    assert store.reset_rotation(card_id)
    assert store.get(card_id).rotation == 0


def test_draw_order_is_ascending_z(store):
    ids = [store.create("", (0, 0)) for _ in range(3)]
    store.raise_to_front(ids[0])

    assert [card.id for card in store.in_draw_order()] == [ids[1], ids[2], ids[0]]
    assert [card.id for card in store.cards()] == ids
    assert store.topmost().id == ids[0]


def test_topmost_of_empty_store(store):
    assert store.topmost() is None


def test_check_invariant_detects_gaps(store):
    card_id = store.create("", (0, 0))
    store.create("", (0, 0))
    store.get(card_id).z = 5

    with pytest.raises(StoreInvariantError):
        store.check_invariant()


def test_debug_logging_reports_broken_z_order(store, caplog):
    first = store.create("", (0, 0))
    store.create("", (0, 0))
    broken = store.create("", (0, 0))
    store.get(broken).z = 7

    with caplog.at_level("DEBUG", logger="refboard.store"):
        store.raise_to_front(first)

    assert "z-order is not dense" in caplog.text


def test_debug_logging_quiet_for_healthy_store(store, caplog):
    ids = [store.create("", (0, 0)) for _ in range(3)]

    with caplog.at_level("DEBUG", logger="refboard.store"):
        store.raise_to_front(ids[0])
        store.remove(ids[1])

    assert not [record for record in caplog.records if record.levelname == "ERROR"]
