from app.services.balance_service import classify, find_balance, negatives, positives, zeros
from factories import make_balances


def test_scenario_single_debtor_two_creditors():
    balances = make_balances(("a", -30), ("b", 10), ("c", 20))

    assert [b.user_id for b in negatives(balances)] == ["a"]
    assert [b.user_id for b in positives(balances)] == ["b", "c"]
    assert zeros(balances) == []


def test_empty_input_gives_three_empty_sets():
    partition = classify([])

    assert partition.creditors == []
    assert partition.debtors == []
    assert partition.settled == []


def test_partition_is_complete_and_disjoint():
    balances = make_balances(
        ("a", -0.01), ("b", 0.01), ("c", -0.011), ("d", 0.011),
        ("e", 0.0), ("f", 1e-9), ("g", -250.5), ("h", 250.49),
    )
    partition = classify(balances)

    ids = [b.user_id for b in partition.creditors + partition.debtors + partition.settled]
    assert sorted(ids) == sorted(b.user_id for b in balances)
    assert len(ids) == len(set(ids))

    assert [b.user_id for b in partition.creditors] == ["d", "h"]
    assert [b.user_id for b in partition.debtors] == ["c", "g"]
    assert [b.user_id for b in partition.settled] == ["a", "b", "e", "f"]


def test_find_balance():
    balances = make_balances(("a", -5), ("b", 5))

    assert find_balance(balances, "b").balance == 5
    assert find_balance(balances, "z") is None
    assert find_balance(balances, "") is None
    assert find_balance(balances, None) is None
