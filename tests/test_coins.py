from solong.coins import Coin, collect, find_coins

GRID = ["11111\n", "1PCE1\n", "1C0C1\n", "11111\n"]


def test_find_coins_row_order():
    coins = find_coins(GRID)
    assert [(coin.x, coin.y) for coin in coins] == [(2, 1), (1, 2), (3, 2)]
    assert all(coin.visible for coin in coins)


def test_find_coins_none():
    assert find_coins(["111\n", "1P1\n", "111\n"]) == []


def test_collect_hides_coin_once():
    coins = find_coins(GRID)
    assert collect(coins, 1, 2) == 1
    assert coins[1].visible is False
    assert collect(coins, 1, 2) == 0


def test_collect_elsewhere_takes_nothing():
    coins = [Coin(2, 1)]
    assert collect(coins, 1, 1) == 0
    assert coins[0].visible is True