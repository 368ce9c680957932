import pytest

from rasterkit.order import LAYER_LIMIT, Order, OrderError


def test_wrong_u32_order_value():
    order = Order.MAX.as_u32() + 1

    with pytest.raises(OrderError):
        Order(order)


def test_wrong_usize_order_values():
    with pytest.raises(OrderError):
        Order(Order.MAX.as_u32() + 1)

    with pytest.raises(OrderError):
        Order(2**64 - 1)


def test_negative_order_value():
    with pytest.raises(OrderError):
        Order(-1)


def test_correct_order_value():
    order_value = Order.MAX.as_u32()
    order = Order(order_value)

    assert order == Order.MAX
    assert order.as_u32() == order_value
    assert int(order) == order_value


def test_max_is_layer_limit():
    assert Order.MAX.as_u32() == LAYER_LIMIT


def test_default_is_zero():
    assert Order().as_u32() == 0
    assert Order() == Order(0)


def test_error_message_names_limit():
    with pytest.raises(OrderError, match=f"exceeded layer limit \\({LAYER_LIMIT}\\)"):
        Order(LAYER_LIMIT + 1)


def test_ordering_follows_inverted_bits():
    assert Order(1) < Order(0)
    assert sorted([Order(0), Order(5), Order(2)]) == [Order(5), Order(2), Order(0)]


def test_hash_and_repr():
    assert len({Order(3), Order(3), Order(4)}) == 2
    assert repr(Order(7)) == "Order(7)"


def test_immutable():
    order = Order(2)
    with pytest.raises(AttributeError):
        order._inverted = 0
    assert order.as_u32() == 2


def test_rejects_non_integer():
    with pytest.raises(TypeError):
        Order(1.5)