"""Unit tests for cart transitions."""

import pytest

from storefront.domain.model.actions import AddItem, ClearCart, RemoveItem, UpdateQuantity
from storefront.domain.model.cart import CartState
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.service.cart_reducer import CartReducer, StockPolicy
from tests.fakes import make_product


def _apply_all(reducer: CartReducer, *actions) -> CartState:
    state = CartState.empty()
    for action in actions:
        state = reducer.apply(state, action)
        state.assert_invariants()
    return state


A = make_product("A", price="100")
B = make_product("B", price="30")


class TestScenarios:

    def test_add_to_empty_cart(self):
        state = _apply_all(CartReducer(), AddItem(A))
        assert [(l.product_id, l.quantity) for l in state.items] == [("A", 1)]
        assert state.total == Money.of("100")
        assert state.item_count == 1

    def test_adding_same_product_increments_line(self):
        state = _apply_all(CartReducer(), AddItem(A), AddItem(A))
        assert [(l.product_id, l.quantity) for l in state.items] == [("A", 2)]
        assert state.total == Money.of("200")
        assert state.item_count == 2

    def test_update_to_zero_removes_line(self):
        state = _apply_all(CartReducer(), AddItem(A), AddItem(A), UpdateQuantity("A", 0))
        assert state.items == ()
        assert state.total == Money.zero()
        assert state.item_count == 0

    def test_two_products_keep_insertion_order(self):
        a = make_product("A", price="50")
        state = _apply_all(CartReducer(), AddItem(a), AddItem(B))
        assert [l.product_id for l in state.items] == ["A", "B"]
        assert state.total == Money.of("80")
        assert state.item_count == 2

    def test_update_quantity_sets_value_verbatim(self):
        a = make_product("A", price="50")
        state = _apply_all(CartReducer(), AddItem(a), AddItem(B), UpdateQuantity("B", 5))
        assert state.quantity_of("B") == 5
        assert state.total == Money.of("200")
        assert state.item_count == 6

    def test_remove_unknown_id_returns_equal_new_state(self):
        reducer = CartReducer()
        before = _apply_all(reducer, AddItem(A))
        after = reducer.apply(before, RemoveItem("Z"))
        assert after == before
        assert after is not before


class TestAddItem:

    def test_existing_line_keeps_first_product_snapshot(self):
        reducer = CartReducer()
        original = make_product("A", price="100", name="Old name")
        newer = make_product("A", price="999", name="New name")
        state = _apply_all(reducer, AddItem(original), AddItem(newer))
        assert state.items[0].product is original
        assert state.total == Money.of("200")

    def test_unchecked_policy_ignores_stock(self):
        scarce = make_product("A", stock=1)
        state = _apply_all(CartReducer(), AddItem(scarce), AddItem(scarce), AddItem(scarce))
        assert state.quantity_of("A") == 3

    def test_does_not_mutate_previous_state(self):
        reducer = CartReducer()
        first = reducer.apply(CartState.empty(), AddItem(A))
        reducer.apply(first, AddItem(A))
        assert first.quantity_of("A") == 1
        assert first.total == Money.of("100")


class TestRemoveItem:

    def test_remove_drops_only_matching_line(self):
        state = _apply_all(CartReducer(), AddItem(A), AddItem(B), RemoveItem("A"))
        assert [l.product_id for l in state.items] == ["B"]
        assert state.total == Money.of("30")

    def test_remove_twice_equals_remove_once(self):
        reducer = CartReducer()
        base = _apply_all(reducer, AddItem(A), AddItem(B))
        once = reducer.apply(base, RemoveItem("A"))
        twice = reducer.apply(once, RemoveItem("A"))
        assert once == twice

    def test_add_then_remove_restores_aggregates(self):
        reducer = CartReducer()
        base = _apply_all(reducer, AddItem(B), AddItem(B))
        after = reducer.apply(reducer.apply(base, AddItem(A)), RemoveItem("A"))
        assert after.total == base.total
        assert after.item_count == base.item_count


class TestUpdateQuantity:

    def test_negative_quantity_removes_line(self):
        state = _apply_all(CartReducer(), AddItem(A), UpdateQuantity("A", -3))
        assert state.is_empty

    def test_unknown_id_is_noop(self):
        reducer = CartReducer()
        before = _apply_all(reducer, AddItem(A))
        assert reducer.apply(before, UpdateQuantity("Z", 4)) == before

    def test_update_is_idempotent(self):
        reducer = CartReducer()
        base = _apply_all(reducer, AddItem(A))
        once = reducer.apply(base, UpdateQuantity("A", 7))
        twice = reducer.apply(once, UpdateQuantity("A", 7))
        assert once == twice

    def test_unchecked_policy_allows_quantity_above_stock(self):
        scarce = make_product("A", stock=2)
        state = _apply_all(CartReducer(), AddItem(scarce), UpdateQuantity("A", 9))
        assert state.quantity_of("A") == 9
        assert state.items[0].at_stock_limit


class TestClearCart:

    def test_clear_resets_everything(self):
        state = _apply_all(CartReducer(), AddItem(A), AddItem(B), ClearCart())
        assert state == CartState.empty()

    def test_clear_on_empty_cart(self):
        assert CartReducer().apply(CartState.empty(), ClearCart()) == CartState.empty()

    def test_clear_keeps_currency(self):
        eur = Product("E", "Euro item", Money.of("5", "EUR"), 3)
        reducer = CartReducer()
        state = reducer.apply(CartState.empty("EUR"), AddItem(eur))
        assert reducer.apply(state, ClearCart()).currency == "EUR"


class TestClampPolicy:

    def test_add_stops_at_stock(self):
        scarce = make_product("A", stock=2)
        reducer = CartReducer(StockPolicy.CLAMP)
        state = _apply_all(reducer, AddItem(scarce), AddItem(scarce), AddItem(scarce))
        assert state.quantity_of("A") == 2
        assert state.item_count == 2

    def test_out_of_stock_product_not_added(self):
        gone = make_product("A", stock=0)
        state = _apply_all(CartReducer(StockPolicy.CLAMP), AddItem(gone))
        assert state.is_empty

    def test_update_clamped_to_stock(self):
        scarce = make_product("A", price="10", stock=3)
        state = _apply_all(CartReducer(StockPolicy.CLAMP), AddItem(scarce), UpdateQuantity("A", 8))
        assert state.quantity_of("A") == 3
        assert state.total == Money.of("30")

    def test_update_below_stock_is_verbatim(self):
        scarce = make_product("A", stock=5)
        state = _apply_all(CartReducer(StockPolicy.CLAMP), AddItem(scarce), UpdateQuantity("A", 4))
        assert state.quantity_of("A") == 4


class TestUnsupportedAction:

    def test_foreign_object_rejected(self):
        class Bogus:
            type = None

        with pytest.raises(TypeError, match="Unsupported cart action"):
            CartReducer().apply(CartState.empty(), Bogus())


class TestForeignCurrency:

    def test_product_in_other_currency_not_added(self):
        eur = Product("E", "Euro item", Money.of("5", "EUR"), 3)
        reducer = CartReducer()
        before = _apply_all(reducer, AddItem(A))
        after = reducer.apply(before, AddItem(eur))
        assert after == before
        assert after.find_line("E") is None
