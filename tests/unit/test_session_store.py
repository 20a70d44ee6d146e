"""Unit tests for the in-memory session store."""
from kiosk.services.menu.catalog import Dish
from kiosk.services.ordering.models import Order


class TestSavedCustomers:
    """Test saving and looking up customers."""

    def test_lookup_saved_customer(self, restaurant_state):
        """Test a saved customer is found by exact name with an equal order."""
        order = Order(quantities=[2, 0, 1], takeaway=True)

        restaurant_state.add_customer("Alice", order)
        customer = restaurant_state.get_saved_customer("Alice")

        assert customer is not None
        assert customer.name == "Alice"
        assert customer.favorite_order == order

    def test_lookup_unknown_name(self, restaurant_state):
        """Test looking up a name never saved returns None."""
        restaurant_state.add_customer("Alice", Order())

        assert restaurant_state.get_saved_customer("Bob") is None
        assert restaurant_state.get_saved_customer("alice") is None

    def test_saved_order_is_a_snapshot(self, restaurant_state):
        """Test later changes to the caller's order do not reach the favorite."""
        order = Order()
        order.add_dish(Dish.TOFU)

        restaurant_state.add_customer("Alice", order)
        order.add_dish(Dish.TOFU)

        favorite = restaurant_state.get_saved_customer("Alice").favorite_order
        assert favorite.dish_count(Dish.TOFU) == 1

    def test_duplicate_names_are_appended(self, restaurant_state):
        """Test re-saving a name appends and lookup returns the first entry."""
        restaurant_state.add_customer("Alice", Order(quantities=[1, 0, 0]))
        restaurant_state.add_customer("Alice", Order(quantities=[0, 0, 1]))

        assert len(restaurant_state.customers) == 2
        customer = restaurant_state.get_saved_customer("Alice")
        assert customer.favorite_order.dish_count(Dish.THAI_CHICKEN) == 1


class TestOrdersCount:
    """Test the served orders counter."""

    def test_starts_at_zero(self, restaurant_state):
        """Test a new store has served no orders."""
        assert restaurant_state.get_orders_count() == 0
        assert restaurant_state.orders_count == 0

    def test_increase(self, restaurant_state):
        """Test each increase adds one."""
        restaurant_state.increase_orders_count()
        restaurant_state.increase_orders_count()

        assert restaurant_state.get_orders_count() == 2
