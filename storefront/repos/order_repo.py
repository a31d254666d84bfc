# storefront/repos/order_repo.py
from typing import List

from pydantic import TypeAdapter

from storefront.domain.schemas import Order
from storefront.repos.base import JsonRepo

_orders = TypeAdapter(List[Order])


def orders_key(user_id: str) -> str:
    return f"orders_{user_id}"


class OrderRepo(JsonRepo):

    def list_orders(self, user_id: str) -> List[Order]:
        return self.read(orders_key(user_id), _orders) or []

    def create_order(self, order: Order) -> Order:
        orders = self.list_orders(order.user_id)
        orders.append(order)
        self.write(orders_key(order.user_id), orders, _orders)
        return order

    def get_order(self, user_id: str, order_id: str) -> Order | None:
        return next((o for o in self.list_orders(user_id) if o.id == order_id), None)

    def update_order(self, order: Order) -> Order:
        orders = [order if o.id == order.id else o for o in self.list_orders(order.user_id)]
        self.write(orders_key(order.user_id), orders, _orders)
        return order
