from datetime import date

from sqlalchemy import text

from dealership.crud.results import ResultKind
from dealership.schemas.car_schema import Car
from dealership.schemas.client_schema import Client
from dealership.schemas.sales_order_schema import SalesOrder


async def make_order(car_repository, client_repository, amount=45000.00) -> SalesOrder:
    car = Car(brand="Toyota", model="Corolla", year=2022, color="blue")
    client = Client(name="Carlos", cpf="98765432100", phone="1133334444")
    await car_repository.create(car)
    await client_repository.create(client)
    return SalesOrder(car_id=car.id, client_id=client.id, order_date=date(2024, 1, 1), amount=amount)


async def test_amount_and_date_round_trip(car_repository, client_repository, sales_order_repository):
    order = await make_order(car_repository, client_repository)

    result = await sales_order_repository.create(order)

    assert result.ok
    assert order.id > 0
    stored = (await sales_order_repository.list_all()).items[0]
    assert stored.id == order.id
    assert isinstance(stored.amount, float)
    assert stored.amount == 45000.00
    assert stored.order_date == date(2024, 1, 1)
    assert (stored.car_id, stored.client_id) == (order.car_id, order.client_id)


async def test_amount_keeps_cents(car_repository, client_repository, sales_order_repository):
    order = await make_order(car_repository, client_repository, amount=1234.56)
    await sales_order_repository.create(order)

    stored = (await sales_order_repository.list_all()).items[0]
    assert stored.amount == 1234.56


async def test_update_and_delete_order(car_repository, client_repository, sales_order_repository):
    order = await make_order(car_repository, client_repository)
    await sales_order_repository.create(order)

    order.amount = 47500.5
    order.order_date = date(2024, 2, 15)
    assert (await sales_order_repository.update(order)).ok

    stored = (await sales_order_repository.list_all()).items[0]
    assert stored.amount == 47500.5
    assert stored.order_date == date(2024, 2, 15)

    assert (await sales_order_repository.delete(order.id)).ok
    assert (await sales_order_repository.list_all()).items == []


async def test_update_missing_order(car_repository, client_repository, sales_order_repository):
    order = await make_order(car_repository, client_repository)
    order.id = 9999

    assert (await sales_order_repository.update(order)).kind is ResultKind.NO_ROWS


async def test_list_after_table_dropped(gateway, sales_order_repository):
    await gateway.execute(text("DROP TABLE pedido_venda"))
    assert (await sales_order_repository.list_all()).kind is ResultKind.STORE_ERROR
