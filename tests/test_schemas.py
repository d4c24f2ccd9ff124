from datetime import date

import pytest
from pydantic import ValidationError

from dealership.schemas.car_schema import CarBase
from dealership.schemas.sales_order_schema import SalesOrderBase

ORDER = {"id_carro": 1, "id_cliente": 2, "data_pedido": "2024-01-01", "valor_pedido": 45000.00}


def test_amount_with_more_than_two_decimals_is_rejected():
    with pytest.raises(ValidationError):
        SalesOrderBase(**{**ORDER, "valor_pedido": 45000.125})


def test_amount_with_cents_is_kept():
    assert SalesOrderBase(**{**ORDER, "valor_pedido": 1234.56}).amount == 1234.56


def test_amount_outside_numeric_column_is_rejected():
    with pytest.raises(ValidationError):
        SalesOrderBase(**{**ORDER, "valor_pedido": 1e9})


def test_order_datetime_is_truncated_to_date():
    order = SalesOrderBase(**{**ORDER, "data_pedido": "2024-01-01T10:30:00"})
    assert order.order_date == date(2024, 1, 1)

    order = SalesOrderBase(**{**ORDER, "data_pedido": "2024-03-05T23:59:59Z"})
    assert order.order_date == date(2024, 3, 5)


def test_invalid_order_date_is_rejected():
    with pytest.raises(ValidationError):
        SalesOrderBase(**{**ORDER, "data_pedido": "ontem às dez horas"})


def test_camel_case_order_keys_are_accepted():
    order = SalesOrderBase(idCarro=1, idCliente=2, dataPedido="2024-01-01", valorPedido=10.5)
    assert (order.car_id, order.client_id, order.amount) == (1, 2, 10.5)
    assert order.model_dump(by_alias=True) == {
        "id_carro": 1, "id_cliente": 2, "data_pedido": date(2024, 1, 1), "valor_pedido": 10.5,
    }


def test_integer_fields_are_bounded_by_column():
    with pytest.raises(ValidationError):
        CarBase(marca="Fiat", modelo="Uno", ano=10**20, cor="branco")
    with pytest.raises(ValidationError):
        SalesOrderBase(**{**ORDER, "id_carro": 10**20})
