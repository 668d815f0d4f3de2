"""Tests for the catalog query handlers."""

import pytest

from heritage.application.list_products import ListCategoriesHandler, ListProductsHandler
from heritage.application.show_product import ShowProductHandler
from heritage.domain.exceptions import EntityNotFoundError
from heritage.domain.model.product import Category
from tests.fakes import FakeCatalogGateway, make_product


def _catalog() -> FakeCatalogGateway:
    return FakeCatalogGateway(
        [
            make_product(1, "Victorian Silk Bodice", 45000, category="Tops", featured=True),
            make_product(2, "Beaded Flapper Dress", 120000, category="Dresses", featured=True),
            make_product(3, "Edwardian Tea Gown", 38000, category="Dresses"),
        ],
        categories=[Category(1, "Tops"), Category(2, "Dresses")],
    )


class TestListProducts:

    def test_lists_everything(self):
        products = ListProductsHandler(_catalog()).handle()
        assert [p.id for p in products] == [1, 2, 3]
        assert products[1].price == "$1,200.00"

    def test_filters_by_category_case_insensitively(self):
        products = ListProductsHandler(_catalog()).handle(category="dresses")
        assert [p.id for p in products] == [2, 3]

    def test_featured_only(self):
        products = ListProductsHandler(_catalog()).handle(featured_only=True)
        assert [p.id for p in products] == [1, 2]

    def test_categories(self):
        categories = ListCategoriesHandler(_catalog()).handle()
        assert [c.name for c in categories] == ["Tops", "Dresses"]


class TestShowProduct:

    def test_found(self):
        dto = ShowProductHandler(_catalog()).handle(3)
        assert dto.name == "Edwardian Tea Gown"

    def test_missing(self):
        with pytest.raises(EntityNotFoundError):
            ShowProductHandler(_catalog()).handle(404)
