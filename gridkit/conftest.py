import pytest

from gridkit.grids.tests.factories import ProductFactory
from gridkit.grids.tests.grids import PRODUCTS, ProductGrid


@pytest.fixture
def products():
    return list(PRODUCTS)


@pytest.fixture
def product_grid(products) -> ProductGrid:
    return ProductGrid(products)


@pytest.fixture
def random_products():
    return ProductFactory.build_batch(5)
