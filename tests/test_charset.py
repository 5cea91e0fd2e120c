import pytest

from shared.config import GeneratorConfig
from keysmith.core.errors import EmptyCharsetError
from keysmith.core.models import Category
from keysmith.generators.charset import build_charset, category_pools


def test_lowercase_only_by_default():
    charset = build_charset()
    assert charset.chars == "abcdefghijklmnopqrstuvwxyz"
    assert charset.categories == [Category.LOWERCASE]
    assert charset.size == 26


def test_all_categories_in_fixed_order():
    charset = build_charset(True, True, True)
    assert charset.categories == [
        Category.LOWERCASE,
        Category.UPPERCASE,
        Category.SPECIAL,
        Category.DIGIT,
    ]
    assert charset.chars == (
        "abcdefghijklmnopqrstuvwxyz"
        "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
        "!@#$%^&*_-+=<>?"
        "0123456789"
    )
    assert charset.size == 77


def test_order_independent_of_flag_combination():
    charset = build_charset(include_numbers=True, include_uppercase=True)
    assert charset.categories == [Category.LOWERCASE, Category.UPPERCASE, Category.DIGIT]
    assert charset.pool_for(Category.DIGIT) == "0123456789"
    assert charset.pool_for(Category.SPECIAL) == ""


def test_category_pools_follow_config():
    pools = category_pools(GeneratorConfig(special="#"))
    assert pools[Category.SPECIAL] == "#"
    assert list(pools) == [
        Category.LOWERCASE,
        Category.UPPERCASE,
        Category.SPECIAL,
        Category.DIGIT,
    ]


def test_enabled_empty_pool_raises():
    config = GeneratorConfig(special="")
    with pytest.raises(EmptyCharsetError) as exc_info:
        build_charset(include_special=True, config=config)
    assert exc_info.value.category == "special"


def test_disabled_empty_pool_is_ignored():
    charset = build_charset(include_numbers=True, config=GeneratorConfig(special=""))
    assert Category.SPECIAL not in charset.categories
