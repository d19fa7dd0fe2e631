from datetime import datetime, timedelta
import unittest
from basket.logic.system import ShoppingSystem, parse_day
from basket.utilities.errors import (
    DuplicateListError, DuplicateProductError, InsufficientDataError, InvalidFieldError,
    ListNotFoundError, ProductNotFoundError, UnknownAttributeError
)


class StepClock:
    def __init__(self, start=datetime(2024, 6, 3, 9, 0)):
        self.current = start

    def __call__(self):
        self.current += timedelta(minutes=1)
        return self.current


class TestShoppingSystem(unittest.TestCase):

    def setUp(self):
        self.system = ShoppingSystem(clock=StepClock())
        self.rice = self.system.register_fixed_quantity("Arroz", "alimento industrializado", 1, "kg", "Extra", 6.0)
        self.soap = self.system.register_by_unit("Sabonete", "higiene pessoal", 1, "Extra", 2.0)
        self.system.add_store_price(self.rice, "Assai", 5.0)

    def test_register_errors_are_prefixed(self):
        with self.assertRaises(InvalidFieldError) as ctx:
            self.system.register_by_weight("", "alimento nao industrializado", 1.0, "Feira", 3.0)
        self.assertEqual(str(ctx.exception), "Erro no cadastro de item: nome nao pode ser vazio ou nulo.")
        self.assertEqual(ctx.exception.field, "nome")
        with self.assertRaises(DuplicateProductError) as ctx:
            self.system.register_fixed_quantity("Arroz", "alimento industrializado", 1, "kg", "Extra", 6.0)
        self.assertEqual(ctx.exception.message, "Erro no cadastro de item: item ja cadastrado no sistema.")

    def test_update_errors_are_prefixed(self):
        with self.assertRaises(UnknownAttributeError) as ctx:
            self.system.update_product(self.soap, "cor", "azul")
        self.assertEqual(str(ctx.exception), "Erro na atualizacao de item: atributo nao existe.")
        with self.assertRaises(ProductNotFoundError) as ctx:
            self.system.describe_product(99)
        self.assertEqual(str(ctx.exception), "Erro na listagem de item: item nao existe.")

    def test_product_queries(self):
        self.assertTrue(self.system.product_at(0).startswith("1. Arroz"))
        self.assertEqual(self.system.product_at(2), "")
        self.assertTrue(self.system.product_by_lowest_price_at(0).startswith("2. Sabonete"))
        self.assertTrue(self.system.product_by_search_at("SAB", 0).startswith("2. Sabonete"))
        self.assertTrue(self.system.product_by_category_at("higiene pessoal", 0).startswith("2. Sabonete"))
        self.assertEqual(self.system.product_by_category_at("limpeza", 0), "")
        with self.assertRaises(InvalidFieldError) as ctx:
            self.system.product_by_category_at("bebidas", 0)
        self.assertEqual(str(ctx.exception), "Erro na listagem de item: categoria nao existe.")

    def test_list_all_items(self):
        self.assertEqual(self.system.list_all_items(), "\n".join([
            "1. Arroz, alimento industrializado, 1 kg, Preco: <Assai - R$ 5.00;Extra - R$ 6.00;>",
            "2. Sabonete, higiene pessoal, Preco: <Extra - R$ 2.00;>",
        ]))
        self.assertTrue(self.system.list_all_items("preco").startswith("2. Sabonete"))
        self.assertTrue(self.system.list_all_items("categoria").startswith("1. Arroz"))
        with self.assertRaises(InvalidFieldError) as ctx:
            self.system.list_all_items("cor")
        self.assertEqual(str(ctx.exception), "Erro na listagem de item: ordem invalida.")
        self.assertEqual(ShoppingSystem().list_all_items(), "")

    def test_list_errors_are_prefixed(self):
        self.system.create_list("feira")
        with self.assertRaises(DuplicateListError) as ctx:
            self.system.create_list("feira")
        self.assertEqual(str(ctx.exception), "Erro na criacao de lista de compras: lista de compras ja existe.")
        with self.assertRaises(ProductNotFoundError) as ctx:
            self.system.add_purchase("feira", 1, 99)
        self.assertEqual(str(ctx.exception), "Erro na compra de item: item nao existe.")
        with self.assertRaises(ListNotFoundError) as ctx:
            self.system.recommend_establishment("outra", 0, 0)
        self.assertEqual(str(ctx.exception),
                         "Erro na sugestao de estabelecimento: lista de compras nao existe.")

    def test_finalize_validation(self):
        self.system.create_list("feira")
        with self.assertRaises(InvalidFieldError) as ctx:
            self.system.finalize_list("feira", "", 10)
        self.assertEqual(str(ctx.exception),
                         "Erro na finalizacao de lista de compras: local da compra nao pode ser vazio ou nulo.")
        with self.assertRaises(InvalidFieldError) as ctx:
            self.system.finalize_list("feira", "Extra", -1)
        self.assertEqual(ctx.exception.field, "valor final da compra")
        shopping_list = self.system.lists.get_list("feira")
        self.assertFalse(shopping_list.is_finalized)
        self.system.finalize_list("feira", "Extra", 0)
        self.system.finalize_list("feira", "Assai", 25)
        self.assertEqual((shopping_list.final_location, shopping_list.final_value), ("Assai", 25))

    def test_purchases_and_recommendation(self):
        self.system.create_list("feira")
        self.system.add_purchase("feira", 2, self.rice)
        self.system.add_purchase("feira", 3, self.soap)
        self.assertEqual(self.system.find_purchase("feira", self.rice), "2 Arroz, alimento industrializado, 1 kg")
        self.assertEqual(self.system.purchase_at("feira", 1), "3 Sabonete, higiene pessoal")
        self.assertEqual(self.system.list_items("feira"),
                         "2 Arroz, alimento industrializado, 1 kg\n3 Sabonete, higiene pessoal")
        # Assai only prices the rice: 10.00; Extra: 12.00 + 6.00
        self.assertEqual(self.system.recommend_establishment("feira", 0, 0), "Assai: R$ 10.00")
        self.assertEqual(self.system.recommend_establishment("feira", 1, 1), "- 3 Sabonete, higiene pessoal")
        self.system.update_purchase("feira", self.soap, "diminui", 3)
        self.assertEqual(self.system.list_items("feira"), "2 Arroz, alimento industrializado, 1 kg")
        self.system.remove_purchase("feira", self.rice)
        self.assertEqual(self.system.list_items("feira"), "")

    def test_date_queries(self):
        self.system.create_list("segunda")
        self.system.create_list("segunda tarde")
        self.system.add_purchase("segunda", 4, self.soap)
        self.system.add_purchase("segunda tarde", 1, self.rice)
        self.assertEqual(self.system.list_on_date_at("03/06/2024", 1), "segunda tarde")
        self.assertEqual(self.system.list_on_date_at("04/06/2024", 0), "")
        self.assertEqual(self.system.search_lists_by_date("03/06/2024"), "4 Sabonete, higiene pessoal")
        self.assertEqual(self.system.search_lists_by_date("04/06/2024"), "")
        self.assertEqual(self.system.list_with_product_at(self.rice, 0), "03/06/2024 - segunda tarde")
        self.assertEqual(self.system.search_lists_by_product(self.rice), "segunda tarde")
        with self.assertRaises(InvalidFieldError) as ctx:
            self.system.list_on_date_at("2024-06-03", 0)
        self.assertEqual(ctx.exception.field, "data")

    def test_automatic_lists_use_clock_date(self):
        with self.assertRaises(InsufficientDataError):
            self.system.auto_generate_latest()
        self.system.create_list("feira")
        self.system.add_purchase("feira", 2, self.rice)
        self.assertEqual(self.system.auto_generate_latest(), "Lista automatica 1 03/06/2024")
        self.assertEqual(self.system.auto_generate_for_item("Arroz"), "Lista automatica 2 03/06/2024")
        descriptor = self.system.auto_generate_frequent()
        self.assertEqual(descriptor, "Lista automatica 3 03/06/2024")
        self.assertEqual(self.system.list_items(descriptor), "2 Arroz, alimento industrializado, 1 kg")

    def test_deleted_product_stays_in_lists(self):
        self.system.create_list("feira")
        self.system.add_purchase("feira", 2, self.soap)
        self.system.delete_product(self.soap)
        self.assertEqual(self.system.find_purchase("feira", self.soap), "2 Sabonete, higiene pessoal")
        self.assertEqual(self.system.product_at(1), "")
        with self.assertRaises(ProductNotFoundError):
            self.system.add_purchase("feira", 1, self.soap)

    def test_parse_day(self):
        self.assertEqual(parse_day("29/02/2024").isoformat(), "2024-02-29")
        with self.assertRaises(InvalidFieldError):
            parse_day("31/02/2024")
