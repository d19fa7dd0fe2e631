from typing import Final

DATE_FORMAT: Final[str] = "%d/%m/%Y"

CATEGORIES: Final[frozenset] = frozenset({
    "alimento industrializado",
    "alimento nao industrializado",
    "limpeza",
    "higiene pessoal",
})

# Purchase update operations
ADD_OPERATION: Final[str] = "adiciona"
REDUCE_OPERATION: Final[str] = "diminui"

# Attribute names accepted by Product.update_attribute, per product kind
ATTR_NAME: Final[str] = "nome"
ATTR_CATEGORY: Final[str] = "categoria"
ATTR_QUANTITY: Final[str] = "quantidade"
ATTR_UNIT: Final[str] = "unidade de medida"
ATTR_KG: Final[str] = "kg"
ATTR_UNITS: Final[str] = "unidades"

# Whole-catalog listing orders
ORDER_BY_NAME: Final[str] = "nome"
ORDER_BY_CATEGORY: Final[str] = "categoria"
ORDER_BY_PRICE: Final[str] = "preco"

# Labels of the automatic list strategies
STRATEGY_LATEST: Final[str] = "Lista automatica 1"
STRATEGY_ITEM: Final[str] = "Lista automatica 2"
STRATEGY_FREQUENT: Final[str] = "Lista automatica 3"

# Operation prefixes used when the facade re-raises an error
MSG_REGISTER_ITEM: Final[str] = "Erro no cadastro de item: "
MSG_SHOW_ITEM: Final[str] = "Erro na listagem de item: "
MSG_UPDATE_ITEM: Final[str] = "Erro na atualizacao de item: "
MSG_ADD_PRICE: Final[str] = "Erro no cadastro de preco: "
MSG_REMOVE_ITEM: Final[str] = "Erro na remocao de item: "
MSG_CREATE_LIST: Final[str] = "Erro na criacao de lista de compras: "
MSG_ADD_PURCHASE: Final[str] = "Erro na compra de item: "
MSG_FINALIZE_LIST: Final[str] = "Erro na finalizacao de lista de compras: "
MSG_SEARCH_PURCHASE: Final[str] = "Erro na pesquisa de compra: "
MSG_UPDATE_PURCHASE: Final[str] = "Erro na atualizacao da lista de compras: "
MSG_REMOVE_PURCHASE: Final[str] = "Erro na exclusao de compra: "
MSG_AUTOMATIC_LIST: Final[str] = "Erro na geracao de lista automatica: "
MSG_RECOMMENDATION: Final[str] = "Erro na sugestao de estabelecimento: "
