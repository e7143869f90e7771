from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple

from schemas.checklist_schema import DestinationType

class ItemTemplate(NamedTuple):
    """A packing item before it gets an id and a done flag."""
    name: str
    category: str

# --- Predefined Packing Items ---
# Items every trip gets, regardless of the destination type
BASE_ITEMS: Tuple[ItemTemplate, ...] = (
    ItemTemplate("Carteira e documentos", "Documentos"),
    ItemTemplate("Celular e carregador", "Eletrônicos"),
    ItemTemplate("Remédios pessoais", "Saúde"),
    ItemTemplate("Escova e pasta de dente", "Higiene"),
    ItemTemplate("Roupas íntimas", "Vestuário"),
)

_CITY_ITEMS: Tuple[ItemTemplate, ...] = (
    ItemTemplate("Mapa/App de navegação", "Utilidades"),
    ItemTemplate("Guia turístico", "Utilidades"),
    ItemTemplate("Câmera", "Eletrônicos"),
    ItemTemplate("Powerbank", "Eletrônicos"),
    ItemTemplate("Óculos de sol", "Acessórios"),
    ItemTemplate("Roupa confortável", "Vestuário"),
    ItemTemplate("Calçado confortável", "Vestuário"),
)

TYPE_ITEMS: Mapping[DestinationType, Tuple[ItemTemplate, ...]] = MappingProxyType({
    DestinationType.BEACH: (
        ItemTemplate("Protetor solar", "Saúde"),
        ItemTemplate("Roupas de banho", "Vestuário"),
        ItemTemplate("Chapéu ou boné", "Vestuário"),
        ItemTemplate("Chinelos", "Vestuário"),
        ItemTemplate("Óculos de sol", "Acessórios"),
        ItemTemplate("Toalha de praia", "Lazer"),
        ItemTemplate("Repelente de insetos", "Saúde"),
    ),
    DestinationType.MOUNTAIN: (
        ItemTemplate("Casaco impermeável", "Vestuário"),
        ItemTemplate("Botas de trilha", "Vestuário"),
        ItemTemplate("Mochila", "Equipamento"),
        ItemTemplate("Cantil de água", "Equipamento"),
        ItemTemplate("Snacks energéticos", "Alimentação"),
        ItemTemplate("Kit de primeiros socorros", "Saúde"),
        ItemTemplate("Lanterna", "Equipamento"),
    ),
    DestinationType.CAMPING: (
        ItemTemplate("Barraca", "Equipamento"),
        ItemTemplate("Saco de dormir", "Equipamento"),
        ItemTemplate("Lanterna", "Equipamento"),
        ItemTemplate("Isqueiro ou fósforos", "Equipamento"),
        ItemTemplate("Canivete multiuso", "Equipamento"),
        ItemTemplate("Repelente de insetos", "Saúde"),
        ItemTemplate("Kit de cozinha", "Equipamento"),
    ),
    DestinationType.WINTER: (
        ItemTemplate("Casaco térmico", "Vestuário"),
        ItemTemplate("Luvas", "Vestuário"),
        ItemTemplate("Gorro/touca", "Vestuário"),
        ItemTemplate("Cachecol", "Vestuário"),
        ItemTemplate("Meias térmicas", "Vestuário"),
        ItemTemplate("Hidratante labial", "Higiene"),
        ItemTemplate("Roupas térmicas", "Vestuário"),
    ),
    DestinationType.INTERNATIONAL: (
        ItemTemplate("Passaporte", "Documentos"),
        ItemTemplate("Seguro viagem", "Documentos"),
        ItemTemplate("Adaptador de tomada", "Eletrônicos"),
        ItemTemplate("Dicionário/App tradutor", "Utilidades"),
        ItemTemplate("Moeda estrangeira", "Finanças"),
        ItemTemplate("Cópia dos documentos", "Documentos"),
        ItemTemplate("Cartão internacional", "Finanças"),
    ),
    DestinationType.CITY: _CITY_ITEMS,
    DestinationType.DEFAULT: _CITY_ITEMS,
})

# Extra items for a few well-known destinations, keyed by lowercase substring
DESTINATION_ITEMS: Mapping[str, Tuple[ItemTemplate, ...]] = MappingProxyType({
    "florianópolis": (
        ItemTemplate("Protetor solar 50+", "Praia"),
        ItemTemplate("Guia de praias", "Lazer"),
        ItemTemplate("Roupas para trilhas", "Atividades"),
        ItemTemplate("Cartão para aluguel de bicicleta", "Transporte"),
    ),
    "gramado": (
        ItemTemplate("Casaco térmico", "Vestuário"),
        ItemTemplate("Ingressos para o Snowland", "Lazer"),
        ItemTemplate("Reservas para fondue", "Alimentação"),
        ItemTemplate("Mapa da Rota Romântica", "Turismo"),
    ),
    "paris": (
        ItemTemplate("Adaptador de tomada europeu", "Eletrônicos"),
        ItemTemplate("Ingressos para a Torre Eiffel", "Turismo"),
        ItemTemplate("Dicionário francês básico", "Comunicação"),
        ItemTemplate("Passes de metrô", "Transporte"),
    ),
    "nova york": (
        ItemTemplate("Adaptador de tomada americano", "Eletrônicos"),
        ItemTemplate("Passes para museus", "Turismo"),
        ItemTemplate("MetroCard", "Transporte"),
        ItemTemplate("Ingressos para Broadway", "Lazer"),
    ),
})


class ItemCatalog:
    """Lookup over the base, per-type and per-destination item tables."""

    def __init__(
        self,
        base_items: Tuple[ItemTemplate, ...] = BASE_ITEMS,
        type_items: Mapping[DestinationType, Tuple[ItemTemplate, ...]] = TYPE_ITEMS,
        destination_items: Mapping[str, Tuple[ItemTemplate, ...]] = DESTINATION_ITEMS,
    ):
        self._base_items = tuple(base_items)
        self._type_items = type_items
        self._destination_items = destination_items

    def base_items(self) -> Tuple[ItemTemplate, ...]:
        return self._base_items

    def items_for(self, destination_type: DestinationType) -> Tuple[ItemTemplate, ...]:
        return tuple(self._type_items.get(destination_type, ()))

    def specific_items_for(self, destination: str) -> Tuple[ItemTemplate, ...]:
        """Returns the extra items of the first destination key found in the input."""
        lowered = destination.lower()
        for key, templates in self._destination_items.items():
            if key in lowered:
                return tuple(templates)
        return ()


default_catalog = ItemCatalog()
