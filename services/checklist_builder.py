import uuid
from typing import Callable, Dict, Iterable, List, Optional

from schemas.checklist_schema import ChecklistItem, Destination
from services.catalog import ItemCatalog, ItemTemplate, default_catalog
from services.classifier import DestinationClassifier, default_classifier

IdGenerator = Callable[[], str]


def uuid_id_generator() -> str:
    return str(uuid.uuid4())


def count_completed(items: Iterable[ChecklistItem]) -> int:
    return sum(1 for item in items if item.done)


def calculate_progress(destination: Destination) -> int:
    """
    Percentage of items marked as done, rounded half up.
    An empty checklist has 0% progress.
    """
    total = len(destination.items)
    if total == 0:
        return 0
    completed = count_completed(destination.items)
    # Integer form of floor(100 * completed / total + 0.5)
    return (200 * completed + total) // (2 * total)


def group_by_category(items: Iterable[ChecklistItem], sort_categories: bool = False) -> Dict[str, List[ChecklistItem]]:
    """
    Groups items by their category label.
    Categories keep first-seen order unless `sort_categories` is set.
    """
    grouped: Dict[str, List[ChecklistItem]] = {}
    for item in items:
        grouped.setdefault(item.category, []).append(item)

    if sort_categories:
        return {category: grouped[category] for category in sorted(grouped)}
    return grouped


def toggle_item(destination: Destination, item_id: str, done: Optional[bool] = None) -> Optional[Destination]:
    """
    Returns a copy of the checklist with one item's `done` flag changed.
    The flag is flipped when `done` is None. Returns None if the item does not exist.
    """
    if not any(item.id == item_id for item in destination.items):
        return None

    updated_items = [
        item.model_copy(update={"done": (not item.done) if done is None else done})
        if item.id == item_id else item
        for item in destination.items
    ]
    return destination.model_copy(update={"items": updated_items})


class ChecklistBuilder:
    """
    Builds a Destination checklist from a free-text destination.

    Items are base items, then the items for the classified type, then the
    destination-specific items when those are enabled. Every item and the
    checklist itself get an id from `id_generator`, called once each.
    """

    def __init__(
        self,
        classifier: DestinationClassifier = default_classifier,
        catalog: ItemCatalog = default_catalog,
        id_generator: IdGenerator = uuid_id_generator,
        include_destination_items: bool = True,
    ):
        self.classifier = classifier
        self.catalog = catalog
        self.id_generator = id_generator
        self.include_destination_items = include_destination_items

    def build(self, destination: str) -> Destination:
        # Blank input is not rejected here: it yields an empty name with fallback items.
        destination_type = self.classifier.classify(destination)
        checklist_id = self.id_generator()

        templates: List[ItemTemplate] = list(self.catalog.base_items())
        templates.extend(self.catalog.items_for(destination_type))
        if self.include_destination_items:
            templates.extend(self.catalog.specific_items_for(destination))

        items = [
            ChecklistItem(id=self.id_generator(), name=template.name, category=template.category, done=False)
            for template in templates
        ]

        return Destination(id=checklist_id, name=destination, type=destination_type, items=items)
