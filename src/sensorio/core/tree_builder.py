"""
Conversion between the flat record list and the nested sensor tree.

The persisted dataset denormalizes Brand and Model onto every row. Editing
happens on a Brand -> Model -> Mode tree built from those rows, and the tree
is flattened back to rows for export.
"""

from typing import Callable, Iterable, Optional

from .models import (
    BrandNode,
    FlatRecord,
    ModeNode,
    ModelNode,
    SensorTree,
    UNKNOWN_BRAND,
    UNKNOWN_MODEL,
    generate_mode_id,
)
from ..infrastructure.logging_config import get_logger

logger = get_logger(__name__)


def build_tree(
    records: Iterable[FlatRecord],
    id_factory: Optional[Callable[[], str]] = None
) -> SensorTree:
    """
    Group flat records into a Brand -> Model -> Mode tree.

    Brands and models keep their first-seen order; modes keep input order.
    Blank brand or model names group under "Unknown Brand" / "Unknown Model".
    Every record becomes exactly one mode with a freshly generated id. Field
    values are carried as opaque strings.

    Args:
        records: Flat records in persisted order.
        id_factory: Optional callable producing mode ids. Defaults to random tokens.

    Returns:
        The built tree. Empty input yields an empty tree.
    """
    next_id = id_factory or generate_mode_id

    brands: dict[str, BrandNode] = {}
    models: dict[tuple[str, str], ModelNode] = {}
    record_count = 0

    for record in records:
        brand_name = record.brand or UNKNOWN_BRAND
        model_name = record.model or UNKNOWN_MODEL

        brand = brands.get(brand_name)
        if brand is None:
            brand = BrandNode(brand=brand_name)
            brands[brand_name] = brand

        model = models.get((brand_name, model_name))
        if model is None:
            model = ModelNode(name=model_name)
            models[(brand_name, model_name)] = model
            brand.models.append(model)

        model.modes.append(ModeNode(
            id=next_id(),
            mode=record.mode,
            width=record.width,
            height=record.height,
            resolution=record.resolution,
            native_anamorphic=record.native_anamorphic,
            supported_squeezes=record.supported_squeezes,
        ))
        record_count += 1

    tree = SensorTree(brands=list(brands.values()))
    logger.debug(
        f"Built tree with {len(tree.brands)} brands, {len(models)} models "
        f"from {record_count} records"
    )
    return tree


def flatten_tree(tree: SensorTree) -> list[FlatRecord]:
    """
    Flatten a sensor tree back into persisted records.

    Walks brands, models and modes in their current order and emits one
    record per mode with the enclosing brand and model names. Mode ids are
    dropped.

    Args:
        tree: The tree to flatten.

    Returns:
        List of flat records, empty for an empty tree.
    """
    return [
        FlatRecord(brand=brand.brand, model=model.name, **mode.values())
        for brand, model, mode in tree.iter_modes()
    ]
