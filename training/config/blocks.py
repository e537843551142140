"""Static catalogs for block types and training disciplines.

The block catalog order is the order used by selection lists and by grouped
displays, and it also drives which block type a freshly added series starts
with.
"""

from typing import Literal, NamedTuple

BlockType = Literal["vitesse", "cotes", "ppg", "muscu", "recup", "start", "custom"]
TrainingType = Literal["endurance", "vitesse", "force", "technique", "récupération"]

DEFAULT_BLOCK_TYPE: BlockType = "vitesse"


class BlockCatalogEntry(NamedTuple):
    type: BlockType
    label: str


class TrainingTypeOption(NamedTuple):
    value: TrainingType
    label: str


BLOCK_CATALOG: tuple[BlockCatalogEntry, ...] = (
    BlockCatalogEntry("vitesse", "Vitesse"),
    BlockCatalogEntry("cotes", "Côtes"),
    BlockCatalogEntry("ppg", "PPG"),
    BlockCatalogEntry("muscu", "Muscu"),
    BlockCatalogEntry("start", "Starting Block"),
    BlockCatalogEntry("recup", "Récup"),
    BlockCatalogEntry("custom", "Bloc personnalisé"),
)

TRAINING_TYPE_OPTIONS: tuple[TrainingTypeOption, ...] = (
    TrainingTypeOption("endurance", "Endurance"),
    TrainingTypeOption("vitesse", "Vitesse"),
    TrainingTypeOption("force", "Force"),
    TrainingTypeOption("technique", "Technique"),
    TrainingTypeOption("récupération", "Récupération"),
)

BLOCK_TYPES: frozenset[str] = frozenset(entry.type for entry in BLOCK_CATALOG)


def resolve_block_type(value: object) -> BlockType:
    """Map a raw block type to a catalog entry, falling back to vitesse."""
    if isinstance(value, str) and value in BLOCK_TYPES:
        return value  # type: ignore[return-value]
    return DEFAULT_BLOCK_TYPE


def block_label(block_type: str) -> str:
    """Display label for a block type ("Vitesse" for anything unknown)."""
    resolved = resolve_block_type(block_type)
    return next(entry.label for entry in BLOCK_CATALOG if entry.type == resolved)


def block_catalog_index(block_type: str) -> int:
    """Position of a block type in the catalog, used to order grouped displays."""
    resolved = resolve_block_type(block_type)
    return next(i for i, entry in enumerate(BLOCK_CATALOG) if entry.type == resolved)


def training_type_label(value: str | None) -> str:
    """Display label for a training discipline, or the raw value if unknown."""
    for option in TRAINING_TYPE_OPTIONS:
        if option.value == value:
            return option.label
    return value or ""
