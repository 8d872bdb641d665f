"""
Core domain models for the camera sensor database.

This module contains pure data models for the flat (persisted) and nested
(editable) forms of the dataset. These models are GUI-agnostic and should not
import any UI frameworks.
"""

import uuid
from dataclasses import dataclass, field, fields, replace
from typing import Iterator, Optional

from .codecs import parse_decimal


COLUMNS = [
    "Brand",
    "Model",
    "Mode",
    "Width",
    "Height",
    "Resolution",
    "NativeAnamorphic",
    "SupportedSqueezes",
]
"""Persisted column order."""

MODE_FIELDS = {
    "Mode": "mode",
    "Width": "width",
    "Height": "height",
    "Resolution": "resolution",
    "NativeAnamorphic": "native_anamorphic",
    "SupportedSqueezes": "supported_squeezes",
}
"""Mapping from persisted column names to ModeNode attribute names."""

UNKNOWN_BRAND = "Unknown Brand"
UNKNOWN_MODEL = "Unknown Model"
NEW_BRAND = "New Brand"
NEW_MODEL = "New Model"


def generate_mode_id() -> str:
    """
    Generate a fresh identity for a ModeNode.
    
    Returns:
        A random hex token, never persisted.
    """
    return uuid.uuid4().hex


def resolve_mode_field(name: str) -> str:
    """
    Resolve a field name to a ModeNode attribute name.
    
    Accepts either the persisted column name (e.g. 'NativeAnamorphic') or
    the attribute name (e.g. 'native_anamorphic').
    
    Args:
        name: Field name to resolve.
        
    Returns:
        The ModeNode attribute name.
        
    Raises:
        ValueError: If the name does not refer to a mode field.
    """
    if name in MODE_FIELDS:
        return MODE_FIELDS[name]
    if name in MODE_FIELDS.values():
        return name
    raise ValueError(f"Unknown mode field: {name}")


@dataclass
class FlatRecord:
    """One row of the persisted dataset."""
    
    brand: str = ""
    model: str = ""
    mode: str = ""
    width: str = ""
    height: str = ""
    resolution: str = ""
    native_anamorphic: str = ""
    supported_squeezes: str = ""
    
    @classmethod
    def from_row(cls, row: dict) -> "FlatRecord":
        """
        Create a record from a column-name keyed row.
        
        Missing columns and None values become empty strings.
        """
        return cls(
            brand=row.get("Brand") or "",
            model=row.get("Model") or "",
            mode=row.get("Mode") or "",
            width=row.get("Width") or "",
            height=row.get("Height") or "",
            resolution=row.get("Resolution") or "",
            native_anamorphic=row.get("NativeAnamorphic") or "",
            supported_squeezes=row.get("SupportedSqueezes") or "",
        )
    
    def to_row(self) -> dict[str, str]:
        """Return the record keyed by persisted column names, in column order."""
        return {
            "Brand": self.brand,
            "Model": self.model,
            "Mode": self.mode,
            "Width": self.width,
            "Height": self.height,
            "Resolution": self.resolution,
            "NativeAnamorphic": self.native_anamorphic,
            "SupportedSqueezes": self.supported_squeezes,
        }


@dataclass
class ModeNode:
    """A single sensor capture mode."""
    
    id: str = field(default_factory=generate_mode_id)
    """Opaque identity, unique within the session and never persisted."""
    
    mode: str = "New Mode"
    width: str = "0.00"
    height: str = "0.00"
    resolution: str = "0 x 0"
    native_anamorphic: str = "False"
    supported_squeezes: str = ""
    
    def clone(self) -> "ModeNode":
        """Return a copy of this mode's field values under a fresh id."""
        return replace(self, id=generate_mode_id())
    
    def values(self) -> dict[str, str]:
        """Return the field values keyed by attribute name, without the id."""
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name != "id"}
    
    def area(self) -> float:
        """
        Sensor area (width * height).
        
        Width and height are stored as free text; anything that does not
        parse as a number counts as 0.
        """
        return parse_decimal(self.width) * parse_decimal(self.height)


@dataclass
class ModelNode:
    """A camera model and its ordered sensor modes."""
    
    name: str
    modes: list[ModeNode] = field(default_factory=list)
    
    def index_of(self, mode_id: str) -> Optional[int]:
        """Return the position of the mode with the given id, or None."""
        for idx, mode in enumerate(self.modes):
            if mode.id == mode_id:
                return idx
        return None


@dataclass
class BrandNode:
    """A manufacturer and its ordered camera models."""
    
    brand: str
    models: list[ModelNode] = field(default_factory=list)


@dataclass
class SensorTree:
    """The editable Brand -> Model -> Mode hierarchy."""
    
    brands: list[BrandNode] = field(default_factory=list)
    
    def is_empty(self) -> bool:
        """True when no dataset is loaded (zero brands)."""
        return not self.brands
    
    def get_brand(self, brand_idx: int) -> Optional[BrandNode]:
        """Return the brand at the index, or None when out of range."""
        if 0 <= brand_idx < len(self.brands):
            return self.brands[brand_idx]
        return None
    
    def get_model(self, brand_idx: int, model_idx: int) -> Optional[ModelNode]:
        """Return the model at the address, or None when out of range."""
        brand = self.get_brand(brand_idx)
        if brand is None or not 0 <= model_idx < len(brand.models):
            return None
        return brand.models[model_idx]
    
    def get_mode(self, brand_idx: int, model_idx: int, mode_idx: int) -> Optional[ModeNode]:
        """Return the mode at the address, or None when out of range."""
        model = self.get_model(brand_idx, model_idx)
        if model is None or not 0 <= mode_idx < len(model.modes):
            return None
        return model.modes[mode_idx]
    
    def iter_modes(self) -> Iterator[tuple[BrandNode, ModelNode, ModeNode]]:
        """Yield every mode with its enclosing brand and model, in tree order."""
        for brand in self.brands:
            for model in brand.models:
                for mode in model.modes:
                    yield brand, model, mode
    
    def model_count(self) -> int:
        """Total number of models across all brands."""
        return sum(len(brand.models) for brand in self.brands)
    
    def mode_count(self) -> int:
        """Total number of modes across the tree."""
        return sum(1 for _ in self.iter_modes())

