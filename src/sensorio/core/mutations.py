"""
Mutation operations on the sensor tree.

Every operation edits the session's tree in place and marks the session dirty
when it applies. Nodes are addressed by (brand, model, mode) indices, and by
mode id for drag-and-drop reordering. An address that does not resolve (stale
UI state) makes the operation a silent no-op.
"""

from typing import Optional

from .codecs import decode_resolution, decode_squeezes, encode_resolution, toggle_squeeze
from .models import (
    BrandNode,
    ModeNode,
    ModelNode,
    NEW_BRAND,
    NEW_MODEL,
    SensorTree,
    resolve_mode_field,
)
from .session import EditingSession
from ..infrastructure.logging_config import get_logger

logger = get_logger(__name__)


_RESOLUTION_COMPONENTS = {"w": 0, "width": 0, "h": 1, "height": 1}


class TreeEditor:
    """
    Mutation engine for an editing session.

    The editor holds no state of its own; the session owns the tree.
    """

    def __init__(self, session: EditingSession):
        """
        Initialize the editor.

        Args:
            session: The session whose tree is edited.
        """
        self.session = session

    @property
    def tree(self) -> SensorTree:
        """The tree currently owned by the session."""
        return self.session.tree

    def _changed(self, description: str) -> None:
        self.session.mark_dirty()
        logger.debug(description)

    # ---- structure ----

    def add_brand(self) -> BrandNode:
        """
        Insert a new brand at the front of the brand list.

        The brand starts with one model holding one default mode.

        Returns:
            The new brand.
        """
        brand = BrandNode(
            brand=NEW_BRAND,
            models=[ModelNode(name=NEW_MODEL, modes=[ModeNode()])]
        )
        self.tree.brands.insert(0, brand)
        self._changed("Added brand at front")
        return brand

    def add_model(self, brand_idx: int) -> Optional[ModelNode]:
        """
        Append a new model with one default mode to a brand.

        Returns:
            The new model, or None if the brand does not exist.
        """
        brand = self.tree.get_brand(brand_idx)
        if brand is None:
            return None
        model = ModelNode(name=NEW_MODEL, modes=[ModeNode()])
        brand.models.append(model)
        self._changed(f"Added model to brand {brand_idx}")
        return model

    def add_mode(self, brand_idx: int, model_idx: int) -> Optional[ModeNode]:
        """
        Append a default mode to a model.

        Returns:
            The new mode, or None if the model does not exist.
        """
        model = self.tree.get_model(brand_idx, model_idx)
        if model is None:
            return None
        mode = ModeNode()
        model.modes.append(mode)
        self._changed(f"Added mode to model {brand_idx}/{model_idx}")
        return mode

    def duplicate_mode(self, brand_idx: int, model_idx: int, mode_idx: int) -> Optional[ModeNode]:
        """
        Clone a mode and insert the copy directly after it.

        The copy has identical field values and a fresh id.

        Returns:
            The copy, or None if the mode does not exist.
        """
        model = self.tree.get_model(brand_idx, model_idx)
        source = self.tree.get_mode(brand_idx, model_idx, mode_idx)
        if model is None or source is None:
            return None
        copy = source.clone()
        model.modes.insert(mode_idx + 1, copy)
        self._changed(f"Duplicated mode {brand_idx}/{model_idx}/{mode_idx}")
        return copy

    def remove_mode(self, brand_idx: int, model_idx: int, mode_idx: int) -> bool:
        """Delete a mode. Returns False if it does not exist."""
        model = self.tree.get_model(brand_idx, model_idx)
        if model is None or self.tree.get_mode(brand_idx, model_idx, mode_idx) is None:
            return False
        del model.modes[mode_idx]
        self._changed(f"Removed mode {brand_idx}/{model_idx}/{mode_idx}")
        return True

    def remove_model(self, brand_idx: int, model_idx: int) -> bool:
        """Delete a model and all of its modes. Returns False if it does not exist."""
        brand = self.tree.get_brand(brand_idx)
        if brand is None or self.tree.get_model(brand_idx, model_idx) is None:
            return False
        del brand.models[model_idx]
        self._changed(f"Removed model {brand_idx}/{model_idx}")
        return True

    def remove_brand(self, brand_idx: int) -> bool:
        """Delete a brand with all of its models and modes. Returns False if it does not exist."""
        if self.tree.get_brand(brand_idx) is None:
            return False
        del self.tree.brands[brand_idx]
        self._changed(f"Removed brand {brand_idx}")
        return True

    # ---- ordering ----

    def reorder_modes(self, brand_idx: int, model_idx: int, source_id: str, target_id: str) -> bool:
        """
        Move one mode to the position currently held by another.

        This is a single-element move: the source is taken out and reinserted
        at the target's index, every other mode keeps its relative order.

        Args:
            brand_idx: Brand index.
            model_idx: Model index.
            source_id: Id of the dragged mode.
            target_id: Id of the mode it was dropped on.

        Returns:
            True if the order changed.
        """
        if source_id == target_id:
            return False
        model = self.tree.get_model(brand_idx, model_idx)
        if model is None:
            return False
        old_index = model.index_of(source_id)
        new_index = model.index_of(target_id)
        if old_index is None or new_index is None:
            return False
        mode = model.modes.pop(old_index)
        model.modes.insert(new_index, mode)
        self._changed(f"Moved mode {old_index} -> {new_index} in model {brand_idx}/{model_idx}")
        return True

    def sort_modes_by_area(self, brand_idx: int, model_idx: int) -> bool:
        """
        Sort a model's modes by sensor area, largest first.

        Non-numeric widths or heights count as 0. Equal areas keep their
        previous relative order.

        Returns:
            False if the model does not exist.
        """
        model = self.tree.get_model(brand_idx, model_idx)
        if model is None:
            return False
        model.modes.sort(key=lambda mode: mode.area(), reverse=True)
        self._changed(f"Sorted model {brand_idx}/{model_idx} by area")
        return True

    # ---- field edits ----

    def sync_field(self, brand_idx: int, model_idx: int, field: str) -> bool:
        """
        Copy one field from the model's first mode onto all of its modes.

        Args:
            brand_idx: Brand index.
            model_idx: Model index.
            field: Field to broadcast, by column or attribute name.

        Returns:
            False if the model does not exist or has no modes.

        Raises:
            ValueError: If the field name is unknown.
        """
        attr = resolve_mode_field(field)
        model = self.tree.get_model(brand_idx, model_idx)
        if model is None or not model.modes:
            return False
        source_value = getattr(model.modes[0], attr)
        for mode in model.modes:
            setattr(mode, attr, source_value)
        self._changed(f"Synced {attr}={source_value!r} across model {brand_idx}/{model_idx}")
        return True

    def update_field(self, brand_idx: int, model_idx: int, mode_idx: int, field: str, value: str) -> bool:
        """
        Set one field on one mode. The value is stored verbatim.

        Returns:
            False if the mode does not exist.

        Raises:
            ValueError: If the field name is unknown.
        """
        attr = resolve_mode_field(field)
        mode = self.tree.get_mode(brand_idx, model_idx, mode_idx)
        if mode is None:
            return False
        setattr(mode, attr, value)
        self._changed(f"Set {attr} on mode {brand_idx}/{model_idx}/{mode_idx}")
        return True

    def update_resolution_component(
        self,
        brand_idx: int,
        model_idx: int,
        mode_idx: int,
        which: str,
        value: str
    ) -> bool:
        """
        Replace the width or height half of a mode's resolution.

        Args:
            brand_idx: Brand index.
            model_idx: Model index.
            mode_idx: Mode index.
            which: 'w'/'width' or 'h'/'height'.
            value: New component value; empty becomes "0".

        Returns:
            False if the mode does not exist.

        Raises:
            ValueError: If ``which`` names neither component.
        """
        if which not in _RESOLUTION_COMPONENTS:
            raise ValueError(f"Unknown resolution component: {which}")
        mode = self.tree.get_mode(brand_idx, model_idx, mode_idx)
        if mode is None:
            return False
        parts = list(decode_resolution(mode.resolution))
        parts[_RESOLUTION_COMPONENTS[which]] = value or "0"
        return self.update_field(brand_idx, model_idx, mode_idx, "resolution", encode_resolution(*parts))

    def set_native_anamorphic(self, brand_idx: int, model_idx: int, mode_idx: int, enabled: bool) -> bool:
        """Set the native anamorphic flag, encoded as "True"/"False"."""
        return self.update_field(
            brand_idx, model_idx, mode_idx, "native_anamorphic", "True" if enabled else "False"
        )

    def toggle_squeeze(self, brand_idx: int, model_idx: int, mode_idx: int, token: str) -> bool:
        """
        Add or remove a squeeze ratio on a mode.

        The resulting set is kept in ascending numeric order whenever a
        ratio is added.

        Returns:
            False if the mode does not exist.
        """
        mode = self.tree.get_mode(brand_idx, model_idx, mode_idx)
        if mode is None:
            return False
        return self.update_field(
            brand_idx, model_idx, mode_idx, "supported_squeezes",
            toggle_squeeze(mode.supported_squeezes, token)
        )

    def add_custom_squeeze(self, brand_idx: int, model_idx: int, mode_idx: int, token: str) -> bool:
        """
        Add a free-text squeeze ratio if it is not already present.

        Unlike toggling, this never removes a ratio.

        Returns:
            True if the ratio was added.
        """
        token = token.strip()
        mode = self.tree.get_mode(brand_idx, model_idx, mode_idx)
        if not token or mode is None:
            return False
        if token in decode_squeezes(mode.supported_squeezes):
            return False
        return self.toggle_squeeze(brand_idx, model_idx, mode_idx, token)

    def rename_brand(self, brand_idx: int, value: str) -> bool:
        """Rename a brand. Names need not be unique."""
        brand = self.tree.get_brand(brand_idx)
        if brand is None:
            return False
        brand.brand = value
        self._changed(f"Renamed brand {brand_idx} to {value!r}")
        return True

    def rename_model(self, brand_idx: int, model_idx: int, value: str) -> bool:
        """Rename a model. Names need not be unique."""
        model = self.tree.get_model(brand_idx, model_idx)
        if model is None:
            return False
        model.name = value
        self._changed(f"Renamed model {brand_idx}/{model_idx} to {value!r}")
        return True
