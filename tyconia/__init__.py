"""Game rules for an isometric restaurant tycoon: mod packs, research conditions, tile maps, levels, inventories, UI actions and game states."""

__version__ = "0.1.0"