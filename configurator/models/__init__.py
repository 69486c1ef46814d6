from .options import (
    DoorMechanism, LeafCount, SidePanels, GridLayout,
    Finish, HandleType, GlassPattern, PartKind, Orientation,
)
from .parameters import ManufacturingParams, PriceList
from .parts import PhysicalPart, DoorAssembly, AssemblyStats
from .pricing import PriceBreakdown
from .configuration import (
    Configuration, ConfigurationPatch, DerivedEnvelope, DerivedState, ValidationResult,
)
from .context import AssemblyContext

__all__ = [
    "DoorMechanism", "LeafCount", "SidePanels", "GridLayout",
    "Finish", "HandleType", "GlassPattern", "PartKind", "Orientation",
    "ManufacturingParams", "PriceList",
    "PhysicalPart", "DoorAssembly", "AssemblyStats",
    "PriceBreakdown",
    "Configuration", "ConfigurationPatch", "DerivedEnvelope", "DerivedState",
    "ValidationResult",
    "AssemblyContext",
]
