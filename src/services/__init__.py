"""
Application services layer (use cases).

Services orchestrate the domain logic of a run: grouping the source
directory into media sets, resolving variants and descriptors, computing
target paths and moving files into the library.

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""

from src.services.descriptor_service import DescriptorFile, DescriptorService
from src.services.infuse_xml_service import InfuseXmlService
from src.services.library_engine import LibraryEngine, PlannedIntegration
from src.services.media_integrator import MediaIntegrator
from src.services.media_set_grouper import MediaSetGrouper
from src.services.poster_fanart import PosterFanart, PosterFanartSelector
from src.services.purpose_organizer import MediaPurposeOrganizer
from src.services.target_path import TargetPathResolver, resolve_target_path
from src.services.variant_resolver import VariantResolver

__all__ = [
    "DescriptorFile",
    "DescriptorService",
    "InfuseXmlService",
    "LibraryEngine",
    "MediaIntegrator",
    "MediaPurposeOrganizer",
    "MediaSetGrouper",
    "PlannedIntegration",
    "PosterFanart",
    "PosterFanartSelector",
    "TargetPathResolver",
    "VariantResolver",
    "resolve_target_path",
]
