"""City regions and their walking conditions.

Regions are approximate bounding boxes. Lookup order matters: the walled
medina overlaps the box edges of its neighbours and is checked first.

Rules:
- Dense regions (narrow alleys, crowds) walk slower by
  settings.dense_region_speed_multiplier
- A point outside every known box is Region.OTHER
"""

from enum import StrEnum

from daytrip.geo.types import BoundingBox


class Region(StrEnum):
    MEDINA = "medina"
    MEDINA_CORE = "medina_core"
    KASBAH = "kasbah"
    SOUKS = "souks"
    GUELIZ = "gueliz"
    OTHER = "other"


MEDINA_BOUNDS = BoundingBox(min_lat=31.615, max_lat=31.640, min_lng=-8.00, max_lng=-7.975)
GUELIZ_BOUNDS = BoundingBox(min_lat=31.630, max_lat=31.650, min_lng=-8.020, max_lng=-7.995)

# South-west of this corner (and outside the medina walls) is the kasbah quarter
KASBAH_MAX_LAT = 31.620
KASBAH_MAX_LNG = -7.980

DENSE_REGIONS: frozenset[Region] = frozenset({Region.MEDINA, Region.MEDINA_CORE, Region.KASBAH, Region.SOUKS})
