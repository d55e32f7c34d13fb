from __future__ import annotations

"""Physical constants and fixed model values for impact assessment.

All values in SI units unless otherwise noted. The heuristic constants
(crater scaling, population, survival decay) are frozen: displayed numbers
depend on them exactly.
"""

import math

# --- Energy ---
TNT_TON_JOULES: float = 4.184e9
"""Energy released by one ton of TNT in joules."""

KILOTON_TONS: float = 1.0e3
"""Tons of TNT per kiloton."""

MEGATON_TONS: float = 1.0e6
"""Tons of TNT per megaton."""

# --- Reference distances ---
EARTH_MOON_DISTANCE_M: float = 384_400_000.0
"""Mean Earth-Moon distance in meters, used as the deflection lever arm."""

EARTH_DIAMETER_KM: float = 12_756.0
"""Equatorial diameter of Earth in km; deflections beyond it clear the planet."""

# --- Asteroid defaults ---
DEFAULT_DENSITY_KG_M3: float = 3000.0
"""Bulk density of a typical stony asteroid in kg/m³."""

DEFAULT_ENTRY_ANGLE_DEG: float = 45.0
"""Most probable entry angle from horizontal in degrees."""

# --- Crater scaling law ---
CRATER_COEFFICIENT: float = 1.25
"""Leading constant of the simplified crater scaling law (km)."""

CRATER_MASS_REFERENCE_KG: float = 1.0e12
"""Mass normalisation for the crater scaling law in kg."""

CRATER_MASS_EXPONENT: float = 0.25
"""Exponent applied to normalised mass."""

CRATER_VELOCITY_EXPONENT: float = 0.5
"""Exponent applied to velocity in km/s."""

CRATER_DEPTH_RATIO: float = 0.2
"""Crater depth as a fraction of crater diameter."""

# --- Casualty heuristics ---
PEOPLE_PER_CRATER_KM2: float = 1.0e6
"""People at risk per squared km of crater diameter."""

WORLD_POPULATION: float = 8.0e9
"""Upper bound on population at risk."""

SURVIVAL_DECAY_PER_MEGATON: float = 50.0
"""Survival percentage points lost per megaton of impact energy."""

# --- Threat band breakpoints (tons of TNT) ---
THREAT_REGIONAL_TONS: float = 1.0e3
"""Lower bound of the regional band."""

THREAT_GLOBAL_TONS: float = 1.0e5
"""Lower bound of the global band."""

THREAT_EXTINCTION_TONS: float = 1.0e7
"""Lower bound of the extinction band."""

# --- Assessment text breakpoints (tons of TNT) ---
ASSESSMENT_MINIMAL_TONS: float = 1.0e3
"""Below this the assessment reports minimal damage."""

ASSESSMENT_REGIONAL_TONS: float = 1.0e6
"""Below this the assessment reports regional destruction."""

# --- Trajectory geometry (scene design units) ---
TRAJECTORY_START_DISTANCE: float = 15.0
"""Distance of the first trajectory point from the target center."""

TRAJECTORY_STEPS: int = 50
"""Number of steps; the trajectory has TRAJECTORY_STEPS + 1 points."""

TRAJECTORY_BEND_PER_KM_S: float = 0.5
"""Total path bend in radians per km/s of applied delta-v."""

TARGET_RADIUS: float = 2.0
"""Radius of the target sphere centered at the origin."""

IMPACT_TOLERANCE: float = 0.1
"""Slack added to TARGET_RADIUS so that a graze counts as contact."""

MAX_TRAJECTORY_BEND_RAD: float = math.pi / 2
"""Bend at which the approach line is fully perpendicular to the target."""

# --- Presentation hints ---
MIN_RENDER_SIZE: float = 0.05
"""Smallest asteroid render size in scene units."""

RENDER_SCALE_M: float = 500.0
"""Meters of diameter per scene unit of render size."""
